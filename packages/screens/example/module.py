from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Tuple

from viper.modules.assembler import ModuleAssembler

if TYPE_CHECKING:
    from .view import View


class Resolver(Protocol):
    """
    What the example router needs to build other modules (nothing yet).
    """


@dataclass(frozen=True)
class Entities:
    increment: int


class UserInteraction(Enum):
    SELECT_THIS = "select_this"
    SELECT_THAT = "select_that"


class UseCase(Enum):
    LOAD_VALUES = "load_values"


class Navigation(Enum):
    PRESENT_SOMETHING = "present_something"


@dataclass(frozen=True)
class PresenterState:
    values: Tuple[str, ...]


@dataclass(frozen=True)
class ViewState:
    title: str
    rows: Tuple[str, ...]


def assembler() -> ModuleAssembler[Entities, Any, PresenterState, ViewState, UserInteraction, UseCase, Navigation]:
    from .interactor import Interactor
    from .presenter import Presenter
    from .router import Router
    from .view import View

    return ModuleAssembler(view=View, interactor=Interactor, presenter=Presenter, router=Router)


def assemble(entities: Entities, resolver: Any) -> "View":
    return assembler().assemble(entities, resolver)  # type: ignore[return-value]
