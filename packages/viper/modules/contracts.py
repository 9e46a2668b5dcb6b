from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

V = TypeVar("V")
I = TypeVar("I")
P = TypeVar("P")
R = TypeVar("R")


@dataclass(frozen=True)
class ModuleComponents(Generic[V, I, P, R]):
    """
    All four components of one assembled module (testing aid).

    Holding this keeps every component alive; production code keeps the
    view only.
    """
    view: V
    interactor: I
    presenter: P
    router: R

    def __iter__(self) -> Any:
        return iter((self.view, self.interactor, self.presenter, self.router))
