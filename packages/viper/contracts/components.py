from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from ..channels.channel import EventChannel, StateChannel

# Type variables shared by every component of a module. The assembler is
# generic over the same variables, so the Presenter's view-state must be the
# View's view-state, the Interactor's state must be the Presenter's input, etc.
Entities = TypeVar("Entities")
Resolver = TypeVar("Resolver")
PresenterState = TypeVar("PresenterState")
ViewState = TypeVar("ViewState")
UserInteraction = TypeVar("UserInteraction")
UseCase = TypeVar("UseCase")
Navigation = TypeVar("Navigation")

# protocol-side variables (variance required by typing for protocol parameters)
_E_contra = TypeVar("_E_contra", contravariant=True)
_PS = TypeVar("_PS")
_UC_contra = TypeVar("_UC_contra", contravariant=True)
_VS_contra = TypeVar("_VS_contra", contravariant=True)
_UI = TypeVar("_UI")


@runtime_checkable
class View(Protocol[_VS_contra, _UI]):
    """
    UI-facing role of a module.

    Built from the initial view-state. Publishes user interactions and gets
    view-state updates through apply_view_state(). `presenter` is the strong
    reference that keeps the rest of the module alive; the assembler sets it.
    """

    presenter: Optional[Any]
    user_interactions: EventChannel[_UI]

    def __init__(self, view_state: _VS_contra) -> None:
        ...

    def apply_view_state(self, view_state: _VS_contra) -> None:
        ...


@runtime_checkable
class Interactor(Protocol[_E_contra, _PS, _UC_contra]):
    """
    Business-logic role of a module.

    Owns the presenter-state and publishes it on `presenter_state`.
    Use cases come in through receive_use_case(). Must not reference any
    other component.
    """

    presenter_state: StateChannel[_PS]

    def __init__(self, entities: _E_contra) -> None:
        ...

    def receive_use_case(self, use_case: _UC_contra) -> None:
        ...
