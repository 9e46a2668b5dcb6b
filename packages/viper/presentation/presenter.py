from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from ..channels.channel import EventChannel, StateChannel, weak_method
from ..channels.types import SubscriptionBag
from ..contracts.components import Interactor
from ..routing.router import Router

logger = logging.getLogger(__name__)

PresenterState = TypeVar("PresenterState")
ViewState = TypeVar("ViewState")
UserInteraction = TypeVar("UserInteraction")
UseCase = TypeVar("UseCase")
Navigation = TypeVar("Navigation")


class Presenter(Generic[PresenterState, ViewState, UserInteraction, UseCase, Navigation]):
    """
    Presentation role of a module.

    Owns the interactor and the router. Maps every presenter-state published
    by the interactor into a view-state and republishes it on `view_state`;
    turns user interactions into use cases (`use_cases`) and navigation
    events (`navigation`).

    MUST NOT:
    - reference the view
    - mutate interactor state other than through use cases
    """

    def __init__(
        self,
        interactor: Interactor[Any, PresenterState, UseCase],
        router: Router[Any, Any, Navigation],
    ) -> None:
        self.interactor = interactor
        self.router = router

        self.use_cases: EventChannel[UseCase] = EventChannel()
        self.navigation: EventChannel[Navigation] = EventChannel()
        self.view_state: StateChannel[ViewState] = StateChannel(
            self.map_state_to_view_state(interactor.presenter_state.value)
        )

        self.subscriptions = SubscriptionBag()
        self.subscriptions.add(self.use_cases.subscribe(interactor.receive_use_case))
        # the interactor is owned by us, so its channel may only hold us weakly
        self.subscriptions.add(interactor.presenter_state.subscribe(weak_method(self._receive_presenter_state)))

    def map_state_to_view_state(self, presenter_state: PresenterState) -> ViewState:
        raise NotImplementedError

    def receive_user_interaction(self, user_interaction: UserInteraction) -> None:
        raise NotImplementedError

    def send_use_case(self, use_case: UseCase) -> None:
        logger.debug("Presenter %s use case %r", type(self).__qualname__, use_case)
        self.use_cases.send(use_case)

    def navigate(self, navigation: Navigation) -> None:
        logger.debug("Presenter %s navigation %r", type(self).__qualname__, navigation)
        self.navigation.send(navigation)

    def _receive_presenter_state(self, presenter_state: PresenterState) -> None:
        self.view_state.send(self.map_state_to_view_state(presenter_state))
