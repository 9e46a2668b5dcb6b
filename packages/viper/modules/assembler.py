from __future__ import annotations

import functools
import logging
import weakref
from dataclasses import dataclass
from typing import Any, Generic, Type

from ..channels.types import SubscriptionBag
from ..contracts.components import (
    Entities,
    Interactor,
    Navigation,
    PresenterState,
    Resolver,
    UseCase,
    UserInteraction,
    View,
    ViewState,
)
from ..presentation.presenter import Presenter
from ..routing.router import Router
from .contracts import ModuleComponents

logger = logging.getLogger(__name__)


def _apply_view_state(view_ref: "weakref.ref[View[Any, Any]]", view_state: Any) -> None:
    view = view_ref()
    if view is None:
        return
    view.apply_view_state(view_state)


def _route(view_ref: "weakref.ref[View[Any, Any]]", router: Router[Any, Any, Any], navigation: Any) -> None:
    view = view_ref()
    if view is None:
        return
    router.receive_navigation(navigation, view)


@dataclass(frozen=True)
class ModuleAssembler(Generic[Entities, Resolver, PresenterState, ViewState, UserInteraction, UseCase, Navigation]):
    """
    Builds and wires one module out of its four component classes.

    Ownership after assembly:
        view -> presenter -> interactor
                          -> router -(weak)-> view

    The view is the only object the caller has to keep. Every callback that
    points back up this chain holds its target weakly, so releasing the view
    releases the whole module.
    """
    view: Type[View[ViewState, UserInteraction]]
    interactor: Type[Interactor[Entities, PresenterState, UseCase]]
    presenter: Type[Presenter[PresenterState, ViewState, UserInteraction, UseCase, Navigation]]
    router: Type[Router[Resolver, Any, Navigation]]

    def assemble(self, entities: Entities, resolver: Resolver) -> View[ViewState, UserInteraction]:
        return self.components(entities, resolver).view

    def components(
        self,
        entities: Entities,
        resolver: Resolver,
    ) -> ModuleComponents[
        View[ViewState, UserInteraction],
        Interactor[Entities, PresenterState, UseCase],
        Presenter[PresenterState, ViewState, UserInteraction, UseCase, Navigation],
        Router[Resolver, Any, Navigation],
    ]:
        """
        Assemble a module and return all of its components.

        Order is fixed: router, interactor, presenter, view, wiring, and only
        then the router learns about its view.
        """
        router = self.router(resolver)
        interactor = self.interactor(entities)
        presenter = self.presenter(interactor, router)

        # first visible state is the interactor's current one, never a default
        view = self.view(presenter.view_state.value)
        view.presenter = presenter

        # 1) view -> presenter
        presenter.subscriptions.add(view.user_interactions.subscribe(presenter.receive_user_interaction))

        # 2) presenter -> view, 3) presenter -> router
        view_ref = weakref.ref(view)
        router.subscription = SubscriptionBag(
            presenter.view_state.subscribe(functools.partial(_apply_view_state, view_ref)),
            presenter.navigation.subscribe(functools.partial(_route, view_ref, router)),
        )

        router.view = view

        logger.debug(
            "Assembled module view=%s interactor=%s presenter=%s router=%s",
            self.view.__qualname__,
            self.interactor.__qualname__,
            self.presenter.__qualname__,
            self.router.__qualname__,
        )
        return ModuleComponents(view=view, interactor=interactor, presenter=presenter, router=router)
