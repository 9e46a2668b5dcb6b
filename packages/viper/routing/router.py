from __future__ import annotations

import functools
import logging
import weakref
from typing import Any, Generic, Optional, TypeVar

from ..channels.types import Cancellable

logger = logging.getLogger(__name__)

Resolver = TypeVar("Resolver")
V = TypeVar("V")
Navigation = TypeVar("Navigation")


def _view_released(router_ref: "weakref.ref[Router[Any, Any, Any]]", view_ref: "weakref.ref[Any]") -> None:
    router = router_ref()
    if router is None or router._view_ref is not view_ref:
        return

    logger.debug("View of router %s released", type(router).__qualname__)
    router._view_ref = None
    router.on_view_changed()


class Router(Generic[Resolver, V, Navigation]):
    """
    Navigation role of a module.

    - `resolver` is the owned dependency bundle used to build other modules
    - `view` is NOT owned: the router only keeps a weak reference, it becomes
      None once the view is released
    - `subscription` is the owned handle of the module's view-facing wiring
    """

    def __init__(self, resolver: Resolver) -> None:
        self.resolver = resolver
        self._view_ref: Optional[weakref.ref[V]] = None
        self._subscription: Optional[Cancellable] = None

    @property
    def view(self) -> Optional[V]:
        if self._view_ref is None:
            return None
        return self._view_ref()

    @view.setter
    def view(self, view: Optional[V]) -> None:
        if view is None:
            self._view_ref = None
        else:
            self._view_ref = weakref.ref(view, functools.partial(_view_released, weakref.ref(self)))

        logger.debug("Router %s view %s", type(self).__qualname__, "cleared" if view is None else "set")
        self.on_view_changed()

    @property
    def subscription(self) -> Optional[Cancellable]:
        return self._subscription

    @subscription.setter
    def subscription(self, subscription: Optional[Cancellable]) -> None:
        previous, self._subscription = self._subscription, subscription
        if previous is not None and previous is not subscription:
            previous.cancel()

    def on_view_changed(self) -> None:
        """
        Called after the view was assigned, and again with `view` being None
        once the view is released. Override to configure the view.
        """

    def receive_navigation(self, navigation: Navigation, view: V) -> None:
        """
        Called for every navigation event of the presenter, `view` is the
        presentation context. Default does nothing.
        """
