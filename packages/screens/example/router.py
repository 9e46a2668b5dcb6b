from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, List, Optional

from viper.routing.router import Router as BaseRouter

from .module import Navigation

if TYPE_CHECKING:
    from .view import View


class Router(BaseRouter[Any, "View", Navigation]):

    def __init__(self, resolver: Any) -> None:
        super().__init__(resolver)
        self.presented_something = False
        self._presentation_context: Optional[weakref.ref["View"]] = None
        # one entry per on_view_changed(): whether a view was attached
        self.view_changes: List[bool] = []

    @property
    def presentation_context(self) -> Optional["View"]:
        if self._presentation_context is None:
            return None
        return self._presentation_context()

    def on_view_changed(self) -> None:
        self.view_changes.append(self.view is not None)

    def receive_navigation(self, navigation: Navigation, view: "View") -> None:
        if navigation is Navigation.PRESENT_SOMETHING:
            self.presented_something = True
            # held weakly, the view owns us
            self._presentation_context = weakref.ref(view)
