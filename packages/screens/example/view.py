from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from viper.channels.channel import EventChannel

from .module import UserInteraction, ViewState

logger = logging.getLogger(__name__)


class View:
    """
    Console view of the example module: a title plus one row per value.
    """

    def __init__(self, view_state: ViewState) -> None:
        self.presenter: Optional[Any] = None
        self.user_interactions: EventChannel[UserInteraction] = EventChannel()

        self.title = view_state.title
        self.rows: Tuple[str, ...] = view_state.rows
        # every view-state applied after construction, in order
        self.applied: List[ViewState] = []

    def apply_view_state(self, view_state: ViewState) -> None:
        self.applied.append(view_state)
        self.title = view_state.title
        self.rows = view_state.rows
        logger.debug("Example view title=%s rows=%s", self.title, len(self.rows))

    def select_this(self) -> None:
        self.user_interactions.send(UserInteraction.SELECT_THIS)

    def select_that(self) -> None:
        self.user_interactions.send(UserInteraction.SELECT_THAT)

    def render(self) -> str:
        return "\n".join((self.title, *self.rows))
