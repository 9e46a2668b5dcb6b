from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Any, Callable, List, TypeVar, Union

if TYPE_CHECKING:
    from .channel import EventChannel

logger = logging.getLogger(__name__)

T = TypeVar("T")

Handler = Callable[[T], None]


def _detach(channel_ref: "weakref.ref[EventChannel[Any]]", token: int) -> None:
    channel = channel_ref()
    if channel is None:
        return
    channel._detach(token)


class Subscription:
    """
    Handle for one handler attached to a channel.

    - cancel() detaches the handler, repeated calls are no-ops
    - the handle only references its channel weakly
    - a handle that gets garbage collected cancels itself
    """

    def __init__(self, channel: "EventChannel[Any]", token: int) -> None:
        self._channel_ref = weakref.ref(channel)
        self._token = token
        self._finalizer = weakref.finalize(self, _detach, self._channel_ref, token)

    @property
    def active(self) -> bool:
        channel = self._channel_ref()
        if channel is None or not self._finalizer.alive:
            return False
        return channel._is_attached(self._token)

    def cancel(self) -> None:
        if self._finalizer.alive:
            logger.debug("Cancelling subscription token=%s", self._token)
        self._finalizer()

    def __repr__(self) -> str:
        return f"Subscription(token={self._token}, active={self.active})"


class SubscriptionBag:
    """
    Owned group of subscriptions that is cancelled as one handle.
    """

    def __init__(self, *subscriptions: Subscription) -> None:
        self._subscriptions: List[Subscription] = list(subscriptions)

    def add(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    @property
    def active(self) -> bool:
        return any(s.active for s in self._subscriptions)

    def cancel(self) -> None:
        subs, self._subscriptions = self._subscriptions, []
        for sub in subs:
            sub.cancel()

    def __len__(self) -> int:
        return len(self._subscriptions)


Cancellable = Union[Subscription, SubscriptionBag]
