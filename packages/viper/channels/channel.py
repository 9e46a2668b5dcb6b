from __future__ import annotations

import itertools
import logging
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar

from .types import Handler, Subscription

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _describe(handler: Any) -> str:
    return getattr(handler, "__qualname__", type(handler).__qualname__)


@dataclass
class _Subscriber(Generic[T]):
    token: int
    handler: Handler[T]
    attached: bool = True


class EventChannel(Generic[T]):
    """
    Synchronous multicast channel.

    - delivers on the caller's stack, in subscription order
    - no memory: values sent before subscribe() are never delivered
    - a subscriber cancelled mid-send receives nothing further,
      subscribers added mid-send wait for the next send
    """

    def __init__(self) -> None:
        self._subscribers: List[_Subscriber[T]] = []
        self._tokens = itertools.count(1)

    def subscribe(self, handler: Handler[T]) -> Subscription:
        sub = _Subscriber(token=next(self._tokens), handler=handler)
        self._subscribers.append(sub)

        logger.debug("Subscribed token=%s to channel=%#x", sub.token, id(self))
        return Subscription(self, sub.token)

    def send(self, value: T) -> None:
        subs = list(self._subscribers)
        if not subs:
            logger.debug("No subscribers for channel=%#x", id(self))
            return

        for sub in subs:
            if not sub.attached:
                continue
            try:
                sub.handler(value)
            except Exception:
                logger.exception("Error in handler=%s for channel=%#x", _describe(sub.handler), id(self))
                raise

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _is_attached(self, token: int) -> bool:
        return any(s.token == token for s in self._subscribers)

    def _detach(self, token: int) -> bool:
        for i, sub in enumerate(self._subscribers):
            if sub.token == token:
                sub.attached = False
                del self._subscribers[i]
                logger.debug("Detached token=%s from channel=%#x", token, id(self))
                return True
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x} subscribers={len(self._subscribers)}>"


class StateChannel(EventChannel[T]):
    """
    Channel that always holds a current value.

    subscribe() hands the current value to the new handler before returning,
    later sends behave like EventChannel.
    """

    def __init__(self, value: T) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def send(self, value: T) -> None:
        self._value = value
        super().send(value)

    def subscribe(self, handler: Handler[T]) -> Subscription:
        subscription = super().subscribe(handler)
        try:
            handler(self._value)
        except Exception:
            logger.exception("Error replaying to handler=%s for channel=%#x", _describe(handler), id(self))
            subscription.cancel()
            raise
        return subscription


def weak_method(method: Callable[[T], Any]) -> Handler[T]:
    """
    Wrap a bound method so that subscribing it does not keep its instance alive.
    Values arriving after the instance is gone are dropped.
    """
    ref = weakref.WeakMethod(method)

    def handler(value: T) -> None:
        target = ref()
        if target is None:
            return
        target(value)

    handler.__qualname__ = f"weak_method({method.__qualname__})"
    return handler
