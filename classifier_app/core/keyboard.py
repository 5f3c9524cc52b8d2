"""Scoped key-event subscriptions."""

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

KeyHandler = Callable[[], None]


class Subscription:
    """Handle for a registered key handler. Closing it is idempotent."""

    def __init__(self, listener: "KeyboardListener", key: str, handler: KeyHandler):
        self.listener = listener
        self.key = key
        self.handler = handler
        self.active = True

    def close(self) -> None:
        if self.active:
            self.listener.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class KeyboardListener:
    """
    Dispatches key events to subscribed handlers.

    Handlers take no arguments and must read whatever state they need when
    called, so a handler registered once never sees stale values.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Subscription]] = {}

    def subscribe(self, key: str, handler: KeyHandler) -> Subscription:
        """Register a handler for a key."""
        subscription = Subscription(self, key, handler)
        self._handlers.setdefault(key, []).append(subscription)
        logger.debug(f"Subscribed handler to '{key}' ({self.count(key)} active)")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a handler. Unknown subscriptions are ignored."""
        subscriptions = self._handlers.get(subscription.key, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
        subscription.active = False
        if not subscriptions:
            self._handlers.pop(subscription.key, None)
        logger.debug(f"Unsubscribed handler from '{subscription.key}'")

    @contextmanager
    def listen(self, key: str, handler: KeyHandler) -> Iterator[Subscription]:
        """Subscribe for the duration of a block."""
        subscription = self.subscribe(key, handler)
        try:
            yield subscription
        finally:
            subscription.close()

    def dispatch(self, key: str) -> int:
        """Call every handler for a key in subscription order. Returns how many ran."""
        subscriptions = list(self._handlers.get(key, []))
        for subscription in subscriptions:
            subscription.handler()
        return len(subscriptions)

    def count(self, key: Optional[str] = None) -> int:
        """Number of active handlers for a key, or for all keys."""
        if key is not None:
            return len(self._handlers.get(key, []))
        return sum(len(subs) for subs in self._handlers.values())
