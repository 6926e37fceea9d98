from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Dict, List, Union

from shimmer.protocol.events import BaseEvent, Event, EventKind, normalize_kind

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], Union[None, Awaitable[None]]]


@dataclass(eq=False)
class _Subscription:
    handler: EventHandler
    once: bool = False


class EventEmitter:
    """Per-kind publish/subscribe. Handlers run in registration order and are awaited one by one."""

    def __init__(self) -> None:
        self._subscriptions: Dict[EventKind, List[_Subscription]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: Union[str, EventKind], handler: EventHandler, once: bool = False) -> None:
        self._subscriptions[normalize_kind(kind)].append(_Subscription(handler, once))

    def unsubscribe(self, kind: Union[str, EventKind], handler: EventHandler) -> None:
        subscriptions = self._subscriptions[normalize_kind(kind)]
        for sub in subscriptions:
            if sub.handler == handler:
                subscriptions.remove(sub)
                return

    def listener_count(self, kind: Union[str, EventKind]) -> int:
        return len(self._subscriptions[normalize_kind(kind)])

    async def emit(self, event: BaseEvent) -> None:
        """Dispatch ``event`` to every handler of its kind. Handler exceptions propagate."""
        subscriptions = self._subscriptions[event.kind]
        # handlers subscribed while dispatching wait for the next event
        pending = list(subscriptions)
        for sub in pending:
            if sub.once:
                if sub not in subscriptions:
                    continue
                subscriptions.remove(sub)
            result = sub.handler(event)
            if inspect.isawaitable(result):
                await result
        logger.debug("Emitted %s to %s handler(s)", event.kind.value, len(pending))


__all__ = ["EventEmitter", "EventHandler"]
