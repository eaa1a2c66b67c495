from __future__ import annotations

from collections import defaultdict
from datetime import UTC, datetime
from typing import Callable, DefaultDict
from uuid import uuid4

from kaiju.contracts import GameEvent

EventHandler = Callable[[GameEvent], None]


class EventBus:
    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self._counter: DefaultDict[str, int] = defaultdict(int)
        self._history: list[GameEvent] = []

    def subscribe(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def publish(self, event: GameEvent) -> None:
        self._counter[event.scope] += 1
        self._history.append(event)
        for handler in self._handlers:
            handler(event)

    def emitted_count(self, scope: str | None = None) -> int:
        if scope is None:
            return sum(self._counter.values())
        return self._counter[scope]

    def history(self, event_type: str | None = None) -> list[GameEvent]:
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.event_type == event_type]


def now_utc() -> datetime:
    return datetime.now(UTC)


def make_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def make_event(
    scope: str,
    event_type: str,
    actors: list[str],
    claims: list[str],
    **data: object,
) -> GameEvent:
    return GameEvent(
        event_id=make_id("ev"),
        time=now_utc(),
        scope=scope,
        event_type=event_type,
        actors=actors,
        claims=claims,
        data=dict(data),
    )
