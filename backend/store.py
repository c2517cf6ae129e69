"""
In-memory event store shared across all routes.

The replay log is a fixed fixture: built once (lazily on first access, or
eagerly at startup), anchored to a base time, and never mutated afterwards.
Routes get it through the get_event_store dependency so tests can swap in a
store with an explicit base time and clock.
"""

import logging
import threading
import time
from bisect import bisect_right
from typing import Callable, Iterable, Optional

import config
from models.event import Event
from replay.errors import OutOfRange
from replay.fixtures import FixtureEntry, get_profile

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class EventStore:
    """Ordered, read-only sequence of replay events."""

    def __init__(self, events: Iterable[Event], base_time_ms: int, clock: Clock = now_ms):
        self._events = tuple(events)
        for position, event in enumerate(self._events):
            if event.id != position:
                raise ValueError(f"Event at position {position} has id {event.id}")
            if position and event.epoch_ms < self._events[position - 1].epoch_ms:
                raise ValueError(f"Event {position} is earlier than event {position - 1}")

        self._timestamps = tuple(e.epoch_ms for e in self._events)
        self.base_time_ms = base_time_ms
        self._clock = clock

    @classmethod
    def from_fixture(
        cls, entries: Iterable[FixtureEntry], base_time_ms: int, clock: Clock = now_ms
    ) -> "EventStore":
        events = [
            Event(
                id=i,
                epoch_ms=base_time_ms + entry.offset_ms,
                url=entry.url,
                label=entry.label,
                action=entry.action,
            )
            for i, entry in enumerate(entries)
        ]
        return cls(events, base_time_ms, clock=clock)

    def __len__(self) -> int:
        return len(self._events)

    def length(self) -> int:
        return len(self._events)

    def events(self) -> tuple[Event, ...]:
        return self._events

    def event_at(self, index: int) -> Event:
        if index < 0 or index >= len(self._events):
            raise OutOfRange("index out of range")
        return self._events[index]

    def find_index(self, epoch_ms: int) -> int:
        """
        Index of the last event at or before epoch_ms.

        Equal timestamps resolve to the highest index. A target earlier than
        every event falls back to 0 rather than signalling "not found".
        """
        return max(bisect_right(self._timestamps, epoch_ms) - 1, 0)

    def generated_at(self) -> int:
        """Wall-clock ms for the response being built (client clock sync only)."""
        return self._clock()


# ---------- Process-wide instance ----------

_store: Optional[EventStore] = None
_lock = threading.Lock()


def build_from_config(clock: Clock = now_ms) -> EventStore:
    profile = get_profile(config.replay_profile())
    lead_ms = config.replay_lead_ms()
    if lead_ms is None:
        lead_ms = profile.lead_ms

    base_time_ms = clock() - lead_ms
    event_store = EventStore.from_fixture(profile.entries, base_time_ms, clock=clock)
    logger.info(
        "Built replay store: profile=%s events=%d base_time_ms=%d",
        profile.name, len(event_store), base_time_ms,
    )
    return event_store


def get_event_store() -> EventStore:
    global _store
    if _store is None:
        with _lock:
            if _store is None:
                _store = build_from_config()
    return _store


def reset_event_store() -> None:
    global _store
    with _lock:
        _store = None
