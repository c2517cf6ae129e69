"""
Stateless replay queries over an EventStore.

Each function takes the store explicitly plus the raw query-string values,
so the same code serves the HTTP routes and the tests. Parsing and bounds
errors surface as InvalidArgument / OutOfRange.

Playback itself is the client's job: poll fetch() with an increasing index
to play, a decreasing one to rewind, and call seek() once to jump to a time.
"""

from typing import Optional

from models.history import EventFrame, HistoryInfo, HistoryListing, SeekResult
from replay.params import INT32, INT64, parse_int, parse_optional_int
from store import EventStore


def info(store: EventStore) -> HistoryInfo:
    return HistoryInfo(
        total_events=store.length(),
        generated_at_epoch_ms=store.generated_at(),
    )


def seek(store: EventStore, raw_epoch_ms: Optional[str]) -> SeekResult:
    target = parse_int(raw_epoch_ms, "epochMs", INT64)
    return SeekResult(index=store.find_index(target))


def fetch(
    store: EventStore,
    raw_index: Optional[str],
    raw_end_epoch_ms: Optional[str] = None,
) -> EventFrame:
    index = parse_int(raw_index, "index", INT32)
    end_epoch_ms = parse_optional_int(raw_end_epoch_ms, "endEpochMs", INT64)
    event = store.event_at(index)

    frame = EventFrame(
        id=event.id,
        epoch_ms=event.epoch_ms,
        url=event.url,
        label=event.label,
        action=event.action,
    )
    if index + 1 < store.length():
        frame.next_epoch_ms = store.event_at(index + 1).epoch_ms
    if end_epoch_ms is not None and event.epoch_ms > end_epoch_ms:
        frame.is_last_event = True
    return frame


def listing(store: EventStore) -> HistoryListing:
    return HistoryListing(
        generated_at_epoch_ms=store.generated_at(),
        events=list(store.events()),
    )
