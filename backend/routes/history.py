from typing import Optional

from fastapi import APIRouter, Depends, Query

from models.history import ErrorBody, EventFrame, HistoryInfo, HistoryListing, SeekResult
from replay import query
from store import EventStore, get_event_store

router = APIRouter(tags=["history"])

_ERRORS = {400: {"model": ErrorBody}}


def _first(values: Optional[list[str]]) -> Optional[str]:
    # A repeated parameter resolves to its first occurrence
    return values[0] if values else None


# ---------- Replay polling ----------

@router.get("/api/replay/history/info", response_model=HistoryInfo)
def history_info(store: EventStore = Depends(get_event_store)):
    """
    Returns the total number of events and the server clock, so the client
    can size its timeline and estimate clock skew before playback.
    """
    return query.info(store)


@router.get("/api/replay/history/find", response_model=SeekResult, responses=_ERRORS)
def find_event(
    epoch_ms: Optional[list[str]] = Query(default=None, alias="epochMs"),
    store: EventStore = Depends(get_event_store),
):
    """
    Resolves a timestamp to the index of the last event at or before it.
    Used once to pick a starting index; polling resumes from there.
    """
    return query.seek(store, _first(epoch_ms))


@router.get(
    "/api/replay/history",
    response_model=EventFrame,
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def poll_event(
    index: Optional[list[str]] = Query(default=None),
    end_epoch_ms: Optional[list[str]] = Query(default=None, alias="endEpochMs"),
    store: EventStore = Depends(get_event_store),
):
    """
    Returns event `index` with the next event's timestamp (when there is one)
    so the client can compute how long to wait before the next poll.
    """
    return query.fetch(store, _first(index), _first(end_epoch_ms))


# ---------- Full history ----------

@router.get("/api/history", response_model=HistoryListing)
def history(store: EventStore = Depends(get_event_store)):
    return query.listing(store)
