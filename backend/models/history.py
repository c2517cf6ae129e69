from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.event import Event


class HistoryInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_events: int = Field(alias="totalEvents")
    generated_at_epoch_ms: int = Field(alias="generatedAtEpochMs")


class SeekResult(BaseModel):
    index: int


class EventFrame(BaseModel):
    """One polled event, plus the hints a client needs to schedule the next poll."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    epoch_ms: int = Field(alias="epochMs")
    url: str
    label: str
    action: str
    next_epoch_ms: Optional[int] = Field(default=None, alias="nextEpochMs")   # absent on the last event
    is_last_event: Optional[bool] = Field(default=None, alias="isLastEvent")  # only set past endEpochMs


class HistoryListing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_at_epoch_ms: int = Field(alias="generatedAtEpochMs")
    events: list[Event]


class ErrorBody(BaseModel):
    error: str
