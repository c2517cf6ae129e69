from models.event import Event
from models.history import ErrorBody, EventFrame, HistoryInfo, HistoryListing, SeekResult

__all__ = ["Event", "EventFrame", "HistoryInfo", "HistoryListing", "SeekResult", "ErrorBody"]
