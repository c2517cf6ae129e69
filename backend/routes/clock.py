from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["clock"])


class TimeResponse(BaseModel):
    now: str    # ISO-8601 with UTC offset


@router.get("/api/time", response_model=TimeResponse)
def server_time():
    """Server wall clock in local time, for the polling demo page."""
    return TimeResponse(now=datetime.now().astimezone().isoformat())
