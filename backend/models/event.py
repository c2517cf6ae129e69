from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0)   # position in the replay sequence
    epoch_ms: int = Field(alias="epochMs")  # Unix timestamp in milliseconds
    url: str
    label: str
    action: str         # "navigate" | "click" | "formSubmit" | "backBtn" | ...
