"""Event Schemas — request/response shapes for the events API.

Invariants:
    - Request schemas check JSON types only; field rules live in core/validate_event.py
      so API callers and direct action callers get identical ValidationErrors
    - Unknown keys are ignored: a client-sent user_id never reaches the pipeline
    - to_fields() returns only the keys the client actually sent (partial update)
"""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from sports_events.core.domain_types import EventRecord
from sports_events.core.sports import get_sport_emoji, get_sport_name


class EventCreate(BaseModel):
    """Event creation — date_time, or date + time (HH:MM) merged server-side."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    sport_type: str | None = None
    date_time: dt.datetime | None = None
    date: dt.date | None = None
    time: str | None = None
    description: str | None = None
    venues: list[str] | None = None
    color: str | None = None

    def to_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EventUpdate(EventCreate):
    """Partial update — every field optional, only sent fields change."""


class EventResponse(BaseModel):
    id: UUID
    name: str
    sport_type: str
    sport_name: str
    sport_emoji: str
    date_time: dt.datetime
    description: str | None
    venues: list[str]
    color: str | None
    user_id: UUID
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_record(cls, record: EventRecord) -> "EventResponse":
        return cls(
            **record.to_dict(),
            sport_name=get_sport_name(record.sport_type),
            sport_emoji=get_sport_emoji(record.sport_type),
        )


class SportResponse(BaseModel):
    id: str
    name: str
    emoji: str
    category: str
