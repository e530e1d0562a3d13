"""Domain Types — identities, event snapshots and listing filters.

Invariants:
    - UserId and EventId wrap UUIDs — never use bare UUID in domain logic
    - Identity is read-only: only the auth provider creates it
    - EventRecord is a detached snapshot: no ORM object leaves the repository
    - All valid colours encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses: a record handed to the API layer cannot be mutated behind
      the repository's back
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
EventId = NewType("EventId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class EventColor(str, Enum):
    """Optional colour tag shown on event cards."""
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"


class SportCategory(str, Enum):
    """Grouping used by the sport registry."""
    TEAM = "team"
    INDIVIDUAL = "individual"
    WATER = "water"
    COMBAT = "combat"
    OTHER = "other"


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Identity:
    """The signed-in user as reported by the auth provider."""
    id: UserId
    email: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class EventRecord:
    """A persisted event, always owned by user_id."""
    id: EventId
    name: str
    sport_type: str
    date_time: datetime
    description: str | None
    venues: list[str]
    color: str | None
    user_id: UserId
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class EventFilters:
    """Listing filters. None means "do not filter on this field"."""
    search: str | None = None
    sport_type: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    limit: int | None = None
    offset: int = 0
