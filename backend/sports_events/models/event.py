"""Event ORM — one row per sports event, owned by exactly one user.

Invariants:
    - id is UUID primary key (client-side default)
    - user_id set at insert and never updated
    - venues stored as a JSON array of non-blank strings
    - date_time, created_at, updated_at stored as UTC

Design Decisions:
    - JSON column for venues over a child table: the list is small, bounded and
      always read with its event
    - Composite indexes (user_id, date_time) and (user_id, id) match the two
      access paths: owner listing in date order, owner point lookup
    - user_id has no FK: identities live in the auth provider, not this database
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sports_events.core.validate_event import NAME_COLUMN_LENGTH
from sports_events.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    """A sports event owned by user_id."""
    __tablename__ = "events"
    __table_args__ = (
        Index("ix_events_user_id_date_time", "user_id", "date_time"),
        Index("ix_events_user_id_id", "user_id", "id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_COLUMN_LENGTH), nullable=False,
    )
    sport_type: Mapped[str] = mapped_column(String(50), nullable=False)
    date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    venues: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
