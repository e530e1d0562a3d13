"""Event Repository — owner-scoped CRUD against the events table.

Invariants:
    - Every query carries `user_id == owner_id`; there is no unscoped read or write
    - A row owned by someone else is reported exactly like a missing row (NotFoundError)
    - delete() of a missing or foreign id is a silent no-op
    - Any SQLAlchemyError rolls the session back and surfaces as RepositoryError
    - Returned values are detached EventRecord snapshots, never ORM rows

Design Decisions:
    - Repository owns commit boundaries: each write is a single commit, so one
      use case equals one store transaction
    - Listing order fixed to date_time ascending, ties broken by created_at then id
      so pagination is stable
    - Substring search uses lower() + LIKE with autoescape: works the same on
      PostgreSQL and SQLite, and user-typed % or _ match literally
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sports_events.core.domain_types import (
    EventFilters, EventId, EventRecord, UserId,
)
from sports_events.core.errors import ErrorContext, NotFoundError, RepositoryError
from sports_events.core.validate_event import ValidatedEvent
from sports_events.models.event import Event as EventModel

logger = logging.getLogger(__name__)

_PATCHABLE = frozenset({
    "name", "sport_type", "date_time", "description", "venues", "color",
})


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_record(row: EventModel) -> EventRecord:
    return EventRecord(
        id=EventId(row.id),
        name=row.name,
        sport_type=row.sport_type,
        date_time=_as_utc(row.date_time),
        description=row.description,
        venues=list(row.venues or []),
        color=row.color,
        user_id=UserId(row.user_id),
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class SqlAlchemyEventRepository:
    """EventRepository implementation over an AsyncSession."""

    def __init__(self, db: AsyncSession, default_page_size: int = 10):
        self.db = db
        self.default_page_size = default_page_size

    @asynccontextmanager
    async def _store_call(
        self, operation: str, owner_id: UserId, event_id: EventId | None = None,
    ) -> AsyncGenerator[None, None]:
        """Map store faults to RepositoryError after rolling back."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            message = str(getattr(e, "orig", None) or e)
            logger.error(
                f"Event {operation} failed: {message}",
                extra={"user_id": owner_id, "event_id": event_id, "operation": operation},
            )
            raise RepositoryError(
                message, operation,
                context=ErrorContext(
                    user_id=str(owner_id),
                    event_id=str(event_id) if event_id else None,
                    operation=operation,
                ),
            )

    async def _get_owned(self, owner_id: UserId, event_id: EventId) -> EventModel | None:
        result = await self.db.execute(
            select(EventModel).where(
                EventModel.id == event_id, EventModel.user_id == owner_id,
            ),
        )
        return result.scalar_one_or_none()

    async def find_all(
        self, owner_id: UserId, filters: EventFilters | None = None,
    ) -> list[EventRecord]:
        f = filters or EventFilters()
        query = select(EventModel).where(EventModel.user_id == owner_id)
        if f.search and f.search.strip():
            query = query.where(
                func.lower(EventModel.name).contains(
                    f.search.strip().lower(), autoescape=True,
                ),
            )
        if f.sport_type:
            query = query.where(EventModel.sport_type == f.sport_type)
        if f.date_from:
            query = query.where(EventModel.date_time >= _as_utc(f.date_from))
        if f.date_to:
            query = query.where(EventModel.date_time <= _as_utc(f.date_to))
        query = query.order_by(
            EventModel.date_time.asc(),
            EventModel.created_at.asc(),
            EventModel.id.asc(),
        )
        limit = f.limit
        if limit is None and f.offset:
            limit = self.default_page_size
        if limit is not None:
            query = query.limit(limit)
        if f.offset:
            query = query.offset(f.offset)

        async with self._store_call("list", owner_id):
            result = await self.db.execute(query)
            return [to_record(row) for row in result.scalars().all()]

    async def find_by_id(self, owner_id: UserId, event_id: EventId) -> EventRecord:
        async with self._store_call("get", owner_id, event_id):
            row = await self._get_owned(owner_id, event_id)
        if row is None:
            raise NotFoundError("Event", str(event_id))
        return to_record(row)

    async def insert(self, owner_id: UserId, record: ValidatedEvent) -> EventRecord:
        now = _utcnow()
        row = EventModel(
            name=record.name,
            sport_type=record.sport_type,
            date_time=record.date_time,
            description=record.description,
            venues=list(record.venues),
            color=record.color,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        async with self._store_call("insert", owner_id):
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        logger.info(
            "Event created", extra={"user_id": owner_id, "event_id": row.id},
        )
        return to_record(row)

    async def update(
        self, owner_id: UserId, event_id: EventId, patch: dict[str, Any],
    ) -> EventRecord:
        async with self._store_call("update", owner_id, event_id):
            row = await self._get_owned(owner_id, event_id)
            if row is None:
                raise NotFoundError("Event", str(event_id))
            changes = {k: v for k, v in patch.items() if k in _PATCHABLE}
            if changes:
                for key, value in changes.items():
                    setattr(row, key, list(value) if key == "venues" else value)
                row.updated_at = _utcnow()
                await self.db.commit()
                await self.db.refresh(row)
        return to_record(row)

    async def delete(self, owner_id: UserId, event_id: EventId) -> None:
        async with self._store_call("delete", owner_id, event_id):
            await self.db.execute(
                delete(EventModel).where(
                    EventModel.id == event_id, EventModel.user_id == owner_id,
                ),
            )
            await self.db.commit()

    async def count(self, owner_id: UserId) -> int:
        async with self._store_call("count", owner_id):
            result = await self.db.execute(
                select(func.count()).select_from(EventModel).where(
                    EventModel.user_id == owner_id,
                ),
            )
            return int(result.scalar_one())
