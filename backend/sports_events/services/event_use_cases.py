"""Event Use Cases — the five orchestrators the action boundary calls.

Invariants:
    - Fixed pipeline: require_identity -> (writes) validate -> repository -> invalidate
    - Each step runs only if the previous one succeeded; nothing touches the
      repository before the gate has passed
    - The repository is always scoped by the gate's identity id
    - At most one repository write per call; no cross-call transactions
    - Errors propagate as SportsEventsError subclasses; conversion to the result
      envelope happens one layer up (services/event_actions.py)

Design Decisions:
    - One class with one method per operation: the five operations share the same
      three collaborators, and splitting them into five classes would repeat the
      constructor five times
    - Invalidation after the write, never before: a failed write leaves views fresh
"""

import logging
from typing import Any, Mapping
from uuid import UUID

from sports_events.core.domain_types import EventFilters, EventId, EventRecord
from sports_events.core.errors import NotFoundError
from sports_events.core.repository_protocols import EventRepository, ViewInvalidator
from sports_events.core.routes import DASHBOARD, event_edit_path
from sports_events.core.validate_event import (
    EventRules, normalize_filters, validate_event, validate_event_patch,
)
from sports_events.services.auth_gate import AuthorizationGate

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str | UUID) -> EventId:
    """Untrusted id to EventId. A malformed id is just another missing event."""
    if isinstance(event_id, UUID):
        return EventId(event_id)
    try:
        return EventId(UUID(str(event_id)))
    except ValueError:
        raise NotFoundError("Event", str(event_id))


class EventUseCases:
    """Authorization + validation + scoped persistence for events."""

    def __init__(
        self,
        gate: AuthorizationGate,
        repository: EventRepository,
        rules: EventRules,
        invalidator: ViewInvalidator,
    ):
        self.gate = gate
        self.repository = repository
        self.rules = rules
        self.invalidator = invalidator

    async def list_events(self, filters: EventFilters | None = None) -> list[EventRecord]:
        identity = await self.gate.require_identity()
        scoped = normalize_filters(filters, self.rules)
        if scoped is None:
            return []
        return await self.repository.find_all(identity.id, scoped)

    async def get_event(self, event_id: str | UUID) -> EventRecord:
        identity = await self.gate.require_identity()
        return await self.repository.find_by_id(identity.id, parse_event_id(event_id))

    async def create_event(self, fields: Mapping[str, Any]) -> EventRecord:
        identity = await self.gate.require_identity()
        record = validate_event(fields, self.rules)
        event = await self.repository.insert(identity.id, record)
        self.invalidator.invalidate(DASHBOARD)
        return event

    async def update_event(
        self, event_id: str | UUID, fields: Mapping[str, Any],
    ) -> EventRecord:
        identity = await self.gate.require_identity()
        event_id = parse_event_id(event_id)
        patch = validate_event_patch(fields, self.rules)
        event = await self.repository.update(identity.id, event_id, patch)
        self.invalidator.invalidate(DASHBOARD)
        self.invalidator.invalidate(event_edit_path(event_id))
        logger.info(
            f"Event updated: {sorted(patch)}",
            extra={"user_id": identity.id, "event_id": event_id},
        )
        return event

    async def delete_event(self, event_id: str | UUID) -> None:
        identity = await self.gate.require_identity()
        try:
            event_id = parse_event_id(event_id)
        except NotFoundError:
            # no row can carry a malformed id; same answer as any missing row
            return
        await self.repository.delete(identity.id, event_id)
        self.invalidator.invalidate(DASHBOARD)
        logger.info(
            "Event deleted", extra={"user_id": identity.id, "event_id": event_id},
        )

    async def count_events(self) -> int:
        identity = await self.gate.require_identity()
        return await self.repository.count(identity.id)
