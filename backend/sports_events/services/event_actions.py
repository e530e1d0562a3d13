"""Event Actions — outbound entry points for the presentation layer.

Invariants:
    - Every method returns an ActionResult; none raises
    - Ids are passed through untouched; use cases parse them after the gate
"""

from typing import Any, Mapping
from uuid import UUID

from sports_events.core.action_result import ActionResult
from sports_events.core.domain_types import EventFilters, EventRecord
from sports_events.services.action_boundary import execute_action
from sports_events.services.event_use_cases import EventUseCases


class EventActions:
    def __init__(self, use_cases: EventUseCases):
        self.use_cases = use_cases

    async def list_events(
        self, filters: EventFilters | None = None,
    ) -> ActionResult[list[EventRecord]]:
        return await execute_action(
            lambda: self.use_cases.list_events(filters), "list_events",
        )

    async def get_event(self, event_id: str | UUID) -> ActionResult[EventRecord]:
        return await execute_action(
            lambda: self.use_cases.get_event(event_id), "get_event",
        )

    async def create_event(self, fields: Mapping[str, Any]) -> ActionResult[EventRecord]:
        return await execute_action(
            lambda: self.use_cases.create_event(fields), "create_event",
        )

    async def update_event(
        self, event_id: str | UUID, fields: Mapping[str, Any],
    ) -> ActionResult[EventRecord]:
        return await execute_action(
            lambda: self.use_cases.update_event(event_id, fields), "update_event",
        )

    async def delete_event(self, event_id: str | UUID) -> ActionResult[None]:
        return await execute_action(
            lambda: self.use_cases.delete_event(event_id), "delete_event",
        )

    async def count_events(self) -> ActionResult[int]:
        return await execute_action(self.use_cases.count_events, "count_events")
