"""Event Use Cases — authorization, validation and invalidation around the repository.

Tests cover:
    - Anonymous callers are rejected before the repository is touched (all ops)
    - Invalid input is rejected before the repository is touched
    - The repository only ever sees the gate's identity as owner
    - Successful writes invalidate the dashboard (and the edit page on update)
    - Malformed ids read as not found; delete of a malformed id is a no-op
    - End-to-end create -> get -> delete -> get against a real store
    - Listing filters follow the same sport and timezone rules as create
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from sports_events.core.action_result import Success
from sports_events.core.domain_types import EventFilters
from sports_events.core.errors import AuthenticationError, NotFoundError, ValidationError
from sports_events.core.validate_event import EventRules
from sports_events.services.auth_gate import AuthorizationGate, IdentityResolver
from sports_events.services.event_actions import EventActions
from sports_events.services.event_use_cases import EventUseCases, parse_event_id
from sports_events.services.view_invalidation import RequestInvalidations
from tests.services.fake_identity_provider import (
    ALICE_ID, ALICE_TOKEN, BOB_TOKEN, FakeIdentityProvider,
)

VALID = {
    "name": "5k Run",
    "sport_type": "Running",
    "date_time": datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc),
    "venues": ["City Park"],
}


def _gate(token):
    return AuthorizationGate(IdentityResolver(FakeIdentityProvider(), token))


def _use_cases(token, repository, invalidations=None, rules=None):
    return EventUseCases(
        _gate(token), repository, rules or EventRules(),
        invalidations or RequestInvalidations(),
    )


# ─── Gate first ──────────────────────────────────────────────────

@pytest.mark.parametrize("call", [
    lambda uc: uc.list_events(),
    lambda uc: uc.get_event(str(uuid4())),
    lambda uc: uc.create_event(VALID),
    lambda uc: uc.update_event(str(uuid4()), {"name": "x"}),
    lambda uc: uc.delete_event(str(uuid4())),
    lambda uc: uc.count_events(),
])
@pytest.mark.parametrize("token", [None, "expired-token"])
async def test_anonymous_caller_never_reaches_repository(call, token):
    repo = AsyncMock()
    invalidations = RequestInvalidations()
    with pytest.raises(AuthenticationError):
        await call(_use_cases(token, repo, invalidations))
    for method in ("find_all", "find_by_id", "insert", "update", "delete", "count"):
        getattr(repo, method).assert_not_awaited()
    assert invalidations.paths == []


async def test_anonymous_with_malformed_id_gets_auth_error_not_404():
    with pytest.raises(AuthenticationError):
        await _use_cases(None, AsyncMock()).get_event("not-a-uuid")


# ─── Validation before persistence ───────────────────────────────

async def test_invalid_create_never_reaches_repository():
    repo = AsyncMock()
    invalidations = RequestInvalidations()
    with pytest.raises(ValidationError) as exc_info:
        await _use_cases(ALICE_TOKEN, repo, invalidations).create_event({**VALID, "venues": []})
    assert exc_info.value.field == "venues"
    repo.insert.assert_not_awaited()
    assert invalidations.paths == []


async def test_invalid_update_never_reaches_repository():
    repo = AsyncMock()
    with pytest.raises(ValidationError):
        await _use_cases(ALICE_TOKEN, repo).update_event(str(uuid4()), {"name": " "})
    repo.update.assert_not_awaited()


# ─── Owner scoping ───────────────────────────────────────────────

async def test_create_scopes_to_gate_identity_and_normalizes():
    repo = AsyncMock()
    await _use_cases(ALICE_TOKEN, repo).create_event({**VALID, "user_id": str(uuid4())})
    owner_id, record = repo.insert.await_args.args
    assert owner_id == ALICE_ID
    assert record.sport_type == "running"


async def test_list_scopes_to_gate_identity():
    repo = AsyncMock()
    repo.find_all.return_value = []
    assert await _use_cases(ALICE_TOKEN, repo).list_events() == []
    assert repo.find_all.await_args.args[0] == ALICE_ID


# ─── Invalidation ────────────────────────────────────────────────

async def test_create_invalidates_dashboard():
    invalidations = RequestInvalidations()
    await _use_cases(ALICE_TOKEN, AsyncMock(), invalidations).create_event(VALID)
    assert invalidations.paths == ["/dashboard"]


async def test_update_invalidates_dashboard_and_edit_page():
    event_id = uuid4()
    invalidations = RequestInvalidations()
    await _use_cases(ALICE_TOKEN, AsyncMock(), invalidations).update_event(
        str(event_id), {"name": "10k Run"},
    )
    assert invalidations.paths == ["/dashboard", f"/events/{event_id}/edit"]


async def test_failed_update_invalidates_nothing():
    repo = AsyncMock()
    repo.update.side_effect = NotFoundError("Event", "x")
    invalidations = RequestInvalidations()
    with pytest.raises(NotFoundError):
        await _use_cases(ALICE_TOKEN, repo, invalidations).update_event(
            str(uuid4()), {"name": "10k Run"},
        )
    assert invalidations.paths == []


# ─── Malformed ids ───────────────────────────────────────────────

def test_parse_event_id_rejects_malformed_as_not_found():
    with pytest.raises(NotFoundError):
        parse_event_id("not-a-uuid")
    event_id = uuid4()
    assert parse_event_id(str(event_id)) == event_id


async def test_get_with_malformed_id_is_not_found():
    repo = AsyncMock()
    with pytest.raises(NotFoundError):
        await _use_cases(ALICE_TOKEN, repo).get_event("not-a-uuid")
    repo.find_by_id.assert_not_awaited()


async def test_delete_with_malformed_id_is_silent():
    repo = AsyncMock()
    invalidations = RequestInvalidations()
    await _use_cases(ALICE_TOKEN, repo, invalidations).delete_event("not-a-uuid")
    repo.delete.assert_not_awaited()
    assert invalidations.paths == []


# ─── End to end against the store ────────────────────────────────

async def test_create_get_delete_round_trip(repository):
    alice = _use_cases(ALICE_TOKEN, repository)
    created = await alice.create_event(VALID)
    assert created.sport_type == "running"
    assert created.user_id == ALICE_ID

    assert await alice.get_event(str(created.id)) == created
    assert await alice.count_events() == 1

    await alice.delete_event(str(created.id))
    with pytest.raises(NotFoundError):
        await alice.get_event(str(created.id))


async def test_other_user_cannot_read_update_or_delete(repository):
    created = await _use_cases(ALICE_TOKEN, repository).create_event(VALID)
    bob = _use_cases(BOB_TOKEN, repository)

    with pytest.raises(NotFoundError):
        await bob.get_event(str(created.id))
    with pytest.raises(NotFoundError):
        await bob.update_event(str(created.id), {"name": "mine now"})
    await bob.delete_event(str(created.id))
    assert await bob.list_events() == []

    still_there = await _use_cases(ALICE_TOKEN, repository).get_event(str(created.id))
    assert still_there.name == "5k Run"


# ─── Listing filters follow the create rules ─────────────────────

@pytest.mark.parametrize("sport", ["Running", "running", " RUNNING "])
async def test_list_by_sport_matches_how_create_stored_it(repository, sport):
    actions = EventActions(_use_cases(ALICE_TOKEN, repository))
    created = await actions.create_event(VALID)
    assert created.data.sport_type == "running"

    listed = await actions.list_events(EventFilters(sport_type=sport))
    assert listed == Success([created.data])


async def test_list_by_unknown_sport_matches_nothing():
    repo = AsyncMock()
    actions = EventActions(_use_cases(ALICE_TOKEN, repo))
    assert await actions.list_events(EventFilters(sport_type="quidditch")) == Success([])
    repo.find_all.assert_not_awaited()


async def test_naive_date_bounds_read_in_rule_timezone(repository):
    rules = EventRules(timezone=timezone(timedelta(hours=-4)))
    alice = _use_cases(ALICE_TOKEN, repository, rules=rules)
    local_nine = datetime(2025, 6, 1, 9, 0)
    created = await alice.create_event({**VALID, "date_time": local_nine})
    assert created.date_time == datetime(2025, 6, 1, 13, 0, tzinfo=timezone.utc)

    listed = await alice.list_events(EventFilters(date_from=local_nine, date_to=local_nine))
    assert [e.id for e in listed] == [created.id]
