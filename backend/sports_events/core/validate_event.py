"""Event Record Validation — checks and normalizes a proposed event before storage.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - First violation raises ValidationError(field, message); violations are not aggregated
    - Output is normalized: trimmed name, registry sport id, blank-filtered venues,
      blank description/color -> None, date_time as an aware UTC datetime
    - validate_event(validate_event(x).to_dict()) == validate_event(x)
    - validate_event_patch only touches keys present in the candidate
    - normalize_filters applies the same sport and timezone rules to listing filters

Design Decisions:
    - Raise instead of returning error dicts: the use case must stop before the
      repository, and the action boundary already turns errors into envelopes
    - Field checks in a fixed order (name, sport, date/time, description, venues, color)
      so "first violation" is deterministic
    - Naive timestamps read in the configured timezone, then stored as UTC
"""

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, replace
from datetime import date, datetime, time, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sports_events.core.domain_types import EventColor, EventFilters
from sports_events.core.errors import ValidationError
from sports_events.core.sports import SPORTS, SportConfig, build_registry, lookup_sport

_COLORS = {c.value for c in EventColor}

# events.name column width; a configured name limit never exceeds it
NAME_COLUMN_LENGTH = 255


@dataclass(frozen=True)
class EventRules:
    """Limits the validator enforces. Built from Settings at the shell."""
    max_name_length: int = NAME_COLUMN_LENGTH
    max_description_length: int = 2000
    max_venues: int = 10
    sports: tuple[SportConfig, ...] = SPORTS
    timezone: tzinfo = timezone.utc

    @classmethod
    def from_settings(cls, settings) -> "EventRules":
        tz: tzinfo = timezone.utc
        if settings.default_timezone.upper() != "UTC":
            try:
                tz = ZoneInfo(settings.default_timezone)
            except (ZoneInfoNotFoundError, ValueError):
                raise ValueError(f"Unknown timezone: {settings.default_timezone}")
        return cls(
            max_name_length=min(settings.max_event_name_length, NAME_COLUMN_LENGTH),
            max_description_length=settings.max_description_length,
            max_venues=settings.max_venues_per_event,
            sports=build_registry(settings.extra_sport_types),
            timezone=tz,
        )


@dataclass(frozen=True)
class ValidatedEvent:
    """A complete, normalized event ready for insert."""
    name: str
    sport_type: str
    date_time: datetime
    description: str | None
    venues: list[str]
    color: str | None

    def to_dict(self) -> dict:
        return asdict(self)


# ─── Field checks ────────────────────────────────────────────────

def check_name(value: Any, rules: EventRules) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Event name is required", field="name")
    name = value.strip()
    if len(name) > rules.max_name_length:
        raise ValidationError("Event name is too long", field="name")
    return name


def check_sport_type(value: Any, rules: EventRules) -> str:
    sport = lookup_sport(value, rules.sports) if isinstance(value, str) else None
    if sport is None:
        raise ValidationError("Please select a valid sport type", field="sport_type")
    return sport.id


def check_description(value: Any, rules: EventRules) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Description must be text", field="description")
    description = value.strip()
    if not description:
        return None
    if len(description) > rules.max_description_length:
        raise ValidationError("Description is too long", field="description")
    return description


def normalize_venues(venues: Iterable[str]) -> list[str]:
    """Trim every venue and drop the blank ones, keeping order."""
    return [v.strip() for v in venues if v.strip()]


def check_venues(value: Any, rules: EventRules) -> list[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValidationError("At least one venue is required", field="venues")
    items = list(value)
    if not all(isinstance(v, str) for v in items):
        raise ValidationError("Venues must be text", field="venues")
    venues = normalize_venues(items)
    if not venues:
        raise ValidationError("At least one venue is required", field="venues")
    if len(venues) > rules.max_venues:
        raise ValidationError(
            f"Maximum {rules.max_venues} venues allowed", field="venues",
        )
    return venues


def check_color(value: Any, rules: EventRules) -> str | None:
    if value is None:
        return None
    if isinstance(value, EventColor):
        return value.value
    if not isinstance(value, str):
        raise ValidationError("Please select a valid color", field="color")
    color = value.strip().lower()
    if not color:
        return None
    if color not in _COLORS:
        raise ValidationError("Please select a valid color", field="color")
    return color


# ─── Date/time ───────────────────────────────────────────────────

def to_utc(value: datetime, tz: tzinfo) -> datetime:
    """Read a naive value in `tz`; return the same instant in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.astimezone(timezone.utc)


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
        raise ValidationError("Please select a valid date", field="date")
    raise ValidationError("Please select a date", field="date")


def _parse_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return time.fromisoformat(value.strip())
        except ValueError:
            pass
        raise ValidationError("Please select a valid time", field="time")
    raise ValidationError("Please select a time", field="time")


def merge_date_time(day: Any, clock: Any, tz: tzinfo = timezone.utc) -> datetime:
    """Merge separate date and time inputs into one absolute UTC timestamp."""
    moment = datetime.combine(_parse_date(day), _parse_time(clock))
    return to_utc(moment, tz)


def check_date_time(value: Any, rules: EventRules) -> datetime:
    if isinstance(value, datetime):
        return to_utc(value, rules.timezone)
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError("Please select a valid date and time", field="date_time")
        return to_utc(parsed, rules.timezone)
    raise ValidationError("Please select a date and time", field="date_time")


def _resolve_date_time(candidate: Mapping[str, Any], rules: EventRules) -> datetime:
    if candidate.get("date_time") is not None:
        return check_date_time(candidate["date_time"], rules)
    if "date" in candidate or "time" in candidate:
        return merge_date_time(candidate.get("date"), candidate.get("time"), rules.timezone)
    raise ValidationError("Please select a date and time", field="date_time")


# ─── Entry points ────────────────────────────────────────────────

def validate_event(candidate: Mapping[str, Any], rules: EventRules) -> ValidatedEvent:
    """Validate a full event for create. Raises ValidationError on the first violation."""
    return ValidatedEvent(
        name=check_name(candidate.get("name"), rules),
        sport_type=check_sport_type(candidate.get("sport_type"), rules),
        date_time=_resolve_date_time(candidate, rules),
        description=check_description(candidate.get("description"), rules),
        venues=check_venues(candidate.get("venues"), rules),
        color=check_color(candidate.get("color"), rules),
    )


_PATCH_CHECKS = (
    ("name", check_name),
    ("sport_type", check_sport_type),
    ("description", check_description),
    ("venues", check_venues),
    ("color", check_color),
)


def validate_event_patch(candidate: Mapping[str, Any], rules: EventRules) -> dict[str, Any]:
    """Validate only the supplied fields of a partial update.

    Keys outside the editable set (id, user_id, timestamps) are dropped.
    """
    patch: dict[str, Any] = {}
    for key, check in _PATCH_CHECKS[:2]:
        if key in candidate:
            patch[key] = check(candidate[key], rules)
    if any(k in candidate for k in ("date_time", "date", "time")):
        patch["date_time"] = _resolve_date_time(candidate, rules)
    for key, check in _PATCH_CHECKS[2:]:
        if key in candidate:
            patch[key] = check(candidate[key], rules)
    return patch


def normalize_filters(
    filters: EventFilters | None, rules: EventRules,
) -> EventFilters | None:
    """Bring listing filters onto the stored representation.

    sport_type goes through the registry like it does on create, and naive
    date bounds are read in the rule timezone. None means the sport is unknown,
    so nothing can match.
    """
    f = filters or EventFilters()
    sport_type = None
    if f.sport_type and f.sport_type.strip():
        sport = lookup_sport(f.sport_type, rules.sports)
        if sport is None:
            return None
        sport_type = sport.id
    return replace(
        f,
        sport_type=sport_type,
        date_from=to_utc(f.date_from, rules.timezone) if f.date_from else None,
        date_to=to_utc(f.date_to, rules.timezone) if f.date_to else None,
    )
