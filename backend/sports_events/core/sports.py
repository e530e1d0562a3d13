"""Sport Registry — the fixed set of sport types an event may carry.

Invariants:
    - Sport ids are lowercase and unique
    - lookup_sport() matches id or display name, case-insensitively
    - Unknown ids fall back to the "other" name and emoji for display only

Design Decisions:
    - Tuple of frozen dataclasses: the registry cannot be mutated at runtime;
      deployments extend it through Settings.extra_sport_types instead
"""

from dataclasses import dataclass

from sports_events.core.domain_types import SportCategory


@dataclass(frozen=True)
class SportConfig:
    id: str
    name: str
    emoji: str
    category: SportCategory


SPORTS: tuple[SportConfig, ...] = (
    SportConfig("soccer", "Soccer", "⚽", SportCategory.TEAM),
    SportConfig("basketball", "Basketball", "\U0001f3c0", SportCategory.TEAM),
    SportConfig("tennis", "Tennis", "\U0001f3be", SportCategory.INDIVIDUAL),
    SportConfig("baseball", "Baseball", "⚾", SportCategory.TEAM),
    SportConfig("football", "Football", "\U0001f3c8", SportCategory.TEAM),
    SportConfig("hockey", "Hockey", "\U0001f3d2", SportCategory.TEAM),
    SportConfig("golf", "Golf", "⛳", SportCategory.INDIVIDUAL),
    SportConfig("swimming", "Swimming", "\U0001f3ca", SportCategory.WATER),
    SportConfig("running", "Running", "\U0001f3c3", SportCategory.INDIVIDUAL),
    SportConfig("volleyball", "Volleyball", "\U0001f3d0", SportCategory.TEAM),
    SportConfig("other", "Other", "\U0001f3c6", SportCategory.OTHER),
)

SPORT_IDS: tuple[str, ...] = tuple(s.id for s in SPORTS)

_FALLBACK = SPORTS[-1]


def build_registry(extra_sport_types: list[str] | tuple[str, ...] = ()) -> tuple[SportConfig, ...]:
    """Fixed sports plus configured extras (category OTHER, fallback emoji)."""
    known = set(SPORT_IDS)
    extras = []
    for raw in extra_sport_types:
        sport_id = raw.strip().lower()
        if not sport_id or sport_id in known:
            continue
        known.add(sport_id)
        extras.append(SportConfig(
            sport_id, raw.strip(), _FALLBACK.emoji, SportCategory.OTHER,
        ))
    return SPORTS + tuple(extras)


def lookup_sport(
    value: str, registry: tuple[SportConfig, ...] = SPORTS,
) -> SportConfig | None:
    """Find a sport by id or display name, ignoring case and surrounding blanks."""
    key = value.strip().lower()
    for sport in registry:
        if sport.id == key or sport.name.lower() == key:
            return sport
    return None


def get_sport_name(sport_id: str) -> str:
    sport = lookup_sport(sport_id)
    return sport.name if sport else _FALLBACK.name


def get_sport_emoji(sport_id: str) -> str:
    sport = lookup_sport(sport_id)
    return sport.emoji if sport else _FALLBACK.emoji


def get_sports_by_category(category: SportCategory) -> list[SportConfig]:
    return [s for s in SPORTS if s.category == category]
