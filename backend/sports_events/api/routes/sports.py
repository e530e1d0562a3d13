"""Sport Routes — the sport registry the event form offers.

Invariants:
    - Public: no identity needed, no database access
    - Fixed sports first, configured extras after, registry order preserved
"""

from fastapi import APIRouter, Depends

from sports_events.config import Settings, get_settings
from sports_events.core.sports import build_registry
from sports_events.schemas.event import SportResponse

router = APIRouter(prefix="/api/v1/sports", tags=["sports"])


@router.get("")
async def list_sports(settings: Settings = Depends(get_settings)):
    sports = build_registry(settings.extra_sport_types)
    return {
        "success": True,
        "data": [
            SportResponse(
                id=s.id, name=s.name, emoji=s.emoji, category=s.category.value,
            ).model_dump()
            for s in sports
        ],
    }
