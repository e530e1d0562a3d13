"""Action Boundary — runs one use case and converts its outcome into an ActionResult.

Invariants:
    - execute_action() never raises: every outcome is Success or Failure
    - Known errors (SportsEventsError) keep their message, code and field
    - Anything else is a bug: logged with traceback at ERROR, reported to the
      caller only as the generic INTERNAL_ERROR failure (no internal detail leaks)
    - No retries

Design Decisions:
    - Closed taxonomy checked with one isinstance on the base class instead of
      duck-typing unknown throwables for a message
"""

import logging
from typing import Awaitable, Callable, TypeVar

from sports_events.core.action_result import ActionResult, Failure, Success
from sports_events.core.errors import ErrorSeverity, SportsEventsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


async def execute_action(
    action: Callable[[], Awaitable[T]], name: str,
) -> ActionResult[T]:
    """Await `action` and wrap the result; convert failures to Failure."""
    try:
        data = await action()
    except SportsEventsError as e:
        logger.log(
            _LOG_LEVELS[e.severity],
            f"Action {name} failed: {e.message}",
            extra={"error_code": e.code, "action": name},
        )
        return Failure.from_error(e)
    except Exception:
        logger.error(
            f"Unexpected failure in action {name}",
            exc_info=True, extra={"action": name},
        )
        return Failure.unexpected()
    return Success(data)
