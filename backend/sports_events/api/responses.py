"""Envelope Responses — turns an ActionResult into a JSONResponse.

Invariants:
    - Body is always ActionResult.to_dict(): {"success": ..., "data"|"error"/"code"}
    - HTTP status follows the failure code; unknown codes answer 500
    - Stale view paths travel in X-Invalidate-Paths, only on success
"""

from typing import Any, Callable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from sports_events.core.action_result import ActionResult, Failure
from sports_events.services.view_invalidation import INVALIDATE_HEADER, RequestInvalidations

STATUS_BY_CODE = {
    "AUTH_ERROR": 401,
    "FORBIDDEN": 403,
    "VALIDATION_ERROR": 400,
    "NOT_FOUND": 404,
    "REPOSITORY_ERROR": 500,
    "INTERNAL_ERROR": 500,
}


def envelope_response(
    result: ActionResult,
    *,
    render: Callable[[Any], Any] | None = None,
    success_status: int = 200,
    invalidations: RequestInvalidations | None = None,
) -> JSONResponse:
    if isinstance(result, Failure):
        return JSONResponse(
            status_code=STATUS_BY_CODE.get(result.code or "", 500),
            content=result.to_dict(),
        )
    data = render(result.data) if render and result.data is not None else result.data
    headers = {}
    if invalidations is not None and invalidations.header_value():
        headers[INVALIDATE_HEADER] = invalidations.header_value()
    return JSONResponse(
        status_code=success_status,
        content=jsonable_encoder({"success": True, "data": data}),
        headers=headers,
    )
