"""Echo router: returns the captured path segment as the response body."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from pathecho.core.errors import ErrorResponse
from pathecho.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

# A "model" entry would be documented under the route's text/plain media type.
_ERROR_CONTENT = {"application/json": {"schema": ErrorResponse.model_json_schema()}}


@router.get(
    "/echo/{segment}",
    response_class=PlainTextResponse,
    responses={404: {"description": "No single non-empty segment", "content": _ERROR_CONTENT}},
    tags=["echo"],
)
async def echo(segment: str) -> str:
    # Starlette has already percent-decoded the path; the segment is returned as-is.
    logger.debug("echo segment of length %d", len(segment))
    return segment
