import json

import pytest
from starlette.exceptions import HTTPException
from starlette.requests import Request

from pathecho.core.errors import AppError, app_error_handler, error_code_for, http_error_handler


def test_app_error_to_dict():
    err = AppError("boom", code="broken", http_status=503)
    assert err.to_dict() == {"error": "broken", "message": "boom"}
    assert err.http_status == 503
    assert str(err) == "boom"


@pytest.mark.parametrize(
    ("status", "code"),
    [(404, "not_found"), (405, "method_not_allowed"), (400, "bad_request"), (599, "http_error")],
)
def test_error_code_for(status, code):
    assert error_code_for(status) == code


def _request(method: str = "GET", path: str = "/missing") -> Request:
    scope = {"type": "http", "method": method, "path": path, "query_string": b"", "headers": []}
    return Request(scope)


@pytest.mark.asyncio
async def test_app_error_handler_uses_status():
    response = await app_error_handler(_request(), AppError("nope", http_status=418))
    assert response.status_code == 418
    assert json.loads(response.body) == {"error": "app_error", "message": "nope"}


@pytest.mark.asyncio
async def test_http_error_handler_keeps_headers():
    exc = HTTPException(status_code=405, headers={"Allow": "GET, HEAD"})
    response = await http_error_handler(_request(), exc)
    assert response.status_code == 405
    assert response.headers["allow"] == "GET, HEAD"
    assert json.loads(response.body) == {
        "error": "method_not_allowed",
        "message": "Method Not Allowed",
    }
