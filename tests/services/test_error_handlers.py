"""Error Handlers — generic handlers render the envelope without leaking internals.

Tests cover:
    - unexpected exceptions → 500 "An unexpected error occurred", no exception text
    - request validation errors → 400 with a field → message map
"""

import json

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from smartsales.api.error_handlers import handle_request_validation, handle_unexpected


def _request(path: str = "/api/v1/categories") -> Request:
    return Request({
        "type": "http",
        "method": "POST",
        "scheme": "http",
        "path": path,
        "query_string": b"",
        "headers": [],
        "server": ("test", 80),
    })


async def test_unexpected_exception_hides_details():
    response = await handle_unexpected(
        _request(), RuntimeError("password=hunter2 at db.internal:5432"),
    )
    assert response.status_code == 500
    body = json.loads(response.body)
    assert body == {
        "success": False,
        "message": "An unexpected error occurred",
        "data": None,
        "error": {"error": "An unexpected error occurred"},
    }
    assert "hunter2" not in response.body.decode()


async def test_request_validation_renders_field_map():
    exc = RequestValidationError([
        {"loc": ("body", "parent"), "msg": "Input should be greater than or equal to 0", "type": "greater_than_equal"},
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer", "type": "int_parsing"},
        {"loc": ("body",), "msg": "Field required", "type": "missing"},
    ])
    response = await handle_request_validation(_request(), exc)
    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["message"] == "Invalid request data"
    assert body["data"] is None
    assert body["error"] == {
        "parent": "Input should be greater than or equal to 0",
        "limit": "Input should be a valid integer",
        "request": "Field required",
    }
