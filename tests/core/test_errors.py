"""Error Envelope — rendering of FieldErrors / MessageDetail variants."""

from smartsales.core.envelope import error_envelope, success_envelope
from smartsales.core.errors import (
    FieldErrors, MessageDetail, RequestValidationFailed, ResourceNotFoundError,
    TaxonomyError,
)


def test_success_envelope_has_no_error_key():
    assert success_envelope("ok", {"a": 1}) == {
        "success": True, "message": "ok", "data": {"a": 1},
    }


def test_field_errors_render_flat():
    error = RequestValidationFailed("Missing", FieldErrors({"name": "name is required."}))
    assert error.to_response() == {
        "success": False,
        "message": "Missing",
        "data": None,
        "error": {"name": "name is required."},
    }


def test_message_detail_falls_back_to_error_message():
    assert ResourceNotFoundError("Entry not found").to_response()["error"] == {
        "error": "Entry not found",
    }


def test_message_detail_passes_adapter_message_through():
    error = TaxonomyError("Failed to create category.", detail=MessageDetail("dup"))
    assert error.http_status == 500
    assert error.to_response()["error"] == {"error": "dup"}


def test_empty_field_errors_use_message():
    assert error_envelope("boom", FieldErrors({}))["error"] == {"error": "boom"}
