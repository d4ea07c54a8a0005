"""Response Envelope — uniform {success, message, data, error} wrapper.

Invariants:
    - Success envelopes never carry an `error` key
    - Error envelopes always carry data=None and an `error` object
"""

from typing import Any

from smartsales.core.errors import ErrorDetail, MessageDetail


def success_envelope(message: str, data: Any = None) -> dict:
    return {"success": True, "message": message, "data": data}


def error_envelope(message: str, detail: ErrorDetail | None = None) -> dict:
    return {
        "success": False,
        "message": message,
        "data": None,
        "error": (detail or MessageDetail()).render(message),
    }
