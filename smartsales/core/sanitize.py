"""Input Sanitizers — plain-text, multi-line, boolean and email normalization.

Invariants:
    - sanitize_text strips tags, collapses all whitespace (newlines included), trims
    - sanitize_textarea strips tags but keeps line breaks
    - Non-string scalars are stringified first; None becomes ""
    - All functions are pure
"""

import re
import unicodedata
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>")
_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL,
)
_PERCENT_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_INLINE_WS_RE = re.compile(r"[ \t\f\v]+")
_ANY_WS_RE = re.compile(r"\s+")
_SLUG_JUNK_RE = re.compile(r"[^a-z0-9]+")
_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]+"
    r"@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$"
)

TRUTHY_STRINGS: frozenset[str] = frozenset({"true", "1", "yes", "on"})


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _strip_markup(text: str) -> str:
    text = _SCRIPT_STYLE_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    return _PERCENT_OCTET_RE.sub("", text)


def sanitize_text(value: Any) -> str:
    """Single-line text field."""
    text = _strip_markup(_to_text(value))
    return _ANY_WS_RE.sub(" ", text).strip()


def sanitize_textarea(value: Any) -> str:
    """Multi-line text field: line breaks survive, other whitespace collapses."""
    text = _strip_markup(_to_text(value)).replace("\r\n", "\n")
    lines = [_INLINE_WS_RE.sub(" ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def sanitize_text_list(value: Any) -> list[str]:
    """Coerce a scalar or sequence into a list of sanitized strings."""
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple, set)) else [value]
    return [sanitize_text(item) for item in items]


def sanitize_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return bool(value)


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or len(value) < 6:
        return False
    return _EMAIL_RE.match(value.strip()) is not None


def sanitize_slug(value: Any) -> str:
    """URL-safe slug: lower-case ASCII alphanumerics joined by single hyphens."""
    text = unicodedata.normalize("NFKD", _strip_markup(_to_text(value)))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = _SLUG_JUNK_RE.sub("-", text)
    return text.strip("-")


def humanize_field(name: str) -> str:
    """`company_name` -> `Company name`."""
    return name.replace("_", " ").capitalize()
