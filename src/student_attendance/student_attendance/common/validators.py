from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def require_fields(data: Mapping[str, Any], fields: Sequence[str]) -> None:
    """Reject a payload unless every named field is present and non-blank."""
    missing = [f for f in fields if not safe_string(data.get(f))]
    if missing:
        raise ValidationError(f"{', '.join(fields)} required")


def safe_string(value: Any) -> str:
    """Trimmed string, or "" for anything that is not a string."""
    if isinstance(value, str):
        return value.strip()
    return ""


def safe_date(value: Any) -> str | None:
    """A date string at least as long as YYYY-MM-DD, otherwise None."""
    s = safe_string(value)
    return s if len(s) >= 10 else None


def or_default(value: Any, default: str) -> str:
    return safe_string(value) or default
