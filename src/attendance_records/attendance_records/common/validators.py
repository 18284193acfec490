from __future__ import annotations

from typing import Optional

from ..core.exceptions import InvalidArgumentError


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if is_blank(value):
        raise InvalidArgumentError(f"{field_name} required")
    return value.strip()
