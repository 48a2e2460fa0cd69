"""Utility functions."""
from typing import Any, Optional


def to_int(s: Optional[Any]) -> Optional[int]:
    """Convert a value to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except (TypeError, ValueError):
        return None
