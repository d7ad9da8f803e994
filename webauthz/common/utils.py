"""
Common utilities and helper functions for webauthz.
"""

import secrets
from datetime import datetime, timezone
from typing import Any, Optional, Sized

from ..errors import ConfigurationError, NullInputError


def is_blank(value: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def is_not_empty(collection: Optional[Sized]) -> bool:
    """Return True when the collection is not None and has elements."""
    return collection is not None and len(collection) > 0


def are_equals_ignore_case_and_trim(first: Optional[str], second: Optional[str]) -> bool:
    """Compare two strings ignoring surrounding whitespace and case."""
    if first is None or second is None:
        return first is None and second is None
    return first.strip().lower() == second.strip().lower()


def substring_after(value: str, separator: str) -> str:
    """
    Get the part of ``value`` after the first occurrence of ``separator``.

    Returns an empty string when the separator is absent.
    """
    index = value.find(separator)
    if index < 0:
        return ""
    return value[index + len(separator):]


def substring_between(value: str, open_token: str, close_token: str) -> str:
    """
    Get the part of ``value`` between ``open_token`` and the next ``close_token``.

    Returns an empty string when ``open_token`` is absent and everything
    after ``open_token`` when ``close_token`` does not follow it.
    """
    start = value.find(open_token)
    if start < 0:
        return ""
    start += len(open_token)
    end = value.find(close_token, start)
    if end < 0:
        return value[start:]
    return value[start:end]


def assert_not_none(name: str, value: Any) -> None:
    """Raise NullInputError when ``value`` is None."""
    if value is None:
        raise NullInputError(name)


def assert_true(condition: bool, message: str, name: Optional[str] = None) -> None:
    """Raise ConfigurationError when ``condition`` does not hold."""
    if not condition:
        raise ConfigurationError(message, name=name)


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token."""
    return secrets.token_urlsafe(length)


def get_current_time() -> datetime:
    """Get current UTC time."""
    return datetime.now(timezone.utc)
