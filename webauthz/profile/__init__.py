"""
Package profile holds the user profiles that authorizers inspect.
"""

from .types import (
    UserProfile,
    AnonymousProfile,
    ANONYMOUS_PROFILE
)

__all__ = [
    'UserProfile',
    'AnonymousProfile',
    'ANONYMOUS_PROFILE'
]
