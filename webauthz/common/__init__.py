"""
Common helpers shared across webauthz packages.
"""

from .utils import (
    is_blank,
    is_not_empty,
    are_equals_ignore_case_and_trim,
    substring_after,
    substring_between,
    assert_not_none,
    assert_true,
    generate_secure_token,
    get_current_time,
)

__all__ = [
    'is_blank',
    'is_not_empty',
    'are_equals_ignore_case_and_trim',
    'substring_after',
    'substring_between',
    'assert_not_none',
    'assert_true',
    'generate_secure_token',
    'get_current_time',
]
