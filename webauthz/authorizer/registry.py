"""
Name resolution for authorizers.

Names are compared after trimming and ignoring case. The caller's
mapping is scanned first; the reserved built-in names act as fallbacks.
Registries are small, so a linear scan keeps them in their original form.
"""

from typing import Mapping, Optional, Tuple

from ..common.utils import are_equals_ignore_case_and_trim
from ..constants import DefaultAuthorizers
from .builtin import (
    IsAnonymousAuthorizer,
    IsAuthenticatedAuthorizer,
    IsFullyAuthenticatedAuthorizer,
    IsRememberedAuthorizer,
)
from .csrf import CsrfAuthorizer
from .types import Authorizer


# Process-wide, stateless default instances
CSRF_AUTHORIZER = CsrfAuthorizer()
IS_ANONYMOUS_AUTHORIZER = IsAnonymousAuthorizer()
IS_AUTHENTICATED_AUTHORIZER = IsAuthenticatedAuthorizer()
IS_FULLY_AUTHENTICATED_AUTHORIZER = IsFullyAuthenticatedAuthorizer()
IS_REMEMBERED_AUTHORIZER = IsRememberedAuthorizer()

BUILTIN_AUTHORIZERS: Tuple[Tuple[str, Authorizer], ...] = (
    (DefaultAuthorizers.CSRF_CHECK, CSRF_AUTHORIZER),
    (DefaultAuthorizers.IS_ANONYMOUS, IS_ANONYMOUS_AUTHORIZER),
    (DefaultAuthorizers.IS_AUTHENTICATED, IS_AUTHENTICATED_AUTHORIZER),
    (DefaultAuthorizers.IS_FULLY_AUTHENTICATED, IS_FULLY_AUTHENTICATED_AUTHORIZER),
    (DefaultAuthorizers.IS_REMEMBERED, IS_REMEMBERED_AUTHORIZER),
)


def find_builtin_authorizer(name: str) -> Optional[Authorizer]:
    """Get the built-in authorizer reserved under ``name``, if any."""
    for builtin_name, authorizer in BUILTIN_AUTHORIZERS:
        if are_equals_ignore_case_and_trim(builtin_name, name):
            return authorizer
    return None


def find_authorizer(name: str, authorizers: Mapping[str, Authorizer]) -> Optional[Authorizer]:
    """
    Resolve an authorizer name.

    Args:
        name: The authorizer name
        authorizers: The registered authorizers

    Returns:
        The first registered authorizer whose key matches, else the
        built-in authorizer of that name, else None.
    """
    for key, authorizer in authorizers.items():
        if are_equals_ignore_case_and_trim(key, name):
            return authorizer
    return find_builtin_authorizer(name)


def is_builtin_name(name: str) -> bool:
    return find_builtin_authorizer(name) is not None
