# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package authorizer defines the authorizer contract, the built-in
authorizers reserved under well-known names and their name resolution.
"""

from .types import (
    Authorizer,
    ProfileAuthorizer
)

from .builtin import (
    AbstractCheckAuthenticationAuthorizer,
    IsAnonymousAuthorizer,
    IsAuthenticatedAuthorizer,
    IsFullyAuthenticatedAuthorizer,
    IsRememberedAuthorizer
)

from .csrf import (
    CsrfAuthorizer,
    CsrfTokenGenerator
)

from .require import (
    AbstractRequireElementAuthorizer,
    RequireAnyRoleAuthorizer,
    RequireAllRolesAuthorizer,
    RequireAnyPermissionAuthorizer,
    CheckHttpMethodAuthorizer
)

from .registry import (
    BUILTIN_AUTHORIZERS,
    CSRF_AUTHORIZER,
    IS_ANONYMOUS_AUTHORIZER,
    IS_AUTHENTICATED_AUTHORIZER,
    IS_FULLY_AUTHENTICATED_AUTHORIZER,
    IS_REMEMBERED_AUTHORIZER,
    find_authorizer,
    find_builtin_authorizer,
    is_builtin_name
)

__all__ = [
    # Contract
    'Authorizer',
    'ProfileAuthorizer',

    # Built-in authorizers
    'AbstractCheckAuthenticationAuthorizer',
    'IsAnonymousAuthorizer',
    'IsAuthenticatedAuthorizer',
    'IsFullyAuthenticatedAuthorizer',
    'IsRememberedAuthorizer',
    'CsrfAuthorizer',
    'CsrfTokenGenerator',

    # Element authorizers
    'AbstractRequireElementAuthorizer',
    'RequireAnyRoleAuthorizer',
    'RequireAllRolesAuthorizer',
    'RequireAnyPermissionAuthorizer',
    'CheckHttpMethodAuthorizer',

    # Name resolution
    'BUILTIN_AUTHORIZERS',
    'CSRF_AUTHORIZER',
    'IS_ANONYMOUS_AUTHORIZER',
    'IS_AUTHENTICATED_AUTHORIZER',
    'IS_FULLY_AUTHENTICATED_AUTHORIZER',
    'IS_REMEMBERED_AUTHORIZER',
    'find_authorizer',
    'find_builtin_authorizer',
    'is_builtin_name'
]
