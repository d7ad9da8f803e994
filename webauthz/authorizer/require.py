"""
Authorizers requiring roles, permissions or HTTP methods.
Typically registered under custom names in the configuration.
"""

from typing import Iterable, List, Optional, Set

from ..context import SessionStore, WebContext
from ..profile import UserProfile
from .types import Authorizer, ProfileAuthorizer


class AbstractRequireElementAuthorizer(ProfileAuthorizer):
    """
    Requires elements (roles, permissions) on at least one profile.
    An empty element set authorizes everyone.
    """

    def __init__(self, elements: Optional[Iterable[str]] = None):
        self.elements: Set[str] = set(elements or [])

    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: List[UserProfile]) -> bool:
        return self.is_any_authorized(context, session_store, profiles)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(elements={sorted(self.elements)!r})"


class RequireAnyRoleAuthorizer(AbstractRequireElementAuthorizer):
    """The user must have one of the roles."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        if not self.elements:
            return True
        return bool(self.elements & profile.roles)


class RequireAllRolesAuthorizer(AbstractRequireElementAuthorizer):
    """The user must have all the roles."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        return self.elements.issubset(profile.roles)


class RequireAnyPermissionAuthorizer(AbstractRequireElementAuthorizer):
    """The user must have one of the permissions."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        if not self.elements:
            return True
        return bool(self.elements & profile.permissions)


class CheckHttpMethodAuthorizer(Authorizer):
    """
    The request must use one of the HTTP methods.
    """

    def __init__(self, methods: Optional[Iterable[str]] = None):
        self.methods: Set[str] = {method.upper() for method in methods or []}

    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: List[UserProfile]) -> bool:
        if not self.methods:
            return True
        return context.get_request_method() in self.methods

    def __repr__(self) -> str:
        return f"CheckHttpMethodAuthorizer(methods={sorted(self.methods)!r})"
