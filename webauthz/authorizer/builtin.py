"""
Authentication-level authorizers.
Each one is satisfied as soon as one of the profiles matches.
"""

from typing import List

from ..context import SessionStore, WebContext
from ..profile import UserProfile
from .types import ProfileAuthorizer


class AbstractCheckAuthenticationAuthorizer(ProfileAuthorizer):
    """
    Checks the authentication level of the profiles.
    """

    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: List[UserProfile]) -> bool:
        return self.is_any_authorized(context, session_store, profiles)

    @staticmethod
    def _is_authenticated(profile: UserProfile) -> bool:
        return profile is not None and not profile.is_anonymous()


class IsAnonymousAuthorizer(AbstractCheckAuthenticationAuthorizer):
    """The user must be anonymous."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        return profile is not None and profile.is_anonymous()


class IsAuthenticatedAuthorizer(AbstractCheckAuthenticationAuthorizer):
    """The user must be authenticated (not anonymous)."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        return self._is_authenticated(profile)


class IsFullyAuthenticatedAuthorizer(AbstractCheckAuthenticationAuthorizer):
    """The user must be authenticated in this session, not remembered."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        return self._is_authenticated(profile) and not profile.remembered


class IsRememberedAuthorizer(AbstractCheckAuthenticationAuthorizer):
    """The user must be authenticated through a remember-me mechanism."""

    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        return self._is_authenticated(profile) and profile.remembered
