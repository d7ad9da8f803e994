"""
Authorizer contract.
An authorizer is a named predicate over the request, the session and the
authenticated profiles.
"""

from abc import ABC, abstractmethod
from typing import List

from ..context import SessionStore, WebContext
from ..profile import UserProfile


class Authorizer(ABC):
    """
    Base class for authorizers.

    Implementations must not keep per-request state in their fields: the
    same instance serves concurrent requests. Per-request state belongs
    to the web context or the session store.
    """

    @abstractmethod
    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: List[UserProfile]) -> bool:
        """
        Decide whether the request is allowed.

        Args:
            context: The current web context
            session_store: The session store
            profiles: The authenticated user profiles (never empty)

        Returns:
            bool: True if authorized, False otherwise
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ProfileAuthorizer(Authorizer):
    """
    Authorizer deciding profile by profile.
    """

    def is_any_authorized(self, context: WebContext, session_store: SessionStore,
                          profiles: List[UserProfile]) -> bool:
        """True if at least one profile is authorized."""
        for profile in profiles:
            if self.is_profile_authorized(context, session_store, profile):
                return True
        return False

    def is_all_authorized(self, context: WebContext, session_store: SessionStore,
                          profiles: List[UserProfile]) -> bool:
        """True if every profile is authorized."""
        for profile in profiles:
            if not self.is_profile_authorized(context, session_store, profile):
                return False
        return True

    @abstractmethod
    def is_profile_authorized(self, context: WebContext, session_store: SessionStore,
                              profile: UserProfile) -> bool:
        pass
