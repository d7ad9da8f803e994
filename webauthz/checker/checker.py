"""
Authorization checker.

Turns an authorizer expression into an ordered list of authorizers and
checks them conjunctively against the request.

Expression forms:
  - blank: the default authorizers computed from the clients
  - ``+a,b-c,d``: the defaults without ``c`` and ``d``, then ``a`` and ``b``
  - ``a,b``: exactly ``a`` then ``b``, no defaults

``none`` contributes nothing wherever it appears.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional, Sequence, Type
import logging
import time

from ..authorizer import Authorizer, find_authorizer
from ..client import AnonymousClient, Client, IndirectClient
from ..common.utils import (
    assert_not_none, assert_true, is_blank, is_not_empty, substring_after, substring_between
)
from ..constants import ADD_ELEMENT, ELEMENT_SEPARATOR, REMOVE_ELEMENT, DefaultAuthorizers
from ..context import SessionStore, WebContext
from ..errors import PreconditionError
from ..metrics import DecisionMetrics
from ..profile import UserProfile


logger = logging.getLogger(__name__)


class AuthorizationChecker(ABC):
    """
    Base class for authorization checkers.
    """

    @abstractmethod
    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: Sequence[UserProfile], authorizers_value: Optional[str],
                      authorizers: Optional[Mapping[str, Authorizer]],
                      clients: Optional[Iterable[Client]]) -> bool:
        """
        Check whether the authenticated user may access the request.

        Args:
            context: The current web context
            session_store: The session store
            profiles: The authenticated user profiles
            authorizers_value: The authorizer expression
            authorizers: The registered authorizers by name
            clients: The clients in use

        Returns:
            bool: True if authorized, False otherwise
        """
        pass


class DefaultAuthorizationChecker(AuthorizationChecker):
    """
    Default way to check authorizations, with the built-in authorizers
    as fallbacks for the reserved names.
    """

    def __init__(self, metrics: Optional[DecisionMetrics] = None):
        self.metrics = metrics

    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: Sequence[UserProfile], authorizers_value: Optional[str],
                      authorizers: Optional[Mapping[str, Authorizer]],
                      clients: Optional[Iterable[Client]]) -> bool:
        self._assert_profiles(profiles)
        resolved = self.compute_authorizers(authorizers_value, authorizers, clients)
        return self.check_authorizers(context, session_store, profiles, resolved)

    def compute_authorizers(self, authorizers_value: Optional[str],
                            authorizers: Optional[Mapping[str, Authorizer]],
                            clients: Optional[Iterable[Client]]) -> List[Authorizer]:
        """Build the ordered authorizer list for an expression."""
        if is_blank(authorizers_value):
            return self.compute_default_authorizers(clients, authorizers)

        value = authorizers_value.strip()
        if value.startswith(ADD_ELEMENT) or value.startswith(REMOVE_ELEMENT):
            result = self.compute_default_authorizers(clients, authorizers)

            removed_names = substring_after(value, REMOVE_ELEMENT)
            self.remove_authorizers_from_names(removed_names, result)

            added_names = substring_between(value, ADD_ELEMENT, REMOVE_ELEMENT)
            result.extend(self.add_authorizers_from_names(added_names, authorizers))
            return result

        return self.add_authorizers_from_names(value, authorizers)

    def compute_default_authorizers(self, clients: Optional[Iterable[Client]],
                                    authorizers: Optional[Mapping[str, Authorizer]]) -> List[Authorizer]:
        """
        Default authorizers for the clients in use: a CSRF check when an
        indirect client is present, an authentication check unless the
        anonymous client is present.
        """
        clients = list(clients or [])
        result: List[Authorizer] = []
        if self.contains_client_type(clients, IndirectClient):
            result.append(self.retrieve_authorizer(DefaultAuthorizers.CSRF_CHECK, authorizers))
        if not self.contains_client_type(clients, AnonymousClient):
            result.append(self.retrieve_authorizer(DefaultAuthorizers.IS_AUTHENTICATED, authorizers))
        return result

    def add_authorizers_from_names(self, authorizer_names: str,
                                   authorizers: Optional[Mapping[str, Authorizer]]) -> List[Authorizer]:
        """Resolve a comma-separated list of names against the registry."""
        assert_not_none("authorizers", authorizers)
        result: List[Authorizer] = []
        for name in self._split_names(authorizer_names):
            authorizer = self.retrieve_authorizer(name, authorizers)
            # we must have an authorizer defined for this name
            assert_true(authorizer is not None,
                        f"The authorizer '{name}' must be defined in the security configuration",
                        name=name)
            result.append(authorizer)
        return result

    def remove_authorizers_from_names(self, authorizer_names: str,
                                      authorizers: List[Authorizer]) -> List[Authorizer]:
        """
        Remove the named built-in authorizers from ``authorizers`` in place.

        Only built-in names are resolved here, so a registry entry that
        shadows a reserved name is never removed.
        """
        for name in self._split_names(authorizer_names):
            authorizer = self.retrieve_authorizer(name, {})
            assert_true(authorizer is not None,
                        f"The authorizer '{name}' must be defined in the security configuration",
                        name=name)
            for index, candidate in enumerate(authorizers):
                if candidate is authorizer:
                    del authorizers[index]
                    break
        return authorizers

    def retrieve_authorizer(self, authorizer_name: str,
                            authorizers: Optional[Mapping[str, Authorizer]]) -> Optional[Authorizer]:
        assert_not_none("authorizers", authorizers)
        return find_authorizer(authorizer_name, authorizers)

    @staticmethod
    def contains_client_type(clients: Iterable[Client], client_type: Type[Client]) -> bool:
        for client in clients:
            if isinstance(client, client_type):
                return True
        return False

    def check_authorizers(self, context: WebContext, session_store: SessionStore,
                          profiles: Sequence[UserProfile],
                          authorizers: Sequence[Authorizer]) -> bool:
        """
        Check the authorizers in order; all of them must be satisfied.
        An empty list authorizes the request.
        """
        # authorizations are checked after authentication
        self._assert_profiles(profiles)
        start_time = time.perf_counter()
        allowed = True
        for authorizer in authorizers:
            authorized = authorizer.is_authorized(context, session_store, profiles)
            logger.debug("Checking authorizer: %s -> %s", authorizer, authorized)
            if self.metrics is not None:
                self.metrics.record_authorizer_check(authorizer.__class__.__name__, authorized)
            if not authorized:
                allowed = False
                break
        if self.metrics is not None:
            self.metrics.record_decision(allowed, time.perf_counter() - start_time)
        return allowed

    @staticmethod
    def _split_names(authorizer_names: str) -> List[str]:
        if is_blank(authorizer_names):
            return []
        names = [name.strip() for name in authorizer_names.split(ELEMENT_SEPARATOR)]
        return [name for name in names if name.lower() != DefaultAuthorizers.NONE]

    @staticmethod
    def _assert_profiles(profiles: Optional[Sequence[UserProfile]]) -> None:
        if not is_not_empty(profiles):
            raise PreconditionError()


_default_checker = DefaultAuthorizationChecker()


def is_authorized(context: WebContext, session_store: SessionStore,
                  profiles: Sequence[UserProfile], authorizers_value: Optional[str],
                  authorizers: Optional[Mapping[str, Authorizer]],
                  clients: Optional[Iterable[Client]]) -> bool:
    """Check authorizations with the shared default checker."""
    return _default_checker.is_authorized(
        context, session_store, profiles, authorizers_value, authorizers, clients
    )
