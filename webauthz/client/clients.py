"""
Authentication clients.

The authorization checker only asks whether a client is an indirect
client (redirect-based login) or the anonymous client.
"""

from abc import ABC
from typing import Iterable, List, Optional
import logging

from ..common.utils import are_equals_ignore_case_and_trim
from ..profile import AnonymousProfile, UserProfile


logger = logging.getLogger(__name__)


class Client(ABC):
    """
    Base class for authentication clients.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class IndirectClient(Client):
    """
    Client performing a redirect-based login flow (CAS, OIDC, SAML...).
    """

    def __init__(self, name: Optional[str] = None, callback_url: Optional[str] = None):
        super().__init__(name)
        self.callback_url = callback_url


class DirectClient(Client):
    """
    Client authenticating each request from its own credentials.
    """
    pass


class AnonymousClient(DirectClient):
    """
    Direct client issuing a new anonymous profile to every request.
    """

    def get_user_profile(self) -> UserProfile:
        return AnonymousProfile()


class Clients:
    """
    Ordered collection of the clients in use.
    """

    def __init__(self, clients: Optional[Iterable[Client]] = None,
                 callback_url: Optional[str] = None):
        self.callback_url = callback_url
        self._clients: List[Client] = []
        for client in clients or []:
            self.add_client(client)

    def add_client(self, client: Client) -> None:
        if isinstance(client, IndirectClient) and client.callback_url is None:
            client.callback_url = self.callback_url
        self._clients.append(client)
        logger.debug("Registered client: %s", client.name)

    def find_client(self, name: str) -> Optional[Client]:
        """Find a client by name (case-insensitive, trimmed)."""
        for client in self._clients:
            if are_equals_ignore_case_and_trim(client.name, name):
                return client
        return None

    def find_all_clients(self) -> List[Client]:
        return list(self._clients)

    def __iter__(self):
        return iter(self._clients)

    def __len__(self) -> int:
        return len(self._clients)
