"""
Security configuration: clients, named authorizers and collaborators.

A Config is an explicit value handed to the code that checks requests;
there is no process-wide instance.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Union
import logging

from ..authorizer import Authorizer, CsrfTokenGenerator
from ..checker import AuthorizationChecker, DefaultAuthorizationChecker
from ..client import Client, Clients
from ..common.utils import assert_not_none
from ..context import MemorySessionStore, SessionStore, WebContext
from ..profile import UserProfile


logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Configuration of the authorization layer"""
    clients: Union[Clients, List[Client]] = field(default_factory=Clients)
    authorizers: Dict[str, Authorizer] = field(default_factory=dict)
    session_store: SessionStore = field(default_factory=MemorySessionStore)
    authorization_checker: AuthorizationChecker = field(default_factory=DefaultAuthorizationChecker)
    csrf_token_generator: CsrfTokenGenerator = field(default_factory=CsrfTokenGenerator)
    log_level: Union[str, int] = "INFO"

    def __post_init__(self):
        if not isinstance(self.clients, Clients):
            self.clients = Clients(self.clients)
        assert_not_none("authorizers", self.authorizers)

    def add_client(self, client: Client) -> None:
        self.clients.add_client(client)

    def add_authorizer(self, name: str, authorizer: Authorizer) -> None:
        assert_not_none("authorizer", authorizer)
        self.authorizers[name] = authorizer

    def set_authorizer(self, authorizer: Authorizer) -> None:
        """Register an authorizer under its class name."""
        assert_not_none("authorizer", authorizer)
        self.authorizers[authorizer.__class__.__name__] = authorizer

    def set_authorizers(self, authorizers: Dict[str, Authorizer]) -> None:
        assert_not_none("authorizers", authorizers)
        self.authorizers = authorizers

    def is_authorized(self, context: WebContext, profiles: Sequence[UserProfile],
                      authorizers_value: Optional[str] = None,
                      clients: Optional[Iterable[Client]] = None) -> bool:
        """
        Check a request against this configuration.

        Args:
            context: The current web context
            profiles: The authenticated user profiles
            authorizers_value: The authorizer expression (blank for defaults)
            clients: The clients in use for this request (all configured clients if omitted)
        """
        if clients is None:
            clients = self.clients.find_all_clients()
        return self.authorization_checker.is_authorized(
            context, self.session_store, profiles, authorizers_value, self.authorizers, clients
        )
