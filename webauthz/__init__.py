"""
webauthz Python Package

Authorization checks for a pluggable web-authentication framework:
resolves authorizer expressions against named authorizers and checks
them against authenticated user profiles.
"""

__version__ = "0.1.0"

from .authorizer import Authorizer
from .checker import AuthorizationChecker, DefaultAuthorizationChecker, is_authorized
from .client import AnonymousClient, Client, Clients, DirectClient, IndirectClient
from .config import Config, ConfigLoader, load_config
from .context import MemorySessionStore, SessionStore, SimpleWebContext, WebContext
from .errors import ConfigurationError, NullInputError, PreconditionError, WebAuthzError
from .profile import ANONYMOUS_PROFILE, AnonymousProfile, UserProfile

__all__ = [
    "Authorizer",
    "AuthorizationChecker",
    "DefaultAuthorizationChecker",
    "is_authorized",
    "Client",
    "Clients",
    "IndirectClient",
    "DirectClient",
    "AnonymousClient",
    "Config",
    "ConfigLoader",
    "load_config",
    "WebContext",
    "SimpleWebContext",
    "SessionStore",
    "MemorySessionStore",
    "WebAuthzError",
    "ConfigurationError",
    "PreconditionError",
    "NullInputError",
    "UserProfile",
    "AnonymousProfile",
    "ANONYMOUS_PROFILE",
]
