"""
Package client defines the authentication clients consulted by the
default authorizer policy.
"""

from .clients import (
    Client,
    IndirectClient,
    DirectClient,
    AnonymousClient,
    Clients
)

__all__ = [
    'Client',
    'IndirectClient',
    'DirectClient',
    'AnonymousClient',
    'Clients'
]
