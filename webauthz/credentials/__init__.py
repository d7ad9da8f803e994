"""
Package credentials holds the credential value objects produced by
clients before authorization takes place.
"""

from .types import Credentials

from .saml import (
    SAML2Credentials,
    SAMLAttribute,
    SAMLConditions,
    SAMLNameID
)

__all__ = [
    'Credentials',
    'SAML2Credentials',
    'SAMLAttribute',
    'SAMLConditions',
    'SAMLNameID'
]
