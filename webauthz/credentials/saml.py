"""
SAML 2 credentials: the NameID of the subject, its attributes and the
assertion conditions.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from .types import Credentials


logger = logging.getLogger(__name__)


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    return _to_utc(datetime.fromisoformat(value)) if value else None


@dataclass
class SAMLAttribute:
    """A SAML attribute with its values."""
    name: str
    friendly_name: Optional[str] = None
    name_format: Optional[str] = None
    attribute_values: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'friendly_name': self.friendly_name,
            'name_format': self.name_format,
            'attribute_values': list(self.attribute_values)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SAMLAttribute':
        return cls(
            name=data['name'],
            friendly_name=data.get('friendly_name'),
            name_format=data.get('name_format'),
            attribute_values=list(data.get('attribute_values', []))
        )


@dataclass
class SAMLNameID:
    """The NameID of the SAML subject."""
    value: Optional[str] = None
    format: Optional[str] = None
    name_qualifier: Optional[str] = None
    sp_name_qualifier: Optional[str] = None
    sp_provider_id: Optional[str] = None

    @classmethod
    def from_attribute(cls, attribute: SAMLAttribute) -> 'SAMLNameID':
        """Build a NameID from an attribute carrying the subject identifier."""
        return cls(
            value=attribute.attribute_values[0] if attribute.attribute_values else None,
            format=attribute.name_format,
            name_qualifier=attribute.name,
            sp_name_qualifier=attribute.friendly_name
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'format': self.format,
            'name_qualifier': self.name_qualifier,
            'sp_name_qualifier': self.sp_name_qualifier,
            'sp_provider_id': self.sp_provider_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SAMLNameID':
        return cls(
            value=data.get('value'),
            format=data.get('format'),
            name_qualifier=data.get('name_qualifier'),
            sp_name_qualifier=data.get('sp_name_qualifier'),
            sp_provider_id=data.get('sp_provider_id')
        )


@dataclass
class SAMLConditions:
    """Validity window of the assertion, in UTC."""
    not_before: Optional[datetime] = None
    not_on_or_after: Optional[datetime] = None

    def __post_init__(self):
        self.not_before = _to_utc(self.not_before)
        self.not_on_or_after = _to_utc(self.not_on_or_after)

    def is_valid_at(self, instant: datetime) -> bool:
        instant = _to_utc(instant)
        if self.not_before is not None and instant < self.not_before:
            return False
        if self.not_on_or_after is not None and instant >= self.not_on_or_after:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'not_before': self.not_before.isoformat() if self.not_before else None,
            'not_on_or_after': self.not_on_or_after.isoformat() if self.not_on_or_after else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SAMLConditions':
        return cls(
            not_before=_parse_datetime(data.get('not_before')),
            not_on_or_after=_parse_datetime(data.get('not_on_or_after'))
        )


@dataclass(eq=False)
class SAML2Credentials(Credentials):
    """
    Credentials holding the SAML subject NameID and all its attributes.

    Two credentials are equal when their NameID, attributes, session
    index and conditions are equal.
    """
    name_id: Optional[SAMLNameID] = None
    issuer_id: Optional[str] = None
    attributes: List[SAMLAttribute] = field(default_factory=list)
    conditions: Optional[SAMLConditions] = None
    session_index: Optional[str] = None
    authn_contexts: List[str] = field(default_factory=list)
    in_response_to: Optional[str] = None

    def __post_init__(self):
        logger.debug("Constructed SAML2 credentials: %s", self)

    def _identity(self):
        return (self.name_id, self.attributes, self.session_index, self.conditions)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SAML2Credentials) or type(self) is not type(other):
            return False
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        name_value = self.name_id.value if self.name_id else None
        return hash((name_value, self.session_index))

    def get_attribute(self, name: str) -> Optional[SAMLAttribute]:
        for attribute in self.attributes:
            if attribute.name == name or attribute.friendly_name == name:
                return attribute
        return None

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            'name_id': self.name_id.to_dict() if self.name_id else None,
            'issuer_id': self.issuer_id,
            'attributes': [a.to_dict() for a in self.attributes],
            'conditions': self.conditions.to_dict() if self.conditions else None,
            'session_index': self.session_index,
            'authn_contexts': list(self.authn_contexts),
            'in_response_to': self.in_response_to
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SAML2Credentials':
        return cls(
            user_profile=cls._profile_from_dict(data),
            name_id=SAMLNameID.from_dict(data['name_id']) if data.get('name_id') else None,
            issuer_id=data.get('issuer_id'),
            attributes=[SAMLAttribute.from_dict(a) for a in data.get('attributes', [])],
            conditions=SAMLConditions.from_dict(data['conditions']) if data.get('conditions') else None,
            session_index=data.get('session_index'),
            authn_contexts=list(data.get('authn_contexts', [])),
            in_response_to=data.get('in_response_to')
        )
