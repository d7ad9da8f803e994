"""
User profile types.
Profiles are produced by authentication and consulted by authorizers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set


@dataclass
class UserProfile:
    """
    Authenticated user (identity, roles, permissions and attributes).
    """
    id: str
    client_name: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    roles: Set[str] = field(default_factory=set)
    permissions: Set[str] = field(default_factory=set)
    # True when the user was authenticated through a "remember me" mechanism
    remembered: bool = False

    def is_anonymous(self) -> bool:
        """Check if this profile represents an anonymous user."""
        return False

    def add_role(self, role: str) -> None:
        self.roles.add(role)

    def add_roles(self, roles: List[str]) -> None:
        self.roles.update(roles)

    def add_permission(self, permission: str) -> None:
        self.permissions.add(permission)

    def add_attribute(self, key: str, value: Any) -> None:
        if value is not None:
            self.attributes[key] = value

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'id': self.id,
            'client_name': self.client_name,
            'attributes': self.attributes,
            'roles': sorted(self.roles),
            'permissions': sorted(self.permissions),
            'remembered': self.remembered,
            'anonymous': self.is_anonymous()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserProfile':
        """Create from dictionary representation."""
        if data.get('anonymous'):
            return AnonymousProfile()
        return cls(
            id=data['id'],
            client_name=data.get('client_name'),
            attributes=data.get('attributes', {}),
            roles=set(data.get('roles', [])),
            permissions=set(data.get('permissions', [])),
            remembered=data.get('remembered', False)
        )


@dataclass
class AnonymousProfile(UserProfile):
    """
    Sentinel profile carried by unauthenticated users.
    """
    id: str = "anonymous"

    def is_anonymous(self) -> bool:
        return True


ANONYMOUS_PROFILE = AnonymousProfile()
