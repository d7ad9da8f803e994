"""
Credentials base type.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..profile import UserProfile


@dataclass
class Credentials:
    """
    Data extracted from a request by a client, before it is turned into
    a user profile.
    """
    user_profile: Optional[UserProfile] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'user_profile': self.user_profile.to_dict() if self.user_profile else None
        }

    @staticmethod
    def _profile_from_dict(data: Dict[str, Any]) -> Optional[UserProfile]:
        profile_data = data.get('user_profile')
        return UserProfile.from_dict(profile_data) if profile_data else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Credentials':
        return cls(user_profile=cls._profile_from_dict(data))
