"""
Shared fixtures for webauthz tests.
"""

from typing import List

import pytest

from webauthz.authorizer import Authorizer
from webauthz.checker import DefaultAuthorizationChecker
from webauthz.client import AnonymousClient, DirectClient, IndirectClient
from webauthz.context import MemorySessionStore, SimpleWebContext
from webauthz.profile import ANONYMOUS_PROFILE, UserProfile


class CountingAuthorizer(Authorizer):
    """Authorizer returning a fixed result and counting its calls."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls = 0

    def is_authorized(self, context, session_store, profiles) -> bool:
        self.calls += 1
        return self.result


class FailingAuthorizer(Authorizer):
    """Authorizer raising from its check."""

    def is_authorized(self, context, session_store, profiles) -> bool:
        raise RuntimeError("backend unavailable")


@pytest.fixture
def context():
    """Create a GET web context"""
    return SimpleWebContext(method="GET")


@pytest.fixture
def post_context():
    """Create a POST web context"""
    return SimpleWebContext(method="POST")


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def profile():
    """Create an authenticated profile"""
    return UserProfile(id="jdoe", client_name="SAML2Client", roles={"user"})


@pytest.fixture
def remembered_profile():
    return UserProfile(id="jdoe", client_name="RememberMeClient", remembered=True)


@pytest.fixture
def profiles(profile) -> List[UserProfile]:
    return [profile]


@pytest.fixture
def anonymous_profiles() -> List[UserProfile]:
    return [ANONYMOUS_PROFILE]


@pytest.fixture
def indirect_client():
    return IndirectClient("SAML2Client", callback_url="https://app.example.com/callback")


@pytest.fixture
def direct_client():
    return DirectClient("HeaderClient")


@pytest.fixture
def anonymous_client():
    return AnonymousClient()


@pytest.fixture
def checker():
    return DefaultAuthorizationChecker()


@pytest.fixture
def counting_authorizer():
    """Factory for counting authorizers"""
    return CountingAuthorizer


@pytest.fixture
def failing_authorizer():
    return FailingAuthorizer()
