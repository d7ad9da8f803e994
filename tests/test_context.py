"""
Tests for web contexts, session storage, clients and profiles.
"""

from webauthz.client import AnonymousClient, Clients, DirectClient, IndirectClient
from webauthz.constants import SESSION_ID
from webauthz.context import MemorySessionStore, SimpleWebContext
from webauthz.profile import ANONYMOUS_PROFILE, AnonymousProfile, UserProfile


class TestSimpleWebContext:
    """Test the dictionary-backed web context"""

    def test_request_accessors(self):
        context = SimpleWebContext(method="post", parameters={"q": "1"},
                                   headers={"Content-Type": "text/plain"})

        assert context.get_request_method() == "POST"
        assert context.get_request_parameter("q") == "1"
        assert context.get_request_header("content-type") == "text/plain"
        assert context.get_request_header("Accept") is None

    def test_response_headers(self, context):
        context.set_response_header("X-Frame-Options", "DENY")
        assert context.get_response_header("X-Frame-Options") == "DENY"


class TestMemorySessionStore:
    """Test the in-memory session store"""

    def test_no_session_until_write(self, context, session_store):
        assert session_store.get_session_id(context, False) is None
        assert session_store.get(context, "key") is None
        assert len(session_store) == 0

    def test_set_and_get(self, context, session_store):
        session_store.set(context, "key", "value")

        assert session_store.get(context, "key") == "value"
        assert context.get_request_attribute(SESSION_ID) == session_store.get_session_id(context, False)

    def test_none_removes_value(self, context, session_store):
        session_store.set(context, "key", "value")
        session_store.set(context, "key", None)
        assert session_store.get(context, "key") is None

    def test_sessions_are_isolated(self, session_store):
        first = SimpleWebContext()
        second = SimpleWebContext()
        session_store.set(first, "key", "first")

        assert session_store.get(second, "key") is None
        assert len(session_store) == 1

    def test_renew_session_keeps_data(self, context, session_store):
        session_store.set(context, "key", "value")
        old_id = session_store.get_session_id(context, False)

        assert session_store.renew_session(context) is True
        assert session_store.get_session_id(context, False) != old_id
        assert session_store.get(context, "key") == "value"

    def test_destroy_session(self, context, session_store):
        session_store.set(context, "key", "value")

        assert session_store.destroy_session(context) is True
        assert session_store.get(context, "key") is None
        assert session_store.destroy_session(context) is False
        assert session_store.renew_session(context) is False


class TestClients:
    """Test client types and the client collection"""

    def test_default_name_is_class_name(self):
        assert AnonymousClient().name == "AnonymousClient"

    def test_anonymous_client_profile(self):
        profile = AnonymousClient().get_user_profile()
        assert isinstance(profile, AnonymousProfile)
        assert profile.is_anonymous() is True
        assert isinstance(AnonymousClient(), DirectClient)

    def test_anonymous_profiles_are_not_shared(self):
        client = AnonymousClient()
        profile = client.get_user_profile()
        profile.add_role("admin")

        assert profile is not ANONYMOUS_PROFILE
        assert client.get_user_profile().roles == set()
        assert ANONYMOUS_PROFILE.roles == set()

    def test_callback_url_propagation(self):
        explicit = IndirectClient("CasClient", callback_url="https://app.example.com/cas")
        inherited = IndirectClient("OidcClient")

        clients = Clients([explicit, inherited], callback_url="https://app.example.com/callback")

        assert explicit.callback_url == "https://app.example.com/cas"
        assert inherited.callback_url == "https://app.example.com/callback"
        assert len(clients) == 2

    def test_find_client(self, indirect_client, direct_client):
        clients = Clients([indirect_client, direct_client])
        assert clients.find_client(" headerclient ") is direct_client
        assert clients.find_client("missing") is None
        assert list(clients) == [indirect_client, direct_client]


class TestProfiles:
    """Test user profiles"""

    def test_anonymous_profile(self):
        assert ANONYMOUS_PROFILE.is_anonymous() is True
        assert ANONYMOUS_PROFILE.id == "anonymous"
        assert UserProfile(id="jdoe").is_anonymous() is False

    def test_roles_permissions_attributes(self):
        profile = UserProfile(id="jdoe")
        profile.add_role("user")
        profile.add_roles(["admin", "auditor"])
        profile.add_permission("read")
        profile.add_attribute("email", "jdoe@example.com")
        profile.add_attribute("ignored", None)

        assert profile.roles == {"user", "admin", "auditor"}
        assert profile.permissions == {"read"}
        assert profile.get_attribute("email") == "jdoe@example.com"
        assert profile.get_attribute("ignored", "default") == "default"

    def test_dict_round_trip(self):
        profile = UserProfile(id="jdoe", client_name="SAML2Client", roles={"b", "a"}, remembered=True)
        data = profile.to_dict()

        assert data["roles"] == ["a", "b"]
        assert UserProfile.from_dict(data) == profile

    def test_anonymous_from_dict(self):
        assert isinstance(UserProfile.from_dict(ANONYMOUS_PROFILE.to_dict()), AnonymousProfile)
