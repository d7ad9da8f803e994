"""
Tests for authorizer expression resolution and conjunctive checking.
"""

import logging

import pytest

from webauthz.authorizer import (
    CSRF_AUTHORIZER,
    IS_ANONYMOUS_AUTHORIZER,
    IS_AUTHENTICATED_AUTHORIZER,
    IS_FULLY_AUTHENTICATED_AUTHORIZER,
    IS_REMEMBERED_AUTHORIZER,
    BUILTIN_AUTHORIZERS,
    RequireAnyRoleAuthorizer,
)
from webauthz.checker import DefaultAuthorizationChecker, is_authorized
from webauthz.errors import ConfigurationError, NullInputError, PreconditionError


class TestDefaultAuthorizers:
    """Test the authorizers applied for a blank expression"""

    def test_no_clients(self, checker):
        """No indirect client and no anonymous client: only isAuthenticated"""
        assert checker.compute_authorizers("", {}, []) == [IS_AUTHENTICATED_AUTHORIZER]

    def test_indirect_client(self, checker, indirect_client):
        authorizers = checker.compute_authorizers(None, {}, [indirect_client])
        assert authorizers == [CSRF_AUTHORIZER, IS_AUTHENTICATED_AUTHORIZER]

    def test_anonymous_client(self, checker, anonymous_client, context, session_store, profiles):
        authorizers = checker.compute_authorizers("   ", {}, [anonymous_client])
        assert authorizers == []
        assert checker.check_authorizers(context, session_store, profiles, authorizers) is True

    def test_direct_client_is_not_indirect(self, checker, direct_client):
        assert checker.compute_authorizers("", {}, [direct_client]) == [IS_AUTHENTICATED_AUTHORIZER]

    def test_indirect_and_anonymous_clients(self, checker, indirect_client, anonymous_client):
        authorizers = checker.compute_authorizers("", {}, [indirect_client, anonymous_client])
        assert authorizers == [CSRF_AUTHORIZER]

    def test_none_clients_are_treated_as_empty(self, checker):
        assert checker.compute_authorizers("", {}, None) == [IS_AUTHENTICATED_AUTHORIZER]

    def test_registry_overrides_default_names(self, checker, indirect_client, counting_authorizer):
        custom_csrf = counting_authorizer()
        custom_auth = counting_authorizer()
        registry = {" CSRFCHECK ": custom_csrf, "isauthenticated": custom_auth}

        authorizers = checker.compute_authorizers("", registry, [indirect_client])

        assert authorizers == [custom_csrf, custom_auth]

    def test_blank_expression_requires_registry(self, checker):
        with pytest.raises(NullInputError):
            checker.compute_authorizers("", None, [])


class TestModifierExpressions:
    """Test expressions adding to or removing from the defaults"""

    def test_add_custom_authorizer(self, checker, indirect_client, counting_authorizer):
        custom = counting_authorizer()
        authorizers = checker.compute_authorizers("+custom", {"custom": custom}, [indirect_client])
        assert authorizers == [CSRF_AUTHORIZER, IS_AUTHENTICATED_AUTHORIZER, custom]

    def test_remove_csrf_check(self, checker, indirect_client):
        authorizers = checker.compute_authorizers("-csrfCheck", {}, [indirect_client])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER]

    def test_add_and_remove(self, checker, indirect_client, counting_authorizer):
        first = counting_authorizer()
        second = counting_authorizer()
        registry = {"a": first, "b": second}

        authorizers = checker.compute_authorizers(
            "+a,b-csrfCheck,isAuthenticated", registry, [indirect_client]
        )

        assert authorizers == [first, second]

    def test_add_without_remove_keeps_defaults(self, checker, counting_authorizer):
        custom = counting_authorizer()
        authorizers = checker.compute_authorizers("+custom", {"custom": custom}, [])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER, custom]

    def test_remove_without_add_appends_nothing(self, checker, indirect_client):
        authorizers = checker.compute_authorizers("-isAuthenticated", {}, [indirect_client])
        assert authorizers == [CSRF_AUTHORIZER]

    def test_leading_whitespace_before_marker(self, checker, indirect_client):
        authorizers = checker.compute_authorizers("   -csrfCheck", {}, [indirect_client])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER]

    def test_duplicate_additions_are_kept(self, checker, counting_authorizer):
        custom = counting_authorizer()
        authorizers = checker.compute_authorizers("+custom,custom", {"custom": custom}, [])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER, custom, custom]

    def test_removing_absent_builtin_is_noop(self, checker):
        authorizers = checker.compute_authorizers("-isRemembered", {}, [])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER]

    def test_removal_only_resolves_builtins(self, checker, counting_authorizer):
        custom = counting_authorizer()
        with pytest.raises(ConfigurationError) as exc_info:
            checker.compute_authorizers("-custom", {"custom": custom}, [])
        assert "custom" in exc_info.value.message

    def test_removal_ignores_registry_override(self, checker, indirect_client, counting_authorizer):
        """A registry entry shadowing csrfCheck is not the built-in, so it stays"""
        custom_csrf = counting_authorizer()
        authorizers = checker.compute_authorizers(
            "-csrfCheck", {"csrfCheck": custom_csrf}, [indirect_client]
        )
        assert authorizers == [custom_csrf, IS_AUTHENTICATED_AUTHORIZER]

    def test_none_in_modifier_lists(self, checker, indirect_client):
        authorizers = checker.compute_authorizers("+none-none", {}, [indirect_client])
        assert authorizers == [CSRF_AUTHORIZER, IS_AUTHENTICATED_AUTHORIZER]

    def test_unknown_added_name(self, checker):
        with pytest.raises(ConfigurationError) as exc_info:
            checker.compute_authorizers("+unknown", {}, [])
        assert exc_info.value.name == "unknown"

    def test_add_requires_registry(self, checker, anonymous_client):
        with pytest.raises(NullInputError) as exc_info:
            checker.compute_authorizers("+isRemembered", None, [anonymous_client])
        assert exc_info.value.argument == "authorizers"

    def test_remove_tolerates_empty_registry(self, checker, anonymous_client):
        assert checker.compute_authorizers("-isAuthenticated", {}, [anonymous_client]) == []


class TestExplicitExpressions:
    """Test explicit authorizer lists"""

    def test_none_gives_empty_list(self, checker, indirect_client, context, session_store, profiles):
        authorizers = checker.compute_authorizers("none", {}, [indirect_client])
        assert authorizers == []
        assert checker.check_authorizers(context, session_store, profiles, authorizers) is True

    def test_none_is_case_insensitive(self, checker):
        assert checker.compute_authorizers(" NONE ", {}, []) == []

    def test_unknown_name(self, checker):
        with pytest.raises(ConfigurationError) as exc_info:
            checker.compute_authorizers("unknown", {}, [])
        assert "'unknown'" in str(exc_info.value)

    def test_mixed_case_and_whitespace(self, checker):
        authorizers = checker.compute_authorizers(" IsAuthenticated , isRemembered ", {}, [])
        assert authorizers == [IS_AUTHENTICATED_AUTHORIZER, IS_REMEMBERED_AUTHORIZER]

    def test_explicit_list_skips_defaults(self, checker, indirect_client, counting_authorizer):
        custom = counting_authorizer()
        authorizers = checker.compute_authorizers("custom", {"custom": custom}, [indirect_client])
        assert authorizers == [custom]

    def test_registry_wins_over_builtin(self, checker, counting_authorizer):
        custom = counting_authorizer()
        authorizers = checker.compute_authorizers("isAnonymous", {"ISANONYMOUS": custom}, [])
        assert authorizers == [custom]

    def test_first_matching_registry_entry_wins(self, checker, counting_authorizer):
        first = counting_authorizer()
        second = counting_authorizer()
        authorizers = checker.compute_authorizers("admin", {"Admin": first, " admin": second}, [])
        assert authorizers == [first]

    def test_order_is_preserved(self, checker):
        authorizers = checker.compute_authorizers(
            "isRemembered,isAnonymous,isFullyAuthenticated,csrfCheck", {}, []
        )
        assert authorizers == [
            IS_REMEMBERED_AUTHORIZER,
            IS_ANONYMOUS_AUTHORIZER,
            IS_FULLY_AUTHENTICATED_AUTHORIZER,
            CSRF_AUTHORIZER,
        ]

    def test_empty_element_is_rejected(self, checker):
        with pytest.raises(ConfigurationError):
            checker.compute_authorizers("isAuthenticated,,isRemembered", {}, [])

    def test_explicit_requires_registry(self, checker):
        with pytest.raises(NullInputError):
            checker.compute_authorizers("isAuthenticated", None, [])

    def test_joined_registry_keys_resolve_to_same_authorizers(self, checker, counting_authorizer):
        registry = {"admin": counting_authorizer(), "auditor": counting_authorizer()}
        expression = ",".join(registry.keys())
        assert checker.compute_authorizers(expression, registry, []) == list(registry.values())

    def test_every_builtin_name_resolves(self, checker):
        for name, authorizer in BUILTIN_AUTHORIZERS:
            assert checker.compute_authorizers(name.upper(), {}, []) == [authorizer]


class TestCheckAuthorizers:
    """Test conjunctive evaluation"""

    def test_empty_list_is_authorized(self, checker, context, session_store, profiles):
        assert checker.check_authorizers(context, session_store, profiles, []) is True

    def test_all_satisfied(self, checker, context, session_store, profiles, counting_authorizer):
        authorizers = [counting_authorizer(), counting_authorizer()]
        assert checker.check_authorizers(context, session_store, profiles, authorizers) is True
        assert [a.calls for a in authorizers] == [1, 1]

    def test_stops_at_first_denial(self, checker, context, session_store, profiles, counting_authorizer):
        first = counting_authorizer(True)
        denying = counting_authorizer(False)
        last = counting_authorizer(True)

        result = checker.check_authorizers(context, session_store, profiles, [first, denying, last])

        assert result is False
        assert first.calls == 1
        assert denying.calls == 1
        assert last.calls == 0

    def test_duplicates_are_invoked_twice(self, checker, context, session_store, profiles,
                                          counting_authorizer):
        custom = counting_authorizer()
        checker.check_authorizers(context, session_store, profiles, [custom, custom])
        assert custom.calls == 2

    def test_empty_profiles(self, checker, context, session_store):
        with pytest.raises(PreconditionError):
            checker.check_authorizers(context, session_store, [], [])

    def test_none_profiles(self, checker, context, session_store):
        with pytest.raises(PreconditionError):
            checker.check_authorizers(context, session_store, None, [])

    def test_authorizer_errors_propagate(self, checker, context, session_store, profiles,
                                         failing_authorizer):
        with pytest.raises(RuntimeError):
            checker.check_authorizers(context, session_store, profiles, [failing_authorizer])

    def test_logs_each_decision(self, checker, context, session_store, profiles,
                                counting_authorizer, caplog):
        with caplog.at_level(logging.DEBUG, logger="webauthz.checker"):
            checker.check_authorizers(context, session_store, profiles, [counting_authorizer(False)])
        assert "Checking authorizer" in caplog.text
        assert "False" in caplog.text


class TestIsAuthorized:
    """Test the full check from expression to decision"""

    def test_default_check_allows_authenticated_user(self, checker, context, session_store,
                                                     profiles, direct_client):
        assert checker.is_authorized(context, session_store, profiles, "", {}, [direct_client]) is True

    def test_default_check_denies_anonymous_user(self, checker, context, session_store,
                                                 anonymous_profiles, direct_client):
        result = checker.is_authorized(context, session_store, anonymous_profiles, "", {}, [direct_client])
        assert result is False

    def test_custom_role_authorizer(self, checker, context, session_store, profiles):
        registry = {"admin": RequireAnyRoleAuthorizer(["admin"]), "user": RequireAnyRoleAuthorizer(["user"])}
        assert checker.is_authorized(context, session_store, profiles, "+user", registry, []) is True
        assert checker.is_authorized(context, session_store, profiles, "+admin", registry, []) is False

    def test_empty_profiles_regardless_of_expression(self, checker, context, session_store):
        for expression in ["", "none", "+isRemembered", "unknown"]:
            with pytest.raises(PreconditionError):
                checker.is_authorized(context, session_store, [], expression, {}, [])

    def test_configuration_error_propagates(self, checker, context, session_store, profiles,
                                            counting_authorizer):
        custom = counting_authorizer()
        with pytest.raises(ConfigurationError):
            checker.is_authorized(context, session_store, profiles, "custom,unknown",
                                  {"custom": custom}, [])
        assert custom.calls == 0

    def test_stops_at_first_denial(self, checker, context, session_store, profiles,
                                   counting_authorizer):
        denying = counting_authorizer(False)
        after = counting_authorizer(True)
        registry = {"deny": denying, "after": after}

        assert checker.is_authorized(context, session_store, profiles, "deny,after", registry, []) is False
        assert after.calls == 0

    def test_module_level_function(self, context, session_store, profiles, anonymous_client):
        assert is_authorized(context, session_store, profiles, None, {}, [anonymous_client]) is True

    def test_subclass_can_override_defaults(self, context, session_store, anonymous_profiles):
        class AllowAnonymousChecker(DefaultAuthorizationChecker):
            def compute_default_authorizers(self, clients, authorizers):
                return []

        checker = AllowAnonymousChecker()
        assert checker.is_authorized(context, session_store, anonymous_profiles, "", {}, []) is True
