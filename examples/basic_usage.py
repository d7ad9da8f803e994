"""
Basic webauthz usage example.

This example demonstrates the fundamental operations:
- Building a configuration with clients and named authorizers
- Checking requests with default, modified and explicit expressions
- Protecting a POST request with the CSRF check
"""

import logging

from webauthz import Config, IndirectClient, SimpleWebContext, UserProfile
from webauthz.authorizer import RequireAnyRoleAuthorizer
from webauthz.constants import CSRF_TOKEN
from webauthz.errors import ConfigurationError


def basic_example():
    """Demonstrate basic webauthz usage"""
    print("Basic webauthz Example")
    print("=" * 30)

    # 1. Create configuration
    config = Config(clients=[IndirectClient("SAML2Client", callback_url="https://app.example.com/callback")])
    config.add_authorizer("admin", RequireAnyRoleAuthorizer(["admin"]))
    print("✓ Created configuration")

    user = UserProfile(id="jdoe", roles={"user"})
    admin = UserProfile(id="root", roles={"admin"})

    # 2. Defaults: csrfCheck (indirect client) and isAuthenticated
    context = SimpleWebContext(method="GET")
    print(f"✓ Default check for jdoe: {config.is_authorized(context, [user])}")

    # 3. Add an authorizer to the defaults
    print(f"✓ '+admin' for jdoe: {config.is_authorized(context, [user], '+admin')}")
    print(f"✓ '+admin' for root: {config.is_authorized(context, [admin], '+admin')}")

    # 4. POST requests must send back the CSRF token
    token = config.csrf_token_generator.get(context, config.session_store)
    post = SimpleWebContext(method="POST", attributes=dict(context.attributes))
    print(f"✓ POST without token: {config.is_authorized(post, [user])}")
    post.parameters[CSRF_TOKEN] = token
    print(f"✓ POST with token: {config.is_authorized(post, [user])}")

    # 5. Unknown names are configuration errors, not denials
    try:
        config.is_authorized(context, [user], "superuser")
    except ConfigurationError as e:
        print(f"✓ Configuration error: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    basic_example()
