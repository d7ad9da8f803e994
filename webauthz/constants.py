"""
Reserved tokens and names used when resolving authorizer expressions.
"""

from datetime import timedelta


# Authorizer expression grammar
ELEMENT_SEPARATOR = ","
ADD_ELEMENT = "+"
REMOVE_ELEMENT = "-"

# CSRF token storage and transport
CSRF_TOKEN = "webauthzCsrfToken"
CSRF_TOKEN_EXPIRATION_DATE = "webauthzCsrfTokenExpirationDate"
CSRF_TOKEN_HEADER = "X-Webauthz-Csrf-Token"
DEFAULT_CSRF_TOKEN_TTL = timedelta(hours=4)
# Methods checked by the CSRF authorizer unless it checks every request
CSRF_CHECKED_METHODS = ("POST", "PUT", "PATCH", "DELETE")

# Request attribute holding the session identifier
SESSION_ID = "webauthzSessionId"


class DefaultAuthorizers:
    """Reserved authorizer names (compared case-insensitively)."""

    NONE = "none"
    CSRF_CHECK = "csrfCheck"
    IS_ANONYMOUS = "isAnonymous"
    IS_AUTHENTICATED = "isAuthenticated"
    IS_FULLY_AUTHENTICATED = "isFullyAuthenticated"
    IS_REMEMBERED = "isRemembered"
