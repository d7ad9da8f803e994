"""
CSRF protection: token generation and the csrfCheck authorizer.
"""

from datetime import datetime, timedelta
from typing import List, Optional
import hmac
import logging

from ..common.utils import generate_secure_token, get_current_time
from ..constants import (
    CSRF_CHECKED_METHODS, CSRF_TOKEN, CSRF_TOKEN_EXPIRATION_DATE, CSRF_TOKEN_HEADER,
    DEFAULT_CSRF_TOKEN_TTL
)
from ..context import SessionStore, WebContext
from ..profile import UserProfile
from .types import Authorizer


logger = logging.getLogger(__name__)


class CsrfTokenGenerator:
    """
    Generates the CSRF token of a session.

    The token and its expiration date are kept in the session; the token
    is also exposed as a request attribute and a response header so that
    views and clients can send it back.
    """

    def __init__(self, ttl: timedelta = DEFAULT_CSRF_TOKEN_TTL,
                 header_name: str = CSRF_TOKEN_HEADER):
        self.ttl = ttl
        self.header_name = header_name

    def get(self, context: WebContext, session_store: SessionStore) -> str:
        now = get_current_time()
        token = session_store.get(context, CSRF_TOKEN)
        expiration_date = session_store.get(context, CSRF_TOKEN_EXPIRATION_DATE)
        if not token or expiration_date is None or now > expiration_date:
            token = generate_secure_token()
            logger.debug("Generated new CSRF token")
        session_store.set(context, CSRF_TOKEN, token)
        session_store.set(context, CSRF_TOKEN_EXPIRATION_DATE, now + self.ttl)
        context.set_request_attribute(CSRF_TOKEN, token)
        context.set_response_header(self.header_name, token)
        return token


class CsrfAuthorizer(Authorizer):
    """
    Checks that the token sent with the request matches the session token.

    By default only state-changing requests (POST, PUT, PATCH, DELETE)
    are checked; with ``only_check_post_request=False`` every request is.
    """

    def __init__(self, parameter_name: str = CSRF_TOKEN,
                 header_name: str = CSRF_TOKEN_HEADER,
                 only_check_post_request: bool = True):
        self.parameter_name = parameter_name
        self.header_name = header_name
        self.only_check_post_request = only_check_post_request

    def is_authorized(self, context: WebContext, session_store: SessionStore,
                      profiles: List[UserProfile]) -> bool:
        check_request = (not self.only_check_post_request
                         or context.get_request_method() in CSRF_CHECKED_METHODS)
        if not check_request:
            return True

        session_token = session_store.get(context, CSRF_TOKEN)
        if not session_token:
            return False

        expiration_date: Optional[datetime] = session_store.get(context, CSRF_TOKEN_EXPIRATION_DATE)
        if expiration_date is not None and get_current_time() > expiration_date:
            session_store.set(context, CSRF_TOKEN, None)
            session_store.set(context, CSRF_TOKEN_EXPIRATION_DATE, None)
            return False

        parameter_token = context.get_request_parameter(self.parameter_name)
        header_token = context.get_request_header(self.header_name)
        return (self._matches(parameter_token, session_token)
                or self._matches(header_token, session_token))

    @staticmethod
    def _matches(candidate: Optional[str], expected: str) -> bool:
        if candidate is None:
            return False
        return hmac.compare_digest(candidate.encode('utf-8'), expected.encode('utf-8'))

    def __repr__(self) -> str:
        return (f"CsrfAuthorizer(parameter_name={self.parameter_name!r}, "
                f"header_name={self.header_name!r}, "
                f"only_check_post_request={self.only_check_post_request})")
