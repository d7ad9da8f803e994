# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error handling for webauthz.

Configuration and programming errors are raised as exceptions. A denied
authorization is never an error: it is a plain ``False`` decision.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Structured error codes."""

    UNKNOWN_AUTHORIZER = "unknown_authorizer"
    INVALID_CONFIGURATION = "invalid_configuration"
    MISSING_PROFILES = "missing_profiles"
    MISSING_PARAMETER = "missing_parameter"


class ErrorSource(Enum):
    """Sources where errors can originate."""

    CONFIGURATION = "configuration"
    CHECKER = "checker"
    VALIDATION = "validation"


class WebAuthzError(Exception):
    """
    Base exception class for all webauthz errors.

    Carries an error code, the source that raised it and optional
    details for callers that render errors.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        source: ErrorSource,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.source = source
        self.details = details or {}

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "error": self.code.value,
            "error_description": self.message,
            "error_source": self.source.value,
        }

        if self.details:
            result["details"] = self.details

        return result


class ConfigurationError(WebAuthzError):
    """An authorizer name or a configuration entry cannot be resolved."""

    def __init__(self, message: str, name: Optional[str] = None,
                 code: ErrorCode = ErrorCode.UNKNOWN_AUTHORIZER):
        details = {"name": name} if name is not None else None
        super().__init__(
            code=code,
            message=message,
            source=ErrorSource.CONFIGURATION,
            details=details
        )
        self.name = name


class PreconditionError(WebAuthzError):
    """Authorizations were checked without any authenticated profile."""

    def __init__(self, message: str = "profiles must not be null or empty"):
        super().__init__(
            code=ErrorCode.MISSING_PROFILES,
            message=message,
            source=ErrorSource.CHECKER
        )


class NullInputError(WebAuthzError):
    """A required argument is None."""

    def __init__(self, argument: str):
        super().__init__(
            code=ErrorCode.MISSING_PARAMETER,
            message=f"{argument} cannot be null",
            source=ErrorSource.VALIDATION,
            details={"argument": argument}
        )
        self.argument = argument


__all__ = [
    'ErrorCode',
    'ErrorSource',
    'WebAuthzError',
    'ConfigurationError',
    'PreconditionError',
    'NullInputError',
]
