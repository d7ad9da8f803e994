"""
Per-request web context abstraction.
Authorizers read the request and may write response headers through it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class WebContext(ABC):
    """
    Opaque per-request bag exposing the request and response hooks.
    """

    @abstractmethod
    def get_request_method(self) -> str:
        """HTTP method of the request, upper-cased."""
        pass

    @abstractmethod
    def get_request_parameter(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_request_header(self, name: str) -> Optional[str]:
        """Header lookup, case-insensitive on the header name."""
        pass

    @abstractmethod
    def get_request_attribute(self, name: str) -> Any:
        pass

    @abstractmethod
    def set_request_attribute(self, name: str, value: Any) -> None:
        pass

    @abstractmethod
    def set_response_header(self, name: str, value: str) -> None:
        pass

    @abstractmethod
    def get_response_header(self, name: str) -> Optional[str]:
        pass


@dataclass
class SimpleWebContext(WebContext):
    """
    Web context backed by plain dictionaries.

    Useful for adapters that already parsed the request, and for tests.
    """
    method: str = "GET"
    parameters: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)
    response_headers: Dict[str, str] = field(default_factory=dict)

    def get_request_method(self) -> str:
        return self.method.upper()

    def get_request_parameter(self, name: str) -> Optional[str]:
        return self.parameters.get(name)

    def get_request_header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    def get_request_attribute(self, name: str) -> Any:
        return self.attributes.get(name)

    def set_request_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def set_response_header(self, name: str, value: str) -> None:
        self.response_headers[name] = value

    def get_response_header(self, name: str) -> Optional[str]:
        return self.response_headers.get(name)
