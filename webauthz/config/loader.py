"""
Configuration loading from mappings, JSON/YAML files and the environment.
"""

from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
import json
import logging
import os
import re

import yaml

from ..authorizer import (
    Authorizer,
    CheckHttpMethodAuthorizer,
    CsrfAuthorizer,
    CsrfTokenGenerator,
    RequireAllRolesAuthorizer,
    RequireAnyPermissionAuthorizer,
    RequireAnyRoleAuthorizer,
    find_builtin_authorizer,
)
from ..checker import DefaultAuthorizationChecker
from ..client import AnonymousClient, Client, Clients, DirectClient, IndirectClient
from ..common.utils import are_equals_ignore_case_and_trim
from ..constants import DEFAULT_CSRF_TOKEN_TTL, DefaultAuthorizers
from ..errors import ConfigurationError, ErrorCode
from ..metrics import DecisionMetrics, MetricConfig
from .config import Config


logger = logging.getLogger(__name__)

ENV_PREFIX = "WEBAUTHZ_"


def get_config_value(key: str, default: Any = None, env_prefix: str = ENV_PREFIX) -> Any:
    """Value of ``{env_prefix}{KEY}`` in the environment, else ``default``."""
    return os.environ.get(f"{env_prefix}{key.upper()}", default)


_DURATION_UNITS = {'s': 'seconds', 'm': 'minutes', 'h': 'hours', 'd': 'days'}


def parse_duration_string(duration_str: str) -> timedelta:
    """
    Parse a duration such as '30s', '5m', '4h' or '1d'.

    Raises:
        ConfigurationError: If the value is not a duration string
    """
    match = None
    if isinstance(duration_str, str):
        match = re.match(r'^(\d+(?:\.\d+)?)\s*([smhd])$', duration_str.strip().lower())
    if not match:
        raise ConfigurationError(f"Invalid duration: {duration_str!r}", name="csrf.ttl",
                                 code=ErrorCode.INVALID_CONFIGURATION)
    value, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: float(value)})


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext == '.json':
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ConfigurationError(
                f"Unsupported configuration file format: {file_ext}",
                code=ErrorCode.INVALID_CONFIGURATION
            )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {file_path}",
            code=ErrorCode.INVALID_CONFIGURATION
        )
    return data


def configure_logging(level: Union[str, int]) -> None:
    """
    Apply the configured level (a name such as 'DEBUG' or a number) to the
    webauthz loggers. Handlers are left to the application.
    """
    numeric_level = None
    if isinstance(level, int) and not isinstance(level, bool):
        numeric_level = level
    elif isinstance(level, str):
        name = level.strip().upper()
        numeric_level = int(name) if name.isdigit() else logging.getLevelName(name)
    if not isinstance(numeric_level, int) or numeric_level < 0:
        raise ConfigurationError(f"Invalid log level: {level!r}", name="log_level",
                                 code=ErrorCode.INVALID_CONFIGURATION)
    logging.getLogger("webauthz").setLevel(numeric_level)


def _string_list(settings: Dict[str, Any], key: str) -> List[str]:
    value = settings.get(key, [])
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return list(value)


def _csrf_authorizer(settings: Dict[str, Any]) -> Authorizer:
    return CsrfAuthorizer(
        only_check_post_request=settings.get('only_check_post_request', True)
    )


AUTHORIZER_FACTORIES: Dict[str, Callable[[Dict[str, Any]], Authorizer]] = {
    'requireAnyRole': lambda settings: RequireAnyRoleAuthorizer(_string_list(settings, 'roles')),
    'requireAllRoles': lambda settings: RequireAllRolesAuthorizer(_string_list(settings, 'roles')),
    'requireAnyPermission': lambda settings: RequireAnyPermissionAuthorizer(_string_list(settings, 'permissions')),
    'checkHttpMethod': lambda settings: CheckHttpMethodAuthorizer(_string_list(settings, 'methods')),
    DefaultAuthorizers.CSRF_CHECK: _csrf_authorizer,
}

CLIENT_TYPES = {
    'indirect': IndirectClient,
    'direct': DirectClient,
    'anonymous': AnonymousClient,
}


class ConfigLoader:
    """
    Builds a Config from plain data.

    Example (YAML)::

        log_level: DEBUG
        callback_url: https://app.example.com/callback
        csrf:
          ttl: 4h
        clients:
          - name: SAML2Client
            type: indirect
        authorizers:
          admin:
            type: requireAnyRole
            roles: [admin]
    """

    def __init__(self, env_prefix: str = ENV_PREFIX):
        self.env_prefix = env_prefix

    def load(self, file_path: str) -> Config:
        config = self.from_dict(load_config_file(file_path))
        logger.info("Loaded configuration from %s", file_path)
        return config

    def from_env(self) -> Config:
        """Create configuration from environment variables only."""
        return self.from_dict({})

    def from_dict(self, data: Dict[str, Any]) -> Config:
        log_level = get_config_value('log_level', data.get('log_level', 'INFO'),
                                     env_prefix=self.env_prefix)
        configure_logging(log_level)

        csrf_section = data.get('csrf', {}) or {}
        ttl_value = get_config_value('csrf_token_ttl', csrf_section.get('ttl'),
                                     env_prefix=self.env_prefix)
        ttl = parse_duration_string(ttl_value) if ttl_value else DEFAULT_CSRF_TOKEN_TTL

        metrics_section = data.get('metrics', {}) or {}
        metrics = None
        if metrics_section.get('enabled', False):
            metrics = DecisionMetrics(MetricConfig(
                enabled=True,
                namespace=metrics_section.get('namespace', 'webauthz')
            ))

        return Config(
            clients=self._build_clients(data.get('clients', []) or [], data.get('callback_url')),
            authorizers=self._build_authorizers(data.get('authorizers', {}) or {}),
            authorization_checker=DefaultAuthorizationChecker(metrics=metrics),
            csrf_token_generator=CsrfTokenGenerator(ttl=ttl),
            log_level=log_level
        )

    def _build_clients(self, entries: List[Dict[str, Any]], callback_url: Optional[str]) -> Clients:
        clients = Clients(callback_url=callback_url)
        for entry in entries:
            client_type = str(entry.get('type', '')).strip().lower()
            client_class = CLIENT_TYPES.get(client_type)
            if client_class is None:
                raise ConfigurationError(f"Unknown client type: '{client_type}'", name=client_type,
                                         code=ErrorCode.INVALID_CONFIGURATION)
            client: Client
            if client_class is IndirectClient:
                client = IndirectClient(entry.get('name'), entry.get('callback_url'))
            else:
                client = client_class(entry.get('name'))
            clients.add_client(client)
        return clients

    def _build_authorizers(self, entries: Dict[str, Any]) -> Dict[str, Authorizer]:
        authorizers: Dict[str, Authorizer] = {}
        for name, settings in entries.items():
            if isinstance(settings, str):
                settings = {'type': settings}
            authorizers[name] = self._build_authorizer(name, settings or {})
        return authorizers

    @staticmethod
    def _build_authorizer(name: str, settings: Dict[str, Any]) -> Authorizer:
        authorizer_type = str(settings.get('type', '')).strip()
        for factory_type, factory in AUTHORIZER_FACTORIES.items():
            if are_equals_ignore_case_and_trim(factory_type, authorizer_type):
                return factory(settings)
        builtin = find_builtin_authorizer(authorizer_type)
        if builtin is not None:
            return builtin
        raise ConfigurationError(
            f"Unknown type '{authorizer_type}' for authorizer '{name}'", name=name,
            code=ErrorCode.INVALID_CONFIGURATION
        )


def load_config(file_path: str) -> Config:
    """Load a Config from a JSON or YAML file."""
    return ConfigLoader().load(file_path)
