# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package config assembles clients, named authorizers and collaborators,
and loads them from JSON, YAML or the environment.
"""

from .config import Config

from .loader import (
    ConfigLoader,
    configure_logging,
    get_config_value,
    load_config,
    load_config_file,
    parse_duration_string
)

__all__ = [
    'Config',
    'ConfigLoader',
    'configure_logging',
    'get_config_value',
    'load_config',
    'load_config_file',
    'parse_duration_string'
]
