# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the discovery provider.

    - util_env_parsing: Type-safe environment variable parsing with validation
    - util_error_sanitization: Error message sanitization for logs and errors
    - util_property_path: Dotted property-path lookup into JSON objects
"""

from consul_discovery.utils.util_env_parsing import parse_env_float, parse_env_str
from consul_discovery.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)
from consul_discovery.utils.util_property_path import get_property

__all__: list[str] = [
    "parse_env_float",
    "parse_env_str",
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
    "get_property",
]
