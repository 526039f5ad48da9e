# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Catalog responses and transport errors can echo request headers or
certificate material back to us. Anything that ends up in an exception
message or a log record goes through these helpers first.

Example:
    >>> sanitize_error_string("ACL not found for X-Consul-Token abc123")
    '[REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

# Checked case-insensitively. A match redacts the whole message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "secret",
    "token",
    "credential",
    "authorization",
    "bearer",
    "api_key",
    "apikey",
    "api-key",
    "private_key",
    "private-key",
    # Certificate and key material
    "-----begin",
    "-----end",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        The string unchanged, truncated, or replaced by a redaction marker.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def sanitize_error_message(exception: BaseException, max_length: int = 500) -> str:
    """Sanitize an exception as ``"{ExceptionType}: {message}"``."""
    exception_type = type(exception).__name__
    sanitized = sanitize_error_string(str(exception), max_length=max_length)
    if not sanitized:
        return exception_type
    return f"{exception_type}: {sanitized}"


__all__ = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
