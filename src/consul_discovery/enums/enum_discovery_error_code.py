# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery error code enumeration."""

from enum import Enum


class EnumDiscoveryErrorCode(str, Enum):
    """Machine-readable classification attached to every DiscoveryError."""

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    CONNECTION_ERROR = "connection_error"
    HTTP_STATUS_ERROR = "http_status_error"
    TIMEOUT_ERROR = "timeout_error"
    PROTOCOL_ERROR = "protocol_error"


__all__ = ["EnumDiscoveryErrorCode"]
