# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types touched by the discovery provider.
Used for error context and log records.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used by the discovery provider.

    Attributes:
        HTTP: HTTP/REST transport to the node catalog
        CONSUL: Consul catalog API (token-authenticated HTTP)
        CERT_STORE: Local certificate filestore
    """

    HTTP = "http"
    CONSUL = "consul"
    CERT_STORE = "cert_store"


__all__ = ["EnumInfraTransportType"]
