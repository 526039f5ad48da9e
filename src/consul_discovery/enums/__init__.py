# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the consul_discovery package."""

from consul_discovery.enums.enum_discovery_error_code import EnumDiscoveryErrorCode
from consul_discovery.enums.enum_infra_transport_type import EnumInfraTransportType

__all__: list[str] = [
    "EnumDiscoveryErrorCode",
    "EnumInfraTransportType",
]
