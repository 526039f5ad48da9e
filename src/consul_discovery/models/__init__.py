# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the discovery provider."""

from consul_discovery.models.model_node_records import (
    ModelDiscoveredNode,
    ModelNodeAddresses,
    ModelRawNodeRecord,
)
from consul_discovery.models.model_property_paths import ModelPropertyPaths
from consul_discovery.models.model_provider_options import ModelProviderOptions
from consul_discovery.models.model_request_options import ModelRequestOptions

__all__: list[str] = [
    "ModelDiscoveredNode",
    "ModelNodeAddresses",
    "ModelPropertyPaths",
    "ModelProviderOptions",
    "ModelRawNodeRecord",
    "ModelRequestOptions",
]
