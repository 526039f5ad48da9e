# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    DiscoveryError: Base discovery error class
    ConfigurationError: Invalid provider configuration
    TrustMaterialError: Base for trust-bundle resolution failures
    TrustMaterialNotFoundError: Certificate missing from the store
    TrustMaterialReadError: Certificate located but unreadable
    NodeFetchError: Node catalog request failed
    NodeFetchTimeoutError: Node catalog request timed out
    NodeFetchProtocolError: Node catalog response is not JSON

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - The Consul ACL token or the base64 secret it was decoded from
        - Certificate or key content
        - Raw response bodies (pass them through sanitize_error_string)

    SAFE to include:
        - Store paths (e.g., "/Common/consul-ca.crt")
        - Configuration field names (e.g., "caBundle")
        - Catalog URIs, HTTP status codes, correlation IDs
"""

from consul_discovery.errors.discovery_errors import (
    ConfigurationError,
    DiscoveryError,
    NodeFetchError,
    NodeFetchProtocolError,
    NodeFetchTimeoutError,
    TrustMaterialError,
    TrustMaterialNotFoundError,
    TrustMaterialReadError,
)
from consul_discovery.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Error classes
    "DiscoveryError",
    "ConfigurationError",
    "TrustMaterialError",
    "TrustMaterialNotFoundError",
    "TrustMaterialReadError",
    "NodeFetchError",
    "NodeFetchTimeoutError",
    "NodeFetchProtocolError",
]
