# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul node discovery provider.

Fetches cluster members from the Consul catalog over HTTP(S), authenticating
with an ACL token and optionally verifying the server against a CA bundle
held in the local certificate store.

Key Components:
    - ConsulNodeProvider: init/fetch_nodes entry point
    - GenericNodeProvider: JSON catalog fetch and mapping (httpx)
    - TrustMaterialResolver: certificate store path to CA bundle bytes
    - Transport-aware error handling with ModelInfraErrorContext
"""

from consul_discovery.providers import ConsulNodeProvider, GenericNodeProvider

__all__: list[str] = [
    "ConsulNodeProvider",
    "GenericNodeProvider",
]
