# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for the discovery provider and its collaborators."""

from consul_discovery.protocols.protocol_certificate_store import (
    ProtocolCertificateStore,
)
from consul_discovery.protocols.protocol_node_fetcher import ProtocolNodeFetcher
from consul_discovery.protocols.protocol_node_provider import ProtocolNodeProvider

__all__: list[str] = [
    "ProtocolCertificateStore",
    "ProtocolNodeFetcher",
    "ProtocolNodeProvider",
]
