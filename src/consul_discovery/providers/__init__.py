# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node discovery providers.

    - GenericNodeProvider: fetch and map a JSON node catalog over HTTP(S)
    - ConsulNodeProvider: Consul token, trust bundle and identity handling
      on top of GenericNodeProvider
"""

from consul_discovery.providers.provider_consul_node import (
    CA_BUNDLE_FIELD,
    CONSUL_PROPERTY_PATHS,
    CONSUL_TOKEN_HEADER,
    ConsulNodeProvider,
)
from consul_discovery.providers.provider_generic_node import (
    ENV_HTTP_TIMEOUT,
    GenericNodeProvider,
)

__all__: list[str] = [
    "CA_BUNDLE_FIELD",
    "CONSUL_PROPERTY_PATHS",
    "CONSUL_TOKEN_HEADER",
    "ConsulNodeProvider",
    "ENV_HTTP_TIMEOUT",
    "GenericNodeProvider",
]
