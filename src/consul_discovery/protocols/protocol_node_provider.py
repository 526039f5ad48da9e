# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for node discovery providers.

A provider is initialized once with its provider options and then serves
any number of independent ``fetch_nodes`` calls. Configuration written by
``init`` is read-only afterwards, so concurrent calls need no locking.

Lifecycle:
    - Not initialized: calling ``fetch_nodes`` is a precondition violation
    - Initialized: both methods usable, calls repeatable
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from consul_discovery.models import ModelDiscoveredNode, ModelProviderOptions


@runtime_checkable
class ProtocolNodeProvider(Protocol):
    """Discovery provider contract."""

    async def init(
        self,
        provider_options: Mapping[str, object] | ModelProviderOptions | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """Validate and record provider options.

        Raises:
            ConfigurationError: If the options are invalid.
            TrustMaterialError: If a configured trust bundle cannot be resolved.
        """
        ...

    async def fetch_nodes(
        self,
        uri: str,
        options: Mapping[str, object] | None = None,
    ) -> list[ModelDiscoveredNode]:
        """Return the normalized nodes listed at ``uri``, in listing order."""
        ...


__all__ = ["ProtocolNodeProvider"]
