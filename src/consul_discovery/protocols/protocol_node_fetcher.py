# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the generic node fetcher.

The fetcher performs the network round trip, parses the JSON catalog
response and maps each element to a raw node record using the property
paths it was initialized with. Provider adapters sit on top of it.

Error Handling:
    Implementations raise NodeFetchError subclasses on failure and never
    retry; retry policy belongs to the caller of the provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from consul_discovery.models import (
        ModelPropertyPaths,
        ModelRawNodeRecord,
        ModelRequestOptions,
    )


@runtime_checkable
class ProtocolNodeFetcher(Protocol):
    """Fetch-and-map contract used by provider adapters."""

    async def init(self, property_paths: ModelPropertyPaths) -> None:
        """Record how response elements map to node records."""
        ...

    async def fetch_nodes(
        self,
        uri: str,
        options: ModelRequestOptions | None = None,
    ) -> list[ModelRawNodeRecord]:
        """Fetch ``uri`` and return one raw record per listed node, in order."""
        ...


__all__ = ["ProtocolNodeFetcher"]
