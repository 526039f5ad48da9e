# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for local certificate stores.

A certificate store addresses stored artifacts by partition, category and
name and hands back the filesystem location of the stored copy. Reading the
bytes is left to the caller (see TrustMaterialResolver).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolCertificateStore(Protocol):
    """Lookup contract for stored certificates.

    Example:
        ```python
        class InMemoryCertificateStore:
            def __init__(self, entries: dict[tuple[str, str, str], Path]) -> None:
                self._entries = entries

            async def lookup(
                self, partition: str, category: str, name: str
            ) -> Path | None:
                return self._entries.get((partition, category, name))
        ```
    """

    async def lookup(self, partition: str, category: str, name: str) -> Path | None:
        """Return the location of the stored artifact, or None if absent.

        Args:
            partition: Storage partition (e.g. ``"Common"``)
            category: Artifact category (``"certificate"`` for trust bundles)
            name: Artifact name within the partition
        """
        ...


__all__ = ["ProtocolCertificateStore"]
