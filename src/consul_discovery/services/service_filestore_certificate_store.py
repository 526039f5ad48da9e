# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Filestore-backed certificate store.

Stored artifacts live under a filestore root laid out as::

    <root>/<partition>_d/<category>_d/:<partition>:<name>_<revision>_<n>

Each update of an artifact writes a new revision file, so more than one
file can match a name; the most recently modified one is current.
"""

from __future__ import annotations

import asyncio
import glob
import logging
import re
from pathlib import Path

from consul_discovery.utils import parse_env_str

logger = logging.getLogger(__name__)

DEFAULT_FILESTORE_ROOT: str = "/config/filestore/files_d"
ENV_FILESTORE_ROOT: str = "CONSUL_DISCOVERY_FILESTORE_ROOT"


class FilestoreCertificateStore:
    """Certificate store reading a revisioned filestore directory tree.

    Directory scans run in a worker thread so lookups never block the
    event loop.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        if root is None:
            root = parse_env_str(ENV_FILESTORE_ROOT, DEFAULT_FILESTORE_ROOT)
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    async def lookup(self, partition: str, category: str, name: str) -> Path | None:
        return await asyncio.to_thread(self._lookup_sync, partition, category, name)

    def _lookup_sync(self, partition: str, category: str, name: str) -> Path | None:
        directory = self._root / f"{partition}_d" / f"{category}_d"
        prefix = f":{partition}:{name}"
        revision_name = re.compile(re.escape(prefix) + r"_\d+_\d+")

        candidates: list[tuple[float, Path]] = []
        for path in directory.glob(glob.escape(prefix) + "_*"):
            if not revision_name.fullmatch(path.name):
                continue
            try:
                if not path.is_file():
                    continue
                candidates.append((path.stat().st_mtime, path))
            except OSError:
                # Revision removed between the scan and the stat.
                continue

        if not candidates:
            logger.debug(
                "No stored artifact matched",
                extra={
                    "partition": partition,
                    "category": category,
                    "artifact_name": name,
                },
            )
            return None

        candidates.sort(key=lambda item: item[0])
        return candidates[-1][1]


__all__: list[str] = [
    "DEFAULT_FILESTORE_ROOT",
    "ENV_FILESTORE_ROOT",
    "FilestoreCertificateStore",
]
