# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for consul_discovery tests."""

from __future__ import annotations

import base64
import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from consul_discovery.models import ModelRawNodeRecord

SECRET_PLAINTEXT = "password12345"

PEM_PLACEHOLDER = (
    b"-----BEGIN CERTIFICATE-----\n"
    b"MIIBplaceholder\n"
    b"-----END CERTIFICATE-----\n"
)


def write_stored_certificate(
    root: Path,
    partition: str,
    name: str,
    revision: str = "12345_1",
    content: bytes = PEM_PLACEHOLDER,
    mtime: float | None = None,
) -> Path:
    """Write a certificate revision into a filestore tree rooted at ``root``."""
    directory = root / f"{partition}_d" / "certificate_d"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f":{partition}:{name}_{revision}"
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def write_certificate() -> Callable[..., Path]:
    """Factory writing certificate revisions into a filestore tree."""
    return write_stored_certificate


@pytest.fixture
def pem_bytes() -> bytes:
    """Certificate-shaped bytes stored by ``write_certificate`` by default."""
    return PEM_PLACEHOLDER


@pytest.fixture
def encoded_secret() -> str:
    """Base64 encoding of the test Consul token."""
    return base64.b64encode(SECRET_PLAINTEXT.encode("utf-8")).decode("ascii")


@pytest.fixture
def filestore_root(tmp_path: Path) -> Path:
    """Empty filestore root directory."""
    root = tmp_path / "files_d"
    root.mkdir()
    return root


@pytest.fixture
def mock_store() -> MagicMock:
    """Certificate store whose lookup finds nothing until configured."""
    store = MagicMock()
    store.lookup = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_fetcher() -> MagicMock:
    """Node fetcher returning an empty catalog."""
    fetcher = MagicMock()
    fetcher.init = AsyncMock(return_value=None)
    fetcher.fetch_nodes = AsyncMock(return_value=[])
    return fetcher


@pytest.fixture
def consul_raw_records() -> list[ModelRawNodeRecord]:
    """Raw records as produced for a two-node Consul catalog."""
    return [
        ModelRawNodeRecord.model_validate(
            {
                "id": {"ID": "", "Node": "test-node-1"},
                "ip": {"public": "192.0.2.47", "private": "192.0.2.17"},
            }
        ),
        ModelRawNodeRecord.model_validate(
            {
                "id": {
                    "ID": "c17d2be5-200a-4ff1-ab92-996f120f88cc",
                    "Node": "test-node-2",
                },
                "ip": {"public": "192.0.2.48", "private": "192.0.2.18"},
            }
        ),
    ]
