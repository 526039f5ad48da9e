# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node record models.

``ModelRawNodeRecord`` is what the node fetcher returns; its ``id`` may be a
scalar or an identity sub-record. ``ModelDiscoveredNode`` is the normalized
output of a provider, with a single string id.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelNodeAddresses(BaseModel):
    """Public and private addresses of a node."""

    model_config = ConfigDict(frozen=True)

    public: Optional[str] = None
    private: Optional[str] = None


class ModelRawNodeRecord(BaseModel):
    """A node as mapped from one catalog response element."""

    model_config = ConfigDict(frozen=True)

    id: Any = Field(description="Scalar id or identity sub-record")
    ip: ModelNodeAddresses = Field(default_factory=ModelNodeAddresses)


class ModelDiscoveredNode(BaseModel):
    """A discovered cluster member.

    ``model_dump()`` yields ``{"id": ..., "ip": {"public": ..., "private": ...}}``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    ip: ModelNodeAddresses


__all__: list[str] = [
    "ModelDiscoveredNode",
    "ModelNodeAddresses",
    "ModelRawNodeRecord",
]
