# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-request options handed to the node fetcher."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelRequestOptions(BaseModel):
    """Options for a single node catalog request.

    Built fresh for every ``fetch_nodes`` call and never persisted.

    Attributes:
        headers: Header name to value mapping sent with the request
        ca: PEM trust-bundle bytes added to the verification trust store
        reject_unauthorized: Whether to verify the server certificate chain
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Request headers",
    )
    ca: bytes | None = Field(
        default=None,
        description="Additional trust anchors (PEM bytes)",
    )
    reject_unauthorized: bool = Field(
        default=True,
        description="Whether to verify the server certificate chain",
    )


__all__: list[str] = ["ModelRequestOptions"]
