# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Property Paths Model.

Describes where the node fetcher finds a node's identity and addresses in
each element of the catalog response.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelPropertyPaths(BaseModel):
    """Mapping from catalog response elements to raw node records.

    Paths are dot separated (see ``utils.get_property``); the empty path
    selects the whole element.

    When ``identity_fields`` is non-empty the node id is not a scalar but a
    sub-record holding exactly those fields, read from the object at
    ``property_path_id``. Consul uses this to carry both ``ID`` and ``Node``.

    Example:
        >>> paths = ModelPropertyPaths(
        ...     property_path_id="",
        ...     identity_fields=("ID", "Node"),
        ...     property_path_ip_public="Address",
        ...     property_path_ip_private="Address",
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    property_path_id: str = Field(
        default="",
        description="Path to the node id (or to the object holding identity_fields)",
    )
    identity_fields: tuple[str, ...] = Field(
        default=(),
        description="Field names collected into the identity sub-record",
    )
    property_path_ip_public: str = Field(
        default="",
        description="Path to the public IP address",
    )
    property_path_ip_private: str = Field(
        default="",
        description="Path to the private IP address",
    )


__all__: list[str] = ["ModelPropertyPaths"]
