# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

Bundles the structured fields shared by every discovery error so that
error constructors stay short and strongly typed.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from consul_discovery.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Structured context attached to discovery errors.

    Attributes:
        transport_type: Transport involved (HTTP, CONSUL, CERT_STORE)
        operation: Operation being performed (init, fetch_nodes, resolve, ...)
        target_name: Target resource name (URI host, store path, ...)
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CERT_STORE,
        ...     operation="resolve_trust_material",
        ...     target_name="/Common/consul-ca.crt",
        ... )
        >>> raise TrustMaterialNotFoundError("caBundle: ...", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumInfraTransportType] = Field(
        default=None,
        description="Type of infrastructure transport",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
