# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery Error Classes.

Error Hierarchy:
    DiscoveryError (base)
    ├── ConfigurationError
    ├── TrustMaterialError
    │   ├── TrustMaterialNotFoundError
    │   └── TrustMaterialReadError
    └── NodeFetchError
        ├── NodeFetchTimeoutError
        └── NodeFetchProtocolError

All errors:
    - Use EnumDiscoveryErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelInfraErrorContext for bundled context parameters
"""

from typing import Optional
from uuid import UUID

from consul_discovery.enums import EnumDiscoveryErrorCode
from consul_discovery.errors.model_infra_error_context import ModelInfraErrorContext


class DiscoveryError(Exception):
    """Base error class for node discovery failures.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Type of transport (http, consul, cert_store)
        operation: Operation being performed
        correlation_id: Request correlation ID for tracking
        target_name: Target resource/endpoint name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.HTTP,
        ...     operation="fetch_nodes",
        ...     target_name="consul.example.com",
        ... )
        >>> raise DiscoveryError("Operation failed", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumDiscoveryErrorCode] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DiscoveryError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        self.message = message
        self.error_code = error_code or EnumDiscoveryErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"error_code={self.error_code.value!r})"
        )


class ConfigurationError(DiscoveryError):
    """Raised when provider configuration is invalid.

    Used for malformed trust-bundle paths, invalid provider options,
    undecodable secrets and invalid environment variables. Never retried.

    Example:
        >>> raise ConfigurationError(
        ...     "caBundle: path must be absolute",
        ...     context=context,
        ...     field_name="caBundle",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDiscoveryErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class TrustMaterialError(DiscoveryError):
    """Base class for failures resolving a stored trust bundle."""


class TrustMaterialNotFoundError(TrustMaterialError):
    """Raised when the certificate store has no certificate at the given path.

    Example:
        >>> raise TrustMaterialNotFoundError(
        ...     "caBundle: no certificate found at /Common/consul-ca.crt",
        ...     context=context,
        ...     partition="Common",
        ...     certificate_name="consul-ca.crt",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDiscoveryErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class TrustMaterialReadError(TrustMaterialError):
    """Raised when a located certificate cannot be read.

    The original I/O error text is kept as the message suffix and the
    original exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDiscoveryErrorCode.RESOURCE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class NodeFetchError(DiscoveryError):
    """Raised when the node list cannot be fetched.

    Covers connection failures, TLS failures and non-2xx responses.
    ``status_code`` is set for HTTP status failures and None otherwise.

    Example:
        >>> raise NodeFetchError(
        ...     "Unexpected HTTP 503 from consul.example.com",
        ...     context=context,
        ...     status_code=503,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        status_code: Optional[int] = None,
        error_code: Optional[EnumDiscoveryErrorCode] = None,
        **extra_context: object,
    ) -> None:
        if status_code is not None:
            extra_context["status_code"] = status_code
        if error_code is None:
            error_code = (
                EnumDiscoveryErrorCode.HTTP_STATUS_ERROR
                if status_code is not None
                else EnumDiscoveryErrorCode.CONNECTION_ERROR
            )
        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **extra_context,
        )
        self.status_code = status_code


class NodeFetchTimeoutError(NodeFetchError):
    """Raised when the node catalog request exceeds its timeout."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumDiscoveryErrorCode.TIMEOUT_ERROR,
            **extra_context,
        )


class NodeFetchProtocolError(NodeFetchError):
    """Raised when the node catalog response body is not valid JSON."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumDiscoveryErrorCode.PROTOCOL_ERROR,
            **extra_context,
        )


__all__ = [
    "DiscoveryError",
    "ConfigurationError",
    "TrustMaterialError",
    "TrustMaterialNotFoundError",
    "TrustMaterialReadError",
    "NodeFetchError",
    "NodeFetchTimeoutError",
    "NodeFetchProtocolError",
]
