# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trust Material Resolver.

Turns an abstract certificate store path (``/<partition>/<name>``) into the
bytes of the stored certificate bundle. Store-layer failures are translated
into the TrustMaterialError family, with every message prefixed by the
configuration field the path came from (``"caBundle: ..."``) so operators can
trace a failure back to the setting that caused it.

Nothing is cached: every call performs one store lookup and one read, so a
bundle replaced out-of-band is picked up by the next call.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from uuid import UUID

from consul_discovery.enums import EnumInfraTransportType
from consul_discovery.errors import (
    ConfigurationError,
    ModelInfraErrorContext,
    TrustMaterialNotFoundError,
    TrustMaterialReadError,
)
from consul_discovery.protocols import ProtocolCertificateStore

CERTIFICATE_CATEGORY: str = "certificate"
DEFAULT_FIELD_NAME: str = "caBundle"

_STORE_PATH_PATTERN = re.compile(r"/([^/]+)/([^/]+)")
_RESERVED_SEGMENTS: frozenset[str] = frozenset({".", ".."})


class TrustMaterialResolver:
    """Resolve stored certificate bundles to bytes.

    Args:
        store: Certificate store used for lookups
        logger: Logger handle; defaults to this module's logger

    Example:
        >>> resolver = TrustMaterialResolver(FilestoreCertificateStore())
        >>> ca_bytes = await resolver.resolve("/Common/consul-ca.crt")
    """

    def __init__(
        self,
        store: ProtocolCertificateStore,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or logging.getLogger(__name__)

    @property
    def store(self) -> ProtocolCertificateStore:
        return self._store

    @staticmethod
    def split_store_path(
        path: object,
        field_name: str = DEFAULT_FIELD_NAME,
        correlation_id: UUID | None = None,
    ) -> tuple[str, str]:
        """Split ``/<partition>/<name>`` into its two segments.

        Raises:
            ConfigurationError: If ``path`` is not an absolute two-segment path.
        """
        match = (
            _STORE_PATH_PATTERN.fullmatch(path) if isinstance(path, str) else None
        )
        if match is None or not _RESERVED_SEGMENTS.isdisjoint(match.groups()):
            ctx = ModelInfraErrorContext.with_correlation(
                correlation_id=correlation_id,
                transport_type=EnumInfraTransportType.CERT_STORE,
                operation="resolve_trust_material",
            )
            raise ConfigurationError(
                f"{field_name}: {path!r} is not an absolute certificate path "
                "of the form /<partition>/<name>",
                context=ctx,
                field_name=field_name,
            )
        partition, name = match.groups()
        return partition, name

    async def resolve(
        self,
        path: str,
        field_name: str = DEFAULT_FIELD_NAME,
        correlation_id: UUID | None = None,
    ) -> bytes:
        """Return the bytes of the certificate stored at ``path``.

        Args:
            path: Store path, ``/<partition>/<name>``
            field_name: Configuration field the path came from; prefixes messages
            correlation_id: Correlation ID for error context

        Raises:
            ConfigurationError: If ``path`` is malformed.
            TrustMaterialNotFoundError: If the store has no such certificate.
            TrustMaterialReadError: If the certificate cannot be read.
        """
        partition, name = self.split_store_path(path, field_name, correlation_id)

        stored = await self._store.lookup(partition, CERTIFICATE_CATEGORY, name)
        if stored is None:
            ctx = ModelInfraErrorContext.with_correlation(
                correlation_id=correlation_id,
                transport_type=EnumInfraTransportType.CERT_STORE,
                operation="resolve_trust_material",
                target_name=path,
            )
            raise TrustMaterialNotFoundError(
                f"{field_name}: no certificate found at {path}",
                context=ctx,
                field_name=field_name,
                partition=partition,
                certificate_name=name,
            )

        try:
            data = await asyncio.to_thread(Path(stored).read_bytes)
        except OSError as e:
            ctx = ModelInfraErrorContext.with_correlation(
                correlation_id=correlation_id,
                transport_type=EnumInfraTransportType.CERT_STORE,
                operation="resolve_trust_material",
                target_name=path,
            )
            raise TrustMaterialReadError(
                f"{field_name}: failed to read certificate {path}: {e}",
                context=ctx,
                field_name=field_name,
            ) from e

        self._logger.debug(
            "Resolved trust material",
            extra={
                "field_name": field_name,
                "store_path": path,
                "byte_count": len(data),
                "correlation_id": str(correlation_id) if correlation_id else None,
            },
        )
        return data


__all__: list[str] = [
    "CERTIFICATE_CATEGORY",
    "DEFAULT_FIELD_NAME",
    "TrustMaterialResolver",
]
