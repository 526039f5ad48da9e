# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul Node Provider - discover cluster members from the Consul catalog.

Wraps the generic node fetcher with the Consul specifics:

    - ACL token: ``secret`` (base64) is decoded once at init and sent as the
      ``X-Consul-Token`` header on every request. An injected token replaces
      any caller-supplied header of the same name.
    - Trust bundle: ``caBundle`` names a certificate in the local store. It is
      resolved once at init to fail fast on misconfiguration, then again on
      every request so a rotated bundle is picked up without re-init.
    - Identity: Consul nodes carry both ``ID`` and ``Node``. The node id is
      ``ID`` when non-empty, otherwise ``Node``.

Security Policy - Token Handling:
    The decoded token is held as SecretStr and never logged or placed in
    error messages.
"""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Mapping
from uuid import UUID, uuid4

from pydantic import SecretStr, ValidationError

from consul_discovery.enums import EnumInfraTransportType
from consul_discovery.errors import ConfigurationError, ModelInfraErrorContext
from consul_discovery.models import (
    ModelDiscoveredNode,
    ModelPropertyPaths,
    ModelProviderOptions,
    ModelRawNodeRecord,
    ModelRequestOptions,
)
from consul_discovery.protocols import ProtocolCertificateStore, ProtocolNodeFetcher
from consul_discovery.providers.provider_generic_node import GenericNodeProvider
from consul_discovery.services import FilestoreCertificateStore, TrustMaterialResolver

CONSUL_TOKEN_HEADER: str = "X-Consul-Token"
CA_BUNDLE_FIELD: str = "caBundle"
PRIMARY_ID_FIELD: str = "ID"
FALLBACK_ID_FIELD: str = "Node"

# Consul's catalog reports a single Address, used for both public and private.
CONSUL_PROPERTY_PATHS = ModelPropertyPaths(
    property_path_id="",
    identity_fields=(PRIMARY_ID_FIELD, FALLBACK_ID_FIELD),
    property_path_ip_public="Address",
    property_path_ip_private="Address",
)


class ConsulNodeProvider:
    """Node discovery provider for the Consul catalog API.

    Args:
        logger: Logger handle stored on the instance and shared with the
            collaborators this provider creates; defaults to the module logger
        node_fetcher: Fetch collaborator; a GenericNodeProvider is created at
            init when omitted
        certificate_store: Store used to resolve ``caBundle``; defaults to a
            FilestoreCertificateStore
        trust_resolver: Resolver to use instead of one built on ``certificate_store``

    Example:
        >>> provider = ConsulNodeProvider()
        >>> await provider.init({"secret": "cGFzc3dvcmQxMjM0NQ=="})
        >>> nodes = await provider.fetch_nodes(
        ...     "https://consul.example.com/v1/catalog/service/web"
        ... )
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        node_fetcher: ProtocolNodeFetcher | None = None,
        certificate_store: ProtocolCertificateStore | None = None,
        trust_resolver: TrustMaterialResolver | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.node_provider: ProtocolNodeFetcher | None = node_fetcher
        if trust_resolver is None:
            trust_resolver = TrustMaterialResolver(
                certificate_store or FilestoreCertificateStore(),
                logger=self.logger,
            )
        self.trust_resolver = trust_resolver

        self.provider_options = ModelProviderOptions()
        self.init_options: dict[str, object] = {}
        self.trust_bundle_path: str | None = None
        self.verify_server_certificate: bool = True
        self._token: SecretStr | None = None

    @property
    def token(self) -> str | None:
        """The decoded Consul ACL token, or None when no secret was configured."""
        if self._token is None:
            return None
        return self._token.get_secret_value()

    async def init(
        self,
        provider_options: Mapping[str, object] | ModelProviderOptions | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """Validate provider options and initialize the node fetcher.

        Args:
            provider_options: ``secret``, ``caBundle``, ``rejectUnauthorized``
                (snake_case names accepted too); all optional
            options: Caller options, kept as ``init_options``

        Raises:
            ConfigurationError: Invalid options, undecodable secret or
                malformed ``caBundle`` path.
            TrustMaterialNotFoundError: ``caBundle`` not in the store.
            TrustMaterialReadError: ``caBundle`` found but unreadable.
        """
        correlation_id = uuid4()
        parsed = self._parse_provider_options(provider_options, correlation_id)

        token: SecretStr | None = None
        if parsed.secret is not None:
            token = SecretStr(
                self._decode_secret(parsed.secret.get_secret_value(), correlation_id)
            )

        if parsed.trust_bundle_path is not None:
            # Validation only; the bundle is re-read for every request.
            await self.trust_resolver.resolve(
                parsed.trust_bundle_path,
                field_name=CA_BUNDLE_FIELD,
                correlation_id=correlation_id,
            )

        self.init_options = dict(options or {})
        self.provider_options = parsed
        self._token = token
        self.trust_bundle_path = parsed.trust_bundle_path
        self.verify_server_certificate = parsed.verify_server_certificate

        if self.node_provider is None:
            self.node_provider = GenericNodeProvider(logger=self.logger)
        await self.node_provider.init(CONSUL_PROPERTY_PATHS)

        self.logger.info(
            "ConsulNodeProvider initialized",
            extra={
                "token_configured": token is not None,
                "trust_bundle_path": self.trust_bundle_path,
                "verify_server_certificate": self.verify_server_certificate,
                "correlation_id": str(correlation_id),
            },
        )

    async def fetch_nodes(
        self,
        uri: str,
        options: Mapping[str, object] | None = None,
    ) -> list[ModelDiscoveredNode]:
        """Fetch the Consul node list at ``uri``.

        Args:
            uri: Catalog URL, passed through unvalidated
            options: Optional ``{"headers": {name: value}}``; not mutated

        Returns:
            One ModelDiscoveredNode per record returned by the fetcher, in
            the catalog's listing order.

        Raises:
            TrustMaterialError / ConfigurationError: ``caBundle`` resolution failed.
            NodeFetchError: Propagated unchanged from the fetcher.
        """
        if self.node_provider is None:
            raise RuntimeError("ConsulNodeProvider.fetch_nodes() called before init()")

        correlation_id = uuid4()
        request_options = await self._build_request_options(options, correlation_id)
        records = await self.node_provider.fetch_nodes(uri, request_options)
        nodes = [self._normalize(record) for record in records]

        self.logger.debug(
            "Consul nodes discovered",
            extra={
                "uri": uri,
                "node_count": len(nodes),
                "correlation_id": str(correlation_id),
            },
        )
        return nodes

    async def _build_request_options(
        self,
        options: Mapping[str, object] | None,
        correlation_id: UUID,
    ) -> ModelRequestOptions:
        caller_headers = (options or {}).get("headers") or {}
        headers: dict[str, str] = {}
        if isinstance(caller_headers, Mapping):
            headers = {str(name): str(value) for name, value in caller_headers.items()}

        if self._token is not None:
            # The injected token wins, whatever case the caller used.
            headers = {
                name: value
                for name, value in headers.items()
                if name.lower() != CONSUL_TOKEN_HEADER.lower()
            }
            headers[CONSUL_TOKEN_HEADER] = self._token.get_secret_value()

        ca: bytes | None = None
        if self.trust_bundle_path is not None:
            ca = await self.trust_resolver.resolve(
                self.trust_bundle_path,
                field_name=CA_BUNDLE_FIELD,
                correlation_id=correlation_id,
            )

        return ModelRequestOptions(
            headers=headers,
            ca=ca,
            reject_unauthorized=self.verify_server_certificate,
        )

    @staticmethod
    def _normalize(record: ModelRawNodeRecord | Mapping[str, object]) -> ModelDiscoveredNode:
        if not isinstance(record, ModelRawNodeRecord):
            record = ModelRawNodeRecord.model_validate(record)

        identity = record.id
        if isinstance(identity, Mapping):
            node_id = identity.get(PRIMARY_ID_FIELD) or identity.get(FALLBACK_ID_FIELD)
        else:
            node_id = identity
        return ModelDiscoveredNode(id=str(node_id or ""), ip=record.ip)

    def _parse_provider_options(
        self,
        provider_options: Mapping[str, object] | ModelProviderOptions | None,
        correlation_id: UUID,
    ) -> ModelProviderOptions:
        if isinstance(provider_options, ModelProviderOptions):
            return provider_options
        try:
            return ModelProviderOptions.model_validate(dict(provider_options or {}))
        except ValidationError as e:
            # Field locations only: input values may include the secret.
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) or "<root>"
                for error in e.errors()
            )
            raise ConfigurationError(
                f"Invalid provider options: {fields}",
                context=self._init_error_context(correlation_id),
            ) from e

    def _decode_secret(self, secret: str, correlation_id: UUID) -> str:
        try:
            # Missing padding is accepted.
            raw = base64.b64decode(secret + "=" * (-len(secret) % 4))
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError(
                "secret: value is not valid base64",
                context=self._init_error_context(correlation_id),
                field_name="secret",
            ) from e
        return raw.decode("utf-8", errors="replace")

    @staticmethod
    def _init_error_context(correlation_id: UUID) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.CONSUL,
            operation="init",
            target_name="consul_node_provider",
            correlation_id=correlation_id,
        )


__all__: list[str] = [
    "CA_BUNDLE_FIELD",
    "CONSUL_PROPERTY_PATHS",
    "CONSUL_TOKEN_HEADER",
    "ConsulNodeProvider",
]
