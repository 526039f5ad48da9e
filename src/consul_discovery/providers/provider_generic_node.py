# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic Node Provider - fetch a JSON node catalog with httpx.

Fetches a URI that returns a JSON array of objects (a JSON string that
itself decodes to such an array is also accepted) and maps each object to
a raw node record using the property paths given to ``init``.

TLS:
    - ``reject_unauthorized=False`` disables certificate verification
    - ``ca`` bytes are added as trust anchors on top of the default store
    - A fresh client is built per request, since trust options are per request

Errors are raised, never retried; retry policy belongs to the caller.
"""

from __future__ import annotations

import json
import logging
import ssl
from collections.abc import Mapping
from urllib.parse import urlsplit
from uuid import UUID, uuid4

import httpx

from consul_discovery.enums import EnumInfraTransportType
from consul_discovery.errors import (
    ConfigurationError,
    DiscoveryError,
    ModelInfraErrorContext,
    NodeFetchError,
    NodeFetchProtocolError,
    NodeFetchTimeoutError,
)
from consul_discovery.models import (
    ModelNodeAddresses,
    ModelPropertyPaths,
    ModelRawNodeRecord,
    ModelRequestOptions,
)
from consul_discovery.utils import (
    get_property,
    parse_env_float,
    sanitize_error_message,
    sanitize_error_string,
)

ENV_HTTP_TIMEOUT: str = "CONSUL_DISCOVERY_HTTP_TIMEOUT"
_HTTP_TIMEOUT_DEFAULT: float = 30.0
_HTTP_TIMEOUT_MIN: float = 0.1
_HTTP_TIMEOUT_MAX: float = 3600.0
_PEM_MARKER: bytes = b"-----BEGIN"


def _as_address(value: object) -> str | None:
    if value is None or isinstance(value, (Mapping, list)):
        return None
    return str(value)


class GenericNodeProvider:
    """Node fetcher for JSON catalogs reachable over HTTP(S).

    Args:
        logger: Logger handle; defaults to this module's logger
        timeout_seconds: Request timeout; defaults to CONSUL_DISCOVERY_HTTP_TIMEOUT or 30s
        transport: Optional httpx transport (tests inject httpx.MockTransport)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        if timeout_seconds is None:
            timeout_seconds = parse_env_float(
                ENV_HTTP_TIMEOUT,
                _HTTP_TIMEOUT_DEFAULT,
                min_value=_HTTP_TIMEOUT_MIN,
                max_value=_HTTP_TIMEOUT_MAX,
                transport_type=EnumInfraTransportType.HTTP,
                service_name="generic_node_provider",
            )
        self._timeout = timeout_seconds
        self._transport = transport
        self._property_paths: ModelPropertyPaths | None = None

    @property
    def property_paths(self) -> ModelPropertyPaths | None:
        return self._property_paths

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    async def init(self, property_paths: ModelPropertyPaths) -> None:
        """Record how catalog elements map to node records."""
        self._property_paths = property_paths
        self.logger.info(
            "GenericNodeProvider initialized",
            extra={
                "property_path_id": property_paths.property_path_id,
                "identity_fields": list(property_paths.identity_fields),
                "property_path_ip_public": property_paths.property_path_ip_public,
                "property_path_ip_private": property_paths.property_path_ip_private,
                "timeout_seconds": self._timeout,
            },
        )

    async def fetch_nodes(
        self,
        uri: str,
        options: ModelRequestOptions | None = None,
    ) -> list[ModelRawNodeRecord]:
        """Fetch ``uri`` and map the catalog to raw node records.

        Raises:
            DiscoveryError: If called before ``init``.
            ConfigurationError: If ``options.ca`` is neither usable PEM nor DER.
            NodeFetchTimeoutError: If the request times out.
            NodeFetchError: On connection/TLS failures and non-2xx responses.
            NodeFetchProtocolError: If the body is not JSON.
        """
        correlation_id = uuid4()
        if self._property_paths is None:
            ctx = self._error_context(uri, correlation_id)
            raise DiscoveryError(
                "GenericNodeProvider not initialized. Call init() first.",
                context=ctx,
            )

        opts = options or ModelRequestOptions()
        data = await self._get_data(uri, opts, correlation_id)
        nodes = self._map_nodes(data, self._property_paths, uri, correlation_id)

        self.logger.debug(
            "Fetched nodes",
            extra={
                "uri": uri,
                "node_count": len(nodes),
                "correlation_id": str(correlation_id),
            },
        )
        return nodes

    def _error_context(self, uri: str, correlation_id: UUID) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation="fetch_nodes",
            target_name=urlsplit(uri).hostname or uri,
            correlation_id=correlation_id,
        )

    def _build_verify(
        self,
        options: ModelRequestOptions,
        uri: str,
        correlation_id: UUID,
    ) -> bool | ssl.SSLContext:
        if not options.reject_unauthorized:
            return False
        if options.ca is None:
            return True

        context = ssl.create_default_context()
        try:
            # cadata takes PEM as str and DER as bytes.
            cadata: str | bytes = options.ca
            if options.ca.lstrip().startswith(_PEM_MARKER):
                cadata = options.ca.decode("ascii")
            context.load_verify_locations(cadata=cadata)
        except (ssl.SSLError, ValueError) as e:
            raise ConfigurationError(
                "caBundle: trust bundle does not contain a usable certificate",
                context=self._error_context(uri, correlation_id),
            ) from e
        return context

    async def _get_data(
        self,
        uri: str,
        options: ModelRequestOptions,
        correlation_id: UUID,
    ) -> object:
        verify = self._build_verify(options, uri, correlation_id)

        try:
            async with httpx.AsyncClient(
                verify=verify,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(uri, headers=options.headers)
        except httpx.TimeoutException as e:
            raise NodeFetchTimeoutError(
                f"Request to {uri} timed out after {self._timeout}s",
                context=self._error_context(uri, correlation_id),
                timeout_seconds=self._timeout,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NodeFetchError(
                f"Failed to fetch nodes from {uri}: {sanitize_error_message(e)}",
                context=self._error_context(uri, correlation_id),
            ) from e

        if not response.is_success:
            body_snippet = sanitize_error_string(response.text) if response.text else ""
            raise NodeFetchError(
                f"Unexpected HTTP {response.status_code} from {uri}",
                context=self._error_context(uri, correlation_id),
                status_code=response.status_code,
                response_body=body_snippet,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NodeFetchProtocolError(
                f"Failed to parse JSON response from {uri}: {e}",
                context=self._error_context(uri, correlation_id),
                content_type=response.headers.get("content-type", ""),
            ) from e

        if isinstance(data, str):
            try:
                return json.loads(data)
            except ValueError:
                self.logger.debug(
                    "String payload is not itself JSON",
                    extra={"uri": uri, "correlation_id": str(correlation_id)},
                )
        return data

    def _extract_id(self, element: Mapping[str, object], paths: ModelPropertyPaths) -> object:
        base = get_property(element, paths.property_path_id)
        if not paths.identity_fields:
            return base
        if not isinstance(base, Mapping):
            return None
        identity = {field: base.get(field) for field in paths.identity_fields}
        return identity if any(identity.values()) else None

    def _map_nodes(
        self,
        data: object,
        paths: ModelPropertyPaths,
        uri: str,
        correlation_id: UUID,
    ) -> list[ModelRawNodeRecord]:
        if not isinstance(data, list):
            self.logger.warning(
                "Node catalog response is not an array, no nodes returned",
                extra={
                    "uri": uri,
                    "payload_type": type(data).__name__,
                    "correlation_id": str(correlation_id),
                },
            )
            return []

        nodes: list[ModelRawNodeRecord] = []
        for index, element in enumerate(data):
            if not isinstance(element, Mapping):
                self.logger.debug(
                    "Skipping catalog element that is not an object",
                    extra={"index": index, "correlation_id": str(correlation_id)},
                )
                continue

            node_id = self._extract_id(element, paths)
            ip_private = _as_address(get_property(element, paths.property_path_ip_private))
            ip_public = _as_address(get_property(element, paths.property_path_ip_public))
            if not node_id or not ip_private:
                self.logger.debug(
                    "Skipping catalog element without id or private address",
                    extra={"index": index, "correlation_id": str(correlation_id)},
                )
                continue

            nodes.append(
                ModelRawNodeRecord(
                    id=node_id,
                    ip=ModelNodeAddresses(public=ip_public, private=ip_private),
                )
            )
        return nodes


__all__: list[str] = ["ENV_HTTP_TIMEOUT", "GenericNodeProvider"]
