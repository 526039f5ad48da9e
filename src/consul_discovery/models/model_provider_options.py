# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Options Model.

Options consumed once by ``ConsulNodeProvider.init``. Field aliases match
the keys used in provider configuration documents (``caBundle``,
``rejectUnauthorized``); snake_case names are accepted as well. Keys this
provider does not use are kept in ``model_extra`` and otherwise ignored.

Security Note:
    ``secret`` is held as SecretStr so that the base64 credential never
    shows up in reprs, logs or error context.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class ModelProviderOptions(BaseModel):
    """Consul provider options.

    Attributes:
        secret: Base64 encoded Consul ACL token (optional)
        trust_bundle_path: Store path of a CA bundle, ``/<partition>/<name>`` (optional)
        verify_server_certificate: Verify the catalog server's TLS chain (default True)

    Example:
        >>> options = ModelProviderOptions.model_validate(
        ...     {"secret": "cGFzc3dvcmQxMjM0NQ==", "caBundle": "/Common/consul-ca.crt"}
        ... )
        >>> options.verify_server_certificate
        True
    """

    model_config = ConfigDict(
        frozen=True,
        # Keys used by other providers are kept, not rejected.
        extra="allow",
        populate_by_name=True,
    )

    secret: SecretStr | None = Field(
        default=None,
        alias="secret",
        description="Base64 encoded Consul ACL token",
    )
    trust_bundle_path: str | None = Field(
        default=None,
        alias="caBundle",
        description="Certificate store path of the CA bundle used to verify the server",
    )
    verify_server_certificate: bool = Field(
        default=True,
        alias="rejectUnauthorized",
        description="Whether to verify the server certificate chain",
    )

    @field_validator("secret", mode="before")
    @classmethod
    def _empty_secret_is_absent(cls, value: object) -> object:
        if value == "":
            return None
        return value

    @field_validator("trust_bundle_path", mode="before")
    @classmethod
    def _empty_path_is_absent(cls, value: object) -> object:
        if value == "":
            return None
        return value

    @field_validator("verify_server_certificate", mode="before")
    @classmethod
    def _non_boolean_means_verify(cls, value: object) -> bool:
        # Only an explicit boolean can turn verification off.
        return value if isinstance(value, bool) else True


__all__: list[str] = ["ModelProviderOptions"]
