# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for provider and request option models."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from consul_discovery.models import (
    ModelDiscoveredNode,
    ModelNodeAddresses,
    ModelProviderOptions,
    ModelRequestOptions,
)


class TestModelProviderOptions:
    """Test suite for ModelProviderOptions."""

    def test_defaults(self) -> None:
        """Test absent fields take their defaults."""
        options = ModelProviderOptions()
        assert options.secret is None
        assert options.trust_bundle_path is None
        assert options.verify_server_certificate is True

    def test_aliases(self, encoded_secret: str) -> None:
        """Test provider configuration keys are accepted."""
        options = ModelProviderOptions.model_validate(
            {
                "secret": encoded_secret,
                "caBundle": "/Common/consul-ca.crt",
                "rejectUnauthorized": False,
            }
        )
        assert options.secret is not None
        assert options.secret.get_secret_value() == encoded_secret
        assert options.trust_bundle_path == "/Common/consul-ca.crt"
        assert options.verify_server_certificate is False

    def test_snake_case_names(self) -> None:
        """Test snake_case field names are accepted too."""
        options = ModelProviderOptions.model_validate(
            {
                "trust_bundle_path": "/Common/consul-ca.crt",
                "verify_server_certificate": False,
            }
        )
        assert options.trust_bundle_path == "/Common/consul-ca.crt"
        assert options.verify_server_certificate is False

    @pytest.mark.parametrize("value", ["false", 0, None, "no", [], {}])
    def test_non_boolean_verify_flag_means_verify(self, value: object) -> None:
        """Test any non-boolean verification flag is coerced to True."""
        options = ModelProviderOptions.model_validate({"rejectUnauthorized": value})
        assert options.verify_server_certificate is True

    def test_empty_strings_are_absent(self) -> None:
        """Test empty secret and caBundle are treated as not configured."""
        options = ModelProviderOptions.model_validate({"secret": "", "caBundle": ""})
        assert options.secret is None
        assert options.trust_bundle_path is None

    def test_secret_is_masked(self, encoded_secret: str) -> None:
        """Test the secret never appears in the model repr."""
        options = ModelProviderOptions(secret=SecretStr(encoded_secret))
        assert encoded_secret not in repr(options)

    def test_unknown_keys_kept(self) -> None:
        """Test unknown keys are kept aside without affecting known fields."""
        options = ModelProviderOptions.model_validate(
            {"caBundle": "/Common/consul-ca.crt", "region": "dc1", "tags": ["a"]}
        )
        assert options.trust_bundle_path == "/Common/consul-ca.crt"
        assert options.model_extra == {"region": "dc1", "tags": ["a"]}

    def test_wrong_type_rejected(self) -> None:
        """Test a known field with the wrong type fails validation."""
        with pytest.raises(ValidationError):
            ModelProviderOptions.model_validate({"caBundle": 42})

    def test_frozen(self) -> None:
        """Test options are immutable after construction."""
        options = ModelProviderOptions()
        with pytest.raises(ValidationError):
            options.verify_server_certificate = False  # type: ignore[misc]


class TestModelRequestOptions:
    """Test suite for ModelRequestOptions."""

    def test_defaults(self) -> None:
        """Test a bare request verifies the server and sends no headers."""
        options = ModelRequestOptions()
        assert options.headers == {}
        assert options.ca is None
        assert options.reject_unauthorized is True

    def test_headers_default_not_shared(self) -> None:
        """Test each instance gets its own headers dict."""
        assert ModelRequestOptions().headers is not ModelRequestOptions().headers


class TestModelDiscoveredNode:
    """Test suite for the normalized node shape."""

    def test_dump_shape(self) -> None:
        """Test model_dump yields the {id, ip: {public, private}} shape."""
        node = ModelDiscoveredNode(
            id="test-node-1",
            ip=ModelNodeAddresses(public="192.0.2.47", private="192.0.2.17"),
        )
        assert node.model_dump() == {
            "id": "test-node-1",
            "ip": {"public": "192.0.2.47", "private": "192.0.2.17"},
        }
