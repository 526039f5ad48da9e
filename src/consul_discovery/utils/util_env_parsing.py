# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type-safe environment variable parsing with validation.

Invalid (unparseable) values raise ConfigurationError. Values outside the
allowed range fall back to the default with a warning, so a typo in an
optional tuning knob cannot take discovery down.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from consul_discovery.enums import EnumInfraTransportType
from consul_discovery.errors import ConfigurationError, ModelInfraErrorContext

logger = logging.getLogger(__name__)


def parse_env_float(
    env_var: str,
    default: float,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    transport_type: Optional[EnumInfraTransportType] = None,
    service_name: str = "unknown",
) -> float:
    """Parse a float from an environment variable.

    Args:
        env_var: Environment variable name
        default: Value returned when the variable is unset or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        transport_type: Transport type recorded in error context
        service_name: Component name recorded in error context and logs

    Returns:
        The parsed value, or ``default``.

    Raises:
        ConfigurationError: If the variable is set but is not a number.
    """
    raw = os.environ.get(env_var)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError as e:
        ctx = ModelInfraErrorContext.with_correlation(
            transport_type=transport_type,
            operation="parse_env",
            target_name=service_name,
        )
        raise ConfigurationError(
            f"{env_var}: expected a number, got {raw!r}",
            context=ctx,
            env_var=env_var,
        ) from e

    if (min_value is not None and value < min_value) or (
        max_value is not None and value > max_value
    ):
        logger.warning(
            "Environment value out of range, using default",
            extra={
                "env_var": env_var,
                "provided_value": value,
                "default_value": default,
                "min_value": min_value,
                "max_value": max_value,
                "service_name": service_name,
            },
        )
        return default

    return value


def parse_env_str(env_var: str, default: str) -> str:
    """Return the stripped value of ``env_var``, or ``default`` if unset/blank."""
    raw = os.environ.get(env_var)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


__all__ = ["parse_env_float", "parse_env_str"]
