# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dotted property-path lookup into decoded JSON objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def get_property(data: object, path: str) -> object:
    """Return the value at ``path`` inside ``data``, or None if absent.

    ``path`` is dot separated (``"Service.Address"``). Numeric segments index
    into lists. The empty path returns ``data`` itself.

    Example:
        >>> get_property({"Service": {"Address": "192.0.2.1"}}, "Service.Address")
        '192.0.2.1'
        >>> get_property({"Tags": ["a", "b"]}, "Tags.1")
        'b'
    """
    if not path:
        return data

    current = data
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return None
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return None
        else:
            return None
    return current


__all__ = ["get_property"]
