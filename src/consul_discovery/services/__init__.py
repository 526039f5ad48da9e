# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trust material services: certificate store and resolver."""

from consul_discovery.services.service_filestore_certificate_store import (
    DEFAULT_FILESTORE_ROOT,
    ENV_FILESTORE_ROOT,
    FilestoreCertificateStore,
)
from consul_discovery.services.service_trust_material_resolver import (
    CERTIFICATE_CATEGORY,
    DEFAULT_FIELD_NAME,
    TrustMaterialResolver,
)

__all__: list[str] = [
    "CERTIFICATE_CATEGORY",
    "DEFAULT_FIELD_NAME",
    "DEFAULT_FILESTORE_ROOT",
    "ENV_FILESTORE_ROOT",
    "FilestoreCertificateStore",
    "TrustMaterialResolver",
]
