# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from coreason_tenant_router.models import TenantConfiguration
from coreason_tenant_router.utils.logger import logger


class TenantConfigStore:
    """
    Per-tenant entitlements and overrides.
    No validation beyond the data model: an empty allow-list is legal.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._configs: Dict[str, TenantConfiguration] = {}

    def set_config(self, config: TenantConfiguration) -> None:
        """
        Creates or replaces the configuration for `config.tenant_id`.

        The store keeps a deep copy, so later changes to the caller's `channel_overrides`
        dict do not leak into routing. Configs handed out by `get_config` are shared and
        must be treated as read-only.
        """
        owned = config.model_copy(deep=True)
        with self._lock:
            updated = dict(self._configs)
            updated[config.tenant_id] = owned
            self._configs = updated
        logger.debug(
            f"Stored config for tenant {config.tenant_id}: "
            f"{len(config.allowed_model_ids)} allowed models, max cost {config.max_cost_per_request}"
        )

    def get_config(self, tenant_id: str) -> Optional[TenantConfiguration]:
        return self._configs.get(tenant_id)

    def list_configs(self) -> List[TenantConfiguration]:
        return list(self._configs.values())

    def snapshot(self) -> Mapping[str, TenantConfiguration]:
        return MappingProxyType(self._configs)

    def clear(self) -> None:
        with self._lock:
            self._configs = {}
        logger.debug("TenantConfigStore cleared")

    def __len__(self) -> int:
        return len(self._configs)
