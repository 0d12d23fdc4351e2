# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from typing import List, Mapping, Optional, Protocol, runtime_checkable

from coreason_tenant_router.models import ModelDefinition, TenantConfiguration


@runtime_checkable
class CatalogReader(Protocol):
    """
    Read side of the model catalog. The router routes each request from one `snapshot()`.
    """

    def get_model(self, model_id: str) -> Optional[ModelDefinition]:
        """
        Returns the model registered under `model_id`, or None.
        """
        ...

    def list_models(self) -> List[ModelDefinition]:
        """
        Returns every registered model in registration order.
        """
        ...

    def snapshot(self) -> Mapping[str, ModelDefinition]:
        """
        Returns a read-only, point-in-time view of the catalog keyed by model id, in registration order.
        """
        ...


@runtime_checkable
class TenantConfigReader(Protocol):
    """
    Read side of the tenant configuration store.
    """

    def get_config(self, tenant_id: str) -> Optional[TenantConfiguration]:
        """
        Returns the configuration for `tenant_id`, or None for an unknown tenant.
        """
        ...


@runtime_checkable
class ModelSource(Protocol):
    """
    Protocol for an administrative source of model definitions (e.g. the admin dashboard backend).
    """

    def list_models(self) -> List[ModelDefinition]:
        """
        Lists the models that should be present in the catalog.
        """
        ...


@runtime_checkable
class TenantSource(Protocol):
    """
    Protocol for an administrative source of tenant configurations.
    """

    def list_tenant_configs(self) -> List[TenantConfiguration]:
        """
        Lists the tenant configurations that should be present in the store.
        """
        ...
