# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from coreason_tenant_router.catalog import ModelCatalog
from coreason_tenant_router.config import RouterSettings
from coreason_tenant_router.cost import CostEstimator
from coreason_tenant_router.engine import TenantRoutingEngine
from coreason_tenant_router.models import (
    LatencyTier,
    ModelDefinition,
    QualityTier,
    ReasonCode,
    RoutingDecision,
    RoutingRequest,
    TenantConfiguration,
    TenantPlan,
    Urgency,
)
from coreason_tenant_router.recommender import RecommendationHelper, recommend
from coreason_tenant_router.router import Router
from coreason_tenant_router.tenant_store import TenantConfigStore

__all__ = [
    "CostEstimator",
    "LatencyTier",
    "ModelCatalog",
    "ModelDefinition",
    "QualityTier",
    "ReasonCode",
    "RecommendationHelper",
    "Router",
    "RouterSettings",
    "RoutingDecision",
    "RoutingRequest",
    "TenantConfigStore",
    "TenantConfiguration",
    "TenantPlan",
    "TenantRoutingEngine",
    "Urgency",
    "recommend",
]
