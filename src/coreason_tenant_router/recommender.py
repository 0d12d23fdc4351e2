# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from typing import Optional

from coreason_tenant_router.interfaces import CatalogReader
from coreason_tenant_router.models import QualityTier


def recommend(catalog: CatalogReader, task_type: str, quality_tier: QualityTier) -> Optional[str]:
    """
    Returns the cheapest model that serves `task_type` at exactly `quality_tier`, ignoring tenant state.
    Ties on cost keep catalog order. None if nothing matches.
    """
    matches = [m for m in catalog.list_models() if m.supports(task_type) and m.quality_tier == quality_tier]
    if not matches:
        return None
    return min(matches, key=lambda m: m.cost_per_unit).id


class RecommendationHelper:
    """What-if queries for administrators. Not used on the routing hot path."""

    def __init__(self, catalog: CatalogReader) -> None:
        self.catalog = catalog

    def recommend(self, task_type: str, quality_tier: QualityTier) -> Optional[str]:
        return recommend(self.catalog, task_type, quality_tier)
