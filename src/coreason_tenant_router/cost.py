# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from typing import Dict, Optional

from coreason_tenant_router.interfaces import CatalogReader
from coreason_tenant_router.models import LatencyTier, ModelDefinition

# Responses are assumed to be twice the size of the input
RESPONSE_SIZE_MULTIPLIER = 2

LATENCY_MS: Dict[LatencyTier, int] = {
    LatencyTier.LOW: 100,
    LatencyTier.MEDIUM: 500,
    LatencyTier.HIGH: 2000,
}


def latency_ms(tier: LatencyTier) -> int:
    return LATENCY_MS[tier]


class CostEstimator:
    """
    Prices a (model, token-count) pair against the catalog.
    Never fails: an unknown model costs 0 so estimation cannot block a routing decision.
    """

    def __init__(self, catalog: CatalogReader) -> None:
        self.catalog = catalog

    def estimate(self, model_id: str, input_units: int, output_units: int) -> float:
        """
        Cost = (input_units + output_units) * model.cost_per_unit.
        Negative unit counts are treated as 0.
        """
        return self.cost_for(self.catalog.get_model(model_id), input_units, output_units)

    def estimate_for_request(self, model_id: str, message_size: int) -> float:
        """
        Applies the routing convention: output is RESPONSE_SIZE_MULTIPLIER times the input.
        """
        return self.estimate(model_id, message_size, message_size * RESPONSE_SIZE_MULTIPLIER)

    @staticmethod
    def cost_for(model: Optional[ModelDefinition], input_units: int, output_units: int) -> float:
        """
        Prices a model already in hand, without another catalog read. None costs 0.
        """
        if model is None:
            return 0.0
        units = max(input_units, 0) + max(output_units, 0)
        return units * model.cost_per_unit

    @classmethod
    def cost_for_request(cls, model: Optional[ModelDefinition], message_size: int) -> float:
        return cls.cost_for(model, message_size, message_size * RESPONSE_SIZE_MULTIPLIER)
