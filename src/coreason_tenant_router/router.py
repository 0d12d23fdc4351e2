# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from typing import Dict, List, Mapping, Optional, Tuple

from coreason_tenant_router.config import RouterSettings
from coreason_tenant_router.cost import CostEstimator, latency_ms
from coreason_tenant_router.interfaces import CatalogReader, TenantConfigReader
from coreason_tenant_router.models import (
    LatencyTier,
    ModelDefinition,
    QualityTier,
    ReasonCode,
    RoutingDecision,
    RoutingRequest,
    TenantConfiguration,
    Urgency,
)
from coreason_tenant_router.utils.logger import logger

LATENCY_RANK: Dict[LatencyTier, int] = {LatencyTier.LOW: 0, LatencyTier.MEDIUM: 1, LatencyTier.HIGH: 2}
QUALITY_RANK: Dict[QualityTier, int] = {QualityTier.EXCELLENT: 0, QualityTier.GOOD: 1, QualityTier.BASIC: 2}


def rank_candidates(candidates: List[ModelDefinition], urgency: Urgency) -> List[ModelDefinition]:
    """
    Orders candidates best-first. `sorted` is stable, so ties keep catalog order.

    - High urgency: ascending latency tier only.
    - Otherwise: ascending quality rank (excellent first), then ascending cost per unit.
    """
    if urgency == Urgency.HIGH:
        return sorted(candidates, key=lambda m: LATENCY_RANK[m.latency_tier])
    return sorted(candidates, key=lambda m: (QUALITY_RANK[m.quality_tier], m.cost_per_unit))


class Router:
    """
    The Router picks the backend model for a request from the tenant's entitlements,
    channel overrides, task capability, urgency and per-request cost budget.

    It is a pure function of (request, catalog snapshot, tenant snapshot): no I/O, no locks,
    and it never raises for a well-formed request. Every anomaly is encoded in the reason code.
    """

    def __init__(
        self,
        catalog: CatalogReader,
        tenant_store: TenantConfigReader,
        estimator: Optional[CostEstimator] = None,
        settings: Optional[RouterSettings] = None,
    ) -> None:
        self.catalog = catalog
        self.tenant_store = tenant_store
        self.estimator = estimator or CostEstimator(catalog)
        self.settings = settings or RouterSettings()

    def route(self, request: RoutingRequest) -> RoutingDecision:
        """
        Selects the model for the given request.

        Logic:
        1. Unknown tenant -> fixed zero-cost baseline, paid baseline as fallback.
        2. Channel override -> honored only if the pinned model is in the tenant's allow-list.
           No budget check.
        3. Candidates = allowed models (in catalog order) that advertise the task type.
        4. No candidates -> first allowed model, or the global baseline.
        5. Rank candidates (see `rank_candidates`).
        6. Top candidate wins; runner-up becomes the fallback.
        7. Over budget -> first ranked candidate within budget replaces it, original top becomes
           the fallback. If none fits, the top candidate is kept and flagged `budget_exceeded`.
        """
        tenant = self.tenant_store.get_config(request.tenant_id)

        # 1. Unknown tenant
        if tenant is None:
            logger.debug(f"Unknown tenant {request.tenant_id}. Using default model {self.settings.default_model_id}")
            return RoutingDecision(
                selected_model_id=self.settings.default_model_id,
                reason_code=ReasonCode.DEFAULT_UNKNOWN_TENANT,
                estimated_cost=0.0,
                estimated_latency_ms=self.settings.unknown_tenant_latency_ms,
                fallback_model_id=self.settings.paid_fallback_model_id,
                detail="Default model for unknown tenant",
            )

        # Every catalog read below comes from this one snapshot
        models = self.catalog.snapshot()

        # 2. Channel override
        override_id = tenant.channel_overrides.get(request.channel)
        if override_id:
            if tenant.allows(override_id):
                return self._override_decision(request, override_id, models.get(override_id))
            logger.debug(
                f"Ignoring override {override_id} for channel {request.channel}: "
                f"not allowed for tenant {tenant.tenant_id}"
            )

        # 3. Candidate set
        candidates = self._candidates(models, tenant, request.task_type)

        # 4. Empty candidate set
        if not candidates:
            fallback_id = tenant.allowed_model_ids[0] if tenant.allowed_model_ids else self.settings.default_model_id
            logger.debug(
                f"No model for task {request.task_type} available to tenant {tenant.tenant_id}. "
                f"Falling back to {fallback_id}"
            )
            return RoutingDecision(
                selected_model_id=fallback_id,
                reason_code=ReasonCode.NO_CAPABLE_MODEL,
                estimated_cost=0.0,
                estimated_latency_ms=self.settings.no_capable_latency_ms,
                detail=f"No model matches task type {request.task_type}, using fallback",
            )

        # 5. Ranking
        ranked = rank_candidates(candidates, request.urgency)

        # 6. Selection & estimate
        costs = [self.estimator.cost_for_request(m, request.message_size) for m in ranked]
        selected = ranked[0]
        estimated_cost = costs[0]

        # 7. Budget enforcement
        if estimated_cost > tenant.max_cost_per_request:
            within_budget = self._first_within_budget(ranked, costs, tenant.max_cost_per_request)
            if within_budget is not None:
                cheaper, cheaper_cost = within_budget
                logger.debug(
                    f"Budget downgrade for tenant {tenant.tenant_id}: {selected.id} ({estimated_cost:.6f}) "
                    f"-> {cheaper.id} ({cheaper_cost:.6f}), limit {tenant.max_cost_per_request}"
                )
                return RoutingDecision(
                    selected_model_id=cheaper.id,
                    reason_code=ReasonCode.BUDGET_DOWNGRADE,
                    estimated_cost=cheaper_cost,
                    estimated_latency_ms=latency_ms(cheaper.latency_tier),
                    fallback_model_id=selected.id,
                    detail="Selected cheaper model due to cost limit",
                )

            logger.warning(
                f"No candidate within budget {tenant.max_cost_per_request} for tenant {tenant.tenant_id}. "
                f"Keeping {selected.id} (estimated {estimated_cost:.6f})"
            )
            return self._best_match(request, ranked, estimated_cost, budget_exceeded=True)

        return self._best_match(request, ranked, estimated_cost)

    @staticmethod
    def _candidates(
        models: Mapping[str, ModelDefinition], tenant: TenantConfiguration, task_type: str
    ) -> List[ModelDefinition]:
        allowed = set(tenant.allowed_model_ids)
        return [m for m in models.values() if m.id in allowed and m.supports(task_type)]

    def _override_decision(
        self, request: RoutingRequest, model_id: str, model: Optional[ModelDefinition]
    ) -> RoutingDecision:
        tier = model.latency_tier if model is not None else self.settings.missing_model_latency_tier
        logger.debug(f"Channel override for {request.channel}: {model_id}")
        return RoutingDecision(
            selected_model_id=model_id,
            reason_code=ReasonCode.CHANNEL_OVERRIDE,
            estimated_cost=self.estimator.cost_for_request(model, request.message_size),
            estimated_latency_ms=latency_ms(tier),
            detail=f"Channel override for {request.channel}",
        )

    @staticmethod
    def _first_within_budget(
        ranked: List[ModelDefinition], costs: List[float], budget: float
    ) -> Optional[Tuple[ModelDefinition, float]]:
        for model, cost in zip(ranked, costs):
            if cost <= budget:
                return model, cost
        return None

    @staticmethod
    def _best_match(
        request: RoutingRequest,
        ranked: List[ModelDefinition],
        estimated_cost: float,
        budget_exceeded: bool = False,
    ) -> RoutingDecision:
        selected = ranked[0]
        logger.debug(f"Routed tenant {request.tenant_id} task {request.task_type} to {selected.id}")
        return RoutingDecision(
            selected_model_id=selected.id,
            reason_code=ReasonCode.BEST_MATCH,
            estimated_cost=estimated_cost,
            estimated_latency_ms=latency_ms(selected.latency_tier),
            fallback_model_id=ranked[1].id if len(ranked) > 1 else None,
            detail=f"Best match for {request.task_type} task",
            budget_exceeded=budget_exceeded,
        )
