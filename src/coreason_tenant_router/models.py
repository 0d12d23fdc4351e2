# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LatencyTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QualityTier(str, Enum):
    BASIC = "basic"
    GOOD = "good"
    EXCELLENT = "excellent"


class Urgency(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class TenantPlan(str, Enum):
    FREE = "free"
    BASIC = "basic"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class ReasonCode(str, Enum):
    DEFAULT_UNKNOWN_TENANT = "default_unknown_tenant"
    CHANNEL_OVERRIDE = "channel_override"
    NO_CAPABLE_MODEL = "no_capable_model"
    BEST_MATCH = "best_match"
    BUDGET_DOWNGRADE = "budget_downgrade"


class ModelDefinition(BaseModel):
    """A processing backend known to the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)  # e.g. "gpt-4"
    name: str = ""  # display name, defaults to the id
    provider: str = "unknown"  # e.g. "openai"
    capabilities: FrozenSet[str] = frozenset()
    max_context_size: int = Field(0, ge=0)
    cost_per_unit: float = Field(0.0, ge=0.0)
    latency_tier: LatencyTier = LatencyTier.MEDIUM
    quality_tier: QualityTier = QualityTier.GOOD

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            return {**data, "name": data.get("id", "")}
        return data

    def supports(self, task_type: str) -> bool:
        return task_type in self.capabilities


class TenantConfiguration(BaseModel):
    """Entitlements, budget and channel pins for one tenant."""

    model_config = ConfigDict(frozen=True)

    tenant_id: str = Field(..., min_length=1)
    plan: TenantPlan = TenantPlan.BASIC
    allowed_model_ids: Tuple[str, ...] = Field(default_factory=tuple)
    max_cost_per_request: float = Field(0.0, ge=0.0)
    channel_overrides: Dict[str, str] = Field(default_factory=dict)

    @field_validator("allowed_model_ids")
    @classmethod
    def _dedupe_allowed(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # Ordered set: first occurrence wins
        return tuple(dict.fromkeys(value))

    def allows(self, model_id: str) -> bool:
        return model_id in self.allowed_model_ids


class RoutingRequest(BaseModel):
    tenant_id: str
    channel: str
    task_type: str
    message_size: int = Field(0, ge=0)  # proxy for input tokens
    urgency: Urgency = Urgency.NORMAL
    language: Optional[str] = None


class RoutingDecision(BaseModel):
    selected_model_id: str
    reason_code: ReasonCode
    estimated_cost: float = Field(..., ge=0.0)
    estimated_latency_ms: int = Field(..., gt=0)
    fallback_model_id: Optional[str] = None
    detail: str = ""
    budget_exceeded: bool = False
