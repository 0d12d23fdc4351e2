# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

import os
from typing import Optional

from pydantic import BaseModel, Field

from coreason_tenant_router.defaults import DEFAULT_MODEL_ID, DEFAULT_PAID_MODEL_ID
from coreason_tenant_router.models import LatencyTier

ENV_PREFIX = "TENANT_ROUTER_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class RouterSettings(BaseModel):
    """
    Static knobs for the routing engine. Loaded once at start-up; never consulted for I/O on the hot path.
    """

    default_model_id: str = Field(DEFAULT_MODEL_ID, min_length=1)
    paid_fallback_model_id: str = Field(DEFAULT_PAID_MODEL_ID, min_length=1)
    unknown_tenant_latency_ms: int = Field(50, gt=0)
    no_capable_latency_ms: int = Field(100, gt=0)
    # Tier assumed for an override pointing at a model missing from the catalog
    missing_model_latency_tier: LatencyTier = LatencyTier.MEDIUM
    seed_default_models: bool = True

    @classmethod
    def from_env(cls) -> "RouterSettings":
        """
        Builds settings from TENANT_ROUTER_* environment variables, falling back to defaults.

        Raises:
            ValueError: If a variable is set to a value that cannot be parsed.
        """
        return cls(
            default_model_id=os.environ.get(f"{ENV_PREFIX}DEFAULT_MODEL", DEFAULT_MODEL_ID),
            paid_fallback_model_id=os.environ.get(f"{ENV_PREFIX}PAID_FALLBACK_MODEL", DEFAULT_PAID_MODEL_ID),
            unknown_tenant_latency_ms=_env_int("UNKNOWN_TENANT_LATENCY_MS", 50),
            no_capable_latency_ms=_env_int("NO_CAPABLE_LATENCY_MS", 100),
            seed_default_models=_env_bool("SEED_DEFAULT_MODELS", True),
        )


def _env_int(name: str, default: int) -> int:
    raw: Optional[str] = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw: Optional[str] = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
