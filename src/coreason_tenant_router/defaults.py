# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

from typing import List, Tuple

from coreason_tenant_router.models import LatencyTier, ModelDefinition, QualityTier

# Zero-cost baseline used when nothing better can be resolved
DEFAULT_MODEL_ID = "local-fast"
# Paid baseline offered as the fallback for unknown tenants
DEFAULT_PAID_MODEL_ID = "gpt-3.5-turbo"

KNOWN_CHANNELS: Tuple[str, ...] = ("whatsapp", "instagram", "webchat", "voice", "sms", "email")
KNOWN_TASK_TYPES: Tuple[str, ...] = (
    "simple_query",
    "complex_analysis",
    "code_generation",
    "translation",
    "summarization",
    "customer_support",
)

_ALL_ROUND = frozenset(KNOWN_TASK_TYPES)

DEFAULT_MODELS: List[ModelDefinition] = [
    ModelDefinition(
        id="local-fast",
        name="Local Fast (Mistral 7B)",
        provider="local",
        capabilities=frozenset({"simple_query", "translation", "customer_support"}),
        max_context_size=4096,
        cost_per_unit=0.0,
        latency_tier=LatencyTier.LOW,
        quality_tier=QualityTier.BASIC,
    ),
    ModelDefinition(
        id="local-quality",
        name="Local Quality (Llama 70B)",
        provider="local",
        capabilities=frozenset(
            {"simple_query", "complex_analysis", "translation", "summarization", "customer_support"}
        ),
        max_context_size=8192,
        cost_per_unit=0.0,
        latency_tier=LatencyTier.MEDIUM,
        quality_tier=QualityTier.GOOD,
    ),
    ModelDefinition(
        id="gpt-3.5-turbo",
        name="GPT-3.5 Turbo",
        provider="openai",
        capabilities=frozenset({"simple_query", "translation", "summarization", "customer_support"}),
        max_context_size=4096,
        cost_per_unit=0.000002,
        latency_tier=LatencyTier.LOW,
        quality_tier=QualityTier.GOOD,
    ),
    ModelDefinition(
        id="gpt-4",
        name="GPT-4",
        provider="openai",
        capabilities=_ALL_ROUND,
        max_context_size=8192,
        cost_per_unit=0.00006,
        latency_tier=LatencyTier.MEDIUM,
        quality_tier=QualityTier.EXCELLENT,
    ),
    ModelDefinition(
        id="claude-3-sonnet",
        name="Claude 3 Sonnet",
        provider="anthropic",
        capabilities=_ALL_ROUND,
        max_context_size=200000,
        cost_per_unit=0.00003,
        latency_tier=LatencyTier.MEDIUM,
        quality_tier=QualityTier.EXCELLENT,
    ),
    ModelDefinition(
        id="claude-3-haiku",
        name="Claude 3 Haiku",
        provider="anthropic",
        capabilities=frozenset({"simple_query", "translation", "customer_support"}),
        max_context_size=200000,
        cost_per_unit=0.00001,
        latency_tier=LatencyTier.LOW,
        quality_tier=QualityTier.GOOD,
    ),
]
