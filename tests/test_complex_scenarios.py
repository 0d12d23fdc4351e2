# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

import itertools
import time

import pytest

from coreason_tenant_router.catalog import ModelCatalog
from coreason_tenant_router.defaults import KNOWN_CHANNELS, KNOWN_TASK_TYPES
from coreason_tenant_router.models import (
    ReasonCode,
    RoutingRequest,
    TenantConfiguration,
    TenantPlan,
    Urgency,
)
from coreason_tenant_router.router import Router
from coreason_tenant_router.tenant_store import TenantConfigStore


@pytest.fixture
def multi_tenant_store(tenant_store: TenantConfigStore) -> TenantConfigStore:
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="free-tenant", plan=TenantPlan.FREE, allowed_model_ids=["local-fast"], max_cost_per_request=0
        )
    )
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="pro-tenant",
            plan=TenantPlan.PRO,
            allowed_model_ids=["local-fast", "local-quality", "gpt-3.5-turbo"],
            max_cost_per_request=0.1,
        )
    )
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="enterprise-tenant",
            plan=TenantPlan.ENTERPRISE,
            allowed_model_ids=["local-fast", "local-quality", "gpt-3.5-turbo", "gpt-4", "claude-3-sonnet"],
            max_cost_per_request=1,
        )
    )
    tenant_store.set_config(TenantConfiguration(tenant_id="empty-tenant", allowed_model_ids=[]))
    return tenant_store


def test_free_tenant_limited_to_local_model(router: Router, multi_tenant_store: TenantConfigStore) -> None:
    """local-fast cannot do complex analysis, so the free tenant lands on its only model via fallback."""
    decision = router.route(
        RoutingRequest(tenant_id="free-tenant", channel="webchat", task_type="complex_analysis", message_size=500)
    )
    assert decision.selected_model_id == "local-fast"
    assert decision.reason_code == ReasonCode.NO_CAPABLE_MODEL


def test_pro_tenant_stays_within_allow_list(router: Router, multi_tenant_store: TenantConfigStore) -> None:
    decision = router.route(RoutingRequest(tenant_id="pro-tenant", channel="webchat", task_type="simple_query"))
    config = multi_tenant_store.get_config("pro-tenant")
    assert config is not None
    assert decision.selected_model_id in config.allowed_model_ids


def test_enterprise_tenant_gets_excellent_model(router: Router, multi_tenant_store: TenantConfigStore) -> None:
    decision = router.route(
        RoutingRequest(tenant_id="enterprise-tenant", channel="webchat", task_type="complex_analysis", message_size=1000)
    )
    model = router.catalog.get_model(decision.selected_model_id)
    assert model is not None
    assert model.quality_tier.value == "excellent"
    # Equal quality: the cheaper claude-3-sonnet ranks ahead of gpt-4
    assert decision.selected_model_id == "claude-3-sonnet"
    assert decision.fallback_model_id == "gpt-4"


def test_very_long_message_lands_on_large_context_model(router: Router, tenant_store: TenantConfigStore) -> None:
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="long-tenant", allowed_model_ids=["gpt-4", "claude-3-sonnet"], max_cost_per_request=10
        )
    )
    decision = router.route(
        RoutingRequest(
            tenant_id="long-tenant", channel="email", task_type="summarization", message_size=100000, urgency="low"
        )
    )
    model = router.catalog.get_model(decision.selected_model_id)
    assert model is not None
    assert model.max_context_size >= 8192
    assert decision.estimated_cost == pytest.approx(300000 * 0.00003)


def test_dental_clinic_scenario(router: Router, tenant_store: TenantConfigStore) -> None:
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="dental-clinic",
            plan=TenantPlan.PRO,
            allowed_model_ids=["local-fast", "local-quality", "gpt-3.5-turbo"],
            max_cost_per_request=0.05,
            channel_overrides={"voice": "local-quality", "whatsapp": "local-fast"},
        )
    )

    voice = router.route(
        RoutingRequest(
            tenant_id="dental-clinic", channel="voice", task_type="customer_support", message_size=50, urgency="high"
        )
    )
    whatsapp = router.route(
        RoutingRequest(tenant_id="dental-clinic", channel="whatsapp", task_type="simple_query", message_size=30)
    )

    assert voice.selected_model_id == "local-quality"
    assert whatsapp.selected_model_id == "local-fast"


def test_invariants_hold_for_every_request(router: Router, multi_tenant_store: TenantConfigStore) -> None:
    """Every decision resolves, costs >= 0 and has positive latency, whatever the input."""
    tenants = ["free-tenant", "pro-tenant", "enterprise-tenant", "empty-tenant", "ghost-tenant"]
    task_types = list(KNOWN_TASK_TYPES) + ["unknown_scenario"]
    known_ids = {m.id for m in router.catalog.list_models()} | {"local-fast", "gpt-3.5-turbo"}

    for tenant_id, channel, task_type, urgency, size in itertools.product(
        tenants, KNOWN_CHANNELS, task_types, list(Urgency), (0, 1, 5000)
    ):
        decision = router.route(
            RoutingRequest(
                tenant_id=tenant_id, channel=channel, task_type=task_type, message_size=size, urgency=urgency
            )
        )
        assert decision.estimated_cost >= 0
        assert decision.estimated_latency_ms > 0
        assert decision.selected_model_id in known_ids

        if urgency == Urgency.HIGH and decision.reason_code == ReasonCode.BEST_MATCH:
            config = multi_tenant_store.get_config(tenant_id)
            assert config is not None
            candidates = [
                m
                for m in router.catalog.list_models()
                if m.id in config.allowed_model_ids and m.supports(task_type)
            ]
            selected = router.catalog.get_model(decision.selected_model_id)
            assert selected is not None
            assert selected.latency_tier == min(
                (m.latency_tier for m in candidates), key=lambda t: ["low", "medium", "high"].index(t.value)
            )


def test_routing_is_deterministic(router: Router, multi_tenant_store: TenantConfigStore) -> None:
    request = RoutingRequest(tenant_id="enterprise-tenant", channel="sms", task_type="translation", message_size=420)
    first = router.route(request)
    assert all(router.route(request) == first for _ in range(50))


def test_route_quickly(router: Router, tenant_store: TenantConfigStore) -> None:
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="perf-tenant",
            plan=TenantPlan.ENTERPRISE,
            allowed_model_ids=["local-fast", "local-quality", "gpt-3.5-turbo", "gpt-4", "claude-3-sonnet"],
            max_cost_per_request=1,
        )
    )
    request = RoutingRequest(tenant_id="perf-tenant", channel="webchat", task_type="simple_query", message_size=100)

    timings = []
    for _ in range(3):
        start = time.perf_counter()
        for _ in range(1000):
            router.route(request)
        timings.append(time.perf_counter() - start)

    # 1000 routes under 100ms
    assert min(timings) < 0.1


def test_many_tenants(router: Router, tenant_store: TenantConfigStore) -> None:
    for i in range(100):
        tenant_store.set_config(
            TenantConfiguration(
                tenant_id=f"tenant-{i}",
                plan=TenantPlan.PRO,
                allowed_model_ids=["local-fast", "gpt-3.5-turbo"],
                max_cost_per_request=0.1,
            )
        )

    decisions = [
        router.route(RoutingRequest(tenant_id=f"tenant-{i}", channel="webchat", task_type="simple_query"))
        for i in range(100)
    ]

    # gpt-3.5-turbo (good) outranks local-fast (basic) and fits the budget
    assert {d.selected_model_id for d in decisions} == {"gpt-3.5-turbo"}


def test_catalog_update_changes_routing(catalog: ModelCatalog, tenant_store: TenantConfigStore) -> None:
    router = Router(catalog=catalog, tenant_store=tenant_store)
    tenant_store.set_config(
        TenantConfiguration(
            tenant_id="t", allowed_model_ids=["gpt-3.5-turbo", "claude-3-haiku"], max_cost_per_request=1
        )
    )
    request = RoutingRequest(tenant_id="t", channel="webchat", task_type="translation")
    assert router.route(request).selected_model_id == "gpt-3.5-turbo"

    haiku = catalog.get_model("claude-3-haiku")
    assert haiku is not None
    catalog.register(haiku.model_copy(update={"cost_per_unit": 0.000001}))

    assert router.route(request).selected_model_id == "claude-3-haiku"
