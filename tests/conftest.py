import pytest

from coreason_tenant_router.catalog import ModelCatalog
from coreason_tenant_router.models import LatencyTier, ModelDefinition, QualityTier
from coreason_tenant_router.router import Router
from coreason_tenant_router.tenant_store import TenantConfigStore


@pytest.fixture
def catalog() -> ModelCatalog:
    cat = ModelCatalog()
    cat.load_defaults()
    return cat


@pytest.fixture
def tenant_store() -> TenantConfigStore:
    return TenantConfigStore()


@pytest.fixture
def router(catalog: ModelCatalog, tenant_store: TenantConfigStore) -> Router:
    return Router(catalog=catalog, tenant_store=tenant_store)


@pytest.fixture
def model_a() -> ModelDefinition:
    return ModelDefinition(
        id="model-a",
        provider="local",
        capabilities=frozenset({"customer_support"}),
        max_context_size=4096,
        cost_per_unit=0.0,
        latency_tier=LatencyTier.LOW,
        quality_tier=QualityTier.GOOD,
    )


@pytest.fixture
def model_b() -> ModelDefinition:
    return ModelDefinition(
        id="model-b",
        provider="openai",
        capabilities=frozenset({"customer_support"}),
        max_context_size=8192,
        cost_per_unit=0.00006,
        latency_tier=LatencyTier.MEDIUM,
        quality_tier=QualityTier.EXCELLENT,
    )
