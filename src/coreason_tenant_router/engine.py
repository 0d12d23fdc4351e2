# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

import threading
from typing import Optional

from coreason_tenant_router.catalog import ModelCatalog
from coreason_tenant_router.config import RouterSettings
from coreason_tenant_router.cost import CostEstimator
from coreason_tenant_router.interfaces import ModelSource, TenantSource
from coreason_tenant_router.models import QualityTier, RoutingDecision, RoutingRequest
from coreason_tenant_router.recommender import RecommendationHelper
from coreason_tenant_router.router import Router
from coreason_tenant_router.tenant_store import TenantConfigStore
from coreason_tenant_router.utils.logger import logger


class TenantRoutingEngine:
    _instance: Optional["TenantRoutingEngine"] = None
    _lock: threading.Lock = threading.Lock()
    _initialized: bool

    def __new__(cls) -> "TenantRoutingEngine":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(TenantRoutingEngine, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:  # Double check
                return  # pragma: no cover
            logger.info("Initializing TenantRoutingEngine")
            self.settings = RouterSettings.from_env()
            self.catalog = ModelCatalog()
            self.tenant_store = TenantConfigStore()
            self.estimator = CostEstimator(self.catalog)
            self.router = Router(self.catalog, self.tenant_store, self.estimator, self.settings)
            self.recommender = RecommendationHelper(self.catalog)

            # Administrative sources, injected via configure
            self.model_source: Optional[ModelSource] = None
            self.tenant_source: Optional[TenantSource] = None

            if self.settings.seed_default_models:
                self.catalog.load_defaults()

            self._initialized = True

    def configure(
        self,
        model_source: Optional[ModelSource] = None,
        tenant_source: Optional[TenantSource] = None,
    ) -> None:
        """
        Injects administrative sources and pulls their current state into the stores.
        A failing source is logged and skipped; entries it does not return are kept.
        """
        with self._lock:
            self.model_source = model_source
            self.tenant_source = tenant_source

        if model_source is not None:
            try:
                models = model_source.list_models()
                self.catalog.register_many(models)
                logger.info(f"Pulled {len(models)} models from model source")
            except Exception as e:
                logger.error(f"Failed to pull models from model source: {e}")

        if tenant_source is not None:
            try:
                configs = tenant_source.list_tenant_configs()
                for config in configs:
                    self.tenant_store.set_config(config)
                logger.info(f"Pulled {len(configs)} tenant configurations from tenant source")
            except Exception as e:
                logger.error(f"Failed to pull tenant configurations from tenant source: {e}")

        logger.info("TenantRoutingEngine configured")

    def route(self, request: RoutingRequest) -> RoutingDecision:
        return self.router.route(request)

    def recommend(self, task_type: str, quality_tier: QualityTier) -> Optional[str]:
        return self.recommender.recommend(task_type, quality_tier)

    def estimate_cost(self, model_id: str, input_units: int, output_units: int) -> float:
        return self.estimator.estimate(model_id, input_units, output_units)

    def reset(self) -> None:
        """
        Clears both stores and the injected sources, then re-seeds the default catalog if enabled.
        """
        with self._lock:
            self.model_source = None
            self.tenant_source = None
        self.catalog.clear()
        self.tenant_store.clear()
        if self.settings.seed_default_models:
            self.catalog.load_defaults()
        logger.debug("TenantRoutingEngine reset")
