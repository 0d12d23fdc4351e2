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
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from coreason_tenant_router.defaults import DEFAULT_MODELS
from coreason_tenant_router.models import ModelDefinition
from coreason_tenant_router.utils.logger import logger


class ModelCatalog:
    """
    In-memory catalog of processing backends.

    Writes are copy-on-write under a lock: the dict is copied, changed and swapped,
    so readers always see one consistent snapshot without locking.
    """

    def __init__(self, models: Optional[Iterable[ModelDefinition]] = None) -> None:
        self._lock = threading.Lock()
        self._models: Dict[str, ModelDefinition] = {}
        if models:
            self.register_many(models)

    def register(self, model: ModelDefinition) -> None:
        """
        Registers a model in the catalog.
        If a model with the same ID exists, it is replaced in place (keeps its position).

        Raises:
            ValueError: If the model ID is blank.
        """
        self._validate(model)
        with self._lock:
            updated = dict(self._models)
            updated[model.id] = model
            self._models = updated
        logger.debug(f"Registered model: {model.id} (Quality: {model.quality_tier.value}, Cost: {model.cost_per_unit})")

    def register_many(self, models: Iterable[ModelDefinition]) -> None:
        """
        Registers several models with a single snapshot swap.
        """
        batch = list(models)
        for model in batch:
            self._validate(model)
        with self._lock:
            updated = dict(self._models)
            for model in batch:
                updated[model.id] = model
            self._models = updated
        logger.debug(f"Registered {len(batch)} models")

    def get_model(self, model_id: str) -> Optional[ModelDefinition]:
        return self._models.get(model_id)

    def list_models(self) -> List[ModelDefinition]:
        """
        Lists all models in registration order.
        """
        return list(self._models.values())

    def snapshot(self) -> Mapping[str, ModelDefinition]:
        """
        Returns a read-only view of the current catalog state.
        Later writes do not show through it.
        """
        return MappingProxyType(self._models)

    def load_defaults(self) -> None:
        """
        Seeds the built-in model set.
        """
        self.register_many(DEFAULT_MODELS)
        logger.info(f"Loaded {len(DEFAULT_MODELS)} default models into catalog")

    def clear(self) -> None:
        with self._lock:
            self._models = {}
        logger.debug("ModelCatalog cleared")

    @staticmethod
    def _validate(model: ModelDefinition) -> None:
        if not model.id or not model.id.strip():
            raise ValueError("Model id must be a non-empty string")

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._models
