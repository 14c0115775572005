"""
Unit tests for the DI container wiring.
"""
import pytest

from bache_monitor.application.use_cases.detection import (
    ListDetectionsUseCase,
    SubmitDetectionsUseCase,
    SummarizeDetectionsUseCase,
)
from bache_monitor.core.config import Settings
from bache_monitor.di.base_container import BaseContainer
from bache_monitor.di.container import DIContainer
from bache_monitor.domain.repositories.detection_repository import DetectionRepository
from bache_monitor.infrastructure.db.memory_detection_repository import InMemoryDetectionRepository


class TestBaseContainer:
    def test_singleton_and_factory(self):
        container = BaseContainer()
        container.register_singleton("answer", 42)
        container.register_factory(list, lambda: [])

        assert container.get("answer") == 42
        assert container.get(list) is not container.get(list)
        assert container.has(list)
        assert not container.has(dict)

    def test_missing_dependency(self):
        with pytest.raises(ValueError, match="dict"):
            BaseContainer().get(dict)


class TestDIContainer:
    def test_memory_backend_wiring(self, mock_env):
        container = DIContainer()

        repository = container.get(DetectionRepository)
        assert isinstance(repository, InMemoryDetectionRepository)
        assert not container.has("detection_collection")
        assert container.get(Settings).storage_backend == "memory"

        submit = container.get(SubmitDetectionsUseCase)
        assert submit.detection_repository is repository
        assert submit.noise_cm == 3.0
        assert isinstance(container.get(ListDetectionsUseCase), ListDetectionsUseCase)
        assert isinstance(container.get(SummarizeDetectionsUseCase), SummarizeDetectionsUseCase)
