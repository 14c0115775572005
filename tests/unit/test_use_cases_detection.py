"""
Unit tests for the detection use cases.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from bache_monitor.application.services.detection_view import DetectionFilters
from bache_monitor.application.use_cases.detection import (
    ListDetectionsUseCase,
    SubmitDetectionsUseCase,
    SummarizeDetectionsUseCase,
)
from bache_monitor.domain.exceptions import DetectionStoreError, InvalidBatchError
from bache_monitor.domain.models.detection import Severity
from bache_monitor.domain.models.sample_detections import SAMPLE_DETECTIONS
from bache_monitor.domain.repositories.detection_repository import DetectionRepository


@pytest.fixture
def mock_repository():
    repo = MagicMock(spec=DetectionRepository)
    repo.insert_many = AsyncMock(side_effect=lambda items: len(items))
    repo.list_recent = AsyncMock(return_value=[])
    return repo


class TestListDetectionsUseCase:
    @pytest.mark.asyncio
    async def test_returns_feed_with_last_update(self, mock_repository):
        mock_repository.list_recent.return_value = list(SAMPLE_DETECTIONS)

        result = await ListDetectionsUseCase(mock_repository, max_buffer=50).execute()

        mock_repository.list_recent.assert_awaited_once_with(limit=50)
        assert [item.id for item in result.detections] == [d.id for d in SAMPLE_DETECTIONS]
        assert result.last_update == "2024-05-12T15:04:22Z"
        assert result.model_dump(by_alias=True)["lastUpdate"] == "2024-05-12T15:04:22Z"

    @pytest.mark.asyncio
    async def test_empty_store(self, mock_repository):
        result = await ListDetectionsUseCase(mock_repository).execute()
        assert result.detections == []
        assert result.last_update is None
        mock_repository.list_recent.assert_awaited_once_with(limit=200)

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_repository):
        mock_repository.list_recent.side_effect = DetectionStoreError("down")
        with pytest.raises(DetectionStoreError):
            await ListDetectionsUseCase(mock_repository).execute()


class TestSubmitDetectionsUseCase:
    @pytest.mark.asyncio
    async def test_single_object(self, mock_repository):
        use_case = SubmitDetectionsUseCase(mock_repository, noise_cm=3)

        result = await use_case.execute({"depth": 6.5, "location": "Ruta demo"})

        assert result.ok is True
        assert result.stored == 1
        stored = mock_repository.insert_many.await_args.args[0]
        assert stored[0].severity == Severity.HIGH
        assert stored[0].location == "Ruta demo"

    @pytest.mark.asyncio
    async def test_batch_drops_invalid_entries(self, mock_repository):
        use_case = SubmitDetectionsUseCase(mock_repository, noise_cm=3)

        result = await use_case.execute([{"depth": 1.0}, {"depth": "x"}, {}, {"depth": 4.0}])

        assert result.stored == 2
        stored = mock_repository.insert_many.await_args.args[0]
        assert [item.depth for item in stored] == [1.0, 4.0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [[], [{"depth": None}], {"depth": "3.9"}, "BACHE 3.9"])
    async def test_no_valid_entries_raises(self, mock_repository, payload):
        use_case = SubmitDetectionsUseCase(mock_repository, noise_cm=3)

        with pytest.raises(InvalidBatchError) as exc_info:
            await use_case.execute(payload)

        assert exc_info.value.message == "Sin mediciones válidas"
        mock_repository.insert_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_uses_configured_noise(self, mock_repository):
        use_case = SubmitDetectionsUseCase(mock_repository, noise_cm=1)
        await use_case.execute({"depth": 2.5})
        stored = mock_repository.insert_many.await_args.args[0]
        assert stored[0].severity == Severity.HIGH


class TestSummarizeDetectionsUseCase:
    @pytest.mark.asyncio
    async def test_empty_store_falls_back_to_demo_readings(self, mock_repository):
        result = await SummarizeDetectionsUseCase(mock_repository).execute()

        assert result.fallback is True
        assert result.summary.count == 5
        assert result.summary.average_depth == 2.9
        assert result.summary.severity_counts == {"Alta": 2, "Media": 2, "Baja": 1}
        assert result.summary.latest.id == "run-001"
        assert result.summary.sparkline

    @pytest.mark.asyncio
    async def test_filters_stored_readings(self, mock_repository, detection_factory):
        mock_repository.list_recent.return_value = [
            detection_factory("a", 7.0, Severity.HIGH, source="USB"),
            detection_factory("b", 1.0, Severity.LOW),
            detection_factory("c", 6.5, Severity.HIGH),
        ]
        use_case = SummarizeDetectionsUseCase(mock_repository, max_buffer=10, trend_window=5)

        result = await use_case.execute(DetectionFilters(severity="Alta"))

        mock_repository.list_recent.assert_awaited_once_with(limit=10)
        assert result.fallback is False
        assert result.filters.severity == "Alta"
        assert [item.id for item in result.detections] == ["a", "c"]
        assert result.summary.max_depth == 7.0
        assert result.summary.trend == [6.5, 7.0]

    @pytest.mark.asyncio
    async def test_filters_that_match_nothing(self, mock_repository, detection_factory):
        mock_repository.list_recent.return_value = [detection_factory("a", 1.0)]

        result = await SummarizeDetectionsUseCase(mock_repository).execute(DetectionFilters(source="USB"))

        assert result.summary.count == 0
        assert result.summary.average_depth == 0
        assert result.summary.latest is None
        assert result.summary.sparkline == ""
