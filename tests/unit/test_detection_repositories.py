"""
Unit tests for the MongoDB and in-memory detection repositories.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import PyMongoError

from bache_monitor.domain.constants import DetectionFields
from bache_monitor.domain.exceptions import DetectionStoreError
from bache_monitor.domain.models.detection import DEFAULT_LOCATION, DEFAULT_VEHICLE, Severity
from bache_monitor.infrastructure.db.memory_detection_repository import InMemoryDetectionRepository
from bache_monitor.infrastructure.db.mongo_detection_repository import MongoDetectionRepository


class FakeCursor:
    """Minimal async cursor supporting sort/limit chaining."""

    def __init__(self, docs):
        self.docs = list(docs)
        self.sort_args = None
        self.limit_value = None

    def sort(self, key, direction):
        self.sort_args = (key, direction)
        return self

    def limit(self, value):
        self.limit_value = value
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self.docs[: self.limit_value]:
            yield doc


@pytest.fixture
def mock_collection():
    collection = MagicMock()
    collection.insert_many = AsyncMock(return_value=MagicMock(inserted_ids=["x", "y"]))
    return collection


class TestMongoDetectionRepository:
    @pytest.mark.asyncio
    async def test_insert_many_maps_documents(self, mock_collection, detection_factory):
        repo = MongoDetectionRepository(detection_collection=mock_collection)
        detections = [
            detection_factory("a", 6.5, Severity.HIGH, timestamp="2024-05-12T15:00:00.000Z"),
            detection_factory("b", 1.0, timestamp="sin hora"),
        ]

        stored = await repo.insert_many(detections)

        assert stored == 2
        docs = mock_collection.insert_many.await_args.args[0]
        assert docs[0][DetectionFields.ID] == "a"
        assert docs[0][DetectionFields.SEVERITY] == "Alta"
        assert docs[0][DetectionFields.CREATED_AT] == datetime(2024, 5, 12, 15, 0, tzinfo=timezone.utc)
        assert isinstance(docs[1][DetectionFields.CREATED_AT], datetime)

    @pytest.mark.asyncio
    async def test_insert_nothing_skips_database(self, mock_collection):
        repo = MongoDetectionRepository(detection_collection=mock_collection)
        assert await repo.insert_many([]) == 0
        mock_collection.insert_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_insert_error_is_wrapped(self, mock_collection, detection_factory):
        mock_collection.insert_many.side_effect = PyMongoError("write failed")
        repo = MongoDetectionRepository(detection_collection=mock_collection)

        with pytest.raises(DetectionStoreError, match="write failed"):
            await repo.insert_many([detection_factory("a", 1.0)])

    @pytest.mark.asyncio
    async def test_list_recent_sorts_newest_first(self, mock_collection, detection_factory):
        repo = MongoDetectionRepository(detection_collection=mock_collection)
        doc = repo._detection_to_document(detection_factory("a", 2.0, Severity.MEDIUM))
        cursor = FakeCursor([doc, doc, doc])
        mock_collection.find.return_value = cursor

        items = await repo.list_recent(limit=2)

        mock_collection.find.assert_called_once_with({})
        assert cursor.sort_args == (DetectionFields.CREATED_AT, -1)
        assert cursor.limit_value == 2
        assert len(items) == 2
        assert items[0] == detection_factory("a", 2.0, Severity.MEDIUM)

    @pytest.mark.asyncio
    async def test_legacy_document_is_back_filled(self, mock_collection):
        mock_collection.find.return_value = FakeCursor([
            {
                DetectionFields.MONGO_ID: "65f0c0ffee",
                DetectionFields.DEPTH: 7,
                DetectionFields.CREATED_AT: datetime(2024, 5, 12, 15, 0, tzinfo=timezone.utc),
            }
        ])
        repo = MongoDetectionRepository(detection_collection=mock_collection, noise_cm=3)

        [item] = await repo.list_recent(limit=10)

        assert item.id == "65f0c0ffee"
        assert item.depth == 7.0
        assert item.severity == Severity.HIGH
        assert item.timestamp == "2024-05-12T15:00:00.000Z"
        assert item.location == DEFAULT_LOCATION
        assert item.vehicle == DEFAULT_VEHICLE
        assert item.raw == "BACHE 7.00"

    @pytest.mark.asyncio
    async def test_read_error_is_wrapped(self, mock_collection):
        mock_collection.find.side_effect = PyMongoError("no server")
        repo = MongoDetectionRepository(detection_collection=mock_collection)

        with pytest.raises(DetectionStoreError):
            await repo.list_recent(limit=10)


class TestInMemoryDetectionRepository:
    @pytest.mark.asyncio
    async def test_newest_first_across_batches(self, detection_factory):
        repo = InMemoryDetectionRepository()
        await repo.insert_many([detection_factory("a", 1.0), detection_factory("b", 2.0)])
        await repo.insert_many([detection_factory("c", 3.0)])

        items = await repo.list_recent(limit=10)
        assert [item.id for item in items] == ["c", "b", "a"]

    @pytest.mark.asyncio
    async def test_limit_returns_newest(self, detection_factory):
        repo = InMemoryDetectionRepository()
        stored = await repo.insert_many([detection_factory(str(i), float(i)) for i in range(5)])

        assert stored == 5
        items = await repo.list_recent(limit=3)
        assert [item.id for item in items] == ["4", "3", "2"]
        assert len(await repo.list_recent(limit=10)) == 5

    @pytest.mark.asyncio
    async def test_limit_and_empty(self, detection_factory):
        repo = InMemoryDetectionRepository()
        assert await repo.list_recent(limit=5) == []
        assert await repo.insert_many([]) == 0

        await repo.insert_many([detection_factory(str(i), 1.0) for i in range(4)])
        assert len(await repo.list_recent(limit=2)) == 2
