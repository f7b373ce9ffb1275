import asyncio

import pytest

from impact_report.core import mongodb as mongodb_module
from impact_report.core.config import Settings
from impact_report.core.mongodb import MongoDB, init_store


class FakeDatabase:
    def __init__(self, name):
        self.name = name

    def __getitem__(self, collection_name):
        return (self.name, collection_name)


class CountingClient:
    created = 0

    def __init__(self, uri, **kwargs):
        type(self).created += 1
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False

    def __getitem__(self, name):
        return FakeDatabase(name)

    def close(self):
        self.closed = True


@pytest.fixture
def counting_client(monkeypatch):
    CountingClient.created = 0
    monkeypatch.setattr(mongodb_module, "AsyncIOMotorClient", CountingClient)
    return CountingClient


@pytest.mark.asyncio
async def test_concurrent_first_use_creates_one_client(counting_client):
    handle = MongoDB(Settings(mongo_uri="mongodb://localhost:27017", mongo_db_name="test-db"))

    databases = await asyncio.gather(*(handle.get_database() for _ in range(10)))

    assert counting_client.created == 1
    assert all(db is databases[0] for db in databases)
    assert databases[0].name == "test-db"
    assert handle.client.kwargs["serverSelectionTimeoutMS"] == 8000


@pytest.mark.asyncio
async def test_missing_uri_fails_on_first_use(counting_client):
    handle = init_store(Settings(mongo_uri=None))
    assert not handle.connected

    with pytest.raises(RuntimeError, match="MONGO_URI"):
        await handle.get_database()
    assert counting_client.created == 0


@pytest.mark.asyncio
async def test_disconnect_resets_handle(counting_client):
    handle = MongoDB(Settings(mongo_uri="mongodb://localhost:27017"))
    assert await handle.get_collection("hero") == ("gogo-impact-report", "hero")
    client = handle.client

    await handle.disconnect()

    assert client.closed
    assert not handle.connected
