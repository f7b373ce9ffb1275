import copy
import itertools
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from impact_report.core.auth import create_access_token, hash_password
from impact_report.core.mongodb import get_store
from impact_report.main import app


class FakeCollection:
    """In-memory stand-in for the handful of motor collection calls the app makes."""

    _ids = itertools.count(1)

    def __init__(self, name: str):
        self.name = name
        self.docs = []
        self.error = None  # exception to raise from every call

    def _check(self):
        if self.error is not None:
            raise self.error

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    async def find_one(self, query):
        self._check()
        for doc in self.docs:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def update_one(self, query, update, upsert=False):
        self._check()
        for doc in self.docs:
            if self._matches(doc, query):
                doc.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if not upsert:
            return SimpleNamespace(matched_count=0, upserted_id=None)
        doc = {"_id": f"oid-{next(self._ids)}", **copy.deepcopy(query), **copy.deepcopy(update["$set"])}
        self.docs.append(doc)
        return SimpleNamespace(matched_count=0, upserted_id=doc["_id"])

    async def insert_one(self, doc):
        self._check()
        stored = {"_id": f"oid-{next(self._ids)}", **copy.deepcopy(doc)}
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])


class FakeStore:
    """Store handle with the same get_collection contract as core.mongodb.MongoDB."""

    def __init__(self):
        self.collections = {}

    async def get_collection(self, name: str) -> FakeCollection:
        return self.collection(name)

    def collection(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token("admin@example.org", admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(store):
    store.collection("users").docs.append(
        {
            "_id": "user-1",
            "email": "admin@example.org",
            "password": hash_password("s3cret-pass"),
            "firstName": "Ada",
            "lastName": "Admin",
            "autopromote": True,
        }
    )
    return store.collection("users").docs[-1]
