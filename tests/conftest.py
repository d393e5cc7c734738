import copy

import pytest
from fastapi.testclient import TestClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from location_service.api.dependencies import get_location_model
from location_service.main import create_app
from location_service.models.location import LocationModel


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    """In-memory stand-in for the handful of motor collection calls the store makes."""

    def __init__(self):
        self.docs: dict = {}
        self.indexes: list = []

    async def create_index(self, keys, **kwargs):
        self.indexes.append(keys)
        return "location_2dsphere"

    async def insert_one(self, document):
        self.docs[document["_id"]] = copy.deepcopy(document)
        return InsertOneResult(document["_id"], acknowledged=True)

    def find(self, filter=None):
        return FakeCursor([copy.deepcopy(doc) for doc in self.docs.values()])

    async def update_one(self, filter, update):
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return UpdateResult({"n": 0, "nModified": 0}, acknowledged=True)
        doc.update(copy.deepcopy(update["$set"]))
        return UpdateResult({"n": 1, "nModified": 1}, acknowledged=True)

    async def delete_one(self, filter):
        removed = self.docs.pop(filter["_id"], None)
        return DeleteResult({"n": 0 if removed is None else 1}, acknowledged=True)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def location_model(collection):
    return LocationModel(collection)


@pytest.fixture
def app(location_model):
    app = create_app()
    app.dependency_overrides[get_location_model] = lambda: location_model
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def cafe_payload():
    return {"name": "Cafe", "location": {"type": "Point", "coordinates": [106.8, -6.2]}}
