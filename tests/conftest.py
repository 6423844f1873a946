import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import DESCENDING, ReturnDocument
from pymongo.results import DeleteResult, InsertOneResult

from app.services.rating_service import RatingRepository, get_rating_repository
from main import app


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    def sort(self, key, direction):
        self.documents = sorted(self.documents, key=lambda doc: doc[key], reverse=direction == DESCENDING)
        return self

    async def to_list(self, length=None):
        return [copy.deepcopy(doc) for doc in self.documents]


class FakeCollection:
    """In-memory stand-in for the motor collection methods the repository uses."""

    def __init__(self):
        self.documents = {}
        self.fail_with = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, filter=None):
        self._check()
        return FakeCursor(list(self.documents.values()))

    async def find_one(self, filter):
        self._check()
        document = self.documents.get(filter["_id"])
        return copy.deepcopy(document) if document else None

    async def insert_one(self, document):
        self._check()
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = copy.deepcopy(document)
        return InsertOneResult(document["_id"], True)

    async def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        self._check()
        document = self.documents.get(filter["_id"])
        if document is None:
            return None
        before = copy.deepcopy(document)
        document.update(update["$set"])
        return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before

    async def delete_one(self, filter):
        self._check()
        removed = self.documents.pop(filter["_id"], None)
        return DeleteResult({"n": 1 if removed else 0}, True)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return RatingRepository(collection)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_rating_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
