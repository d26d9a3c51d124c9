import copy
from dataclasses import dataclass
from datetime import datetime

import pytest
from bson import ObjectId

from app import create_app
from config import TestingConfig
from utils.db import AttendanceStore


@dataclass
class InsertResult:
    inserted_id: ObjectId


@dataclass
class DeleteResult:
    deleted_count: int


class InMemoryCollection:
    """The slice of pymongo.collection.Collection used by DocumentCollection."""

    def __init__(self, name):
        self.name = name
        self.documents = []

    def _matches(self, document, query):
        for field, condition in query.items():
            value = document.get(field)
            if isinstance(condition, dict):
                for operator, operand in condition.items():
                    if operator != "$gt":
                        raise NotImplementedError(operator)
                    if value is None or not value > operand:
                        return False
            elif value != condition:
                return False
        return True

    def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertResult(document["_id"])

    def find_one(self, query):
        for document in self.documents:
            if self._matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query):
        return [copy.deepcopy(d) for d in self.documents if self._matches(d, query)]

    def delete_many(self, query):
        kept = [d for d in self.documents if not self._matches(d, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return DeleteResult(deleted)


class InMemoryDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, InMemoryCollection(name))


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def store(database):
    store = AttendanceStore(database)
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def app(store):
    return create_app(TestingConfig, store=store)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def employee(store):
    return store.employees.insert({
        "name": "John Doe",
        "firstName": "John",
        "department": "IT",
        "dateCreated": datetime(2024, 1, 1),
    })
