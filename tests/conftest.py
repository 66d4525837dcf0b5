import copy

import pytest

from moviemagnet.db.session import MovieStore
from tests.fakes.mongo import FakeCollection, FakeMongoClient
from tests.fakes.movies_stub import INCEPTION, SUPERBAD


@pytest.fixture()
def inception() -> dict:
    # copy: tests may mutate it
    return copy.deepcopy(INCEPTION)


@pytest.fixture()
def superbad() -> dict:
    return copy.deepcopy(SUPERBAD)


@pytest.fixture()
def mongo_client() -> FakeMongoClient:
    return FakeMongoClient()


@pytest.fixture()
def movies_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture()
def store(mongo_client, movies_collection) -> MovieStore:
    return MovieStore(mongo_client, movies_collection)
