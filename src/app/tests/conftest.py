import random

import pytest
from fastapi.testclient import TestClient

from app.core.settings import DEFAULT_IDEAS_PATH
from app.nodes.data_ingestion import load_dataset, load_dataset_file
from app.pipelines.pipeline import IdeaSelector, get_selector
from app.server import app
from app.tests.test_data import dummy_raw_records


class ScriptedRandom:
    """randrange가 미리 정한 인덱스를 순서대로 돌려주는 rng."""

    def __init__(self, indexes):
        self.indexes = list(indexes)
        self.calls = 0

    def randrange(self, stop, *args, **kwargs):
        idx = self.indexes[self.calls % len(self.indexes)]
        self.calls += 1
        assert 0 <= idx < stop
        return idx


@pytest.fixture
def dummy_ideas():
    return load_dataset(dummy_raw_records)


@pytest.fixture(scope="session")
def sf_ideas():
    return load_dataset_file(DEFAULT_IDEAS_PATH, strict=True)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def client_for():
    """주어진 selector로 get_selector를 덮어쓴 TestClient 생성."""

    def _make(selector: IdeaSelector) -> TestClient:
        app.dependency_overrides[get_selector] = lambda: selector
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
