import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mountains.dao.memory import InMemoryMountainRepository
from mountains.dependencies.dao import get_mountain_repository
from mountains.main import app
from mountains.schemas.mountain import Mountain


def make_mountain(**overrides) -> Mountain:
    data = {
        "id": 1,
        "name": "Everest",
        "country": "Nepal",
        "range": "Himalaya",
        "altitude": 8848,
        "isNorthern": True,
    }
    data.update(overrides)
    return Mountain(**data)


@pytest.fixture()
def repo():
    return InMemoryMountainRepository()


@pytest.fixture()
def client(repo):
    app.dependency_overrides[get_mountain_repository] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
