import pytest
from fastapi.testclient import TestClient

from homevalue.core.cache import cache
from homevalue.main import create_app


class ScriptedRandom:
    """Random source that replays fixed draws, cycling when exhausted."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture(autouse=True)
def _reset_cache():
    # Cached valuations and rate-limit buckets must not leak between tests
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def scripted_random():
    return ScriptedRandom
