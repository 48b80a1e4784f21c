"""
Test configuration for the Twin Lock backend.

Fixtures build every component explicitly (no .env, no process-wide
singletons) and drive the event clock with a FakeClock so window
expiry can be tested without sleeping.
"""
import pytest
from fastapi.testclient import TestClient

from settings import Settings
from core.progression_engine import ProgressionEngine
from main import create_app

ADMIN_KEY = "TEST_ADMIN_KEY"

CREDENTIALS = [
    {"team_id": "ALPHA", "node_id": "SYS-01", "access_key": "ALPHAK01"},
    {"team_id": "ALPHA", "node_id": "SYS-02", "access_key": "ALPHAK02"},
    {"team_id": "TEAM12", "node_id": "SYS-01", "access_key": "T12K01"},
    {"team_id": "TEAM12", "node_id": "SYS-02", "access_key": "T12K02"},
]


class FakeClock:
    """Callable clock returning a controllable epoch timestamp."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        admin_key=ADMIN_KEY,
        duration_minutes=30,
        credentials=CREDENTIALS,
        form_link_node1="https://forms.example/node1",
        form_link_node2="https://forms.example/node2",
    )


@pytest.fixture
def engine(settings, clock):
    return ProgressionEngine.from_settings(settings, clock=clock)


@pytest.fixture
def running_engine(engine):
    """Engine with the event started and ALPHA/SYS-01 logged in."""
    engine.start_event()
    engine.login("ALPHA", "SYS-01", "ALPHAK01")
    return engine


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def admin_headers():
    return {"X-Admin-Key": ADMIN_KEY}
