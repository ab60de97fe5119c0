import pytest
from fastapi.testclient import TestClient

from core.domain import AgeGroup, SwingFeatureVector
from core.services import InMemorySessionRepository, SwingAnalyzer


@pytest.fixture
def example_features() -> SwingFeatureVector:
    """High-school swing used throughout: a clear WHIPPER."""
    return SwingFeatureVector(
        bat_speed_mph=72,
        attack_angle_deg=11,
        trigger_to_impact_ms=148,
        speed_efficiency_pct=88,
        hand_cast_distance_in=5,
        distance_in_zone_in=14,
    )


@pytest.fixture
def analyzer() -> SwingAnalyzer:
    return SwingAnalyzer()


@pytest.fixture
def hs() -> AgeGroup:
    return AgeGroup.HIGH_SCHOOL


@pytest.fixture
def client():
    from main import app

    app.state.repository = InMemorySessionRepository()
    with TestClient(app) as test_client:
        yield test_client
