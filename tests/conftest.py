import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import app


@pytest.fixture
def client():
    """Test client with the simulated delay disabled."""
    app.dependency_overrides[get_settings] = lambda: Settings(simulated_delay_seconds=0.0)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def crop_payload():
    return {
        "nitrogen": 90,
        "phosphorus": 42,
        "potassium": 43,
        "temperature": 20.8,
        "humidity": 82.0,
        "ph": 6.5,
        "rainfall": 202.9,
    }


@pytest.fixture
def fertilizer_payload():
    return {
        "nitrogen": 40,
        "phosphorus": 85,
        "potassium": 43,
        "cropType": "Rice",
        "soilType": "Loamy",
    }
