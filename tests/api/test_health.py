import pytest
from fastapi.testclient import TestClient

from profanity_backend.api.deps import ServiceCache, get_service_cache
from profanity_backend.main import create_app


@pytest.fixture
def cache() -> ServiceCache:
    return ServiceCache()


@pytest.fixture
def client(cache: ServiceCache):
    app = create_app()
    app.dependency_overrides[get_service_cache] = lambda: cache
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_vector_store_not_initialized(client):
    response = client.get("/api/v1/health/vector-store")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


def test_health_check_vector_store_ready(client, cache):
    cache._similarity_client = object()
    response = client.get("/api/v1/health/vector-store")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Vector store accessible"}
