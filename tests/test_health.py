from fastapi.testclient import TestClient

from demo_microservice.app import create_app
from demo_microservice.config import Settings


def test_health_reports_up(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json"
    assert r.json() == {"status": "UP", "service": "demo-microservice"}


def test_health_is_stable_across_calls(client):
    bodies = [client.get("/health").json() for _ in range(5)]
    assert all(b == bodies[0] for b in bodies)


def test_health_is_same_after_restart(settings):
    with TestClient(create_app(settings)) as client:
        before = client.get("/health")

    with TestClient(create_app(settings)) as client:
        after = client.get("/health")

    assert before.status_code == after.status_code == 200
    assert before.json() == after.json() == {"status": "UP", "service": "demo-microservice"}


def test_health_uses_configured_service_name():
    settings = Settings(_env_file=None, service_name="greeter")

    with TestClient(create_app(settings)) as client:
        assert client.get("/health").json() == {"status": "UP", "service": "greeter"}


def test_health_stays_up_after_shutdown(app):
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200

    # Requests outside the context manager skip the lifespan
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "UP", "service": "demo-microservice"}


def test_health_up_without_lifespan(app):
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "UP", "service": "demo-microservice"}
