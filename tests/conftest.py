import pytest
from fastapi.testclient import TestClient

from alice_api.main import create_app
from alice_api.settings import Settings
from alice_api.storage import build_memory_store_registry, build_sqlite_store_registry

TEST_JWT_SECRET = "test-secret-not-for-production"


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "jwt_secret": TEST_JWT_SECRET,
        "storage_backend": "memory",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(params=["memory", "sqlite"])
def app(request, tmp_path):
    if request.param == "memory":
        stores = build_memory_store_registry()
        settings = make_settings()
    else:
        db_path = str(tmp_path / "alice.sqlite3")
        stores = build_sqlite_store_registry(db_path)
        settings = make_settings(storage_backend="sqlite", sqlite_db_path=db_path)
    return create_app(settings=settings, stores=stores)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def create_business(client: TestClient, name: str = "Glow Studio", industry: str = "Salon") -> str:
    response = client.post("/business/create", json={"name": name, "industry": industry})
    assert response.status_code == 200
    return response.json()["businessId"]


def create_staff(client: TestClient, business_id: str, name: str = "Jo", national_id: str = "123", pin: str = "9999") -> str:
    response = client.post(
        "/staff/create",
        json={"name": name, "nationalId": national_id, "pin": pin},
        headers={"X-Business-Id": business_id},
    )
    assert response.status_code == 200
    return response.json()["id"]


def login(client: TestClient, business_id: str, name: str = "Jo", national_id: str = "123", pin: str = "9999") -> str:
    response = client.post(
        "/staff/login",
        json={"name": name, "nationalId": national_id, "pin": pin},
        headers={"X-Business-Id": business_id},
    )
    assert response.status_code == 200
    return response.json()["token"]
