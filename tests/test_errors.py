from fastapi.testclient import TestClient
from app.main import app
import pytest

client = TestClient(app)

def test_404_not_found():
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert "error" in data
    assert "code" in data
    assert data["code"] == "HTTP_ERROR"

def test_405_method_not_allowed():
    response = client.delete("/listings")
    assert response.status_code == 405
    assert response.json()["code"] == "HTTP_ERROR"

def test_validation_error_structure():
    from pydantic import BaseModel

    class Item(BaseModel):
        name: str
        price: int

    @app.post("/test-validation")
    def create_item(item: Item):
        return item

    response = client.post("/test-validation", json={"name": "foo", "price": "invalid"})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert "details" in data
    assert len(data["details"]) > 0

@pytest.mark.parametrize("exc_name,status,code", [
    ("ValidationError", 400, "VALIDATION_ERROR"),
    ("ConflictError", 400, "CONFLICT"),
    ("AuthError", 401, "AUTHENTICATION_FAILED"),
    ("UpstreamError", 500, "UPSTREAM_ERROR"),
])
def test_custom_exception(exc_name, status, code):
    from app.core import exceptions

    exc_class = getattr(exceptions, exc_name)
    path = f"/test-custom-error/{exc_name}"

    @app.get(path)
    def trigger_custom_error():
        raise exc_class(message="Something specific")

    response = client.get(path)
    assert response.status_code == status
    data = response.json()
    assert data["code"] == code
    assert data["error"] == "Something specific"

def test_auth_error_advertises_bearer_scheme():
    with TestClient(app) as lifespan_client:
        response = lifespan_client.get("/workflows")
    assert response.status_code == 401
    assert response.json()["code"] == "AUTHENTICATION_FAILED"
    assert response.headers["www-authenticate"] == "Bearer"
