from app.db.memory import MemoryStore
from app.services import workflow_service


def test_end_to_end_property_selection(client):
    client.post("/auth/register", json={"email": "alice@example.com", "password": "pw123"})
    token = client.post("/auth/login", json={"email": "alice@example.com", "password": "pw123"}).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    response = client.get("/workflows", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"workflow": {"steps": [], "documents": []}}

    response = client.post("/workflows/select", json={"property": {"id": "p1"}}, headers=headers)
    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.json()["workflow"]["selectedProperty"] == {"id": "p1"}

    response = client.get("/workflows", headers=headers)
    assert response.json()["workflow"]["selectedProperty"]["id"] == "p1"


def test_selected_property_is_stored_verbatim(client, register):
    _, headers = register("bob@example.com")
    payload = {"id": "p9", "address": {"line": "1 Main St", "unit": None}, "tags": [1, "two"]}

    client.post("/workflows/select", json={"property": payload}, headers=headers)
    assert client.get("/workflows", headers=headers).json()["workflow"]["selectedProperty"] == payload

    client.post("/workflows/select", json={"property": "p10"}, headers=headers)
    assert client.get("/workflows", headers=headers).json()["workflow"]["selectedProperty"] == "p10"


def test_workflows_are_isolated_per_user(client, register):
    _, alice = register("alice@example.com")
    _, bob = register("bob@example.com")

    client.post("/workflows/select", json={"property": {"id": "alice-home"}}, headers=alice)
    client.post(
        "/workflows/closing/upload",
        files={"file": ("deed.pdf", b"deed", "application/pdf")},
        headers=alice,
    )

    bob_workflow = client.get("/workflows", headers=bob).json()["workflow"]
    assert "selectedProperty" not in bob_workflow
    assert bob_workflow["documents"] == []
    assert client.get("/documents", headers=bob).json() == {"documents": []}

    client.post("/workflows/select", json={"property": {"id": "bob-home"}}, headers=bob)
    alice_workflow = client.get("/workflows", headers=alice).json()["workflow"]
    assert alice_workflow["selectedProperty"] == {"id": "alice-home"}
    assert len(alice_workflow["documents"]) == 1


def test_workflow_service_lazy_creation():
    store = MemoryStore()
    assert workflow_service.list_documents(store, "ghost") == []
    assert store.get_workflow("ghost") is None

    workflow = workflow_service.get_workflow(store, "ghost")
    assert workflow.public() == {"steps": [], "documents": []}
    assert store.get_workflow("ghost") is workflow

    updated = workflow_service.select_property(store, "someone-else", {"id": "x"})
    assert store.get_workflow("someone-else") is updated
    assert updated.selected_property == {"id": "x"}


def test_explicit_null_selection_is_echoed(client, register):
    _, headers = register("erin@example.com")

    response = client.post("/workflows/select", json={"property": None}, headers=headers)
    assert response.json()["workflow"]["selectedProperty"] is None
    workflow = client.get("/workflows", headers=headers).json()["workflow"]
    assert "selectedProperty" in workflow
    assert workflow["selectedProperty"] is None


def test_select_without_property_field_clears_selection(client, register):
    _, headers = register("frank@example.com")
    client.post("/workflows/select", json={"property": {"id": "p1"}}, headers=headers)

    response = client.post("/workflows/select", json={}, headers=headers)
    assert response.status_code == 200
    assert "selectedProperty" not in response.json()["workflow"]
