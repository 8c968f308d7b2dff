# tests/http_api/test_medicines.py

def _create(client, payload):
    response = client.post("/api/medicines", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_medicine_routes_are_tagged(app) -> None:
    paths = {
        path: operations
        for path, operations in app.openapi()["paths"].items()
        if path.startswith("/api/medicines")
    }
    assert paths, "No /api/medicines routes registered."
    for operations in paths.values():
        for operation in operations.values():
            assert "medicines" in operation["tags"]


def test_list_starts_empty(client) -> None:
    response = client.get("/api/medicines")
    assert response.status_code == 200

    body = response.json()
    assert body == {"success": True, "message": None, "count": 0, "data": []}


def test_create_then_list(client, medicine_payload) -> None:
    created = _create(client, medicine_payload)

    assert created["id"]
    assert created["name"] == "Paracetamol 500mg"
    assert created["expiryDate"] == "2025-12-31"
    assert created["price"] == 5.5
    assert "createdAt" in created and "updatedAt" in created

    listed = client.get("/api/medicines").json()
    assert listed["count"] == 1
    assert listed["data"][0]["id"] == created["id"]


def test_get_single_medicine(client, medicine_payload) -> None:
    created = _create(client, medicine_payload)

    response = client.get(f"/api/medicines/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["company"] == "Cipla Ltd"


def test_create_missing_required_field_is_400(client, medicine_payload) -> None:
    del medicine_payload["company"]

    response = client.post("/api/medicines", json=medicine_payload)
    assert response.status_code == 400

    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert any(d["field"] == "company" for d in body["details"])


def test_create_negative_price_is_400(client, medicine_payload) -> None:
    medicine_payload["price"] = -2
    response = client.post("/api/medicines", json=medicine_payload)
    assert response.status_code == 400


def test_create_infinite_price_is_400(client) -> None:
    # 1e400 overflows to infinity when parsed as a float.
    response = client.post(
        "/api/medicines",
        content=(
            '{"name": "X", "company": "Y", "price": 1e400,'
            ' "quantity": 1, "expiryDate": "2025-12-31"}'
        ),
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert client.get("/api/medicines").json()["count"] == 0


def test_create_quantity_beyond_integer_column_is_400(client, medicine_payload) -> None:
    medicine_payload["quantity"] = 10**20
    response = client.post("/api/medicines", json=medicine_payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_update_quantity_beyond_integer_column_is_400(client, medicine_payload) -> None:
    created = _create(client, medicine_payload)

    response = client.put(f"/api/medicines/{created['id']}", json={"quantity": 10**20})
    assert response.status_code == 400
    assert client.get(f"/api/medicines/{created['id']}").json()["data"]["quantity"] == 150


def test_create_blank_name_is_400(client, medicine_payload) -> None:
    medicine_payload["name"] = "   "
    response = client.post("/api/medicines", json=medicine_payload)
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_update_medicine(client, medicine_payload) -> None:
    created = _create(client, medicine_payload)

    response = client.put(
        f"/api/medicines/{created['id']}",
        json={"quantity": 10, "expiryDate": "2027-06-30"},
    )
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["quantity"] == 10
    assert data["expiryDate"] == "2027-06-30"
    assert data["name"] == created["name"]


def test_update_unknown_id_is_404(client) -> None:
    response = client.put("/api/medicines/unknown-id", json={"price": 1.0})
    assert response.status_code == 404

    body = response.json()
    assert body["success"] is False
    assert "unknown-id" in body["message"]


def test_delete_medicine(client, medicine_payload) -> None:
    created = _create(client, medicine_payload)

    response = client.delete(f"/api/medicines/{created['id']}")
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get("/api/medicines").json()["count"] == 0
    assert client.get(f"/api/medicines/{created['id']}").status_code == 404


def test_delete_unknown_id_is_404(client) -> None:
    response = client.delete("/api/medicines/unknown-id")
    assert response.status_code == 404
    assert response.json()["success"] is False
