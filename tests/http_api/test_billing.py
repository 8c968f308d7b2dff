# tests/http_api/test_billing.py

BILL_URL = "/api/medicines/bill/process"


def _create(client, payload, **overrides):
    response = client.post("/api/medicines", json=dict(payload, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _quantity(client, medicine_id):
    return client.get(f"/api/medicines/{medicine_id}").json()["data"]["quantity"]


def test_bill_prices_lines_and_deducts_stock(client, medicine_payload) -> None:
    medicine = _create(client, medicine_payload)

    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": medicine["id"], "requestedQuantity": 3}]},
    )
    assert response.status_code == 200, response.text

    body = response.json()
    assert body["success"] is True
    bill = body["bill"]
    assert bill["totalAmount"] == 16.5
    assert bill["items"][0]["lineTotal"] == 16.5
    assert bill["items"][0]["quantity"] == 3
    assert bill["items"][0]["remainingStock"] == 147

    assert _quantity(client, medicine["id"]) == 147


def test_bill_accepts_quantity_alias(client, medicine_payload) -> None:
    medicine = _create(client, medicine_payload)

    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": medicine["id"], "quantity": 2}]},
    )
    assert response.status_code == 200
    assert response.json()["bill"]["totalAmount"] == 11.0


def test_bill_insufficient_stock_is_422(client, medicine_payload) -> None:
    medicine = _create(client, medicine_payload, quantity=5)

    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": medicine["id"], "requestedQuantity": 6}]},
    )
    assert response.status_code == 422

    body = response.json()
    assert body["success"] is False
    assert "Insufficient stock" in body["message"]
    assert body["details"] == {"requested": 6, "available": 5}

    assert _quantity(client, medicine["id"]) == 5


def test_bill_partial_failure_keeps_earlier_lines(client, medicine_payload) -> None:
    plenty = _create(client, medicine_payload, quantity=10)
    scarce = _create(client, medicine_payload, name="Aspirin 75mg", quantity=1)

    response = client.post(
        BILL_URL,
        json={
            "items": [
                {"medicineId": plenty["id"], "requestedQuantity": 4},
                {"medicineId": scarce["id"], "requestedQuantity": 2},
            ]
        },
    )
    assert response.status_code == 422

    assert _quantity(client, plenty["id"]) == 6
    assert _quantity(client, scarce["id"]) == 1


def test_bill_unknown_medicine_is_404(client) -> None:
    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": "nope", "requestedQuantity": 1}]},
    )
    assert response.status_code == 404


def test_bill_requires_items(client) -> None:
    response = client.post(BILL_URL, json={"items": []})
    assert response.status_code == 400


def test_bill_rejects_zero_quantity(client, medicine_payload) -> None:
    medicine = _create(client, medicine_payload)

    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": medicine["id"], "requestedQuantity": 0}]},
    )
    assert response.status_code == 400
    assert _quantity(client, medicine["id"]) == 150


def test_bill_rejects_quantity_beyond_integer_column(client, medicine_payload) -> None:
    medicine = _create(client, medicine_payload)

    response = client.post(
        BILL_URL,
        json={"items": [{"medicineId": medicine["id"], "requestedQuantity": 10**20}]},
    )
    assert response.status_code == 400
    assert _quantity(client, medicine["id"]) == 150
