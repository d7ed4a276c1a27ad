"""Tests for the orders HTTP API."""

from fastapi.testclient import TestClient

from conftest import BURGER, FRIES

BURGER_ID = BURGER[0]
FRIES_ID = FRIES[0]


def _create_order(client: TestClient) -> int:
    response = client.post("/api/v1/orders")
    assert response.status_code == 201
    order_id: int = response.json()["order_id"]
    return order_id


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestOrderEndpoints:
    """Tests for order endpoints."""

    def test_create_and_get_empty_order(self, client: TestClient):
        order_id = _create_order(client)

        response = client.get(f"/api/v1/orders/{order_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["order_id"] == order_id
        assert body["order_number"] is None
        assert body["number_assign_date"] is None
        assert body["status"] == "open"
        assert body["line_items"] == []
        assert body["total_due"] is None
        assert body["tender"] is None

    def test_create_with_number_out_of_range(self, client: TestClient):
        response = client.post("/api/v1/orders", json={"order_number": 101})
        assert response.status_code == 422

    def test_get_unknown_order(self, client: TestClient):
        assert client.get("/api/v1/orders/999").status_code == 404

    def test_scan_items_flow(self, client: TestClient):
        order_id = _create_order(client)
        assert client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}").json()["quantity"] == 1
        assert client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}").json()["quantity"] == 2
        assert client.post(f"/api/v1/orders/{order_id}/items/{FRIES_ID}").json()["quantity"] == 1

        body = client.get(f"/api/v1/orders/{order_id}").json()

        assert [(li["item_id"], li["quantity"]) for li in body["line_items"]] == [(BURGER_ID, 2), (FRIES_ID, 1)]
        assert body["line_items"][0]["unit_price"] == "5.99"
        assert body["line_items"][0]["extended_price"] == "11.98"
        assert body["total_due"] == "15.63"

    def test_assign_number(self, client: TestClient):
        first = _create_order(client)
        second = _create_order(client)

        assert client.post(f"/api/v1/orders/{first}/number").json()["order_number"] == 1
        assert client.post(f"/api/v1/orders/{first}/number").json()["order_number"] == 1
        assert client.post(f"/api/v1/orders/{second}/number").json()["order_number"] == 2

        body = client.get(f"/api/v1/orders/{first}").json()
        assert body["status"] == "numbered"
        assert body["number_assign_date"] is not None

    def test_assign_number_unknown_order(self, client: TestClient):
        assert client.post("/api/v1/orders/999/number").status_code == 404

    def test_list_orders_filter(self, client: TestClient):
        numbered = _create_order(client)
        unnumbered = _create_order(client)
        client.post(f"/api/v1/orders/{numbered}/number")

        all_ids = {o["order_id"] for o in client.get("/api/v1/orders").json()}
        numbered_ids = {o["order_id"] for o in client.get("/api/v1/orders", params={"numbered": True}).json()}
        open_ids = {o["order_id"] for o in client.get("/api/v1/orders", params={"numbered": False}).json()}

        assert all_ids == {numbered, unnumbered}
        assert numbered_ids == {numbered}
        assert open_ids == {unnumbered}

    def test_record_tender(self, client: TestClient):
        order_id = _create_order(client)
        client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}")

        response = client.post(f"/api/v1/orders/{order_id}/tender", json={"amount_tendered": "10.00"})

        assert response.status_code == 200
        assert response.json() == {"amount_tendered": "10.00", "change_due": "3.53"}
        body = client.get(f"/api/v1/orders/{order_id}").json()
        assert body["status"] == "paid"
        assert body["tender"] == {"amount_tendered": "10.00", "change_due": "3.53"}

    def test_record_tender_insufficient(self, client: TestClient):
        order_id = _create_order(client)
        client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}")

        response = client.post(f"/api/v1/orders/{order_id}/tender", json={"amount_tendered": "1.00"})
        assert response.status_code == 400


class TestLineItemEndpoints:
    """Tests for line item endpoints."""

    def test_add_unknown_item(self, client: TestClient):
        order_id = _create_order(client)
        assert client.post(f"/api/v1/orders/{order_id}/items/999").status_code == 404

    def test_add_to_unknown_order(self, client: TestClient):
        assert client.post(f"/api/v1/orders/999/items/{BURGER_ID}").status_code == 404

    def test_set_quantity(self, client: TestClient):
        order_id = _create_order(client)
        client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}")

        response = client.put(f"/api/v1/orders/{order_id}/items/{BURGER_ID}", json={"quantity": 3})

        assert response.status_code == 204
        (line_item,) = client.get(f"/api/v1/orders/{order_id}").json()["line_items"]
        assert line_item["quantity"] == 3

    def test_set_quantity_negative(self, client: TestClient):
        order_id = _create_order(client)
        client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}")

        response = client.put(f"/api/v1/orders/{order_id}/items/{BURGER_ID}", json={"quantity": -1})
        assert response.status_code == 422

    def test_set_quantity_item_not_on_order(self, client: TestClient):
        order_id = _create_order(client)
        response = client.put(f"/api/v1/orders/{order_id}/items/{BURGER_ID}", json={"quantity": 2})
        assert response.status_code == 404

    def test_set_quantity_unknown_item(self, client: TestClient):
        order_id = _create_order(client)
        response = client.put(f"/api/v1/orders/{order_id}/items/999", json={"quantity": 2})

        assert response.status_code == 404
        assert response.json()["detail"] == "Item not found"

    def test_remove_item(self, client: TestClient):
        order_id = _create_order(client)
        client.post(f"/api/v1/orders/{order_id}/items/{BURGER_ID}")

        assert client.delete(f"/api/v1/orders/{order_id}/items/{BURGER_ID}").status_code == 204
        assert client.delete(f"/api/v1/orders/{order_id}/items/{BURGER_ID}").status_code == 204

        body = client.get(f"/api/v1/orders/{order_id}").json()
        assert body["line_items"] == []
        assert body["total_due"] is None
