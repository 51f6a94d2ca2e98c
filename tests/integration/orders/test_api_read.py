"""Integration tests for the order read endpoints.

Covers:
- GET /orders: empty list, every created order present.
- GET /orders/{id}: success, unknown id 404, malformed id 404.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture()
def created_order(api_client, order_payload):
    return api_client.post("/orders", order_payload, format="json").json()


class TestOrderList:
    def test_empty_list(self, api_client):
        response = api_client.get("/orders")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_every_created_order(self, api_client, order_payload):
        first = api_client.post("/orders", order_payload, format="json").json()
        order_payload["clientName"] = "Jane Roe"
        second = api_client.post("/orders", order_payload, format="json").json()

        response = api_client.get("/orders")

        assert response.status_code == 200
        ids = {order["id"] for order in response.json()}
        assert ids == {first["id"], second["id"]}

    def test_list_items_keep_their_order(self, api_client, created_order):
        (order,) = api_client.get("/orders").json()
        assert [i["fruitName"] for i in order["items"]] == ["Apple", "Banana"]


class TestOrderRetrieve:
    def test_returns_order(self, api_client, created_order):
        response = api_client.get(f"/orders/{created_order['id']}")
        assert response.status_code == 200
        assert response.json() == created_order

    def test_unknown_id_returns_404(self, api_client):
        response = api_client.get("/orders/507f1f77bcf86cd799439011")
        assert response.status_code == 404
        assert "507f1f77bcf86cd799439011" in response.json()["message"]

    def test_malformed_id_returns_404(self, api_client):
        response = api_client.get("/orders/not-an-object-id")
        assert response.status_code == 404
