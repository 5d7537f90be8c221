"""Compradores: CRUD y reporte de órdenes de compra."""

API = "/api/v1/buyers"


class TestBuyerCrud:

    def test_create_and_list(self, client, seed):
        response = client.post(f"{API}/", json=seed.buyer_payload(card_number_id="402323"))
        assert response.status_code == 201

        buyers = client.get(f"{API}/").json()["data"]
        assert [b["card_number_id"] for b in buyers] == ["402323"]

    def test_duplicate_card_is_409(self, client, seed):
        seed.buyer(card_number_id="402323")
        response = client.post(f"{API}/", json=seed.buyer_payload(card_number_id="402323"))
        assert response.status_code == 409

    def test_patch_card_number(self, client, seed):
        buyer = seed.buyer()
        response = client.patch(f"{API}/{buyer['id']}", json={"card_number_id": "NEW-1"})
        assert response.status_code == 200
        assert response.json()["data"]["card_number_id"] == "NEW-1"

    def test_patch_empty_string_is_422(self, client, seed):
        buyer = seed.buyer()
        response = client.patch(f"{API}/{buyer['id']}", json={"first_name": ""})
        assert response.status_code == 422

    def test_delete(self, client, seed):
        buyer = seed.buyer()
        assert client.delete(f"{API}/{buyer['id']}").status_code == 204
        assert client.get(f"{API}/").json()["data"] == []


class TestReportPurchaseOrders:

    def test_counts_per_buyer(self, client, seed):
        buyer = seed.buyer()
        other = seed.buyer()
        seed.purchase_order(buyer_id=buyer["id"])

        response = client.get(f"{API}/reportPurchaseOrders")
        rows = {row["id"]: row["purchase_orders_count"] for row in response.json()["data"]}
        assert rows == {buyer["id"]: 1, other["id"]: 0}

    def test_filtered_by_id(self, client, seed):
        buyer = seed.buyer()
        seed.purchase_order(buyer_id=buyer["id"])
        seed.purchase_order(buyer_id=buyer["id"])

        response = client.get(f"{API}/reportPurchaseOrders", params={"id": buyer["id"]})
        assert response.json()["data"] == {**buyer, "purchase_orders_count": 2}

    def test_unknown_id_is_404(self, client):
        response = client.get(f"{API}/reportPurchaseOrders", params={"id": 8})
        assert response.status_code == 404
        assert response.json()["error"] == "buyer not found"
