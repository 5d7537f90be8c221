"""Registros de precio."""

API = "/api/v1/productRecords"


class TestProductRecords:

    def test_create(self, client, seed):
        response = client.post(f"{API}/", json=seed.product_record_payload(sale_price=20.0))
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["sale_price"] == 20.0
        assert data["last_update_date"] == "2024-05-01T10:00:00"

    def test_records_are_not_unique(self, client, seed):
        product = seed.product()
        payload = seed.product_record_payload(product_id=product["id"])
        assert client.post(f"{API}/", json=payload).status_code == 201
        assert client.post(f"{API}/", json=payload).status_code == 201

    def test_negative_price_is_422(self, client, seed):
        response = client.post(f"{API}/", json=seed.product_record_payload(purchase_price=-1))
        assert response.status_code == 422

    def test_unknown_product_is_404(self, client, seed):
        response = client.post(f"{API}/", json=seed.product_record_payload(product_id=77))
        assert response.status_code == 404
        assert response.json()["error"] == "product not found"

    def test_patch_price_to_zero(self, client, seed):
        record = seed.product_record()
        response = client.patch(f"{API}/{record['id']}", json={"purchase_price": 0})
        assert response.json()["data"]["purchase_price"] == 0
        assert response.json()["data"]["sale_price"] == record["sale_price"]

    def test_get_unknown_is_404(self, client):
        response = client.get(f"{API}/10")
        assert response.status_code == 404
        assert response.json()["error"] == "product record not found"
