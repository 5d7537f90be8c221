"""Productos: ciclo de vida completo y reporte de registros de precio."""

API = "/api/v1/products"


class TestProductLifecycle:
    """Crear, duplicar, leer, actualizar parcialmente y borrar"""

    def test_full_lifecycle(self, client, seed):
        payload = seed.product_payload(product_code="ABC", description="Yogurt")

        created = client.post(f"{API}/", json=payload)
        assert created.status_code == 201
        product = created.json()["data"]

        duplicate = client.post(f"{API}/", json=payload)
        assert duplicate.status_code == 409

        fetched = client.get(f"{API}/{product['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["data"]["product_code"] == "ABC"

        patched = client.patch(f"{API}/{product['id']}", json={"description": "X"})
        assert patched.status_code == 200
        data = patched.json()["data"]
        assert data["description"] == "X"
        assert data["product_code"] == "ABC"
        assert data["width"] == payload["width"]
        assert data["seller_id"] == payload["seller_id"]

        assert client.delete(f"{API}/{product['id']}").status_code == 204
        assert client.get(f"{API}/{product['id']}").status_code == 404


class TestProductValidation:

    def test_unknown_seller_is_404(self, client, seed):
        response = client.post(f"{API}/", json=seed.product_payload(seller_id=500))
        assert response.status_code == 404
        assert response.json()["error"] == "seller not found"

    def test_non_positive_width_is_422(self, client, seed):
        response = client.post(f"{API}/", json=seed.product_payload(width=0))
        assert response.status_code == 422

    def test_patch_with_invalid_value_is_422(self, client, seed):
        product = seed.product()
        response = client.patch(f"{API}/{product['id']}", json={"net_weight": -1})
        assert response.status_code == 422

    def test_patch_code_taken_is_409(self, client, seed):
        seed.product(product_code="TAKEN")
        product = seed.product()
        response = client.patch(f"{API}/{product['id']}", json={"product_code": "TAKEN"})
        assert response.status_code == 409
        assert response.json()["error"] == "product code already exists"

    def test_explicit_zero_is_applied(self, client, seed):
        product = seed.product(expiration_rate=0.4)
        response = client.patch(f"{API}/{product['id']}", json={"expiration_rate": 0})
        assert response.json()["data"]["expiration_rate"] == 0


class TestReportRecords:

    def test_counts_per_product(self, client, seed):
        product = seed.product()
        other = seed.product()
        seed.product_record(product_id=product["id"])
        seed.product_record(product_id=product["id"])

        response = client.get(f"{API}/reportRecords")
        assert response.status_code == 200
        counts = {row["product_id"]: row["records_count"] for row in response.json()["data"]}
        assert counts == {product["id"]: 2, other["id"]: 0}

    def test_filtered_by_id(self, client, seed):
        product = seed.product(description="Queso")
        seed.product_record(product_id=product["id"])

        response = client.get(f"{API}/reportRecords", params={"id": product["id"]})
        assert response.json()["data"] == {
            "product_id": product["id"],
            "description": "Queso",
            "records_count": 1,
        }

    def test_unknown_id_is_404(self, client):
        response = client.get(f"{API}/reportRecords", params={"id": 31})
        assert response.status_code == 404
        assert response.json()["error"] == "product not found"

    def test_lowercase_route_alias(self, client, seed):
        product = seed.product()
        seed.product_record(product_id=product["id"])
        response = client.get(f"{API}/reportrecords", params={"id": product["id"]})
        assert response.status_code == 200
        assert response.json()["data"]["records_count"] == 1
