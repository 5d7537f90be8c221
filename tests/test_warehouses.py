"""Almacenes."""

API = "/api/v1/warehouses"


class TestWarehouses:

    def test_create(self, client, seed):
        response = client.post(f"{API}/", json=seed.warehouse_payload(warehouse_code="DHM"))
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["warehouse_code"] == "DHM"
        assert data["minimum_temperature"] == -5.0

    def test_duplicate_code_is_409(self, client, seed):
        seed.warehouse(warehouse_code="DHM")
        response = client.post(f"{API}/", json=seed.warehouse_payload(warehouse_code="DHM"))
        assert response.status_code == 409
        assert response.json()["error"] == "warehouse code already exists"

    def test_zero_capacity_is_422(self, client, seed):
        response = client.post(f"{API}/", json=seed.warehouse_payload(minimum_capacity=0))
        assert response.status_code == 422

    def test_patch_temperature_to_zero(self, client, seed):
        warehouse = seed.warehouse(minimum_temperature=-5.0)
        response = client.patch(f"{API}/{warehouse['id']}", json={"minimum_temperature": 0})
        assert response.status_code == 200
        assert response.json()["data"]["minimum_temperature"] == 0

    def test_patch_code_taken_is_409(self, client, seed):
        seed.warehouse(warehouse_code="TAKEN")
        warehouse = seed.warehouse()
        response = client.patch(f"{API}/{warehouse['id']}", json={"warehouse_code": "TAKEN"})
        assert response.status_code == 409

    def test_delete(self, client, seed):
        warehouse = seed.warehouse()
        assert client.delete(f"{API}/{warehouse['id']}").status_code == 204
        assert client.delete(f"{API}/{warehouse['id']}").status_code == 404
