"""Empleados: CRUD y reporte de órdenes de entrada."""

API = "/api/v1/employees"


class TestEmployeeCrud:

    def test_create(self, client, seed):
        payload = seed.employee_payload(card_number_id="EMP-1")
        response = client.post(f"{API}/", json=payload)
        assert response.status_code == 201
        assert response.json()["data"]["card_number_id"] == "EMP-1"

    def test_duplicate_card_is_409(self, client, seed):
        seed.employee(card_number_id="EMP-1")
        response = client.post(f"{API}/", json=seed.employee_payload(card_number_id="EMP-1"))
        assert response.status_code == 409
        assert response.json()["error"] == "employee card number id already exists"

    def test_unknown_warehouse_is_404(self, client, seed):
        response = client.post(f"{API}/", json=seed.employee_payload(warehouse_id=70))
        assert response.status_code == 404

    def test_patch_last_name(self, client, seed):
        employee = seed.employee()
        response = client.patch(f"{API}/{employee['id']}", json={"last_name": "Pereira"})
        data = response.json()["data"]
        assert data["last_name"] == "Pereira"
        assert data["first_name"] == employee["first_name"]

    def test_delete_unknown_is_404(self, client):
        assert client.delete(f"{API}/3").status_code == 404


class TestReportInboundOrders:

    def test_counts_per_employee(self, client, seed):
        worker = seed.employee()
        idle = seed.employee()
        seed.inbound_order(employee_id=worker["id"])
        seed.inbound_order(employee_id=worker["id"])

        response = client.get(f"{API}/reportInboundOrders")
        assert response.status_code == 200
        rows = {row["id"]: row for row in response.json()["data"]}
        assert rows[worker["id"]]["inbound_orders_count"] == 2
        assert rows[idle["id"]]["inbound_orders_count"] == 0

    def test_filtered_by_id_includes_employee_fields(self, client, seed):
        employee = seed.employee(first_name="Lucía")
        seed.inbound_order(employee_id=employee["id"])

        response = client.get(f"{API}/reportInboundOrders", params={"id": employee["id"]})
        assert response.json()["data"] == {**employee, "inbound_orders_count": 1}

    def test_unknown_id_is_404(self, client):
        response = client.get(f"{API}/reportInboundOrders", params={"id": 404})
        assert response.status_code == 404
        assert response.json()["error"] == "employee not found"
