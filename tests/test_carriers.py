"""Transportistas."""

API = "/api/v1/carriers"


class TestCarriers:

    def test_create(self, client, seed):
        response = client.post(f"{API}/", json=seed.carrier_payload(cid="CID#1"))
        assert response.status_code == 201
        assert response.json()["data"]["cid"] == "CID#1"

    def test_duplicate_cid_is_409(self, client, seed):
        seed.carrier(cid="CID#1")
        response = client.post(f"{API}/", json=seed.carrier_payload(cid="CID#1"))
        assert response.status_code == 409
        assert response.json()["error"] == "carrier cid already exists"

    def test_unknown_locality_is_404(self, client, seed):
        response = client.post(f"{API}/", json=seed.carrier_payload(locality_id=12))
        assert response.status_code == 404
        assert response.json()["error"] == "locality not found"

    def test_move_to_other_locality(self, client, seed):
        carrier = seed.carrier()
        target = seed.locality()
        response = client.patch(f"{API}/{carrier['id']}", json={"locality_id": target["id"]})
        assert response.status_code == 200
        assert response.json()["data"]["locality_id"] == target["id"]

    def test_get_and_delete(self, client, seed):
        carrier = seed.carrier()
        assert client.get(f"{API}/{carrier['id']}").json()["data"] == carrier
        assert client.delete(f"{API}/{carrier['id']}").status_code == 204
        assert client.get(f"{API}/{carrier['id']}").status_code == 404
