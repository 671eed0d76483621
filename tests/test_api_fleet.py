import uuid

import pytest


def test_fleet_crud(client, make_headers):
    manager = make_headers("manager")
    technician_id = str(uuid.uuid4())

    res = client.post(
        "/fleet",
        json={"registration": " CA 123-456 ", "make": "Toyota", "model": "Hilux", "technician_id": technician_id},
        headers=manager,
    )
    assert res.status_code == 200
    vehicle = res.json()["data"]
    assert vehicle["registration"] == "CA 123-456"
    assert vehicle["technician_id"] == technician_id

    res = client.put(f"/fleet/{vehicle['id']}", json={"vin": "AHT123"}, headers=manager)
    assert res.json()["data"]["vin"] == "AHT123"
    assert res.json()["message"] == "Fleet item updated"

    res = client.get("/fleet", headers=make_headers("technician"))
    assert [v["id"] for v in res.json()["data"]] == [vehicle["id"]]

    res = client.delete(f"/fleet/{vehicle['id']}", headers=manager)
    assert res.json()["message"] == "Fleet item deleted"

    res = client.get(f"/fleet/{vehicle['id']}", headers=manager)
    assert res.status_code == 404
    assert res.json()["message"] == "Fleet item not found"


@pytest.mark.parametrize(
    "body",
    [{}, {"registration": "   "}, {"registration": "X" * 21}, {"registration": "CA 1", "technician_id": "not-a-uuid"}],
)
def test_fleet_create_validation(client, admin_headers, body):
    res = client.post("/fleet", json=body, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input"


def test_fleet_writes_need_manager(client, make_headers):
    res = client.post("/fleet", json={"registration": "CA 1"}, headers=make_headers("technician"))
    assert res.status_code == 403


def test_fleet_update_missing_vehicle(client, admin_headers):
    res = client.put(f"/fleet/{uuid.uuid4()}", json={"make": "Ford"}, headers=admin_headers)
    assert res.status_code == 404


def test_fleet_delete_missing_vehicle(client, admin_headers):
    res = client.delete(f"/fleet/{uuid.uuid4()}", headers=admin_headers)
    assert res.json() == {"status": "success", "message": "No record found or already deleted", "data": None}
