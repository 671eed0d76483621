import uuid

import pytest

from fieldops.auth.jwt import create_access_token
from fieldops.models import DropCable, LinkBuild


def _drop_cable_body(client_id, **extra):
    body = {
        "client_id": client_id,
        "circuit_number": "CIR-1001",
        "site_b_name": "Bellville Depot",
        "county": "tablebay",
        "week": "2025-7",
    }
    body.update(extra)
    return body


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_requires_authentication(client):
    res = client.get("/drop-cable")
    assert res.status_code == 401
    assert res.json() == {"status": "error", "message": "Not authenticated"}


def test_invalid_token_is_rejected(client):
    res = client.get("/drop-cable", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


def test_token_without_known_role_is_forbidden(client):
    token = create_access_token(user_id=str(uuid.uuid4()), email="x@example.com", role=None)
    res = client.get("/drop-cable", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403
    assert res.json()["message"] == "Forbidden"


def test_cookie_token_is_accepted(client, make_headers):
    token = make_headers("technician")["Authorization"].split(" ", 1)[1]
    client.cookies.set("accessToken", token)
    res = client.get("/drop-cable")
    assert res.status_code == 200
    assert res.json()["status"] == "success"


def test_technician_cannot_create(client, make_headers, openserve_client):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id),
        headers=make_headers("technician"),
    )
    assert res.status_code == 403


def test_create_drop_cable_derives_week_and_quote_no(client, admin_headers, openserve_client):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id, quote_no="HANDMADE-1", notes="call before arrival"),
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert body["message"] == "Drop cable job created"

    data = body["data"]
    assert data["week"] == "2025-07"
    assert data["quote_no"] == "OSV-Q01007"
    assert data["notes"][0]["text"] == "call before arrival"


def test_create_drop_cable_validation_error(client, admin_headers):
    res = client.post(
        "/drop-cable",
        json={"circuit_number": "CIR-1", "client_id": "not-a-uuid"},
        headers=admin_headers,
    )
    assert res.status_code == 400
    body = res.json()
    assert body["status"] == "error"
    assert body["message"] == "Invalid input"
    assert body["errors"]


def test_completion_percent_above_100_is_rejected(client, admin_headers, openserve_client):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id, install_completion_percent=120),
        headers=admin_headers,
    )
    assert res.status_code == 400


def test_update_drop_cable_regenerates_quote_no(client, admin_headers, openserve_client):
    created = client.post(
        "/drop-cable", json=_drop_cable_body(openserve_client.id), headers=admin_headers
    ).json()["data"]

    res = client.put(
        "/drop-cable",
        json={"id": created["id"], "week": "2025-09", "notes": "survey moved"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["week"] == "2025-09"
    assert data["quote_no"] == "OSV-Q01009"
    assert [n["text"] for n in data["notes"]] == ["survey moved"]


def test_update_unknown_drop_cable(client, admin_headers):
    res = client.put("/drop-cable", json={"id": str(uuid.uuid4()), "pm": "x"}, headers=admin_headers)
    assert res.status_code == 404
    assert res.json()["message"] == "Drop cable job not found"


def test_get_drop_cable_by_id_and_lists(client, make_headers, db, openserve_client, technician):
    order = DropCable(
        client_id=openserve_client.id,
        circuit_number="CIR-2002",
        site_b_name="Paarl",
        technician_id=technician.id,
    )
    db.add(order)
    db.commit()

    headers = make_headers("manager")
    assert client.get(f"/drop-cable/{order.id}", headers=headers).json()["data"]["circuit_number"] == "CIR-2002"
    assert len(client.get(f"/drop-cable/client/{openserve_client.id}", headers=headers).json()["data"]) == 1
    assert len(client.get(f"/drop-cable/technician/{technician.id}", headers=headers).json()["data"]) == 1
    assert client.get("/drop-cable/client/someone-else", headers=headers).json()["data"] == []


def test_unknown_drop_cable_is_404(client, admin_headers):
    res = client.get(f"/drop-cable/{uuid.uuid4()}", headers=admin_headers)
    assert res.status_code == 404
    assert res.json() == {"status": "error", "message": "Drop cable job not found"}


def test_delete_drop_cable(client, admin_headers, db, openserve_client):
    order = DropCable(client_id=openserve_client.id, circuit_number="CIR-3", site_b_name="Somerset West")
    db.add(order)
    db.commit()
    order_id = order.id

    res = client.delete(f"/drop-cable/{order_id}", headers=admin_headers)
    assert res.json()["data"]["id"] == order_id

    again = client.delete(f"/drop-cable/{order_id}", headers=admin_headers)
    assert again.status_code == 200
    assert again.json() == {
        "status": "success",
        "message": "No record found or already deleted",
        "data": None,
    }


def test_link_build_create_and_filters(client, make_headers, openserve_client):
    headers = make_headers("manager")
    res = client.post(
        "/link-build",
        json={
            "client_id": openserve_client.id,
            "client": "Openserve",
            "technician": "Sipho",
            "circuit_number": "LB-77",
            "service_type": "full_splice",
            "no_of_fiber_pairs": 2,
            "week": "2025-20",
        },
        headers=headers,
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["service_type"] == "full_splice"
    assert data["quote_no"] == "OSV-Q01020"

    assert len(client.get("/link-build/client/Openserve", headers=headers).json()["data"]) == 1
    assert len(client.get("/link-build/technician/Sipho", headers=headers).json()["data"]) == 1


def test_link_build_rejects_unknown_service_type(client, admin_headers):
    res = client.post("/link-build", json={"service_type": "dark_fibre"}, headers=admin_headers)
    assert res.status_code == 400


def test_link_build_delete_checks_id_format(client, admin_headers):
    res = client.delete("/link-build/42", headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid id format"


def test_link_build_delete_missing_row(client, admin_headers, db):
    res = client.delete(f"/link-build/{uuid.uuid4()}", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["data"] is None


def test_link_build_delete_existing_row(client, admin_headers, db):
    order = LinkBuild(circuit_number="LB-9")
    db.add(order)
    db.commit()
    order_id = order.id

    res = client.delete(f"/link-build/{order_id}", headers=admin_headers)
    assert res.json()["data"]["circuit_number"] == "LB-9"
    assert db.query(LinkBuild).count() == 0


def test_clients_crud(client, admin_headers, make_headers):
    res = client.post(
        "/clients",
        json={
            "first_name": "Lerato",
            "last_name": "Nkosi",
            "email": "lerato@vumatel.example",
            "company_name": "Vumatel",
        },
        headers=admin_headers,
    )
    assert res.status_code == 200
    client_id = res.json()["data"]["id"]

    res = client.put(f"/clients/{client_id}", json={"phone_number": "0215550000"}, headers=admin_headers)
    assert res.json()["data"]["phone_number"] == "0215550000"

    res = client.get(f"/clients/{client_id}", headers=make_headers("technician"))
    assert res.json()["data"]["company_name"] == "Vumatel"


def test_client_update_needs_a_field(client, admin_headers, openserve_client):
    res = client.put(f"/clients/{openserve_client.id}", json={}, headers=admin_headers)
    assert res.status_code == 400


def test_managers_cannot_create_clients(client, make_headers):
    res = client.post(
        "/clients",
        json={"first_name": "A", "last_name": "B", "email": "a@example.com"},
        headers=make_headers("manager"),
    )
    assert res.status_code == 403


def test_metrics_endpoint(client):
    res = client.get("/metrics")
    assert res.status_code == 200
    assert "fieldops_api_latency_seconds" in res.text


@pytest.mark.parametrize(
    "field",
    [
        "survey_planning",
        "callout",
        "installation",
        "spon_budi_opti",
        "splitter_install",
        "mousepad_install",
        "client_id",
        "circuit_number",
        "site_b_name",
    ],
)
def test_update_rejects_null_for_required_columns(client, admin_headers, openserve_client, field):
    created = client.post(
        "/drop-cable", json=_drop_cable_body(openserve_client.id), headers=admin_headers
    ).json()["data"]

    res = client.put("/drop-cable", json={"id": created["id"], field: None}, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input"


@pytest.mark.parametrize("field", ["circuit_number", "site_b_name"])
def test_create_rejects_blank_required_strings(client, admin_headers, openserve_client, field):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id, **{field: "   "}),
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input"


def test_create_with_explicit_false_flag(client, admin_headers, openserve_client):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id, callout=False),
        headers=admin_headers,
    )
    assert res.json()["data"]["callout"] is False


def test_blank_optional_string_is_cleared(client, admin_headers, openserve_client):
    res = client.post(
        "/drop-cable",
        json=_drop_cable_body(openserve_client.id, pm="  "),
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["data"]["pm"] is None


def test_unknown_client_is_rejected_before_write(client, admin_headers, db):
    res = client.post(
        "/drop-cable", json=_drop_cable_body(str(uuid.uuid4())), headers=admin_headers
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Client not found"
    assert db.query(DropCable).count() == 0


def test_client_update_rejects_null_name(client, admin_headers, openserve_client):
    res = client.put(
        f"/clients/{openserve_client.id}", json={"first_name": None}, headers=admin_headers
    )
    assert res.status_code == 400
