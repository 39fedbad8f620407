import json
from decimal import Decimal

import pytest

from conftest import auth, category_id


def test_create_starts_as_draft(client, owner, create_line):
    line = create_line(owner, description="Inscriptions L1")

    resp = client.get(f"/api/budget-lines/{line['id']}", headers=auth(owner))

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "draft"
    assert body["realizedAmount"] is None
    assert body["proposedAmount"] == 1000000
    assert body["userId"] == owner.id
    assert body["category"]["code"] == "70011"
    assert body["user"]["email"] == owner.email
    assert body["validator"] is None


def test_create_ignores_client_status_and_owner(client, db, owner, other):
    resp = client.post(
        "/api/budget-lines",
        json={
            "categoryId": category_id(db, "6047"),
            "proposedAmount": "250.50",
            "year": 2025,
            "status": "validated",
            "userId": other.id,
        },
        headers=auth(owner),
    )

    assert resp.status_code == 201
    assert resp.json()["status"] == "draft"
    assert resp.json()["userId"] == owner.id


@pytest.mark.parametrize(
    "overrides",
    [
        {"categoryId": 99999},
        {"year": 2019},
        {"year": 2031},
        {"proposedAmount": "-5"},
        {"proposedAmount": "beaucoup"},
        {"proposedAmount": "1234.567"},
        {"proposedAmount": "1e20"},
    ],
)
def test_create_rejects_invalid_input(client, db, owner, overrides):
    payload = {"categoryId": category_id(db, "70011"), "proposedAmount": "100", "year": 2025}
    payload.update(overrides)

    resp = client.post("/api/budget-lines", json=payload, headers=auth(owner))

    assert resp.status_code == 400
    assert resp.json()["message"]


@pytest.mark.parametrize("year", [2020, 2030])
def test_create_accepts_year_bounds(client, owner, create_line, year):
    line = create_line(owner, year=year)

    assert line["year"] == year


def test_stored_amount_matches_history(client, owner, create_line):
    line = create_line(owner, amount="1234.50")

    body = client.get(f"/api/budget-lines/{line['id']}", headers=auth(owner)).json()
    entry = client.get(f"/api/budget-lines/{line['id']}/history", headers=auth(owner)).json()[0]

    created = json.loads(entry["newValues"])
    assert created["proposed_amount"] == "1234.50"
    assert Decimal(created["proposed_amount"]) == Decimal(str(body["proposedAmount"]))


def test_create_requires_auth(client, db):
    resp = client.post(
        "/api/budget-lines",
        json={"categoryId": category_id(db, "70011"), "proposedAmount": "1", "year": 2025},
    )

    assert resp.status_code == 401


def test_get_missing_line_is_404(client, owner):
    resp = client.get("/api/budget-lines/4242", headers=auth(owner))

    assert resp.status_code == 404
    assert resp.json() == {"message": "Budget line not found"}


def test_list_is_newest_first_and_filtered(client, owner, create_line):
    first = create_line(owner, year=2024)
    second = create_line(owner, year=2025)
    third = create_line(owner, year=2025)
    client.post(f"/api/budget-lines/{third['id']}/submit", headers=auth(owner))

    ids = [l["id"] for l in client.get("/api/budget-lines", headers=auth(owner)).json()]
    assert ids == [third["id"], second["id"], first["id"]]

    by_year = client.get("/api/budget-lines", params={"year": 2025}, headers=auth(owner)).json()
    assert [l["id"] for l in by_year] == [third["id"], second["id"]]

    drafts = client.get(
        "/api/budget-lines", params={"year": 2025, "status": "draft"}, headers=auth(owner)
    ).json()
    assert [l["id"] for l in drafts] == [second["id"]]


def test_list_rejects_unknown_status(client, owner):
    resp = client.get("/api/budget-lines", params={"status": "archived"}, headers=auth(owner))

    assert resp.status_code == 400


def test_plain_user_only_sees_own_lines(client, owner, other, chef, create_line):
    mine = create_line(owner)
    theirs = create_line(other)

    listed = client.get("/api/budget-lines", headers=auth(owner)).json()
    assert [l["id"] for l in listed] == [mine["id"]]

    everything = client.get("/api/budget-lines", headers=auth(chef)).json()
    assert {l["id"] for l in everything} == {mine["id"], theirs["id"]}


def test_plain_user_cannot_touch_foreign_line(client, owner, other, create_line):
    line = create_line(other)
    url = f"/api/budget-lines/{line['id']}"

    assert client.get(url, headers=auth(owner)).status_code == 403
    assert client.put(url, json={"description": "x"}, headers=auth(owner)).status_code == 403
    assert client.delete(url, headers=auth(owner)).status_code == 403

    # untouched
    assert client.get(url, headers=auth(other)).json()["description"] is None


def test_reviewer_roles_can_manage_foreign_lines(client, owner, chef, comptable, create_line):
    line = create_line(owner)
    url = f"/api/budget-lines/{line['id']}"

    assert client.get(url, headers=auth(chef)).status_code == 200
    resp = client.put(url, json={"realizedAmount": "900000"}, headers=auth(comptable))
    assert resp.status_code == 200
    assert resp.json()["realizedAmount"] == 900000

    assert client.delete(url, headers=auth(chef)).status_code == 200
    assert client.get(url, headers=auth(chef)).status_code == 404


def test_update_merges_permitted_fields_only(client, db, owner, create_line):
    line = create_line(owner, description="avant")
    url = f"/api/budget-lines/{line['id']}"

    resp = client.put(
        url,
        json={
            "proposedAmount": "1200000",
            "categoryId": category_id(db, "70012"),
            "status": "validated",
            "rejectionReason": "sneaky",
        },
        headers=auth(owner),
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["proposedAmount"] == 1200000
    assert body["category"]["code"] == "70012"
    assert body["description"] == "avant"
    assert body["status"] == "draft"
    assert body["rejectionReason"] is None


def test_update_validates_values(client, owner, create_line):
    line = create_line(owner)
    url = f"/api/budget-lines/{line['id']}"

    assert client.put(url, json={"year": 1999}, headers=auth(owner)).status_code == 400
    assert client.put(url, json={"categoryId": 99999}, headers=auth(owner)).status_code == 400
    assert client.put(url, json={"realizedAmount": "-1"}, headers=auth(owner)).status_code == 400
    assert client.put(url, json={"realizedAmount": "0.001"}, headers=auth(owner)).status_code == 400
    assert client.put(url, json={"proposedAmount": "1e20"}, headers=auth(owner)).status_code == 400


def test_delete_own_line(client, owner, create_line):
    line = create_line(owner)
    url = f"/api/budget-lines/{line['id']}"

    resp = client.delete(url, headers=auth(owner))

    assert resp.status_code == 200
    assert client.get(url, headers=auth(owner)).status_code == 404
    assert client.delete(url, headers=auth(owner)).status_code == 404
