import json

from app.models.budget_history import BudgetHistory
from app.services import history_service

from conftest import auth


def history(client, user, line_id):
    resp = client.get(f"/api/budget-lines/{line_id}/history", headers=auth(user))
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_each_mutation_appends_one_entry(client, owner, chef, create_line):
    line = create_line(owner)
    line_id = line["id"]
    assert [h["action"] for h in history(client, owner, line_id)] == ["created"]

    client.put(f"/api/budget-lines/{line_id}", json={"description": "v2"}, headers=auth(owner))
    client.post(f"/api/budget-lines/{line_id}/submit", headers=auth(owner))
    client.post(
        f"/api/consolidation/validate/{line_id}", json={"approved": True}, headers=auth(chef)
    )

    entries = history(client, owner, line_id)
    assert [h["action"] for h in entries] == ["validated", "submitted", "updated", "created"]
    assert [h["userId"] for h in entries] == [chef.id, owner.id, owner.id, owner.id]
    ids = [h["id"] for h in entries]
    assert ids == sorted(ids, reverse=True)


def test_failed_operations_leave_no_entry(client, owner, other, chef, create_line):
    line_id = create_line(owner)["id"]

    client.post(f"/api/budget-lines/{line_id}/submit", headers=auth(other))
    client.put(f"/api/budget-lines/{line_id}", json={"year": 1900}, headers=auth(owner))
    client.post(
        f"/api/consolidation/validate/{line_id}", json={"approved": True}, headers=auth(chef)
    )

    assert [h["action"] for h in history(client, owner, line_id)] == ["created"]


def test_update_snapshots_are_readable(client, owner, create_line):
    line_id = create_line(owner, amount="500")["id"]

    client.put(
        f"/api/budget-lines/{line_id}", json={"proposedAmount": "750"}, headers=auth(owner)
    )

    update = history(client, owner, line_id)[0]
    old = json.loads(update["oldValues"])
    new = json.loads(update["newValues"])
    assert old["status"] == "draft"
    assert old["proposed_amount"] == "500.00"
    assert new == {"proposed_amount": "750.00"}


def test_rejection_is_recorded(client, owner, chef, create_line):
    line_id = create_line(owner)["id"]
    client.post(f"/api/budget-lines/{line_id}/submit", headers=auth(owner))
    client.post(
        f"/api/consolidation/validate/{line_id}",
        json={"approved": False, "rejectionReason": "incomplete justification"},
        headers=auth(chef),
    )

    latest = history(client, owner, line_id)[0]
    assert latest["action"] == "rejected"
    assert json.loads(latest["newValues"])["rejection_reason"] == "incomplete justification"


def test_delete_entry_outlives_the_line(client, db, owner, create_line):
    line_id = create_line(owner)["id"]

    client.delete(f"/api/budget-lines/{line_id}", headers=auth(owner))

    entries = history_service.query(db, line_id)
    assert [e.action for e in entries] == ["deleted", "created"]
    assert json.loads(entries[0].old_values)["id"] == line_id
    assert entries[0].new_values is None


def test_history_follows_line_access_rules(client, owner, other, create_line):
    line_id = create_line(owner)["id"]

    resp = client.get(f"/api/budget-lines/{line_id}/history", headers=auth(other))

    assert resp.status_code == 403


def test_record_appends_without_committing(db, owner):
    history_service.record(db, 123, "created", owner.id, new_values={"year": 2025})
    db.commit()

    row = db.query(BudgetHistory).filter_by(budget_line_id=123).one()
    assert json.loads(row.new_values) == {"year": 2025}
    assert row.old_values is None
