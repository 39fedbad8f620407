from app.core.budget_codes import BUDGET_CATEGORIES
from app.models.budget_category import BudgetCategory
from app.services.category_service import ensure_seeded, get_category_by_code

from conftest import auth


def test_seeding_is_idempotent(db):
    assert db.query(BudgetCategory).count() == len(BUDGET_CATEGORIES)

    assert ensure_seeded(db) == 0
    assert db.query(BudgetCategory).count() == len(BUDGET_CATEGORIES)


def test_lookup_by_code(db):
    category = get_category_by_code(db, "70011")

    assert category.type.value == "recette"
    assert get_category_by_code(db, "does-not-exist") is None


def test_list_categories(client, owner):
    resp = client.get("/api/budget-categories", headers=auth(owner))

    assert resp.status_code == 200
    codes = [c["code"] for c in resp.json()]
    assert len(codes) == len(BUDGET_CATEGORIES)
    assert codes == sorted(codes)
    assert {"recette", "depense"} == {c["type"] for c in resp.json()}


def test_list_categories_requires_auth(client):
    assert client.get("/api/budget-categories").status_code == 401
