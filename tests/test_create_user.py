import importlib.util
from pathlib import Path

import pytest

from app.core.roles import Role
from app.core.security import verify_password
from app.models.user import User

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "create_user.py"


def load_script():
    spec = importlib.util.spec_from_file_location("create_user_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_create_user_with_role(db):
    script = load_script()

    user = script.create_user(
        db, "Chef@UCAD.sn", "Awa Ndiaye", "lettres2025", role="direction", department="Lettres"
    )

    stored = db.query(User).filter_by(id=user.id).one()
    assert stored.email == "chef@ucad.sn"
    assert stored.role == Role.direction
    assert stored.department == "Lettres"
    assert stored.is_active
    assert verify_password("lettres2025", stored.password_hash)


def test_create_user_rejects_duplicate_email(db):
    script = load_script()
    script.create_user(db, "awa@ucad.sn", "Awa", "first-password")

    with pytest.raises(ValueError, match="already exists"):
        script.create_user(db, "AWA@ucad.sn", "Awa again", "second-password")

    assert db.query(User).filter_by(email="awa@ucad.sn").count() == 1


def test_main_reports_duplicate(db, owner):
    script = load_script()

    assert script.main([owner.email, "Someone", "--password", "whatever1"]) == 1
