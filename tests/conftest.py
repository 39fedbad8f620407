import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.core.roles import Role
from app.core.security import create_access_token, hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.models.budget_category import BudgetCategory
from app.models.user import User
from app.services.category_service import ensure_seeded

PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    ensure_seeded(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db, tmp_path, monkeypatch):
    from app.core.config import settings

    monkeypatch.setattr(settings, "REPORTS_DIR", str(tmp_path / "reports"))
    with TestClient(app) as c:
        yield c


def make_user(db, email, role=Role.user, name=None, is_active=True):
    user = User(
        email=email,
        name=name or email.split("@")[0],
        password_hash=PASSWORD_HASH,
        role=role,
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth(user):
    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


def category_id(db, code):
    return db.query(BudgetCategory).filter_by(code=code).one().id


@pytest.fixture
def owner(db):
    return make_user(db, "awa@ucad.sn")


@pytest.fixture
def other(db):
    return make_user(db, "moussa@ucad.sn")


@pytest.fixture
def chef(db):
    return make_user(db, "chef@ucad.sn", role=Role.chef_dept)


@pytest.fixture
def comptable(db):
    return make_user(db, "compta@ucad.sn", role=Role.comptable)


@pytest.fixture
def create_line(client, db):
    def _create(user, code="70011", amount="1000000", year=2025, description=None):
        payload = {
            "categoryId": category_id(db, code),
            "proposedAmount": amount,
            "year": year,
        }
        if description is not None:
            payload["description"] = description
        resp = client.post("/api/budget-lines", json=payload, headers=auth(user))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
