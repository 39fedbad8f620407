"""Provision an account with any role.

    python scripts/create_user.py chef@ucad.sn "Awa Ndiaye" --role chef_dept --department Lettres
"""
import argparse
import getpass
import logging
import sys

from app.core.roles import Role
from app.core.security import hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import budget_category, budget_history, budget_line, budget_report  # noqa: F401
from app.models.user import User

logger = logging.getLogger("create_user")


def create_user(db, email, name, password, role=Role.user, department=None):
    email = email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValueError(f"{email} already exists")

    user = User(
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=Role(role),
        department=department,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("name")
    parser.add_argument("--role", default=Role.user.value, choices=[r.value for r in Role])
    parser.add_argument("--department")
    parser.add_argument("--password", help="prompted when omitted")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    password = args.password or getpass.getpass("Password: ")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = create_user(db, args.email, args.name, password, args.role, args.department)
    except ValueError as e:
        logger.error("%s", e)
        return 1
    finally:
        db.close()

    logger.info("Created user %s (%s, role=%s)", user.id, user.email, user.role.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
