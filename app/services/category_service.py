# app/services/category_service.py

import logging

from sqlalchemy.orm import Session

from app.core.budget_codes import BUDGET_CATEGORIES
from app.models.budget_category import BudgetCategory, BudgetType

logger = logging.getLogger(__name__)


def ensure_seeded(db: Session) -> int:
    """Insert the chart of accounts when the table is empty. Returns rows added."""
    if db.query(BudgetCategory.id).first() is not None:
        return 0

    logger.info("Initializing budget categories...")
    db.add_all(
        BudgetCategory(
            code=c["code"],
            label=c["label"],
            type=BudgetType(c["type"]),
            parent_code=c.get("parent_code"),
            description=c.get("description"),
        )
        for c in BUDGET_CATEGORIES
    )
    db.commit()
    logger.info("Budget categories initialized (%d codes)", len(BUDGET_CATEGORIES))
    return len(BUDGET_CATEGORIES)


def list_categories(db: Session):
    return (
        db.query(BudgetCategory)
        .filter(BudgetCategory.is_active.is_(True))
        .order_by(BudgetCategory.code)
        .all()
    )


def get_category_by_code(db: Session, code: str):
    return (
        db.query(BudgetCategory)
        .filter(BudgetCategory.code == code, BudgetCategory.is_active.is_(True))
        .first()
    )
