# app/services/history_service.py

import json

from sqlalchemy.orm import Session

from app.models.budget_history import BudgetHistory
from app.models.budget_line import BudgetLine

SNAPSHOT_FIELDS = [
    "id",
    "user_id",
    "category_id",
    "year",
    "proposed_amount",
    "realized_amount",
    "description",
    "status",
    "validated_by",
    "validated_at",
    "rejection_reason",
]


def snapshot(line: BudgetLine) -> dict:
    return {field: getattr(line, field) for field in SNAPSHOT_FIELDS}


def _encode(values):
    if values is None:
        return None
    # Decimal, datetime and enum values are stored by their str() form
    return json.dumps(values, default=str, ensure_ascii=False, sort_keys=True)


def record(
    db: Session,
    line_id: int,
    action: str,
    user_id: int,
    old_values: dict = None,
    new_values: dict = None,
) -> BudgetHistory:
    """Append one audit row. The caller owns the commit."""
    entry = BudgetHistory(
        budget_line_id=line_id,
        action=action,
        old_values=_encode(old_values),
        new_values=_encode(new_values),
        user_id=user_id,
    )
    db.add(entry)
    return entry


def query(db: Session, line_id: int):
    return (
        db.query(BudgetHistory)
        .filter(BudgetHistory.budget_line_id == line_id)
        .order_by(BudgetHistory.created_at.desc(), BudgetHistory.id.desc())
        .all()
    )
