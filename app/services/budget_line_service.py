# app/services/budget_line_service.py

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session, joinedload

from app.core import constants
from app.core.config import settings
from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.core.permissions import Action, has_permission
from app.models.budget_category import BudgetCategory
from app.models.budget_line import BudgetLine, BudgetLineStatus
from app.models.user import User
from app.services import history_service

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
AMOUNT_LIMIT = Decimal("1e13")

UPDATABLE_FIELDS = (
    "category_id",
    "proposed_amount",
    "realized_amount",
    "year",
    "description",
)


# --------------------------------------------------
# VALIDATION
# --------------------------------------------------
def _validate_year(year):
    if year is None or not settings.BUDGET_YEAR_MIN <= year <= settings.BUDGET_YEAR_MAX:
        raise ValidationError(
            f"Year must be between {settings.BUDGET_YEAR_MIN} "
            f"and {settings.BUDGET_YEAR_MAX}"
        )


def _validate_amount(value, field="proposedAmount", required=True):
    if value is None:
        if required:
            raise ValidationError(f"{field} is required")
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field} must be a non-negative number")
    # Numeric(15, 2) column
    if amount >= AMOUNT_LIMIT or amount != amount.quantize(CENT):
        raise ValidationError(f"{field} must have at most 13 digits and 2 decimals")
    return amount.quantize(CENT)


def _validate_category(db: Session, category_id):
    category = (
        db.query(BudgetCategory)
        .filter(BudgetCategory.id == category_id, BudgetCategory.is_active.is_(True))
        .first()
    )
    if not category:
        raise ValidationError("Unknown budget category")
    return category


def ensure_can_access(line: BudgetLine, actor: User, action: Action = Action.view_any_line):
    if line.user_id != actor.id and not has_permission(actor.role, action):
        raise Forbidden("Access denied")


def _details_query(db: Session):
    return db.query(BudgetLine).options(
        joinedload(BudgetLine.user),
        joinedload(BudgetLine.category),
        joinedload(BudgetLine.validator),
    )


def load_line(db: Session, line_id: int) -> BudgetLine:
    line = _details_query(db).filter(BudgetLine.id == line_id).first()
    if not line:
        raise NotFound("Budget line not found")
    return line


# --------------------------------------------------
# CRUD
# --------------------------------------------------
def create_line(db: Session, payload, actor: User) -> BudgetLine:
    _validate_category(db, payload.category_id)
    _validate_year(payload.year)
    proposed = _validate_amount(payload.proposed_amount)

    now = datetime.utcnow()
    line = BudgetLine(
        user_id=actor.id,
        category_id=payload.category_id,
        year=payload.year,
        proposed_amount=proposed,
        description=payload.description,
        status=BudgetLineStatus.draft,
        created_at=now,
        updated_at=now,
    )
    db.add(line)
    db.flush()

    history_service.record(
        db,
        line.id,
        constants.HISTORY_CREATED,
        actor.id,
        new_values=history_service.snapshot(line),
    )
    db.commit()

    logger.info("Budget line %s created by user %s", line.id, actor.id)
    return load_line(db, line.id)


def get_line(db: Session, line_id: int, actor: User) -> BudgetLine:
    line = load_line(db, line_id)
    ensure_can_access(line, actor)
    return line


def list_lines(
    db: Session,
    actor: User,
    year: int = None,
    status: BudgetLineStatus = None,
    user_id: int = None,
):
    query = _details_query(db)

    # plain users only ever see their own lines
    if not has_permission(actor.role, Action.view_any_line):
        user_id = actor.id

    if year is not None:
        query = query.filter(BudgetLine.year == year)
    if status is not None:
        query = query.filter(BudgetLine.status == status)
    if user_id is not None:
        query = query.filter(BudgetLine.user_id == user_id)

    return query.order_by(BudgetLine.created_at.desc(), BudgetLine.id.desc()).all()


def update_line(db: Session, line_id: int, payload, actor: User) -> BudgetLine:
    line = load_line(db, line_id)
    ensure_can_access(line, actor, Action.edit_any_line)

    data = {
        k: v
        for k, v in payload.model_dump(exclude_unset=True).items()
        if k in UPDATABLE_FIELDS
    }

    if "category_id" in data:
        _validate_category(db, data["category_id"])
    if "year" in data:
        _validate_year(data["year"])
    if "proposed_amount" in data:
        data["proposed_amount"] = _validate_amount(data["proposed_amount"])
    if "realized_amount" in data:
        data["realized_amount"] = _validate_amount(
            data["realized_amount"], field="realizedAmount", required=False
        )

    old_values = history_service.snapshot(line)

    for k, v in data.items():
        setattr(line, k, v)
    line.updated_at = datetime.utcnow()

    history_service.record(
        db,
        line.id,
        constants.HISTORY_UPDATED,
        actor.id,
        old_values=old_values,
        new_values=data,
    )
    db.commit()

    logger.info("Budget line %s updated by user %s", line.id, actor.id)
    db.expire_all()
    return load_line(db, line.id)


def delete_line(db: Session, line_id: int, actor: User) -> None:
    line = load_line(db, line_id)
    ensure_can_access(line, actor, Action.edit_any_line)

    old_values = history_service.snapshot(line)

    db.delete(line)
    history_service.record(
        db,
        line_id,
        constants.HISTORY_DELETED,
        actor.id,
        old_values=old_values,
    )
    db.commit()

    logger.info("Budget line %s deleted by user %s", line_id, actor.id)
