# app/services/workflow_service.py
"""Budget line approval workflow.

    draft --submit--> pending --approve--> validated
                              --reject---> rejected

`validated`, `rejected` and `consolidated` are final: nothing moves a line
out of them, so a rejected line cannot be resubmitted.

Decisions are written with a conditional UPDATE on ``status = 'pending'``.
When two reviewers decide the same line concurrently, the second one finds no
pending row and gets an InvalidTransition instead of overwriting the first.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core import constants
from app.core.exceptions import Forbidden, InvalidTransition, NotFound, ValidationError
from app.core.permissions import Action, has_permission
from app.models.budget_line import BudgetLine, BudgetLineStatus
from app.models.user import User
from app.services import history_service
from app.services.budget_line_service import load_line

logger = logging.getLogger(__name__)


def _ensure_reviewer(reviewer: User):
    if not has_permission(reviewer.role, Action.review_lines):
        raise Forbidden("Insufficient permissions")


def _transition(db: Session, line: BudgetLine, source, values: dict) -> None:
    updated = (
        db.query(BudgetLine)
        .filter(BudgetLine.id == line.id, BudgetLine.status == source)
        .update(values, synchronize_session=False)
    )
    if updated != 1:
        db.rollback()
        raise InvalidTransition(f"Budget line is no longer {source.value}")


def submit(db: Session, line_id: int, actor: User) -> BudgetLine:
    line = load_line(db, line_id)

    if line.user_id != actor.id:
        raise Forbidden("Only the owner can submit a budget line")
    if line.status != BudgetLineStatus.draft:
        raise InvalidTransition("Only draft lines can be submitted")

    now = datetime.utcnow()
    _transition(
        db,
        line,
        BudgetLineStatus.draft,
        {"status": BudgetLineStatus.pending, "updated_at": now},
    )
    history_service.record(
        db,
        line.id,
        constants.HISTORY_SUBMITTED,
        actor.id,
        old_values={"status": BudgetLineStatus.draft.value},
        new_values={"status": BudgetLineStatus.pending.value},
    )
    db.commit()

    logger.info("Budget line %s submitted by user %s", line.id, actor.id)
    db.expire_all()
    return load_line(db, line.id)


def approve(db: Session, line_id: int, reviewer: User) -> BudgetLine:
    _ensure_reviewer(reviewer)
    line = load_line(db, line_id)

    if line.status != BudgetLineStatus.pending:
        raise InvalidTransition("Only pending lines can be approved")

    now = datetime.utcnow()
    values = {
        "status": BudgetLineStatus.validated,
        "validated_by": reviewer.id,
        "validated_at": now,
        "rejection_reason": None,
        "updated_at": now,
    }
    _transition(db, line, BudgetLineStatus.pending, values)
    history_service.record(
        db,
        line.id,
        constants.HISTORY_VALIDATED,
        reviewer.id,
        old_values={"status": BudgetLineStatus.pending.value},
        new_values=values,
    )
    db.commit()

    logger.info("Budget line %s validated by user %s", line.id, reviewer.id)
    db.expire_all()
    return load_line(db, line.id)


def reject(db: Session, line_id: int, reviewer: User, reason: str) -> BudgetLine:
    _ensure_reviewer(reviewer)

    reason = (reason or "").strip()
    if not reason:
        raise ValidationError("A rejection reason is required")

    line = load_line(db, line_id)

    if line.status != BudgetLineStatus.pending:
        raise InvalidTransition("Only pending lines can be rejected")

    now = datetime.utcnow()
    values = {
        "status": BudgetLineStatus.rejected,
        "validated_by": reviewer.id,
        "validated_at": now,
        "rejection_reason": reason,
        "updated_at": now,
    }
    _transition(db, line, BudgetLineStatus.pending, values)
    history_service.record(
        db,
        line.id,
        constants.HISTORY_REJECTED,
        reviewer.id,
        old_values={"status": BudgetLineStatus.pending.value},
        new_values=values,
    )
    db.commit()

    logger.info("Budget line %s rejected by user %s", line.id, reviewer.id)
    db.expire_all()
    return load_line(db, line.id)


def decide(db: Session, line_id: int, reviewer: User, approved: bool, reason: str = None):
    if approved:
        return approve(db, line_id, reviewer)
    return reject(db, line_id, reviewer, reason)


def bulk_decide(db: Session, line_ids, reviewer: User, approved: bool, reason: str = None) -> dict:
    """Apply the same decision to each id independently.

    Every line commits on its own; a failure on one id is reported and does
    not undo the others.
    """
    _ensure_reviewer(reviewer)

    succeeded, failed = [], []
    for line_id in line_ids:
        try:
            decide(db, line_id, reviewer, approved, reason)
        except (Forbidden, InvalidTransition, NotFound, ValidationError) as e:
            db.rollback()
            failed.append({"id": line_id, "message": e.detail})
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Decision on budget line %s failed", line_id)
            failed.append({"id": line_id, "message": "Data store unavailable"})
        else:
            succeeded.append(line_id)

    logger.info(
        "Bulk decision by user %s: %d succeeded, %d failed",
        reviewer.id,
        len(succeeded),
        len(failed),
    )
    return {"succeeded": succeeded, "failed": failed}
