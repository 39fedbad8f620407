# app/api/consolidation.py

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.permissions import Action, require_permission
from app.models.user import User
from app.models.budget_line import BudgetLineStatus
from app.schemas.budget_line import (
    BudgetLineWithDetails,
    BulkDecisionRequest,
    BulkDecisionResult,
    DecisionRequest,
)
from app.services import budget_line_service, workflow_service

router = APIRouter(prefix="/consolidation", tags=["Consolidation"])


@router.get("/pending", response_model=list[BudgetLineWithDetails])
def list_pending_lines(
    year: Optional[int] = None,
    db: Session = Depends(get_db),
    reviewer: User = Depends(require_permission(Action.review_lines)),
):
    return budget_line_service.list_lines(
        db, reviewer, year=year, status=BudgetLineStatus.pending
    )


# --------------------------------------------------
# DECIDE (APPROVE / REJECT)
# --------------------------------------------------
@router.post("/validate/{line_id}", response_model=BudgetLineWithDetails)
def validate_line(
    line_id: int,
    payload: DecisionRequest,
    db: Session = Depends(get_db),
    reviewer: User = Depends(require_permission(Action.review_lines)),
):
    return workflow_service.decide(
        db, line_id, reviewer, payload.approved, payload.rejection_reason
    )


@router.post("/validate", response_model=BulkDecisionResult)
def validate_lines(
    payload: BulkDecisionRequest,
    db: Session = Depends(get_db),
    reviewer: User = Depends(require_permission(Action.review_lines)),
):
    return workflow_service.bulk_decide(
        db, payload.ids, reviewer, payload.approved, payload.rejection_reason
    )
