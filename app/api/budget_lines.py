# app/api/budget_lines.py

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.auth import get_current_user
from app.models.user import User
from app.models.budget_line import BudgetLineStatus
from app.schemas.budget_line import (
    BudgetLineCreate,
    BudgetLineUpdate,
    BudgetLineWithDetails,
)
from app.schemas.budget_history import BudgetHistoryOut
from app.schemas.common import MessageResponse
from app.services import budget_line_service, history_service, workflow_service

router = APIRouter(prefix="/budget-lines", tags=["Budget Lines"])


# --------------------------------------------------
# LIST (plain users only see their own lines)
# --------------------------------------------------
@router.get("", response_model=list[BudgetLineWithDetails])
def list_budget_lines(
    year: Optional[int] = None,
    status: Optional[BudgetLineStatus] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return budget_line_service.list_lines(db, current_user, year=year, status=status)


# --------------------------------------------------
# CREATE DRAFT
# --------------------------------------------------
@router.post("", response_model=BudgetLineWithDetails, status_code=status.HTTP_201_CREATED)
def create_budget_line(
    payload: BudgetLineCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return budget_line_service.create_line(db, payload, current_user)


# --------------------------------------------------
# GET ONE
# --------------------------------------------------
@router.get("/{line_id}", response_model=BudgetLineWithDetails)
def get_budget_line(
    line_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return budget_line_service.get_line(db, line_id, current_user)


# --------------------------------------------------
# UPDATE
# --------------------------------------------------
@router.put("/{line_id}", response_model=BudgetLineWithDetails)
def update_budget_line(
    line_id: int,
    payload: BudgetLineUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return budget_line_service.update_line(db, line_id, payload, current_user)


# --------------------------------------------------
# DELETE
# --------------------------------------------------
@router.delete("/{line_id}", response_model=MessageResponse)
def delete_budget_line(
    line_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    budget_line_service.delete_line(db, line_id, current_user)
    return {"message": "Budget line deleted successfully"}


# --------------------------------------------------
# SUBMIT (draft -> pending)
# --------------------------------------------------
@router.post("/{line_id}/submit", response_model=BudgetLineWithDetails)
def submit_budget_line(
    line_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return workflow_service.submit(db, line_id, current_user)


# --------------------------------------------------
# HISTORY
# --------------------------------------------------
@router.get("/{line_id}/history", response_model=list[BudgetHistoryOut])
def get_budget_line_history(
    line_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    budget_line_service.get_line(db, line_id, current_user)
    return history_service.query(db, line_id)
