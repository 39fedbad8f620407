from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.db.session import get_db
from app.schemas.analysis import BudgetSummary, CategoryVariance
from app.services import analysis_service

router = APIRouter(prefix="/budget-analysis", tags=["Budget Analysis"])


@router.get("/summary/{year}", response_model=BudgetSummary)
def budget_summary(
    year: int,
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return analysis_service.get_summary(db, year)


@router.get("/variances/{year}", response_model=list[CategoryVariance])
def budget_variances(
    year: int,
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return analysis_service.get_variances(db, year)
