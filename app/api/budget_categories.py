from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.db.session import get_db
from app.schemas.budget_category import BudgetCategoryOut
from app.services import category_service

router = APIRouter(prefix="/budget-categories", tags=["Budget Categories"])


@router.get("", response_model=list[BudgetCategoryOut])
def list_budget_categories(
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return category_service.list_categories(db)
