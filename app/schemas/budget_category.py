from typing import Optional

from app.models.budget_category import BudgetType
from app.schemas.common import CamelModel


class BudgetCategoryOut(CamelModel):
    id: int
    code: str
    label: str
    type: BudgetType
    parent_code: Optional[str] = None
    description: Optional[str] = None
    is_active: bool
