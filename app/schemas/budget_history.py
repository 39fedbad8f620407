from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class BudgetHistoryOut(CamelModel):
    id: int
    budget_line_id: int
    action: str
    old_values: Optional[str] = None
    new_values: Optional[str] = None
    user_id: int
    created_at: datetime
