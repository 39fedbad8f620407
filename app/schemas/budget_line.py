# app/schemas/budget_line.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, model_validator

from app.models.budget_line import BudgetLineStatus
from app.schemas.auth import UserOut
from app.schemas.budget_category import BudgetCategoryOut
from app.schemas.common import CamelModel


class BudgetLineCreate(CamelModel):
    category_id: int
    proposed_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    year: int
    description: Optional[str] = None


class BudgetLineUpdate(CamelModel):
    category_id: Optional[int] = None
    proposed_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
    realized_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
    year: Optional[int] = None
    description: Optional[str] = None


class BudgetLineOut(CamelModel):
    id: int
    user_id: int
    category_id: int
    year: int
    proposed_amount: float
    realized_amount: Optional[float] = None
    description: Optional[str] = None
    status: BudgetLineStatus
    validated_by: Optional[int] = None
    validated_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BudgetLineWithDetails(BudgetLineOut):
    user: UserOut
    category: BudgetCategoryOut
    validator: Optional[UserOut] = None


class DecisionRequest(CamelModel):
    approved: bool
    rejection_reason: Optional[str] = None


class BulkDecisionRequest(CamelModel):
    ids: List[int] = Field(min_length=1)
    approved: bool
    rejection_reason: Optional[str] = None

    @model_validator(mode="after")
    def dedupe_ids(self):
        self.ids = list(dict.fromkeys(self.ids))
        return self


class BulkFailure(CamelModel):
    id: int
    message: str


class BulkDecisionResult(CamelModel):
    succeeded: List[int] = []
    failed: List[BulkFailure] = []
