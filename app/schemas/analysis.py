from app.schemas.common import CamelModel


class BudgetSummary(CamelModel):
    total_proposed: float
    total_realized: float
    total_recettes: float
    total_depenses: float
    realization_rate: float


class CategoryVariance(CamelModel):
    category_code: str
    category_label: str
    proposed: float
    realized: float
    variance: float
    variance_percent: float
    severity: str
