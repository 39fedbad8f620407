# app/services/analysis_service.py

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.core.constants import VARIANCE_ATTENTION_MAX, VARIANCE_COMPLIANT_MAX
from app.models.budget_category import BudgetCategory, BudgetType
from app.models.budget_line import BudgetLine


def _percent(part, whole) -> float:
    if not whole:
        return 0.0
    return part / whole * 100


def classify_variance(variance_percent: float) -> str:
    gap = abs(variance_percent)
    if gap <= VARIANCE_COMPLIANT_MAX:
        return "compliant"
    if gap <= VARIANCE_ATTENTION_MAX:
        return "attention"
    return "critical"


def get_summary(db: Session, year: int) -> dict:
    row = (
        db.query(
            func.coalesce(func.sum(BudgetLine.proposed_amount), 0),
            func.coalesce(func.sum(BudgetLine.realized_amount), 0),
            func.coalesce(
                func.sum(
                    case(
                        (BudgetCategory.type == BudgetType.recette, BudgetLine.proposed_amount),
                        else_=0,
                    )
                ),
                0,
            ),
            func.coalesce(
                func.sum(
                    case(
                        (BudgetCategory.type == BudgetType.depense, BudgetLine.proposed_amount),
                        else_=0,
                    )
                ),
                0,
            ),
        )
        .select_from(BudgetLine)
        .outerjoin(BudgetCategory, BudgetLine.category_id == BudgetCategory.id)
        .filter(BudgetLine.year == year)
        .one()
    )

    total_proposed, total_realized, total_recettes, total_depenses = (float(v) for v in row)

    return {
        "total_proposed": total_proposed,
        "total_realized": total_realized,
        "total_recettes": total_recettes,
        "total_depenses": total_depenses,
        "realization_rate": _percent(total_realized, total_proposed),
    }


def get_variances(db: Session, year: int) -> list:
    rows = (
        db.query(
            BudgetCategory.code,
            BudgetCategory.label,
            func.coalesce(func.sum(BudgetLine.proposed_amount), 0),
            func.coalesce(func.sum(BudgetLine.realized_amount), 0),
        )
        .select_from(BudgetLine)
        .join(BudgetCategory, BudgetLine.category_id == BudgetCategory.id)
        .filter(BudgetLine.year == year)
        .group_by(BudgetCategory.code, BudgetCategory.label)
        .order_by(BudgetCategory.code)
        .all()
    )

    variances = []
    for code, label, proposed, realized in rows:
        proposed = float(proposed)
        realized = float(realized)
        variance = realized - proposed
        variance_percent = _percent(variance, proposed)
        variances.append({
            "category_code": code,
            "category_label": label,
            "proposed": proposed,
            "realized": realized,
            "variance": variance,
            "variance_percent": variance_percent,
            "severity": classify_variance(variance_percent),
        })
    return variances
