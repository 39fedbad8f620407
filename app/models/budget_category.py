import enum

from sqlalchemy import Boolean, Column, Enum, Integer, String, Text

from app.db.base import Base


class BudgetType(str, enum.Enum):
    recette = "recette"
    depense = "depense"


class BudgetCategory(Base):
    __tablename__ = "budget_categories"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    label = Column(String, nullable=False)
    type = Column(Enum(BudgetType, name="budget_type"), nullable=False)
    parent_code = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
