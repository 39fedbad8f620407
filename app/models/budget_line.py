# app/models/budget_line.py

import enum
from datetime import datetime
from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    Text,
)
from sqlalchemy.orm import relationship

from app.db.base import Base


class BudgetLineStatus(str, enum.Enum):
    draft = "draft"
    pending = "pending"
    validated = "validated"
    rejected = "rejected"
    # reserved for a later aggregation step, nothing transitions into it yet
    consolidated = "consolidated"


class BudgetLine(Base):
    __tablename__ = "budget_lines"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    category_id = Column(
        Integer,
        ForeignKey("budget_categories.id"),
        nullable=False,
    )

    year = Column(Integer, nullable=False, index=True)

    proposed_amount = Column(Numeric(15, 2), nullable=False)
    realized_amount = Column(Numeric(15, 2), nullable=True)

    description = Column(Text, nullable=True)

    status = Column(
        Enum(BudgetLineStatus, name="status"),
        default=BudgetLineStatus.draft,
        nullable=False,
    )

    # decision fields, written only by the workflow
    validated_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    validated_at = Column(DateTime, nullable=True)
    rejection_reason = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    user = relationship(
        "User",
        back_populates="budget_lines",
        foreign_keys=[user_id],
    )
    category = relationship("BudgetCategory")
    validator = relationship("User", foreign_keys=[validated_by])
