from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from app.core.roles import Role
from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(Role, name="role"), nullable=False, default=Role.user)
    department = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    budget_lines = relationship(
        "BudgetLine",
        back_populates="user",
        foreign_keys="BudgetLine.user_id",
    )

    budget_reports = relationship(
        "BudgetReport",
        back_populates="user",
        cascade="all, delete-orphan",
    )
