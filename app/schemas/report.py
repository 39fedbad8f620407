# app/schemas/report.py

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.core.constants import REPORT_FORMATS, REPORT_KINDS
from app.schemas.common import CamelModel


class ReportGenerateRequest(CamelModel):
    year: int
    type: str = "budget"
    format: str = "pdf"

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        if v not in REPORT_KINDS:
            raise ValueError(f"type must be one of {', '.join(REPORT_KINDS)}")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        if v not in REPORT_FORMATS:
            raise ValueError(f"format must be one of {', '.join(REPORT_FORMATS)}")
        return v


class ReportOut(CamelModel):
    id: int
    user_id: int
    year: int
    type: str
    filename: str
    file_size: Optional[int] = None
    created_at: datetime
