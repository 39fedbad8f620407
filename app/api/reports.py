# app/api/reports.py

import os
from mimetypes import guess_type

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.core.exceptions import NotFound
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.report import ReportGenerateRequest, ReportOut
from app.services import report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=list[ReportOut])
def list_reports(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return report_service.list_reports(db, current_user)


@router.post("/generate", response_model=ReportOut)
def generate_report(
    payload: ReportGenerateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return report_service.generate_report(
        db, current_user, payload.year, payload.type, payload.format
    )


@router.get("/{report_id}/download")
def download_report(
    report_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    report = report_service.get_report(db, report_id, current_user)

    if not report.file_path or not os.path.exists(report.file_path):
        raise NotFound("Report file not found")

    media_type, _ = guess_type(report.filename)

    return FileResponse(
        path=report.file_path,
        media_type=media_type or "application/octet-stream",
        filename=report.filename,
    )


@router.delete("/{report_id}", response_model=MessageResponse)
def delete_report(
    report_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    report_service.delete_report(db, report_id, current_user)
    return {"message": "Report deleted successfully"}
