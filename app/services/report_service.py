# app/services/report_service.py

import logging
import os
import uuid

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import REPORT_FORMATS
from app.core.exceptions import Forbidden, NotFound
from app.models.budget_report import BudgetReport
from app.models.user import User
from app.services import analysis_service, budget_line_service

logger = logging.getLogger(__name__)

LINE_HEADERS = ["Code", "Libellé", "Type", "Proposé", "Réalisé", "Statut"]
SUMMARY_HEADERS = ["Indicateur", "Valeur"]
VARIANCE_HEADERS = ["Code", "Libellé", "Proposé", "Réalisé", "Écart", "Écart %", "Niveau"]


# --------------------------------------------------
# TABLE BUILDERS
# --------------------------------------------------
def _line_rows(db: Session, actor: User, year: int):
    rows = []
    for line in budget_line_service.list_lines(db, actor, year=year):
        rows.append([
            line.category.code,
            line.category.label,
            line.category.type.value,
            float(line.proposed_amount),
            float(line.realized_amount) if line.realized_amount is not None else None,
            line.status.value,
        ])
    return rows


def _summary_rows(db: Session, year: int):
    summary = analysis_service.get_summary(db, year)
    return [
        ["Total proposé", summary["total_proposed"]],
        ["Total réalisé", summary["total_realized"]],
        ["Total recettes", summary["total_recettes"]],
        ["Total dépenses", summary["total_depenses"]],
        ["Taux de réalisation (%)", round(summary["realization_rate"], 2)],
    ]


def _variance_rows(db: Session, year: int):
    return [
        [
            v["category_code"],
            v["category_label"],
            v["proposed"],
            v["realized"],
            v["variance"],
            round(v["variance_percent"], 2),
            v["severity"],
        ]
        for v in analysis_service.get_variances(db, year)
    ]


def build_sections(db: Session, actor: User, year: int, kind: str):
    """Return [(title, headers, rows)] for a report kind."""
    if kind == "budget":
        return [(f"Lignes budgétaires {year}", LINE_HEADERS, _line_rows(db, actor, year))]
    return [
        (f"Synthèse {year}", SUMMARY_HEADERS, _summary_rows(db, year)),
        (f"Écarts par catégorie {year}", VARIANCE_HEADERS, _variance_rows(db, year)),
    ]


# --------------------------------------------------
# WRITERS
# --------------------------------------------------
def _fmt(value):
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:,.2f}".replace(",", " ")
    return str(value)


def write_pdf(path: str, title: str, sections) -> None:
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(path, pagesize=landscape(A4))
    story = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    for section_title, headers, rows in sections:
        story.append(Paragraph(section_title, styles["Heading2"]))
        data = [headers] + [[_fmt(v) for v in row] for row in rows]
        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2563eb")),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f3f4f6")]),
        ]))
        story.append(table)
        story.append(Spacer(1, 18))

    doc.build(story)


def write_excel(path: str, title: str, sections) -> None:
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="2563EB", end_color="2563EB", fill_type="solid")

    for section_title, headers, rows in sections:
        # sheet titles are capped at 31 chars
        ws = wb.create_sheet(title=section_title[:31])
        ws.append([title])
        ws["A1"].font = Font(bold=True, size=14)
        ws.append([])
        ws.append(headers)
        for cell in ws[3]:
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")
        for row in rows:
            ws.append(row)
        for column in ws.iter_cols(min_row=3):
            width = max(len(str(c.value)) if c.value is not None else 0 for c in column)
            ws.column_dimensions[column[0].column_letter].width = min(width + 2, 60)

    wb.save(path)


# --------------------------------------------------
# REPORT RECORDS
# --------------------------------------------------
def generate_report(db: Session, actor: User, year: int, kind: str, fmt: str) -> BudgetReport:
    ext = REPORT_FORMATS[fmt]
    filename = f"Budget_{year}_{kind}.{ext}"

    os.makedirs(settings.REPORTS_DIR, exist_ok=True)
    file_path = os.path.join(settings.REPORTS_DIR, f"{uuid.uuid4()}.{ext}")

    sections = build_sections(db, actor, year, kind)
    title = f"Budget {year} - {kind}"
    try:
        if fmt == "pdf":
            write_pdf(file_path, title, sections)
        else:
            write_excel(file_path, title, sections)

        report = BudgetReport(
            user_id=actor.id,
            year=year,
            type=f"{kind}_{fmt}",
            filename=filename,
            file_path=file_path,
            file_size=os.path.getsize(file_path),
        )
        db.add(report)
        db.commit()
    except Exception:
        db.rollback()
        if os.path.exists(file_path):
            os.remove(file_path)
        logger.warning("Report %s for user %s not saved, file removed", filename, actor.id)
        raise
    db.refresh(report)

    logger.info("Report %s generated for user %s (%s bytes)", filename, actor.id, report.file_size)
    return report


def list_reports(db: Session, actor: User):
    return (
        db.query(BudgetReport)
        .filter(BudgetReport.user_id == actor.id)
        .order_by(BudgetReport.created_at.desc(), BudgetReport.id.desc())
        .all()
    )


def get_report(db: Session, report_id: int, actor: User) -> BudgetReport:
    report = db.query(BudgetReport).filter_by(id=report_id).first()
    if not report:
        raise NotFound("Report not found")
    if report.user_id != actor.id:
        raise Forbidden("Access denied")
    return report


def delete_report(db: Session, report_id: int, actor: User) -> None:
    report = get_report(db, report_id, actor)
    file_path = report.file_path

    db.delete(report)
    db.commit()

    if file_path and os.path.exists(file_path):
        os.remove(file_path)
    logger.info("Report %s deleted by user %s", report_id, actor.id)
