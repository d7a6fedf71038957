# File: app/routers/admin.py
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.dependencies.auth import require_admin
from app.models.report import Report, ReportStatus
from app.routers.reports import report_out
from app.schemas.report import ReportOut, ReportStatusPatch

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])

@router.get("/reports", response_model=list[ReportOut])
def list_all_reports(
    db: Session = Depends(get_db),
    status: Optional[ReportStatus] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
):
    q = db.query(Report)
    if status:
        q = q.filter(Report.status == status)
    rows = q.order_by(Report.created_at.desc(), Report.id).offset(offset).limit(limit).all()
    return [report_out(r) for r in rows]

@router.patch("/reports/{report_id}/status", response_model=ReportOut)
def update_report_status(report_id: str, body: ReportStatusPatch, db: Session = Depends(get_db)):
    obj = db.get(Report, report_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Report not found")
    obj.status = ReportStatus(body.status)
    db.commit(); db.refresh(obj)
    return report_out(obj)
