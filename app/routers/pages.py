# File: app/routers/pages.py
# Data for the protected pages; anonymous visitors get redirected to login.

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.dependencies.auth import require_user
from app.models.location import Location
from app.models.report import Report, ReportCategory
from app.routers.reports import CATEGORY_NAMES, report_out
from app.schemas.report import LocationOut
from app.schemas.user import SessionUser

router = APIRouter(tags=["pages"])

@router.get("/dashboard")
def dashboard(db: Session = Depends(get_db), user: SessionUser = Depends(require_user)):
    reports = (
        db.query(Report)
        .filter(Report.user_id == user.id)
        .order_by(Report.created_at.desc(), Report.id)
        .all()
    )
    locations = db.query(Location).filter(Location.user_id == user.id).all()
    return {
        "user": user.model_dump(),
        "reports": [report_out(r).model_dump(mode="json") for r in reports],
        "locations": [LocationOut.model_validate(loc).model_dump(mode="json") for loc in locations],
    }

@router.get("/create-report")
def create_report_page(user: SessionUser = Depends(require_user)):
    return {
        "user": user.model_dump(),
        "categories": [
            {"id": c.value, "name": CATEGORY_NAMES[c], "image": f"/images/{c.value}.png"}
            for c in ReportCategory
        ],
    }
