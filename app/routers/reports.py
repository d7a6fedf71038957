# File: app/routers/reports.py
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, UploadFile, File, Request, Form
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.ratelimit import limiter
from app.db.session import get_db
from app.dependencies.auth import require_api_user
from app.models.location import Location
from app.models.report import Report, ReportCategory, ReportStatus
from app.schemas.report import ReportOut, ReportCreateOut, LocationOut
from app.schemas.user import SessionUser
from app.services.storage import upload_image, make_object_key, MAX_BYTES, ALLOWED

router = APIRouter(prefix="/api/reports", tags=["reports"])

CATEGORY_NAMES = {
    ReportCategory.air_pollution: "Air Pollution",
    ReportCategory.water_pollution: "Water Pollution",
    ReportCategory.global_warming: "Global Warming",
    ReportCategory.wildfire: "Wildfire",
}


def report_out(obj: Report) -> ReportOut:
    return ReportOut(
        id=obj.id,
        description=obj.description,
        category=obj.category.value,
        status=obj.status.value,
        image_path=obj.image_path,
        location=LocationOut.model_validate(obj.location) if obj.location else None,
        user_id=obj.user_id,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


def _parse_category(raw: str) -> ReportCategory:
    try:
        return ReportCategory((raw or "").strip())
    except ValueError:
        raise HTTPException(status_code=400, detail="Unknown report category")


@router.post("", response_model=ReportCreateOut, status_code=201)
def create_report(
    description: str = Form(default=""),
    category: str = Form(default=""),
    location_id: Optional[str] = Form(default=None),
    latitude: Optional[float] = Form(default=None),
    longitude: Optional[float] = Form(default=None),
    address: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    db: Session = Depends(get_db),
    user: SessionUser = Depends(require_api_user),
):
    description = description.strip()
    if not description:
        raise HTTPException(status_code=400, detail="Description is required")
    cat = _parse_category(category)

    location = None
    if location_id:
        location = db.query(Location).filter(Location.id == location_id, Location.user_id == user.id).first()
        if not location:
            raise HTTPException(status_code=404, detail="Location not found")
    elif latitude is not None or longitude is not None:
        if latitude is None or longitude is None:
            raise HTTPException(status_code=400, detail="Both latitude and longitude are required")
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            raise HTTPException(status_code=400, detail="Coordinates out of range")
        location = Location(
            latitude=latitude,
            longitude=longitude,
            address=(address or "").strip() or None,
            user_id=user.id,
        )
        db.add(location)

    image_path = None
    if image is not None and image.filename:
        if image.content_type not in ALLOWED:
            raise HTTPException(status_code=400, detail="Unsupported image type")
        data = image.file.read(MAX_BYTES + 1)
        if len(data) > MAX_BYTES:
            raise HTTPException(status_code=400, detail="Image exceeds 2MB")
        try:
            image_path = upload_image(data, image.content_type, make_object_key(user.id, image.filename))
        except Exception as e:
            logging.error(f"Failed to upload report image: {e}", exc_info=True)
            raise HTTPException(status_code=502, detail="Failed to upload image. Please try again later.")

    obj = Report(
        description=description,
        category=cat,
        status=ReportStatus.pending,
        image_path=image_path,
        location=location,
        user_id=user.id,
    )
    try:
        db.add(obj)
        db.commit()
        db.refresh(obj)
    except IntegrityError as e:
        # token for a user row that no longer exists
        db.rollback()
        logging.error(f"Report rejected by the database: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Unknown user for this session")
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Error creating report: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while creating the report.")

    return ReportCreateOut(
        success=True,
        message=f"{CATEGORY_NAMES[cat]} report created successfully!",
        report=report_out(obj),
    )


@router.get("", response_model=list[ReportOut])
@limiter.limit("20/minute")
def list_reports(
    request: Request,
    db: Session = Depends(get_db),
    status: Optional[ReportStatus] = Query(default=None),
    category: Optional[str] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user: SessionUser = Depends(require_api_user),
):
    q = db.query(Report).filter(Report.user_id == user.id)
    if status:
        q = q.filter(Report.status == status)
    if category:
        q = q.filter(Report.category == _parse_category(category))
    rows = q.order_by(Report.created_at.desc(), Report.id).offset(offset).limit(limit).all()
    return [report_out(r) for r in rows]


@router.get("/{report_id}", response_model=ReportOut)
def get_report(report_id: str, db: Session = Depends(get_db), user: SessionUser = Depends(require_api_user)):
    obj = db.query(Report).filter(Report.id == report_id, Report.user_id == user.id).first()
    if not obj:
        raise HTTPException(status_code=404, detail="Report not found")
    return report_out(obj)
