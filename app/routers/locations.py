# File: app/routers/locations.py
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.dependencies.auth import require_api_user
from app.models.location import Location
from app.schemas.report import LocationIn, LocationOut
from app.schemas.user import SessionUser

router = APIRouter(prefix="/api/locations", tags=["locations"])

@router.post("", response_model=LocationOut, status_code=201)
def save_location(body: LocationIn, db: Session = Depends(get_db), user: SessionUser = Depends(require_api_user)):
    loc = Location(
        latitude=body.latitude,
        longitude=body.longitude,
        address=(body.address or "").strip() or None,
        user_id=user.id,
    )
    if body.captured_at:
        loc.captured_at = body.captured_at
    try:
        db.add(loc); db.commit(); db.refresh(loc)
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Error saving location: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save location")
    return loc

@router.get("", response_model=list[LocationOut])
def list_locations(db: Session = Depends(get_db), user: SessionUser = Depends(require_api_user)):
    return (
        db.query(Location)
        .filter(Location.user_id == user.id)
        .order_by(Location.captured_at.desc(), Location.id)
        .all()
    )
