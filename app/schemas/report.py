from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime

Category = Literal["air-pollution", "water-pollution", "global-warming", "wildfire"]
Status = Literal["pending", "resolved"]


class LocationIn(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    address: Optional[str] = Field(default=None, max_length=300)
    captured_at: Optional[datetime] = None


class LocationOut(BaseModel):
    id: str
    latitude: float
    longitude: float
    address: Optional[str] = None
    captured_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReportOut(BaseModel):
    id: str
    description: str
    category: Category
    status: Status
    image_path: Optional[str] = None
    location: Optional[LocationOut] = None
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class ReportCreateOut(BaseModel):
    success: bool
    message: str
    report: Optional[ReportOut] = None


class ReportStatusPatch(BaseModel):
    status: Status


class CategoryOut(BaseModel):
    id: Category
    name: str
    image: str
