# File: app/models/report.py
from __future__ import annotations
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING
from sqlalchemy import String, Text, Enum, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.base import Base
from app.models.user import new_id

if TYPE_CHECKING:
    from app.models.location import Location
    from app.models.user import User

class ReportCategory(PyEnum):
    air_pollution = "air-pollution"
    water_pollution = "water-pollution"
    global_warming = "global-warming"
    wildfire = "wildfire"

class ReportStatus(PyEnum):
    pending = "pending"
    resolved = "resolved"

def _values(enum_cls):
    return [m.value for m in enum_cls]

class Report(Base):
    __tablename__ = "reports"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[ReportCategory] = mapped_column(
        Enum(ReportCategory, name="report_category", values_callable=_values), index=True
    )
    status: Mapped[ReportStatus] = mapped_column(
        Enum(ReportStatus, name="report_status", values_callable=_values),
        default=ReportStatus.pending,
        server_default=ReportStatus.pending.value,
        index=True,
    )
    # storage URL, or a data URL when no bucket is configured
    image_path: Mapped[str | None] = mapped_column(Text, nullable=True)

    location_id: Mapped[str | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL"), index=True, nullable=True
    )
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user: Mapped["User"] = relationship(back_populates="reports")
    location: Mapped["Location | None"] = relationship(back_populates="reports")
