from app.models.user import User
from app.models.location import Location
from app.models.report import Report, ReportCategory, ReportStatus
from app.models.organization import Organization

__all__ = ["User", "Location", "Report", "ReportCategory", "ReportStatus", "Organization"]
