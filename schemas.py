from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from models import ReportStatus

class Location(BaseModel):
    lat: float
    lng: float
    address: str

    class Config:
        from_attributes = True

class ReportCreate(BaseModel):
    title: str = ""
    description: str = ""
    address: str = ""
    severity: Optional[int] = None
    # Local file name or URL of the selected photo
    image_source: Optional[str] = None
    # Device position, when the browser granted geolocation
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)

class Report(BaseModel):
    id: str
    title: str
    description: str
    location: Location
    image_url: str
    severity: int
    status: ReportStatus
    reported_at: datetime
    reported_by: str

    class Config:
        from_attributes = True

class StatusUpdate(BaseModel):
    status: ReportStatus

class ReportStats(BaseModel):
    total: int
    pending: int
    in_progress: int = Field(alias="in-progress")
    resolved: int

    class Config:
        populate_by_name = True

class AdminReportList(BaseModel):
    reports: List[Report]
    showing: int
    total: int
    active_filters: int
    counts: ReportStats

class MapMarker(BaseModel):
    id: str
    title: str
    lat: float
    lng: float
    address: str
    status: ReportStatus
    status_label: str
    severity: int
    color: str
    size: int

class MapView(BaseModel):
    center: List[float]
    zoom: int
    bounds: Optional[List[List[float]]] = None
    markers: List[MapMarker]

class SeverityLevel(BaseModel):
    value: int
    label: str

class ReverseGeocode(BaseModel):
    lat: float
    lng: float
    address: str
