from dataclasses import dataclass, replace
from enum import Enum
import datetime
import math


class ReportStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"

    @property
    def label(self):
        return STATUS_LABELS[self]


STATUS_LABELS = {
    ReportStatus.PENDING: "Pending",
    ReportStatus.IN_PROGRESS: "In Progress",
    ReportStatus.RESOLVED: "Resolved",
}

MIN_SEVERITY = 1
MAX_SEVERITY = 5
DEFAULT_SEVERITY = MIN_SEVERITY

SEVERITY_LABELS = {
    1: "Minor - Small crack or wear",
    2: "Low - Noticeable but manageable",
    3: "Medium - Affects driving comfort",
    4: "High - Potential vehicle damage",
    5: "Critical - Safety hazard",
}


def valid_coordinates(lat, lng):
    return (
        math.isfinite(lat) and math.isfinite(lng)
        and -90.0 <= lat <= 90.0
        and -180.0 <= lng <= 180.0
    )


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float
    address: str = ""


@dataclass(frozen=True)
class ReportDraft:
    """A normalized submission, ready for the store to assign id and timestamp."""

    title: str
    location: Location
    image_url: str
    severity: int = DEFAULT_SEVERITY
    description: str = ""
    reported_by: str = "current-user"


@dataclass(frozen=True)
class Report:
    id: str
    title: str
    location: Location
    image_url: str
    severity: int
    status: ReportStatus
    reported_at: datetime.datetime
    reported_by: str
    description: str = ""

    @classmethod
    def from_draft(cls, draft, report_id, reported_at):
        return cls(
            id=report_id,
            title=draft.title,
            description=draft.description,
            location=draft.location,
            image_url=draft.image_url,
            severity=draft.severity,
            status=ReportStatus.PENDING,
            reported_at=reported_at,
            reported_by=draft.reported_by,
        )

    def with_status(self, status):
        # Any status may follow any other; admins pick freely from the dropdown
        return replace(self, status=ReportStatus(status))
