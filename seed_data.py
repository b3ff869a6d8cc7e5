import datetime

from config import settings
from models import Location, Report, ReportStatus
from store import ReportStore


def _day(year, month, day):
    return datetime.datetime(year, month, day, tzinfo=datetime.timezone.utc)


def mock_reports():
    return [
        Report(
            id="1",
            title="Large Pothole on Beach Road",
            description="Deep pothole causing traffic issues near RTC Complex",
            location=Location(lat=17.7231, lng=83.3012, address="Beach Road, RTC Complex, Visakhapatnam"),
            image_url=settings.placeholder_image_url,
            severity=4,
            status=ReportStatus.PENDING,
            reported_at=_day(2024, 1, 15),
            reported_by="citizen123",
        ),
        Report(
            id="2",
            title="Road Crack near VUDA Park",
            description="Multiple cracks developing on main road",
            location=Location(lat=17.74, lng=83.32, address="VUDA Park Road, Visakhapatnam"),
            image_url=settings.placeholder_image_url,
            severity=2,
            status=ReportStatus.RESOLVED,
            reported_at=_day(2024, 1, 10),
            reported_by="user456",
        ),
        Report(
            id="3",
            title="Damaged Road Surface",
            description="Uneven road surface causing vehicle damage",
            location=Location(lat=17.71, lng=83.29, address="Dwaraka Nagar, Visakhapatnam"),
            image_url=settings.placeholder_image_url,
            severity=3,
            status=ReportStatus.IN_PROGRESS,
            reported_at=_day(2024, 1, 12),
            reported_by="reporter789",
        ),
    ]


def seed_data():
    """A fresh store pre-loaded with the demo reports."""
    return ReportStore(mock_reports())


if __name__ == "__main__":
    store = seed_data()
    for report in store.list():
        print(f"Added: {report.title} ({report.id}) [{report.status.value}]")
    print("Seeding Complete!")
