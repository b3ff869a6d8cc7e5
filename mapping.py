from models import ReportStatus

DEFAULT_CENTER = (17.7231, 83.3012)
DEFAULT_ZOOM = 12
BOUNDS_PADDING = 0.1

STATUS_COLORS = {
    ReportStatus.PENDING: "#f59e0b",
    ReportStatus.IN_PROGRESS: "#3b82f6",
    ReportStatus.RESOLVED: "#10b981",
}


def marker_size(severity):
    if severity >= 4:
        return 35
    if severity >= 3:
        return 30
    return 25


def marker_for(report):
    return {
        "id": report.id,
        "title": report.title,
        "lat": report.location.lat,
        "lng": report.location.lng,
        "address": report.location.address,
        "status": report.status.value,
        "status_label": report.status.label,
        "severity": report.severity,
        "color": STATUS_COLORS[report.status],
        "size": marker_size(report.severity),
    }


def bounds_for(reports, padding=BOUNDS_PADDING):
    """[[south, west], [north, east]] around every report, padded by a fraction of its span."""
    if not reports:
        return None
    lats = [r.location.lat for r in reports]
    lngs = [r.location.lng for r in reports]
    lat_pad = (max(lats) - min(lats)) * padding
    lng_pad = (max(lngs) - min(lngs)) * padding
    return [
        [min(lats) - lat_pad, min(lngs) - lng_pad],
        [max(lats) + lat_pad, max(lngs) + lng_pad],
    ]


def map_view(reports):
    return {
        "center": list(DEFAULT_CENTER),
        "zoom": DEFAULT_ZOOM,
        "bounds": bounds_for(reports),
        "markers": [marker_for(r) for r in reports],
    }
