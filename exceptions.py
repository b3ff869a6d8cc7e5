class RoadEyeError(Exception):
    """Base class for errors raised by the report service."""


class ReportValidationError(RoadEyeError):
    """A draft was rejected before anything was stored."""


class ReportNotFound(RoadEyeError, KeyError):
    def __init__(self, report_id):
        super().__init__(report_id)
        self.report_id = report_id

    def __str__(self):
        return f"Report {self.report_id!r} not found"


class GeocodingError(RoadEyeError):
    """Reverse geocoding failed; callers fall back to a coordinate string."""


class GeolocationError(RoadEyeError):
    """Device position unavailable or permission denied."""
