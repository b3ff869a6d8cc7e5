"""Turns a citizen's draft into a stored report.

Validation happens before anything is stored: a rejected draft raises
``ReportValidationError`` and leaves the store untouched. Optional
enrichment (reverse geocoding, device position) degrades quietly.
"""

import logging
import random

from config import settings as default_settings
from exceptions import ReportValidationError
from geocoding import address_for, resolve_position
from images import PlaceholderImageStorage
from models import (
    DEFAULT_SEVERITY,
    MAX_SEVERITY,
    MIN_SEVERITY,
    Location,
    ReportDraft,
    valid_coordinates,
)

logger = logging.getLogger(__name__)

# Visakhapatnam city centre, used for demo coordinates
FALLBACK_CENTER = (17.7231, 83.3012)
FALLBACK_JITTER = 0.05


def clamp_severity(value):
    if value is None or value == "":
        return DEFAULT_SEVERITY
    if isinstance(value, bool):
        raise ReportValidationError("Severity must be a number between 1 and 5")
    try:
        severity = int(value)
    except (TypeError, ValueError):
        raise ReportValidationError("Severity must be a number between 1 and 5")
    return max(MIN_SEVERITY, min(MAX_SEVERITY, severity))


class SubmissionPipeline:
    def __init__(self, store, geocoder=None, image_storage=None, geolocate=None,
                 settings=None, rng=None):
        self.store = store
        self.geocoder = geocoder
        self.image_storage = image_storage or PlaceholderImageStorage()
        self.geolocate = geolocate
        self.settings = settings or default_settings
        self.rng = rng or random.Random()

    def _coordinates(self, draft):
        lat, lng = getattr(draft, "lat", None), getattr(draft, "lng", None)
        if lat is None and lng is None:
            return resolve_position(self.geolocate)
        if lat is None or lng is None:
            raise ReportValidationError("Both latitude and longitude are required")
        if not valid_coordinates(lat, lng):
            raise ReportValidationError(f"Invalid coordinates: {lat}, {lng}")
        return lat, lng

    def _fallback_coordinates(self):
        if not self.settings.allow_fallback_coordinates:
            raise ReportValidationError("Location coordinates are required")
        lat = FALLBACK_CENTER[0] + self.rng.uniform(-FALLBACK_JITTER, FALLBACK_JITTER)
        lng = FALLBACK_CENTER[1] + self.rng.uniform(-FALLBACK_JITTER, FALLBACK_JITTER)
        logger.warning("No coordinates supplied; using demo fallback point (%.4f, %.4f)", lat, lng)
        return lat, lng

    def _location(self, draft):
        address = (getattr(draft, "address", None) or "").strip()
        coords = self._coordinates(draft)
        if coords is None:
            if not address:
                raise ReportValidationError("Location is required")
            lat, lng = self._fallback_coordinates()
            return Location(lat=lat, lng=lng, address=address)

        lat, lng = coords
        if not address:
            address = address_for(self.geocoder, lat, lng)
        return Location(lat=lat, lng=lng, address=address)

    def submit(self, draft, reported_by=None):
        title = (draft.title or "").strip()
        if not title:
            raise ReportValidationError("Issue title is required")
        image_source = getattr(draft, "image_source", None)
        if not image_source:
            raise ReportValidationError("A photo of the road issue is required")

        severity = clamp_severity(getattr(draft, "severity", None))
        location = self._location(draft)
        image_url = self.image_storage.store(image_source)

        report_draft = ReportDraft(
            title=title,
            description=(getattr(draft, "description", None) or "").strip(),
            location=location,
            image_url=image_url,
            severity=severity,
            reported_by=reported_by or self.settings.default_reporter,
        )
        return self.store.insert(report_draft)
