import logging

import requests

from config import settings
from exceptions import GeocodingError, GeolocationError

logger = logging.getLogger(__name__)


def format_coordinates(lat, lng):
    return f"{lat:.4f}, {lng:.4f}"


class NominatimGeocoder:
    """Reverse geocoder backed by the OpenStreetMap Nominatim API."""

    def __init__(self, url=None, timeout=None, user_agent=None, session=None):
        self.url = url or settings.geocoder_url
        self.timeout = timeout or settings.geocoder_timeout
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.session = session or requests

    def reverse(self, lat, lng):
        try:
            resp = self.session.get(
                self.url,
                params={"format": "json", "lat": lat, "lon": lng},
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise GeocodingError(f"Reverse geocoding failed: {e}") from e

        address = data.get("display_name") if isinstance(data, dict) else None
        if not address:
            raise GeocodingError("Reverse geocoding returned no address")
        return address


def address_for(geocoder, lat, lng):
    """Human-readable address for a point, or the formatted coordinates if lookup fails."""
    if geocoder is not None:
        try:
            return geocoder.reverse(lat, lng)
        except GeocodingError as e:
            logger.warning("Falling back to coordinates for (%.4f, %.4f): %s", lat, lng, e)
    return format_coordinates(lat, lng)


def resolve_position(provider):
    """Ask a geolocation provider for ``(lat, lng)``; ``None`` when unavailable."""
    if provider is None:
        return None
    try:
        return provider()
    except GeolocationError as e:
        logger.info("Geolocation unavailable: %s", e)
        return None
