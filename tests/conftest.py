import random

import pytest
from fastapi.testclient import TestClient

import main
from config import Settings
from exceptions import GeocodingError
from models import Location, ReportDraft, ReportStatus
from store import ReportStore
from submission import SubmissionPipeline


class FakeGeocoder:
    def __init__(self, address="Siripuram Junction, Visakhapatnam", fail=False):
        self.address = address
        self.fail = fail
        self.calls = []

    def reverse(self, lat, lng):
        self.calls.append((lat, lng))
        if self.fail:
            raise GeocodingError("service unavailable")
        return self.address


def make_draft(title="Pothole", address="Beach Road", severity=3, lat=17.72, lng=83.30, **kwargs):
    return ReportDraft(
        title=title,
        location=Location(lat=lat, lng=lng, address=address),
        image_url="/placeholder.svg",
        severity=severity,
        **kwargs,
    )


@pytest.fixture
def store():
    return ReportStore()


@pytest.fixture
def scenario_store(store):
    """A(pending, severity 4, Beach Road) and B(resolved, severity 2, VUDA Park)."""
    a = store.insert(make_draft(title="Large Pothole", address="Beach Road", severity=4))
    b = store.insert(make_draft(title="Road Crack", address="VUDA Park", severity=2))
    store.update_status(b.id, ReportStatus.RESOLVED)
    return store, a.id, b.id


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def pipeline(store, geocoder, settings):
    return SubmissionPipeline(store, geocoder=geocoder, settings=settings, rng=random.Random(7))


@pytest.fixture
def client(geocoder):
    main.sessions.clear()
    main.app.dependency_overrides[main.get_geocoder] = lambda: geocoder
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()
    main.sessions.clear()
