import dataclasses
import random

import pytest

from config import Settings
from exceptions import GeolocationError, ReportValidationError
from models import ReportStatus
from schemas import ReportCreate
from submission import FALLBACK_CENTER, FALLBACK_JITTER, SubmissionPipeline, clamp_severity
from tests.conftest import FakeGeocoder


def draft(**overrides):
    fields = dict(title="Pothole", address="Beach Road", severity=3, image_source="pothole.jpg",
                  lat=17.7231, lng=83.3012)
    fields.update(overrides)
    return ReportCreate(**fields)


def test_submit_stores_pending_report(pipeline, store):
    report = pipeline.submit(draft(description="  Near the bus stop  "), reported_by="citizen123")

    assert store.list() == (report,)
    assert report.status == ReportStatus.PENDING
    assert report.reported_by == "citizen123"
    assert report.description == "Near the bus stop"
    assert report.image_url == "/placeholder.svg?height=300&width=400"
    assert report.location.address == "Beach Road"


def test_reporter_defaults_to_configured_user(pipeline):
    assert pipeline.submit(draft()).reported_by == "current-user"


@pytest.mark.parametrize("title", ["", "   "])
def test_empty_title_is_rejected_without_touching_store(scenario_store, geocoder, title):
    store, _, _ = scenario_store
    pipeline = SubmissionPipeline(store, geocoder=geocoder)

    with pytest.raises(ReportValidationError):
        pipeline.submit(draft(title=title))

    assert len(store.list()) == 2


def test_missing_image_is_rejected(pipeline, store):
    with pytest.raises(ReportValidationError):
        pipeline.submit(draft(image_source=None))
    assert len(store) == 0


@pytest.mark.parametrize("given, stored", [(9, 5), (5, 5), (3, 3), (0, 1), (-2, 1), (None, 1)])
def test_severity_is_clamped_or_defaulted(pipeline, given, stored):
    assert pipeline.submit(draft(severity=given)).severity == stored


def test_clamp_severity_rejects_non_numbers():
    assert clamp_severity("4") == 4
    with pytest.raises(ReportValidationError):
        clamp_severity("severe")


def test_address_is_reverse_geocoded_when_left_blank(pipeline, geocoder):
    report = pipeline.submit(draft(address="", lat=17.7, lng=83.31))

    assert geocoder.calls == [(17.7, 83.31)]
    assert report.location.address == "Siripuram Junction, Visakhapatnam"


def test_geocoding_failure_falls_back_to_coordinates(store):
    pipeline = SubmissionPipeline(store, geocoder=FakeGeocoder(fail=True))

    report = pipeline.submit(draft(address="", lat=17.71234, lng=83.29876))

    assert report.location.address == "17.7123, 83.2988"


def test_typed_address_is_not_overwritten(pipeline, geocoder):
    pipeline.submit(draft(address="Dwaraka Nagar"))
    assert geocoder.calls == []


def test_missing_coordinates_use_jittered_demo_point(pipeline):
    report = pipeline.submit(draft(lat=None, lng=None))

    assert abs(report.location.lat - FALLBACK_CENTER[0]) <= FALLBACK_JITTER
    assert abs(report.location.lng - FALLBACK_CENTER[1]) <= FALLBACK_JITTER
    assert report.location.address == "Beach Road"


def test_missing_coordinates_rejected_when_fallback_disabled(store, geocoder):
    settings = dataclasses.replace(Settings(), allow_fallback_coordinates=False)
    pipeline = SubmissionPipeline(store, geocoder=geocoder, settings=settings)

    with pytest.raises(ReportValidationError):
        pipeline.submit(draft(lat=None, lng=None))
    assert len(store) == 0


def test_location_required_without_coordinates(pipeline):
    with pytest.raises(ReportValidationError):
        pipeline.submit(draft(address="", lat=None, lng=None))


def test_half_a_coordinate_pair_is_rejected(pipeline):
    with pytest.raises(ReportValidationError):
        pipeline.submit(draft(lng=None))


def test_geolocation_provider_supplies_position(store, geocoder):
    pipeline = SubmissionPipeline(store, geocoder=geocoder, geolocate=lambda: (17.69, 83.22))

    report = pipeline.submit(draft(address="", lat=None, lng=None))

    assert (report.location.lat, report.location.lng) == (17.69, 83.22)
    assert report.location.address == geocoder.address


def test_geolocation_failure_is_not_fatal(store, geocoder):
    def denied():
        raise GeolocationError("permission denied")

    pipeline = SubmissionPipeline(store, geocoder=geocoder, geolocate=denied,
                                  rng=random.Random(1))

    report = pipeline.submit(draft(lat=None, lng=None))

    assert report.location.address == "Beach Road"
    assert geocoder.calls == []


def test_every_submission_gets_unique_id(pipeline, store):
    ids = {pipeline.submit(draft(title=f"Crack {i}")).id for i in range(25)}
    assert len(ids) == 25
    assert all(r.status == ReportStatus.PENDING for r in store.list())
