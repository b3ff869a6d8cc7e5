from fastapi import FastAPI, Depends, HTTPException, Header, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Optional
import logging

import schemas, filters, mapping, models
from config import settings
from exceptions import ReportNotFound, ReportValidationError
from geocoding import NominatimGeocoder, address_for
from seed_data import seed_data
from store import ReportStore, SessionStores
from submission import SubmissionPipeline

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One isolated store per client session
sessions = SessionStores(
    seed_data if settings.seed_mock_data else ReportStore,
    max_sessions=settings.max_sessions,
)

def get_store(x_session_id: Optional[str] = Header(None)):
    return sessions.get(x_session_id or settings.default_session)

def get_reporter(x_user_id: Optional[str] = Header(None)):
    return x_user_id or settings.default_reporter

def get_geocoder():
    return NominatimGeocoder()

def get_pipeline(
    store: ReportStore = Depends(get_store),
    geocoder = Depends(get_geocoder),
):
    return SubmissionPipeline(store, geocoder=geocoder)

def get_query(
    search: Optional[str] = None,
    status: Optional[str] = None,
    severity: Optional[str] = None,
):
    try:
        return filters.ReportQuery.from_params(search=search, status=status, severity=severity)
    except ReportValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

def _stats(reports):
    counts = filters.count_by_status(reports)
    return schemas.ReportStats(total=len(reports), **counts)

@app.get("/")
def root():
    return {"message": f"{settings.app_name} running"}

@app.post("/reports/", response_model=schemas.Report)
def create_report(
    report: schemas.ReportCreate,
    pipeline: SubmissionPipeline = Depends(get_pipeline),
    reporter: str = Depends(get_reporter),
):
    try:
        return pipeline.submit(report, reported_by=reporter)
    except ReportValidationError as e:
        logger.info("Rejected report draft: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/reports/", response_model=List[schemas.Report])
def read_reports(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=0),
    query: filters.ReportQuery = Depends(get_query),
    store: ReportStore = Depends(get_store),
):
    matched = filters.filter_reports(store.list(), query)
    return matched[skip:skip + limit]

@app.get("/reports/stats", response_model=schemas.ReportStats)
def read_report_stats(store: ReportStore = Depends(get_store)):
    return _stats(store.list())

@app.get("/reports/{report_id}", response_model=schemas.Report)
def read_report(report_id: str, store: ReportStore = Depends(get_store)):
    try:
        return store.get(report_id)
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="Report not found")

@app.put("/reports/{report_id}/status", response_model=schemas.Report)
def update_report_status(
    report_id: str,
    update: schemas.StatusUpdate,
    store: ReportStore = Depends(get_store),
):
    try:
        return store.update_status(report_id, update.status)
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="Report not found")

# --- Admin & Map Views ---

@app.get("/admin/reports", response_model=schemas.AdminReportList)
def admin_reports(
    query: filters.ReportQuery = Depends(get_query),
    store: ReportStore = Depends(get_store),
):
    reports = store.list()
    matched = filters.filter_reports(reports, query)
    return schemas.AdminReportList(
        reports=[schemas.Report.model_validate(r) for r in matched],
        showing=len(matched),
        total=len(reports),
        active_filters=query.active_filter_count,
        counts=_stats(reports),
    )

@app.get("/map", response_model=schemas.MapView)
def read_map(store: ReportStore = Depends(get_store)):
    return mapping.map_view(store.list())

@app.get("/severity-levels", response_model=List[schemas.SeverityLevel])
def read_severity_levels():
    return [
        schemas.SeverityLevel(value=value, label=label)
        for value, label in sorted(models.SEVERITY_LABELS.items())
    ]

@app.get("/geocode/reverse", response_model=schemas.ReverseGeocode)
def reverse_geocode(lat: float, lng: float, geocoder = Depends(get_geocoder)):
    if not models.valid_coordinates(lat, lng):
        raise HTTPException(status_code=400, detail="Invalid coordinates")
    return schemas.ReverseGeocode(lat=lat, lng=lng, address=address_for(geocoder, lat, lng))
