"""In-memory report storage.

A ``ReportStore`` owns one ordered collection of reports, newest first. It is
the only thing allowed to change that collection; everyone else gets tuples
of immutable ``Report`` objects back.

``SessionStores`` hands every client session its own store so sessions never
see each other's reports.
"""

from collections import OrderedDict
import datetime
import logging
import secrets
import threading

from exceptions import ReportNotFound
from models import Report, ReportStatus

logger = logging.getLogger(__name__)


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


class ReportStore:
    def __init__(self, reports=None, clock=_utcnow):
        self._reports = list(reports or [])
        self._clock = clock
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._reports)

    def _new_id(self):
        taken = {r.id for r in self._reports}
        while True:
            report_id = secrets.token_hex(4)  # 8-char random ID
            if report_id not in taken:
                return report_id

    def insert(self, draft):
        with self._lock:
            report = Report.from_draft(draft, self._new_id(), self._clock())
            self._reports.insert(0, report)
        logger.info("Report %s created: %r (severity %d)", report.id, report.title, report.severity)
        return report

    def _index_of(self, report_id):
        for index, report in enumerate(self._reports):
            if report.id == report_id:
                return index
        raise ReportNotFound(report_id)

    def update_status(self, report_id, status):
        status = ReportStatus(status)
        with self._lock:
            try:
                index = self._index_of(report_id)
            except ReportNotFound:
                logger.warning("Status update for unknown report %s", report_id)
                raise
            previous = self._reports[index]
            updated = previous.with_status(status)
            self._reports[index] = updated
        logger.info("Report %s status %s -> %s", report_id, previous.status.value, status.value)
        return updated

    def get(self, report_id):
        with self._lock:
            return self._reports[self._index_of(report_id)]

    def list(self):
        with self._lock:
            return tuple(self._reports)


class SessionStores:
    """Registry of isolated per-session stores.

    ``factory`` builds the store for a session the first time it is seen,
    e.g. one pre-loaded with the mock dataset. At most ``max_sessions``
    stores are kept; the least recently used one is dropped to make room.
    """

    def __init__(self, factory=ReportStore, max_sessions=None):
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._stores = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id):
        with self._lock:
            store = self._stores.get(session_id)
            if store is not None:
                self._stores.move_to_end(session_id)
                return store
            store = self._stores[session_id] = self._factory()
            logger.info("Created report store for session %s", session_id)
            if self._max_sessions is not None and len(self._stores) > self._max_sessions:
                evicted, _ = self._stores.popitem(last=False)
                logger.info("Dropped report store for idle session %s", evicted)
            return store

    def __len__(self):
        return len(self._stores)

    def __contains__(self, session_id):
        return session_id in self._stores

    def clear(self):
        with self._lock:
            self._stores.clear()
