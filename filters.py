"""Filtering and counting over a store snapshot.

Everything here is a pure function of the reports passed in; nothing is
cached, so counts can never drift from the collection they describe.
"""

from dataclasses import dataclass
from typing import Union

from exceptions import ReportValidationError
from models import MAX_SEVERITY, MIN_SEVERITY, ReportStatus

ALL = "all"


def parse_status_filter(value):
    if value in (None, "", ALL):
        return ALL
    try:
        return ReportStatus(value)
    except ValueError:
        raise ReportValidationError(f"Unknown status filter: {value!r}")


def parse_severity_filter(value):
    if value in (None, "", ALL):
        return ALL
    try:
        severity = int(value)
    except (TypeError, ValueError):
        raise ReportValidationError(f"Severity filter must be 'all' or 1-5, got {value!r}")
    if not MIN_SEVERITY <= severity <= MAX_SEVERITY:
        raise ReportValidationError(f"Severity filter must be 'all' or 1-5, got {value!r}")
    return severity


@dataclass(frozen=True)
class ReportQuery:
    search_term: str = ""
    status_filter: Union[ReportStatus, str] = ALL
    severity_filter: Union[int, str] = ALL

    @classmethod
    def from_params(cls, search=None, status=None, severity=None):
        return cls(
            search_term=search or "",
            status_filter=parse_status_filter(status),
            severity_filter=parse_severity_filter(severity),
        )

    @property
    def active_filter_count(self):
        return sum((
            self.status_filter != ALL,
            self.severity_filter != ALL,
            self.search_term != "",
        ))

    def matches(self, report):
        term = self.search_term.lower()
        if term and term not in report.title.lower() and term not in report.location.address.lower():
            return False
        if self.status_filter != ALL and report.status != self.status_filter:
            return False
        if self.severity_filter != ALL and report.severity != self.severity_filter:
            return False
        return True


def filter_reports(reports, query=None):
    """Reports matching every predicate of ``query``, in their original order."""
    query = query or ReportQuery()
    return [report for report in reports if query.matches(report)]


def count_by_status(reports):
    counts = {status.value: 0 for status in ReportStatus}
    for report in reports:
        counts[report.status.value] += 1
    return counts
