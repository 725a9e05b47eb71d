"""Pure projections over the job application list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from devops_prep.constants.quiz_constants import ALL_STATUSES
from devops_prep.core.models import ApplicationAnalytics, ApplicationStatus, JobApplication
from devops_prep.core.services.scoreboard import round_percentage


def filter_applications(
    applications: Sequence[JobApplication],
    search_term: str = "",
    status_filter: str = ALL_STATUSES,
) -> list[JobApplication]:
    """Return the applications matching the search term and status filter.

    The term matches company or location case-insensitively; an empty term
    matches everything. The input sequence is never modified.
    """
    needle = search_term.strip().casefold()
    matches: list[JobApplication] = []
    for application in applications:
        if needle and needle not in application.company.casefold() and needle not in application.location.casefold():
            continue
        if status_filter != ALL_STATUSES and application.status.value != status_filter:
            continue
        matches.append(application)
    return matches


def compute_analytics(applications: Sequence[JobApplication]) -> ApplicationAnalytics:
    total = len(applications)
    counts = Counter(application.status for application in applications)
    by_status = {status: counts.get(status, 0) for status in ApplicationStatus}
    responded = by_status[ApplicationStatus.INTERVIEW] + by_status[ApplicationStatus.OFFER]
    return ApplicationAnalytics(
        total=total,
        by_status=by_status,
        response_rate=round_percentage(responded, total),
        offer_rate=round_percentage(by_status[ApplicationStatus.OFFER], total),
    )
