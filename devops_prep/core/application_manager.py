"""Job application tracker: CRUD against the backend plus local search and analytics."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

from devops_prep.api.client import ApiClient, ApiError
from devops_prep.constants.quiz_constants import ALL_STATUSES
from devops_prep.core.models import (
    ApplicationAnalytics,
    ApplicationFields,
    ApplicationStatus,
    JobApplication,
)
from devops_prep.core.services.application_analytics import compute_analytics, filter_applications
from devops_prep.core.services.validation import ValidationError, validate_application_fields

logger = logging.getLogger(__name__)


class JobApplicationManager:
    """Keeps the last fetched application list and the current search/filter.

    ``confirm_delete`` is a blocking yes/no prompt supplied by the view; it is
    called with the application id before anything is deleted.
    """

    def __init__(self, api: ApiClient, confirm_delete: Callable[[str], bool]) -> None:
        self._lock = Lock()
        self._api = api
        self._confirm_delete = confirm_delete
        self._applications: list[JobApplication] = []
        self._search_term: str = ""
        self._status_filter: str = ALL_STATUSES

    # --- Backend operations ---

    def refresh(self) -> bool:
        """Reload every application; on failure the current list is kept."""
        try:
            applications = self._api.list_job_applications()
        except ApiError as exc:
            logger.error("Error fetching applications: %s", exc)
            return False
        with self._lock:
            self._applications = applications
        logger.debug("Fetched %d application(s)", len(applications))
        return True

    def create(self, fields: ApplicationFields) -> bool:
        validate_application_fields(fields)
        try:
            self._api.create_job_application(fields)
        except ApiError as exc:
            logger.error("Error saving application for %r: %s", fields.company, exc)
            return False
        logger.info("Created application for %r", fields.company.strip())
        self._refresh_after_mutation()
        return True

    def update(self, application_id: str | None, fields: ApplicationFields) -> bool:
        if not application_id:
            raise ValidationError("Cannot update an application without an id")
        validate_application_fields(fields)
        try:
            self._api.update_job_application(application_id, fields)
        except ApiError as exc:
            logger.error("Error updating application %s: %s", application_id, exc)
            return False
        logger.info("Updated application %s", application_id)
        self._refresh_after_mutation()
        return True

    def remove(self, application_id: str | None) -> bool:
        if not application_id:
            logger.error("Cannot delete application: missing id")
            return False
        if not self._confirm_delete(application_id):
            logger.debug("Deletion of %s cancelled", application_id)
            return False
        try:
            self._api.delete_job_application(application_id)
        except ApiError as exc:
            logger.error("Error deleting application %s: %s", application_id, exc)
            return False
        logger.info("Deleted application %s", application_id)
        self._refresh_after_mutation()
        return True

    def _refresh_after_mutation(self) -> None:
        # The change is stored server-side; a failed reload only leaves the list stale.
        if not self.refresh():
            logger.warning("Application list is stale until the next refresh")

    # --- Local view state ---

    def set_search_term(self, term: str) -> None:
        with self._lock:
            self._search_term = term or ""

    def set_status_filter(self, status: str | ApplicationStatus) -> None:
        value = status.value if isinstance(status, ApplicationStatus) else (status or ALL_STATUSES)
        if value != ALL_STATUSES:
            # Raises ValueError for anything that is not a known status.
            ApplicationStatus(value)
        with self._lock:
            self._status_filter = value

    @property
    def search_term(self) -> str:
        with self._lock:
            return self._search_term

    @property
    def status_filter(self) -> str:
        with self._lock:
            return self._status_filter

    @property
    def applications(self) -> list[JobApplication]:
        with self._lock:
            return list(self._applications)

    def find(self, application_id: str) -> JobApplication | None:
        with self._lock:
            return next((app for app in self._applications if app.id == application_id), None)

    def filtered_applications(self) -> list[JobApplication]:
        with self._lock:
            return filter_applications(self._applications, self._search_term, self._status_filter)

    def analytics(self) -> ApplicationAnalytics:
        with self._lock:
            return compute_analytics(self._applications)
