"""HTTP client for the interview-prep backend API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from devops_prep.api.schemas import (
    HomepageSchema,
    InterviewScenariosSchema,
    JobApplicationPayload,
    JobApplicationSchema,
    NewQuestionPayload,
    QuestionCreatedSchema,
    QuestionSchema,
    SubmissionPayload,
    SubmissionResultSchema,
    UIConfigSchema,
)
from devops_prep.constants.network_constants import (
    CATEGORIES_PATH,
    CATEGORY_QUESTIONS_PATH,
    DEFAULT_API_BASE_URL,
    HOMEPAGE_DATA_PATH,
    INTERVIEW_SCENARIOS_PATH,
    JOB_APPLICATION_PATH,
    JOB_APPLICATIONS_PATH,
    QUESTIONS_PATH,
    RANDOM_QUESTIONS_PATH,
    REQUEST_TIMEOUT_SECONDS,
    SUBMIT_PATH,
    UI_CONFIG_PATH,
)
from devops_prep.core.models import (
    ApplicationFields,
    HomepageContent,
    InterviewScenarios,
    JobApplication,
    Question,
    QuestionDraft,
    QuestionType,
    SubmissionResult,
    UIConfig,
)

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ApiError(Exception):
    """Raised when a request fails in transport, returns a non-2xx status, or cannot be parsed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin wrapper with one method per backend endpoint.

    Every method either returns domain models or raises ``ApiError``; callers
    decide whether a failure means "use fallback content" or "abort this action".
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    # --- Questions ---

    def fetch_categories(self) -> list[str]:
        payload = self._request("GET", CATEGORIES_PATH)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ApiError(f"GET {CATEGORIES_PATH} returned {type(payload).__name__}, expected a list")
        return [str(category) for category in payload]

    def fetch_random_questions(self, count: int) -> list[Question]:
        path = RANDOM_QUESTIONS_PATH.format(count=count)
        return self._parse_list(path, self._request("GET", path), QuestionSchema)

    def fetch_questions_for_category(self, category: str) -> list[Question]:
        path = CATEGORY_QUESTIONS_PATH.format(category=quote(category, safe=""))
        return self._parse_list(path, self._request("GET", path), QuestionSchema)

    def create_question(self, draft: QuestionDraft) -> Question:
        body = NewQuestionPayload.from_draft(draft).to_json()
        payload = self._request("POST", QUESTIONS_PATH, json=body)
        return self._parse_one(QUESTIONS_PATH, payload, QuestionCreatedSchema)

    def submit_answer(self, question_id: str, answer: str, question_type: QuestionType) -> SubmissionResult:
        body = SubmissionPayload(question_id=question_id, answer=answer, type=question_type).to_json()
        payload = self._request("POST", SUBMIT_PATH, json=body)
        return self._parse_one(SUBMIT_PATH, payload, SubmissionResultSchema)

    # --- Optional content ---

    def fetch_ui_config(self) -> UIConfig:
        return self._parse_one(UI_CONFIG_PATH, self._request("GET", UI_CONFIG_PATH), UIConfigSchema)

    def fetch_interview_scenarios(self) -> InterviewScenarios:
        payload = self._request("GET", INTERVIEW_SCENARIOS_PATH)
        return self._parse_one(INTERVIEW_SCENARIOS_PATH, payload, InterviewScenariosSchema)

    def fetch_homepage_content(self) -> HomepageContent:
        return self._parse_one(HOMEPAGE_DATA_PATH, self._request("GET", HOMEPAGE_DATA_PATH), HomepageSchema)

    # --- Job applications ---

    def list_job_applications(self) -> list[JobApplication]:
        payload = self._request("GET", JOB_APPLICATIONS_PATH)
        return self._parse_list(JOB_APPLICATIONS_PATH, payload, JobApplicationSchema)

    def create_job_application(self, fields: ApplicationFields) -> None:
        body = JobApplicationPayload.from_fields(fields).to_json()
        self._request("POST", JOB_APPLICATIONS_PATH, json=body)

    def update_job_application(self, application_id: str, fields: ApplicationFields) -> None:
        body = JobApplicationPayload.from_fields(fields).to_json()
        self._request("PUT", self._application_path(application_id), json=body)

    def delete_job_application(self, application_id: str) -> None:
        self._request("DELETE", self._application_path(application_id))

    # --- Internals ---

    @staticmethod
    def _application_path(application_id: str) -> str:
        return JOB_APPLICATION_PATH.format(application_id=quote(str(application_id), safe=""))

    def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._http.request(method, url, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise ApiError(f"{method} {path} returned HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"{method} {path} failed: {exc}") from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"{method} {path} returned invalid JSON", status_code=response.status_code) from exc

    @staticmethod
    def _parse_one(path: str, payload: Any, schema: type[SchemaT]) -> Any:
        if payload is None:
            raise ApiError(f"{path} returned an empty body")
        try:
            return schema.model_validate(payload).to_model()
        except ValidationError as exc:
            raise ApiError(f"{path} returned an unexpected payload: {exc.error_count()} error(s)") from exc

    @staticmethod
    def _parse_list(path: str, payload: Any, schema: type[SchemaT]) -> list[Any]:
        # The backend encodes an empty list as null.
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ApiError(f"{path} returned {type(payload).__name__}, expected a list")
        items: list[Any] = []
        for raw_item in payload:
            try:
                items.append(schema.model_validate(raw_item).to_model())
            except ValidationError as exc:
                logger.warning("Skipping invalid record from %s: %s", path, exc.errors()[0].get("msg"))
        return items
