"""Shared fixtures: an in-process stub of the backend and a manual tick scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from devops_prep.api.client import ApiClient


def make_question(
    question_id: str,
    category: str = "Core Concepts",
    *,
    answer: str = "A Pod",
    difficulty: str = "Easy",
    question_type: str = "open-ended",
    options: list[str] | None = None,
) -> dict[str, Any]:
    question = {
        "id": question_id,
        "question": f"Question {question_id}?",
        "answer": answer,
        "category": category,
        "difficulty": difficulty,
        "type": question_type,
    }
    if options is not None:
        question["options"] = options
    return question


def make_application(
    application_id: str,
    company: str,
    status: str = "applied",
    *,
    location: str | None = None,
    applied_date: str = "2024-03-01T00:00:00Z",
) -> dict[str, Any]:
    record = {"_id": application_id, "company": company, "appliedDate": applied_date, "status": status}
    if location is not None:
        record["location"] = location
    return record


@dataclass
class StubBackend:
    """Mutable state behind the stub API; tests tweak it directly."""

    categories: list[str] | None = field(default_factory=lambda: ["Core Concepts", "Networking"])
    questions: list[dict[str, Any]] = field(default_factory=list)
    applications: list[dict[str, Any]] = field(default_factory=list)
    ui_config: dict[str, Any] | None = None
    interview_scenarios: dict[str, Any] | None = None
    homepage: dict[str, Any] | None = None
    failing_paths: set[str] = field(default_factory=set)
    requests: list[tuple[str, str]] = field(default_factory=list)
    received_bodies: list[dict[str, Any]] = field(default_factory=list)
    next_id: int = 1

    def allocate_id(self) -> str:
        new_id = f"{self.next_id:024x}"
        self.next_id += 1
        return new_id

    def count(self, method: str, path_prefix: str = "") -> int:
        return sum(1 for m, p in self.requests if m == method and p.startswith(path_prefix))


def create_stub_app(backend: StubBackend) -> FastAPI:
    app = FastAPI()

    @app.middleware("http")
    async def record_requests(request: Request, call_next):
        backend.requests.append((request.method, request.url.path))
        if request.url.path in backend.failing_paths:
            return JSONResponse({"error": "stub failure"}, status_code=500)
        return await call_next(request)

    @app.get("/api/categories")
    def categories() -> Any:
        return backend.categories

    @app.get("/api/questions/random/{count}")
    def random_questions(count: int) -> Any:
        return backend.questions[:count]

    @app.get("/api/questions/category/{category}")
    def category_questions(category: str) -> Any:
        return [q for q in backend.questions if q["category"] == category]

    @app.post("/api/questions", status_code=201)
    def add_question(payload: dict[str, Any]) -> Any:
        backend.received_bodies.append(payload)
        new_id = backend.allocate_id()
        stored = {**payload, "id": "0" * 24}
        backend.questions.append({**payload, "id": new_id})
        return {"message": "questions added", "question": stored, "id": new_id}

    @app.post("/api/submit")
    def submit(payload: dict[str, Any]) -> Any:
        backend.received_bodies.append(payload)
        question = next((q for q in backend.questions if q["id"] == payload["question_id"]), None)
        if question is None:
            raise HTTPException(status_code=404, detail="question not found")
        correct = payload["answer"].strip().lower() == question["answer"].strip().lower()
        return {
            "correct": correct,
            "correct_answer": question["answer"],
            "explanation": "" if correct else "Review the docs.",
        }

    def optional(content: dict[str, Any] | None) -> Any:
        if content is None:
            raise HTTPException(status_code=404, detail="not configured")
        return content

    @app.get("/api/ui-config")
    def ui_config() -> Any:
        return optional(backend.ui_config)

    @app.get("/api/interview-scenarios")
    def interview_scenarios() -> Any:
        return optional(backend.interview_scenarios)

    @app.get("/api/homepage-data")
    def homepage() -> Any:
        return optional(backend.homepage)

    @app.get("/api/job-applications")
    def list_applications() -> Any:
        return backend.applications or None

    @app.post("/api/job-applications", status_code=201)
    def create_application(payload: dict[str, Any]) -> Any:
        backend.received_bodies.append(payload)
        record = {"_id": backend.allocate_id(), **payload}
        backend.applications.append(record)
        return record

    @app.put("/api/job-applications/{application_id}")
    def update_application(application_id: str, payload: dict[str, Any]) -> Any:
        backend.received_bodies.append(payload)
        for index, record in enumerate(backend.applications):
            if record["_id"] == application_id:
                backend.applications[index] = {"_id": application_id, **payload}
                return backend.applications[index]
        raise HTTPException(status_code=404, detail="application not found")

    @app.delete("/api/job-applications/{application_id}")
    def delete_application(application_id: str) -> Any:
        before = len(backend.applications)
        backend.applications = [r for r in backend.applications if r["_id"] != application_id]
        if len(backend.applications) == before:
            raise HTTPException(status_code=404, detail="application not found")
        return {"message": "deleted"}

    return app


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend(
        questions=[
            make_question("q1", "Core Concepts", answer="A Pod"),
            make_question("q2", "Core Concepts", answer="kubectl get pods"),
            make_question(
                "q3",
                "Networking",
                answer="ClusterIP",
                question_type="multiple-choice",
                options=["ClusterIP", "NodePort", "LoadBalancer"],
            ),
            make_question("q4", "Core Concepts", answer="etcd", difficulty="Hard"),
            make_question("q5", "Networking", answer="CoreDNS", difficulty="Medium"),
            make_question("q6", "Core Concepts", answer="A ReplicaSet"),
        ],
    )


@pytest.fixture
def api(backend: StubBackend) -> ApiClient:
    client = ApiClient(base_url="http://testserver", http_client=TestClient(create_stub_app(backend)))
    yield client
    client.close()


def mock_api(handler: Callable[[httpx.Request], httpx.Response]) -> ApiClient:
    """ApiClient over an ``httpx.MockTransport`` for transport-level scenarios."""
    return ApiClient(base_url="http://backend.test", http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class FakeTickHandle:
    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self.interval_seconds = interval_seconds
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.callback()


class FakeTickScheduler:
    """Records armed ticks; ``tick()`` fires every live one once."""

    def __init__(self) -> None:
        self.handles: list[FakeTickHandle] = []

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> FakeTickHandle:
        handle = FakeTickHandle(interval_seconds, callback)
        self.handles.append(handle)
        return handle

    @property
    def active(self) -> list[FakeTickHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in list(self.active):
                handle.fire()


@pytest.fixture
def scheduler() -> FakeTickScheduler:
    return FakeTickScheduler()
