"""HTML rendering helpers for quiz questions and interview prompts."""

from __future__ import annotations

from html import escape

from devops_prep.core.markdown_renderer import renderer
from devops_prep.core.models import IncidentScenario, Question, SubmissionResult


def render_question(question: Question) -> str:
    """Render the question prompt (options are real widgets, so they are not included)."""
    return renderer.render_document(question.question_text)


def render_answer(question: Question, result: SubmissionResult | None = None) -> str:
    """Render the reference answer, plus the grader's explanation when one was returned."""
    parts = [f"**Answer:**\n\n{question.answer or '(no answer provided)'}"]
    if result is not None and result.correct_answer and result.correct_answer != question.answer:
        parts.append(f"**Expected:** {result.correct_answer}")
    if result is not None and result.explanation:
        parts.append(f"**Explanation:**\n\n{result.explanation}")
    return renderer.render_document("\n\n".join(parts))


def render_prompt(prompt: str, hints: tuple[str, ...] = ()) -> str:
    markdown = prompt
    if hints:
        markdown += "\n\n**Hints:**\n\n" + "\n".join(f"- {hint}" for hint in hints)
    return renderer.render_document(markdown)


def render_incident_scenarios(scenarios: tuple[IncidentScenario, ...]) -> str:
    """Render the practice incidents shown on the interview intro screen."""
    if not scenarios:
        return renderer.wrap_document("")
    fragments = []
    for scenario in scenarios:
        minutes = scenario.time_limit_seconds // 60
        fragments.append(
            f"<h3>{escape(scenario.title)}</h3>"
            f"<p><i>{escape(scenario.description)} ({minutes} min)</i></p>"
            f"{renderer.render_fragment(scenario.situation)}"
        )
    return renderer.wrap_document("<hr/>".join(fragments))
