"""Component for the timed interview simulation."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.quiz_constants import TIME_WARNING_WINDOW_SECONDS
from devops_prep.constants.ui_constants import (
    INTERVIEW_FINISH_BUTTON,
    INTERVIEW_INTRO_TEXT,
    INTERVIEW_NEXT_BUTTON,
    INTERVIEW_RESTART_BUTTON,
    INTERVIEW_START_BUTTON,
    PLACEHOLDER_INTERVIEW_ANSWER,
)
from devops_prep.core.interview_controller import InterviewController
from devops_prep.core.markdown_renderer import renderer
from devops_prep.core.models import INTERVIEW_PHASE_ORDER, InterviewScenarios, InterviewStage
from devops_prep.styling.styles import Styles, phase_accent
from devops_prep.ui.dialog_helpers import show_warning
from devops_prep.ui.question_renderer import render_incident_scenarios, render_prompt

_INTRO_PAGE, _ACTIVE_PAGE, _RESULTS_PAGE = range(3)
_PROGRESS_STEPS = 1000


class InterviewPanel(QWidget):
    """Renders an ``InterviewController`` and forwards user input to it."""

    def __init__(self, controller: InterviewController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.controller.on_change = self.refresh
        self.controller.on_tick = self._update_timer

        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.page_stack = QStackedWidget(self)
        self.page_stack.addWidget(self._build_intro_page())
        self.page_stack.addWidget(self._build_active_page())
        self.page_stack.addWidget(self._build_results_page())
        layout.addWidget(self.page_stack)

    def _build_intro_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        title = QLabel("DevOps Interview Simulation", page)
        title.setStyleSheet(Styles.get_large_label_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        description = QLabel(INTERVIEW_INTRO_TEXT, page)
        description.setWordWrap(True)
        layout.addWidget(description)

        self.phase_summary_label = QLabel("", page)
        self.phase_summary_label.setWordWrap(True)
        layout.addWidget(self.phase_summary_label)

        self.start_button = QPushButton(INTERVIEW_START_BUTTON, page)
        self.start_button.setProperty("primary", True)
        self.start_button.clicked.connect(self._handle_start)
        layout.addWidget(self.start_button)

        layout.addWidget(QLabel("Practice incidents", page))
        self.scenario_view = QTextBrowser(page)
        layout.addWidget(self.scenario_view, stretch=1)
        return page

    def _build_active_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        header_row = QHBoxLayout()
        self.phase_label = QLabel("", page)
        self.phase_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.phase_label)
        header_row.addStretch()
        self.timer_label = QLabel("", page)
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.question_counter_label = QLabel("", page)
        layout.addWidget(self.question_counter_label)

        self.phase_progress = QProgressBar(page)
        self.phase_progress.setRange(0, _PROGRESS_STEPS)
        self.phase_progress.setTextVisible(False)
        layout.addWidget(self.phase_progress)

        self.prompt_view = QTextBrowser(page)
        layout.addWidget(self.prompt_view, stretch=1)

        self.answer_input = QPlainTextEdit(page)
        self.answer_input.setPlaceholderText(PLACEHOLDER_INTERVIEW_ANSWER)
        self.answer_input.textChanged.connect(self._handle_answer_changed)
        layout.addWidget(self.answer_input, stretch=1)

        action_row = QHBoxLayout()
        action_row.addStretch()
        self.next_button = QPushButton(INTERVIEW_NEXT_BUTTON, page)
        self.next_button.setProperty("primary", True)
        self.next_button.clicked.connect(self._handle_next)
        action_row.addWidget(self.next_button)
        layout.addLayout(action_row)
        return page

    def _build_results_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        title = QLabel("Interview Complete", page)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.results_summary_label = QLabel("", page)
        layout.addWidget(self.results_summary_label)

        self.answers_view = QTextBrowser(page)
        layout.addWidget(self.answers_view, stretch=1)

        restart_button = QPushButton(INTERVIEW_RESTART_BUTTON, page)
        restart_button.clicked.connect(self.controller.reset)
        layout.addWidget(restart_button)
        return page

    # --- Public API ---

    def set_scenarios(self, scenarios: InterviewScenarios) -> None:
        self.controller.load_scenarios(scenarios)

    def deactivate(self) -> None:
        """Leaving the view discards the running interview and stops its timer."""
        self.controller.reset()

    def refresh(self) -> None:
        stage = self.controller.stage
        if stage is InterviewStage.INTRO:
            self.page_stack.setCurrentIndex(_INTRO_PAGE)
            self._render_intro()
        elif stage is InterviewStage.RESULTS:
            self.page_stack.setCurrentIndex(_RESULTS_PAGE)
            self._render_results()
        else:
            self.page_stack.setCurrentIndex(_ACTIVE_PAGE)
            self._render_question()

    # --- Handlers ---

    def _handle_start(self) -> None:
        if not self.controller.start():
            show_warning(self, "Interview", "Interview questions are not available yet.")

    def _handle_answer_changed(self) -> None:
        self.controller.set_answer_buffer(self.answer_input.toPlainText())

    def _handle_next(self) -> None:
        self.controller.advance()

    # --- Rendering ---

    def _render_intro(self) -> None:
        scenarios = self.controller.scenarios
        if scenarios is None:
            self.phase_summary_label.setText("Loading interview questions…")
            self.start_button.setEnabled(False)
            self.scenario_view.clear()
            return
        lines = []
        for stage in INTERVIEW_PHASE_ORDER:
            phase = scenarios.phases.get(stage)
            if phase is not None and phase.questions:
                lines.append(f"• {phase.title}: {len(phase.questions)} question(s)")
        self.phase_summary_label.setText("\n".join(lines))
        self.start_button.setEnabled(scenarios.total_question_count() > 0)
        self.scenario_view.setHtml(render_incident_scenarios(scenarios.incident_scenarios))

    def _render_question(self) -> None:
        phase = self.controller.current_phase()
        question = self.controller.current_question()
        if phase is None or question is None:
            return
        accent = phase_accent(phase.color)
        self.phase_label.setText(phase.title)
        self.phase_label.setStyleSheet(f"{Styles.get_large_label_style()} color: {accent};")
        index = self.controller.question_index
        self.question_counter_label.setText(f"Question {index + 1} of {len(phase.questions)}")
        self.phase_progress.setValue(int(self.controller.phase_progress() * _PROGRESS_STEPS))
        self.prompt_view.setHtml(render_prompt(question.prompt, question.hints))

        self.answer_input.blockSignals(True)
        self.answer_input.setPlainText(self.controller.answer_buffer)
        self.answer_input.blockSignals(False)
        self.answer_input.setFocus()

        is_last = self._is_last_question()
        self.next_button.setText(INTERVIEW_FINISH_BUTTON if is_last else INTERVIEW_NEXT_BUTTON)
        self._update_timer(self.controller.time_remaining)

    def _is_last_question(self) -> bool:
        scenarios = self.controller.scenarios
        stage = self.controller.stage
        if scenarios is None or stage not in INTERVIEW_PHASE_ORDER:
            return False
        if self.controller.question_index < len(scenarios.questions_for(stage)) - 1:
            return False
        later = INTERVIEW_PHASE_ORDER[INTERVIEW_PHASE_ORDER.index(stage) + 1:]
        return not any(scenarios.questions_for(candidate) for candidate in later)

    def _update_timer(self, time_remaining: int) -> None:
        self.timer_label.setText(InterviewController.format_time(time_remaining))
        self.timer_label.setStyleSheet(Styles.get_timer_style(time_remaining <= TIME_WARNING_WINDOW_SECONDS))

    def _render_results(self) -> None:
        answered = self.controller.answered_count()
        scenarios = self.controller.scenarios
        total = scenarios.total_question_count() if scenarios is not None else 0
        spent = InterviewController.format_time(self.controller.total_time_spent())
        self.results_summary_label.setText(f"Answered {answered} of {total} questions in {spent}.")

        sections = []
        for answer in self.controller.get_answers():
            sections.append(
                f"### {answer.prompt}\n\n"
                f"*{answer.phase.value.title()} · {InterviewController.format_time(answer.time_spent_seconds)}*\n\n"
                f"{answer.answer}"
            )
        markdown = "\n\n---\n\n".join(sections) if sections else "_No answers were recorded._"
        self.answers_view.setHtml(renderer.render_document(markdown))
