"""Component for the Kubernetes quiz: setup, answering and results."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QStackedWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.quiz_constants import ALL_CATEGORIES, QUESTION_COUNT_CHOICES
from devops_prep.constants.ui_constants import (
    ALL_CATEGORIES_LABEL,
    LOAD_QUESTIONS_FAILED_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    PLACEHOLDER_OPEN_ANSWER,
    QUIZ_ADD_QUESTION_BUTTON,
    QUIZ_FINISH_BUTTON,
    QUIZ_GENERATE_BUTTON,
    QUIZ_HIDE_ANSWER_BUTTON,
    QUIZ_NEXT_BUTTON,
    QUIZ_PREV_BUTTON,
    QUIZ_RESTART_BUTTON,
    QUIZ_SHOW_ANSWER_BUTTON,
    QUIZ_SUBMIT_BUTTON,
    SUBMIT_FAILED_MESSAGE,
)
from devops_prep.constants.fallback_content import FALLBACK_UI_CONFIG
from devops_prep.core.models import Question, QuizStage, SubmissionResult, UIConfig
from devops_prep.core.quiz_controller import QuizController
from devops_prep.core.services.validation import ValidationError
from devops_prep.styling.styles import Styles
from devops_prep.ui.background import run_in_background
from devops_prep.ui.components.add_question_dialog import AddQuestionDialog
from devops_prep.ui.dialog_helpers import show_error, show_info, show_warning
from devops_prep.ui.question_renderer import render_answer, render_question

_SETUP_PAGE, _ACTIVE_PAGE, _RESULTS_PAGE = range(3)


class QuizPanel(QWidget):
    """UI component driving a ``QuizController``."""

    def __init__(self, controller: QuizController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._ui_config: UIConfig = FALLBACK_UI_CONFIG
        self._categories: list[str] = []
        self._rendered_question_id: str | None = None

        self._build_ui()
        self._show_stage()

    # --- Construction ---

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.page_stack = QStackedWidget(self)
        self.page_stack.addWidget(self._build_setup_page())
        self.page_stack.addWidget(self._build_active_page())
        self.page_stack.addWidget(self._build_results_page())
        layout.addWidget(self.page_stack)

    def _build_setup_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        title = QLabel("Kubernetes Quiz", page)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        selector_row = QHBoxLayout()
        selector_row.addWidget(QLabel("Category:", page))
        self.category_combo = QComboBox(page)
        selector_row.addWidget(self.category_combo, stretch=1)

        selector_row.addWidget(QLabel("Questions:", page))
        self.count_combo = QComboBox(page)
        for count in QUESTION_COUNT_CHOICES:
            self.count_combo.addItem(str(count), userData=count)
        self.count_combo.setCurrentIndex(max(0, self.count_combo.findData(self.controller.count)))
        selector_row.addWidget(self.count_combo)
        layout.addLayout(selector_row)

        button_row = QHBoxLayout()
        self.generate_button = QPushButton(QUIZ_GENERATE_BUTTON, page)
        self.generate_button.setProperty("primary", True)
        self.generate_button.clicked.connect(self._handle_generate)
        button_row.addWidget(self.generate_button)

        self.add_question_button = QPushButton(QUIZ_ADD_QUESTION_BUTTON, page)
        self.add_question_button.clicked.connect(self._handle_add_question)
        button_row.addWidget(self.add_question_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        self.setup_status_label = QLabel("", page)
        self.setup_status_label.setWordWrap(True)
        layout.addWidget(self.setup_status_label)
        layout.addStretch()
        self._populate_categories([])
        return page

    def _build_active_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", page)
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.category_badge = QLabel("", page)
        header_row.addWidget(self.category_badge)
        self.difficulty_badge = QLabel("", page)
        header_row.addWidget(self.difficulty_badge)
        layout.addLayout(header_row)

        self.question_view = QTextBrowser(page)
        self.question_view.setOpenExternalLinks(True)
        layout.addWidget(self.question_view, stretch=2)

        self.options_container = QWidget(page)
        self.options_layout = QVBoxLayout()
        self.options_container.setLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.buttonClicked.connect(self._handle_option_clicked)
        layout.addWidget(self.options_container)

        self.open_answer_input = QPlainTextEdit(page)
        self.open_answer_input.setPlaceholderText(PLACEHOLDER_OPEN_ANSWER)
        self.open_answer_input.textChanged.connect(self._handle_open_answer_changed)
        layout.addWidget(self.open_answer_input, stretch=1)

        self.result_label = QLabel("", page)
        self.result_label.setWordWrap(True)
        layout.addWidget(self.result_label)

        self.answer_view = QTextBrowser(page)
        self.answer_view.setVisible(False)
        layout.addWidget(self.answer_view, stretch=1)

        action_row = QHBoxLayout()
        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, page)
        self.submit_button.setProperty("primary", True)
        self.submit_button.clicked.connect(self._handle_submit)
        action_row.addWidget(self.submit_button)

        self.show_answer_button = QPushButton(QUIZ_SHOW_ANSWER_BUTTON, page)
        self.show_answer_button.clicked.connect(self._handle_toggle_answer)
        action_row.addWidget(self.show_answer_button)
        action_row.addStretch()

        self.prev_button = QPushButton(QUIZ_PREV_BUTTON, page)
        self.prev_button.clicked.connect(self._handle_previous)
        action_row.addWidget(self.prev_button)

        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, page)
        self.next_button.clicked.connect(self._handle_next)
        action_row.addWidget(self.next_button)
        layout.addLayout(action_row)
        return page

    def _build_results_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout()
        page.setLayout(layout)

        self.score_label = QLabel("", page)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.score_detail_label = QLabel("", page)
        layout.addWidget(self.score_detail_label)

        restart_button = QPushButton(QUIZ_RESTART_BUTTON, page)
        restart_button.setProperty("primary", True)
        restart_button.clicked.connect(self._handle_restart)
        layout.addWidget(restart_button)
        layout.addStretch()
        return page

    # --- External configuration ---

    def set_ui_config(self, ui_config: UIConfig) -> None:
        self._ui_config = ui_config
        self.reload_categories()
        if self.controller.stage is QuizStage.ACTIVE:
            self._render_current_question()

    def reload_categories(self) -> None:
        ui_config = self._ui_config
        run_in_background(
            lambda: self.controller.load_categories(ui_config),
            self._populate_categories,
            name="LoadCategories",
        )

    def _populate_categories(self, categories: list[str]) -> None:
        self._categories = list(categories)
        selected = self.controller.category
        self.category_combo.clear()
        self.category_combo.addItem(ALL_CATEGORIES_LABEL, userData=ALL_CATEGORIES)
        for category in self._categories:
            self.category_combo.addItem(category, userData=category)
        index = self.category_combo.findData(selected)
        self.category_combo.setCurrentIndex(index if index >= 0 else 0)

    # --- Setup actions ---

    def _handle_generate(self) -> None:
        self.controller.select_category(self.category_combo.currentData() or ALL_CATEGORIES)
        self.controller.select_count(int(self.count_combo.currentData()))
        self.generate_button.setEnabled(False)
        self.setup_status_label.setText("Loading questions…")
        run_in_background(self.controller.load_questions, self._on_questions_loaded, name="LoadQuestions")

    def _on_questions_loaded(self, loaded: bool) -> None:
        self.generate_button.setEnabled(True)
        self.setup_status_label.setText("")
        if not loaded:
            show_error(self, "Quiz", LOAD_QUESTIONS_FAILED_MESSAGE)
            return
        if not self.controller.get_questions():
            show_info(self, "Quiz", NO_QUESTIONS_MESSAGE)
        self._rendered_question_id = None
        self._show_stage()

    def _handle_add_question(self) -> None:
        dialog = AddQuestionDialog(self.controller, self._categories, self)
        if dialog.exec():
            self.reload_categories()

    # --- Answering ---

    def _handle_option_clicked(self, button: QRadioButton) -> None:
        question = self.controller.get_current_question()
        if question is not None:
            self.controller.select_answer(question.id, button.text())

    def _handle_open_answer_changed(self) -> None:
        question = self.controller.get_current_question()
        if question is not None and not question.is_multiple_choice:
            self.controller.select_answer(question.id, self.open_answer_input.toPlainText())

    def _handle_submit(self) -> None:
        question = self.controller.get_current_question()
        if question is None:
            return
        self.submit_button.setEnabled(False)
        question_id = question.id
        run_in_background(
            lambda: self.controller.submit_answer(question_id),
            lambda result: self._on_submitted(question_id, result),
            self._on_submit_failed,
            name="SubmitAnswer",
        )

    def _on_submitted(self, question_id: str, result: SubmissionResult | None) -> None:
        still_loaded = any(q.id == question_id for q in self.controller.get_questions())
        if result is None and still_loaded and not self.controller.is_submission_pending(question_id):
            show_error(self, "Quiz", SUBMIT_FAILED_MESSAGE)
        current = self.controller.get_current_question()
        if current is not None and current.id == question_id:
            self._render_answer_state(current)

    def _on_submit_failed(self, error: BaseException) -> None:
        if isinstance(error, ValidationError):
            show_warning(self, "Quiz", str(error))
        else:
            show_error(self, "Quiz", SUBMIT_FAILED_MESSAGE)
        current = self.controller.get_current_question()
        if current is not None:
            self._render_answer_state(current)

    def _handle_toggle_answer(self) -> None:
        question = self.controller.get_current_question()
        if question is None:
            return
        self.controller.toggle_show_answer(question.id)
        self._render_answer_state(question)

    # --- Navigation ---

    def _handle_previous(self) -> None:
        self.controller.retreat()
        self._show_stage()

    def _handle_next(self) -> None:
        self.controller.advance()
        self._show_stage()

    def _handle_restart(self) -> None:
        self.controller.reset()
        self._rendered_question_id = None
        self._show_stage()

    # --- Rendering ---

    def _show_stage(self) -> None:
        stage = self.controller.stage
        if stage is QuizStage.ACTIVE:
            self.page_stack.setCurrentIndex(_ACTIVE_PAGE)
            self._render_current_question()
        elif stage is QuizStage.RESULTS:
            self.page_stack.setCurrentIndex(_RESULTS_PAGE)
            self._render_results()
        else:
            self.page_stack.setCurrentIndex(_SETUP_PAGE)

    def _render_current_question(self) -> None:
        question = self.controller.get_current_question()
        total = len(self.controller.get_questions())
        index = self.controller.current_index
        if question is None:
            self.progress_label.setText("No questions loaded")
            self.question_view.clear()
            self.next_button.setText(QUIZ_FINISH_BUTTON)
            for widget in (self.submit_button, self.show_answer_button, self.prev_button):
                widget.setEnabled(False)
            self.options_container.setVisible(False)
            self.open_answer_input.setVisible(False)
            return

        self.progress_label.setText(f"Question {index + 1} of {total}")
        self.category_badge.setText(question.category)
        self.category_badge.setStyleSheet(
            Styles.get_badge_style(self._ui_config.color_for_category(question.category))
        )
        self.difficulty_badge.setText(question.difficulty.value)
        self.difficulty_badge.setStyleSheet(
            Styles.get_badge_style(self._ui_config.color_for_difficulty(question.difficulty.value))
        )
        self.question_view.setHtml(render_question(question))
        if self._rendered_question_id != question.id:
            self._rebuild_answer_inputs(question)
            self._rendered_question_id = question.id

        self.prev_button.setEnabled(index > 0)
        self.next_button.setText(QUIZ_FINISH_BUTTON if index >= total - 1 else QUIZ_NEXT_BUTTON)
        self._render_answer_state(question)

    def _rebuild_answer_inputs(self, question: Question) -> None:
        for button in self.option_group.buttons():
            self.option_group.removeButton(button)
            button.deleteLater()

        selected = self.controller.get_selected_answer(question.id) or ""
        self.options_container.setVisible(question.is_multiple_choice)
        self.open_answer_input.setVisible(not question.is_multiple_choice)
        if question.is_multiple_choice:
            for option in question.options:
                radio = QRadioButton(option, self.options_container)
                radio.setChecked(option == selected)
                self.option_group.addButton(radio)
                self.options_layout.addWidget(radio)
        else:
            self.open_answer_input.blockSignals(True)
            self.open_answer_input.setPlainText(selected)
            self.open_answer_input.blockSignals(False)

    def _render_answer_state(self, question: Question) -> None:
        result = self.controller.get_submission(question.id)
        pending = self.controller.is_submission_pending(question.id)
        graded = result is not None

        self.submit_button.setEnabled(not graded and not pending)
        self.submit_button.setText("Submitting…" if pending else QUIZ_SUBMIT_BUTTON)
        self.show_answer_button.setEnabled(True)
        self.open_answer_input.setReadOnly(graded)
        for button in self.option_group.buttons():
            button.setEnabled(not graded)

        if result is None:
            self.result_label.setText("")
        else:
            self.result_label.setText("Correct!" if result.correct else "Incorrect")
            self.result_label.setStyleSheet(Styles.get_result_style(result.correct))

        shown = self.controller.is_answer_shown(question.id)
        self.show_answer_button.setText(QUIZ_HIDE_ANSWER_BUTTON if shown else QUIZ_SHOW_ANSWER_BUTTON)
        self.answer_view.setVisible(shown)
        if shown:
            self.answer_view.setHtml(render_answer(question, result))

    def _render_results(self) -> None:
        score = self.controller.score()
        self.score_label.setText(f"Quiz complete: {score.percentage}%")
        self.score_detail_label.setText(f"You answered {score.correct} of {score.total} questions correctly.")
