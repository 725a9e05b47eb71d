"""Dialog for contributing a new question to the question bank."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.quiz_constants import DEFAULT_DRAFT_OPTION_SLOTS
from devops_prep.constants.ui_constants import (
    ADD_QUESTION_FAILED_MESSAGE,
    ADD_QUESTION_SUCCESS_MESSAGE,
    ADD_QUESTION_TITLE,
    PLACEHOLDER_QUESTION,
)
from devops_prep.core.models import Difficulty, Question, QuestionDraft, QuestionType
from devops_prep.core.quiz_controller import QuizController
from devops_prep.core.services.validation import ValidationError, validate_question_draft
from devops_prep.ui.background import run_in_background
from devops_prep.ui.dialog_helpers import show_error, show_info, show_warning

_TYPE_LABELS = {
    QuestionType.OPEN_ENDED: "Open-ended",
    QuestionType.MULTIPLE_CHOICE: "Multiple choice",
}


class AddQuestionDialog(QDialog):
    """Collects a ``QuestionDraft``, validates it locally and posts it in the background."""

    def __init__(
        self,
        controller: QuizController,
        categories: list[str],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle(ADD_QUESTION_TITLE)
        self.setMinimumWidth(520)
        self._build_ui(categories)
        self._update_option_visibility()

    def _build_ui(self, categories: list[str]) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        form = QFormLayout()
        layout.addLayout(form)

        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        form.addRow("Question:", self.question_input)

        self.category_combo = QComboBox(self)
        self.category_combo.setEditable(True)
        self.category_combo.addItems(categories)
        self.category_combo.setCurrentText("")
        form.addRow("Category:", self.category_combo)

        self.difficulty_combo = QComboBox(self)
        for difficulty in Difficulty:
            self.difficulty_combo.addItem(difficulty.value, userData=difficulty.value)
        form.addRow("Difficulty:", self.difficulty_combo)

        self.type_combo = QComboBox(self)
        for question_type, label in _TYPE_LABELS.items():
            self.type_combo.addItem(label, userData=question_type.value)
        self.type_combo.currentIndexChanged.connect(self._update_option_visibility)
        form.addRow("Type:", self.type_combo)

        self.options_label = QLabel("Options:", self)
        self.option_inputs: list[QLineEdit] = []
        options_container = QWidget(self)
        options_layout = QVBoxLayout()
        options_layout.setContentsMargins(0, 0, 0, 0)
        options_container.setLayout(options_layout)
        for index in range(DEFAULT_DRAFT_OPTION_SLOTS):
            option_input = QLineEdit(options_container)
            option_input.setPlaceholderText(f"Option {index + 1}")
            options_layout.addWidget(option_input)
            self.option_inputs.append(option_input)
        self.options_container = options_container
        form.addRow(self.options_label, options_container)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText("Correct answer (must match an option for multiple choice)")
        form.addRow("Answer:", self.answer_input)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel, self)
        self.button_box.accepted.connect(self._handle_save)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def _update_option_visibility(self) -> None:
        is_choice = self.type_combo.currentData() == QuestionType.MULTIPLE_CHOICE.value
        self.options_label.setVisible(is_choice)
        self.options_container.setVisible(is_choice)

    def build_draft(self) -> QuestionDraft:
        return QuestionDraft(
            question_text=self.question_input.toPlainText(),
            answer=self.answer_input.text(),
            category=self.category_combo.currentText(),
            difficulty=self.difficulty_combo.currentData(),
            question_type=self.type_combo.currentData(),
            options=[option_input.text() for option_input in self.option_inputs],
        )

    def _handle_save(self) -> None:
        draft = self.build_draft()
        try:
            validate_question_draft(draft)
        except ValidationError as exc:
            show_warning(self, ADD_QUESTION_TITLE, str(exc))
            return

        self.button_box.setEnabled(False)
        run_in_background(
            lambda: self.controller.add_question(draft),
            self._on_saved,
            self._on_save_failed,
            name="AddQuestion",
        )

    def _on_saved(self, created: Question | None) -> None:
        self.button_box.setEnabled(True)
        if created is None:
            show_error(self, ADD_QUESTION_TITLE, ADD_QUESTION_FAILED_MESSAGE)
            return
        show_info(self, ADD_QUESTION_TITLE, ADD_QUESTION_SUCCESS_MESSAGE)
        self.accept()

    def _on_save_failed(self, error: BaseException) -> None:
        self.button_box.setEnabled(True)
        show_warning(self, ADD_QUESTION_TITLE, str(error))
