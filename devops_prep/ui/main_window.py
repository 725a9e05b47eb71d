"""Qt main window switching between home, quiz, interview and applications modes."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from devops_prep.api.client import ApiClient
from devops_prep.api.content_loader import (
    load_homepage_content,
    load_interview_scenarios,
    load_ui_config,
)
from devops_prep.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from devops_prep.constants.ui_constants import (
    MODE_BUTTON_APPLICATIONS,
    MODE_BUTTON_HOME,
    MODE_BUTTON_INTERVIEW,
    MODE_BUTTON_QUIZ,
    WINDOW_TITLE,
)
from devops_prep.core.application_manager import JobApplicationManager
from devops_prep.core.interview_controller import InterviewController
from devops_prep.core.quiz_controller import QuizController
from devops_prep.styling.styles import Styles
from devops_prep.ui.background import run_in_background
from devops_prep.ui.components.applications_panel import ApplicationsPanel
from devops_prep.ui.components.home_panel import HomePanel
from devops_prep.ui.components.interview_panel import InterviewPanel
from devops_prep.ui.components.quiz_panel import QuizPanel
from devops_prep.ui.dialog_helpers import show_info


class AppMode(Enum):
    HOME = auto()
    QUIZ = auto()
    INTERVIEW = auto()
    APPLICATIONS = auto()


_SECTION_MODES = {
    "quiz": AppMode.QUIZ,
    "interview": AppMode.INTERVIEW,
    "applications": AppMode.APPLICATIONS,
}


class MainWindow(QMainWindow):
    """Main Qt window hosting one panel per application mode."""

    def __init__(
        self,
        api: ApiClient,
        quiz_controller: QuizController,
        interview_controller: InterviewController,
        application_manager: JobApplicationManager,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 760)

        self.api = api
        self.quiz_controller = quiz_controller
        self.interview_controller = interview_controller
        self.application_manager = application_manager
        self._mode = AppMode.HOME

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._load_remote_content()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.home_panel = HomePanel(on_open_section=self._open_section, parent=self)
        self.quiz_panel = QuizPanel(self.quiz_controller, self)
        self.interview_panel = InterviewPanel(self.interview_controller, self)
        self.applications_panel = ApplicationsPanel(self.application_manager, self)

        self._panels = {
            AppMode.HOME: self.home_panel,
            AppMode.QUIZ: self.quiz_panel,
            AppMode.INTERVIEW: self.interview_panel,
            AppMode.APPLICATIONS: self.applications_panel,
        }
        for panel in self._panels.values():
            self.mode_stack.addWidget(panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(AppMode.HOME)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        self.mode_buttons: dict[AppMode, QPushButton] = {}
        for mode, label in (
            (AppMode.HOME, MODE_BUTTON_HOME),
            (AppMode.QUIZ, MODE_BUTTON_QUIZ),
            (AppMode.INTERVIEW, MODE_BUTTON_INTERVIEW),
            (AppMode.APPLICATIONS, MODE_BUTTON_APPLICATIONS),
        ):
            button = QPushButton(label, self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, target=mode: self._set_mode(target))
            button_row.addWidget(button)
            self.mode_buttons[mode] = button

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def _load_remote_content(self) -> None:
        run_in_background(lambda: load_ui_config(self.api), self.quiz_panel.set_ui_config, name="LoadUiConfig")
        run_in_background(lambda: load_homepage_content(self.api), self.home_panel.set_content, name="LoadHomepage")
        run_in_background(
            lambda: load_interview_scenarios(self.api), self.interview_panel.set_scenarios, name="LoadScenarios"
        )

    def _open_section(self, section: str) -> None:
        self._set_mode(_SECTION_MODES.get(section, AppMode.HOME))

    def _set_mode(self, mode: AppMode) -> None:
        if self._mode is AppMode.INTERVIEW and mode is not AppMode.INTERVIEW:
            self.interview_panel.deactivate()
        if mode is AppMode.APPLICATIONS and self._mode is not AppMode.APPLICATIONS:
            self.applications_panel.refresh()

        self._mode = mode
        for button_mode, button in self.mode_buttons.items():
            button.setChecked(button_mode is mode)
        self.mode_stack.setCurrentWidget(self._panels[mode])

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Backend: {self.api.base_url}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.interview_controller.shutdown()
        super().closeEvent(event)
