"""Application entry point for DevOps Interview Prep."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from devops_prep.api.client import ApiClient
from devops_prep.config import get_config
from devops_prep.core.application_manager import JobApplicationManager
from devops_prep.core.interview_controller import InterviewController
from devops_prep.core.quiz_controller import QuizController
from devops_prep.ui.background import UiThreadPrompt
from devops_prep.ui.dialog_helpers import confirm_delete_application
from devops_prep.ui.main_window import MainWindow
from devops_prep.ui.qt_tick_scheduler import QtTickScheduler
from devops_prep.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and configuration, build the controllers, and launch the Qt UI."""
    config = get_config()
    logger = configure_logging(config.log_level)
    logger.info("Starting DevOps Interview Prep against %s", config.api_base_url)

    app = QApplication(sys.argv)
    api = ApiClient(config.api_base_url, timeout=config.request_timeout_seconds)

    confirm_delete = UiThreadPrompt(lambda _application_id: confirm_delete_application(app.activeWindow()))
    window = MainWindow(
        api=api,
        quiz_controller=QuizController(api),
        interview_controller=InterviewController(QtTickScheduler(app)),
        application_manager=JobApplicationManager(api, confirm_delete=confirm_delete),
    )
    window.show()
    exit_code = app.exec()
    api.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
