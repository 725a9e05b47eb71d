"""Helper functions for common dialog patterns."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from devops_prep.constants.ui_constants import DELETE_APPLICATION_PROMPT


def confirm_delete_application(parent: QWidget | None) -> bool:
    """Ask before deleting a job application.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Confirm Delete",
        DELETE_APPLICATION_PROMPT,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget | None, title: str, message: str) -> None:
    """Show warning dialog, used for rejected form input."""
    QMessageBox.warning(parent, title, message)
