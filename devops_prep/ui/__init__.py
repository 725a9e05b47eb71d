"""Qt UI components for the DevOps Interview Prep application."""

from .dialog_helpers import (
    confirm_delete_application,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow

__all__ = [
    "MainWindow",
    "confirm_delete_application",
    "show_error",
    "show_info",
    "show_warning",
]
