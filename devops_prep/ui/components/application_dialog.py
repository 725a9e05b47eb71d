"""Form dialog for creating or editing a job application."""

from __future__ import annotations

from datetime import date

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.ui_constants import (
    APPLICATION_DIALOG_ADD_TITLE,
    APPLICATION_DIALOG_EDIT_TITLE,
)
from devops_prep.core.models import ApplicationFields, ApplicationStatus, JobApplication
from devops_prep.core.services.validation import ValidationError, validate_application_fields
from devops_prep.ui.dialog_helpers import show_warning


class ApplicationDialog(QDialog):
    def __init__(self, application: JobApplication | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(APPLICATION_DIALOG_EDIT_TITLE if application else APPLICATION_DIALOG_ADD_TITLE)
        self.setMinimumWidth(420)
        self._build_ui()
        if application is not None:
            self._populate(application)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        form = QFormLayout()
        layout.addLayout(form)

        self.company_input = QLineEdit(self)
        self.company_input.setPlaceholderText("e.g. Acme Corp")
        form.addRow("Company:", self.company_input)

        self.location_input = QLineEdit(self)
        self.location_input.setPlaceholderText("e.g. Remote, Berlin")
        form.addRow("Location:", self.location_input)

        self.date_input = QDateEdit(self)
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat("yyyy-MM-dd")
        self.date_input.setDate(QDate.currentDate())
        form.addRow("Applied on:", self.date_input)

        self.status_combo = QComboBox(self)
        for status in ApplicationStatus:
            self.status_combo.addItem(status.value.title(), userData=status.value)
        form.addRow("Status:", self.status_combo)

        button_box = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel, self)
        button_box.accepted.connect(self._handle_save)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

    def _populate(self, application: JobApplication) -> None:
        self.company_input.setText(application.company)
        self.location_input.setText(application.location)
        applied = application.applied_date
        self.date_input.setDate(QDate(applied.year, applied.month, applied.day))
        self.status_combo.setCurrentIndex(max(0, self.status_combo.findData(application.status.value)))

    def get_fields(self) -> ApplicationFields:
        qdate = self.date_input.date()
        return ApplicationFields(
            company=self.company_input.text(),
            applied_date=date(qdate.year(), qdate.month(), qdate.day()),
            status=ApplicationStatus(self.status_combo.currentData()),
            location=self.location_input.text(),
        )

    def _handle_save(self) -> None:
        try:
            validate_application_fields(self.get_fields())
        except ValidationError as exc:
            show_warning(self, self.windowTitle(), str(exc))
            return
        self.accept()
