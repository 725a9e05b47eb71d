"""Component for the job application tracker."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.quiz_constants import ALL_STATUSES
from devops_prep.constants.ui_constants import (
    ALL_STATUSES_LABEL,
    APPLICATIONS_ADD_BUTTON,
    APPLICATIONS_EMPTY_MESSAGE,
    APPLICATIONS_NO_MATCH_MESSAGE,
    APPLICATIONS_REFRESH_BUTTON,
    APPLICATIONS_SEARCH_PLACEHOLDER,
)
from devops_prep.core.application_manager import JobApplicationManager
from devops_prep.core.models import ApplicationFields, ApplicationStatus, JobApplication
from devops_prep.core.services.validation import ValidationError
from devops_prep.styling.styles import Styles
from devops_prep.ui.background import run_in_background
from devops_prep.ui.components.application_dialog import ApplicationDialog
from devops_prep.ui.dialog_helpers import show_error, show_warning

# Badge classes per status, in the same format the backend serves for categories.
_STATUS_BADGES = {
    ApplicationStatus.APPLIED: "bg-blue-100 text-blue-800",
    ApplicationStatus.INTERVIEW: "bg-yellow-100 text-yellow-800",
    ApplicationStatus.OFFER: "bg-green-100 text-green-800",
    ApplicationStatus.REJECTED: "bg-red-100 text-red-800",
    ApplicationStatus.WITHDRAWN: "bg-gray-100 text-gray-800",
}
_COLUMNS = ("Company", "Location", "Applied", "Status", "")


class ApplicationsPanel(QWidget):
    """Dashboard, search/filter bar and table for a ``JobApplicationManager``."""

    def __init__(self, manager: JobApplicationManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.manager = manager
        self._build_ui()
        self._render()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        title = QLabel("Job Applications", self)
        title.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(title)
        header_row.addStretch()
        self.refresh_button = QPushButton(APPLICATIONS_REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.refresh)
        header_row.addWidget(self.refresh_button)
        self.add_button = QPushButton(APPLICATIONS_ADD_BUTTON, self)
        self.add_button.setProperty("primary", True)
        self.add_button.clicked.connect(self._handle_add)
        header_row.addWidget(self.add_button)
        layout.addLayout(header_row)

        stats_row = QHBoxLayout()
        self.total_label = self._add_stat_card(stats_row, "Total Applications")
        self.response_label = self._add_stat_card(stats_row, "Response Rate")
        self.interview_label = self._add_stat_card(stats_row, "Interviews")
        self.offer_label = self._add_stat_card(stats_row, "Offers")
        layout.addLayout(stats_row)

        filter_row = QHBoxLayout()
        self.search_input = QLineEdit(self)
        self.search_input.setPlaceholderText(APPLICATIONS_SEARCH_PLACEHOLDER)
        self.search_input.textChanged.connect(self._handle_search_changed)
        filter_row.addWidget(self.search_input, stretch=1)

        self.status_combo = QComboBox(self)
        self.status_combo.addItem(ALL_STATUSES_LABEL, userData=ALL_STATUSES)
        for status in ApplicationStatus:
            self.status_combo.addItem(status.value.title(), userData=status.value)
        self.status_combo.currentIndexChanged.connect(self._handle_status_changed)
        filter_row.addWidget(self.status_combo)
        layout.addLayout(filter_row)

        self.table = QTableWidget(0, len(_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(_COLUMNS))
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        layout.addWidget(self.table, stretch=1)

        self.empty_label = QLabel(APPLICATIONS_EMPTY_MESSAGE, self)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

    def _add_stat_card(self, row: QHBoxLayout, title: str) -> QLabel:
        group = QGroupBox(title, self)
        group_layout = QVBoxLayout()
        group.setLayout(group_layout)
        value_label = QLabel("0", group)
        value_label.setStyleSheet(Styles.get_large_label_style())
        group_layout.addWidget(value_label)
        row.addWidget(group)
        return value_label

    # --- Backend actions ---

    def refresh(self) -> None:
        self.refresh_button.setEnabled(False)
        run_in_background(self.manager.refresh, self._on_refreshed, name="RefreshApplications")

    def _on_refreshed(self, loaded: bool) -> None:
        self.refresh_button.setEnabled(True)
        if not loaded:
            show_error(self, "Applications", "Failed to load applications.")
        self._render()

    def _handle_add(self) -> None:
        dialog = ApplicationDialog(parent=self)
        if dialog.exec():
            fields = dialog.get_fields()
            self._run_mutation(lambda: self.manager.create(fields), "Failed to save application.")

    def _handle_edit(self, application: JobApplication) -> None:
        dialog = ApplicationDialog(application, parent=self)
        if dialog.exec():
            fields: ApplicationFields = dialog.get_fields()
            self._run_mutation(
                lambda: self.manager.update(application.id, fields), "Failed to update application."
            )

    def _handle_delete(self, application: JobApplication) -> None:
        # The manager asks for confirmation itself before deleting.
        self._run_mutation(lambda: self.manager.remove(application.id), None)

    def _run_mutation(self, action, failure_message: str | None) -> None:
        def on_done(succeeded: bool) -> None:
            if not succeeded and failure_message:
                show_error(self, "Applications", failure_message)
            self._render()

        def on_error(error: BaseException) -> None:
            if isinstance(error, ValidationError):
                show_warning(self, "Applications", str(error))
            else:
                show_error(self, "Applications", failure_message or str(error))

        run_in_background(action, on_done, on_error, name="ApplicationMutation")

    # --- Filtering ---

    def _handle_search_changed(self, text: str) -> None:
        self.manager.set_search_term(text)
        self._render()

    def _handle_status_changed(self) -> None:
        self.manager.set_status_filter(self.status_combo.currentData() or ALL_STATUSES)
        self._render()

    # --- Rendering ---

    def _render(self) -> None:
        analytics = self.manager.analytics()
        self.total_label.setText(str(analytics.total))
        self.response_label.setText(f"{analytics.response_rate}%")
        self.interview_label.setText(str(analytics.by_status[ApplicationStatus.INTERVIEW]))
        self.offer_label.setText(str(analytics.by_status[ApplicationStatus.OFFER]))

        rows = self.manager.filtered_applications()
        self.table.setRowCount(len(rows))
        for row_index, application in enumerate(rows):
            self.table.setItem(row_index, 0, QTableWidgetItem(application.company))
            self.table.setItem(row_index, 1, QTableWidgetItem(application.location or "—"))
            self.table.setItem(row_index, 2, QTableWidgetItem(application.applied_date.isoformat()))

            badge = QLabel(application.status.value.title(), self.table)
            badge.setStyleSheet(Styles.get_badge_style(_STATUS_BADGES[application.status]))
            self.table.setCellWidget(row_index, 3, badge)
            self.table.setCellWidget(row_index, 4, self._build_row_actions(application))

        if analytics.total == 0:
            self.empty_label.setText(APPLICATIONS_EMPTY_MESSAGE)
        elif not rows:
            self.empty_label.setText(APPLICATIONS_NO_MATCH_MESSAGE)
        self.empty_label.setVisible(not rows)
        self.table.setVisible(bool(rows))

    def _build_row_actions(self, application: JobApplication) -> QWidget:
        container = QWidget(self.table)
        row_layout = QHBoxLayout()
        row_layout.setContentsMargins(2, 0, 2, 0)
        container.setLayout(row_layout)
        edit_button = QPushButton("Edit", container)
        edit_button.clicked.connect(lambda _checked=False, app=application: self._handle_edit(app))
        row_layout.addWidget(edit_button)
        delete_button = QPushButton("Delete", container)
        delete_button.clicked.connect(lambda _checked=False, app=application: self._handle_delete(app))
        row_layout.addWidget(delete_button)
        return container
