"""Landing page with the feature overview and shortcuts into each mode."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from devops_prep.constants.ui_constants import (
    MODE_BUTTON_APPLICATIONS,
    MODE_BUTTON_INTERVIEW,
    MODE_BUTTON_QUIZ,
)
from devops_prep.core.models import HomepageContent
from devops_prep.styling.styles import Styles

_SECTION_TITLES = {
    "quiz": MODE_BUTTON_QUIZ,
    "interview": MODE_BUTTON_INTERVIEW,
    "applications": MODE_BUTTON_APPLICATIONS,
}


class HomePanel(QWidget):
    """Shows homepage content; each feature card opens the matching mode."""

    def __init__(
        self,
        on_open_section: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_open_section = on_open_section
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel("", self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label.setWordWrap(True)
        self.subtitle_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.subtitle_label)

        self.features_row = QHBoxLayout()
        layout.addLayout(self.features_row, stretch=1)

        self.stats_row = QHBoxLayout()
        layout.addLayout(self.stats_row)

    def set_content(self, content: HomepageContent) -> None:
        self.title_label.setText(content.title)
        self.subtitle_label.setText(content.subtitle)
        _clear_layout(self.features_row)
        _clear_layout(self.stats_row)

        for section, title in _SECTION_TITLES.items():
            group = QGroupBox(title, self)
            group_layout = QVBoxLayout()
            group.setLayout(group_layout)
            for bullet in content.features.get(section, ()):
                bullet_label = QLabel(f"• {bullet.text}", group)
                bullet_label.setWordWrap(True)
                group_layout.addWidget(bullet_label)
            group_layout.addStretch()
            open_button = QPushButton(f"Open {title}", group)
            open_button.setProperty("primary", True)
            open_button.clicked.connect(lambda _checked=False, name=section: self.on_open_section(name))
            group_layout.addWidget(open_button)
            self.features_row.addWidget(group)

        for stat in content.stats:
            stat_label = QLabel(f"<b>{stat.value}</b><br/>{stat.label}", self)
            stat_label.setAlignment(Qt.AlignCenter)
            self.stats_row.addWidget(stat_label)


def _clear_layout(layout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()
