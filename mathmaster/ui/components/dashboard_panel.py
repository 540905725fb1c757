"""Component for the dashboard: registration, point tools and the leaderboard."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mathmaster.constants.about import SESSION_SUBTITLE
from mathmaster.constants.quiz_constants import BATCH_QUICK_POINTS, INDIVIDUAL_QUICK_POINTS
from mathmaster.constants.ui_constants import (
    BATCH_SELECTED_TEMPLATE,
    BATCH_TITLE,
    CATEGORY_BUTTON_LABELS,
    EMPTY_SELECTION_HINT,
    EVALUATING_LABEL,
    LEADERBOARD_EMPTY,
    LEADERBOARD_TITLE,
    LEADERBOARD_TOTAL_TEMPLATE,
    MANUAL_POINTS_APPLY,
    MANUAL_POINTS_PLACEHOLDER,
    REGISTER_PLACEHOLDER,
    REGISTER_TITLE,
    SELECTION_MODE_OFF,
    SELECTION_MODE_ON,
    START_ACTIVITY_LABEL,
)
from mathmaster.core.classroom_manager import ClassroomManager
from mathmaster.core.models import DiagnosticCategory
from mathmaster.core.services.scoring_ledger import LeaderboardRow
from mathmaster.styling.color_palette import ColorPalette, Theme
from mathmaster.styling.styles import Styles

_RANK_MARKERS = {1: "👑", 2: "🥈", 3: "🥉"}


class DashboardPanel(QWidget):
    """UI component for managing the roster outside of a quiz."""

    def __init__(
        self,
        manager: ClassroomManager,
        on_start_diagnostic: Callable[[DiagnosticCategory], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.manager = manager
        self.on_start_diagnostic = on_start_diagnostic

        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        self.controls_stack = QStackedWidget(self)
        self.controls_stack.addWidget(self._build_individual_controls())
        self.controls_stack.addWidget(self._build_batch_controls())
        layout.addWidget(self.controls_stack, stretch=1)

        layout.addWidget(self._build_leaderboard(), stretch=2)

    def _build_individual_controls(self) -> QWidget:
        container = QWidget(self)
        column = QVBoxLayout()
        container.setLayout(column)

        register_group = QGroupBox(REGISTER_TITLE, container)
        register_row = QHBoxLayout()
        register_group.setLayout(register_row)
        self.name_input = QLineEdit(register_group)
        self.name_input.setPlaceholderText(REGISTER_PLACEHOLDER)
        self.name_input.returnPressed.connect(self._handle_add_student)
        register_row.addWidget(self.name_input, stretch=1)
        add_button = QPushButton("+", register_group)
        add_button.clicked.connect(self._handle_add_student)
        register_row.addWidget(add_button)
        column.addWidget(register_group)

        self.student_group = QGroupBox(container)
        student_layout = QVBoxLayout()
        self.student_group.setLayout(student_layout)

        header_row = QHBoxLayout()
        self.focused_avatar = QLabel(self.student_group)
        self.focused_avatar.setAlignment(Qt.AlignCenter)
        header_row.addWidget(self.focused_avatar)
        self.focused_name_label = QLabel(self.student_group)
        self.focused_name_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.focused_name_label, stretch=1)
        student_layout.addLayout(header_row)

        quick_row = QHBoxLayout()
        for points in INDIVIDUAL_QUICK_POINTS:
            button = QPushButton(f"{points:+d}", self.student_group)
            button.clicked.connect(lambda _=False, p=points: self._adjust_focused(p))
            quick_row.addWidget(button)
        student_layout.addLayout(quick_row)

        manual_row = QHBoxLayout()
        self.individual_points_input = QLineEdit(self.student_group)
        self.individual_points_input.setPlaceholderText(MANUAL_POINTS_PLACEHOLDER)
        manual_row.addWidget(self.individual_points_input, stretch=1)
        ok_button = QPushButton("OK", self.student_group)
        ok_button.clicked.connect(self._handle_individual_manual_points)
        manual_row.addWidget(ok_button)
        student_layout.addLayout(manual_row)

        student_layout.addWidget(QLabel(START_ACTIVITY_LABEL, self.student_group))
        for category in DiagnosticCategory:
            button = QPushButton(CATEGORY_BUTTON_LABELS[category.name], self.student_group)
            button.clicked.connect(lambda _=False, c=category: self.on_start_diagnostic(c))
            student_layout.addWidget(button)
        column.addWidget(self.student_group)

        self.empty_hint_label = QLabel(EMPTY_SELECTION_HINT, container)
        self.empty_hint_label.setWordWrap(True)
        self.empty_hint_label.setAlignment(Qt.AlignCenter)
        column.addWidget(self.empty_hint_label)
        column.addStretch()
        return container

    def _build_batch_controls(self) -> QWidget:
        group = QGroupBox(BATCH_TITLE, self)
        column = QVBoxLayout()
        group.setLayout(column)

        self.selected_count_label = QLabel(BATCH_SELECTED_TEMPLATE.format(count=0), group)
        column.addWidget(self.selected_count_label)

        quick_row = QHBoxLayout()
        for points in BATCH_QUICK_POINTS:
            button = QPushButton(f"{points:+d} pts", group)
            button.clicked.connect(lambda _=False, p=points: self._adjust_selected(p))
            quick_row.addWidget(button)
        column.addLayout(quick_row)

        manual_row = QHBoxLayout()
        self.batch_points_input = QLineEdit(group)
        self.batch_points_input.setPlaceholderText(MANUAL_POINTS_PLACEHOLDER)
        manual_row.addWidget(self.batch_points_input, stretch=1)
        self.batch_apply_button = QPushButton(MANUAL_POINTS_APPLY, group)
        self.batch_apply_button.clicked.connect(self._handle_batch_manual_points)
        manual_row.addWidget(self.batch_apply_button)
        column.addLayout(manual_row)
        column.addStretch()
        return group

    def _build_leaderboard(self) -> QWidget:
        group = QGroupBox(LEADERBOARD_TITLE, self)
        column = QVBoxLayout()
        group.setLayout(column)

        header_row = QHBoxLayout()
        subtitle = QLabel(SESSION_SUBTITLE, group)
        subtitle.setStyleSheet(f"color: {ColorPalette.TEXT_SECONDARY.get(Theme.LIGHT)};")
        header_row.addWidget(subtitle, stretch=1)
        self.selection_toggle = QPushButton(SELECTION_MODE_OFF, group)
        self.selection_toggle.setCheckable(True)
        self.selection_toggle.clicked.connect(self._handle_toggle_selection_mode)
        header_row.addWidget(self.selection_toggle)
        self.total_label = QLabel(LEADERBOARD_TOTAL_TEMPLATE.format(count=0), group)
        header_row.addWidget(self.total_label)
        column.addLayout(header_row)

        self.leaderboard_list = QListWidget(group)
        self.leaderboard_list.itemClicked.connect(self._handle_row_clicked)
        column.addWidget(self.leaderboard_list, stretch=1)

        self.leaderboard_empty_label = QLabel(LEADERBOARD_EMPTY, group)
        self.leaderboard_empty_label.setAlignment(Qt.AlignCenter)
        column.addWidget(self.leaderboard_empty_label)
        return group

    # --- Handlers ---

    def _handle_add_student(self) -> None:
        if self.manager.add_student(self.name_input.text()) is not None:
            self.name_input.clear()
            self.refresh()

    def _handle_toggle_selection_mode(self) -> None:
        self.manager.toggle_selection_mode()
        self.refresh()

    def _handle_row_clicked(self, item: QListWidgetItem) -> None:
        student_id = item.data(Qt.UserRole)
        if student_id:
            self.manager.handle_student_click(student_id)
            self.refresh()

    def _adjust_focused(self, points: int) -> None:
        student = self.manager.get_focused_student()
        if student is not None:
            self.manager.adjust_score([student.id], points)
            self.refresh()

    def _adjust_selected(self, points: int) -> None:
        self.manager.adjust_score(self.manager.get_selected_ids(), points)
        self.refresh()

    def _handle_individual_manual_points(self) -> None:
        student = self.manager.get_focused_student()
        if student is None:
            return
        if self.manager.apply_points_input([student.id], self.individual_points_input.text()):
            self.individual_points_input.clear()
            self.refresh()

    def _handle_batch_manual_points(self) -> None:
        if self.manager.apply_points_input(
            self.manager.get_selected_ids(), self.batch_points_input.text()
        ):
            self.batch_points_input.clear()
            self.refresh()

    # --- Rendering ---

    def refresh(self) -> None:
        selection_mode = self.manager.is_selection_mode()
        self.controls_stack.setCurrentIndex(1 if selection_mode else 0)
        self.selection_toggle.setChecked(selection_mode)
        self.selection_toggle.setText(SELECTION_MODE_ON if selection_mode else SELECTION_MODE_OFF)

        selected = self.manager.get_selected_ids()
        self.selected_count_label.setText(BATCH_SELECTED_TEMPLATE.format(count=len(selected)))
        self.batch_apply_button.setEnabled(bool(selected))

        focused = self.manager.get_focused_student()
        self.student_group.setVisible(focused is not None)
        self.empty_hint_label.setVisible(focused is None)
        if focused is not None:
            self.focused_avatar.setText(focused.initials)
            self.focused_avatar.setStyleSheet(Styles.get_avatar_style(focused.avatar_seed, 56))
            self.focused_name_label.setText(f"{EVALUATING_LABEL} {focused.name}")

        self._render_leaderboard(self.manager.get_leaderboard())

    def _render_leaderboard(self, rows: list[LeaderboardRow]) -> None:
        self.leaderboard_list.clear()
        for row in rows:
            item = QListWidgetItem(self.leaderboard_list)
            item.setData(Qt.UserRole, row.student_id)
            row_widget = self._build_row_widget(row)
            item.setSizeHint(row_widget.sizeHint())
            self.leaderboard_list.setItemWidget(item, row_widget)

        self.total_label.setText(LEADERBOARD_TOTAL_TEMPLATE.format(count=len(rows)))
        self.leaderboard_empty_label.setVisible(not rows)

    def _build_row_widget(self, row: LeaderboardRow) -> QWidget:
        widget = QWidget()
        layout = QHBoxLayout()
        widget.setLayout(layout)

        if self.manager.is_student_highlighted(row.student_id):
            highlight = (
                ColorPalette.SELECTION if self.manager.is_selection_mode() else ColorPalette.ACCENT_PRIMARY
            )
            widget.setStyleSheet(f"border-left: 4px solid {highlight.get(Theme.LIGHT)};")

        layout.addWidget(QLabel(f"#{row.rank} {_RANK_MARKERS.get(row.rank, '')}".rstrip(), widget))
        avatar = QLabel(row.initials, widget)
        avatar.setAlignment(Qt.AlignCenter)
        avatar.setStyleSheet(Styles.get_avatar_style(row.avatar_seed))
        layout.addWidget(avatar)

        name_text = row.name
        if row.titles:
            name_text += "  " + " · ".join(row.titles)
        layout.addWidget(QLabel(name_text, widget), stretch=1)

        score_label = QLabel(f"{row.score} pts", widget)
        score_label.setStyleSheet(
            f"font-size: 16pt; font-weight: 900; color: {ColorPalette.ACCENT_PRIMARY.get(Theme.LIGHT)};"
        )
        layout.addWidget(score_label)
        return widget
