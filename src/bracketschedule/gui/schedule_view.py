# Bracket Schedule
# Copyright (C) 2025  Bracket Schedule developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Optional

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from bracketschedule.constants import (
    DAY_3,
    DAYS,
    FILTER_ALL,
    SIDE_A,
    SIDE_B,
    TIME_SLOTS,
)
from bracketschedule.controllers import GameView, ScheduleController
from bracketschedule.utils import setup_logger

logger = setup_logger(__name__)

COLUMNS = ["Game", "Time", "Court", "Team A", "Score", "Score", "Team B", "Winner"]
COL_SCORE_A = 4
COL_SCORE_B = 5


class ScoreInput(QtWidgets.QLineEdit):
    """Score box that only accepts digits and reports when editing ends."""

    score_edited = pyqtSignal(str, str, str)  # game_id, side, text

    def __init__(self, game_id: str, side: str, parent=None):
        super().__init__(parent)
        self.game_id = game_id
        self.side = side
        self.setProperty("class", "ScoreInput")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMaximumWidth(60)
        self.setValidator(
            QtGui.QRegularExpressionValidator(QtCore.QRegularExpression(r"\d*"), self)
        )
        self.editingFinished.connect(self._emit_edit)

    def _emit_edit(self):
        if self.isModified():
            self.setModified(False)
            self.score_edited.emit(self.game_id, self.side, self.text())


class BracketPanel(QtWidgets.QGroupBox):
    """Day 3 semifinals, final and champion."""

    def __init__(self, parent=None):
        super().__init__("Day 3 Bracket", parent)
        self.setProperty("class", "BracketPanel")
        self.layout_ = QtWidgets.QVBoxLayout(self)
        self.layout_.setSpacing(6)
        self.game_labels: List[QtWidgets.QLabel] = []
        self.lbl_champion = QtWidgets.QLabel()
        self.lbl_champion.setProperty("class", "ChampionLabel")
        font = self.lbl_champion.font()
        font.setBold(True)
        self.lbl_champion.setFont(font)

    def display(self, views: List[GameView], champion: Optional[str]):
        for label in self.game_labels:
            self.layout_.removeWidget(label)
            label.deleteLater()
        self.game_labels = []
        self.layout_.removeWidget(self.lbl_champion)

        for view in views:
            score = ""
            if view.score.a.entered or view.score.b.entered:
                score = f"  ({view.score.a.display or '-'} - {view.score.b.display or '-'})"
            label = QtWidgets.QLabel(
                f"{view.game.label or view.game.id}: {view.team_a} vs {view.team_b}{score}"
            )
            self.layout_.addWidget(label)
            self.game_labels.append(label)

        self.lbl_champion.setText(f"Champion: {champion}" if champion else "Champion: TBD")
        self.layout_.addWidget(self.lbl_champion)


class ScheduleView(QtWidgets.QWidget):
    """
    Widget showing the filtered schedule with score entry.

    It only draws what the controller computes; every edit is handed back
    to the controller through ``score_edited``.
    """

    score_edited = pyqtSignal(str, str, str)

    def __init__(self, controller: ScheduleController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setProperty("class", "ScheduleView")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        # ===== FILTERS =====
        filters = QtWidgets.QHBoxLayout()
        filters.addWidget(QtWidgets.QLabel("Day:"))
        self.combo_day = QtWidgets.QComboBox()
        self.combo_day.addItems([FILTER_ALL, *DAYS])
        filters.addWidget(self.combo_day)
        filters.addWidget(QtWidgets.QLabel("Time:"))
        self.combo_time = QtWidgets.QComboBox()
        self.combo_time.addItems([FILTER_ALL, *TIME_SLOTS])
        filters.addWidget(self.combo_time)
        filters.addStretch()
        layout.addLayout(filters)

        self.combo_day.currentTextChanged.connect(self.refresh_view)
        self.combo_time.currentTextChanged.connect(self.refresh_view)

        # ===== LOCK NOTICE =====
        self.lbl_lock_notice = QtWidgets.QLabel()
        self.lbl_lock_notice.setProperty("class", "LockNotice")
        self.lbl_lock_notice.setWordWrap(True)
        self.lbl_lock_notice.hide()
        layout.addWidget(self.lbl_lock_notice)

        # ===== GAMES TABLE =====
        self.table = QtWidgets.QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setProperty("class", "GamesTable")
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(
            QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows
        )
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(3, QtWidgets.QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(6, QtWidgets.QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self.table, 1)

        # ===== BRACKET =====
        self.bracket_panel = BracketPanel()
        self.bracket_panel.hide()
        layout.addWidget(self.bracket_panel)

    @property
    def day_filter(self) -> str:
        return self.combo_day.currentText()

    @property
    def time_filter(self) -> str:
        return self.combo_time.currentText()

    def _lock_notices(self) -> List[str]:
        gate = self.controller.day_gate
        days = DAYS if self.day_filter == FILTER_ALL else (self.day_filter,)
        return [notice for notice in (gate.lock_notice(d) for d in days) if notice]

    def _read_only_item(self, text: str) -> QtWidgets.QTableWidgetItem:
        item = QtWidgets.QTableWidgetItem(text)
        item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
        return item

    def refresh_view(self):
        """Redraw everything from the controller's current state."""
        views = self.controller.game_views(self.day_filter, self.time_filter)

        notices = self._lock_notices()
        self.lbl_lock_notice.setText("\n".join(notices))
        self.lbl_lock_notice.setVisible(bool(notices))

        self.table.clearContents()
        self.table.setRowCount(len(views))
        for row, view in enumerate(views):
            game = view.game
            self.table.setItem(row, 0, self._read_only_item(game.label or game.id))
            self.table.setItem(
                row, 1, self._read_only_item(f"{game.day} {game.kickoff}")
            )
            self.table.setItem(row, 2, self._read_only_item(game.court))
            self.table.setItem(row, 3, self._read_only_item(view.team_a))
            self.table.setItem(row, 6, self._read_only_item(view.team_b))
            self.table.setItem(row, 7, self._read_only_item(view.winner or ""))

            for col, side in ((COL_SCORE_A, SIDE_A), (COL_SCORE_B, SIDE_B)):
                box = ScoreInput(game.id, side)
                box.setText(view.score.entry(side).display)
                box.setEnabled(view.editable)
                if view.locked:
                    box.setToolTip(self.controller.day_gate.lock_notice(game.day))
                box.score_edited.connect(self.score_edited.emit)
                self.table.setCellWidget(row, col, box)

        show_bracket = self.controller.shows_bracket(self.day_filter)
        if show_bracket:
            self.bracket_panel.display(
                self.controller.game_views(DAY_3), self.controller.champion
            )
        self.bracket_panel.setVisible(show_bracket)
