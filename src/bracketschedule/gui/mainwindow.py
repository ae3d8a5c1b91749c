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

import argparse
import sys
from typing import List, Optional

from PyQt6 import QtGui, QtWidgets

from bracketschedule import APP_NAME, APP_VERSION
from bracketschedule.constants import ALL_GAME_IDS
from bracketschedule.controllers import ScheduleController, ScoreEditResult
from bracketschedule.engine.builder import build_bracket
from bracketschedule.exceptions import BracketScheduleException
from bracketschedule.gui.schedule_view import ScheduleView
from bracketschedule.ledger import HttpScoreLedger, InMemoryScoreLedger
from bracketschedule.models.config import BracketConfig, load_config
from bracketschedule.utils import set_verbose, setup_logger

logger = setup_logger(__name__)


class ScheduleWindow(QtWidgets.QMainWindow):
    """Main application window for Bracket Schedule."""

    def __init__(self, controller: ScheduleController) -> None:
        super().__init__()
        self.controller = controller
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1100, 760)

        self.schedule_view = ScheduleView(self.controller, self)
        self.schedule_view.score_edited.connect(self.on_score_edited)
        self.setCentralWidget(self.schedule_view)

        self._setup_toolbar()
        logger.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_toolbar(self):
        toolbar = self.addToolBar("Scores")
        toolbar.setMovable(False)

        self.action_refresh = QtGui.QAction("Refresh", self)
        self.action_refresh.setToolTip("Fetch the latest scores")
        self.action_refresh.triggered.connect(self.refresh)
        toolbar.addAction(self.action_refresh)

        self.action_reset = QtGui.QAction("Reset Scores", self)
        self.action_reset.setToolTip("Clear every score and lock Days 2 and 3")
        self.action_reset.triggered.connect(self.confirm_reset)
        toolbar.addAction(self.action_reset)

        self.action_login = QtGui.QAction("Login", self)
        self.action_login.setToolTip("Enter an access token for the score service")
        self.action_login.triggered.connect(self.prompt_login)
        self.action_login.setVisible(isinstance(self.controller.ledger, HttpScoreLedger))
        toolbar.addAction(self.action_login)

    def _update_ui_state(self):
        can_edit = self.controller.can_edit
        self.action_reset.setEnabled(can_edit)
        champion = self.controller.champion
        status = "Admin: scores can be edited" if can_edit else "Read-only: scores cannot be edited"
        if champion:
            status += f" | Champion: {champion}"
        self.statusBar().showMessage(status)

    def refresh(self):
        result = self.controller.refresh()
        self.schedule_view.refresh_view()
        self._update_ui_state()
        if not result.success:
            self.statusBar().showMessage(f"Scores unavailable: {result.warning}")

    def _show_result(self, result: ScoreEditResult):
        self.schedule_view.refresh_view()
        self._update_ui_state()
        if not result.success:
            QtWidgets.QMessageBox.warning(self, "Score Not Saved", result.error_message)
        elif result.warning:
            self.statusBar().showMessage(result.warning)

    def on_score_edited(self, game_id: str, side: str, text: str):
        self._show_result(self.controller.enter_score(game_id, side, text))

    def confirm_reset(self):
        reply = QtWidgets.QMessageBox.question(
            self,
            "Reset Scores",
            "Clear every score? Days 2 and 3 will lock again.",
            QtWidgets.QMessageBox.StandardButton.Yes
            | QtWidgets.QMessageBox.StandardButton.No,
        )
        if reply == QtWidgets.QMessageBox.StandardButton.Yes:
            self._show_result(self.controller.reset())

    def prompt_login(self):
        ledger = self.controller.ledger
        if not isinstance(ledger, HttpScoreLedger):
            return
        token, ok = QtWidgets.QInputDialog.getText(
            self,
            "Login",
            "Access token (leave empty to log out):",
            QtWidgets.QLineEdit.EchoMode.Password,
        )
        if ok:
            ledger.set_token(token.strip() or None)
            self.refresh()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bracket-schedule-gui", description=APP_NAME)
    parser.add_argument("--config", help="Bracket config file (JSON)")
    parser.add_argument("--remote", help="Score service URL")
    parser.add_argument("--token", help="Bearer token for the score service")
    parser.add_argument("--ledger-file", help="JSON file for the local ledger")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``bracket-schedule-gui``."""
    args = create_parser().parse_args(argv)
    set_verbose(args.verbose)

    app = QtWidgets.QApplication(sys.argv[:1])
    try:
        config = load_config(args.config) if args.config else BracketConfig()
        bracket = build_bracket(config=config)
        if args.remote:
            ledger = HttpScoreLedger(args.remote, token=args.token)
        else:
            ledger = InMemoryScoreLedger(path=args.ledger_file, game_ids=ALL_GAME_IDS)
    except BracketScheduleException as e:
        QtWidgets.QMessageBox.critical(None, APP_NAME, str(e))
        return 2

    window = ScheduleWindow(ScheduleController(bracket, ledger))
    window.show()
    return app.exec()
