"""Terminal interface for Bracket Schedule.

Runs either as an interactive prompt with autocomplete, or as a one-shot
command when a subcommand is given on the command line.
"""

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
import shlex
import sys
from typing import Callable, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from bracketschedule import APP_NAME, APP_VERSION
from bracketschedule.constants import (
    ALL_GAME_IDS,
    DAY_3,
    DAYS,
    FILTER_ALL,
    SIDE_A,
    SIDE_B,
    TIME_SLOTS,
)
from bracketschedule.controllers import GameView, ScheduleController, ScoreEditResult
from bracketschedule.engine.builder import build_bracket
from bracketschedule.exceptions import BracketScheduleException
from bracketschedule.ledger import HttpScoreLedger, InMemoryScoreLedger, ScoreLedger
from bracketschedule.models.config import BracketConfig, load_config
from bracketschedule.utils import set_verbose, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "schedule": {
        "description": "Show games, optionally filtered by day and time slot",
        "options": {
            "--day": "Day to show (1, 2, 3 or All)",
            "--time": "Time slot to show (Morning, Evening or All)",
        },
    },
    "score": {
        "description": "Record the final score of a game",
        "options": {"<game> <a> <b>": "Game id and both scores, e.g. D1G1 10 3"},
    },
    "enter": {
        "description": "Type into one score box (saved once both sides differ)",
        "options": {"<game> <side> <digits>": "Game id, side a or b, and the score"},
    },
    "locks": {"description": "Show which days are open for scoring", "options": {}},
    "bracket": {"description": "Show the Day 3 bracket and champion", "options": {}},
    "refresh": {"description": "Fetch the latest scores", "options": {}},
    "reset": {"description": "Clear every score (editors only)", "options": {}},
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner(controller: ScheduleController):
    """Print the application banner."""
    mode = "editor" if controller.can_edit else "read-only"
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}{APP_NAME} {APP_VERSION}{Colors.ENDC} "
        f"({mode}, {controller.ledger!r})\n"
        f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:10}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:25}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    game_ids = WordCompleter(list(ALL_GAME_IDS))
    completions: Dict[str, Optional[object]] = {}
    for cmd, info in COMMANDS.items():
        completions[cmd] = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
    completions["score"] = game_ids
    completions["enter"] = game_ids
    completions["help"] = WordCompleter(list(COMMANDS.keys()))
    return NestedCompleter.from_nested_dict(completions)


# ========== Argument Types ==========


def day_arg(value: str) -> str:
    """Accept ``1``, ``day1``, ``Day 1`` or ``all`` for a day filter."""
    text = value.strip().lower().replace(" ", "")
    if text == FILTER_ALL.lower():
        return FILTER_ALL
    for day in DAYS:
        if text in (day.lower().replace(" ", ""), day[-1]):
            return day
    raise argparse.ArgumentTypeError(f"Unknown day: {value}")


def time_arg(value: str) -> str:
    text = value.strip().lower()
    for slot in (FILTER_ALL,) + TIME_SLOTS:
        if text == slot.lower():
            return slot
    raise argparse.ArgumentTypeError(f"Unknown time slot: {value}")


def side_arg(value: str) -> str:
    text = value.strip().lower()
    if text not in (SIDE_A, SIDE_B):
        raise argparse.ArgumentTypeError(f"Side must be {SIDE_A} or {SIDE_B}")
    return text


# ========== Output ==========


def format_game(view: GameView) -> str:
    game = view.game
    title = game.label or game.id
    a = view.score.a.display or "-"
    b = view.score.b.display or "-"
    line = (
        f"{game.id:6} {game.kickoff:>8}  {title:18} "
        f"{view.team_a} {Colors.BOLD}{a}{Colors.ENDC} - "
        f"{Colors.BOLD}{b}{Colors.ENDC} {view.team_b}"
    )
    if view.winner:
        line += f"  {Colors.OKGREEN}-> {view.winner}{Colors.ENDC}"
    if view.locked:
        line += f"  {Colors.WARNING}(locked){Colors.ENDC}"
    return line


def print_schedule(
    controller: ScheduleController,
    day: Optional[str] = None,
    time_slot: Optional[str] = None,
) -> None:
    gate = controller.day_gate
    views = controller.game_views(day, time_slot)
    shown_days = [d for d in DAYS if any(v.game.day == d for v in views)]
    for shown_day in shown_days:
        print(f"\n{Colors.BOLD}{Colors.HEADER}{shown_day}{Colors.ENDC}")
        notice = gate.lock_notice(shown_day)
        if notice:
            print(f"{Colors.WARNING}{notice}{Colors.ENDC}")
        for view in views:
            if view.game.day == shown_day:
                print(f"  {view.game.time_slot:8} {format_game(view)}")
    if not views:
        print("No games match this filter.")
    print()


def print_locks(controller: ScheduleController) -> None:
    gate = controller.day_gate
    for day in DAYS:
        if gate.is_locked(day):
            print(f"  {day}: {Colors.WARNING}locked{Colors.ENDC} - {gate.lock_notice(day)}")
        else:
            state = "complete" if gate.complete[day] else "open"
            print(f"  {day}: {Colors.OKGREEN}{state}{Colors.ENDC}")
    print(f"  Phase: {gate.phase.name.replace('_', ' ').title()}")


def print_bracket(controller: ScheduleController) -> None:
    if not controller.shows_bracket():
        print(f"{Colors.WARNING}{controller.day_gate.lock_notice(DAY_3)}{Colors.ENDC}")
        return
    for view in controller.game_views(DAY_3):
        print(f"  {format_game(view)}")
    champion = controller.champion
    if champion:
        print(f"\n  {Colors.BOLD}{Colors.OKGREEN}Champion: {champion}{Colors.ENDC}")


def report(result: ScoreEditResult, saved_message: str = "Saved.") -> int:
    """Print the outcome of an edit and return an exit code."""
    if result.warning:
        print(f"{Colors.WARNING}{result.warning}{Colors.ENDC}")
    if not result.success:
        print(f"{Colors.FAIL}{result.error_message}{Colors.ENDC}")
        return 1
    if result.saved:
        print(f"{Colors.OKGREEN}{saved_message}{Colors.ENDC}")
    else:
        print("Waiting for the other score.")
    return 0


# ========== Commands ==========


def run_schedule_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    print_schedule(controller, args.day, args.time)
    return 0


def run_score_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    return report(controller.submit_score(args.game, args.a, args.b))


def run_enter_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    return report(controller.enter_score(args.game, args.side, args.digits))


def run_locks_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    print_locks(controller)
    return 0


def run_bracket_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    print_bracket(controller)
    return 0


def run_refresh_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    result = controller.refresh()
    if not result.success:
        print(f"{Colors.WARNING}{result.warning}{Colors.ENDC}")
        return 1
    print(f"Fetched {len(controller.snapshot.scores)} scores.")
    return 0


def run_reset_command(controller: ScheduleController, args: argparse.Namespace) -> int:
    return report(controller.reset(), saved_message="All scores cleared.")


def add_command_arguments(name: str, parser: argparse.ArgumentParser) -> None:
    """Add the positional/optional arguments of one command to a parser."""
    if name == "schedule":
        parser.add_argument("--day", type=day_arg, default=FILTER_ALL)
        parser.add_argument("--time", type=time_arg, default=FILTER_ALL)
    elif name == "score":
        parser.add_argument("game")
        parser.add_argument("a", type=int)
        parser.add_argument("b", type=int)
    elif name == "enter":
        parser.add_argument("game")
        parser.add_argument("side", type=side_arg)
        parser.add_argument("digits", nargs="?", default="")


COMMAND_HANDLERS: Dict[str, Callable[[ScheduleController, argparse.Namespace], int]] = {
    "schedule": run_schedule_command,
    "score": run_score_command,
    "enter": run_enter_command,
    "locks": run_locks_command,
    "bracket": run_bracket_command,
    "refresh": run_refresh_command,
    "reset": run_reset_command,
}


def create_command_parser(name: str) -> argparse.ArgumentParser:
    """Create parser for one command typed at the interactive prompt."""
    parser = argparse.ArgumentParser(prog=name, description=COMMANDS[name]["description"])
    add_command_arguments(name, parser)
    return parser


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="bracket-schedule",
        description=f"{APP_NAME}: 16-team, three-day knockout schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode with a local ledger file
  bracket-schedule --ledger-file scores.json

  # Show Day 1 morning games
  bracket-schedule --config bracket.json schedule --day 1 --time morning

  # Record a score on the shared score service
  bracket-schedule --remote http://localhost:8000 --token secret score D1G1 10 3
        """,
    )
    parser.add_argument("--config", help="Bracket config file (JSON)")
    parser.add_argument("--remote", help="Score service URL")
    parser.add_argument("--token", help="Bearer token for the score service")
    parser.add_argument("--ledger-file", help="JSON file for the local ledger")
    parser.add_argument(
        "--read-only", action="store_true", help="Open the local ledger read-only"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for name, handler in COMMAND_HANDLERS.items():
        sub = subparsers.add_parser(name, help=COMMANDS[name]["description"])
        add_command_arguments(name, sub)
        sub.set_defaults(func=handler)
    return parser


def create_ledger(args: argparse.Namespace) -> ScoreLedger:
    if args.remote:
        return HttpScoreLedger(args.remote, token=args.token)
    return InMemoryScoreLedger(
        can_edit=not args.read_only, path=args.ledger_file, game_ids=ALL_GAME_IDS
    )


def create_controller(args: argparse.Namespace) -> ScheduleController:
    """Build the bracket and ledger described by the global options."""
    config = load_config(args.config) if args.config else BracketConfig()
    controller = ScheduleController(build_bracket(config=config), create_ledger(args))
    result = controller.refresh()
    if not result.success:
        print(f"{Colors.WARNING}{result.warning}{Colors.ENDC}")
    return controller


# ========== Modes ==========


def execute_line(controller: ScheduleController, user_input: str) -> bool:
    """Run one line typed at the prompt. Returns False when the user exits."""
    try:
        parts = shlex.split(user_input)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True
    if not parts:
        return True

    command, args_list = parts[0].lower(), parts[1:]
    if command in ("exit", "quit", "q"):
        return False
    if command in ("help", "?"):
        if args_list:
            print_command_help(args_list[0])
        else:
            print_commands_list()
        return True
    if command not in COMMAND_HANDLERS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return True

    try:
        args = create_command_parser(command).parse_args(args_list)
        COMMAND_HANDLERS[command](controller, args)
    except SystemExit:
        # argparse calls sys.exit on error, catch it
        pass
    except BracketScheduleException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command execution failed", exc_info=True)
    return True


def run_interactive_mode(controller: ScheduleController) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner(controller)

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("bracket> ").strip()
            if not execute_line(controller, user_input):
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the bracket-schedule CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    try:
        controller = create_controller(args)
    except BracketScheduleException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 2

    if args.command is None or args.interactive:
        return run_interactive_mode(controller)
    return args.func(controller, args)
