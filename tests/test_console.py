import argparse

import pytest

from bracketschedule.console.cli import (
    create_main_parser,
    day_arg,
    execute_line,
    main,
    side_arg,
    time_arg,
)
from bracketschedule.constants import DAY_1, DAY_3, EVENING, FILTER_ALL, LOCK_NOTICES


@pytest.fixture
def ledger_args(tmp_path):
    return ["--ledger-file", str(tmp_path / "scores.json")]


@pytest.mark.parametrize("value", ["1", "day1", "Day 1", "DAY 1"])
def test_day_arg(value):
    assert day_arg(value) == DAY_1


def test_filter_args():
    assert day_arg("all") == FILTER_ALL
    assert day_arg("3") == DAY_3
    assert time_arg("evening") == EVENING
    assert side_arg("B") == "b"
    with pytest.raises(argparse.ArgumentTypeError):
        day_arg("4")
    with pytest.raises(argparse.ArgumentTypeError):
        time_arg("noon")


def test_main_parser_subcommands():
    args = create_main_parser().parse_args(
        ["--remote", "http://x", "schedule", "--day", "2", "--time", "morning"]
    )
    assert args.remote == "http://x"
    assert (args.command, args.day, args.time) == ("schedule", "Day 2", "Morning")


def test_score_then_schedule(ledger_args, capsys):
    assert main(ledger_args + ["score", "D1G1", "10", "3"]) == 0
    assert "Saved." in capsys.readouterr().out

    assert main(ledger_args + ["schedule", "--day", "1", "--time", "morning"]) == 0
    out = capsys.readouterr().out
    assert "-> Team 1" in out
    assert "D1G5" not in out


def test_tied_score_fails(ledger_args, capsys):
    assert main(ledger_args + ["score", "D1G1", "4", "4"]) == 1
    assert "No ties allowed" in capsys.readouterr().out


def test_read_only_ledger(ledger_args, capsys):
    assert main(ledger_args + ["--read-only", "enter", "D1G1", "a", "5"]) == 1
    assert "Not allowed" in capsys.readouterr().out


def test_locks_and_bracket_before_day1(ledger_args, capsys):
    main(ledger_args + ["locks"])
    assert LOCK_NOTICES["Day 2"] in capsys.readouterr().out

    main(ledger_args + ["bracket"])
    assert LOCK_NOTICES[DAY_3] in capsys.readouterr().out


def test_bad_config_exits_with_error(tmp_path, capsys):
    config = tmp_path / "bracket.json"
    config.write_text('{"day1MorningStart": "25:00"}')
    assert main(["--config", str(config), "locks"]) == 2
    assert "Invalid start time" in capsys.readouterr().err


def test_execute_line(controller, capsys):
    assert execute_line(controller, "enter D1G1 a 7")
    assert "Waiting for the other score." in capsys.readouterr().out

    assert execute_line(controller, "enter D1G1 b 2")
    assert "Saved." in capsys.readouterr().out
    assert controller.winner_of("D1G1") == "Team 1"

    assert execute_line(controller, 'schedule --day "Day 2"')
    assert "Team 1" in capsys.readouterr().out

    assert execute_line(controller, "frobnicate")
    assert "Unknown command" in capsys.readouterr().out

    # argparse errors are swallowed at the prompt
    assert execute_line(controller, "score D1G2 ten 3")
    assert not execute_line(controller, "exit")
