from __future__ import annotations

from models import EMPTY_BOARD, X, O, CPU, HUMAN
from engine import Engine
import console


def scripted(lines):
    it = iter(lines)
    return lambda prompt="": next(it)


def test_format_board_shows_free_indices() -> None:
    text = console.format_board((X,) + EMPTY_BOARD[1:])
    assert text.splitlines()[0] == " X | 1 | 2 "
    assert text.splitlines()[-1] == " 6 | 7 | 8 "


def test_commands_map_to_intents() -> None:
    engine = Engine()
    assert console.handle_command(engine, "4") == ""
    assert engine.board[4] == X
    assert console.handle_command(engine, "4") == "Invalid move."
    assert console.handle_command(engine, "²") == "Invalid move."
    assert console.handle_command(engine, "j 0") == ""
    assert engine.step == 0
    assert console.handle_command(engine, "j 7") == "No such step."
    assert console.handle_command(engine, "j ²") == "No such step."
    assert engine.step == 0
    assert console.handle_command(engine, "s") == "Starter is now O."
    assert engine.board == EMPTY_BOARD
    assert console.handle_command(engine, "m") == "Vs Computer"
    assert engine.config.mode == CPU
    assert console.handle_command(engine, "M") == "2 Players"
    assert engine.config.mode == HUMAN
    assert console.handle_command(engine, "r") == "Match reset."
    assert engine.config.starter == X
    assert console.handle_command(engine, "xyz").startswith("Unknown command")
    assert console.handle_command(engine, "q") is None


def test_run_waits_out_cpu_thinking(capsys) -> None:
    engine = Engine(mode=CPU, cpu_delay=0.4)
    slept = []
    console.run(engine, read=scripted(["0", "q"]), sleep=slept.append)
    assert slept == [0.4]
    assert engine.board[0] == X
    assert engine.board[4] == O
    out = capsys.readouterr().out
    assert "Next: X (You)" in out
    assert "Goodbye!" in out


def test_run_quits_on_eof() -> None:
    def closed(prompt=""):
        raise EOFError

    console.run(Engine(), read=closed, sleep=lambda s: None)
