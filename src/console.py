# src/console.py
"""
Terminal frontend - play a match without opening a window
"""
import time
from typing import Callable, Optional
from models import Snapshot, CPU, HUMAN
from engine import Engine

HELP = """
  0-8        place your mark
  j <step>   jump to a history step
  n          new round (same starter)
  s          swap starter and start a new round
  r          reset match (scores and board)
  m          toggle 2 players / vs computer
  h          show this help
  q          quit
"""


def format_board(board) -> str:
    """Render the board; empty cells show their index"""
    rows = []
    for r in range(3):
        cells = [board[r * 3 + c] or str(r * 3 + c) for c in range(3)]
        rows.append(f" {cells[0]} | {cells[1]} | {cells[2]} ")
    return "\n-----------\n".join(rows)


def format_snapshot(snap: Snapshot) -> str:
    sc = snap.scores
    mode = "Vs Computer" if snap.config.mode == CPU else "2 Players"
    lines = [
        "",
        "=" * 40,
        f"Round {snap.round_no}   {mode}   Starter: {snap.config.starter}",
        f"X: {sc.x}   Draw: {sc.draws}   O: {sc.o}",
        "=" * 40,
        format_board(snap.board),
        "",
        f"Step {snap.step}/{snap.history_length - 1}   {snap.status}",
    ]
    return "\n".join(lines)


def handle_command(engine: Engine, raw: str) -> Optional[str]:
    """Turn one input line into an intent. Returns a message for the player, or None on quit."""
    cmd = raw.strip().lower()
    if cmd in ("q", "quit", "exit"):
        return None
    if cmd in ("h", "help", "?"):
        return HELP
    if cmd.isdigit():
        # isdigit also accepts characters like "²" that int() rejects
        return "" if cmd.isdecimal() and engine.apply_move(int(cmd)) else "Invalid move."
    if cmd.startswith("j"):
        arg = cmd[1:].strip()
        if arg.isdecimal() and engine.jump_to(int(arg)):
            return ""
        return "No such step."
    if cmd == "n":
        engine.new_round()
        return "New round."
    if cmd == "s":
        engine.swap_starter()
        return f"Starter is now {engine.config.starter}."
    if cmd == "r":
        engine.reset_match()
        return "Match reset."
    if cmd == "m":
        engine.set_mode(HUMAN if engine.config.mode == CPU else CPU)
        return "Vs Computer" if engine.config.mode == CPU else "2 Players"
    return "Unknown command (h for help)."


def run(engine: Engine, read: Callable[[str], str] = input, sleep: Callable[[float], None] = time.sleep) -> None:
    """Interactive loop. The CPU's thinking time is slept through before each prompt."""
    print("\n╔════════════════════════════════════╗")
    print("║          TIC TAC TOE               ║")
    print("╚════════════════════════════════════╝")
    print(HELP)
    while True:
        while engine.scheduler.is_pending:
            pending = engine.scheduler.pending
            sleep(pending.remaining_seconds)
            engine.tick(pending.remaining_seconds)

        print(format_snapshot(engine.snapshot()))
        try:
            raw = read("\n> ")
        except EOFError:
            raw = "q"
        msg = handle_command(engine, raw)
        if msg is None:
            print("\nGoodbye!")
            return
        if msg:
            print(msg)
