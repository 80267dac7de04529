# src/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

Cell = Optional[str]  # None, 'X' or 'O'
Board = Tuple[Cell, ...]
Line = Tuple[int, int, int]

X = "X"
O = "O"
MARKS = (X, O)

HUMAN = "HUMAN"
CPU = "CPU"
MODES = (HUMAN, CPU)

# round status
IN_PROGRESS = "in_progress"
WON = "won"
DRAW = "draw"

BOARD_CELLS = 9
EMPTY_BOARD: Board = (None,) * BOARD_CELLS

DEFAULT_CPU_DELAY = 0.4  # seconds of "thinking" before the CPU plays


def opposite(mark: str) -> str:
    return O if mark == X else X


@dataclass(frozen=True)
class WinResult:
    winner: Optional[str] = None
    line: Optional[Line] = None


@dataclass(frozen=True)
class Outcome:
    status: str = IN_PROGRESS
    winner: Optional[str] = None
    line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != IN_PROGRESS


@dataclass
class ScoreBoard:
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.status == WON:
            if outcome.winner == X:
                self.x += 1
            else:
                self.o += 1
        elif outcome.status == DRAW:
            self.draws += 1

    def copy(self) -> "ScoreBoard":
        return ScoreBoard(self.x, self.o, self.draws)


@dataclass
class MatchConfig:
    mode: str = HUMAN
    starter: str = X

    @property
    def cpu_mark(self) -> Optional[str]:
        # in CPU mode the human always plays the starting mark
        return opposite(self.starter) if self.mode == CPU else None

    def copy(self) -> "MatchConfig":
        return MatchConfig(self.mode, self.starter)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything the frontend needs to draw one frame."""
    board: Board
    turn: str
    outcome: Outcome
    step: int
    history_length: int
    scores: ScoreBoard
    config: MatchConfig
    round_no: int = 1
    status: str = ""
    history_labels: Tuple[str, ...] = field(default_factory=tuple)
    is_cpu_turn: bool = False
    cpu_pending: bool = False
    board_locked: bool = False
