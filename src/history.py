# src/history.py
from __future__ import annotations
from typing import List, Tuple
from models import Board, EMPTY_BOARD


class HistoryLog:
    """
    Board snapshots of one round. Entry 0 is the empty board, entry n the board
    after n marks. `step` points at the snapshot currently on display.

    Appending from a rewound step drops everything after it (branch and
    overwrite, no tree).
    """
    def __init__(self):
        self.boards: List[Board] = [EMPTY_BOARD]
        self.step = 0

    def __len__(self) -> int:
        return len(self.boards)

    @property
    def current(self) -> Board:
        return self.boards[self.step]

    def reset(self) -> None:
        self.boards = [EMPTY_BOARD]
        self.step = 0

    def append(self, board: Board) -> None:
        self.boards = self.boards[: self.step + 1]
        self.boards.append(board)
        self.step = len(self.boards) - 1

    def jump_to(self, step: int) -> bool:
        if not isinstance(step, int) or isinstance(step, bool):
            return False
        if not (0 <= step < len(self.boards)):
            return False
        self.step = step
        return True

    def labels(self) -> Tuple[str, ...]:
        return tuple("Go to move #%d" % n if n else "Go to start" for n in range(len(self.boards)))
