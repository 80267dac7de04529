# src/board.py
from __future__ import annotations
from typing import List
from models import (
    Board, Line, WinResult, Outcome, BOARD_CELLS, MARKS,
    IN_PROGRESS, WON, DRAW, opposite,
)

# Canonical order: rows, columns, diagonals
WIN_LINES: List[Line] = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
]


# ---- checks ----
def in_bounds(index) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_CELLS


def evaluate(board: Board) -> WinResult:
    """First completed line in canonical order, or an empty WinResult."""
    for a, b, c in WIN_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return WinResult(winner=board[a], line=(a, b, c))
    return WinResult()


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def empty_cells(board: Board) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def outcome(board: Board) -> Outcome:
    result = evaluate(board)
    if result.winner is not None:
        return Outcome(WON, result.winner, result.line)
    if is_full(board):
        return Outcome(DRAW)
    return Outcome(IN_PROGRESS)


def marks_placed(board: Board) -> int:
    return sum(1 for cell in board if cell is not None)


def turn_for(starter: str, placed: int) -> str:
    """Whose mark goes next after `placed` marks in a round opened by `starter`."""
    return starter if placed % 2 == 0 else opposite(starter)


# ---- moves ----
def place(board: Board, index: int, mark: str) -> Board:
    """Return a new board with `mark` at `index`, or `board` itself when the move is illegal."""
    if mark not in MARKS or not in_bounds(index):
        return board
    if board[index] is not None or outcome(board).is_terminal:
        return board
    cells = list(board)
    cells[index] = mark
    return tuple(cells)
