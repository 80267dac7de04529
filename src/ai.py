# src/ai.py
from __future__ import annotations
import random
from typing import List, Optional
from models import Board, X, O, opposite
from board import WIN_LINES, empty_cells

NO_MOVE = -1

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


class CPU:
    """
    Heuristic opponent. Fixed priority, no search:
      1. win now
      2. block the opponent's win
      3. center
      4. random free corner
      5. random free side
    Pass `rng` (a random.Random) to make the corner/side picks reproducible.
    """
    def __init__(self, piece: str = O, rng: Optional[random.Random] = None):
        assert piece in {X, O}
        self.cpu_piece = piece
        self.rng = rng or random.Random()

    # ---- public ------------------------------------------------------------
    def choose_move(self, board: Board, piece: Optional[str] = None) -> int:
        me = piece or self.cpu_piece
        if not empty_cells(board):
            return NO_MOVE

        # Tactics first: win in 1, block in 1
        win_now = find_winning_move(board, me)
        if win_now != NO_MOVE:
            return win_now
        block_now = find_winning_move(board, opposite(me))
        if block_now != NO_MOVE:
            return block_now

        if board[CENTER] is None:
            return CENTER

        corners = free_of(board, CORNERS)
        if corners:
            return self.rng.choice(corners)

        sides = free_of(board, SIDES)
        if sides:
            return self.rng.choice(sides)
        return NO_MOVE


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def find_winning_move(board: Board, piece: str) -> int:
    """Empty cell completing a line that already holds two `piece`, first in canonical order."""
    for line in WIN_LINES:
        held = sum(1 for i in line if board[i] == piece)
        empties = [i for i in line if board[i] is None]
        if held == 2 and len(empties) == 1:
            return empties[0]
    return NO_MOVE


def free_of(board: Board, cells) -> List[int]:
    return [i for i in cells if board[i] is None]


def select_move(board: Board, piece: str, rng: Optional[random.Random] = None) -> int:
    return CPU(piece, rng).choose_move(board)
