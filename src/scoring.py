# src/scoring.py
from __future__ import annotations
from models import Outcome, ScoreBoard


class MatchScorer:
    """Tallies round results across a match. Each round is counted at most once."""
    def __init__(self):
        self._scores = ScoreBoard()
        self.scored = False  # consumed by new_round()

    @property
    def scores(self) -> ScoreBoard:
        return self._scores.copy()

    def on_round_terminal(self, outcome: Outcome) -> bool:
        if self.scored or not outcome.is_terminal:
            return False
        self._scores.record(outcome)
        self.scored = True
        return True

    def new_round(self) -> None:
        self.scored = False

    def reset(self) -> None:
        self._scores = ScoreBoard()
        self.scored = False
