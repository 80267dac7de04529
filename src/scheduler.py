# src/scheduler.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from models import Board

# (round_no, step, board) the move was scheduled against
Token = Tuple[int, int, Board]


@dataclass
class PendingMove:
    token: Token
    remaining_seconds: float


class MoveScheduler:
    """
    Holds at most one deferred CPU move. Time only moves when the frame loop
    calls tick(dt); there are no threads or timers.
    """
    def __init__(self, delay: float = 0.4):
        self.delay = max(0.0, float(delay))
        self.pending: Optional[PendingMove] = None

    @property
    def is_pending(self) -> bool:
        return self.pending is not None

    def schedule(self, token: Token) -> None:
        # same position already waiting: keep its clock running
        if self.pending is not None and self.pending.token == token:
            return
        self.pending = PendingMove(token=token, remaining_seconds=self.delay)

    def cancel(self) -> Optional[PendingMove]:
        pm, self.pending = self.pending, None
        return pm

    def tick(self, dt: float) -> Optional[PendingMove]:
        """Advance the clock; hand back the pending move once its delay has elapsed."""
        if self.pending is None:
            return None
        self.pending.remaining_seconds -= max(0.0, dt)
        if self.pending.remaining_seconds > 0:
            return None
        return self.cancel()
