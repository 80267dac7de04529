# src/engine.py
from __future__ import annotations
import random
from typing import Optional
from models import (
    Board, Outcome, Snapshot, MatchConfig, ScoreBoard,
    X, HUMAN, CPU as CPU_MODE, MARKS, MODES, WON, DRAW, DEFAULT_CPU_DELAY, opposite,
)
from board import place, outcome, turn_for
from history import HistoryLog
from scoring import MatchScorer
from scheduler import MoveScheduler, Token
from ai import CPU, NO_MOVE


class Engine:
    """
    Match controller. Frontends only call the intent methods below and read
    snapshot(); every rejected intent returns False and changes nothing.
    """
    def __init__(self, mode: str = HUMAN, starter: str = X, cpu_delay: float = DEFAULT_CPU_DELAY,
                 rng: Optional[random.Random] = None, verbose: bool = False):
        self.config = MatchConfig(
            mode=mode if mode in MODES else HUMAN,
            starter=starter if starter in MARKS else X,
        )
        self.history = HistoryLog()
        self.scorer = MatchScorer()
        self.scheduler = MoveScheduler(cpu_delay)
        self.cpu = CPU(rng=rng)
        self.round_no = 1
        self.verbose = verbose
        self._sync_cpu()

    # ---- derived state ----
    @property
    def board(self) -> Board:
        return self.history.current

    @property
    def step(self) -> int:
        return self.history.step

    @property
    def turn(self) -> str:
        return turn_for(self.config.starter, self.history.step)

    @property
    def outcome(self) -> Outcome:
        return outcome(self.board)

    @property
    def scores(self) -> ScoreBoard:
        return self.scorer.scores

    def is_cpu_turn(self) -> bool:
        return (self.config.mode == CPU_MODE
                and self.turn == self.config.cpu_mark
                and not self.outcome.is_terminal)

    def _token(self) -> Token:
        return (self.round_no, self.history.step, self.board)

    def _log(self, msg: str) -> None:
        if self.verbose:
            print(f"[Engine] {msg}")

    # ---- moves ----
    def apply_move(self, index: int) -> bool:
        """Human intent: place the current mark at `index`."""
        if self.config.mode == CPU_MODE and self.turn != self.config.starter:
            return False
        return self._play(index)

    def _play(self, index: int) -> bool:
        mark = self.turn
        before = self.board
        after = place(before, index, mark)
        if after is before:
            return False

        self.history.append(after)
        result = outcome(after)
        if result.is_terminal and self.scorer.on_round_terminal(result):
            if result.status == WON:
                self._log(f"Round {self.round_no}: {result.winner} wins on {result.line}")
            else:
                self._log(f"Round {self.round_no}: draw")

        self._sync_cpu()
        return True

    def jump_to(self, step: int) -> bool:
        if not self.history.jump_to(step):
            return False
        self._sync_cpu()
        return True

    # ---- lifecycle ----
    def new_round(self, starter: Optional[str] = None) -> bool:
        if starter is not None and starter not in MARKS:
            return False
        self.config.starter = starter or self.config.starter
        self.history.reset()
        self.scorer.new_round()
        self.round_no += 1
        self._sync_cpu()
        return True

    def swap_starter(self) -> bool:
        return self.new_round(opposite(self.config.starter))

    def reset_match(self) -> bool:
        self.scorer.reset()
        return self.new_round(X)

    def set_mode(self, mode: str) -> bool:
        if mode not in MODES:
            return False
        self.config.mode = mode
        self._sync_cpu()
        return True

    # ---- CPU clock ----
    def _sync_cpu(self) -> None:
        """Keep the pending CPU move tied to the position on display."""
        pending = self.scheduler.pending
        cpu_turn = self.is_cpu_turn()
        if pending is not None and (not cpu_turn or pending.token != self._token()):
            self.scheduler.cancel()
            self._log("Dropped stale CPU move.")
        if cpu_turn:
            self.scheduler.schedule(self._token())

    def tick(self, dt: float) -> bool:
        """Advance the thinking clock by `dt` seconds. True when a CPU move landed."""
        due = self.scheduler.tick(dt)
        if due is None:
            return False
        if due.token != self._token() or not self.is_cpu_turn():
            self._log("Dropped stale CPU move.")
            self._sync_cpu()
            return False

        index = self.cpu.choose_move(self.board, self.turn)
        if index == NO_MOVE:
            return False
        self._log(f"CPU ({self.turn}) -> {index}")
        return self._play(index)

    # ---- read-outs ----
    def status_text(self) -> str:
        result = self.outcome
        if result.status == WON:
            return f"Winner: {result.winner}"
        if result.status == DRAW:
            return "Draw"
        text = f"Next: {self.turn}"
        if self.config.mode == CPU_MODE:
            text += " (You)" if self.turn == self.config.starter else " (CPU)"
        return text

    def board_locked(self) -> bool:
        if self.outcome.is_terminal:
            return True
        return self.config.mode == CPU_MODE and self.turn != self.config.starter

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.board,
            turn=self.turn,
            outcome=self.outcome,
            step=self.history.step,
            history_length=len(self.history),
            scores=self.scorer.scores,
            config=self.config.copy(),
            round_no=self.round_no,
            status=self.status_text(),
            history_labels=self.history.labels(),
            is_cpu_turn=self.is_cpu_turn(),
            cpu_pending=self.scheduler.is_pending,
            board_locked=self.board_locked(),
        )
