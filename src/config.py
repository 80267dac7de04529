# src/config.py
from __future__ import annotations
import argparse
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional
from models import MARKS, MODES, HUMAN, X, DEFAULT_CPU_DELAY

THEMES = ("light", "dark")
FRONTENDS = ("window", "console")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "mode": HUMAN,
    "starter": X,
    "cpu_delay": DEFAULT_CPU_DELAY,
    "seed": None,
    "theme": "light",
    "fps": 60,
    "frontend": "window",
    "verbose": False,
}


@dataclass
class Settings:
    mode: str = DEFAULT_SETTINGS["mode"]
    starter: str = DEFAULT_SETTINGS["starter"]
    cpu_delay: float = DEFAULT_SETTINGS["cpu_delay"]
    seed: Optional[int] = DEFAULT_SETTINGS["seed"]
    theme: str = DEFAULT_SETTINGS["theme"]
    fps: int = DEFAULT_SETTINGS["fps"]
    frontend: str = DEFAULT_SETTINGS["frontend"]
    verbose: bool = DEFAULT_SETTINGS["verbose"]

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _fallback(name: str, value: Any) -> Any:
    default = DEFAULT_SETTINGS[name]
    print(f"[Config] Invalid {name} '{value}', defaulting to '{default}'")
    return default


def normalize(settings: Settings) -> Settings:
    """Replace out-of-range values with defaults instead of failing."""
    mode = str(settings.mode).upper()
    settings.mode = mode if mode in MODES else _fallback("mode", settings.mode)
    starter = str(settings.starter).upper()
    settings.starter = starter if starter in MARKS else _fallback("starter", settings.starter)
    if settings.cpu_delay is None or settings.cpu_delay < 0:
        settings.cpu_delay = _fallback("cpu_delay", settings.cpu_delay)
    if settings.theme not in THEMES:
        settings.theme = _fallback("theme", settings.theme)
    if settings.fps is None or settings.fps <= 0:
        settings.fps = _fallback("fps", settings.fps)
    if settings.frontend not in FRONTENDS:
        settings.frontend = _fallback("frontend", settings.frontend)
    return settings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe", description="3x3 tic-tac-toe: two players or vs the computer.")
    p.add_argument("--mode", default=DEFAULT_SETTINGS["mode"], help="HUMAN or CPU (default: %(default)s)")
    p.add_argument("--starter", default=DEFAULT_SETTINGS["starter"], help="mark that opens the first round (X or O)")
    p.add_argument("--cpu-delay", type=float, default=DEFAULT_SETTINGS["cpu_delay"],
                   help="CPU thinking time in seconds (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None, help="seed the CPU's corner/side picks")
    p.add_argument("--theme", default=DEFAULT_SETTINGS["theme"], help="light or dark")
    p.add_argument("--fps", type=int, default=DEFAULT_SETTINGS["fps"], help=argparse.SUPPRESS)
    p.add_argument("--console", dest="frontend", action="store_const", const="console",
                   default=DEFAULT_SETTINGS["frontend"], help="play in the terminal instead of a window")
    p.add_argument("-v", "--verbose", action="store_true", help="print engine events")
    return p


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)
    return normalize(Settings(
        mode=args.mode,
        starter=args.starter,
        cpu_delay=args.cpu_delay,
        seed=args.seed,
        theme=args.theme,
        fps=args.fps,
        frontend=args.frontend,
        verbose=args.verbose,
    ))
