from __future__ import annotations

from models import HUMAN, CPU, X, O, DEFAULT_CPU_DELAY
from config import DEFAULT_SETTINGS, Settings, load_settings, normalize
from main import build_engine
from engine import Engine


def test_defaults() -> None:
    s = load_settings([])
    assert s.as_dict() == DEFAULT_SETTINGS
    assert s.mode == HUMAN
    assert s.starter == X


def test_flags_are_parsed_case_insensitively() -> None:
    s = load_settings(["--mode", "cpu", "--starter", "o", "--seed", "3",
                       "--cpu-delay", "0.1", "--theme", "dark", "--console", "-v"])
    assert s.mode == CPU
    assert s.starter == O
    assert s.seed == 3
    assert s.cpu_delay == 0.1
    assert s.theme == "dark"
    assert s.frontend == "console"
    assert s.verbose


def test_invalid_values_fall_back_to_defaults(capsys) -> None:
    s = normalize(Settings(mode="robot", starter="Z", cpu_delay=-2, theme="neon", fps=0))
    assert s.mode == DEFAULT_SETTINGS["mode"]
    assert s.starter == DEFAULT_SETTINGS["starter"]
    assert s.cpu_delay == DEFAULT_SETTINGS["cpu_delay"]
    assert s.theme == DEFAULT_SETTINGS["theme"]
    assert s.fps == DEFAULT_SETTINGS["fps"]
    out = capsys.readouterr().out
    assert "[Config] Invalid mode 'robot'" in out
    assert "[Config] Invalid theme 'neon'" in out


def test_build_engine_applies_settings() -> None:
    engine = build_engine(load_settings(["--mode", "CPU", "--starter", "O", "--cpu-delay", "0"]))
    assert engine.config.mode == CPU
    assert engine.config.starter == O
    assert engine.scheduler.delay == 0.0


def test_seed_makes_cpu_reproducible() -> None:
    picks = []
    for _ in range(2):
        engine = build_engine(load_settings(["--mode", "CPU", "--cpu-delay", "0", "--seed", "11"]))
        engine.apply_move(4)  # CPU must go to a random corner
        engine.tick(0)
        picks.append(engine.board)
    assert picks[0] == picks[1]


def test_default_delay_is_shared_with_engine() -> None:
    assert DEFAULT_SETTINGS["cpu_delay"] == DEFAULT_CPU_DELAY
    assert Engine().scheduler.delay == DEFAULT_CPU_DELAY
