# src/main.py
import random
import sys
from typing import List, Optional
from config import load_settings
from engine import Engine


def build_engine(settings) -> Engine:
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return Engine(
        mode=settings.mode,
        starter=settings.starter,
        cpu_delay=settings.cpu_delay,
        rng=rng,
        verbose=settings.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings(argv)
    engine = build_engine(settings)

    if settings.frontend == "console":
        import console
        console.run(engine)
        return 0

    from ui import UI
    ui = UI(engine, theme=settings.theme, fps=settings.fps)
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
