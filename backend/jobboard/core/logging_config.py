"""
Root logger setup.

Attaches a single console handler with a timestamped format. Safe to call more
than once: if the root logger already has handlers (uvicorn, pytest) it is left
alone apart from the level.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
