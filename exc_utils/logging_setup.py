# exc_utils/logging_setup.py
import logging
from typing import Literal

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: Level = "INFO", fmt: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=fmt or "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
