"""Tests for logging setup."""

from __future__ import annotations

from pathlib import Path
import io
import logging
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT / "src"))

from review_score.utils.logging import get_logger, setup_logging


def test_setup_logging_writes_to_stream_and_file(tmp_path) -> None:
    stream = io.StringIO()
    log_file = tmp_path / "logs" / "score.log"

    root = setup_logging(level="info", log_file=str(log_file), stream=stream)
    get_logger("review_score.test").info("scored 3 items")
    for handler in root.handlers:
        handler.flush()

    assert root.level == logging.INFO
    assert "scored 3 items" in stream.getvalue()
    assert "scored 3 items" in log_file.read_text()

    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def test_unknown_level_falls_back_to_warning() -> None:
    stream = io.StringIO()
    root = setup_logging(level="chatty", format_string="%(message)s", stream=stream)
    get_logger("review_score.test").info("hidden")
    get_logger("review_score.test").warning("shown")

    assert root.level == logging.WARNING
    assert stream.getvalue() == "shown\n"

    root.removeHandler(root.handlers[0])
