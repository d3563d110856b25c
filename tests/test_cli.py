"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path
import logging
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT / "src"))

from review_score.cli import main


def test_wilson_prints_score(capsys) -> None:
    assert main(["wilson", "314", "341"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0.8872512\n"
    assert captured.err == ""


def test_ordinal_with_conf_option(capsys) -> None:
    assert main(["ordinal", "4", "6", "35", "45", "25", "--conf=.99"]) == 0
    assert capsys.readouterr().out == "3.438576\n"


def test_conf_option_may_precede_counts(capsys) -> None:
    assert main(["wilson", "--conf=.99", "314", "341"]) == 0
    assert capsys.readouterr().out == "0.8746312\n"


def test_digits_option(capsys) -> None:
    assert main(["wilson", "314", "341", "--digits", "3"]) == 0
    assert capsys.readouterr().out == "0.887\n"


def test_no_arguments_prints_usage(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "wilson | ordinal" in out


def test_help_exits_cleanly(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["wilson", "--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "--conf=DECIMAL" in out
    assert "score ordinal 4 6 35 45 25" in out


@pytest.mark.parametrize(
    "argv,fragment",
    [
        (["bayes", "1", "2"], "must be one of"),
        (["wilson", "5", "3"], "equal to or less than"),
        (["wilson", "314", "341", "--conf=1.2"], "--conf"),
        (["ordinal", "4", "x"], "numeric"),
        (["ordinal", "0"], "at least 2"),
        (["wilson", "1", "2", "3", "4"], "Maximum of 3"),
    ],
)
def test_invalid_input_fails_with_message(capsys, argv, fragment) -> None:
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR" in captured.err
    assert fragment in captured.err


def test_conf_alone_is_not_a_scorer(capsys) -> None:
    assert main(["--conf=.9"]) == 1
    assert "must be one of" in capsys.readouterr().err


def test_unknown_option_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["wilson", "1", "2", "--bogus"])
    assert excinfo.value.code == 2


def test_config_file_supplies_defaults(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("scoring:\n  confidence: 0.99\n  digits: 4\n")

    assert main(["wilson", "314", "341", "--config", str(config_path)]) == 0
    assert capsys.readouterr().out == "0.8746\n"


def test_cli_flags_override_config_file(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("scoring:\n  confidence: 0.99\n  digits: 4\n")

    argv = ["wilson", "314", "341", "--conf=.95", "--digits", "7", "--config", str(config_path)]
    assert main(argv) == 0
    assert capsys.readouterr().out == "0.8872512\n"


def test_invalid_config_file_fails(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("scoring:\n  confidence: 2\n")

    assert main(["wilson", "314", "341", "--config", str(config_path)]) == 1
    assert "confidence" in capsys.readouterr().err


def test_debug_logging_goes_to_stderr(capsys) -> None:
    assert main(["wilson", "314", "341", "--log-level", "debug"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0.8872512\n"
    assert "wilson_score" in captured.err


def test_help_as_first_argument(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "usage: score (wilson | ordinal)" in out
    assert "--conf=DECIMAL" in out


def test_config_directory_fails_with_message(tmp_path, capsys) -> None:
    assert main(["wilson", "314", "341", "--config", str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot be read" in captured.err


def test_non_utf8_config_fails_with_message(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_bytes(b"\xff\xfe")

    assert main(["wilson", "314", "341", "--config", str(config_path)]) == 1
    assert "UTF-8" in capsys.readouterr().err


@pytest.mark.parametrize("count", ["-1e3", "-2", "-.5", "-1.5E+2"])
def test_negative_counts_reach_rating_validation(capsys, count) -> None:
    assert main(["ordinal", "4", count, "3"]) == 1
    assert "non-negative" in capsys.readouterr().err


def test_log_file_receives_diagnostics(tmp_path, capsys) -> None:
    log_file = tmp_path / "logs" / "score.log"

    assert main(["wilson", "314", "341", "--log-level", "info", "--log-file", str(log_file)]) == 0
    assert capsys.readouterr().out == "0.8872512\n"

    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    assert "wilson score over 341 ratings" in log_file.read_text()
