"""Tests for the demo entry point."""

import contextlib
import logging

import pytest

from stark_algebra.main import build_arg_parser, main


@contextlib.contextmanager
def preserved_root_logger():
    """Undo the handlers and level ``main`` installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)


@pytest.fixture(autouse=True)
def restore_root_logger():
    with preserved_root_logger():
        yield


def test_sum_demo(capsys):
    assert main(["--demo", "sum"]) == 0
    out = capsys.readouterr().out
    assert "sum is FieldElement(22, mod 3221225473)" in out


def test_field_demo(capsys):
    assert main(["--demo", "field"]) == 0
    out = capsys.readouterr().out
    assert "new_element(-317544001) = 2903681472" in out
    assert "10^(-1) = 966367642" in out
    assert "2^30 * 3 + 1 = 0" in out


def test_polynomial_demo(capsys):
    assert main(["-d", "polynomial"]) == 0
    out = capsys.readouterr().out
    assert "p + q = 3 + 5x + 7x^2 + 5x^3 + 6x^4" in out
    assert "quotient * p + remainder == q: True" in out
    assert "p(x + 1) = 6 + 8x + 3x^2" in out
    assert "Recovered p: True" in out


def test_all_demos_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "sum is" in out
    assert "FIELD ARITHMETIC" in out
    assert "POLYNOMIAL ARITHMETIC" in out


def test_verbose_emits_debug_records(caplog):
    with caplog.at_level(logging.DEBUG, logger="stark_algebra"):
        main(["--demo", "polynomial", "--verbose"])
    assert any("Interpolating 4 points" in r.getMessage() for r in caplog.records)


def test_unknown_demo_is_rejected():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["--demo", "nope"])


def test_root_logger_is_restored_after_main():
    root = logging.getLogger()
    before, level = root.handlers[:], root.level
    with preserved_root_logger():
        main(["--demo", "sum", "--verbose"])
        main(["--demo", "sum"])
    assert root.handlers == before
    assert root.level == level
