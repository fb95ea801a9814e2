# tests/test_demo.py
from __future__ import annotations

import io
import json
import logging
from types import SimpleNamespace

import pytest

from string_helpers import demo
from string_helpers.utils import log as LOG


@pytest.fixture(autouse=True)
def _reset_topics(monkeypatch):
    monkeypatch.delenv("STRING_HELPERS_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    LOG.reload_topics()
    logger = logging.getLogger(demo.PACKAGE_LOGGER)
    if demo._debug_handler is not None:
        logger.removeHandler(demo._debug_handler)
        demo._debug_handler = None
    logger.setLevel(logging.NOTSET)


def _run(capsys, *argv):
    demo.main(list(argv))
    return json.loads(capsys.readouterr().out)


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["palindrome", "A man, a plan, a canal: Panama"], True),
        (["count", "a", "banana"], 3),
        (["reverse", "hello"], "olleh"),
        (["split-any", ",! a", "big,!a brown,cow!"], ["big", "brown", "cow"]),
        (["split-keep", ",", "hello,world,here"], ["hello,", "world,"]),
        (["split-n", " ", "5", "This is a string."], ["This", "is", "a", "string.", ""]),
        (["preset", "markup", "<b>x</b>"], ["b", "x", "b"]),
    ],
)
def test_demo_commands(capsys, argv, expected):
    assert _run(capsys, *argv) == expected


def test_demo_reads_stdin_when_text_missing(capsys, monkeypatch):
    monkeypatch.setattr(demo.sys, "stdin", SimpleNamespace(buffer=io.BytesIO("été".encode())))
    assert _run(capsys, "count", "é") == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["count", "ab", "banana"],               # not a single character
        ["split-n", ",", "-1", "a,b"],           # negative n
        ["preset", "missing", "a b"],            # unknown preset
    ],
)
def test_demo_errors_exit_with_status_1(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        demo.main(argv)
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_demo_malformed_stdin_is_reported(capsys, monkeypatch):
    monkeypatch.setattr(demo.sys, "stdin", SimpleNamespace(buffer=io.BytesIO(b"\xff\xfe")))
    with pytest.raises(SystemExit):
        demo.main(["reverse"])
    assert "not valid utf-8" in capsys.readouterr().err


def test_demo_debug_flag_enables_cli_topic(capsys):
    demo.main(["--debug", "reverse", "abc"])
    captured = capsys.readouterr()
    assert json.loads(captured.out) == "cba"
    assert "[cli][DEBUG] command=reverse" in captured.err


def test_demo_debug_flag_routes_module_logging_to_stderr(capsys):
    demo.main(["--debug", "split-n", " ", "2", "a b c"])
    captured = capsys.readouterr()
    assert json.loads(captured.out) == ["a", "b c"]
    assert "string_helpers.text.split.split_core DEBUG split_into_n_parts: merging 3 → 2" in captured.err


def test_demo_without_debug_keeps_module_logging_quiet(capsys):
    demo.main(["split-n", " ", "2", "a b c"])
    assert "split_into_n_parts" not in capsys.readouterr().err


def test_demo_unknown_preset_message_is_not_quoted(capsys):
    with pytest.raises(SystemExit):
        demo.main(["preset", "missing", "a b"])
    assert capsys.readouterr().err.startswith("Error: Unknown delimiter preset 'missing'")
