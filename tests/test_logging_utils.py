import json

from sprd import logging_utils
from sprd.board import Board


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", 10)
    logging_utils.get_logger("t").debug(event="x", note="two words", n=3, skip=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=debug ts=")
    assert "event=x" in out and "note=two_words" in out and "n=3" in out
    assert "skip=" not in out
    assert out.endswith("logger=t")


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    logging_utils.log.info(event="y", rows=4)
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["event"] == "y" and rec["rows"] == 4 and rec["level"] == "info"


def test_level_threshold_and_error_stream(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", 30)
    logging_utils.log.info(event="hidden")
    logging_utils.log.error(event="shown")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=shown" in captured.err


def test_board_generation_is_logged(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", 10)
    Board(rows=4, columns=4, players=2, seed=12)
    out = capsys.readouterr().out
    assert "event=board_generated" in out
    assert "seed=12" in out


def test_aborted_repair_is_logged(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", 20)
    Board(rows=1, columns=1, players=1, seed=1)
    out = capsys.readouterr().out
    assert "event=repair_aborted" in out
