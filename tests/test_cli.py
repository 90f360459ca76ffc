import importlib
import json
import sys

import pytest


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if 'run' in sys.modules:
        del sys.modules['run']
    return importlib.import_module('run')


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(['--version'])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert 'SPRD Map Generator' in out


def test_default_command_is_generate(run_module):
    ns = run_module.parse_args([])
    assert ns.command == 'generate'
    assert (ns.rows, ns.columns, ns.players) == (10, 10, 2)
    assert ns.compress is True


def test_generate_prints_compressed_board(run_module, capsys):
    code = run_module.main(['generate', '--rows', '6', '--columns', '6', '--players', '3', '--seed', '5'])
    assert code == 0
    out = capsys.readouterr().out
    rows = json.loads(out)
    assert len(rows) == 6
    assert all(len(cell) <= 9 for line in rows for cell in line)
    owners = [cell[0] for line in rows for cell in line if cell]
    assert sorted(o for o in owners if o) == [1, 2, 3]


def test_generate_pretty_uncompressed(run_module, capsys):
    code = run_module.main(['generate', '--rows', '3', '--columns', '3', '--seed', '1', '--no-compress', '--pretty'])
    assert code == 0
    out = capsys.readouterr().out
    rows = json.loads(out)
    assert all(len(cell) == 9 for line in rows for cell in line)


def test_invalid_tunable_reports_error(run_module, capsys):
    code = run_module.main(['generate', '--hole-chance', '500'])
    assert code == 2
    assert 'hole_chance' in capsys.readouterr().err


def test_stats_summarizes_runs(run_module, capsys):
    code = run_module.main(['stats', '--rows', '6', '--columns', '6', '--runs', '5', '--seed', '10'])
    assert code == 0
    out = capsys.readouterr().out
    assert 'Runs:' in out
    assert 'holes_punched' in out
    assert 'players_seated' in out


def test_generate_stdout_is_pure_json_when_logging(run_module, capsys, monkeypatch):
    from sprd import logging_utils

    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", 10)
    # A single cell always aborts repair, which logs at warn level
    code = run_module.main(['generate', '--rows', '1', '--columns', '1', '--players', '1', '--seed', '1'])
    assert code == 0
    captured = capsys.readouterr()
    assert len(json.loads(captured.out)) == 1
    assert "event=repair_aborted" in captured.err
    assert "event=board_generated" in captured.err
