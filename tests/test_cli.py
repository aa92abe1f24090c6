"""CLI-level tests for the faultdemo entry point."""

import json
from pathlib import Path

import pytest

import faultdemo
from core.demonstrator import BANNER


@pytest.fixture
def config_file(workdir, config):
    """Write the deterministic test config to a file and return its path."""
    path = workdir / 'test-config.json'
    config.save_config(path)
    return path


def _lines(out):
    return [line for line in out.splitlines() if line.strip()]


def test_main_full_run_output(config_file, capsys):
    faultdemo.main(['--config', str(config_file)])
    lines = _lines(capsys.readouterr().out)

    assert lines[0] == BANNER
    assert len(lines) == 14
    labels = [line.split(' caught: ')[0] for line in lines if ' caught: ' in line]
    assert labels == [
        'IOFailure', 'FileNotFound', 'EndOfStream', 'DatabaseFailure',
        'ClassResolutionFailure', 'ArithmeticFault', 'NullReferenceFault',
        'BoundsFault', 'TypeCastFault', 'InvalidArgumentFault', 'NumericFormatFault',
    ]
    assert lines.count('IOFailure demonstration completed') == 1
    assert lines.count('EndOfStream demonstration completed') == 1


def test_main_without_arguments_in_clean_directory(workdir, capsys):
    """Default config: nothing to connect to, nothing to read, exit code 0."""
    faultdemo.main([])
    lines = _lines(capsys.readouterr().out)

    assert lines[0] == BANNER
    assert len(lines) == 1 + 11 + 2
    assert lines[3].startswith("FileNotFound caught: [Errno 2] No such file or directory")
    assert 'nonexistent.txt' in lines[3]
    assert lines[4] == "EndOfStream caught: Expected 4 bytes, got 0"
    assert lines[-1] == "NumericFormatFault caught: invalid literal for int() with base 10: 'abc'"
    assert (workdir / 'test.dat').exists()
    assert list((workdir / 'logs').glob('faultdemo-*.log'))


def test_main_writes_log_file(config_file, config, capsys):
    faultdemo.main(['--config', str(config_file)])
    capsys.readouterr()

    log_files = list(Path(config.log_folder).glob('faultdemo-*.log'))
    assert len(log_files) == 1
    text = log_files[0].read_text()
    assert "faultdemo started" in text
    assert "divide-by-zero: ArithmeticFault caught" in text
    assert "faultdemo completed successfully" in text


def test_no_log_skips_log_folder(config_file, config, capsys):
    faultdemo.main(['--config', str(config_file), '--no-log'])
    capsys.readouterr()
    assert not Path(config.log_folder).exists()


def test_list_prints_names_and_exits_zero(workdir, capsys):
    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--list', '--no-log'])
    out = capsys.readouterr().out.split()
    assert exc.value.code == 0
    assert out[0] == 'restricted-write'
    assert out[-1] == 'malformed-numeric-parse'
    assert len(out) == 11


def test_only_runs_selected_scenarios(config_file, capsys):
    faultdemo.main(['--config', str(config_file), '--no-log',
                    '--only', 'malformed-numeric-parse', '--only', 'divide-by-zero'])
    lines = _lines(capsys.readouterr().out)
    assert lines[0] == BANNER
    assert lines[1].startswith('ArithmeticFault caught: ')
    assert lines[2].startswith('NumericFormatFault caught: ')
    assert len(lines) == 3


def test_only_unknown_scenario_exits_two(config_file, capsys):
    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(config_file), '--no-log', '--only', 'bogus'])
    captured = capsys.readouterr()
    assert exc.value.code == 2
    assert "Unknown scenario: bogus" in captured.err
    assert captured.out == ""


def test_json_output_is_parseable(config_file, capsys):
    faultdemo.main(['--config', str(config_file), '--no-log', '--json'])
    payload = json.loads(capsys.readouterr().out)

    assert payload["banner"] == BANNER
    assert payload["counts"]["reports"] == 11
    assert payload["counts"]["notes"] == 2
    assert payload["counts"]["io"] == 3
    assert payload["reports"][5] == {
        "scenario": "divide-by-zero",
        "kind": "ArithmeticFault",
        "message": "integer division or modulo by zero",
    }


def test_missing_config_path_exits_two(workdir, capsys):
    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(workdir / 'nope.json'), '--no-log'])
    assert exc.value.code == 2
    assert "Config file not found" in capsys.readouterr().err


def test_default_config_file_is_picked_up(workdir, capsys):
    (workdir / 'config_files').mkdir()
    (workdir / 'config_files' / 'config.json').write_text(
        json.dumps({'missing_file_path': 'absent-from-default-config.txt'}), encoding='utf-8')

    faultdemo.main(['--no-log', '--only', 'missing-file-read'])
    assert 'absent-from-default-config.txt' in capsys.readouterr().out


def test_unhandled_fault_exits_one(config_file, capsys, monkeypatch):
    def explode(self):
        raise RuntimeError("scenario bug")

    monkeypatch.setattr(faultdemo.FaultDemonstrator, 'divide_by_zero', explode)

    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(config_file), '--no-log'])

    captured = capsys.readouterr()
    assert exc.value.code == 1
    assert "Unhandled fault" in captured.err
    assert "RuntimeError: scenario bug" in captured.err
    # Scenarios before the broken one already reported
    assert 'ClassResolutionFailure caught: ' in captured.out
    assert 'NullReferenceFault' not in captured.out


def test_keyboard_interrupt_exits_zero(config_file, capsys, monkeypatch):
    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(faultdemo.FaultDemonstrator, 'run_all', interrupt)

    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(config_file), '--no-log'])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert "interrupted by user" in captured.err
    assert captured.out == ""


def test_log_setup_failure_exits_one(config_file, capsys, monkeypatch):
    def fail(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(faultdemo, 'setup_logging', fail)

    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(config_file)])
    assert exc.value.code == 1
    assert "Could not set up logging" in capsys.readouterr().err


def test_json_output_survives_unhandled_fault(config_file, capsys, monkeypatch):
    """Reports collected before an escaped fault are still written as JSON."""
    def explode(self):
        raise RuntimeError("scenario bug")

    monkeypatch.setattr(faultdemo.FaultDemonstrator, 'divide_by_zero', explode)

    with pytest.raises(SystemExit) as exc:
        faultdemo.main(['--config', str(config_file), '--no-log', '--json'])

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert exc.value.code == 1
    assert payload["counts"]["reports"] == 5
    assert payload["reports"][-1]["kind"] == "ClassResolutionFailure"
    assert "RuntimeError: scenario bug" in captured.err
