"""Tests for the command-line interface."""

import pytest
from PIL import Image

from cagen import main as cli
from cagen.automaton import Rule


def run_cli(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


def test_missing_rule(capsys):
    assert run_cli(["info"]) == 1
    assert capsys.readouterr().out.strip() == "Please supply a rule."


def test_non_numeric_rule(capsys):
    assert run_cli(["print", "abc"]) == 1
    assert "Please supply a rule." in capsys.readouterr().out


@pytest.mark.parametrize("rule", ["256", "-1"])
def test_out_of_range_rule(capsys, rule):
    assert run_cli(["info", rule]) == 1
    out = capsys.readouterr().out.strip()
    assert out == f"{rule} is not within the allowed range, please enter a number between 0-255."


def test_no_command_prints_help(capsys):
    assert run_cli([]) == 1
    assert "usage" in capsys.readouterr().out


def test_run_rejects_bad_rule_before_touching_terminal(capsys, monkeypatch):
    import cagen.terminal

    def explode(*args, **kwargs):
        raise AssertionError("terminal should not start")

    monkeypatch.setattr(cagen.terminal, "run_curses", explode)
    assert run_cli(["run", "300"]) == 1


def test_run_wires_options(capsys, monkeypatch, tmp_path):
    import cagen.terminal

    calls = {}

    def fake_run_curses(rule, config=None, stats_path=None):
        calls.update(rule=rule, config=config, stats_path=stats_path)
        return 12

    monkeypatch.setattr(cagen.terminal, "run_curses", fake_run_curses)
    stats = tmp_path / "s.csv"
    cli.main(["run", "110", "--frame-period", "50", "--stats", str(stats)])

    assert calls["rule"] == Rule(110)
    assert calls["config"].frame_period == pytest.approx(0.05)
    assert calls["stats_path"] == stats
    assert "R110: 12 generations scrolled" in capsys.readouterr().out


def test_info(capsys):
    cli.main(["info", "250"])
    out = capsys.readouterr().out
    assert "rule: 250" in out
    assert "bits: 11111010" in out
    assert "Lambda parameter: 0.7500" in out


def test_print_window(capsys):
    cli.main(["print", "250", "--width", "5", "--height", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["  █  ", " █ █ "]


def test_print_extra_steps(capsys):
    cli.main(["print", "30", "--width", "9", "--height", "3", "--steps", "4"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert all(len(line) == 9 for line in lines)


def test_render(capsys, tmp_path):
    out = tmp_path / "r30.png"
    cli.main(["render", "30", "--width", "16", "--height", "8", "--cell-size", "2", "-o", str(out)])
    with Image.open(out) as img:
        assert img.size == (32, 16)
    assert f"Saved: {out}" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["print", "30", "--width", "0"],
        ["print", "30", "--height", "0"],
        ["render", "30", "--width", "0"],
        ["render", "30", "--height", "-3"],
        ["render", "30", "--cell-size", "0"],
        ["print", "30", "--steps", "-1"],
    ],
)
def test_bad_sizes_are_usage_errors(capsys, argv):
    assert run_cli(argv) == 2
    captured = capsys.readouterr()
    assert "Rendering rule" not in captured.out
    assert "usage" in captured.err
