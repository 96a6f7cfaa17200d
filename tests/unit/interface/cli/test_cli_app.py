from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process and verifies:
1. Listing and summary output for each presentation flag.
2. Root validation through the argparse error path.
3. Configuration file handling, --dump-config and --mangen.
4. Exit codes on interruption and unexpected failures.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from wdir.domain.config import get_config_path
from wdir.interface.cli.app import _merge_config, main


def _real(path: Path) -> str:
    return os.path.realpath(path)


def run(argv, capsys):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# -----------------------------------------------------------------------------
# LISTING OUTPUT
# -----------------------------------------------------------------------------

def test_default_listing(scenario_tree: Path, capsys) -> None:
    code, out, _ = run(["-r", "-C", str(scenario_tree)], capsys)

    assert code == 0
    assert out.splitlines() == [
        f"<FILE>\t{_real(scenario_tree / 'a.txt')}\t10 bytes",
        f"<FILE>\t{_real(scenario_tree / 'b.txt')}\t20 bytes",
        f"<DIR>\t{_real(scenario_tree / 'sub')}",
        "\t\t2 File(s)\t30 bytes",
        "\t\t1 Dir(s)",
    ]


def test_recursive_listing(scenario_tree: Path, capsys) -> None:
    code, out, _ = run(["-r", "-s", "-C", str(scenario_tree)], capsys)

    assert code == 0
    assert f"<FILE>\t{_real(scenario_tree / 'sub' / 'd.txt')}\t3 bytes" in out.splitlines()
    assert out.endswith("\t\t3 File(s)\t33 bytes\n\t\t1 Dir(s)\n")


def test_bounded_depth(deep_tree: Path, capsys) -> None:
    code, out, _ = run(["-r", "-b", "-d", "1", "-C", str(deep_tree), "*.log"], capsys)

    assert code == 0
    names = [os.path.basename(line.split("\t")[1]) for line in out.splitlines()]
    assert names == ["top.log", "a1.log"]


def test_all_includes_hidden(scenario_tree: Path, capsys) -> None:
    _, out, _ = run(["-r", "-a", "-C", str(scenario_tree)], capsys)
    assert _real(scenario_tree / ".c.txt") in out
    assert "\t\t3 File(s)\t35 bytes" in out


def test_directories_only_pattern(scenario_tree: Path, capsys) -> None:
    _, out, _ = run(["-r", "-C", str(scenario_tree), "*."], capsys)
    assert out.splitlines() == [
        f"<DIR>\t{_real(scenario_tree / 'sub')}",
        "\t\t0 File(s)\t0 bytes",
        "\t\t1 Dir(s)",
    ]


def test_colored_output_by_default(scenario_tree: Path, capsys) -> None:
    _, out, _ = run(["-C", str(scenario_tree)], capsys)
    assert "\x1b[1;32m<FILE>\x1b[0m\t" in out
    assert "\x1b[1;35m<DIR>\x1b[0m\t" in out


def test_quiet_prints_summary_only(scenario_tree: Path, capsys) -> None:
    code, out, _ = run(["-q", "-C", str(scenario_tree)], capsys)
    assert code == 0
    assert out == "\t\t2 File(s)\t30 bytes\n\t\t1 Dir(s)\n"


def test_bare_omits_summary(scenario_tree: Path, capsys) -> None:
    _, out, _ = run(["-r", "-b", "-C", str(scenario_tree)], capsys)
    assert len(out.splitlines()) == 3
    assert "File(s)" not in out


def test_quiet_and_bare_print_nothing(scenario_tree: Path, capsys) -> None:
    code, out, err = run(["-q", "-b", "-C", str(scenario_tree)], capsys)
    assert code == 0
    assert out == ""


# -----------------------------------------------------------------------------
# ROOT VALIDATION
# -----------------------------------------------------------------------------

def test_missing_directory_is_usage_error(tmp_path: Path, capsys) -> None:
    missing = str(tmp_path / "ghost")

    with pytest.raises(SystemExit) as exc_info:
        main(["-C", missing])

    captured = capsys.readouterr()
    assert exc_info.value.code == 2
    assert captured.out == ""
    assert "-C/--directory" in captured.err
    assert missing in captured.err


def test_file_as_directory_is_usage_error(scenario_tree: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["-C", str(scenario_tree / "a.txt")])
    assert exc_info.value.code == 2
    assert "not a readable directory" in capsys.readouterr().err


def test_quiet_bare_still_validates_root(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["-q", "-b", "-C", str(tmp_path / "ghost")])
    assert exc_info.value.code == 2


# -----------------------------------------------------------------------------
# CONFIGURATION
# -----------------------------------------------------------------------------

def _write_user_config(data) -> None:
    path = get_config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)


def test_user_config_applies(scenario_tree: Path, capsys) -> None:
    _write_user_config({"raw": True, "bare": True})
    _, out, _ = run(["-C", str(scenario_tree)], capsys)
    assert "\x1b[" not in out
    assert "File(s)" not in out


def test_recursive_flag_beats_stored_depth(scenario_tree: Path, capsys) -> None:
    _write_user_config({"depth": 0})
    _, out, _ = run(["-r", "-s", "-C", str(scenario_tree)], capsys)
    assert _real(scenario_tree / "sub" / "d.txt") in out
    assert "\t\t3 File(s)\t33 bytes" in out


def test_stored_depth_applies_without_flags(scenario_tree: Path, capsys) -> None:
    _write_user_config({"depth": 1})
    _, out, _ = run(["-r", "-C", str(scenario_tree)], capsys)
    assert _real(scenario_tree / "sub" / "d.txt") in out


def test_explicit_depth_beats_recursive_flag(scenario_tree: Path, capsys) -> None:
    _, out, _ = run(["-r", "-s", "-d", "0", "-C", str(scenario_tree)], capsys)
    assert "d.txt" not in out
    assert "\t\t2 File(s)\t30 bytes" in out


def test_bad_directory_from_config_names_config_file(tmp_path: Path, capsys) -> None:
    missing = str(tmp_path / "ghost")
    _write_user_config({"directory": missing})

    with pytest.raises(SystemExit) as exc_info:
        main([])

    err = capsys.readouterr().err
    assert exc_info.value.code == 2
    assert get_config_path() in err
    assert "-C/--directory" not in err
    assert missing in err


def test_bad_directory_on_command_line_overrides_config_source(
        scenario_tree: Path, tmp_path: Path, capsys
) -> None:
    _write_user_config({"directory": str(scenario_tree)})

    with pytest.raises(SystemExit):
        main(["-C", str(tmp_path / "ghost")])

    assert "argument -C/--directory" in capsys.readouterr().err


def test_use_defaults_ignores_user_config(scenario_tree: Path, capsys) -> None:
    _write_user_config({"bare": True})
    _, out, _ = run(["--use-defaults", "-r", "-C", str(scenario_tree)], capsys)
    assert "File(s)" in out


def test_dump_config(scenario_tree: Path, capsys) -> None:
    code, out, _ = run(["--dump-config", "-s", "-C", str(scenario_tree), "*.txt"], capsys)

    data = json.loads(out)
    assert code == 0
    assert data["pattern"] == "*.txt"
    assert data["recursive"] is True
    assert data["directory"] == str(scenario_tree)


def test_merge_config_skips_unset_values() -> None:
    base = {"pattern": "*.md", "all": True, "depth": None}
    merged = _merge_config(base, {"pattern": None, "depth": 2, "unknown": 1})
    assert merged == {"pattern": "*.md", "all": True, "depth": 2}


# -----------------------------------------------------------------------------
# SUPPLEMENTARY COMMANDS AND FAILURES
# -----------------------------------------------------------------------------

def test_mangen_skips_validation(tmp_path: Path, capsys) -> None:
    code, out, _ = run(["--mangen", "-C", str(tmp_path / "ghost")], capsys)
    assert code == 0
    assert out.startswith(".TH WDIR 1")


def test_keyboard_interrupt_exit_code(scenario_tree: Path, capsys) -> None:
    with patch("wdir.interface.cli.app.iter_matches", side_effect=KeyboardInterrupt):
        code, _, _ = run(["-C", str(scenario_tree)], capsys)
    assert code == 130


def test_unexpected_failure_exit_code(scenario_tree: Path, capsys) -> None:
    with patch("wdir.interface.cli.app.iter_matches", side_effect=RuntimeError("disk on fire")):
        code, _, err = run(["-C", str(scenario_tree)], capsys)
    assert code == 1
    assert "ERROR: disk on fire" in err
