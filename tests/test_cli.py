"""Tests for ssr.cli module."""

from __future__ import annotations

import json
import shutil

import pytest

from ssr.cli import build_parser, main
from ssr.digits import to_text


def _write(path, data) -> str:
    path.write_text(json.dumps(data))
    return str(path)


class TestMain:
    def test_bundled_examples(self, examples_dir, capsys):
        files = [str(examples_dir / "testcase1.json"), str(examples_dir / "testcase2.json")]
        assert main(files) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Constant term for testcase1: 3",
            "Constant term for testcase2: 1000000007",
        ]

    def test_default_files(self, examples_dir, tmp_path, monkeypatch, capsys):
        for name in ("testcase1.json", "testcase2.json"):
            shutil.copy(examples_dir / name, tmp_path / name)
        monkeypatch.chdir(tmp_path)
        assert main([]) == 0
        assert "Constant term for testcase2: 1000000007" in capsys.readouterr().out

    def test_insufficient_points(self, tmp_path, capsys):
        path = _write(tmp_path / "short.json", {
            "keys": {"n": 2, "k": 3},
            "1": {"base": "10", "value": "1"},
            "2": {"base": "10", "value": "4"},
        })
        assert main([path]) == 1
        assert "Input error: Not enough points" in capsys.readouterr().err

    def test_non_integral(self, tmp_path, capsys):
        path = _write(tmp_path / "half.json", {
            "keys": {"n": 3, "k": 2},
            "1": {"base": "10", "value": "0"},
            "3": {"base": "10", "value": "1"},
        })
        assert main([path]) == 1
        assert "Math error:" in capsys.readouterr().err

    def test_continues_after_failure(self, tmp_path, examples_dir, capsys):
        missing = str(tmp_path / "absent.json")
        good = str(examples_dir / "testcase1.json")
        assert main([missing, good]) == 1
        captured = capsys.readouterr()
        assert "Input error: Error reading" in captured.err
        assert "Constant term for testcase1: 3" in captured.out

    def test_undecodable_file_then_good_file(self, tmp_path, examples_dir, capsys):
        binary = tmp_path / "binary.json"
        binary.write_bytes(b"\xff\xfe\x00")
        good = str(examples_dir / "testcase1.json")
        assert main([str(binary), good]) == 1
        captured = capsys.readouterr()
        assert "Input error: Error reading" in captured.err
        assert "Constant term for testcase1: 3" in captured.out

    def test_repeated_share_index_is_math_error(self, tmp_path, capsys):
        path = tmp_path / "repeated.json"
        path.write_text(
            '{"keys": {"n": 3, "k": 3},'
            ' "1": {"base": "10", "value": "1"},'
            ' "2": {"base": "10", "value": "4"},'
            ' "2": {"base": "10", "value": "5"},'
            ' "3": {"base": "10", "value": "9"}}'
        )
        assert main([str(path)]) == 1
        assert "Math error: Duplicate abscissa x=2" in capsys.readouterr().err

    def test_secret_past_digit_limit(self, tmp_path, capsys):
        path = _write(tmp_path / "big.json", {
            "keys": {"n": 1, "k": 1},
            "1": {"base": "2", "value": "1" * 20000},
        })
        assert main([path]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["Constant term for big: " + to_text(2**20000 - 1)]

    def test_strict(self, examples_dir, capsys):
        assert main(["--strict", str(examples_dir / "testcase1.json")]) == 1
        assert "share 4: entry is missing" in capsys.readouterr().err

    def test_selection_flag(self, tmp_path, capsys):
        path = _write(tmp_path / "corrupt.json", {
            "keys": {"n": 4, "k": 3},
            "1": {"base": "10", "value": "1"},
            "2": {"base": "10", "value": "4"},
            "3": {"base": "10", "value": "9"},
            "4": {"base": "10", "value": "100"},
        })
        assert main(["--selection", "input", path]) == 0
        assert "Constant term for corrupt: 0" in capsys.readouterr().out


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.files == ["testcase1.json", "testcase2.json"]
        assert args.selection == "ascending"
        assert not args.strict

    def test_verbose_and_quiet_conflict(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["-v", "-q", "a.json"])
        assert exc.value.code == 2

    def test_unknown_selection(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--selection", "random"])
