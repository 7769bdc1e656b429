"""Tests for the openpid-docgen command line."""

import subprocess
from pathlib import Path

from openpid_docgen.cli import build_parser, main

EXAMPLE_SPEC = Path(__file__).resolve().parents[1] / "examples" / "openpid.toml"


def _fake_run(calls):
    def run(args, **kwargs):
        calls.append(list(args))
        if args[1] == "-":
            Path(args[2]).write_bytes(b"PNG")
        return subprocess.CompletedProcess(args, 0, "", "")

    return run


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.spec == Path("openpid.toml")
        assert args.output == Path("outputs")
        assert args.no_build is False


class TestMain:
    def test_generates_book(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", _fake_run(calls))
        out = tmp_path / "out"
        assert main([str(EXAMPLE_SPEC), "-o", str(out), "--d2", "my-d2"]) == 0
        assert (out / "src" / "payloads" / "tx.md").is_file()
        assert calls[0][0] == "my-d2"
        assert calls[-1] == ["mdbook", "build", str(out)]

    def test_no_build(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", _fake_run(calls))
        assert main([str(EXAMPLE_SPEC), "-o", str(tmp_path), "--no-build"]) == 0
        assert all(c[0] == "d2" for c in calls)

    def test_bad_spec_exit_code(self, tmp_path):
        spec = tmp_path / "openpid.toml"
        spec.write_text("not = [valid")
        assert main([str(spec), "-o", str(tmp_path / "out")]) == 1

    def test_render_failure_exit_code(self, tmp_path, monkeypatch):
        def fail(args, **kwargs):
            raise FileNotFoundError(args[0])

        monkeypatch.setattr(subprocess, "run", fail)
        assert main([str(EXAMPLE_SPEC), "-o", str(tmp_path)]) == 1
