"""Tests for the external tool wrappers (openpid_docgen.render)."""

import subprocess

import pytest

from openpid_docgen.render import RenderError, build_site, render_diagram


class _FakeRun:
    def __init__(self, returncode=0, stderr="", write_output=True):
        self.returncode = returncode
        self.stderr = stderr
        self.write_output = write_output
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.write_output and args[1] == "-":
            with open(args[2], "wb") as fh:
                fh.write(b"PNG")
        return subprocess.CompletedProcess(args, self.returncode, "", self.stderr)


class TestRenderDiagram:
    def test_passes_source_on_stdin(self, tmp_path, monkeypatch):
        fake = _FakeRun()
        monkeypatch.setattr(subprocess, "run", fake)
        out = tmp_path / "tx" / "Ping.png"
        render_diagram("vars: {}\n", out)
        args, kwargs = fake.calls[0]
        assert args == ["d2", "-", str(out)]
        assert kwargs["input"] == "vars: {}\n"
        assert kwargs["encoding"] == "utf-8"
        assert out.is_file()

    def test_custom_command(self, tmp_path, monkeypatch):
        fake = _FakeRun()
        monkeypatch.setattr(subprocess, "run", fake)
        render_diagram("x", tmp_path / "a.png", command="/opt/d2")
        assert fake.calls[0][0][0] == "/opt/d2"

    def test_nonzero_exit(self, tmp_path, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeRun(returncode=1, stderr="err: bad syntax"))
        with pytest.raises(RenderError, match="status 1: err: bad syntax"):
            render_diagram("x", tmp_path / "a.png")

    def test_missing_output(self, tmp_path, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeRun(write_output=False))
        with pytest.raises(RenderError, match="did not write"):
            render_diagram("x", tmp_path / "a.png")

    def test_missing_executable(self, tmp_path, monkeypatch):
        def _raise(*args, **kwargs):
            raise FileNotFoundError("d2")

        monkeypatch.setattr(subprocess, "run", _raise)
        with pytest.raises(RenderError, match="not found"):
            render_diagram("x", tmp_path / "a.png")

    def test_render_error_is_oserror(self):
        assert issubclass(RenderError, OSError)

    def test_non_ascii_label(self, tmp_path, monkeypatch):
        fake = _FakeRun()
        monkeypatch.setattr(subprocess, "run", fake)
        render_diagram("0: {\n  explanation: |md temp (°C) |\n}\n", tmp_path / "a.png")
        _, kwargs = fake.calls[0]
        assert kwargs["encoding"] == "utf-8"
        assert "°C" in kwargs["input"]


class TestBuildSite:
    def test_runs_mdbook(self, tmp_path, monkeypatch):
        fake = _FakeRun()
        monkeypatch.setattr(subprocess, "run", fake)
        build_site(tmp_path)
        assert fake.calls[0][0] == ["mdbook", "build", str(tmp_path)]

    def test_failure(self, tmp_path, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeRun(returncode=101))
        with pytest.raises(RenderError, match="'mdbook' exited with status 101"):
            build_site(tmp_path)
