"""
Tests for the prettier formatter, with subprocess.run replaced.
"""

from __future__ import annotations

import subprocess

from swagger_to_ts.pipeline.config import FormatterConfig
from swagger_to_ts.pipeline.formatters import PrettierFormatter
from swagger_to_ts.pipeline.formatters import prettier_formatter


class FakeRun:
    """Stands in for subprocess.run, answering --version and format calls."""

    def __init__(self, returncode=0, stdout="formatted\n", missing=False):
        self.returncode = returncode
        self.stdout = stdout
        self.missing = missing
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.missing:
            raise FileNotFoundError(cmd[0])
        if "--version" in cmd:
            return subprocess.CompletedProcess(cmd, 0, stdout="3.3.3\n", stderr="")
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout, stderr="boom")


def test_build_command():
    config = FormatterConfig(command=["npx", "prettier"], print_width=100)
    assert PrettierFormatter().build_command(config) == [
        "npx",
        "prettier",
        "--parser",
        "typescript",
        "--single-quote",
        "--print-width",
        "100",
    ]


def test_build_command_double_quotes():
    config = FormatterConfig(single_quote=False)
    assert "--single-quote" not in PrettierFormatter().build_command(config)


def test_format_pipes_code_through_stdin(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(prettier_formatter.subprocess, "run", fake)

    result = PrettierFormatter().format("declare namespace OpenAPI2 {\n}\n", FormatterConfig())

    assert result == "formatted\n"
    cmd, kwargs = fake.calls[-1]
    assert cmd[:3] == ["prettier", "--parser", "typescript"]
    assert kwargs["input"] == "declare namespace OpenAPI2 {\n}\n"


def test_availability_is_checked_once(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(prettier_formatter.subprocess, "run", fake)

    formatter = PrettierFormatter()
    formatter.format("a", FormatterConfig())
    formatter.format("b", FormatterConfig())

    version_calls = [cmd for cmd, _ in fake.calls if "--version" in cmd]
    assert len(version_calls) == 1


def test_missing_formatter_returns_code_unchanged(monkeypatch):
    monkeypatch.setattr(prettier_formatter.subprocess, "run", FakeRun(missing=True))
    assert PrettierFormatter().format("raw\n", FormatterConfig()) == "raw\n"


def test_failing_formatter_returns_code_unchanged(monkeypatch):
    monkeypatch.setattr(prettier_formatter.subprocess, "run", FakeRun(returncode=2))
    assert PrettierFormatter().format("raw\n", FormatterConfig()) == "raw\n"
