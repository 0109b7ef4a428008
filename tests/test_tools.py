"""Tests for the cog integration, the command line and diagnostics."""

from __future__ import annotations

import importlib
import logging
import subprocess
import sys
import types

import pytest

from identable import tools
from identable.__main__ import main
from identable.declarations import EnumDecl, Location
from identable.diagnostics import Diagnostic, ErrorKind, LoggingSink


def test_cog_command_replaces_in_place() -> None:
    command = tools.cog_command("a.swift", "b.swift")
    assert command[0] == "cog"
    assert "-r" in command
    assert command[command.index("-I") + 1] == tools.SUPPORT_DIR
    assert command[-2:] == ["a.swift", "b.swift"]


def test_cog_command_check() -> None:
    command = tools.cog_command("a.swift", check=True)
    assert "--check" in command
    assert "-r" not in command


def test_support_dir_contains_package() -> None:
    """Cog blocks import the package from the include path."""
    assert tools.THIS_DIR.rstrip("/").endswith("identable")


def test_run_cog(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(tools.subprocess, "check_call", calls.append)
    tools.run_cog("a.swift")
    assert calls == [tools.cog_command("a.swift")]


def test_main_runs_cog(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_run_cog(*filenames, check=False):
        calls.append((filenames, check))

    monkeypatch.setattr("identable.__main__.run_cog", fake_run_cog)
    assert main(["a.swift", "b.swift", "--check"]) == 0
    assert calls == [(("a.swift", "b.swift"), True)]


def test_main_reports_cog_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_run_cog(*filenames, check=False):
        raise subprocess.CalledProcessError(2, ["cog"])

    monkeypatch.setattr("identable.__main__.run_cog", failing_run_cog)
    assert main(["a.swift"]) == 2


def test_diagnostic_text() -> None:
    diagnostic = Diagnostic(ErrorKind.NOT_AN_ENUM, Location("Foo.swift", 3, 1))
    assert str(diagnostic) == (
        "Foo.swift:3:1: error: `@EnumIdentableMacro` can only be applied to an `enum` "
        "[EnumIdentableMacro.mustBeEnum]"
    )
    assert ErrorKind.NO_CASES.diagnostic_id == "EnumIdentableMacro.mustHaveCases"


def test_logging_sink(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="identable.diagnostics"):
        LoggingSink().diagnose(Diagnostic(ErrorKind.NO_CASES))
    assert "can only be applied to an `enum` with `case` statements" in caplog.text


@pytest.fixture
def cog_output(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Stands in for the module cog provides to generator code."""
    lines: list[str] = []
    fake = types.ModuleType("cog")
    fake.outl = lambda text="": lines.append(text)
    monkeypatch.setitem(sys.modules, "cog", fake)
    monkeypatch.delitem(sys.modules, "identable.generate", raising=False)
    return lines


def test_generate_expand(cog_output: list[str], destination_enum: EnumDecl) -> None:
    """The members of one enum are emitted as a single indented block."""
    generate = importlib.import_module("identable.generate")
    generate.expand(destination_enum, indent=4)

    (text,) = cog_output
    assert text.startswith("    enum CaseID {\n        case destination(id: Int)\n")
    assert text.count("enum CaseID") == 1
    assert text.endswith("        lhs.id == rhs.id\n    }")


def test_generate_expand_takes_one_declaration(
    cog_output: list[str], simple_enum: EnumDecl, destination_enum: EnumDecl
) -> None:
    """Members of several enums cannot share one scope."""
    generate = importlib.import_module("identable.generate")
    with pytest.raises(TypeError):
        generate.expand(simple_enum, destination_enum, indent=4)
    assert cog_output == []


def test_generate_expand_skips_invalid(
    cog_output: list[str], struct_decl, caplog: pytest.LogCaptureFixture
) -> None:
    """Declarations that are not enums are logged and emit nothing."""
    generate = importlib.import_module("identable.generate")
    with caplog.at_level(logging.ERROR, logger="identable.diagnostics"):
        generate.expand(struct_decl)
    assert cog_output == []
    assert "EnumIdentableMacro.mustBeEnum" in caplog.text
