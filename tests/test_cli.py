# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests driving the CLI through :func:`pystree.cli.run`."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from pystree import __version__
from pystree.cli import main, run
from pystree.cli.app import app
from pystree.cli.main import CLICK_ERRORS, resolve_command
from pystree.constants import CONFIG_FILENAME
from pystree.errors import PluginLoadError
from pystree.runtime.environment import RuntimeEnvironment

LONG_CALL = "result = function_name(argument_one, argument_two, argument_three)\n"


def _write(root: Path, name: str, content: str) -> Path:
    path = root / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("alias", "expected"),
    [("a", "ast"), ("c", "check"), ("f", "format"), ("j", "json"), ("m", "match"), ("w", "write")],
)
def test_aliases_resolve_to_commands(alias: str, expected: str) -> None:
    assert resolve_command(alias) == expected
    assert resolve_command(expected) == expected


def test_unknown_command_is_not_resolved() -> None:
    assert resolve_command("bogus") is None


def test_no_arguments_prints_help_and_fails(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment()

    assert run([], environment) == 1
    assert "pystree check" in environment.stderr.getvalue()
    assert environment.stdout.getvalue() == ""


def test_unknown_command_prints_help_and_fails(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment()

    assert run(["bogus", "a.py"], environment) == 1
    assert "pystree format" in environment.stderr.getvalue()


def test_terminal_stdin_without_files_is_a_usage_error(
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    environment = make_environment(stdin_is_tty=True)

    assert run(["check"], environment) == 1
    stderr = environment.stderr.getvalue()
    assert "No files given" in stderr
    assert "pystree check" in stderr


def test_invalid_print_width_is_a_usage_error(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment()

    assert run(["format", "--print-width=wide", "a.py"], environment) == 1
    assert "pystree write" in environment.stderr.getvalue()


def test_help_succeeds(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment()

    assert run(["help"], environment) == 0
    stdout = environment.stdout.getvalue()
    assert "pystree ast [--plugins=...] [--print-width=NUMBER] FILE" in stdout
    assert "--print-width=NUMBER" in stdout


def test_version_succeeds(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment()

    assert run(["version"], environment) == 0
    assert environment.stdout.getvalue() == f"{__version__}\n"


def test_version_tolerates_config_file_flags(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, CONFIG_FILENAME, "--print-width=40\n")
    environment = make_environment()

    assert run(["version"], environment) == 0


def test_check_reports_only_unformatted_files(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "good.py", "x = 1\n")
    _write(tmp_path, "bad.py", "x=1\n")
    environment = make_environment()

    assert run(["check", "*.py"], environment) == 1
    stderr = environment.stderr.getvalue().splitlines()
    assert [line for line in stderr if line.startswith("[warn]")] == ["[warn] bad.py"]
    assert stderr[-1] == "The listed files did not match the expected format."


def test_check_succeeds_when_everything_is_formatted(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "good.py", "x = 1\n")
    environment = make_environment()

    assert run(["c", "good.py"], environment) == 0
    assert environment.stdout.getvalue() == "All files matched expected format.\n"


def test_check_with_no_matching_files_prints_nothing(
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    environment = make_environment()

    assert run(["check", "missing/*.py"], environment) == 0
    assert environment.stdout.getvalue() == ""
    assert environment.stderr.getvalue() == ""


def test_format_reads_piped_stdin(make_environment: Callable[..., RuntimeEnvironment]) -> None:
    environment = make_environment(stdin_text="x=1\n", stdin_is_tty=False)

    assert run(["format"], environment) == 0
    assert environment.stdout.getvalue() == "x = 1\n"


def test_parse_failure_shows_excerpt(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "broken.py", "x = 1\ny = (\n")
    environment = make_environment()

    assert run(["ast", "broken.py"], environment) == 1
    stderr = environment.stderr.getvalue()
    assert stderr.startswith("Error: ")
    assert "> 2 | y = (" in stderr
    assert "  1 | x = 1" in stderr


def test_command_line_width_overrides_config_file(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, CONFIG_FILENAME, "--print-width=40\n")
    environment = make_environment(stdin_text=LONG_CALL, stdin_is_tty=False)

    assert run(["format", "--print-width=100"], environment) == 0
    assert environment.stdout.getvalue() == LONG_CALL


def test_config_file_width_applies(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, CONFIG_FILENAME, "--print-width=40\n")
    environment = make_environment(stdin_text=LONG_CALL, stdin_is_tty=False)

    assert run(["format"], environment) == 0
    formatted = environment.stdout.getvalue()
    assert formatted != LONG_CALL
    assert all(len(line) <= 40 for line in formatted.splitlines())


def test_write_formats_files_in_place(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "a.py", "x=1\n")
    _write(tmp_path, "b.py", "y = 2\n")
    environment = make_environment(cpu_count=2)

    assert run(["w", "a.py", "b.py"], environment) == 0
    assert (tmp_path / "a.py").read_text(encoding="utf-8") == "x = 1\n"
    assert (tmp_path / "b.py").read_text(encoding="utf-8") == "y = 2\n"
    reported = sorted(line.split(" ")[0] for line in environment.stdout.getvalue().splitlines())
    assert reported == ["a.py", "b.py"]


def test_unsupported_extension_fails_the_item(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "notes.txt", "hello\n")
    environment = make_environment()

    assert run(["format", "notes.txt"], environment) == 1
    assert "No handler registered for file extension '.txt'" in environment.stderr.getvalue()


def test_plugin_module_registers_handler(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    plugin_dir = tmp_path / "plugins"
    plugin_dir.mkdir()
    _write(
        plugin_dir,
        "pystree_fake_plugin.py",
        "from pystree.handlers.python import PythonHandler\n\n\n"
        "def register(registry):\n"
        "    registry.register('.fake', PythonHandler())\n",
    )
    monkeypatch.syspath_prepend(str(plugin_dir))
    _write(tmp_path, "a.fake", "x=1\n")
    environment = make_environment()

    assert run(["format", "--plugins=pystree_fake_plugin", "a.fake"], environment) == 0
    assert environment.stdout.getvalue() == "x = 1\n"
    assert ".fake" in environment.handlers


def test_missing_plugin_aborts_startup(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    _write(tmp_path, "a.py", "x = 1\n")
    environment = make_environment()

    with pytest.raises(PluginLoadError, match="pystree_missing_plugin"):
        run(["check", "--plugins=pystree_missing_plugin", "a.py"], environment)
    assert environment.stdout.getvalue() == ""


def test_main_exits_with_status(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == f"{__version__}\n"


def test_main_reports_startup_errors(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--plugins=pystree_missing_plugin", "a.py"])

    assert excinfo.value.code == 1
    assert "Unable to load plugin 'pystree_missing_plugin'" in capsys.readouterr().err


def test_typer_app_can_be_invoked_directly() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_lsp_without_server_fails(
    monkeypatch: pytest.MonkeyPatch,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    monkeypatch.setattr("pystree.cli.app.load_language_server", lambda: None)
    environment = make_environment()

    assert run(["lsp"], environment) == 1
    assert "No language server is installed" in environment.stderr.getvalue()


def test_lsp_hands_options_to_server(
    monkeypatch: pytest.MonkeyPatch,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr("pystree.cli.app.load_language_server", lambda: lambda **kwargs: calls.append(kwargs))
    environment = make_environment()

    assert run(["lsp", "--print-width=60"], environment) == 0
    assert calls == [{"print_width": 60, "handlers": environment.handlers}]


def test_write_preserves_declared_encoding(
    tmp_path: Path,
    make_environment: Callable[..., RuntimeEnvironment],
) -> None:
    path = tmp_path / "legacy.py"
    path.write_bytes(b"# -*- coding: latin-1 -*-\nname  =  '\xe9t\xe9'\n")
    environment = make_environment()

    assert run(["write", "legacy.py"], environment) == 0
    assert path.read_bytes() == b'# -*- coding: latin-1 -*-\nname = "\xe9t\xe9"\n'


def test_option_errors_are_caught_from_the_click_typer_uses() -> None:
    assert any(issubclass(typer.BadParameter, error) for error in CLICK_ERRORS)
