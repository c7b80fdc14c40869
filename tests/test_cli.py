"""CLI behaviour coverage for the rich-click commands."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_protect import __init__conf__
from lib_log_protect import cli as cli_mod
from lib_log_protect.lib_log_protect import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

MESSAGE = {"0": "0200", "2": "4111111111111111", "35": "41111111=2512101", "48": "additional data", "41": "TERM0001"}


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _clear_protect_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("PROTECT", "WIPE", "MASK", "USE_DOTENV"):
        monkeypatch.delenv(f"LOG_PROTECT_{key}", raising=False)


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [], prog_name=__init__conf__.shell_command)
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])
    assert result.exit_code == 0
    assert __init__conf__.version in result.output


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    result = CliRunner().invoke(cli_mod.cli, ["--no-traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_redact_json_output_from_file(tmp_path: Path) -> None:
    source = tmp_path / "message.json"
    source.write_text(json.dumps(MESSAGE))

    result = CliRunner().invoke(
        cli_mod.cli,
        ["redact", str(source), "--protect", "2 48", "--wipe", "35", "--format", "json"],
    )

    assert result.exit_code == 0, result.output
    redacted = json.loads(result.output)
    assert redacted["2"] == "_" * 16
    assert redacted["35"] == "[WIPED]"
    assert redacted["48"] == "_" * len("additional data")
    assert redacted["41"] == "TERM0001"
    assert "99" not in redacted


def test_redact_reads_stdin_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PROTECT_PROTECT", "2")
    monkeypatch.setenv("LOG_PROTECT_MASK", "pan")

    result = CliRunner().invoke(cli_mod.cli, ["redact", "-", "--format", "json"], input=json.dumps(MESSAGE))

    assert result.exit_code == 0, result.output
    redacted = json.loads(result.output)
    assert redacted["2"] == "411111______1111"
    assert redacted["35"] == "41111111=2512101"


def test_redact_table_output_shows_sentinel_literally() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["redact", "--wipe", "35"], input=json.dumps(MESSAGE))

    assert result.exit_code == 0, result.output
    plain = strip_ansi(result.output)
    assert "[WIPED]" in plain
    assert "redacted" in plain
    assert "4111111111111111" in plain


def test_redact_rejects_invalid_field_list() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["redact", "--protect", "2 x"], input=json.dumps(MESSAGE))
    assert result.exit_code == 2
    assert "not a field number" in result.output


def test_redact_rejects_malformed_json() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["redact"], input="{not json")
    assert result.exit_code == 2
    assert "invalid JSON" in result.output


def test_redact_rejects_non_string_values() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["redact"], input=json.dumps({"4": 1000}))
    assert result.exit_code == 2
    assert "string" in result.output


def test_show_config_prints_selection() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["show-config", "--protect", "2 48 2", "--wipe", "35", "--mask", "pan"])
    assert result.exit_code == 0, result.output
    assert "protect = 2 48" in result.output
    assert "wipe    = 35" in result.output
    assert "PanTruncationMask" in result.output


def test_show_config_rejects_unknown_mask() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["show-config", "--mask", "rot13"])
    assert result.exit_code == 2
    assert "unknown mask policy" in result.output


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, ["--traceback", "info"] if argv is None else argv)
        if result.exception is not None and not isinstance(result.exception, SystemExit):
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for lib_log_protect" in captured.out
