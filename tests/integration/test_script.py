"""
End-to-end tests for scripts/new_output_record.py.

The session fixtures load the script define-only through the harness; the
subprocess tests run it as a real top-level command.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from dualmode.domain.models import Category, OutputRecord
from dualmode.errors import InvalidCategory
from dualmode.harness import LoadedScript, SetupContext, describe_script, load_definitions

ROOT = Path(__file__).resolve().parents[2]
SCRIPT = ROOT / "scripts" / "new_output_record.py"


def _run_script(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    env["LOG_LEVEL"] = "WARNING"
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
        env=env,
        cwd=ROOT,
        timeout=60,
    )


class TestDefineOnlyLoad:
    """Loading the script defines its functions without running the command."""

    def test_harness_context_is_in_test_mode(self, setup_context: SetupContext) -> None:
        assert setup_context.test_mode is True

    def test_load_produces_no_output(self, capsys) -> None:
        load_definitions(SCRIPT)

        captured = capsys.readouterr()
        assert captured.out == ""

    def test_definitions_are_available(self, loaded_script: LoadedScript) -> None:
        assert set(loaded_script.callables) == {"new_output_record", "main", "run"}
        assert loaded_script.module.__name__ != "__main__"

    @pytest.mark.parametrize(
        ("category", "name", "power"),
        [
            (Category.HERO, "Cmdlet Crusader", "Command Mastery"),
            (Category.CHAMPION, "Pipeline Paladin", "Seamless Integration"),
        ],
    )
    def test_loaded_builder_returns_fixed_pairs(
        self, loaded_script: LoadedScript, category: Category, name: str, power: str
    ) -> None:
        record = loaded_script.callables["new_output_record"](category.value)

        assert isinstance(record, OutputRecord)
        assert record.category is category
        assert (record.detail.name, record.detail.power) == (name, power)

    def test_loaded_builder_rejects_invalid_category(self, loaded_script: LoadedScript) -> None:
        with pytest.raises(InvalidCategory):
            loaded_script.callables["new_output_record"]("InvalidType")

    def test_run_without_arguments_is_define_only(
        self, loaded_script: LoadedScript, capsys
    ) -> None:
        assert loaded_script.callables["run"]([]) == 0
        assert capsys.readouterr().out == ""

    def test_run_with_arguments_invokes_command(self, loaded_script: LoadedScript, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            loaded_script.callables["run"](["Champion"])

        assert exc_info.value.code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["detail"]["name"] == "Pipeline Paladin"

    def test_diagnostics_list_script_functions(self, setup_context: SetupContext) -> None:
        assert describe_script(setup_context) == ["new_output_record", "main", "run"]


class TestTopLevelInvocation:
    """Running the script as a process."""

    def test_no_arguments_exits_cleanly_without_output(self) -> None:
        result = _run_script()

        assert result.returncode == 0, result.stderr
        assert result.stdout == ""

    def test_hero_record(self) -> None:
        result = _run_script("Hero")

        assert result.returncode == 0, result.stderr
        payload = json.loads(result.stdout)
        assert payload["category"] == "Hero"
        assert payload["detail"]["name"] == "Cmdlet Crusader"
        assert payload["detail"]["power"] == "Command Mastery"

    def test_champion_record_as_table(self) -> None:
        result = _run_script("Champion", "--format", "table")

        assert result.returncode == 0, result.stderr
        assert "Pipeline Paladin" in result.stdout
        assert "Seamless Integration" in result.stdout

    def test_invalid_category_exits_non_zero(self) -> None:
        result = _run_script("InvalidType")

        assert result.returncode == 2
        assert "InvalidType" in result.stderr
        assert "Hero" in result.stderr
        assert "Champion" in result.stderr

    def test_unknown_format_is_usage_error(self) -> None:
        result = _run_script("Hero", "--format", "xml")

        assert result.returncode == 2
        assert result.stdout == ""
        assert "xml" in result.stderr

    def test_options_without_category_is_usage_error(self) -> None:
        result = _run_script("--format", "json")

        assert result.returncode == 2
        assert result.stdout == ""
