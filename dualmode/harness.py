"""
Script harness: locate a dual-mode script, load its definitions without
running it, and list what it defines.

Test setup goes through `prepare`, which fails fast on a missing file or a
broken load. `describe_script` is diagnostic only: analysis problems are
logged and an empty listing is returned.

Usage:
    from dualmode.harness import SetupContext, prepare

    context = SetupContext(script_path="scripts/new_output_record.py", test_mode=True)
    loaded = prepare(context, names=["new_output_record"])
    record = loaded.callables["new_output_record"]("Hero")
"""

from __future__ import annotations

import ast
import importlib.util
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from dualmode.errors import AnalysisError, LoadError, ScriptNotFound
from dualmode.utils.logging import get_logger

log = get_logger(__name__)

_SCAFFOLDING_PREFIXES = ("test_", "setup", "teardown")


class SetupContext(BaseModel):
    """
    Settings a test harness fixes once at setup.
    """

    script_path: Path = Field(..., description="Script to load.")
    test_mode: bool = Field(False, description="Omit test scaffolding from diagnostics.")

    model_config = {"frozen": True}


@dataclass
class LoadedScript:
    path: Path
    module: ModuleType
    callables: Dict[str, Callable[..., Any]] = field(default_factory=dict)


def locate_script(
    path: Path | str,
    exists: Callable[[str], bool] = os.path.exists,
) -> Path:
    """
    Resolve `path` and check it with the `exists` probe.

    Raises
    ------
    ScriptNotFound
        If the probe reports the path missing.
    """
    resolved = Path(path).expanduser().resolve()
    if not exists(str(resolved)):
        raise ScriptNotFound(resolved)
    return resolved


def _module_name_for(path: Path) -> str:
    # Never "__main__": the script's gate must see a define-only load.
    return f"_dualmode_loaded_{path.stem}"


def load_definitions(path: Path | str, names: Optional[Iterable[str]] = None) -> LoadedScript:
    """
    Execute a script file as a private module and collect its callables.

    Parameters
    ----------
    path : Path | str
        Script file to load.
    names : iterable[str] | None
        Callables that must be present. When omitted, every public
        function defined in the module is collected.

    Raises
    ------
    LoadError
        If the file cannot be executed or a required callable is missing.
    """
    script = Path(path)
    spec = importlib.util.spec_from_file_location(_module_name_for(script), script)
    if spec is None or spec.loader is None:
        raise LoadError(script, "no import loader for this file type")

    module = importlib.util.module_from_spec(spec)
    # dataclasses resolves string annotations through sys.modules.
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except SystemExit as exc:
        sys.modules.pop(spec.name, None)
        raise LoadError(script, f"script exited during load (code {exc.code!r})") from exc
    except Exception as exc:  # noqa: BLE001 - script errors are load errors
        sys.modules.pop(spec.name, None)
        raise LoadError(script, f"{type(exc).__name__}: {exc}") from exc

    if names is None:
        collected = {
            name: obj
            for name, obj in vars(module).items()
            if callable(obj)
            and not name.startswith("_")
            and getattr(obj, "__module__", None) == module.__name__
        }
    else:
        collected = {}
        for name in names:
            obj = getattr(module, name, None)
            if obj is None or not callable(obj):
                sys.modules.pop(spec.name, None)
                raise LoadError(script, f"expected callable '{name}' is not defined")
            collected[name] = obj

    log.info(
        "Loaded definitions",
        extra={"path": str(script), "callables": sorted(collected)},
    )
    return LoadedScript(path=script, module=module, callables=collected)


def list_callables(source: str, *, test_mode: bool = False) -> List[str]:
    """
    Names of top-level functions in `source`, in definition order.

    In test mode, test scaffolding (``test_*``, ``setup*``, ``teardown*``)
    is left out.

    Raises
    ------
    AnalysisError
        If `source` does not parse.
    """
    try:
        tree = ast.parse(source)
    except SyntaxError as exc:
        raise AnalysisError(f"Cannot parse source: {exc.msg} (line {exc.lineno})") from exc
    except ValueError as exc:
        # Python 3.10 reports null bytes as ValueError.
        raise AnalysisError(f"Cannot parse source: {exc}") from exc

    names = [
        node.name
        for node in tree.body
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
    ]
    if test_mode:
        names = [name for name in names if not name.startswith(_SCAFFOLDING_PREFIXES)]
    return names


def describe_script(context: SetupContext) -> List[str]:
    """
    List the functions a script defines. Never raises for analysis problems.
    """
    try:
        source = Path(context.script_path).read_text(encoding="utf-8")
        return list_callables(source, test_mode=context.test_mode)
    except (AnalysisError, OSError, UnicodeDecodeError) as exc:
        log.warning(
            "Script analysis failed",
            extra={"path": str(context.script_path), "error": str(exc)},
        )
        return []


def prepare(context: SetupContext, names: Optional[Iterable[str]] = None) -> LoadedScript:
    """
    Locate and load a script for testing. Fatal on any setup error.
    """
    log.info(
        "Preparing script",
        extra={"path": str(context.script_path), "test_mode": context.test_mode},
    )
    path = locate_script(context.script_path)
    return load_definitions(path, names=names)


__all__ = [
    "LoadedScript",
    "SetupContext",
    "describe_script",
    "list_callables",
    "load_definitions",
    "locate_script",
    "prepare",
]
