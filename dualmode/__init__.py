"""
dualmode - a command-line script that can be run or loaded for testing.

The package provides:

- A record builder that turns a category into a timestamped output record
- An entry-point gate that decides whether a script runs its command or
  only defines its functions
- A script harness that locates and loads a script without running it, for
  use from test setup
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from dualmode.builder import build
from dualmode.config import Settings, get_settings
from dualmode.domain.models import Category, OutputRecord, RecordDetail
from dualmode.errors import (
    AnalysisError,
    DualModeError,
    InvalidCategory,
    LoadError,
    ScriptNotFound,
)
from dualmode.gate import (
    EntryPointGate,
    GateAction,
    GateState,
    InvocationContext,
    decide,
)
from dualmode.harness import (
    LoadedScript,
    SetupContext,
    describe_script,
    list_callables,
    load_definitions,
    locate_script,
    prepare,
)
from dualmode.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records
    "Category",
    "OutputRecord",
    "RecordDetail",
    "build",
    # Errors
    "AnalysisError",
    "DualModeError",
    "InvalidCategory",
    "LoadError",
    "ScriptNotFound",
    # Entry-point gate
    "EntryPointGate",
    "GateAction",
    "GateState",
    "InvocationContext",
    "decide",
    # Script harness
    "LoadedScript",
    "SetupContext",
    "describe_script",
    "list_callables",
    "load_definitions",
    "locate_script",
    "prepare",
    # Logging
    "configure_logging",
    "get_logger",
]
