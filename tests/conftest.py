"""
Pytest configuration for dualmode.

Provides fixtures for:
- The script under test, located and loaded define-only once per session
- A frozen SetupContext carrying test mode for the whole run
- Clock and random-source stubs for pinning the builder's inputs
- Settings cache isolation
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator

import pytest

from dualmode.config import get_settings
from dualmode.harness import LoadedScript, SetupContext, prepare

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "new_output_record.py"


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self.value


@pytest.fixture(scope="session")
def setup_context() -> SetupContext:
    """
    Test-mode context, fixed for the whole session.
    """
    return SetupContext(script_path=SCRIPT_PATH, test_mode=True)


@pytest.fixture(scope="session")
def loaded_script(setup_context: SetupContext) -> LoadedScript:
    """
    The script's definitions, loaded without running its command.

    Setup errors (missing file, broken load) abort the session with the
    harness's own message.
    """
    return prepare(setup_context, names=["new_output_record", "main", "run"])


@pytest.fixture
def fixed_clock() -> Callable[[datetime], Callable[[], datetime]]:
    def _make(moment: datetime) -> Callable[[], datetime]:
        return lambda: moment

    return _make


@pytest.fixture
def fixed_random() -> Callable[[int], FixedRandom]:
    return FixedRandom


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Keep environment overrides from leaking between tests via the cache.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo configure_logging calls so handlers never outlive a captured stream.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
