"""
Entry-point gate for dual-mode scripts.

A script that can be run directly or loaded by a test harness has two
states: its callables are defined (LOADED), and optionally its command has
been run (INVOKED). The gate decides, once, whether the second step happens.

Usage (at the bottom of a script):
    def run(argv=None) -> int:
        gate = EntryPointGate(lambda args: app(args=args))
        gate.evaluate(InvocationContext.from_module(__name__, argv or sys.argv[1:]))
        return 0

    if __name__ == "__main__":
        sys.exit(run())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from dualmode.utils.logging import get_logger

log = get_logger(__name__)


class GateAction(str, Enum):
    INVOKE = "invoke"
    DEFINE_ONLY = "define_only"


class GateState(str, Enum):
    LOADED = "loaded"
    INVOKED = "invoked"


@dataclass(frozen=True)
class InvocationContext:
    """
    What the gate knows about how the process was started.

    Attributes
    ----------
    top_level : bool
        True when the script runs as the process's main program rather than
        being loaded into another module.
    args : tuple[str, ...]
        Arguments the caller supplied (without the program name).
    """

    top_level: bool
    args: Tuple[str, ...] = ()

    @classmethod
    def from_module(cls, module_name: str, argv: Sequence[str]) -> InvocationContext:
        return cls(top_level=module_name == "__main__", args=tuple(argv))


def decide(context: InvocationContext) -> GateAction:
    """Invoke only for a top-level process that was given arguments."""
    if context.top_level and len(context.args) > 0:
        return GateAction.INVOKE
    return GateAction.DEFINE_ONLY


class EntryPointGate:
    """
    Evaluates `decide` once and runs the invoker on INVOKE.

    Exceptions raised by the invoker propagate to the caller unchanged.
    Evaluating again returns the first decision without invoking twice.
    """

    def __init__(self, invoke: Callable[[List[str]], Any]) -> None:
        self._invoke = invoke
        self.state = GateState.LOADED
        self.decision: Optional[GateAction] = None
        self.result: Any = None

    def evaluate(self, context: InvocationContext) -> GateAction:
        if self.decision is not None:
            log.debug("Gate already evaluated", extra={"decision": self.decision.value})
            return self.decision

        self.decision = decide(context)
        log.debug(
            "Gate decision",
            extra={
                "decision": self.decision.value,
                "top_level": context.top_level,
                "arg_count": len(context.args),
            },
        )
        if self.decision is GateAction.INVOKE:
            self.state = GateState.INVOKED
            self.result = self._invoke(list(context.args))
        return self.decision


__all__ = [
    "EntryPointGate",
    "GateAction",
    "GateState",
    "InvocationContext",
    "decide",
]
