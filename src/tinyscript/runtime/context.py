"""
Execution context for the interpreter.

Holds the single live environment, the output stream and the return
signal.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO
from contextlib import contextmanager

from .values import UNDEFINED


@dataclass
class ExecutionContext:
    """
    The full execution context for interpreting a program.

    Tracks:
    - The current environment (one flat name -> value mapping)
    - The output stream used by `print`
    - The return signal raised by a `return` statement

    There is no scope chain. A function call installs a copy of the
    caller's environment with the parameters layered on top, and puts the
    caller's own mapping back when the call ends, so nothing the callee
    binds or rebinds is visible to the caller afterwards.
    """
    environment: Dict[str, Any] = field(default_factory=dict)

    # None means sys.stdout, looked up at print time
    output: Optional[TextIO] = None

    # Control flow flags
    _should_return: bool = False
    _return_value: Any = UNDEFINED

    def has_variable(self, name: str) -> bool:
        return name in self.environment

    def get_variable(self, name: str) -> Any:
        """Look up a name in the current environment."""
        return self.environment[name]

    def set_variable(self, name: str, value: Any) -> None:
        """Bind or rebind a name in the current environment."""
        self.environment[name] = value

    @contextmanager
    def call_scope(self, bindings: Dict[str, Any]):
        """
        Context manager for the duration of a function call.

        Usage:
            with ctx.call_scope({"a": 1, "b": 2}):
                # parameters shadow caller variables of the same name
                ...
        """
        caller_environment = self.environment
        self.environment = {**caller_environment, **bindings}
        try:
            yield self.environment
        finally:
            self.environment = caller_environment

    def write(self, text: str) -> None:
        """Write one line of program output."""
        stream = self.output if self.output is not None else sys.stdout
        print(text, file=stream)

    def signal_return(self, value: Any) -> None:
        """Signal an early return to the nearest call boundary."""
        self._should_return = True
        self._return_value = value

    @property
    def should_return(self) -> bool:
        """Check if early return was signaled."""
        return self._should_return

    @property
    def return_value(self) -> Any:
        """Get the return value if early return was signaled."""
        return self._return_value

    def clear_return(self) -> None:
        """Clear the return signal (used after handling return)."""
        self._should_return = False
        self._return_value = UNDEFINED
