"""
Runtime - Tree-walking interpreter for program execution.

This module provides:
- Interpreter: Executes a parsed Program
- ExecutionContext: The single live environment and the return signal
- Value helpers: truthiness, strict equality and print formatting
"""

from .values import (
    UNDEFINED,
    is_number,
    is_function,
    type_name,
    is_truthy,
    strict_equals,
    format_value,
)

from .context import (
    ExecutionContext,
)

from .interpreter import (
    Interpreter,
    run,
)

__all__ = [
    # Values
    'UNDEFINED',
    'is_number',
    'is_function',
    'type_name',
    'is_truthy',
    'strict_equals',
    'format_value',

    # Context
    'ExecutionContext',

    # Interpreter
    'Interpreter',
    'run',
]
