"""
Runtime value helpers for the interpreter.

Script values are plain Python objects: ``int`` and ``float`` for numbers,
``str``, ``bool``, and ``None`` for the undefined value. A stored
``FunctionDeclaration`` marks a function binding in the environment.
"""

from typing import Any

from ..ast import FunctionDeclaration
from ..errors import error_numeric_overflow


# Value of a call that ends without `return`, or of an unsupplied parameter
UNDEFINED = None


def is_number(value: Any) -> bool:
    """Check for a numeric value; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_function(value: Any) -> bool:
    return isinstance(value, FunctionDeclaration)


def type_name(value: Any) -> str:
    """Name of a value's runtime type, for error messages."""
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_function(value):
        return "function"
    return type(value).__name__


def is_truthy(value: Any) -> bool:
    """Check if a value is truthy in a condition.

    false, 0, "" and undefined are falsy; everything else is truthy.
    """
    if value is UNDEFINED:
        return False
    return bool(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without coercion: values of different types are never equal."""
    if type_name(left) != type_name(right):
        return False
    return left == right


def format_value(value: Any) -> str:
    """Format a value the way `print` writes it."""
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if is_function(value):
        return f"<func {value.name}>"
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # past sys.get_int_max_str_digits()
            raise error_numeric_overflow("number formatting") from None
    return str(value)
