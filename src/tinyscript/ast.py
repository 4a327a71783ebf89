"""
Abstract Syntax Tree (AST) node definitions for tinyscript.

The AST represents the structure of a parsed program, which the runtime
then walks directly. Nodes are frozen and child sequences are tuples, so a
tree is never modified after the parser builds it.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Tuple, Union, Any
from .tokens import TokenType


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class AstNode:
    """Base class for all AST nodes."""

    def accept(self, visitor: "AstVisitor") -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)


class AstVisitor:
    """Base class for AST visitors."""

    def generic_visit(self, node: AstNode) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class Expression(AstNode):
    """Base class for all expressions."""
    pass


@dataclass(frozen=True)
class Literal(Expression):
    """A number or string literal."""
    value: Union[int, str]


@dataclass(frozen=True)
class Identifier(Expression):
    """A variable reference."""
    name: str


@dataclass(frozen=True)
class Grouping(Expression):
    """A parenthesized expression."""
    expression: Expression


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """A binary operation (e.g., a + b, a = b)."""
    left: Expression
    operator: TokenType
    right: Expression


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """A prefix operation (-n, !x)."""
    operator: TokenType
    right: Expression


@dataclass(frozen=True)
class FunctionCall(Expression):
    """A call by literal function name (e.g., add(1, 2))."""
    callee: str
    args: Tuple[Expression, ...] = ()


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass(frozen=True)
class Statement(AstNode):
    """Base class for all statements."""
    pass


@dataclass(frozen=True)
class VariableDeclaration(Statement):
    """let name = initializer"""
    name: str
    initializer: Expression


@dataclass(frozen=True)
class FunctionDeclaration(Statement):
    """func name(params) { body }"""
    name: str
    params: Tuple[str, ...]
    body: Tuple[Statement, ...]


@dataclass(frozen=True)
class IfStatement(Statement):
    """if condition then { ... } else { ... }"""
    condition: Expression
    then_branch: Tuple[Statement, ...]
    else_branch: Optional[Tuple[Statement, ...]] = None


@dataclass(frozen=True)
class WhileStatement(Statement):
    """while condition { ... }"""
    condition: Expression
    body: Tuple[Statement, ...]


@dataclass(frozen=True)
class TryStatement(Statement):
    """try { ... } catch { ... }

    The catch block binds no error variable.
    """
    try_block: Tuple[Statement, ...]
    catch_block: Tuple[Statement, ...]


@dataclass(frozen=True)
class PrintStatement(Statement):
    """print argument"""
    argument: Expression


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """return argument"""
    argument: Expression


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """An expression evaluated for its effect, e.g. a bare call."""
    expression: Expression


@dataclass(frozen=True)
class Program(AstNode):
    """The top-level statement sequence of a source text."""
    statements: Tuple[Statement, ...] = ()

    @property
    def functions(self) -> Tuple[FunctionDeclaration, ...]:
        """Top-level function declarations, in source order."""
        return tuple(s for s in self.statements if isinstance(s, FunctionDeclaration))


# =============================================================================
# Visitor Helpers
# =============================================================================

class PrintVisitor(AstVisitor):
    """Debug visitor that prints the AST structure."""

    def __init__(self, indent: int = 0):
        self.indent = indent

    def _print(self, text: str) -> None:
        print("  " * self.indent + text)

    def _format(self, value: Any) -> str:
        if isinstance(value, Enum):
            return value.name
        return repr(value)

    def generic_visit(self, node: AstNode) -> None:
        self._print(f"{node.__class__.__name__}")
        for f in fields(node):
            value = getattr(node, f.name)
            if isinstance(value, AstNode):
                self._print(f"  {f.name}:")
                value.accept(PrintVisitor(self.indent + 2))
            elif isinstance(value, tuple):
                self._print(f"  {f.name}: [")
                for item in value:
                    if isinstance(item, AstNode):
                        item.accept(PrintVisitor(self.indent + 2))
                    else:
                        self._print(f"    {self._format(item)}")
                self._print("  ]")
            else:
                self._print(f"  {f.name}: {self._format(value)}")


def print_ast(node: AstNode) -> None:
    """Print an AST node for debugging."""
    node.accept(PrintVisitor())
