"""
Tree-walking interpreter for tinyscript.

Executes statements for effect and evaluates expressions to values,
straight from the AST.
"""

import logging
from operator import add, mul, sub, truediv
from typing import Any, List, Optional, TextIO

from .values import (
    UNDEFINED, is_number, is_function, type_name, is_truthy,
    strict_equals, format_value,
)
from .context import ExecutionContext

from ..ast import (
    Program, Statement,
    VariableDeclaration, FunctionDeclaration,
    IfStatement, WhileStatement, TryStatement,
    PrintStatement, ReturnStatement, ExpressionStatement,
    Expression, Literal, Identifier, Grouping,
    BinaryExpression, UnaryExpression, FunctionCall,
)
from ..errors import (
    ScriptError,
    error_undefined_variable,
    error_undefined_function,
    error_not_callable,
    error_function_as_value,
    error_type_mismatch,
    error_unknown_operator,
    error_unknown_node,
    error_division_by_zero,
    error_recursion_depth,
    error_numeric_overflow,
)
from ..tokens import TokenType, SPELLINGS

logger = logging.getLogger(__name__)

ARITHMETIC = {
    TokenType.PLUS: add,
    TokenType.MINUS: sub,
    TokenType.STAR: mul,
    TokenType.SLASH: truediv,
}


class Interpreter:
    """
    Tree-walking interpreter.

    Evaluates AST nodes by dispatching to type-specific methods. A single
    interpreter may run several programs; each ``interpret`` call works on
    the same context, so declarations persist between them.

    ``return`` travels on its own channel (the context's return signal),
    separate from exceptions: a ``try`` statement never intercepts it.
    """

    def __init__(self, output: Optional[TextIO] = None):
        """
        Initialize the interpreter.

        Args:
            output: Stream that `print` writes to (default: sys.stdout)
        """
        self.ctx = ExecutionContext(output=output)

    @property
    def environment(self):
        """The environment mapping that is current right now."""
        return self.ctx.environment

    def interpret(self, program: Program) -> Any:
        """
        Execute a program's top-level statements in order.

        A top-level `return` stops execution; its value is returned here
        and otherwise has no consumer.

        Raises:
            ScriptError: Any error not recovered by a `try` statement
        """
        ctx = self.ctx
        for stmt in program.statements:
            self._execute_statement(stmt, ctx)
            if ctx.should_return:
                value = ctx.return_value
                ctx.clear_return()
                logger.debug("top-level return with %s", type_name(value))
                return value
        return UNDEFINED

    # =========================================================================
    # Statements
    # =========================================================================

    def _execute_block(self, statements, ctx: ExecutionContext) -> None:
        """Execute statements in order, stopping on the return signal."""
        for stmt in statements:
            self._execute_statement(stmt, ctx)
            if ctx.should_return:
                return

    def _execute_statement(self, stmt: Statement, ctx: ExecutionContext) -> None:
        """Execute a statement."""
        if isinstance(stmt, VariableDeclaration):
            ctx.set_variable(stmt.name, self._evaluate(stmt.initializer, ctx))
        elif isinstance(stmt, FunctionDeclaration):
            ctx.set_variable(stmt.name, stmt)
        elif isinstance(stmt, IfStatement):
            self._execute_if(stmt, ctx)
        elif isinstance(stmt, WhileStatement):
            self._execute_while(stmt, ctx)
        elif isinstance(stmt, TryStatement):
            self._execute_try(stmt, ctx)
        elif isinstance(stmt, PrintStatement):
            ctx.write(format_value(self._evaluate(stmt.argument, ctx)))
        elif isinstance(stmt, ReturnStatement):
            ctx.signal_return(self._evaluate(stmt.argument, ctx))
        elif isinstance(stmt, ExpressionStatement):
            self._evaluate(stmt.expression, ctx)
        else:
            raise error_unknown_node(type(stmt).__name__)

    def _execute_if(self, stmt: IfStatement, ctx: ExecutionContext) -> None:
        if is_truthy(self._evaluate(stmt.condition, ctx)):
            self._execute_block(stmt.then_branch, ctx)
        elif stmt.else_branch is not None:
            self._execute_block(stmt.else_branch, ctx)

    def _execute_while(self, stmt: WhileStatement, ctx: ExecutionContext) -> None:
        while is_truthy(self._evaluate(stmt.condition, ctx)):
            self._execute_block(stmt.body, ctx)
            if ctx.should_return:
                return

    def _execute_try(self, stmt: TryStatement, ctx: ExecutionContext) -> None:
        try:
            self._execute_block(stmt.try_block, ctx)
        except ScriptError as exc:
            logger.debug("recovered from %s in try block", exc.code)
            self._execute_block(stmt.catch_block, ctx)

    # =========================================================================
    # Expressions
    # =========================================================================

    def _evaluate(self, expr: Expression, ctx: ExecutionContext) -> Any:
        """Evaluate an expression to produce a value."""
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Identifier):
            return self._eval_identifier(expr, ctx)
        elif isinstance(expr, Grouping):
            return self._evaluate(expr.expression, ctx)
        elif isinstance(expr, BinaryExpression):
            return self._eval_binary(expr, ctx)
        elif isinstance(expr, UnaryExpression):
            return self._eval_unary(expr, ctx)
        elif isinstance(expr, FunctionCall):
            return self._eval_call(expr, ctx)
        else:
            raise error_unknown_node(type(expr).__name__)

    def _eval_identifier(self, ident: Identifier, ctx: ExecutionContext) -> Any:
        """Evaluate an identifier (variable lookup)."""
        if not ctx.has_variable(ident.name):
            raise error_undefined_variable(ident.name)
        value = ctx.get_variable(ident.name)
        if is_function(value):
            raise error_function_as_value(ident.name)
        return value

    def _eval_binary(self, op: BinaryExpression, ctx: ExecutionContext) -> Any:
        """Evaluate a binary operation."""
        left = self._evaluate(op.left, ctx)
        right = self._evaluate(op.right, ctx)
        operator = op.operator

        if operator == TokenType.EQUAL:
            return strict_equals(left, right)
        if operator == TokenType.BANG:
            return not strict_equals(left, right)

        if operator == TokenType.PLUS and (isinstance(left, str) or isinstance(right, str)):
            return format_value(left) + format_value(right)
        if operator in ARITHMETIC:
            self._require_numbers(operator, left, right)
            if operator == TokenType.SLASH and right == 0:
                raise error_division_by_zero()
            try:
                return ARITHMETIC[operator](left, right)
            except OverflowError:
                # int too large to convert to float
                raise error_numeric_overflow(SPELLINGS[operator]) from None

        if operator in (TokenType.GREATER, TokenType.LESS):
            both_strings = isinstance(left, str) and isinstance(right, str)
            if not both_strings:
                self._require_numbers(operator, left, right)
            if operator == TokenType.GREATER:
                return left > right
            return left < right

        raise error_unknown_operator(SPELLINGS.get(operator, str(operator)))

    def _eval_unary(self, op: UnaryExpression, ctx: ExecutionContext) -> Any:
        """Evaluate a prefix operation."""
        operand = self._evaluate(op.right, ctx)

        if op.operator == TokenType.MINUS:
            if not is_number(operand):
                raise error_type_mismatch("-", type_name(operand))
            return -operand
        if op.operator == TokenType.BANG:
            return not is_truthy(operand)

        raise error_unknown_operator(SPELLINGS.get(op.operator, str(op.operator)))

    @staticmethod
    def _require_numbers(operator: TokenType, left: Any, right: Any) -> None:
        if not (is_number(left) and is_number(right)):
            raise error_type_mismatch(
                SPELLINGS[operator].strip("'"), type_name(left), type_name(right)
            )

    def _eval_call(self, call: FunctionCall, ctx: ExecutionContext) -> Any:
        """
        Evaluate a function call.

        Arguments are evaluated left to right in the caller's environment.
        Missing arguments are undefined; extra arguments are ignored.
        Running out of host stack is reported as E408 so `try` can
        recover from runaway recursion.
        """
        if not ctx.has_variable(call.callee):
            raise error_undefined_function(call.callee)
        func = ctx.get_variable(call.callee)
        if not is_function(func):
            raise error_not_callable(call.callee)

        args: List[Any] = [self._evaluate(arg, ctx) for arg in call.args]
        bindings = {
            param: args[i] if i < len(args) else UNDEFINED
            for i, param in enumerate(func.params)
        }

        logger.debug("call %s(%s)", func.name, ", ".join(type_name(a) for a in args))
        with ctx.call_scope(bindings):
            try:
                self._execute_block(func.body, ctx)
            except RecursionError:
                # an outer frame retries if this one has no room left either
                raise error_recursion_depth(func.name) from None
            result = ctx.return_value
            ctx.clear_return()
        logger.debug("%s returned %s", func.name, type_name(result))
        return result


def run(source: str, output: Optional[TextIO] = None, filename: Optional[str] = None,
        strict_strings: bool = True) -> Any:
    """
    Tokenize, parse and execute source text in one call.

        from tinyscript import run

        run('''
            func add(a, b) { return a + b }
            print add(2, 3)
        ''')

    Args:
        source: Program source text
        output: Stream that `print` writes to (default: sys.stdout)
        filename: Optional filename for error messages
        strict_strings: Raise on an unterminated string literal

    Returns:
        The value of a top-level `return`, if one ran

    Raises:
        LexError, ParseError, EvalError: Any error not recovered by `try`
    """
    from ..lexer import tokenize
    from ..parser import parse

    tokens = tokenize(source, filename, strict_strings=strict_strings)
    program = parse(tokens, source=source)
    return Interpreter(output=output).interpret(program)
