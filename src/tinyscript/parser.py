"""
Recursive descent parser for tinyscript.

Converts a token list into an Abstract Syntax Tree (AST). Parsing stops at
the first error; there is no recovery.
"""

from typing import List, Optional, Tuple
from .tokens import Token, TokenType, SPELLINGS, describe
from .ast import (
    # Expressions
    Expression, Literal, Identifier, Grouping,
    BinaryExpression, UnaryExpression, FunctionCall,
    # Statements
    Statement, VariableDeclaration, FunctionDeclaration,
    IfStatement, WhileStatement, TryStatement,
    PrintStatement, ReturnStatement, ExpressionStatement,
    Program,
)
from .errors import (
    error_unexpected_token,
    error_unexpected_eof,
    error_expected_expression,
)


class Parser:
    """
    Recursive descent parser for tinyscript.

    Usage:
        parser = Parser(tokens)
        program = parser.parse_program()

    The parser implements precedence climbing for expressions:
        Lowest:  = !    (equality, inequality)
                 > <
                 + -
        Highest: * /
                 unary (- !)

    All binary operators are left-associative. ``=`` and ``!`` are shared
    with declarations and prefix negation; grammar position decides.
    """

    # Operator precedence levels (higher = tighter binding)
    PRECEDENCE = {
        TokenType.EQUAL: 1,
        TokenType.BANG: 1,
        TokenType.GREATER: 2,
        TokenType.LESS: 2,
        TokenType.PLUS: 3,
        TokenType.MINUS: 3,
        TokenType.STAR: 4,
        TokenType.SLASH: 4,
    }

    UNARY_OPERATORS = (TokenType.MINUS, TokenType.BANG)

    def __init__(self, tokens: List[Token], source: Optional[str] = None):
        self.tokens = tokens
        self.source = source  # Original source code for error excerpts
        self.pos = 0

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Optional[Token]:
        """Get current token, or None past the last token."""
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _is_at_end(self) -> bool:
        """Check if all tokens have been consumed."""
        return self.pos >= len(self.tokens)

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token is of given type."""
        token = self._current()
        return token is not None and token.type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if not self._is_at_end():
            self.pos += 1
        return token

    def _consume(self, token_type: TokenType, expected: Optional[str] = None) -> Token:
        """Consume token of expected type, or raise error."""
        if self._check(token_type):
            return self._advance()
        self._error(expected or SPELLINGS[token_type])

    def _match(self, *token_types: TokenType) -> Optional[Token]:
        """Consume token if it matches any of the given types."""
        token = self._current()
        if token is not None and token.type in token_types:
            return self._advance()
        return None

    def _source_line(self, token: Token) -> Optional[str]:
        if self.source is None or token.location is None:
            return None
        lines = self.source.splitlines()
        if 1 <= token.location.line <= len(lines):
            return lines[token.location.line - 1]
        return None

    def _error(self, expected: str) -> None:
        """Raise a parser error."""
        token = self._current()
        if token is None:
            raise error_unexpected_eof(expected)
        raise error_unexpected_token(
            expected, describe(token), token.location, self._source_line(token)
        )

    # =========================================================================
    # Expression Parsing (Precedence Climbing)
    # =========================================================================

    def _parse_expression(self) -> Expression:
        """Parse an expression."""
        return self._parse_binary_expr(1)

    def _parse_binary_expr(self, min_precedence: int) -> Expression:
        """Parse binary expressions with precedence climbing."""
        left = self._parse_unary_expr()

        while True:
            op_token = self._current()
            if op_token is None:
                break
            precedence = self.PRECEDENCE.get(op_token.type)

            if precedence is None or precedence < min_precedence:
                break

            self._advance()  # consume operator
            right = self._parse_binary_expr(precedence + 1)

            left = BinaryExpression(
                left=left,
                operator=op_token.type,
                right=right
            )

        return left

    def _parse_unary_expr(self) -> Expression:
        """Parse prefix expressions (-, !)."""
        op = self._match(*self.UNARY_OPERATORS)
        if op is not None:
            operand = self._parse_unary_expr()
            return UnaryExpression(operator=op.type, right=operand)

        return self._parse_primary_expr()

    def _parse_primary_expr(self) -> Expression:
        """Parse primary expressions (literals, names, calls, groups)."""
        token = self._current()
        if token is None:
            raise error_unexpected_eof("expression")

        if token.type in (TokenType.NUMBER, TokenType.STRING):
            self._advance()
            return Literal(value=token.value)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            if self._match(TokenType.LPAREN):
                return self._parse_call(token.value)
            return Identifier(name=token.value)

        if self._match(TokenType.LPAREN):
            expr = self._parse_expression()
            self._consume(TokenType.RPAREN, "')' after expression")
            return Grouping(expression=expr)

        raise error_expected_expression(describe(token), token.location, self._source_line(token))

    def _parse_call(self, callee: str) -> FunctionCall:
        """Parse the argument list of a call; the '(' is already consumed."""
        args = []
        if not self._check(TokenType.RPAREN):
            args.append(self._parse_expression())
            while self._match(TokenType.COMMA):
                args.append(self._parse_expression())
        self._consume(TokenType.RPAREN, "')' after arguments")
        return FunctionCall(callee=callee, args=tuple(args))

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def _parse_statement(self) -> Statement:
        """Parse a statement, dispatching on the leading token."""
        token = self._current()

        if token.type == TokenType.LET:
            return self._parse_variable_declaration()
        if token.type == TokenType.FUNC:
            return self._parse_function_declaration()
        if token.type == TokenType.IF:
            return self._parse_if_statement()
        if token.type == TokenType.WHILE:
            return self._parse_while_statement()
        if token.type == TokenType.TRY:
            return self._parse_try_statement()
        if token.type == TokenType.PRINT:
            self._advance()
            return PrintStatement(argument=self._parse_expression())
        if token.type == TokenType.RETURN:
            self._advance()
            return ReturnStatement(argument=self._parse_expression())

        return ExpressionStatement(expression=self._parse_expression())

    def _parse_variable_declaration(self) -> VariableDeclaration:
        self._advance()  # consume 'let'
        name = self._consume(TokenType.IDENTIFIER, "variable name").value
        self._consume(TokenType.EQUAL, "'=' after variable name")
        initializer = self._parse_expression()
        return VariableDeclaration(name=name, initializer=initializer)

    def _parse_function_declaration(self) -> FunctionDeclaration:
        self._advance()  # consume 'func'
        name = self._consume(TokenType.IDENTIFIER, "function name").value

        self._consume(TokenType.LPAREN, "'(' after function name")
        params = []
        if not self._check(TokenType.RPAREN):
            params.append(self._consume(TokenType.IDENTIFIER, "parameter name").value)
            while self._match(TokenType.COMMA):
                params.append(self._consume(TokenType.IDENTIFIER, "parameter name").value)
        self._consume(TokenType.RPAREN, "')' after parameters")

        body = self._parse_braced_block("function body")
        return FunctionDeclaration(name=name, params=tuple(params), body=body)

    def _parse_if_statement(self) -> IfStatement:
        self._advance()  # consume 'if'
        condition = self._parse_expression()
        self._consume(TokenType.THEN, "'then' after condition")
        then_branch = self._parse_braced_block("then branch")

        else_branch = None
        if self._match(TokenType.ELSE):
            else_branch = self._parse_braced_block("else branch")

        return IfStatement(
            condition=condition,
            then_branch=then_branch,
            else_branch=else_branch
        )

    def _parse_while_statement(self) -> WhileStatement:
        self._advance()  # consume 'while'
        condition = self._parse_expression()
        body = self._parse_braced_block("while body")
        return WhileStatement(condition=condition, body=body)

    def _parse_try_statement(self) -> TryStatement:
        self._advance()  # consume 'try'
        try_block = self._parse_braced_block("try block")
        self._consume(TokenType.CATCH, "'catch' after try block")
        catch_block = self._parse_braced_block("catch block")
        return TryStatement(try_block=try_block, catch_block=catch_block)

    def _parse_braced_block(self, what: str) -> Tuple[Statement, ...]:
        """Parse '{' block '}'."""
        self._consume(TokenType.LBRACE, f"'{{' before {what}")
        statements = self._parse_block()
        self._consume(TokenType.RBRACE, f"'}}' after {what}")
        return statements

    def _parse_block(self) -> Tuple[Statement, ...]:
        """Parse statements up to, but not including, the closing brace."""
        statements = []
        while not self._check(TokenType.RBRACE) and not self._is_at_end():
            statements.append(self._parse_statement())
        return tuple(statements)

    def parse_program(self) -> Program:
        """Parse the whole token list into a Program."""
        statements = []
        while not self._is_at_end():
            statements.append(self._parse_statement())
        return Program(statements=tuple(statements))


def parse(tokens: List[Token], source: Optional[str] = None) -> Program:
    """
    Convenience function to parse tokens into a Program.

    Args:
        tokens: List of tokens from the lexer
        source: Optional original source, used for error excerpts

    Returns:
        Program AST node

    Raises:
        ParseError: If parsing fails
    """
    parser = Parser(tokens, source)
    return parser.parse_program()
