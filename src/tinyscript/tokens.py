"""
Token types for the tinyscript lexer.

Token type categories follow the error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E4xx: Runtime errors
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """All token types recognized by the lexer."""

    # --- Literals ---
    NUMBER = auto()             # 42
    STRING = auto()             # "hello"
    IDENTIFIER = auto()         # user-defined names

    # --- Keywords ---
    LET = auto()                # let
    FUNC = auto()               # func
    RETURN = auto()             # return
    IF = auto()                 # if
    THEN = auto()               # then
    ELSE = auto()               # else
    WHILE = auto()              # while
    TRY = auto()                # try
    CATCH = auto()              # catch
    PRINT = auto()              # print

    # --- Operators ---
    EQUAL = auto()              # = (declaration and equality)
    PLUS = auto()               # +
    MINUS = auto()              # -
    STAR = auto()               # *
    SLASH = auto()              # /
    GREATER = auto()            # >
    LESS = auto()               # <
    BANG = auto()               # ! (negation and inequality)
    AMPERSAND = auto()          # & (reserved, no grammar role)
    PIPE = auto()               # | (reserved, no grammar role)

    # --- Delimiters ---
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    LBRACE = auto()             # {
    RBRACE = auto()             # }
    COMMA = auto()              # ,


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in source code."""
    line: int           # 1-indexed line number
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer.

    Only the type and value take part in equality; the location is kept
    for error messages.
    """
    type: TokenType
    value: Any = None       # int for NUMBER, str for STRING and IDENTIFIER
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.type in VALUED_TOKENS:
            return f"{self.type.name}({self.value!r})"
        return self.type.name


VALUED_TOKENS = frozenset({TokenType.NUMBER, TokenType.STRING, TokenType.IDENTIFIER})


# Keyword mapping - maps exact source text to token type
KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "func": TokenType.FUNC,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "try": TokenType.TRY,
    "catch": TokenType.CATCH,
    "print": TokenType.PRINT,
}


SYMBOLS: dict[str, TokenType] = {
    '=': TokenType.EQUAL,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ',': TokenType.COMMA,
    '>': TokenType.GREATER,
    '<': TokenType.LESS,
    '!': TokenType.BANG,
    '&': TokenType.AMPERSAND,
    '|': TokenType.PIPE,
}


# Human-readable spelling used in parser messages
SPELLINGS: dict[TokenType, str] = {
    **{token_type: f"'{text}'" for text, token_type in KEYWORDS.items()},
    **{token_type: f"'{char}'" for char, token_type in SYMBOLS.items()},
    TokenType.NUMBER: "number",
    TokenType.STRING: "string",
    TokenType.IDENTIFIER: "identifier",
}


def describe(token: Token) -> str:
    """Describe a token for an error message."""
    if token.type in VALUED_TOKENS:
        return f"{SPELLINGS[token.type]} {token.value!r}"
    return SPELLINGS[token.type]
