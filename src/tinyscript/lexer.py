"""
Lexer for tinyscript.

Converts source text into a flat list of tokens for the parser.
Supports:
- Decimal integer literals
- Double-quoted string literals (verbatim, no escape sequences)
- Identifiers and the ten reserved keywords
- Single-character operators and delimiters
"""

import string
from typing import List, Optional, Iterator
from .tokens import Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS
from .errors import (
    error_unexpected_character,
    error_unterminated_string,
    error_number_too_large,
)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
BYTE_ORDER_MARK = "\ufeff"


class Lexer:
    """
    Tokenizer for tinyscript.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()

    Or for streaming:
        lexer = Lexer(source_code)
        for token in lexer:
            process(token)

    With ``strict_strings`` disabled an unterminated string literal runs to
    the end of the input instead of raising LexError.
    """

    def __init__(self, source: str, filename: Optional[str] = None,
                 strict_strings: bool = True):
        self.source = source
        self.filename = filename
        self.strict_strings = strict_strings
        self.pos = 0            # Current position in source
        self.line = 1           # Current line (1-indexed)
        self.column = 1         # Current column (1-indexed)
        self._lines: Optional[List[str]] = None  # Cached line list

    @property
    def lines(self) -> List[str]:
        """Lazy-load line list for error reporting."""
        if self._lines is None:
            self._lines = self.source.splitlines()
        return self._lines

    def get_source_line(self, line_num: int) -> Optional[str]:
        """Get a specific line of source (1-indexed)."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return None

    def _location(self) -> SourceLocation:
        """Get current source location."""
        return SourceLocation(self.line, self.column, self.pos, self.filename)

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos >= len(self.source):
            return '\0'
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return current character."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _is_at_end(self) -> bool:
        """Check if we've reached end of source."""
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._is_at_end():
            ch = self._peek()
            if not (ch.isspace() or ch == BYTE_ORDER_MARK):
                break
            self._advance()

    def _scan_number(self) -> Token:
        """Scan a maximal run of decimal digits."""
        start = self._location()
        while self._peek() in DIGITS:
            self._advance()
        lexeme = self.source[start.offset:self.pos]
        try:
            value = int(lexeme)
        except ValueError:
            # past sys.get_int_max_str_digits()
            raise error_number_too_large(start, self.get_source_line(start.line)) from None
        return Token(TokenType.NUMBER, value, start)

    def _scan_identifier_or_keyword(self) -> Token:
        """Scan a maximal run of letters."""
        start = self._location()
        while self._peek() in LETTERS:
            self._advance()

        lexeme = self.source[start.offset:self.pos]
        if lexeme in KEYWORDS:
            return Token(KEYWORDS[lexeme], None, start)
        return Token(TokenType.IDENTIFIER, lexeme, start)

    def _scan_string(self) -> Token:
        """Scan a string literal; its value is the raw text between the quotes."""
        start = self._location()
        self._advance()  # consume opening quote

        while not self._is_at_end() and self._peek() != '"':
            self._advance()

        value = self.source[start.offset + 1:self.pos]
        if self._is_at_end():
            if self.strict_strings:
                raise error_unterminated_string(start, self.get_source_line(start.line))
        else:
            self._advance()  # consume closing quote
        return Token(TokenType.STRING, value, start)

    def _scan_token(self) -> Optional[Token]:
        """Scan the next token, or return None at end of input."""
        self._skip_whitespace()
        if self._is_at_end():
            return None

        ch = self._peek()

        if ch in DIGITS:
            return self._scan_number()

        if ch in LETTERS:
            return self._scan_identifier_or_keyword()

        if ch == '"':
            return self._scan_string()

        start = self._location()
        if ch in SYMBOLS:
            self._advance()
            return Token(SYMBOLS[ch], None, start)

        raise error_unexpected_character(ch, start, self.get_source_line(start.line))

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, returning a list of tokens."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens."""
        while True:
            token = self._scan_token()
            if token is None:
                break
            yield token


def tokenize(source: str, filename: Optional[str] = None,
             strict_strings: bool = True) -> List[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: The source code to tokenize
        filename: Optional filename for error messages
        strict_strings: Raise on an unterminated string instead of
            truncating it at end of input

    Returns:
        List of tokens

    Raises:
        LexError: If tokenization fails
    """
    lexer = Lexer(source, filename, strict_strings=strict_strings)
    return lexer.tokenize()
