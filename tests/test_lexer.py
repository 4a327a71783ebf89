"""
Unit tests for the tinyscript lexer.
"""

import sys

import pytest

from tinyscript import tokenize, Lexer, Token, TokenType, LexError, KEYWORDS


class TestLexerBasics:
    """Test basic lexer functionality."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only source produces no tokens."""
        assert tokenize("   \t \n\r\n  ") == []

    def test_let_statement(self):
        """Basic let statement tokenization."""
        tokens = tokenize("let x = 5")
        assert tokens == [
            Token(TokenType.LET),
            Token(TokenType.IDENTIFIER, "x"),
            Token(TokenType.EQUAL),
            Token(TokenType.NUMBER, 5),
        ]

    def test_location_not_part_of_equality(self):
        """Tokens compare by type and value only."""
        first = tokenize("x")[0]
        second = tokenize("   x")[0]
        assert first == second
        assert first.location != second.location

    def test_position_tracking(self):
        """Token positions are tracked correctly."""
        tokens = tokenize("let x = 5")
        assert tokens[0].location.line == 1
        assert tokens[0].location.column == 1
        assert tokens[1].location.column == 5

    def test_multiline_position_tracking(self):
        """Position tracking across multiple lines."""
        tokens = tokenize("let x = 5\nlet y = 10")
        let_tokens = [t for t in tokens if t.type == TokenType.LET]
        assert let_tokens[0].location.line == 1
        assert let_tokens[1].location.line == 2
        assert let_tokens[1].location.column == 1

    def test_byte_order_mark_skipped(self):
        """A leading byte-order mark counts as whitespace."""
        assert tokenize("\ufeffprint 1") == [Token(TokenType.PRINT), Token(TokenType.NUMBER, 1)]

    def test_streaming(self):
        """The lexer can be iterated lazily."""
        types = [t.type for t in Lexer("print 1")]
        assert types == [TokenType.PRINT, TokenType.NUMBER]


class TestNumbers:
    """Test number literals."""

    def test_integer(self):
        tokens = tokenize("12345")
        assert tokens == [Token(TokenType.NUMBER, 12345)]
        assert isinstance(tokens[0].value, int)

    def test_leading_minus_is_separate(self):
        """No negative literals: '-' is its own token."""
        assert tokenize("-3") == [Token(TokenType.MINUS), Token(TokenType.NUMBER, 3)]

    def test_no_fractions(self):
        """A '.' is not part of a number and is not a valid character."""
        with pytest.raises(LexError):
            tokenize("1.5")

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                        reason="interpreter has no integer digit limit")
    def test_literal_too_large(self):
        """A literal past the host digit limit is a lex error, not a crash."""
        with pytest.raises(LexError) as exc_info:
            tokenize("print " + "1" * 5000)
        assert exc_info.value.code == "E003"
        assert exc_info.value.diagnostic.location.column == 7

    def test_number_then_letters(self):
        """Digits and letters split into separate tokens."""
        assert tokenize("12ab") == [
            Token(TokenType.NUMBER, 12),
            Token(TokenType.IDENTIFIER, "ab"),
        ]


class TestIdentifiersAndKeywords:
    """Test identifier and keyword scanning."""

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keywords(self, word):
        """Each reserved word has its own token type and no value."""
        tokens = tokenize(word)
        assert len(tokens) == 1
        assert tokens[0].type == KEYWORDS[word]
        assert tokens[0].value is None

    def test_keyword_prefix_is_identifier(self):
        """Only an exact match is a keyword."""
        assert tokenize("letter") == [Token(TokenType.IDENTIFIER, "letter")]
        assert tokenize("Print") == [Token(TokenType.IDENTIFIER, "Print")]

    def test_no_digits_in_names(self):
        assert tokenize("abc1") == [
            Token(TokenType.IDENTIFIER, "abc"),
            Token(TokenType.NUMBER, 1),
        ]

    def test_underscore_rejected(self):
        with pytest.raises(LexError):
            tokenize("foo_bar")


class TestStringLiterals:
    """Test string literal handling."""

    def test_simple_string(self):
        tokens = tokenize('"hello world"')
        assert tokens == [Token(TokenType.STRING, "hello world")]

    def test_empty_string(self):
        assert tokenize('""') == [Token(TokenType.STRING, "")]

    def test_no_escape_processing(self):
        """Backslashes are kept verbatim."""
        tokens = tokenize(r'"a\nb"')
        assert tokens[0].value == "a\\nb"

    def test_string_spans_lines(self):
        tokens = tokenize('"one\ntwo" x')
        assert tokens[0].value == "one\ntwo"
        assert tokens[1].location.line == 2

    def test_keywords_inside_string(self):
        assert tokenize('"let if"') == [Token(TokenType.STRING, "let if")]

    def test_unterminated_string(self):
        """Unterminated string raises E002."""
        with pytest.raises(LexError) as exc_info:
            tokenize('print "oops')
        assert exc_info.value.code == "E002"
        assert exc_info.value.diagnostic.location.column == 7

    def test_unterminated_string_truncates_when_lenient(self):
        """The lenient mode keeps everything up to end of input."""
        tokens = tokenize('print "oops', strict_strings=False)
        assert tokens == [Token(TokenType.PRINT), Token(TokenType.STRING, "oops")]


class TestSymbols:
    """Test operator and delimiter tokens."""

    def test_all_symbols(self):
        tokens = tokenize("= + - * / ( ) { } , > < ! & |")
        assert [t.type for t in tokens] == [
            TokenType.EQUAL, TokenType.PLUS, TokenType.MINUS,
            TokenType.STAR, TokenType.SLASH,
            TokenType.LPAREN, TokenType.RPAREN,
            TokenType.LBRACE, TokenType.RBRACE,
            TokenType.COMMA, TokenType.GREATER, TokenType.LESS,
            TokenType.BANG, TokenType.AMPERSAND, TokenType.PIPE,
        ]

    def test_no_two_character_operators(self):
        """'==' and '!=' are two tokens each."""
        assert [t.type for t in tokenize("==")] == [TokenType.EQUAL, TokenType.EQUAL]
        assert [t.type for t in tokenize("!=")] == [TokenType.BANG, TokenType.EQUAL]

    def test_no_whitespace_needed(self):
        tokens = tokenize("add(1,x)")
        assert tokens == [
            Token(TokenType.IDENTIFIER, "add"),
            Token(TokenType.LPAREN),
            Token(TokenType.NUMBER, 1),
            Token(TokenType.COMMA),
            Token(TokenType.IDENTIFIER, "x"),
            Token(TokenType.RPAREN),
        ]

    @pytest.mark.parametrize("char", ["@", "#", ";", ".", "'", "%", "["])
    def test_unexpected_character(self, char):
        """Unknown characters raise E001."""
        with pytest.raises(LexError) as exc_info:
            tokenize(f"let x = 1 {char}")
        assert exc_info.value.code == "E001"
        assert "unexpected character" in exc_info.value.diagnostic.message

    def test_error_points_at_character(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("print 1\nprint $")
        location = exc_info.value.diagnostic.location
        assert (location.line, location.column) == (2, 7)
        assert "print $" in str(exc_info.value)
