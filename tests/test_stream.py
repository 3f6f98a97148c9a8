"""Test the pull-based token stream and single-use lexer behaviour."""

import logging

import pytest

from nlex.errors import UnrecognizedCharacterError, UnterminatedLiteralError
from nlex.lexer import Lexer
from nlex.tokens import TokenKind


class TestNextToken:
    def test_pulls_one_at_a_time(self):
        lexer = Lexer("a+b")
        assert lexer.next_token().text == "a"
        assert lexer.next_token().kind == TokenKind.PLUS
        assert lexer.next_token().text == "b"
        assert lexer.next_token() is None

    def test_exhausted_stays_exhausted(self):
        lexer = Lexer("x")
        lexer.next_token()
        assert lexer.next_token() is None
        assert lexer.next_token() is None

    def test_empty_source(self):
        assert Lexer("").next_token() is None


class TestIteration:
    def test_iterates_tokens(self):
        kinds = [t.kind for t in Lexer("x = 1")]
        assert kinds == [
            TokenKind.IDENTIFIER,
            TokenKind.WHITESPACE,
            TokenKind.EQUALS,
            TokenKind.WHITESPACE,
            TokenKind.NUMERIC_LITERAL,
        ]

    def test_mixed_pull_then_begin(self):
        lexer = Lexer("a b c")
        first = lexer.next_token()
        rest = lexer.begin()
        assert first.text == "a"
        assert [t.text for t in rest] == [" ", "b", " ", "c"]


class TestBegin:
    def test_returns_all_tokens(self):
        tokens = Lexer("x++").begin()
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.INCREMENT]

    def test_second_call_is_empty(self):
        lexer = Lexer("x++")
        lexer.begin()
        assert lexer.begin() == []

    def test_fresh_lexer_repeats(self):
        assert Lexer("x++").begin() == Lexer("x++").begin()


class TestLogging:
    def test_logs_exhaustion(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="nlex.lexer"):
            Lexer("ab", "prog.n").begin()
        assert "prog.n: exhausted after 1 tokens" in caplog.text

    def test_logs_error(self, caplog):
        lexer = Lexer("'x", "prog.n")
        with caplog.at_level(logging.DEBUG, logger="nlex.lexer"):
            with pytest.raises(UnterminatedLiteralError):
                lexer.begin()
        assert "lex error at offset 0" in caplog.text


class TestAfterError:
    def test_unrecognized_character_stops_the_stream(self):
        lexer = Lexer("a\x00b")
        assert lexer.next_token().text == "a"
        with pytest.raises(UnrecognizedCharacterError):
            lexer.next_token()
        assert lexer.next_token() is None
        assert lexer.begin() == []

    def test_unterminated_literal_stops_the_stream(self):
        lexer = Lexer("x 'y")
        with pytest.raises(UnterminatedLiteralError):
            lexer.begin()
        assert lexer.begin() == []

    def test_iteration_ends_after_error(self):
        lexer = Lexer("\x00 more")
        with pytest.raises(UnrecognizedCharacterError):
            next(lexer)
        assert list(lexer) == []

    def test_fresh_lexer_can_resume_past_error(self):
        source = "a\x00b"
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            Lexer(source).begin()
        rest = Lexer(source[exc_info.value.offset + 1 :]).begin()
        assert [t.text for t in rest] == ["b"]
