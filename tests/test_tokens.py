"""Test single-character symbol tokens and the TokenKind taxonomy."""

import pytest

from nlex.tokens import SYMBOLS, TokenKind, position_at, split_lines

from .conftest import assert_kinds


class TestSymbols:
    @pytest.mark.parametrize(("ch", "kind"), sorted(SYMBOLS.items()))
    def test_every_symbol_lexes_to_its_kind(self, lex, ch, kind):
        tokens = lex(ch)
        assert_kinds(tokens, [kind])
        assert tokens[0].text == ch

    def test_brackets_of_all_families(self, lex):
        tokens = lex("(){}[]<>")
        assert_kinds(
            tokens,
            [
                TokenKind.LPAREN,
                TokenKind.RPAREN,
                TokenKind.LBRACE,
                TokenKind.RBRACE,
                TokenKind.LBRACKET,
                TokenKind.RBRACKET,
                TokenKind.LESS_THAN,
                TokenKind.GREATER_THAN,
            ],
        )

    def test_currency_and_typographic(self, lex):
        tokens = lex("$€¤§")
        assert_kinds(
            tokens,
            [
                TokenKind.DOLLAR_SIGN,
                TokenKind.EURO_SIGN,
                TokenKind.CURRENCY_SIGN,
                TokenKind.SECTION_SIGN,
            ],
        )

    def test_micro_sign_is_a_symbol(self, lex):
        tokens = lex("5µ")
        assert_kinds(tokens, [TokenKind.NUMERIC_LITERAL, TokenKind.MICRO])

    def test_adjacent_symbols_stay_separate(self, lex):
        tokens = lex("!=")
        assert_kinds(tokens, [TokenKind.EXCLAMATION, TokenKind.EQUALS])


class TestOffsets:
    def test_start_and_end(self, lex):
        tokens = lex("ab;c")
        assert [(t.start, t.end) for t in tokens] == [(0, 2), (2, 3), (3, 4)]

    def test_text_matches_source_slice(self, lex):
        source = "x += 'y' ** 2"
        for t in lex(source):
            assert source[t.start : t.end] == t.text


class TestAliases:
    def test_bitwise_and_is_ampersand(self):
        assert TokenKind.BITWISE_AND is TokenKind.AMPERSAND

    def test_bitwise_or_is_pipe(self):
        assert TokenKind.BITWISE_OR is TokenKind.PIPE

    def test_other_bitwise_kinds_are_distinct(self):
        kinds = {
            TokenKind.BITWISE_EXCLUSIVE_AND,
            TokenKind.BITWISE_EXCLUSIVE_OR,
            TokenKind.BITWISE_SHIFT_RIGHT,
            TokenKind.BITWISE_SHIFT_LEFT,
            TokenKind.AMPERSAND,
            TokenKind.PIPE,
        }
        assert len(kinds) == 6


class TestPositionAt:
    def test_first_line(self):
        pos = position_at("hello", 3)
        assert (pos.line, pos.column, pos.offset) == (1, 4, 3)

    def test_after_newline(self):
        pos = position_at("ab\ncd", 3)
        assert (pos.line, pos.column) == (2, 1)

    def test_offset_zero(self):
        pos = position_at("", 0)
        assert (pos.line, pos.column) == (1, 1)

    def test_lone_carriage_return(self):
        pos = position_at("ab\rcd", 4)
        assert (pos.line, pos.column) == (2, 2)

    def test_crlf_is_one_break(self):
        pos = position_at("ab\r\ncd", 4)
        assert (pos.line, pos.column) == (2, 1)

    def test_form_feed_does_not_break(self):
        pos = position_at("a\x0cb", 2)
        assert (pos.line, pos.column) == (1, 3)


class TestSplitLines:
    def test_all_break_styles(self):
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_other_separators_kept(self):
        assert split_lines("a\x0cb c") == ["a\x0cb c"]
