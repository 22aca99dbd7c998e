"""
Tests for the Prefix Notation Lexer.

Verifies:
1. Token kinds and text for each character class.
2. Greedy runs and whitespace skipping.
3. Error reporting for unknown characters and unterminated strings.
"""

import pytest

from lisp_to_c.errors import LexError, UnterminatedStringError
from lisp_to_c.lisp.lexer import LispLexer, lex
from lisp_to_c.lisp.tokens import Token, TokenKind


def test_reference_program(reference_tokens):
  tokens = lex("(add 2 (subtract 4 2))")
  assert [t.to_dict() for t in tokens] == reference_tokens


def test_empty_input():
  assert lex("") == []


def test_whitespace_only_emits_nothing():
  assert lex(" \t\n\r  ") == []


def test_runs_are_greedy():
  tokens = lex("12345 abcXYZ")
  assert tokens == [Token(TokenKind.NUMBER, "12345"), Token(TokenKind.NAME, "abcXYZ")]


def test_digit_and_letter_runs_split_without_space():
  """A digit run ends where letters begin, and vice versa."""
  tokens = lex("12ab34")
  assert [(t.kind, t.text) for t in tokens] == [
    (TokenKind.NUMBER, "12"),
    (TokenKind.NAME, "ab"),
    (TokenKind.NUMBER, "34"),
  ]


def test_string_excludes_quotes():
  tokens = lex('(foo "bar baz")')
  assert tokens[2] == Token(TokenKind.STRING, "bar baz")


def test_empty_string_literal():
  assert lex('""') == [Token(TokenKind.STRING, "")]


def test_string_keeps_inner_characters_verbatim():
  """Characters outside the lexer classes are allowed inside strings."""
  tokens = lex('"a@b (c) 1"')
  assert tokens == [Token(TokenKind.STRING, "a@b (c) 1")]


def test_parens_are_single_tokens():
  tokens = lex("(())")
  assert [t.text for t in tokens] == ["(", "(", ")", ")"]
  assert all(t.kind == TokenKind.PAREN for t in tokens)


def test_unknown_character_reports_position():
  with pytest.raises(LexError) as excinfo:
    lex("(add 1 @)")

  assert excinfo.value.character == "@"
  assert excinfo.value.position == 7


@pytest.mark.parametrize("char", ["@", "-", "_", "+", "'", "é"])
def test_unrecognized_characters(char):
  with pytest.raises(LexError):
    lex(char)


def test_unterminated_string():
  with pytest.raises(UnterminatedStringError) as excinfo:
    lex('(foo "bar)')

  # The error is also a LexError, pointing at the opening quote.
  assert isinstance(excinfo.value, LexError)
  assert excinfo.value.position == 5


def test_lexer_instance_is_reusable():
  lexer = LispLexer()
  assert lexer.tokenize("(a)") == lexer.tokenize("(a)")


def test_tokens_are_immutable():
  token = Token(TokenKind.NAME, "add")
  with pytest.raises(AttributeError):
    token.text = "sub"
