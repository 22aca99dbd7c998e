"""
Prefix Notation Lexer.

Provides a Regex-table Lexer (`LispLexer`) that decomposes source text such as
``(add 2 (subtract 4 2))`` into a list of typed `Token` objects.

Character classes are tried in a fixed priority order:
parenthesis, whitespace, digit run, quoted string, letter run.
"""

import logging
import re
from typing import List

from lisp_to_c.errors import LexError, UnterminatedStringError
from lisp_to_c.lisp.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Sentinel kind for whitespace, which is consumed without emitting a token.
_SKIP = None


class LispLexer:
  """
  Single-cursor Lexer for parenthesized prefix notation.
  """

  # Order matters for priority. Runs are greedy (longest match).
  PATTERNS = [
    (TokenKind.PAREN, r"[()]"),
    (_SKIP, r"\s"),
    (TokenKind.NUMBER, r"[0-9]+"),
    (TokenKind.STRING, r'"([^"]*)"'),
    (TokenKind.NAME, r"[a-zA-Z]+"),
  ]

  def __init__(self) -> None:
    """Initializes the lexer with compiled patterns."""
    self.regex_pairs = [(kind, re.compile(pattern)) for kind, pattern in self.PATTERNS]

  def tokenize(self, text: str) -> List[Token]:
    """
    Tokenizes the input string.

    Args:
        text: Raw source code.

    Returns:
        Tokens in source order.

    Raises:
        UnterminatedStringError: If a quote is never closed.
        LexError: If an unrecognized character is encountered.
    """
    tokens: List[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
      for kind, regex in self.regex_pairs:
        match = regex.match(text, pos)
        if not match:
          continue

        if kind is TokenKind.STRING:
          tokens.append(Token(kind, match.group(1)))
        elif kind is not _SKIP:
          tokens.append(Token(kind, match.group(0)))

        pos = match.end()
        break
      else:
        if text[pos] == '"':
          raise UnterminatedStringError(pos)
        raise LexError(text[pos], pos)

    logger.debug("Lexed %d tokens from %d characters", len(tokens), length)
    return tokens


def lex(source: str) -> List[Token]:
  """
  Converts source text into an ordered list of tokens.

  Args:
      source: The complete program text.

  Returns:
      List of Tokens.
  """
  return LispLexer().tokenize(source)
