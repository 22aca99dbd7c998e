"""
Compiler Error Taxonomy.

Every stage fails fast by raising one of these exceptions. They all derive
from `CompileError` so callers can catch the whole family at once, while the
structured attributes (offending character, token, position) stay available
for reporting.
"""

from typing import Any, Optional


class CompileError(Exception):
  """Base class for all pipeline failures."""


class LexError(CompileError):
  """
  Raised when the lexer meets a character it cannot classify.

  Attributes:
      character: The offending character.
      position: Zero-based offset of the character in the source text.
  """

  def __init__(self, character: str, position: int, message: Optional[str] = None):
    self.character = character
    self.position = position
    super().__init__(message or f"Unrecognized character {character!r} at position {position}")


class UnterminatedStringError(LexError):
  """Raised when the source ends before a string literal is closed."""

  def __init__(self, position: int):
    super().__init__('"', position, f"Unterminated string literal starting at position {position}")


class UnexpectedTokenError(CompileError):
  """
  Raised when the token stream violates the call grammar.

  Attributes:
      token: The offending token, or None if the stream ended early.
      position: Index of the offending token in the token sequence.
  """

  def __init__(self, token: Optional[Any], position: int):
    self.token = token
    self.position = position
    if token is None:
      msg = f"Unexpected end of input at token {position}"
    else:
      msg = f"Unexpected token {token.kind.value} ({token.text!r}) at token {position}"
    super().__init__(msg)


class UnknownNodeTypeError(CompileError):
  """Raised when a transform or render stage has no rule for a node tag."""

  def __init__(self, node_type: str):
    self.node_type = node_type
    super().__init__(f"No rule defined for node type '{node_type}'")
