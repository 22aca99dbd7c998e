"""
Prefix Notation Token Definitions.

Defines the Token Kinds produced by the Lexer and consumed by the Parser.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  PAREN = "paren"
  NAME = "name"
  NUMBER = "number"
  STRING = "string"


class Paren(str, Enum):
  """Enumeration of Parenthesis Symbols."""

  OPEN = "("
  CLOSE = ")"


@dataclass(frozen=True)
class Token:
  """
  A lexical unit.

  Attributes:
      kind: The token class.
      text: The literal text. String tokens hold their contents without quotes.
  """

  kind: TokenKind
  text: str

  def is_paren(self, symbol: Paren) -> bool:
    return self.kind == TokenKind.PAREN and self.text == symbol.value

  def to_dict(self) -> Dict[str, str]:
    """Serializes to the `{"type", "value"}` shape."""
    return {"type": self.kind.value, "value": self.text}
