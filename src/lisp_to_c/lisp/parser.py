"""
Prefix Notation Recursive Descent Parser.

This module parses the token list produced by `lisp_to_c.lisp.lexer` into the
source AST defined in `nodes.py`. A single cursor is shared by every level of
recursion, so each call consumes exactly the tokens of one expression.
"""

import logging
from typing import List, Optional, Sequence

from lisp_to_c.errors import UnexpectedTokenError
from lisp_to_c.lisp.nodes import CallExpression, LispNode, NumberLiteral, Program, StringLiteral
from lisp_to_c.lisp.tokens import Paren, Token, TokenKind

logger = logging.getLogger(__name__)


class LispParser:
  def __init__(self, tokens: Sequence[Token]):
    self.tokens = list(tokens)
    self.pos = 0

  def peek(self) -> Optional[Token]:
    if self.pos >= len(self.tokens):
      return None
    return self.tokens[self.pos]

  def consume(self) -> Token:
    token = self.peek()
    if token is None:
      raise UnexpectedTokenError(None, self.pos)
    self.pos += 1
    return token

  def parse(self) -> Program:
    body: List[LispNode] = []
    while self.peek() is not None:
      body.append(self.parse_expression())
    logger.debug("Parsed %d top-level expressions", len(body))
    return Program(body=body)

  def parse_expression(self) -> LispNode:
    """
    Parses one literal or one parenthesized call at the cursor.

    Raises:
        UnexpectedTokenError: On a stray ``)``, a bare name, or early end of input.
    """
    token = self.consume()

    if token.kind == TokenKind.NUMBER:
      return NumberLiteral(token.text)

    if token.kind == TokenKind.STRING:
      return StringLiteral(token.text)

    if token.is_paren(Paren.OPEN):
      return self.parse_call()

    raise UnexpectedTokenError(token, self.pos - 1)

  def parse_call(self) -> CallExpression:
    # The opening paren has already been consumed.
    name_tok = self.consume()
    # Call names must be non-empty and unquoted.
    if name_tok.kind in (TokenKind.PAREN, TokenKind.STRING) or not name_tok.text:
      raise UnexpectedTokenError(name_tok, self.pos - 1)

    node = CallExpression(name=name_tok.text)
    while True:
      token = self.peek()
      if token is None:
        raise UnexpectedTokenError(None, self.pos)
      if token.is_paren(Paren.CLOSE):
        break
      node.params.append(self.parse_expression())

    self.consume()
    return node


def parse(tokens: Sequence[Token]) -> Program:
  """
  Builds the source AST from a token sequence.

  Args:
      tokens: Output of `lex`.

  Returns:
      The Program node. Empty input yields an empty body.
  """
  return LispParser(tokens).parse()
