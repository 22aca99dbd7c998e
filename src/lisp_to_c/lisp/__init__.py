"""
Prefix Notation Front-End.

Lexer, token definitions, source AST nodes and the recursive descent parser
for ``(name arg...)`` call syntax.
"""

from lisp_to_c.lisp.lexer import LispLexer, lex
from lisp_to_c.lisp.nodes import CallExpression, LispNode, NumberLiteral, Program, StringLiteral
from lisp_to_c.lisp.parser import LispParser, parse
from lisp_to_c.lisp.tokens import Paren, Token, TokenKind

__all__ = [
  "LispLexer",
  "LispParser",
  "LispNode",
  "Program",
  "CallExpression",
  "NumberLiteral",
  "StringLiteral",
  "Token",
  "TokenKind",
  "Paren",
  "lex",
  "parse",
]
