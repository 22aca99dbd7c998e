"""
Infix Notation Back-End.

Target AST nodes and the text renderer for ``callee(arg, ...);`` syntax.
"""

from lisp_to_c.c.nodes import (
  CallExpression,
  CNode,
  ExpressionStatement,
  Identifier,
  NumberLiteral,
  Program,
  StringLiteral,
)
from lisp_to_c.c.renderer import render, render_node

__all__ = [
  "CNode",
  "Program",
  "ExpressionStatement",
  "CallExpression",
  "Identifier",
  "NumberLiteral",
  "StringLiteral",
  "render",
  "render_node",
]
