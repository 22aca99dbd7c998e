"""
Infix Notation Renderer.

Turns the target AST into output text. Rendering is a pure recursive function
dispatched on the node tag; separators are fixed so output is deterministic.
"""

from typing import Callable, Dict

from lisp_to_c.c.nodes import (
  CallExpression,
  CNode,
  ExpressionStatement,
  Identifier,
  NumberLiteral,
  Program,
  StringLiteral,
)
from lisp_to_c.errors import UnknownNodeTypeError


def _render_program(node: Program) -> str:
  return "\n".join(render_node(n) for n in node.body)


def _render_statement(node: ExpressionStatement) -> str:
  return render_node(node.expression) + ";"


def _render_call(node: CallExpression) -> str:
  args = ", ".join(render_node(a) for a in node.arguments)
  return f"{render_node(node.callee)}({args})"


def _render_identifier(node: Identifier) -> str:
  return node.name


def _render_number(node: NumberLiteral) -> str:
  return node.value


def _render_string(node: StringLiteral) -> str:
  return f'"{node.value}"'


_RENDERERS: Dict[str, Callable[..., str]] = {
  "Program": _render_program,
  "ExpressionStatement": _render_statement,
  "CallExpression": _render_call,
  "Identifier": _render_identifier,
  "NumberLiteral": _render_number,
  "StringLiteral": _render_string,
}


def render_node(node: CNode) -> str:
  """
  Renders any target node.

  Args:
      node: The node to render.

  Returns:
      The source text for the node.

  Raises:
      UnknownNodeTypeError: If the node tag has no renderer.
  """
  # Source-tree nodes share tag names, so the base class is checked too.
  node_type = getattr(node, "type", type(node).__name__)
  handler = _RENDERERS.get(node_type) if isinstance(node, CNode) else None
  if handler is None:
    raise UnknownNodeTypeError(str(node_type))
  return handler(node)


def render(ast: Program) -> str:
  """
  Renders a target Program to text, one line per top-level element.
  """
  return render_node(ast)
