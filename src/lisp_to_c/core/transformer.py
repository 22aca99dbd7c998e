"""
Source-to-Target AST Transformer.

Rewrites the call/param source tree into a freshly built callee/argument
target tree. The source tree is only read.

Each rewrite rule appends its output to an accumulation handle (a list owned
by the target node under construction) and returns the handle its children
must append into. The handles travel down the walk as the traverser context,
so nested calls land in the argument list of their rewritten parent.
"""

import logging
from typing import Dict, List, Optional

from lisp_to_c import c
from lisp_to_c import lisp
from lisp_to_c.core.traverser import NodeVisitor, traverse

logger = logging.getLogger(__name__)


def _rewrite_number(node: lisp.NumberLiteral, parent: Optional[lisp.LispNode], handle: List[c.CNode]) -> None:
  handle.append(c.NumberLiteral(node.value))


def _rewrite_string(node: lisp.StringLiteral, parent: Optional[lisp.LispNode], handle: List[c.CNode]) -> None:
  handle.append(c.StringLiteral(node.value))


def _rewrite_call(
  node: lisp.CallExpression, parent: Optional[lisp.LispNode], handle: List[c.CNode]
) -> List[c.CNode]:
  expression = c.CallExpression(callee=c.Identifier(node.name))

  # Only direct children of Program become statements.
  if parent is not None and parent.type == "CallExpression":
    handle.append(expression)
  else:
    handle.append(c.ExpressionStatement(expression))

  return expression.arguments


REWRITE_RULES: Dict[str, NodeVisitor] = {
  "NumberLiteral": NodeVisitor(enter=_rewrite_number),
  "StringLiteral": NodeVisitor(enter=_rewrite_string),
  "CallExpression": NodeVisitor(enter=_rewrite_call),
}


def transform(ast: lisp.Program) -> c.Program:
  """
  Builds the target tree for a source Program.

  Args:
      ast: The source AST root.

  Returns:
      A new target Program. Element order mirrors the source exactly.

  Raises:
      UnknownNodeTypeError: If the tree holds a node with no traversal rule.
  """
  new_ast = c.Program()
  traverse(ast, REWRITE_RULES, context=new_ast.body)
  logger.debug("Transformed %d top-level nodes", len(new_ast.body))
  return new_ast
