"""
Source AST Traverser.

Walks a source tree depth-first in pre-order, invoking per-tag visitor hooks.

Two tables drive the walk and are deliberately independent:

- **Traversal rules** (`TRAVERSAL_RULES`) decide which children of a node are
  visited and in what order.
- **Visitor rules** (the mapping passed to `traverse`) decide what to do on
  entering and leaving a node.

A node type can therefore be walked without being visited, or vice versa.

Context threading
-----------------

`enter(node, parent, context)` receives the context handed down by the
parent and returns the context for the node's own children. `exit` receives
the same context `enter` did. The context is an ordinary argument, so a walk
keeps no state on the nodes themselves.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from lisp_to_c.errors import UnknownNodeTypeError
from lisp_to_c.lisp.nodes import LispNode

EnterHook = Callable[[LispNode, Optional[LispNode], Any], Any]
ExitHook = Callable[[LispNode, Optional[LispNode], Any], None]


@dataclass(frozen=True)
class NodeVisitor:
  """
  Pair of optional hooks for one node tag.

  Attributes:
      enter: Called before children. Its return value is the children's context.
      exit: Called after children.
  """

  enter: Optional[EnterHook] = None
  exit: Optional[ExitHook] = None


TRAVERSAL_RULES: Dict[str, Callable[[Any], Sequence[LispNode]]] = {
  "Program": lambda node: node.body,
  "CallExpression": lambda node: node.params,
  "NumberLiteral": lambda node: (),
  "StringLiteral": lambda node: (),
}


def traverse(ast: LispNode, visitors: Mapping[str, NodeVisitor], context: Any = None) -> None:
  """
  Walks `ast` and dispatches to `visitors` by node tag.

  Args:
      ast: Root of the source tree (normally a Program).
      visitors: Mapping of node tag to hooks. Missing tags are walked silently.
      context: Initial context handed to the root.

  Raises:
      UnknownNodeTypeError: If a node has no traversal rule.
  """
  _traverse_node(ast, None, visitors, context)


def _traverse_node(
  node: LispNode,
  parent: Optional[LispNode],
  visitors: Mapping[str, NodeVisitor],
  context: Any,
) -> None:
  node_type = node.type if isinstance(node, LispNode) else type(node).__name__
  children_of = TRAVERSAL_RULES.get(node_type) if isinstance(node, LispNode) else None
  if children_of is None:
    raise UnknownNodeTypeError(node_type)

  methods = visitors.get(node_type)
  child_context = context
  if methods and methods.enter:
    child_context = methods.enter(node, parent, context)

  for child in children_of(node):
    _traverse_node(child, node, visitors, child_context)

  if methods and methods.exit:
    methods.exit(node, parent, context)
