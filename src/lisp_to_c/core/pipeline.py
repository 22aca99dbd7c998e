"""
Compilation Pipeline.

Composes the four stages in order. Each stage is also importable on its own:

.. code-block:: python

    from lisp_to_c.core.pipeline import lex, parse, transform, render

    tokens = lex("(add 2 (subtract 4 2))")
    code = render(transform(parse(tokens)))
    # add(2, subtract(4, 2));
"""

from lisp_to_c.c.renderer import render
from lisp_to_c.core.transformer import transform
from lisp_to_c.lisp.lexer import lex
from lisp_to_c.lisp.parser import parse

__all__ = ["lex", "parse", "transform", "render", "compile"]


def compile(source: str) -> str:
  """
  Translates prefix call notation into infix call notation.

  Errors from any stage propagate unchanged; no partial output is produced.

  Args:
      source: The complete program text.

  Returns:
      The rendered program, one line per top-level element.
  """
  return render(transform(parse(lex(source))))
