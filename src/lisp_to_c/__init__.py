"""
lisp-to-c Package.

A small compiler that translates parenthesized prefix calls into infix calls::

    (add 2 (subtract 4 2))   ->   add(2, subtract(4, 2));

Usage
-----

.. code-block:: python

    import lisp_to_c
    print(lisp_to_c.compile('(concat "a" (upper "b"))'))
    # concat("a", upper("b"));

Each stage is exposed separately (`lex`, `parse`, `transform`, `render`) so
intermediate results can be inspected. For a result object instead of
exceptions, use `Engine`:

.. code-block:: python

    from lisp_to_c import Engine, RuntimeConfig

    res = Engine(RuntimeConfig(output_format="tokens")).run("(add 1 2)")
    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from lisp_to_c.config import RuntimeConfig
from lisp_to_c.core.engine import ConversionResult, Engine
from lisp_to_c.core.pipeline import compile, lex, parse, render, transform
from lisp_to_c.errors import (
  CompileError,
  LexError,
  UnexpectedTokenError,
  UnknownNodeTypeError,
  UnterminatedStringError,
)

__version__ = "0.1.0"

__all__ = [
  "__version__",
  "compile",
  "lex",
  "parse",
  "transform",
  "render",
  "Engine",
  "ConversionResult",
  "RuntimeConfig",
  "CompileError",
  "LexError",
  "UnterminatedStringError",
  "UnexpectedTokenError",
  "UnknownNodeTypeError",
]
