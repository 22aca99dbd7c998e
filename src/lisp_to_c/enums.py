"""
Enumerations for lisp-to-c.
"""

from enum import Enum


class OutputFormat(str, Enum):
  """
  Pipeline stage whose output a run returns.
  """

  CODE = "code"  # Rendered infix source
  TOKENS = "tokens"  # JSON token list
  AST = "ast"  # JSON source tree
  TARGET_AST = "target_ast"  # JSON target tree
