"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- The reference token/AST fixtures for ``(add 2 (subtract 4 2))``.
- Console isolation so logging tests do not leak handlers.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'lisp_to_c' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lisp_to_c.utils.console import reset_console  # noqa: E402


@pytest.fixture
def reference_tokens():
  """Token stream of the reference program, in the `{"type", "value"}` shape."""
  return [
    {"type": "paren", "value": "("},
    {"type": "name", "value": "add"},
    {"type": "number", "value": "2"},
    {"type": "paren", "value": "("},
    {"type": "name", "value": "subtract"},
    {"type": "number", "value": "4"},
    {"type": "number", "value": "2"},
    {"type": "paren", "value": ")"},
    {"type": "paren", "value": ")"},
  ]


@pytest.fixture
def reference_ast():
  """Source AST of the reference program."""
  return {
    "type": "Program",
    "body": [
      {
        "type": "CallExpression",
        "name": "add",
        "params": [
          {"type": "NumberLiteral", "value": "2"},
          {
            "type": "CallExpression",
            "name": "subtract",
            "params": [
              {"type": "NumberLiteral", "value": "4"},
              {"type": "NumberLiteral", "value": "2"},
            ],
          },
        ],
      }
    ],
  }


@pytest.fixture
def reference_target_ast():
  """Target AST of the reference program."""
  return {
    "type": "Program",
    "body": [
      {
        "type": "ExpressionStatement",
        "expression": {
          "type": "CallExpression",
          "callee": {"type": "Identifier", "name": "add"},
          "arguments": [
            {"type": "NumberLiteral", "value": "2"},
            {
              "type": "CallExpression",
              "callee": {"type": "Identifier", "name": "subtract"},
              "arguments": [
                {"type": "NumberLiteral", "value": "4"},
                {"type": "NumberLiteral", "value": "2"},
              ],
            },
          ],
        },
      }
    ],
  }


@pytest.fixture
def clean_console():
  """Ensures console is reset to the default backend around a test."""
  reset_console()
  yield
  reset_console()
