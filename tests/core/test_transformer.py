"""
Tests for the Source-to-Target Transformer.

Verifies:
1. Output shape for the reference program.
2. Only top-level calls are wrapped in ExpressionStatement.
3. The input tree is left untouched and never shared with the output.
4. Nesting depth is preserved.
"""

import copy

import pytest

from lisp_to_c import c, lisp
from lisp_to_c.core.transformer import transform
from lisp_to_c.errors import UnknownNodeTypeError
from lisp_to_c.lisp.lexer import lex
from lisp_to_c.lisp.parser import parse


def source_depth(node):
  if isinstance(node, lisp.CallExpression):
    return 1 + max((source_depth(p) for p in node.params), default=0)
  return 0


def target_depth(node):
  if isinstance(node, c.ExpressionStatement):
    return target_depth(node.expression)
  if isinstance(node, c.CallExpression):
    return 1 + max((target_depth(a) for a in node.arguments), default=0)
  return 0


def test_reference_program(reference_ast, reference_target_ast):
  ast = parse(lex("(add 2 (subtract 4 2))"))
  assert ast.to_dict() == reference_ast
  assert transform(ast).to_dict() == reference_target_ast


def test_empty_program():
  assert transform(lisp.Program()) == c.Program(body=[])


def test_top_level_literals_stay_bare():
  new_ast = transform(parse(lex('1 "a"')))
  assert new_ast.body == [c.NumberLiteral("1"), c.StringLiteral("a")]


def test_every_top_level_call_is_a_statement():
  new_ast = transform(parse(lex("(a) (b (c))")))
  assert [n.type for n in new_ast.body] == ["ExpressionStatement", "ExpressionStatement"]

  inner = new_ast.body[1].expression.arguments[0]
  assert inner == c.CallExpression(callee=c.Identifier("c"), arguments=[])


def test_nested_calls_land_in_parent_arguments():
  new_ast = transform(parse(lex("(f (g 1) 2 (h (i 3)))")))
  f = new_ast.body[0].expression
  assert [a.type for a in f.arguments] == ["CallExpression", "NumberLiteral", "CallExpression"]
  assert f.arguments[0].arguments == [c.NumberLiteral("1")]
  assert f.arguments[2].arguments[0].arguments == [c.NumberLiteral("3")]


def test_input_is_not_mutated():
  ast = parse(lex('(add 2 (subtract 4 "x"))'))
  before = copy.deepcopy(ast)

  transform(ast)

  assert ast == before
  assert not any(hasattr(n, "_context") for n in [ast, ast.body[0], ast.body[0].params[1]])


def test_repeated_transforms_build_fresh_trees():
  ast = parse(lex("(f 1)"))
  first = transform(ast)
  second = transform(ast)

  assert first == second
  assert first is not second
  assert first.body[0].expression.arguments is not second.body[0].expression.arguments


@pytest.mark.parametrize("source", ["1", "(a)", "(a (b))", "(a 1 (b (c 2) (d)))", "(a) (b (c (d (e))))"])
def test_nesting_depth_preserved(source):
  ast = parse(lex(source))
  new_ast = transform(ast)

  assert [source_depth(n) for n in ast.body] == [target_depth(n) for n in new_ast.body]


def test_unknown_node_type():
  with pytest.raises(UnknownNodeTypeError):
    transform(lisp.Program(body=[c.Identifier("x")]))
