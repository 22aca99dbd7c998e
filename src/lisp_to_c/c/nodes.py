"""
Target Abstract Syntax Tree Nodes.

This module defines the callee/argument shaped tree produced by the
Transformer and consumed by the Renderer. Only top-level calls are wrapped in
`ExpressionStatement`; nested calls stay bare inside `arguments`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class CNode(ABC):
  """Abstract base class for all target AST nodes."""

  @property
  def type(self) -> str:
    return self.__class__.__name__

  @abstractmethod
  def to_dict(self) -> Dict[str, Any]:
    pass


@dataclass
class Identifier(CNode):
  name: str

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "name": self.name}


@dataclass
class NumberLiteral(CNode):
  value: str

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "value": self.value}


@dataclass
class StringLiteral(CNode):
  value: str

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "value": self.value}


@dataclass
class CallExpression(CNode):
  """Represents ``callee(arguments...)``."""

  callee: Identifier
  arguments: List[CNode] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    return {
      "type": self.type,
      "callee": self.callee.to_dict(),
      "arguments": [a.to_dict() for a in self.arguments],
    }


@dataclass
class ExpressionStatement(CNode):
  """Marks a top-level call as a standalone statement."""

  expression: CNode

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "expression": self.expression.to_dict()}


@dataclass
class Program(CNode):
  """Top-level container."""

  body: List[CNode] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "body": [n.to_dict() for n in self.body]}
