"""
Source Abstract Syntax Tree Nodes.

This module defines the call/param shaped tree produced by the Parser.
Each node owns its children outright; there are no parent links.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class LispNode(ABC):
  """Abstract base class for all source AST nodes."""

  @property
  def type(self) -> str:
    """The node tag used for dispatch (the class name)."""
    return self.__class__.__name__

  @abstractmethod
  def to_dict(self) -> Dict[str, Any]:
    pass


@dataclass
class NumberLiteral(LispNode):
  """Represents a digit run (kept as text)."""

  value: str

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "value": self.value}


@dataclass
class StringLiteral(LispNode):
  """Represents a quoted run, without the quotes."""

  value: str

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "value": self.value}


@dataclass
class CallExpression(LispNode):
  """Represents ``(name param...)``."""

  name: str
  params: List[LispNode] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "name": self.name, "params": [p.to_dict() for p in self.params]}


@dataclass
class Program(LispNode):
  """Top-level container."""

  body: List[LispNode] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    return {"type": self.type, "body": [n.to_dict() for n in self.body]}
