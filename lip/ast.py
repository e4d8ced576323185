"""Abstract Syntax Tree (AST) definitions for the lip language.

Every node is a frozen dataclass holding only tuples and other nodes, so a
tree is immutable once the parser has built it and subtrees can be shared
freely (lambda values keep a reference to their body instead of a copy).
Calling ``str()`` on a node renders it back as lip source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Op(Enum):
    """The three primitive logical operators."""
    AND = '&'
    OR = '|'
    NOT = '^'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Bool(Node):
    value: bool

    def __str__(self) -> str:
        return 'T' if self.value else 'F'


@dataclass(frozen=True)
class Operator(Node):
    op: Op

    def __str__(self) -> str:
        return str(self.op)


@dataclass(frozen=True)
class Call(Node):
    operator: Node
    operands: Tuple[Node, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'operands', tuple(self.operands))

    def __str__(self) -> str:
        parts = [str(self.operator)] + [str(operand) for operand in self.operands]
        return f"({' '.join(parts)})"


@dataclass(frozen=True)
class If(Node):
    cond: Node
    then: Node
    other: Node

    def __str__(self) -> str:
        return f"(if {self.cond} {self.then} {self.other})"


@dataclass(frozen=True)
class Def(Node):
    name: str
    expr: Node

    def __str__(self) -> str:
        return f"(def {self.name} {self.expr})"


@dataclass(frozen=True)
class Lambda(Node):
    params: Tuple[str, ...]
    body: Node

    def __post_init__(self):
        object.__setattr__(self, 'params', tuple(self.params))

    def __str__(self) -> str:
        return f"(lambda ({' '.join(self.params)}) {self.body})"


@dataclass(frozen=True)
class Ident(Node):
    name: str

    def __str__(self) -> str:
        return self.name
