"""Runtime values for the lip interpreter.

Evaluation produces exactly one of three kinds of value: a boolean, one of
the primitive operators, or a lambda. Values are frozen dataclasses, so two
values compare equal when they are structurally the same. ``str()`` of a
value is lip source that evaluates back to an equal value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .ast import Lambda, Node, Op


@dataclass(frozen=True)
class BoolVal:
    value: bool

    def __str__(self) -> str:
        return 'T' if self.value else 'F'


@dataclass(frozen=True)
class OperatorVal:
    op: Op

    def __str__(self) -> str:
        return str(self.op)


@dataclass(frozen=True)
class LambdaVal:
    """A lambda literal that has been evaluated.

    Only the parameter names and the body are kept. The defining environment
    is not captured: a call binds its parameters in a frame whose outer scope
    is the environment at the call site.
    """
    params: Tuple[str, ...]
    body: Node

    def __post_init__(self):
        object.__setattr__(self, 'params', tuple(self.params))

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return str(Lambda(self.params, self.body))


Value = Union[BoolVal, OperatorVal, LambdaVal]

