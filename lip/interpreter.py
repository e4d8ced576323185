"""Tree-walking interpreter for the lip language.

`Interpreter` owns the session's root environment, so bindings made by
`def` survive from one input to the next. Every failure inside evaluation is
an `EvalError`; nothing is caught or recovered on the way up.

Lambda calls bind their parameters in a fresh frame whose outer scope is the
environment at the call site, not the one the lambda was written in. At the
top level the two coincide.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .ast import Bool, Call, Def, Ident, If, Lambda, Node, Op, Operator
from .environment import Environment
from .errors import EvalError, LipError
from .parser import parse
from .tokenizer import tokenize
from .types import BoolVal, LambdaVal, OperatorVal, Value

# Each lambda call costs several Python frames, so keep well under the
# interpreter's recursion limit.
MAX_CALL_DEPTH = 100


class Interpreter:
    """Evaluates lip AST against a persistent session environment."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt',
                 max_depth: Optional[int] = MAX_CALL_DEPTH, env: Optional[Environment] = None):
        self.global_env = env if env is not None else Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None
        self.max_depth = max_depth
        self.depth = 0

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg, file=sys.stderr)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, source: str, env: Optional[Environment] = None) -> Value:
        """Tokenize, parse and evaluate one line of lip source."""
        if env is None:
            env = self.global_env
        self.debug(f"input {source!r}")
        try:
            value = self.evaluate(parse(tokenize(source)), env)
        except LipError as e:
            self.debug(f"error {e}")
            raise
        self.debug(f"result {value}")
        return value

    def evaluate(self, node: Node, env: Optional[Environment] = None) -> Value:
        if env is None:
            env = self.global_env
        self.depth = 0
        try:
            return self.eval_node(node, env)
        except RecursionError:
            raise EvalError('maximum recursion depth exceeded') from None

    def eval_node(self, node: Node, env: Environment) -> Value:
        if self.debug_level >= 3:
            self.debug(f"eval {node}")
        if isinstance(node, Bool):
            return BoolVal(node.value)
        if isinstance(node, Operator):
            return OperatorVal(node.op)
        if isinstance(node, Call):
            return self.call(node, env)
        if isinstance(node, If):
            cond = self.eval_node(node.cond, env)
            if not isinstance(cond, BoolVal):
                raise EvalError(f"condition must be bool, not `{cond}`")
            if self.debug_level >= 3:
                self.debug(f"if condition {node.cond} -> {cond}")
            return self.eval_node(node.then if cond.value else node.other, env)
        if isinstance(node, Def):
            value = self.eval_node(node.expr, env)
            env.add(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"def {node.name} = {value}")
            return value
        if isinstance(node, Lambda):
            return LambdaVal(node.params, node.body)
        if isinstance(node, Ident):
            value = env.get(node.name)
            if value is None:
                raise EvalError(f"`{node.name}` is not defined")
            return value
        raise NotImplementedError(f"eval_node: unexpected node type {type(node)}")

    def call(self, node: Call, env: Environment) -> Value:
        operator = self.eval_node(node.operator, env)
        if isinstance(operator, OperatorVal):
            return self.apply_operator(operator.op, node.operands, env)
        if isinstance(operator, LambdaVal):
            return self.call_lambda(operator, node.operands, env)
        raise EvalError(f"`{operator}` is not an operator")

    def apply_operator(self, op: Op, operands: Sequence[Node], env: Environment) -> Value:
        if op is Op.NOT:
            if len(operands) != 1:
                raise EvalError(f"the number of arguments of `{op}` must be 1, got {len(operands)}")
            return BoolVal(not self.eval_bool(op, operands[0], env))
        values = [self.eval_bool(op, operand, env) for operand in operands]
        if op is Op.AND:
            return BoolVal(all(values))
        if op is Op.OR:
            return BoolVal(any(values))
        raise NotImplementedError(f"apply_operator: unexpected operator {op!r}")

    def eval_bool(self, op: Op, operand: Node, env: Environment) -> bool:
        value = self.eval_node(operand, env)
        if not isinstance(value, BoolVal):
            raise EvalError(f"operand of `{op}` must be bool, not `{value}`")
        return value.value

    def call_lambda(self, func: LambdaVal, operands: Sequence[Node], env: Environment) -> Value:
        if len(operands) != func.arity:
            raise EvalError(
                f"the number of arguments ({len(operands)}) does not match "
                f"the number of parameters ({func.arity})"
            )
        args: List[Value] = [self.eval_node(operand, env) for operand in operands]
        if self.max_depth is not None and self.depth >= self.max_depth:
            raise EvalError(f"maximum call depth ({self.max_depth}) exceeded")
        # The frame lives only for this call.
        frame = Environment(dict(zip(func.params, args)), outer=env)
        if self.debug_level >= 2:
            self.debug(f"call {func} with ({' '.join(str(arg) for arg in args)})")
        self.depth += 1
        try:
            return self.eval_node(func.body, frame)
        finally:
            self.depth -= 1


def evaluate(node: Node, env: Environment) -> Value:
    """Evaluate `node` in `env` with a default interpreter."""
    return Interpreter().evaluate(node, env)


def run_program(source: str, debug_level: int = 0) -> Value:
    """Convenience function to run one lip expression from a source string."""
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.run(source)
    finally:
        interpreter.close()
