# lip language package
# This package provides a tokenizer, parser and interpreter for lip, a small
# S-expression language of boolean logic.
from .environment import Environment
from .errors import EvalError, LipError, ParseError, TokenizeError
from .interpreter import Interpreter, evaluate, run_program
from .parser import parse
from .tokenizer import Token, TokenType, tokenize
from .types import BoolVal, LambdaVal, OperatorVal, Value

__all__ = [
    'Environment',
    'EvalError',
    'LipError',
    'ParseError',
    'TokenizeError',
    'Interpreter',
    'evaluate',
    'run_program',
    'parse',
    'Token',
    'TokenType',
    'tokenize',
    'BoolVal',
    'LambdaVal',
    'OperatorVal',
    'Value',
]
