"""Recursive-descent parser for the lip language.

The grammar is prefix notation with five forms::

    expr := bool | operator | ident
          | "(" expr expr* ")"
          | "(" "if" expr expr expr ")"
          | "(" "def" ident expr ")"
          | "(" "lambda" "(" ident* ")" expr ")"

Every parse routine takes the full token sequence plus the offset where its
form starts, and returns the node together with the number of tokens it
consumed. The caller adds that count to its own cursor to resume after the
sub-expression, so no token slices are ever copied.

`parse` reads a single expression from the front of the sequence; tokens
after it are left alone.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .ast import Bool, Call, Def, Ident, If, Lambda, Node, Op, Operator
from .errors import ParseError
from .tokenizer import LPAREN, RPAREN, Token, TokenType


ATOMS: Dict[TokenType, Node] = {
    TokenType.TRUE: Bool(True),
    TokenType.FALSE: Bool(False),
    TokenType.AND: Operator(Op.AND),
    TokenType.OR: Operator(Op.OR),
    TokenType.NOT: Operator(Op.NOT),
}


def parse(tokens: Sequence[Token]) -> Node:
    """Parse the first complete expression in `tokens` into an AST."""
    if not tokens:
        raise ParseError('no token')
    try:
        node, _ = parse_one(tokens)
    except RecursionError:
        raise ParseError('expression nested too deeply') from None
    return node


def parse_one(tokens: Sequence[Token], start: int = 0) -> Tuple[Node, int]:
    """Parse one expression beginning at `start`.

    Returns the node and the number of tokens it spans.
    """
    first = _peek(tokens, start)
    if first is None:
        raise ParseError('unexpected end of input, expected an expression')
    if first.type is not TokenType.LPAREN:
        return parse_atom(first), 1
    head = _peek(tokens, start + 1)
    if head is None:
        raise ParseError('unexpected end of input after `(`')
    if head.type is TokenType.IF:
        return parse_if(tokens, start)
    if head.type is TokenType.DEF:
        return parse_def(tokens, start)
    if head.type is TokenType.LAMBDA:
        return parse_lambda(tokens, start)
    return parse_call(tokens, start)


def parse_atom(token: Token) -> Node:
    if token.type is TokenType.IDENT:
        return Ident(token.value)
    node = ATOMS.get(token.type)
    if node is None:
        raise ParseError(f"invalid token `{token}`")
    return node


def parse_call(tokens: Sequence[Token], start: int) -> Tuple[Node, int]:
    # ( operator operand* )
    pos = start + 1
    operator, consumed = parse_one(tokens, pos)
    pos += consumed
    operands: List[Node] = []
    while pos < len(tokens) and tokens[pos].type is not TokenType.RPAREN:
        operand, consumed = parse_one(tokens, pos)
        operands.append(operand)
        pos += consumed
    _expect(tokens, pos, RPAREN, 'call')
    return Call(operator, tuple(operands)), pos + 1 - start


def parse_if(tokens: Sequence[Token], start: int) -> Tuple[Node, int]:
    # ( if cond then other )
    pos = start + 2
    branches: List[Node] = []
    for _ in range(3):
        node, consumed = parse_one(tokens, pos)
        branches.append(node)
        pos += consumed
    _expect(tokens, pos, RPAREN, 'if expression')
    cond, then, other = branches
    return If(cond, then, other), pos + 1 - start


def parse_def(tokens: Sequence[Token], start: int) -> Tuple[Node, int]:
    # ( def ident expr )
    pos = start + 2
    name = _peek(tokens, pos)
    if name is None:
        raise ParseError('unexpected end of input, def expects an identifier')
    if name.type is not TokenType.IDENT:
        raise ParseError(f"def expects an identifier, found `{name}`")
    pos += 1
    expr, consumed = parse_one(tokens, pos)
    pos += consumed
    _expect(tokens, pos, RPAREN, 'def expression')
    return Def(name.value, expr), pos + 1 - start


def parse_lambda(tokens: Sequence[Token], start: int) -> Tuple[Node, int]:
    # ( lambda ( ident* ) body )
    pos = start + 2
    _expect(tokens, pos, LPAREN, 'lambda parameter list')
    pos += 1
    params: List[str] = []
    while True:
        token = _peek(tokens, pos)
        if token is None:
            raise ParseError('unexpected end of input in lambda parameter list, expected `)`')
        pos += 1
        if token.type is TokenType.RPAREN:
            break
        if token.type is not TokenType.IDENT:
            raise ParseError(f"lambda parameter must be an identifier, found `{token}`")
        params.append(token.value)
    body, consumed = parse_one(tokens, pos)
    pos += consumed
    _expect(tokens, pos, RPAREN, 'lambda expression')
    return Lambda(tuple(params), body), pos + 1 - start


def _peek(tokens: Sequence[Token], pos: int) -> Optional[Token]:
    if pos < len(tokens):
        return tokens[pos]
    return None


def _expect(tokens: Sequence[Token], pos: int, expected: Token, form: str) -> None:
    token = _peek(tokens, pos)
    if token is None:
        raise ParseError(f"unexpected end of input in {form}, expected `{expected}`")
    if token.type is not expected.type:
        raise ParseError(f"expected `{expected}` in {form}, found `{token}`")
