"""Tokenizer for the lip language.

The surface syntax is a tiny S-expression language, so tokenizing is a
matter of padding every parenthesis with whitespace, splitting on runs of
whitespace and classifying each piece against a fixed symbol table.
Anything made of lowercase letters that is not a keyword is an identifier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .errors import TokenizeError


class TokenType(Enum):
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'
    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'
    TRUE = 'TRUE'
    FALSE = 'FALSE'
    IF = 'IF'
    DEF = 'DEF'
    LAMBDA = 'LAMBDA'
    IDENT = 'IDENT'


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def __str__(self) -> str:
        return self.value


LPAREN = Token(TokenType.LPAREN, '(')
RPAREN = Token(TokenType.RPAREN, ')')
AND = Token(TokenType.AND, '&')
OR = Token(TokenType.OR, '|')
NOT = Token(TokenType.NOT, '^')
TRUE = Token(TokenType.TRUE, 'T')
FALSE = Token(TokenType.FALSE, 'F')
IF = Token(TokenType.IF, 'if')
DEF = Token(TokenType.DEF, 'def')
LAMBDA = Token(TokenType.LAMBDA, 'lambda')

SYMBOLS: Dict[str, Token] = {
    token.value: token
    for token in (LPAREN, RPAREN, AND, OR, NOT, TRUE, FALSE, IF, DEF, LAMBDA)
}

IDENT_RE = re.compile(r'[a-z][a-z_]*')


def ident(name: str) -> Token:
    return Token(TokenType.IDENT, name)


def classify(lexeme: str) -> Token:
    """Map a single whitespace-free lexeme onto its token."""
    token = SYMBOLS.get(lexeme)
    if token is not None:
        return token
    if IDENT_RE.fullmatch(lexeme):
        return ident(lexeme)
    raise TokenizeError(f"invalid token `{lexeme}`")


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of tokens.

    Tokenizing is all-or-nothing: the first unrecognized lexeme raises a
    TokenizeError and no partial list is returned.
    """
    padded = source.replace('(', ' ( ').replace(')', ' ) ')
    return [classify(lexeme) for lexeme in padded.split()]
