import pytest

from lip.errors import TokenizeError
from lip.tokenizer import (
    AND, DEF, FALSE, IF, LAMBDA, LPAREN, NOT, OR, RPAREN, TRUE, Token, TokenType, ident, tokenize,
)


def test_tokenize_call():
    assert tokenize("(& T F)") == [LPAREN, AND, TRUE, FALSE, RPAREN]


def test_tokenize_every_symbol():
    tokens = tokenize("( ) & | ^ T F if def lambda")
    assert tokens == [LPAREN, RPAREN, AND, OR, NOT, TRUE, FALSE, IF, DEF, LAMBDA]


def test_tokenize_identifiers():
    assert tokenize("myvar abc undefined_var") == [ident("myvar"), ident("abc"), ident("undefined_var")]
    assert tokenize("x")[0] == Token(TokenType.IDENT, "x")


def test_parentheses_need_no_whitespace():
    assert tokenize("((lambda(a)a)T)") == [
        LPAREN, LPAREN, LAMBDA, LPAREN, ident("a"), RPAREN, ident("a"), RPAREN, TRUE, RPAREN,
    ]


def test_whitespace_runs_are_ignored():
    assert tokenize("  (\t^\n  T )  ") == [LPAREN, NOT, TRUE, RPAREN]
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_keywords_are_not_identifiers():
    assert tokenize("if")[0].type is TokenType.IF
    assert tokenize("iff")[0] == ident("iff")
    assert tokenize("lambdas")[0] == ident("lambdas")


@pytest.mark.parametrize("lexeme", ["$", "True", "Abc", "x1", "&&", "-", "_x", "TF"])
def test_invalid_lexeme_is_reported_verbatim(lexeme):
    with pytest.raises(TokenizeError) as excinfo:
        tokenize(f"(& T {lexeme})")
    assert excinfo.value.message == f"invalid token `{lexeme}`"


def test_first_invalid_lexeme_wins():
    with pytest.raises(TokenizeError, match=r"`\$`"):
        tokenize("( ) & $ ^ #")


def test_lowercase_words_are_identifiers():
    assert tokenize("true t") == [ident("true"), ident("t")]
