class LipError(Exception):
    """Base exception for failures in any stage of the lip pipeline."""
    kind = 'LipError'
    stage = 'run'

    def __init__(self, message: str):
        super().__init__(f"{self.kind}: {message}")
        self.message = message


class TokenizeError(LipError):
    """Raised when the source text contains an unrecognized lexeme."""
    kind = 'TokenizeError'
    stage = 'tokenize'


class ParseError(LipError):
    """Raised when a token sequence does not form a well-formed expression."""
    kind = 'ParseError'
    stage = 'parse'


class EvalError(LipError):
    """Raised when a well-formed expression cannot be evaluated."""
    kind = 'EvalError'
    stage = 'evaluate'
