from .lexer import Lexer, LexerError
from .token import KEYWORDS, Token, TokenKind, lookup_identifier

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_identifier",
]
