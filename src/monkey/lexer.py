"""
Monkey language lexer.

Pull-based: each ``next_token`` call consumes exactly one token from the
input. Unrecognized characters come back as ILLEGAL tokens; once the input is
exhausted every further call returns EOF.
"""

from typing import Iterator, List

from .token import Token, TokenKind, lookup_identifier

# Current-character value once the cursor has run past the input.
EOF_CHAR = ""

WHITESPACE = " \t\n\r"

SINGLE_CHAR_TOKENS = {
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


class LexerError(Exception):
    def __init__(self, char: str, offset: int):
        super().__init__(f"Illegal character {char!r} at offset {offset}")
        self.char = char
        self.offset = offset


def is_letter(ch: str) -> bool:
    # ASCII only; '-' is always the MINUS operator.
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        self.read_char()

    def next_token(self) -> Token:
        self.skip_whitespace()
        ch = self.ch

        if ch == EOF_CHAR:
            # Cursor stays parked on the sentinel.
            return Token(TokenKind.EOF, "")

        if ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(TokenKind.EQ, "==")
            else:
                tok = Token(TokenKind.ASSIGN, "=")
        elif ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(TokenKind.NOT_EQ, "!=")
            else:
                tok = Token(TokenKind.BANG, "!")
        elif ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif is_letter(ch):
            # Variable width: the cursor already sits past the identifier.
            literal = self.read_identifier()
            return Token(lookup_identifier(literal), literal)
        elif is_digit(ch):
            return Token(TokenKind.INT, self.read_number())
        else:
            tok = Token(TokenKind.ILLEGAL, "")

        self.read_char()
        return tok

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def scan(self, strict: bool = False) -> List[Token]:
        """Collect every token through EOF.

        With ``strict`` set, the first ILLEGAL token raises ``LexerError``
        instead of being returned.
        """
        out: List[Token] = []
        for tok in self.tokens():
            if strict and tok.kind is TokenKind.ILLEGAL:
                # next_token has already stepped past the offending character.
                offset = self.position - 1
                raise LexerError(self.source[offset], offset)
            out.append(tok)
        return out

    def read_char(self) -> None:
        if self.read_position >= self.length:
            self.ch = EOF_CHAR
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        if self.read_position >= self.length:
            return EOF_CHAR
        return self.source[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch != EOF_CHAR and self.ch in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self.read_char()
        return self.source[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.source[start : self.position]


__all__ = ["Lexer", "LexerError", "EOF_CHAR", "is_letter", "is_digit"]
