"""Tokens: the smallest lexical units of the monkey language, as handed from the lexer to the parser.

The parser only ever pulls tokens one at a time through next_token(), so any object providing that method can feed it
(see Lexer in monkey/syntax/lexer.py and TokenStream below).
"""

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds. Values are the canonical source text of each kind (used for errors and rendering)."""
    ILLEGAL = "<illegal>"
    EOF = "<eof>"

    IDENT = "<identifier>"
    INT = "<integer>"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    FUNCTION = "fn"
    LET = "let"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    ELSE = "else"
    RETURN = "return"

    def __str__(self):
        return self.value


KEYWORDS = {kind.value: kind for kind in (
    TokenKind.FUNCTION, TokenKind.LET, TokenKind.TRUE, TokenKind.FALSE, TokenKind.IF, TokenKind.ELSE, TokenKind.RETURN
)}


@dataclass(frozen=True)
class Token:
    """A single token. literal is the identifier name for IDENT, the integer value for INT, the offending text for
    ILLEGAL, and None otherwise. position is the offset of the token in its source (-1 if unknown) and is ignored when
    comparing tokens.
    """
    kind: TokenKind
    literal: object = None
    position: int = field(default=-1, compare=False)

    @property
    def end(self):
        """Offset just past this token in its source."""
        if self.position == -1:
            return -1
        return self.position + max(len(str(self)), 1)

    def __str__(self):
        if self.kind in (TokenKind.IDENT, TokenKind.INT, TokenKind.ILLEGAL) and self.literal is not None:
            return str(self.literal)
        return str(self.kind)


class TokenStream:
    """Pull-based stream over an already tokenized sequence. Once exhausted, EOF is returned forever."""

    def __init__(self, tokens):
        self._tokens = iter(tokens)

    def next_token(self):
        return next(self._tokens, Token(TokenKind.EOF))
