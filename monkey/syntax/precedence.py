"""Operator precedence table. This is the only place that decides how tightly a token binds: the parser asks
precedence_of and never looks at token identity to compare binding strengths.

Binding strength is a strict total order:

```
LOWEST < EQUALS < LESS_GREATER < SUM < PRODUCT < PREFIX < CALL
```
"""

from enum import Enum, IntEnum

from monkey.syntax.token import TokenKind


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2        # == !=
    LESS_GREATER = 3  # < >
    SUM = 4           # + -
    PRODUCT = 5       # * /
    PREFIX = 6        # -x !x
    CALL = 7          # f(x)


PRECEDENCES = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESS_GREATER,
    TokenKind.GT: Precedence.LESS_GREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.ASTERISK: Precedence.PRODUCT,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.LPAREN: Precedence.CALL,
}


def precedence_of(token):
    """Binding strength of token when it appears in operator position. Anything not in the table binds LOWEST."""
    return PRECEDENCES.get(token.kind, Precedence.LOWEST)


class Prefix(Enum):
    MINUS = "-"
    NOT = "!"

    def __str__(self):
        return self.value


class Infix(Enum):
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    def __str__(self):
        return self.value


PREFIX_OPERATORS = {
    TokenKind.MINUS: Prefix.MINUS,
    TokenKind.BANG: Prefix.NOT,
}

INFIX_OPERATORS = {
    TokenKind.PLUS: Infix.PLUS,
    TokenKind.MINUS: Infix.MINUS,
    TokenKind.ASTERISK: Infix.ASTERISK,
    TokenKind.SLASH: Infix.SLASH,
    TokenKind.LT: Infix.LT,
    TokenKind.GT: Infix.GT,
    TokenKind.EQ: Infix.EQ,
    TokenKind.NOT_EQ: Infix.NOT_EQ,
}
