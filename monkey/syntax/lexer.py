"""Lexical analysis for the monkey language: turns source text into Tokens, one at a time.

All lexical grammar can be loosely defined as follows:

```
<ident>    ::= (<letter> | "_") (<letter> | <digit> | "_")*   ; keywords are identifiers with reserved meanings
<integer>  ::= <digit>+                                        ; must fit in a signed 32-bit integer
<operator> ::= "=" | "==" | "!" | "!=" | "+" | "-" | "*" | "/" | "<" | ">"
<delim>    ::= "," | ";" | "(" | ")" | "{" | "}"
```

Whitespace (spaces, tabs, newlines) separates tokens and is otherwise ignored. Anything else becomes an ILLEGAL token:
the lexer never raises, it is up to the parser to reject illegal input.
"""

from monkey.syntax.token import KEYWORDS, Token, TokenKind


INT_MAX = 2 ** 31 - 1

SINGLE_CHARS = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

DOUBLE_CHARS = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NOT_EQ,
}

WHITESPACE = " \t\r\n"


def is_letter(char):
    return char.isascii() and (char.isalpha() or char == "_")


def is_digit(char):
    return char.isascii() and char.isdigit()


class Lexer:
    """Scans source lazily: each call to next_token reads exactly one token."""

    def __init__(self, source):
        self.source = source
        self.pos = 0

    def _peek(self, offset=0):
        idx = self.pos + offset
        return self.source[idx] if idx < len(self.source) else ""

    def _read_while(self, check):
        start = self.pos
        while self._peek() and check(self._peek()):
            self.pos += 1
        return self.source[start:self.pos]

    def next_token(self):
        """Returns the next token in self.source, or EOF once self.source is exhausted."""
        self._read_while(lambda char: char in WHITESPACE)

        start = self.pos
        char = self._peek()

        if not char:
            return Token(TokenKind.EOF, position=start)

        pair = char + self._peek(1)
        if pair in DOUBLE_CHARS:
            self.pos += 2
            return Token(DOUBLE_CHARS[pair], position=start)

        if char in SINGLE_CHARS:
            self.pos += 1
            return Token(SINGLE_CHARS[char], position=start)

        if is_letter(char):
            word = self._read_while(lambda char: is_letter(char) or is_digit(char))
            if word in KEYWORDS:
                return Token(KEYWORDS[word], position=start)
            return Token(TokenKind.IDENT, word, start)

        if is_digit(char):
            digits = self._read_while(is_digit)
            if int(digits) > INT_MAX:
                return Token(TokenKind.ILLEGAL, digits, start)
            return Token(TokenKind.INT, int(digits), start)

        self.pos += 1
        return Token(TokenKind.ILLEGAL, char, start)

    def __iter__(self):
        """Yields every remaining token, EOF included."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return


def tokenize(source):
    """Returns the list of tokens in source, EOF included."""
    return list(Lexer(source))
