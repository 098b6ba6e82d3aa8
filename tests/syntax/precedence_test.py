import unittest

from monkey.syntax.precedence import INFIX_OPERATORS, PRECEDENCES, PREFIX_OPERATORS, Infix, Precedence, Prefix, \
    precedence_of
from monkey.syntax.token import Token, TokenKind


class PrecedenceTestCase(unittest.TestCase):

    def test_total_order(self):
        order = [Precedence.LOWEST, Precedence.EQUALS, Precedence.LESS_GREATER, Precedence.SUM, Precedence.PRODUCT,
                 Precedence.PREFIX, Precedence.CALL]
        for lower, higher in zip(order, order[1:]):
            self.assertLess(lower, higher, (lower, higher))

    def test_precedence_of(self):
        cases = {
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
        for case, expected in cases.items():
            self.assertEqual(expected, precedence_of(Token(case)), case)

        should_be_lowest = [TokenKind.SEMICOLON, TokenKind.RPAREN, TokenKind.BANG, TokenKind.IDENT, TokenKind.EOF,
                            TokenKind.ASSIGN, TokenKind.LBRACE, TokenKind.ILLEGAL]
        for case in should_be_lowest:
            self.assertEqual(Precedence.LOWEST, precedence_of(Token(case)), case)

    def test_operators(self):
        self.assertEqual(set(INFIX_OPERATORS), set(PRECEDENCES) - {TokenKind.LPAREN})
        self.assertEqual({Prefix.MINUS, Prefix.NOT}, set(PREFIX_OPERATORS.values()))

        cases = {Infix.PLUS: "+", Infix.NOT_EQ: "!=", Prefix.NOT: "!", Prefix.MINUS: "-"}
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), case)


if __name__ == '__main__':
    unittest.main()
