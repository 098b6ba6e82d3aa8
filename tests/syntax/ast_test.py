import unittest

from monkey.syntax.ast import (BlockStatement, BooleanLiteral, CallExpression, ExpressionStatement, FunctionLiteral,
                               Identifier, IfExpression, IllegalExpression, InfixExpression, IntegerLiteral,
                               LetStatement, PrefixExpression, Program, ReturnStatement)
from monkey.syntax.parser import parse
from monkey.syntax.precedence import Infix, Prefix


x, y = Identifier("x"), Identifier("y")


class ToCodeTestCase(unittest.TestCase):

    def test_statements(self):
        program = Program((
            LetStatement(x, IntegerLiteral(100)),
            ReturnStatement(x),
        ))
        self.assertEqual("let x = 100;\nreturn x;\n", program.to_code())

    def test_expressions(self):
        cases = {
            "foo": Identifier("foo"),
            "5": IntegerLiteral(5),
            "false": BooleanLiteral(False),
            "(-5)": PrefixExpression(Prefix.MINUS, IntegerLiteral(5)),
            "(!(!true))": PrefixExpression(Prefix.NOT, PrefixExpression(Prefix.NOT, BooleanLiteral(True))),
            "(x * (y + 1))": InfixExpression(x, Infix.ASTERISK, InfixExpression(y, Infix.PLUS, IntegerLiteral(1))),
            "add(x, (1 + 2))": CallExpression(Identifier("add"),
                                              (x, InfixExpression(IntegerLiteral(1), Infix.PLUS, IntegerLiteral(2)))),
            "f()": CallExpression(Identifier("f"), ()),
            "fn() {\n}": FunctionLiteral((), BlockStatement()),
            "fn(x, y) {\n(x + y);\n}": FunctionLiteral((x, y),
                                                       BlockStatement((ExpressionStatement(
                                                           InfixExpression(x, Infix.PLUS, y)),))),
            "if ((x < y)) {\nx;\n}": IfExpression(InfixExpression(x, Infix.LT, y),
                                                  BlockStatement((ExpressionStatement(x),))),
            "if (x) {\nx;\n} else {\nreturn y;\n}": IfExpression(x, BlockStatement((ExpressionStatement(x),)),
                                                                 BlockStatement((ReturnStatement(y),))),
            "[illegal expression]": IllegalExpression(),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, case.to_code(), expected)
            self.assertEqual(expected, str(case), expected)

    def test_negative_literal(self):
        self.assertRaises(ValueError, IntegerLiteral, -5)
        self.assertEqual(PrefixExpression(Prefix.MINUS, IntegerLiteral(5)), parse("-5").statements[0].expression)

    def test_function_body(self):
        function = parse("fn(x) { x + 2; }").statements[0].expression
        self.assertEqual("{\n(x + 2);\n}", function.body.to_code())


class RoundTripTestCase(unittest.TestCase):

    def test_hand_built(self):
        cases = [
            Program((ExpressionStatement(InfixExpression(
                IntegerLiteral(1), Infix.PLUS, InfixExpression(IntegerLiteral(2), Infix.ASTERISK, IntegerLiteral(3))
            )),)),
            Program((ExpressionStatement(InfixExpression(
                IntegerLiteral(1), Infix.MINUS, InfixExpression(IntegerLiteral(2), Infix.MINUS, IntegerLiteral(3))
            )),)),
            Program((ExpressionStatement(PrefixExpression(
                Prefix.MINUS, InfixExpression(x, Infix.SLASH, y)
            )),)),
            Program((
                LetStatement(Identifier("f"), FunctionLiteral((x,), BlockStatement((ReturnStatement(x),)))),
                ExpressionStatement(CallExpression(Identifier("f"), (IntegerLiteral(1), BooleanLiteral(True)))),
            )),
            Program((BlockStatement((LetStatement(x, IntegerLiteral(1)), ExpressionStatement(x))),)),
        ]
        for case in cases:
            self.assertEqual(case, parse(case.to_code()), case.to_code())

    def test_parsed(self):
        cases = [
            "a + b * c + d / e - f",
            "let x = -a * b; return !(x == 5);",
            "if (x < y) { x } else { y }",
            "let add = fn(a, b) { return a + b; }; add(1, add(2, 3));",
            "fn(x) { x }(5)",
            "let addN = fn(n) { fn(x) { x + n } }; addN(5)(10)",
            "if (true) { if (false) { 1 } } else { }",
            "{ let x = 1; x }",
        ]
        for case in cases:
            program = parse(case)
            code = program.to_code()
            self.assertEqual(program, parse(code), case)
            self.assertEqual(code, parse(code).to_code(), case)


if __name__ == '__main__':
    unittest.main()
