"""Pratt (operator-precedence) parser for the monkey language.

The parser holds the current token and one token of lookahead (peek_token), pulled from any object with a next_token
method. Every parse_* method starts with the first token of its construct in current_token and finishes with the last
token of its construct in current_token: the caller is the one that advances past it.

Expressions are parsed by precedence climbing (parse_expression):
    1. current_token picks a prefix handler, which produces the leftmost expression
    2. while peek_token binds tighter than the precedence we were called with, advance onto it and let its infix
       handler fold the running expression into a bigger one
Infix handlers parse their right-hand side at their own precedence, and the loop only continues on a strictly tighter
binding, so a run of equal-precedence operators is folded iteratively: "a + b - c" groups as "((a + b) - c)".

The first structural mismatch raises a ParseError. There is no error recovery and no partial program.
"""

from monkey.lang.error import NotFoundInfixHandler, NotFoundLetIdentifier, UnexpectedToken, UnimplementedExpression
from monkey.syntax.ast import (BlockStatement, BooleanLiteral, CallExpression, ExpressionStatement, FunctionLiteral,
                               Identifier, IfExpression, InfixExpression, IntegerLiteral, LetStatement,
                               PrefixExpression, Program, ReturnStatement)
from monkey.syntax.lexer import Lexer
from monkey.syntax.precedence import INFIX_OPERATORS, PREFIX_OPERATORS, Precedence, precedence_of
from monkey.syntax.token import Token, TokenKind


class Parser:
    """Builds a Program from a token source. A Parser is single-use: parse_program consumes its tokens."""

    def __init__(self, tokens):
        """tokens must provide next_token(), returning EOF once exhausted (see Lexer and TokenStream)."""
        self.tokens = tokens

        self.current_token = Token(TokenKind.ILLEGAL)
        self.peek_token = Token(TokenKind.ILLEGAL)

        self.prefix_handlers = {
            TokenKind.IDENT: self.parse_identifier,
            TokenKind.INT: self.parse_integer,
            TokenKind.TRUE: self.parse_boolean,
            TokenKind.FALSE: self.parse_boolean,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.LPAREN: self.parse_grouped_expression,
            TokenKind.IF: self.parse_if_expression,
            TokenKind.FUNCTION: self.parse_function_literal,
        }
        self.infix_handlers = {kind: self.parse_infix_expression for kind in INFIX_OPERATORS}
        self.infix_handlers[TokenKind.LPAREN] = self.parse_call_expression

        self.seek_token()
        self.seek_token()

    def seek_token(self):
        """Consumes current_token and pulls the next token from the stream."""
        self.current_token = self.peek_token
        self.peek_token = self.tokens.next_token()

    def expect_current(self, kind):
        """Raises UnexpectedToken unless current_token is of the given kind."""
        if self.current_token.kind is not kind:
            raise UnexpectedToken(self.current_token, kind)

    def skip_semicolon(self):
        """Semicolons are optional: consume one if it comes next."""
        if self.peek_token.kind is TokenKind.SEMICOLON:
            self.seek_token()

    def parse_program(self):
        statements = []
        while self.current_token.kind is not TokenKind.EOF:
            statements.append(self.parse_statement())
            self.seek_token()
        return Program(tuple(statements))

    # statements

    def parse_statement(self):
        if self.current_token.kind is TokenKind.LET:
            return self.parse_let_statement()
        elif self.current_token.kind is TokenKind.RETURN:
            return self.parse_return_statement()
        elif self.current_token.kind is TokenKind.LBRACE:
            block = self.parse_block_statement()
            self.skip_semicolon()
            return block
        return self.parse_expression_statement()

    def parse_let_statement(self):
        self.seek_token()
        if self.current_token.kind is not TokenKind.IDENT:
            raise NotFoundLetIdentifier(self.current_token)
        name = Identifier(self.current_token.literal)

        self.seek_token()
        self.expect_current(TokenKind.ASSIGN)

        self.seek_token()
        value = self.parse_expression(Precedence.LOWEST)
        self.skip_semicolon()

        return LetStatement(name, value)

    def parse_return_statement(self):
        self.seek_token()
        value = self.parse_expression(Precedence.LOWEST)
        self.skip_semicolon()

        return ReturnStatement(value)

    def parse_expression_statement(self):
        expression = self.parse_expression(Precedence.LOWEST)
        self.skip_semicolon()

        return ExpressionStatement(expression)

    def parse_block_statement(self):
        """Parses "{ <statement>* }". An unterminated block ends at EOF."""
        self.expect_current(TokenKind.LBRACE)
        self.seek_token()

        statements = []
        while self.current_token.kind not in (TokenKind.RBRACE, TokenKind.EOF):
            statements.append(self.parse_statement())
            self.seek_token()

        return BlockStatement(tuple(statements))

    # expressions

    def parse_expression(self, precedence):
        """Parses the longest expression starting at current_token whose operators all bind tighter than precedence.
        """
        prefix_handler = self.prefix_handlers.get(self.current_token.kind)
        if prefix_handler is None:
            raise UnimplementedExpression(self.current_token)
        expression = prefix_handler()

        while self.peek_token.kind is not TokenKind.SEMICOLON and precedence < precedence_of(self.peek_token):
            self.seek_token()

            infix_handler = self.infix_handlers.get(self.current_token.kind)
            if infix_handler is None:
                raise NotFoundInfixHandler(self.current_token)
            expression = infix_handler(expression)

        return expression

    def parse_identifier(self):
        return Identifier(self.current_token.literal)

    def parse_integer(self):
        return IntegerLiteral(self.current_token.literal)

    def parse_boolean(self):
        return BooleanLiteral(self.current_token.kind is TokenKind.TRUE)

    def parse_prefix_expression(self):
        operator = PREFIX_OPERATORS[self.current_token.kind]
        self.seek_token()
        return PrefixExpression(operator, self.parse_expression(Precedence.PREFIX))

    def parse_infix_expression(self, left):
        operator = INFIX_OPERATORS[self.current_token.kind]
        precedence = precedence_of(self.current_token)
        self.seek_token()
        return InfixExpression(left, operator, self.parse_expression(precedence))

    def parse_grouped_expression(self):
        self.seek_token()
        expression = self.parse_expression(Precedence.LOWEST)

        self.seek_token()
        self.expect_current(TokenKind.RPAREN)

        return expression

    def parse_if_expression(self):
        self.seek_token()
        self.expect_current(TokenKind.LPAREN)

        self.seek_token()
        condition = self.parse_expression(Precedence.LOWEST)

        self.seek_token()
        self.expect_current(TokenKind.RPAREN)

        self.seek_token()
        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_token.kind is TokenKind.ELSE:
            self.seek_token()
            self.seek_token()
            alternative = self.parse_block_statement()

        return IfExpression(condition, consequence, alternative)

    def parse_function_literal(self):
        self.seek_token()
        self.expect_current(TokenKind.LPAREN)

        self.seek_token()
        parameters = self.parse_function_parameters()
        self.expect_current(TokenKind.RPAREN)

        self.seek_token()
        body = self.parse_block_statement()

        return FunctionLiteral(parameters, body)

    def parse_function_parameters(self):
        """Parses "<ident> ("," <ident>)*" up to, but not past, the closing parenthesis."""
        parameters = []
        if self.current_token.kind is TokenKind.RPAREN:
            return tuple(parameters)

        self.expect_current(TokenKind.IDENT)
        parameters.append(self.parse_identifier())
        self.seek_token()

        while self.current_token.kind is TokenKind.COMMA:
            self.seek_token()
            self.expect_current(TokenKind.IDENT)
            parameters.append(self.parse_identifier())
            self.seek_token()

        return tuple(parameters)

    def parse_call_expression(self, callee):
        self.seek_token()
        arguments = self.parse_call_arguments()
        self.expect_current(TokenKind.RPAREN)

        return CallExpression(callee, arguments)

    def parse_call_arguments(self):
        """Parses "<expr> ("," <expr>)*" up to, but not past, the closing parenthesis."""
        arguments = []
        if self.current_token.kind is TokenKind.RPAREN:
            return tuple(arguments)

        arguments.append(self.parse_expression(Precedence.LOWEST))
        self.seek_token()

        while self.current_token.kind is TokenKind.COMMA:
            self.seek_token()
            arguments.append(self.parse_expression(Precedence.LOWEST))
            self.seek_token()

        return tuple(arguments)


def parse(source):
    """Parses monkey source text (or any token source) into a Program."""
    if isinstance(source, str):
        source = Lexer(source)
    return Parser(source).parse_program()
