"""Tree-walking evaluator for the monkey language. Walks a Program against an Environment and returns the resulting
MonkeyObject, or raises an EvaluatorError (see monkey/lang/error.py) that aborts the whole program.

Return statements produce a ReturnValue, which stops every enclosing block until it reaches either a function call
(where it is unwrapped into the call's result) or the program root (where it is unwrapped into the program's result).

Numeric policy: integers are signed 32-bit. Results out of that range raise IntegerOverflow, division truncates toward
zero, and a zero divisor raises DivisionByZero.
"""

from monkey.lang.error import (DivisionByZero, IntegerOverflow, MonkeyException, NotAFunction, NotFoundIdentifier,
                               TypeMismatch, UnknownInfixOperator, UnknownPrefixOperator)
from monkey.runtime.environment import Environment
from monkey.runtime.object import NULL, Boolean, Function, Integer, Null, ReturnValue, native_bool
from monkey.syntax.ast import (BlockStatement, BooleanLiteral, CallExpression, ExpressionStatement, FunctionLiteral,
                               Identifier, IfExpression, IllegalExpression, InfixExpression, IntegerLiteral,
                               LetStatement, PrefixExpression, ReturnStatement)
from monkey.syntax.parser import parse
from monkey.syntax.precedence import Infix, Prefix


class Evaluator:
    """Namespace for the evaluation rules. Evaluation state lives entirely in the Environment passed around."""

    @classmethod
    def eval(cls, program, env=None):
        """Evaluates program in env (a fresh top-level Environment if None). Bindings made by statements that ran
        before an error stay in env.
        """
        if env is None:
            env = Environment()
        return cls.eval_statements(program.statements, env, is_root=True)

    @classmethod
    def eval_statements(cls, statements, env, is_root=False):
        """Evaluates statements in order and returns the value of the last one. A ReturnValue stops evaluation early:
        at the root it is unwrapped, anywhere else it is passed up as is.
        """
        result = NULL
        for statement in statements:
            result = cls.eval_statement(statement, env)
            if isinstance(result, ReturnValue):
                return result.value if is_root else result
        return result

    @classmethod
    def eval_statement(cls, statement, env):
        if isinstance(statement, LetStatement):
            value = cls.eval_expression(statement.value, env)
            if isinstance(value, ReturnValue):
                return value
            env.set(statement.name.name, value)
            return NULL

        elif isinstance(statement, ReturnStatement):
            value = cls.eval_expression(statement.value, env)
            if isinstance(value, ReturnValue):
                return value
            return ReturnValue(value)

        elif isinstance(statement, ExpressionStatement):
            return cls.eval_expression(statement.expression, env)

        elif isinstance(statement, BlockStatement):
            return cls.eval_statements(statement.statements, env)

        raise MonkeyException("cannot evaluate '{}'", repr(statement), internal=True)

    @classmethod
    def eval_expression(cls, expression, env):
        if isinstance(expression, Identifier):
            value = env.get(expression.name)
            if value is None:
                raise NotFoundIdentifier(expression.name)
            return value

        elif isinstance(expression, IntegerLiteral):
            return Integer(expression.value)

        elif isinstance(expression, BooleanLiteral):
            return native_bool(expression.value)

        elif isinstance(expression, PrefixExpression):
            operand = cls.eval_expression(expression.operand, env)
            if isinstance(operand, ReturnValue):
                return operand
            return cls.eval_prefix_expression(expression.operator, operand)

        elif isinstance(expression, InfixExpression):
            left = cls.eval_expression(expression.left, env)
            if isinstance(left, ReturnValue):
                return left
            right = cls.eval_expression(expression.right, env)
            if isinstance(right, ReturnValue):
                return right
            return cls.eval_infix_expression(left, expression.operator, right)

        elif isinstance(expression, IfExpression):
            return cls.eval_if_expression(expression, env)

        elif isinstance(expression, FunctionLiteral):
            return Function(expression.parameters, expression.body, env)  # env captured by reference

        elif isinstance(expression, CallExpression):
            callee = cls.eval_expression(expression.callee, env)
            if isinstance(callee, ReturnValue):
                return callee

            arguments = []
            for argument in expression.arguments:  # left to right, in the caller's environment
                value = cls.eval_expression(argument, env)
                if isinstance(value, ReturnValue):
                    return value
                arguments.append(value)

            return cls.apply_function(callee, arguments)

        elif isinstance(expression, IllegalExpression):
            raise MonkeyException("illegal expression reached evaluation", internal=True)

        raise MonkeyException("cannot evaluate '{}'", repr(expression), internal=True)

    @staticmethod
    def eval_prefix_expression(operator, operand):
        if operator is Prefix.NOT:
            if isinstance(operand, (Boolean, Null)):
                return native_bool(not operand.truthy)
            return native_bool(False)

        if not isinstance(operand, Integer):
            raise UnknownPrefixOperator(operator, operand)
        if not Integer.fits(-operand.value):
            raise IntegerOverflow(operand, operator)
        return Integer(-operand.value)

    @classmethod
    def eval_infix_expression(cls, left, operator, right):
        if isinstance(left, Integer) and isinstance(right, Integer):
            return cls.eval_integer_infix_expression(left, operator, right)
        elif isinstance(left, Boolean) and isinstance(right, Boolean):
            return cls.eval_boolean_infix_expression(left, operator, right)
        raise TypeMismatch(left, operator, right)

    @staticmethod
    def eval_integer_infix_expression(left, operator, right):
        a, b = left.value, right.value

        if operator is Infix.LT:
            return native_bool(a < b)
        elif operator is Infix.GT:
            return native_bool(a > b)
        elif operator is Infix.EQ:
            return native_bool(a == b)
        elif operator is Infix.NOT_EQ:
            return native_bool(a != b)

        if operator is Infix.PLUS:
            result = a + b
        elif operator is Infix.MINUS:
            result = a - b
        elif operator is Infix.ASTERISK:
            result = a * b
        elif operator is Infix.SLASH:
            if b == 0:
                raise DivisionByZero(left, operator, right)
            result = abs(a) // abs(b)  # truncate toward zero, not floor
            if (a < 0) != (b < 0):
                result = -result
        else:
            raise UnknownInfixOperator(left, operator, right)

        if not Integer.fits(result):
            raise IntegerOverflow(left, operator, right)
        return Integer(result)

    @staticmethod
    def eval_boolean_infix_expression(left, operator, right):
        if operator is Infix.EQ:
            return native_bool(left.value == right.value)
        elif operator is Infix.NOT_EQ:
            return native_bool(left.value != right.value)
        raise UnknownInfixOperator(left, operator, right)

    @classmethod
    def eval_if_expression(cls, expression, env):
        condition = cls.eval_expression(expression.condition, env)
        if isinstance(condition, ReturnValue):
            return condition
        if condition.truthy:
            return cls.eval_statement(expression.consequence, env)
        elif expression.alternative is not None:
            return cls.eval_statement(expression.alternative, env)
        return NULL

    @classmethod
    def apply_function(cls, function, arguments):
        """Calls function with already evaluated arguments. Parameters are bound positionally in a new scope enclosing
        the function's captured environment: extra arguments are ignored, missing ones are left unbound.
        """
        if not isinstance(function, Function):
            raise NotAFunction(function)

        call_env = Environment.create_enclosed(function.env)
        for parameter, argument in zip(function.parameters, arguments):
            call_env.set(parameter.name, argument)

        result = cls.eval_statement(function.body, call_env)
        if isinstance(result, ReturnValue):
            return result.value
        return result


def evaluate(source, env=None):
    """Parses and evaluates monkey source text in env. Returns the resulting MonkeyObject."""
    return Evaluator.eval(parse(source), env)
