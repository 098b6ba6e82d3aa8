"""Error handling for the monkey language. Only MonkeyExceptions should be encountered during running: if another type
of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

There are two independent families of errors, both of which are terminal for the input that raised them:
    - ParseError (see monkey/syntax/parser.py): raised while building the syntax tree
    - EvaluatorError (see monkey/runtime/evaluator.py): raised while walking the syntax tree
"""

import sys

from termcolor import colored


class MonkeyException(Exception):
    """Templates an error message so that it can be used to throw a monkey error. exprs are the snippets substituted
    into msg, start/end are offsets into the source that was being processed (-1 if unknown).
    """

    def __init__(self, msg, exprs=None, start=-1, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*self.exprs)

        self.start = start
        self.end = end if end != -1 else start + 1
        self.diagnosis = diagnosis and start != -1
        self.internal = internal

        super().__init__(self.msg)

    def highlighted(self):
        """Returns self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))


class ParseError(MonkeyException):
    """Superclass for every error raised while parsing."""


class EvaluatorError(MonkeyException):
    """Superclass for every error raised while evaluating. Syntax trees carry no source offsets, so there is nothing to
    diagnose.
    """

    def __init__(self, msg, exprs=None):
        super().__init__(msg, exprs, diagnosis=False)


class UnexpectedToken(ParseError):
    """A specific token was required, but another one was found."""

    def __init__(self, actual, expected):
        self.actual = actual
        self.expected = expected
        msg = "expected '{}', got '{}' instead"
        super().__init__(msg, (expected, actual), start=actual.position, end=actual.end)


class NotFoundLetIdentifier(ParseError):
    """'let' was not followed by an identifier."""

    def __init__(self, found):
        self.found = found
        super().__init__("expected identifier after 'let', got '{}'", [found], start=found.position, end=found.end)


class NotFoundInfixHandler(ParseError):
    """Operator-position token with no infix parsing rule."""

    def __init__(self, found):
        self.found = found
        super().__init__("no infix parse rule for '{}'", [found], start=found.position, end=found.end)


class UnimplementedExpression(ParseError):
    """Expression-position token with no prefix parsing rule."""

    def __init__(self, found):
        self.found = found
        super().__init__("no prefix parse rule for '{}'", [found], start=found.position, end=found.end)


class TypeMismatch(EvaluatorError):

    def __init__(self, left, operator, right):
        self.left, self.operator, self.right = left, operator, right
        super().__init__("type mismatch: {} {} {}", (left.inspect(), operator, right.inspect()))


class UnknownInfixOperator(EvaluatorError):

    def __init__(self, left, operator, right):
        self.left, self.operator, self.right = left, operator, right
        super().__init__("unknown operator: {} {} {}", (left.inspect(), operator, right.inspect()))


class UnknownPrefixOperator(EvaluatorError):

    def __init__(self, operator, operand):
        self.operator, self.operand = operator, operand
        super().__init__("unknown operator: {}{}", (operator, operand.inspect()))


class NotFoundIdentifier(EvaluatorError):

    def __init__(self, name):
        self.name = name
        super().__init__("identifier not found: {}", name)


class DivisionByZero(EvaluatorError):

    def __init__(self, left, operator, right):
        self.left, self.operator, self.right = left, operator, right
        super().__init__("division by zero: {} {} {}", (left.inspect(), operator, right.inspect()))


class IntegerOverflow(EvaluatorError):
    """Result of an integer operation does not fit in a signed 32-bit integer. right is None for prefix operators."""

    def __init__(self, left, operator, right=None):
        self.left, self.operator, self.right = left, operator, right
        if right is None:
            super().__init__("integer overflow: {}{}", (operator, left.inspect()))
        else:
            super().__init__("integer overflow: {} {} {}", (left.inspect(), operator, right.inspect()))


class NotAFunction(EvaluatorError):

    def __init__(self, callee):
        self.callee = callee
        super().__init__("not a function: {}", callee.inspect())


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom monkey errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, source, line_num):
        """Registers source (which starts at line_num) in traceback given path. Should be called prior to Session
        add/run.
        """
        self.traceback[path] = (source, line_num)

    def remove_line(self, path):
        """Removes source from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def locate(source, start):
        """Returns (line, line offset, column) of the line in source that contains offset start."""
        start = min(start, len(source))
        line_start = source.rfind("\n", 0, start) + 1
        line_end = source.find("\n", start)
        if line_end == -1:
            line_end = len(source)
        return source[line_start:line_end], source.count("\n", 0, start), start - line_start

    @staticmethod
    def diagnose(error, source):
        """Returns offending part of the line in source that error points at, highlighted and bolded."""
        line, __, col = ErrorHandler.locate(source, error.start)
        end = max(min(col + error.end - error.start, len(line)), col + 1)

        diagnosis = "  " + line[:col]
        diagnosis += colored(line[col:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * col
        diagnosis += colored("^" + "~" * (end - col - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a MonkeyException, and self.traceback must be a
        dict of file: (source, line_num) representing origination of error.
        """
        error_msg = ""
        last_source = None
        for file, (source, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if source:
                last_source = source
                line, offset, __ = ErrorHandler.locate(source, error.start if error.diagnosis else 0)
                error_msg += f"  File '{file}', line {line_num + offset}:\n"
                error_msg += f"    {line.strip()}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.highlighted()
        print(error_msg)

        if last_source and not error.internal and error.diagnosis:
            print(ErrorHandler.diagnose(error, last_source))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(MonkeyException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(MonkeyException("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, MonkeyException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(MonkeyException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
