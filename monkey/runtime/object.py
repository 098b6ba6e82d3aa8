"""Runtime values produced by the evaluator.

Integers are signed 32-bit. TRUE, FALSE and NULL are shared singletons, but values compare by content, so
Boolean(True) == TRUE holds as well.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from monkey.syntax.ast import BlockStatement, FunctionLiteral, Identifier


INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class MonkeyObject(ABC):
    """Superclass of every runtime value."""

    @abstractmethod
    def inspect(self):
        """Returns how this value is displayed to the user."""

    @property
    def truthy(self):
        """Everything is truthy except false and null."""
        return True


@dataclass(frozen=True)
class Integer(MonkeyObject):
    value: int

    @staticmethod
    def fits(value):
        """Whether or not value is representable as a signed 32-bit integer."""
        return INT_MIN <= value <= INT_MAX

    def inspect(self):
        return str(self.value)


@dataclass(frozen=True)
class Boolean(MonkeyObject):
    value: bool

    def inspect(self):
        return "true" if self.value else "false"

    @property
    def truthy(self):
        return self.value


@dataclass(frozen=True)
class Null(MonkeyObject):

    def inspect(self):
        return "null"

    @property
    def truthy(self):
        return False


@dataclass(frozen=True)
class ReturnValue(MonkeyObject):
    """Wraps the value of a return statement while it propagates up to the enclosing call (or the program). Programs
    never get to hold one of these.
    """
    value: MonkeyObject

    def inspect(self):
        return self.value.inspect()


@dataclass(frozen=True)
class Function(MonkeyObject):
    """A function value: a function literal paired with the environment it was evaluated in. env is shared, not
    copied, and is left out of comparisons and repr because it may (indirectly) hold this very function.
    """
    parameters: Tuple[Identifier, ...]
    body: BlockStatement
    env: object = field(compare=False, repr=False)

    def inspect(self):
        return FunctionLiteral(self.parameters, self.body).to_code()


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool(value):
    """Returns the shared Boolean singleton for value."""
    return TRUE if value else FALSE
