"""Monkey abstract syntax tree.

Formally, the grammar the parser accepts can be defined as

```
<program>    ::= <statement>*
<statement>  ::= "let" <ident> "=" <expr> [";"]
               | "return" <expr> [";"]
               | <block> [";"]
               | <expr> [";"]
<block>      ::= "{" <statement>* "}"
<expr>       ::= <ident> | <integer> | "true" | "false"
               | ("-" | "!") <expr>
               | <expr> ("+" | "-" | "*" | "/" | "<" | ">" | "==" | "!=") <expr>
               | "(" <expr> ")"
               | "if" "(" <expr> ")" <block> ["else" <block>]
               | "fn" "(" [<ident> ("," <ident>)*] ")" <block>
               | <expr> "(" [<expr> ("," <expr>)*] ")"
```

Nodes are immutable once built and are shared freely (function values hold on to their body, for example).

Every node renders back to source with to_code. Prefix and infix applications are always wrapped in parentheses, so
the rendering spells out exactly how the parser grouped the input: "a + b * c" renders as "(a + (b * c));". The
rendering parses back to an equal tree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from monkey.syntax.precedence import Infix, Prefix


class Node(ABC):
    """Superclass of every syntax tree node."""

    @abstractmethod
    def to_code(self):
        """Renders this node as fully parenthesized monkey source."""

    def __str__(self):
        return self.to_code()


class Expression(Node):
    """Superclass of every node that evaluates to a value."""


class Statement(Node):
    """Superclass of every node that makes up a program or block."""


@dataclass(frozen=True)
class Identifier(Expression):
    name: str

    def to_code(self):
        return self.name


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    """Non-negative: "-5" is the prefix expression (-5), never a literal."""
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"integer literal must be non-negative, got {self.value}")

    def to_code(self):
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool

    def to_code(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class PrefixExpression(Expression):
    operator: Prefix
    operand: Expression

    def to_code(self):
        return f"({self.operator}{self.operand.to_code()})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    left: Expression
    operator: Infix
    right: Expression

    def to_code(self):
        return f"({self.left.to_code()} {self.operator} {self.right.to_code()})"


@dataclass(frozen=True)
class IfExpression(Expression):
    condition: Expression
    consequence: "BlockStatement"
    alternative: Optional["BlockStatement"] = None

    def to_code(self):
        code = f"if ({self.condition.to_code()}) {self.consequence.to_code()}"
        if self.alternative is not None:
            code += f" else {self.alternative.to_code()}"
        return code


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    parameters: Tuple[Identifier, ...]
    body: "BlockStatement"

    def to_code(self):
        return f"fn({', '.join(param.to_code() for param in self.parameters)}) {self.body.to_code()}"


@dataclass(frozen=True)
class CallExpression(Expression):
    callee: Expression
    arguments: Tuple[Expression, ...]

    def to_code(self):
        return f"{self.callee.to_code()}({', '.join(arg.to_code() for arg in self.arguments)})"


@dataclass(frozen=True)
class IllegalExpression(Expression):
    """Placeholder for an expression that failed to parse. Never part of a successfully parsed program."""

    def to_code(self):
        return "[illegal expression]"


@dataclass(frozen=True)
class LetStatement(Statement):
    name: Identifier
    value: Expression

    def to_code(self):
        return f"let {self.name.to_code()} = {self.value.to_code()};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    value: Expression

    def to_code(self):
        return f"return {self.value.to_code()};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression

    def to_code(self):
        return f"{self.expression.to_code()};"


@dataclass(frozen=True)
class BlockStatement(Statement):
    statements: Tuple[Statement, ...] = ()

    def to_code(self):
        return "{\n" + "".join(f"{statement.to_code()}\n" for statement in self.statements) + "}"


@dataclass(frozen=True)
class Program(Node):
    """Root of a syntax tree: the statements of one input, in order."""
    statements: Tuple[Statement, ...] = ()

    def to_code(self):
        return "".join(f"{statement.to_code()}\n" for statement in self.statements)
