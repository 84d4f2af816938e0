"""Symbolic expression trees with evaluation, differentiation and simplification."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

__all__ = [
    "Expression",
    "IntegralConstant",
    "Constant",
    "Variable",
    "UnaryExpression",
    "BinaryExpression",
    "Negate",
    "Plus",
    "Minus",
    "Multiplies",
    "Divides",
    "simplify",
]


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral)


def _div(a: Any, b: Any) -> Any:
    """Divide, truncating toward zero when both operands are integers."""
    if _is_integer(a) and _is_integer(b):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b > 0) else -quotient
    return a / b


def _as_expression(value: Any) -> Optional["Expression"]:
    if isinstance(value, Expression):
        return value
    if isinstance(value, numbers.Real):
        return Constant(value)
    return None


def _variable_index(variable: Any) -> int:
    if isinstance(variable, Variable):
        return variable.index
    if _is_integer(variable) and not isinstance(variable, bool):
        return int(variable)
    raise TypeError(f"expected a Variable or an integer index, got {variable!r}")


class Expression(ABC):
    """Base of every node of a symbolic expression tree."""

    @abstractmethod
    def __call__(self, *args: Any) -> Any:
        """Evaluate the expression with the given arguments."""

    @abstractmethod
    def derivative(self, variable: Union["Variable", int]) -> "Expression":
        """Return the derivative with respect to the given variable."""

    @abstractmethod
    def _kind(self) -> tuple:
        """Structural signature that plays the part of the expression's type."""

    def _simplify(self) -> "Expression":
        return self

    def _binary(self, other: Any, op: Callable[["Expression", "Expression"], "Expression"], reflected: bool):
        operand = _as_expression(other)
        if operand is None:
            return NotImplemented
        return op(operand, self) if reflected else op(self, operand)

    def __add__(self, other: Any) -> "Plus":
        return self._binary(other, Plus, False)

    def __radd__(self, other: Any) -> "Plus":
        return self._binary(other, Plus, True)

    def __sub__(self, other: Any) -> "Minus":
        return self._binary(other, Minus, False)

    def __rsub__(self, other: Any) -> "Minus":
        return self._binary(other, Minus, True)

    def __mul__(self, other: Any) -> "Multiplies":
        return self._binary(other, Multiplies, False)

    def __rmul__(self, other: Any) -> "Multiplies":
        return self._binary(other, Multiplies, True)

    def __truediv__(self, other: Any) -> "Divides":
        return self._binary(other, Divides, False)

    def __rtruediv__(self, other: Any) -> "Divides":
        return self._binary(other, Divides, True)

    def __neg__(self) -> "Negate":
        return Negate(self)


@dataclass(frozen=True)
class IntegralConstant(Expression):
    """An integer known when the expression is built."""

    value: int

    def __post_init__(self) -> None:
        if not _is_integer(self.value):
            raise TypeError(f"integral constant must be an integer, got {self.value!r}")

    def __call__(self, *args: Any) -> int:
        return self.value

    def derivative(self, variable: Union["Variable", int]) -> "IntegralConstant":
        _variable_index(variable)
        return IntegralConstant(0)

    def _kind(self) -> tuple:
        return (IntegralConstant, self.value)


@dataclass(frozen=True)
class Constant(Expression):
    """A numeric constant whose value is carried at run time."""

    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.value, numbers.Real):
            raise TypeError(f"constant must be a real number, got {self.value!r}")

    def __call__(self, *args: Any) -> Any:
        return self.value

    def derivative(self, variable: Union["Variable", int]) -> IntegralConstant:
        _variable_index(variable)
        return IntegralConstant(0)

    def _kind(self) -> tuple:
        return (Constant, type(self.value))


@dataclass(frozen=True)
class Variable(Expression):
    """The argument at a fixed position."""

    index: int

    def __post_init__(self) -> None:
        if not _is_integer(self.index) or isinstance(self.index, bool):
            raise TypeError(f"variable index must be an integer, got {self.index!r}")
        if self.index < 0:
            raise ValueError("variable index must be non-negative")

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def __call__(self, *args: Any) -> Any:
        if len(args) == 1 and isinstance(args[0], Sequence) and not isinstance(args[0], (str, bytes)):
            values = args[0]
        else:
            values = args
        return values[self.index]

    def derivative(self, variable: Union["Variable", int]) -> IntegralConstant:
        return IntegralConstant(1 if _variable_index(variable) == self.index else 0)

    def _kind(self) -> tuple:
        return (Variable, self.index)


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """An operation applied to one subexpression."""

    operand: Expression

    def __post_init__(self) -> None:
        if not isinstance(self.operand, Expression):
            raise TypeError(f"operand must be an expression, got {self.operand!r}")

    @property
    def expr(self) -> Expression:
        return self.operand

    def _kind(self) -> tuple:
        return (type(self), self.operand._kind())

    def _generic_simplify(self) -> Expression:
        simplified = simplify(self.operand)
        rebuilt = type(self)(simplified)
        if simplified._kind() == self.operand._kind():
            return rebuilt
        return simplify(rebuilt)


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """An operation applied to two subexpressions."""

    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        for operand in (self.left, self.right):
            if not isinstance(operand, Expression):
                raise TypeError(f"operand must be an expression, got {operand!r}")

    @property
    def expr(self) -> tuple[Expression, Expression]:
        return self.left, self.right

    def _kind(self) -> tuple:
        return (type(self), self.left._kind(), self.right._kind())

    def _generic_simplify(self) -> Expression:
        left, right = simplify(self.left), simplify(self.right)
        rebuilt = type(self)(left, right)
        if left._kind() == self.left._kind() and right._kind() == self.right._kind():
            return rebuilt
        return simplify(rebuilt)

    def _fold_constants(self, op: Callable[[Any, Any], Any], fold_two_constants: bool = True) -> Optional[Expression]:
        left, right = self.left, self.right
        if isinstance(left, IntegralConstant) and isinstance(right, IntegralConstant):
            return IntegralConstant(op(left.value, right.value))
        if isinstance(left, IntegralConstant) and isinstance(right, Constant):
            return Constant(op(left.value, right.value))
        if isinstance(left, Constant) and isinstance(right, IntegralConstant):
            return Constant(op(left.value, right.value))
        if fold_two_constants and isinstance(left, Constant) and isinstance(right, Constant):
            return Constant(op(left.value, right.value))
        return None

    def _left_is(self, value: int) -> bool:
        return isinstance(self.left, IntegralConstant) and self.left.value == value

    def _right_is(self, value: int) -> bool:
        return isinstance(self.right, IntegralConstant) and self.right.value == value


class Negate(UnaryExpression):
    """Arithmetic negation."""

    def __call__(self, *args: Any) -> Any:
        return -self.operand(*args)

    def derivative(self, variable: Union[Variable, int]) -> Expression:
        return -self.operand.derivative(variable)

    def _simplify(self) -> Expression:
        operand = self.operand
        if isinstance(operand, IntegralConstant):
            return IntegralConstant(-operand.value)
        if isinstance(operand, Constant):
            return Constant(-operand.value)
        if isinstance(operand, Negate):
            return simplify(operand.operand)
        return self._generic_simplify()


class Plus(BinaryExpression):
    """Sum of two expressions."""

    def __call__(self, *args: Any) -> Any:
        return self.left(*args) + self.right(*args)

    def derivative(self, variable: Union[Variable, int]) -> Expression:
        return self.left.derivative(variable) + self.right.derivative(variable)

    def _simplify(self) -> Expression:
        folded = self._fold_constants(lambda a, b: a + b)
        if folded is not None:
            return folded
        if self._left_is(0):
            return simplify(self.right)
        if self._right_is(0):
            return simplify(self.left)
        return self._generic_simplify()


class Minus(BinaryExpression):
    """Difference of two expressions."""

    def __call__(self, *args: Any) -> Any:
        return self.left(*args) - self.right(*args)

    def derivative(self, variable: Union[Variable, int]) -> Expression:
        return self.left.derivative(variable) - self.right.derivative(variable)

    def _simplify(self) -> Expression:
        folded = self._fold_constants(lambda a, b: a - b)
        if folded is not None:
            return folded
        if self._left_is(0):
            return simplify(-self.right)
        if self._right_is(0):
            return simplify(self.left)
        return self._generic_simplify()


class Multiplies(BinaryExpression):
    """Product of two expressions."""

    def __call__(self, *args: Any) -> Any:
        return self.left(*args) * self.right(*args)

    def derivative(self, variable: Union[Variable, int]) -> Expression:
        return (self.left.derivative(variable) * self.right
                + self.left * self.right.derivative(variable))

    def _simplify(self) -> Expression:
        folded = self._fold_constants(lambda a, b: a * b)
        if folded is not None:
            return folded
        if self._left_is(0) or self._right_is(0):
            return IntegralConstant(0)
        if self._left_is(1):
            return simplify(self.right)
        if self._right_is(1):
            return simplify(self.left)
        return self._generic_simplify()


class Divides(BinaryExpression):
    """Quotient of two expressions; integers divide with truncation toward zero."""

    def __call__(self, *args: Any) -> Any:
        return _div(self.left(*args), self.right(*args))

    def derivative(self, variable: Union[Variable, int]) -> Expression:
        numerator = (self.left.derivative(variable) * self.right
                     - self.left * self.right.derivative(variable))
        return numerator / (self.right * self.right)

    def _simplify(self) -> Expression:
        folded = self._fold_constants(_div, fold_two_constants=False)
        if folded is not None:
            return folded
        if self._left_is(0):
            return IntegralConstant(0)
        if self._right_is(0):
            raise ZeroDivisionError("Division by zero.")
        if self._right_is(1):
            return simplify(self.left)
        return self._generic_simplify()


def simplify(expression: Expression) -> Expression:
    """Return an equivalent expression with constant parts folded."""
    if not isinstance(expression, Expression):
        raise TypeError(f"expected an expression, got {expression!r}")
    return expression._simplify()