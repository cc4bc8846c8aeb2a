"""Error hierarchy for precise_numbers.

Every failure is a precondition or invariant violation detected synchronously
and raised immediately to the caller. The classes also derive from the matching
builtin exception so callers can catch them the usual Python way:

- NullArgumentError      -> TypeError
- InvalidArgumentError   -> ValueError
- InvalidStateError      -> ArithmeticError
- NotInvertibleError     -> InvalidArgumentError, InvalidStateError, ZeroDivisionError
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class NumberContractError(Exception):
    """Base class for all precise_numbers contract violations."""


class NullArgumentError(NumberContractError, TypeError):
    """A required argument was None."""


class InvalidArgumentError(NumberContractError, ValueError):
    """An argument is outside the domain of the operation."""


class InvalidStateError(NumberContractError, ArithmeticError):
    """The receiver is in a state where the operation is undefined."""


class NotInvertibleError(InvalidArgumentError, InvalidStateError, ZeroDivisionError):
    """Division or inversion by a zero-valued operand.

    Dividing by a zero operand is a bad argument, inverting a zero receiver is a
    bad state; both are the same mathematical failure, so one class is both.
    """


def require_not_none(value: T | None, name: str) -> T:
    """Return value, or raise NullArgumentError if it is None.

    Args:
        value: Argument to check.
        name: Parameter name used in the error message.

    Returns:
        The unchanged value.

    Raises:
        NullArgumentError: If value is None.
    """
    if value is None:
        msg = f"expected {name} but actual None"
        raise NullArgumentError(msg)
    return value


__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "NotInvertibleError",
    "NullArgumentError",
    "NumberContractError",
    "require_not_none",
]
