from enum import Enum


class Status(Enum):
    OK = "ok"
    OVERFLOW = "overflow"
    NEGATIVE_RESULT = "negative result"
    DIVIDE_BY_ZERO = "divide by zero"
    INDEX_OUT_OF_RANGE = "index out of range"


class BigNumError(Exception):
    """Base class for failures reported by a non-OK status."""
    status = None

    def __init__(self, message=""):
        super().__init__(message or getattr(self.status, "value", ""))


class BigNumOverflowError(BigNumError, OverflowError):
    status = Status.OVERFLOW


class NegativeResultError(BigNumError, ArithmeticError):
    status = Status.NEGATIVE_RESULT


class DivideByZeroError(BigNumError, ZeroDivisionError):
    status = Status.DIVIDE_BY_ZERO


class BitIndexError(BigNumError, IndexError):
    status = Status.INDEX_OUT_OF_RANGE


class WidthMismatchError(ValueError):
    """Operands of one operation were built with different layouts."""


_ERRORS = {cls.status: cls for cls in
           (BigNumOverflowError, NegativeResultError, DivideByZeroError, BitIndexError)}


def raise_for_status(status, detail=""):
    """Raise the exception matching a non-OK status; return quietly on OK."""
    if status is Status.OK:
        return
    message = status.value
    if detail:
        message = "{}: {}".format(detail, message)
    raise _ERRORS[status](message)
