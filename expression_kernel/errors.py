"""
Error types raised by the expression kernel, plus an explicit result type
for callers that prefer checking outcomes over catching exceptions.
"""

from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class ExpressionError(Exception):
    """Base class for failures of the kernel's tree walks"""

    def __init__(self, message: str, node: Any = None):
        super().__init__(message)
        self.node = node


class EvaluationError(ExpressionError):
    """A variable was reached while computing a numeric value"""


class DerivationError(ExpressionError):
    """No differentiation rule is available for a node"""


class Result(Generic[T]):
    """Outcome of ``try_evaluate`` / ``try_derive``: either a value or an error"""

    __slots__ = ('_value', '_error')

    def __init__(self, value: Optional[T] = None, error: Optional[ExpressionError] = None):
        if value is not None and error is not None:
            raise ValueError("A Result holds either a value or an error, not both")
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_error', error)

    def __setattr__(self, name, value):
        raise AttributeError("Result is immutable")

    def __delattr__(self, name):
        raise AttributeError("Result is immutable")

    @classmethod
    def success(cls, value: T) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: ExpressionError) -> 'Result[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Optional[ExpressionError]:
        return self._error

    def unwrap(self) -> T:
        """Return the value or raise the captured error"""
        if self._error is not None:
            raise self._error
        return self._value

    def unwrap_or(self, default: T) -> T:
        return default if self._error is not None else self._value

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"Result.success({self._value!r})"
        return f"Result.failure({type(self._error).__name__}({str(self._error)!r}))"
