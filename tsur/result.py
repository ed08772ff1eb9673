"""
Result type.

A ``Result`` is the outcome of a computation that either succeeded with a
value (``Ok``) or failed with an error (``Err``). Expected failures are
returned as ``Err`` values instead of being raised.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from .config.settings import get_settings
from .core.exceptions import UnwrapError
from .core.logging_config import get_logger
from .core.sentinels import same_value
from .option import NONE, Option, Some

logger = get_logger(__name__)

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')
F = TypeVar('F')


class ResultVariant(Enum):
    """Discriminant of a Result."""
    OK = 'ok'
    ERR = 'err'


def _callable_name(fn: Callable) -> str:
    return getattr(fn, '__qualname__', None) or repr(fn)


def _log_captured(source: str, fn: Callable, error: Exception) -> None:
    logger.debug(
        f"{source} captured {type(error).__name__} from {_callable_name(fn)}: {error}",
        exc_info=error if get_settings().log_captured_tracebacks else None
    )


@dataclass(frozen=True, repr=False)
class Result(Generic[T, E]):
    """
    Success or failure.

    The variant is stored in its own field next to the payload, so any
    payload, sentinels included, keeps the variant it was built with.
    """
    _variant: ResultVariant
    _value: Any

    def __post_init__(self):
        if not isinstance(self._variant, ResultVariant):
            raise TypeError(f"Result variant must be a ResultVariant, got {self._variant!r}")

    @staticmethod
    def from_(
        source: Any,
        predicate: Optional[Callable[[Any], Any]] = None
    ) -> 'Result[Any, Any]':
        """
        Wrap a value as ``Ok`` or ``Err``.

        Args:
            source: Value to wrap
            predicate: Optional test deciding ``Ok``; by default any
                exception instance is an ``Err`` and everything else ``Ok``

        Returns:
            ``Ok(source)`` or ``Err(source)``
        """
        if predicate is not None:
            passed = predicate(source)
        else:
            passed = not isinstance(source, BaseException)
        return Ok(source) if passed else Err(source)

    @staticmethod
    def try_(fn: Callable[..., T], *args: Any, **kwargs: Any) -> 'Result[T, Exception]':
        """
        Call ``fn`` and capture what it raises.

        Args:
            fn: Function to call
            *args: Positional arguments for ``fn``
            **kwargs: Keyword arguments for ``fn``

        Returns:
            ``Ok`` of the return value, or ``Err`` of the raised exception
        """
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as error:
            _log_captured('Result.try_', fn, error)
            return Err(error)

    @staticmethod
    async def try_async(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> 'Result[Any, Exception]':
        """
        Call ``fn``, await its return value if needed and capture failures.

        Cancellation of the awaiting task is not captured.

        Args:
            fn: Function or coroutine function to call
            *args: Positional arguments for ``fn``
            **kwargs: Keyword arguments for ``fn``

        Returns:
            ``Ok`` of the settled value, or ``Err`` of the raised exception
        """
        try:
            value = fn(*args, **kwargs)
            if inspect.isawaitable(value):
                value = await value
            return Ok(value)
        except Exception as error:
            _log_captured('Result.try_async', fn, error)
            return Err(error)

    @staticmethod
    def is_result(maybe_result: Any) -> bool:
        return isinstance(maybe_result, Result)

    @staticmethod
    def is_same(a: Any, b: Any) -> bool:
        """True if both are ``Ok`` holding the same value."""
        return (
            Result.is_result(a)
            and Result.is_result(b)
            and a.is_ok()
            and b.is_ok()
            and same_value(a._value, b._value)
        )

    @staticmethod
    def is_same_err(a: Any, b: Any) -> bool:
        """True if both are ``Err`` holding the same error."""
        return (
            Result.is_result(a)
            and Result.is_result(b)
            and a.is_err()
            and b.is_err()
            and same_value(a._value, b._value)
        )

    def __iter__(self) -> Iterator[T]:
        if self.is_ok():
            yield self._value

    def __str__(self) -> str:
        return f"Ok({self._value})" if self.is_ok() else f"Err({self._value})"

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self.is_ok() else f"Err({self._value!r})"

    def is_ok(self) -> bool:
        return self._variant is ResultVariant.OK

    def is_err(self) -> bool:
        return self._variant is ResultVariant.ERR

    def is_ok_and(self, predicate: Callable[[T], Any]) -> bool:
        return self.is_ok() and bool(predicate(self._value))

    def is_err_and(self, predicate: Callable[[E], Any]) -> bool:
        return self.is_err() and bool(predicate(self._value))

    def and_(self, result_b: 'Result[U, F]') -> 'Result[U, Union[E, F]]':
        """Return ``result_b`` if this is ``Ok``, otherwise this ``Err``."""
        return result_b if self.is_ok() else self

    def and_then(self, get_result_b: Callable[[T], 'Result[U, F]']) -> 'Result[U, Union[E, F]]':
        """Chain a fallible computation on the ``Ok`` value."""
        return get_result_b(self._value) if self.is_ok() else self

    def or_(self, result_b: 'Result[U, F]') -> 'Result[Union[T, U], F]':
        """Return this ``Ok``, otherwise ``result_b``."""
        return self if self.is_ok() else result_b

    def or_else(self, get_result_b: Callable[[], 'Result[U, F]']) -> 'Result[Union[T, U], F]':
        """Return this ``Ok``, otherwise ``get_result_b()``."""
        return self if self.is_ok() else get_result_b()

    def flatten(self) -> 'Result[Any, Any]':
        """Remove one level of nesting on the ``Ok`` side."""
        if self.is_ok() and Result.is_result(self._value):
            return self._value
        return self

    def map(self, fn: Callable[[T], U]) -> 'Result[U, E]':
        return Ok(fn(self._value)) if self.is_ok() else self

    def map_err(self, fn: Callable[[E], F]) -> 'Result[T, F]':
        return Err(fn(self._value)) if self.is_err() else self

    def transpose(self) -> Option['Result[Any, E]']:
        """
        Turn a Result of an Option into an Option of a Result.

        ``Ok(Some(v))`` becomes ``Some(Ok(v))``, ``Ok(NONE)`` becomes
        ``NONE``, ``Ok(v)`` of a plain value becomes ``Some(Ok(v))`` and
        ``Err(e)`` becomes ``Some(Err(e))``.
        """
        if self.is_ok() and Option.is_option(self._value):
            return self._value.map(Ok)
        return Some(self)

    def ok(self) -> Option[T]:
        return Some(self._value) if self.is_ok() else NONE

    def err(self) -> Option[E]:
        return Some(self._value) if self.is_err() else NONE

    def unwrap(self, message: Optional[str] = None) -> T:
        """
        Return the ``Ok`` value.

        Args:
            message: Error message used when this is ``Err``

        Raises:
            UnwrapError: If this is ``Err``; chained from the error when
                the error is an exception
        """
        if self.is_ok():
            return self._value
        if message is None:
            message = f"called `Result.unwrap()` on an `Err` error: {self._value}"
        cause = self._value if isinstance(self._value, BaseException) else None
        raise UnwrapError(message, self) from cause

    def unwrap_or(self, default: Any = None) -> Any:
        return self._value if self.is_ok() else default

    def unwrap_or_else(self, fn: Callable[[], U]) -> Union[T, U]:
        return self._value if self.is_ok() else fn()

    def unwrap_err(self, message: Optional[str] = None) -> E:
        """
        Return the ``Err`` error.

        Args:
            message: Error message used when this is ``Ok``

        Raises:
            UnwrapError: If this is ``Ok``
        """
        if self.is_err():
            return self._value
        if message is None:
            message = f"called `Result.unwrap_err()` on an `Ok` value: {self._value}"
        raise UnwrapError(message, self)

    def unwrap_err_or(self, default: Any = None) -> Any:
        return self._value if self.is_err() else default

    def unwrap_err_or_else(self, fn: Callable[[], U]) -> Union[E, U]:
        return self._value if self.is_err() else fn()

    def match(self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        """Call ``on_ok(value)`` or ``on_err(error)`` and return its result."""
        return on_ok(self._value) if self.is_ok() else on_err(self._value)


def Ok(value: T) -> Result[T, Any]:
    """Wrap a value into a successful Result."""
    return Result(ResultVariant.OK, value)


def Err(error: E) -> Result[Any, E]:
    """Wrap an error into a failed Result."""
    return Result(ResultVariant.ERR, error)
