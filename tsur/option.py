"""
Option type.

An ``Option`` is an immutable representation of an optional value: every
``Option`` is either ``Some`` and holds a value, or ``NONE`` and does not.
``NONE`` is a single shared instance, so ``option is NONE`` is always a
valid emptiness check.
"""

from dataclasses import dataclass
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .core.exceptions import UnwrapError
from .core.sentinels import EMPTY, same_value

if TYPE_CHECKING:
    from .result import Result

T = TypeVar('T')
U = TypeVar('U')
B = TypeVar('B')
E = TypeVar('E')


class OptionVariant(Enum):
    """Discriminant of an Option."""
    SOME = 'some'
    NONE = 'none'


@dataclass(frozen=True, repr=False)
class Option(Generic[T]):
    """
    A value that may be absent.

    Build instances with ``Some(value)`` or use the shared ``NONE``.
    The variant is fixed at construction and never inferred from the
    payload, so ``Some(None)``, ``Some(0)`` and ``Some('')`` are all
    ``Some``.
    """
    _variant: OptionVariant
    _value: Any

    def __post_init__(self):
        if not isinstance(self._variant, OptionVariant):
            raise TypeError(f"Option variant must be an OptionVariant, got {self._variant!r}")
        if self._variant is OptionVariant.NONE and "NONE" in globals():
            raise ValueError("use the shared NONE instead of building another empty Option")

    @staticmethod
    def from_(
        source: Any,
        predicate: Optional[Callable[[Any], Any]] = None
    ) -> 'Option[Any]':
        """
        Wrap a value if it is truthy, or if it satisfies a predicate.

        Args:
            source: Value to wrap
            predicate: Optional test applied to ``source`` instead of
                its truthiness

        Returns:
            ``Some(source)`` if the test passes, otherwise ``NONE``
        """
        passed = predicate(source) if predicate is not None else source
        return Some(source) if passed else NONE

    @staticmethod
    def is_option(maybe_option: Any) -> bool:
        """Check whether a value is an Option."""
        return isinstance(maybe_option, Option)

    @staticmethod
    def is_same(a: Any, b: Any) -> bool:
        """
        Compare two options by identity.

        Args:
            a: First value
            b: Second value

        Returns:
            True if both are options and either both are ``NONE`` or
            both are ``Some`` holding the same value
        """
        if not (Option.is_option(a) and Option.is_option(b)):
            return False
        if a.is_none() or b.is_none():
            return a.is_none() and b.is_none()
        return same_value(a._value, b._value)

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self._value

    def __str__(self) -> str:
        return f"Some({self._value})" if self.is_some() else 'None'

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self.is_some() else 'None'

    def __reduce__(self):
        if self.is_none():
            return 'NONE'
        return (Some, (self._value,))

    def is_some(self) -> bool:
        return self._variant is OptionVariant.SOME

    def is_none(self) -> bool:
        return self._variant is OptionVariant.NONE

    def is_some_and(self, predicate: Callable[[T], Any]) -> bool:
        """Return True if this is ``Some`` and the value satisfies ``predicate``."""
        return self.is_some() and bool(predicate(self._value))

    def and_(self, option_b: 'Option[B]') -> 'Option[B]':
        """Return ``option_b`` if this is ``Some``, otherwise ``NONE``."""
        return option_b if self.is_some() else NONE

    def and_then(self, get_option_b: Callable[[T], 'Option[B]']) -> 'Option[B]':
        """
        Chain a computation that may itself produce no value.

        Args:
            get_option_b: Called with the value when this is ``Some``;
                must return an Option

        Returns:
            The Option returned by ``get_option_b``, or ``NONE``
        """
        return get_option_b(self._value) if self.is_some() else NONE

    def or_(self, option_b: 'Option[B]') -> 'Option[Union[T, B]]':
        """Return this option if it is ``Some``, otherwise ``option_b``."""
        return self if self.is_some() else option_b

    def or_else(self, get_option_b: Callable[[], 'Option[B]']) -> 'Option[Union[T, B]]':
        """Return this option if it is ``Some``, otherwise ``get_option_b()``."""
        return self if self.is_some() else get_option_b()

    def xor(self, option_b: 'Option[B]') -> 'Option[Union[T, B]]':
        """Return whichever option is ``Some`` if exactly one is, otherwise ``NONE``."""
        if self.is_some():
            return NONE if option_b.is_some() else self
        return option_b

    def zip(self, option_b: 'Option[B]') -> 'Option[Tuple[T, B]]':
        """Pair two values as ``Some((a, b))`` if both options are ``Some``."""
        if self.is_some() and option_b.is_some():
            return Some((self._value, option_b._value))
        return NONE

    def zip_with(
        self,
        option_b: 'Option[B]',
        fn: Callable[[T, B], U]
    ) -> 'Option[U]':
        """Combine two values with ``fn`` if both options are ``Some``."""
        if self.is_some() and option_b.is_some():
            return Some(fn(self._value, option_b._value))
        return NONE

    def unzip(self) -> Tuple['Option[Any]', 'Option[Any]']:
        """
        Split an option holding a pair into a pair of options.

        Returns:
            ``(Some(a), Some(b))`` if this is ``Some`` holding a tuple or
            list of exactly two items, otherwise ``(NONE, NONE)``
        """
        if (
            self.is_some()
            and isinstance(self._value, (tuple, list))
            and len(self._value) == 2
        ):
            a, b = self._value
            return Some(a), Some(b)
        return NONE, NONE

    def flatten(self) -> 'Option[Any]':
        """Remove one level of nesting; a non-Option value is left as is."""
        if self.is_some() and Option.is_option(self._value):
            return self._value
        return self

    def filter(self, predicate: Callable[[T], Any]) -> 'Option[T]':
        """Keep the value only if it satisfies ``predicate``."""
        return self if self.is_some_and(predicate) else NONE

    def map(self, fn: Callable[[T], U]) -> 'Option[U]':
        """Transform the value with ``fn`` if this is ``Some``."""
        return Some(fn(self._value)) if self.is_some() else NONE

    def transpose(self) -> 'Result[Option[Any], Any]':
        """
        Turn an Option of a Result into a Result of an Option.

        ``NONE`` becomes ``Ok(NONE)``, ``Some(Ok(v))`` becomes
        ``Ok(Some(v))``, ``Some(Err(e))`` becomes ``Err(e)`` and
        ``Some(v)`` of a plain value becomes ``Ok(Some(v))``.
        """
        from .result import Ok, Result

        if self.is_none():
            return Ok(NONE)
        if Result.is_result(self._value):
            return self._value.map(Some)
        return Ok(self)

    def ok_or(self, error: E) -> 'Result[T, E]':
        """Convert to ``Ok(value)``, or ``Err(error)`` if this is ``NONE``."""
        from .result import Err, Ok

        return Ok(self._value) if self.is_some() else Err(error)

    def ok_or_else(self, get_error: Callable[[], E]) -> 'Result[T, E]':
        """Convert to ``Ok(value)``, or ``Err(get_error())`` if this is ``NONE``."""
        from .result import Err, Ok

        return Ok(self._value) if self.is_some() else Err(get_error())

    def unwrap(self, message: Optional[str] = None) -> T:
        """
        Return the value.

        Args:
            message: Error message used when this is ``NONE``

        Returns:
            The contained value

        Raises:
            UnwrapError: If this is ``NONE``
        """
        if self.is_some():
            return self._value
        if message is None:
            message = 'called `Option.unwrap()` on a `None` value'
        raise UnwrapError(message, self)

    def unwrap_or(self, default: Any = None) -> Any:
        return self._value if self.is_some() else default

    def unwrap_or_else(self, fn: Callable[[], U]) -> Union[T, U]:
        return self._value if self.is_some() else fn()

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Call ``on_some(value)`` or ``on_none()`` and return its result."""
        return on_some(self._value) if self.is_some() else on_none()


def Some(value: T) -> Option[T]:
    """Wrap a value into an Option."""
    return Option(OptionVariant.SOME, value)


NONE: Option[Any] = Option(OptionVariant.NONE, EMPTY)
"""The shared empty option."""
