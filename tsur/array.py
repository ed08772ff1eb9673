"""
Array helpers.

Free functions over ordered sequences, driven by callbacks that return an
Option. Callbacks are offered ``(item, index, seq)``; ``reduce_while``
callbacks are offered ``(acc, item, index, seq)``. A callback receives as
many of those leading arguments as it accepts positionally, so both of
these work::

    map_while(numbers, lambda v: Some(v * 2) if v < 4 else NONE)
    filter_map(rows, lambda row, index, rows: Some(index) if row else NONE)

None of the helpers mutate the sequence.
"""

import inspect
from typing import Any, Callable, List, Sequence, TypeVar

from .core.sentinels import positive_number, true_predicate
from .option import NONE, Option

T = TypeVar('T')
U = TypeVar('U')

Predicate = Callable[..., Any]
OptionFn = Callable[..., Option[U]]


def _fit_arguments(fn: Callable, offered: int) -> Callable:
    """
    Adapt ``fn`` to be called with ``offered`` positional arguments.

    Callables without an inspectable signature, or taking ``*args``, are
    called with every argument.
    """
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return fn
    accepted = 0
    for parameter in parameters:
        if parameter.kind is parameter.VAR_POSITIONAL:
            return fn
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            accepted += 1
    if accepted >= offered:
        return fn
    return lambda *args: fn(*args[:accepted])


def filter_map(seq: Sequence[T], fn: OptionFn) -> List[U]:
    """
    Filter and map in one pass.

    Args:
        seq: Source sequence
        fn: Returns ``Some(mapped)`` to keep an item, ``NONE`` to drop it

    Returns:
        The unwrapped ``Some`` results, in order
    """
    results = []
    fn = _fit_arguments(fn, 3)
    for index, item in enumerate(seq):
        result = fn(item, index, seq)
        if result.is_some():
            results.append(result.unwrap())
    return results


def map_while(seq: Sequence[T], fn: OptionFn) -> List[U]:
    """
    Map items until ``fn`` first returns ``NONE``.

    Args:
        seq: Source sequence
        fn: Mapping callback returning an Option

    Returns:
        The unwrapped results preceding the first ``NONE``
    """
    results = []
    fn = _fit_arguments(fn, 3)
    for index, item in enumerate(seq):
        result = fn(item, index, seq)
        if result.is_none():
            break
        results.append(result.unwrap())
    return results


def reduce_while(
    seq: Sequence[T],
    fn: Callable[[U, T, int, Sequence[T]], Option[U]],
    initial: U
) -> U:
    """
    Left fold that stops at the first ``NONE``.

    Args:
        seq: Source sequence
        fn: Called with the accumulator and each item; returns the next
            accumulator wrapped in ``Some``, or ``NONE`` to stop
        initial: Starting accumulator

    Returns:
        The last accumulator produced before the fold stopped
    """
    acc = initial
    fn = _fit_arguments(fn, 4)
    for index, item in enumerate(seq):
        result = fn(acc, item, index, seq)
        if result.is_none():
            break
        acc = result.unwrap()
    return acc


def _find_index(seq: Sequence[T], predicate: Predicate, indices) -> int:
    predicate = _fit_arguments(predicate, 3)
    for index in indices:
        if predicate(seq[index], index, seq):
            return index
    return -1


def first_index(seq: Sequence[T], predicate: Predicate) -> Option[int]:
    """Index of the first item satisfying ``predicate``."""
    return Option.from_(_find_index(seq, predicate, range(len(seq))), positive_number)


def last_index(seq: Sequence[T], predicate: Predicate) -> Option[int]:
    """Index of the last item satisfying ``predicate``."""
    return Option.from_(
        _find_index(seq, predicate, range(len(seq) - 1, -1, -1)),
        positive_number
    )


def first(seq: Sequence[T], predicate: Predicate = true_predicate) -> Option[T]:
    """First item satisfying ``predicate``, or the first item when omitted."""
    return first_index(seq, predicate).map(lambda index: seq[index])


def last(seq: Sequence[T], predicate: Predicate = true_predicate) -> Option[T]:
    """Last item satisfying ``predicate``, or the last item when omitted."""
    return last_index(seq, predicate).map(lambda index: seq[index])


def first_map(seq: Sequence[T], fn: OptionFn) -> Option[U]:
    """
    First ``Some`` returned by ``fn``, scanning forward.

    Stops calling ``fn`` as soon as a ``Some`` is found.
    """
    fn = _fit_arguments(fn, 3)
    for index, item in enumerate(seq):
        result = fn(item, index, seq)
        if result.is_some():
            return result
    return NONE


def last_map(seq: Sequence[T], fn: OptionFn) -> Option[U]:
    """
    Last ``Some`` returned by ``fn``, scanning backward.

    Stops calling ``fn`` as soon as a ``Some`` is found.
    """
    fn = _fit_arguments(fn, 3)
    for index in range(len(seq) - 1, -1, -1):
        result = fn(seq[index], index, seq)
        if result.is_some():
            return result
    return NONE
