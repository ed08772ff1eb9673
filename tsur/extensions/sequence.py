"""
Sequence adapter.

``Seq`` is a list that exposes the array helpers as methods so calls can
be chained. Importing this module is optional; the core never depends on it.
"""

from typing import Any, Callable, List, TypeVar

from .. import array
from ..core.sentinels import true_predicate
from ..option import Option

T = TypeVar('T')
U = TypeVar('U')


class Seq(List[T]):
    """A list with Option-aware helper methods."""

    def filter_map(self, fn: Callable[..., Option[U]]) -> 'Seq[U]':
        return Seq(array.filter_map(self, fn))

    def map_while(self, fn: Callable[..., Option[U]]) -> 'Seq[U]':
        return Seq(array.map_while(self, fn))

    def reduce_while(self, fn: Callable[..., Option[U]], initial: U) -> U:
        return array.reduce_while(self, fn, initial)

    def first_index(self, predicate: Callable[..., Any]) -> Option[int]:
        return array.first_index(self, predicate)

    def last_index(self, predicate: Callable[..., Any]) -> Option[int]:
        return array.last_index(self, predicate)

    def first(self, predicate: Callable[..., Any] = true_predicate) -> Option[T]:
        return array.first(self, predicate)

    def last(self, predicate: Callable[..., Any] = true_predicate) -> Option[T]:
        return array.last(self, predicate)

    def first_map(self, fn: Callable[..., Option[U]]) -> Option[U]:
        return array.first_map(self, fn)

    def last_map(self, fn: Callable[..., Option[U]]) -> Option[U]:
        return array.last_map(self, fn)
