"""Solutions to the exercises on recursive lists and clone-on-write data."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value followed by the rest of the list."""

    head: int
    tail: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        cell: Cons | Nil = self
        while isinstance(cell, Cons):
            yield cell.head
            cell = cell.tail


ConsList = Cons | Nil


def create_empty_list() -> ConsList:
    """A cons list with no elements."""
    return Nil()


def create_non_empty_list() -> ConsList:
    """A cons list holding a single element."""
    return Cons(1, Nil())


class Cow(Generic[T]):
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[T], *, owned: bool = False) -> None:
        if owned and not isinstance(data, list):
            data = list(data)
        self._data: Sequence[T] = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        """Whether the data belongs to this Cow rather than being borrowed."""
        return self._owned

    @property
    def value(self) -> Sequence[T]:
        """The data currently held, borrowed or owned."""
        return self._data

    def to_mut(self) -> list[T]:
        """A mutable list of the data, copying it first if it is borrowed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        assert isinstance(self._data, list)
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow[int]) -> Cow[int]:
    """Make every element non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow