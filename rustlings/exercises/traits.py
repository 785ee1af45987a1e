"""Solutions to the exercises on generics and traits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or the string "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that can describe its licence."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    version_number: int


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items report the same licence."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


class _BothTraits(Protocol):
    def some_function(self) -> bool: ...

    def other_function(self) -> bool: ...


def some_func(item: _BothTraits) -> bool:
    """True when the item satisfies both traits' checks."""
    return item.some_function() and item.other_function()