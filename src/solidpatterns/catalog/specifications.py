"""Composable specifications: predicates over a single item.

New criteria are added by writing a new :class:`Specification` subclass,
never by editing an existing filter.  Specifications combine with ``&``
(logical AND) and ``|`` (logical OR)::

    spec = SizeSpecification(Size.LARGE) & ColorSpecification(Color.BLUE)
    big_blue = list(SpecificationFilter().apply(products, spec))
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .product import Color, Product, Size

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """A side-effect-free predicate over one item."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return True if ``item`` meets this specification."""

    def __and__(self, other: Specification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: Specification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)


class ColorSpecification(Specification[Product]):
    def __init__(self, color: Color) -> None:
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value})"


class SizeSpecification(Specification[Product]):
    def __init__(self, size: Size) -> None:
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value})"


class _BinarySpecification(Specification[T]):
    """Holds two child specifications; both are required."""

    def __init__(self, first: Specification[T], second: Specification[T]) -> None:
        if first is None:
            raise ValueError("first specification is required")
        if second is None:
            raise ValueError("second specification is required")
        self.first = first
        self.second = second

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.first!r}, {self.second!r})"


class AndSpecification(_BinarySpecification[T]):
    """Satisfied when both children are."""

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)


class OrSpecification(_BinarySpecification[T]):
    """Satisfied when at least one child is."""

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) or self.second.is_satisfied(item)
