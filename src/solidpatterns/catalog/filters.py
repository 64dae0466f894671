"""Filters that apply criteria to a sequence of products."""
from __future__ import annotations

from typing import Iterable, Iterator, Protocol, TypeVar, runtime_checkable

from .product import Color, Product, Size
from .specifications import Specification

T = TypeVar("T")


@runtime_checkable
class Filter(Protocol[T]):
    """Protocol for anything that narrows items by a specification."""

    def apply(self, items: Iterable[T], spec: Specification[T]) -> Iterator[T]:
        """Yield the items that satisfy ``spec``."""
        ...


class SpecificationFilter:
    """Generic filter driven entirely by a :class:`Specification`.

    The result is lazy: nothing is read from ``items`` until the returned
    iterator is consumed, and each call starts a fresh scan.  An endless
    input therefore yields an endless output.
    """

    def apply(self, items: Iterable[T], spec: Specification[T]) -> Iterator[T]:
        for item in items:
            if spec.is_satisfied(item):
                yield item


class ProductFilter:
    """Per-attribute filter methods: the closed-for-extension version.

    Every new criterion would need another method here.  Kept only to
    compare against :class:`SpecificationFilter`; add new criteria as
    ``Specification`` subclasses instead.
    """

    def filter_by_size(self, products: Iterable[Product], size: Size) -> Iterator[Product]:
        return self._filter_by(products, "size", size)

    def filter_by_color(self, products: Iterable[Product], color: Color) -> Iterator[Product]:
        return self._filter_by(products, "color", color)

    @staticmethod
    def _filter_by(products: Iterable[Product], attr: str, value: object) -> Iterator[Product]:
        for p in products:
            if getattr(p, attr) == value:
                yield p
