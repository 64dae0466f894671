"""Sample product domain used by the specification filters."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class Product:
    """A named product with a color and a size."""

    name: str
    color: Color
    size: Size

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Product name cannot be empty")


def sample_catalog() -> list[Product]:
    return [
        Product("Apple", Color.RED, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    ]
