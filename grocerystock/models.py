"""Grocery item records and the stock-number ordered inventory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Pricing:
    """Prices and quantities bought wholesale and sold retail."""

    wholesale_price: float
    retail_price: float
    wholesale_quantity: int
    retail_quantity: int


@dataclass
class GroceryItem:
    """A single grocery product held in the inventory."""

    name: str
    department: str
    stock_number: int
    pricing: Pricing

    def in_stock(self) -> int:
        """Units bought wholesale that have not yet been sold."""
        return self.pricing.wholesale_quantity - self.pricing.retail_quantity


class Inventory:
    """Grocery items kept in descending order of stock number."""

    def __init__(self, items: Iterable[GroceryItem] = ()) -> None:
        self._items: list[GroceryItem] = []
        for item in items:
            self.insert(item)

    def insert(self, item: GroceryItem) -> None:
        """Place ``item`` so that stock numbers stay in descending order."""
        if not self._items or self._items[0].stock_number < item.stock_number:
            index = 0
        else:
            index = next(
                (
                    position
                    for position, other in enumerate(self._items[1:], start=1)
                    if other.stock_number <= item.stock_number
                ),
                len(self._items),
            )
        self._items.insert(index, item)

    def delete(self, stock_number: int) -> Optional[GroceryItem]:
        """Remove the first item with ``stock_number``; return it, or None if absent."""
        for index, item in enumerate(self._items):
            if item.stock_number == stock_number:
                return self._items.pop(index)
        return None

    def __iter__(self) -> Iterator[GroceryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Inventory({self._items!r})"