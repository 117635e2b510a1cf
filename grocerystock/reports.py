"""Financial totals and stock listings over a collection of grocery items."""

from __future__ import annotations

from typing import Iterable

from grocerystock.models import GroceryItem


def total_revenue(items: Iterable[GroceryItem]) -> float:
    """Sum of retail price times units sold."""
    return sum(
        (item.pricing.retail_price * item.pricing.retail_quantity for item in items), 0.0
    )


def total_wholesale(items: Iterable[GroceryItem]) -> float:
    """Sum of wholesale price times units bought."""
    return sum(
        (item.pricing.wholesale_price * item.pricing.wholesale_quantity for item in items),
        0.0,
    )


def current_investment(items: Iterable[GroceryItem]) -> float:
    """Wholesale value of the units still held in stock."""
    return sum((item.pricing.wholesale_price * item.in_stock() for item in items), 0.0)


def total_profit(items: Iterable[GroceryItem]) -> float:
    """Revenue less the sum of wholesale cost and current investment."""
    items = tuple(items)
    return total_revenue(items) - (total_wholesale(items) + current_investment(items))


def total_sales(items: Iterable[GroceryItem]) -> int:
    """Total number of units sold."""
    return sum(item.pricing.retail_quantity for item in items)


def average_profit_per_sale(items: Iterable[GroceryItem]) -> float:
    """Total profit divided by total units sold.

    Raises ValueError when nothing has been sold.
    """
    items = tuple(items)
    sales = total_sales(items)
    if sales == 0:
        raise ValueError("no sales recorded")
    return total_profit(items) / sales


def items_in_stock(items: Iterable[GroceryItem]) -> list[GroceryItem]:
    """Items with at least one unit still in stock, in their original order."""
    return [item for item in items if item.in_stock() > 0]


def items_out_of_stock(items: Iterable[GroceryItem]) -> list[GroceryItem]:
    """Items whose every bought unit has been sold."""
    return [item for item in items if item.in_stock() == 0]


def items_in_department(items: Iterable[GroceryItem], department: str) -> list[GroceryItem]:
    """Items whose department name contains ``department``."""
    return [item for item in items if department in item.department]