"""Reading and writing the tab-separated inventory file."""

from __future__ import annotations

import os
from typing import Iterable, Union

from grocerystock.dates import date_difference, day_of_year
from grocerystock.models import GroceryItem, Inventory, Pricing

PathLike = Union[str, "os.PathLike[str]"]

REFERENCE_MONTH = 2
REFERENCE_DAY = 25
REFERENCE_YEAR = 2025
_FIELD_COUNT = 7


class InventoryFileError(Exception):
    """Raised when an inventory file cannot be opened, parsed or written."""


def _reference_day() -> int:
    return day_of_year(REFERENCE_MONTH, REFERENCE_DAY, REFERENCE_YEAR)


def _parse_header(line: str, path: PathLike) -> tuple[int, int]:
    fields = line.split()
    if len(fields) != 2:
        raise InventoryFileError(f"{path}: malformed date header {line!r}")
    try:
        file_day, file_year = (int(field) for field in fields)
    except ValueError as exc:
        raise InventoryFileError(f"{path}: malformed date header {line!r}") from exc
    return file_day, file_year


def _parse_item(line: str, path: PathLike, line_number: int) -> GroceryItem:
    fields = line.split("\t")
    if len(fields) != _FIELD_COUNT:
        raise InventoryFileError(
            f"{path}:{line_number}: expected {_FIELD_COUNT} fields, found {len(fields)}"
        )
    name, department, stock, wholesale_price, retail_price, bought, sold = fields
    try:
        pricing = Pricing(
            wholesale_price=float(wholesale_price),
            retail_price=float(retail_price),
            wholesale_quantity=int(bought),
            retail_quantity=int(sold),
        )
        return GroceryItem(name, department, int(stock), pricing)
    except ValueError as exc:
        raise InventoryFileError(f"{path}:{line_number}: {exc}") from exc


def _item_lines(lines: Iterable[str], path: PathLike) -> Iterable[GroceryItem]:
    for line_number, line in enumerate(lines, start=2):
        if line.strip():
            yield _parse_item(line, path, line_number)


def read_inventory(path: PathLike) -> tuple[Inventory, int]:
    """Load an inventory file.

    Returns the inventory and how many days old the file's date is,
    measured against the reference date.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise InventoryFileError(f"Could not open file {path}") from exc
    if not lines:
        raise InventoryFileError(f"{path}: missing date header")
    file_day, file_year = _parse_header(lines[0], path)
    days_old = date_difference(_reference_day(), REFERENCE_YEAR, file_day, file_year)
    inventory = Inventory(_item_lines(lines[1:], path))
    return inventory, days_old


def _format_item(item: GroceryItem) -> str:
    pricing = item.pricing
    return (
        f"{item.name}\t{item.department}\t{item.stock_number}\t"
        f"{pricing.wholesale_price:.2f}\t{pricing.retail_price:.2f}\t"
        f"{pricing.wholesale_quantity}\t{pricing.retail_quantity}\n"
    )


def write_inventory(path: PathLike, inventory: Iterable[GroceryItem]) -> None:
    """Write ``inventory`` to ``path`` stamped with the reference date."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{_reference_day()}\t{REFERENCE_YEAR}\n")
            handle.writelines(_format_item(item) for item in inventory)
    except OSError as exc:
        raise InventoryFileError(f"Could not write file {path}") from exc