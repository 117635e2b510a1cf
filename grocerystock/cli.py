"""Interactive menu for inspecting and editing a grocery inventory."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, Sequence, TextIO, TypeVar

from grocerystock import reports
from grocerystock.dates import day_of_year
from grocerystock.models import GroceryItem, Inventory, Pricing
from grocerystock.storage import InventoryFileError, read_inventory, write_inventory

T = TypeVar("T")

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")
_DEPARTMENT_LIMIT = 29

_MENU = """
Options:
1. Total Revenue
2. Total Wholesale Cost
3. Current Investment
4. Total Profit
5. Total Sales
6. Average Profit per Sale
7. Items in Stock
8. Items Out of Stock
9. Items by Department
10. Add New Item
11. Delete Item
12. Save and Exit
Enter your choice: """


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse an MM/DD/YYYY date into (month, day, year)."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid date: {text!r}")
    month, day, year = (int(group) for group in match.groups())
    return month, day, year


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if line == "":
        raise EOFError("input ended")
    return line.rstrip("\r\n")


def _ask(stdin: TextIO, stdout: TextIO, prompt: str, convert: Callable[[str], T]) -> T:
    stdout.write(prompt)
    stdout.flush()
    while True:
        text = _read_line(stdin).strip()
        if text:
            return convert(text)


def add_new(inventory: Inventory, stdin: TextIO, stdout: TextIO) -> GroceryItem:
    """Prompt for a new item's details and insert it into ``inventory``."""
    name = _ask(stdin, stdout, "Enter item name: ", str)
    department = _ask(stdin, stdout, "Enter department: ", str)
    stock_number = _ask(stdin, stdout, "Enter stock number: ", int)
    wholesale_price = _ask(stdin, stdout, "Enter wholesale price: ", float)
    retail_price = _ask(stdin, stdout, "Enter retail price: ", float)
    wholesale_quantity = _ask(stdin, stdout, "Enter wholesale quantity: ", int)
    retail_quantity = _ask(stdin, stdout, "Enter retail quantity: ", int)
    item = GroceryItem(
        name,
        department,
        stock_number,
        Pricing(wholesale_price, retail_price, wholesale_quantity, retail_quantity),
    )
    inventory.insert(item)
    stdout.write("Item added.\n")
    return item


def delete_item(inventory: Inventory, stdin: TextIO, stdout: TextIO) -> Optional[GroceryItem]:
    """Prompt for a stock number and remove that item from ``inventory``."""
    stock_number = _ask(stdin, stdout, "Enter stock number to delete: ", int)
    removed = inventory.delete(stock_number)
    stdout.write("Item deleted successfully.\n")
    return removed


def _write_rows(stdout: TextIO, rows: Sequence[tuple[int, str, str]]) -> None:
    for number, department, name in rows:
        stdout.write(f"{number}\t{department}\t{name}\n")


def _show_average(inventory: Inventory, stdout: TextIO) -> None:
    try:
        average = reports.average_profit_per_sale(inventory)
    except ValueError:
        stdout.write("Average Profit per Sale: no sales recorded\n")
    else:
        stdout.write(f"Average Profit per Sale: ${average:.2f}\n")


def _show_in_stock(inventory: Inventory, stdout: TextIO) -> None:
    stdout.write("Grocery items in Stock:\n ")
    _write_rows(
        stdout,
        [(item.in_stock(), item.department, item.name) for item in reports.items_in_stock(inventory)],
    )


def _show_out_of_stock(inventory: Inventory, stdout: TextIO) -> None:
    stdout.write("Grocery Items Out of Stock:\n")
    _write_rows(
        stdout,
        [
            (item.stock_number, item.department, item.name)
            for item in reports.items_out_of_stock(inventory)
        ],
    )


def _show_department(inventory: Inventory, stdin: TextIO, stdout: TextIO) -> None:
    department = _ask(stdin, stdout, "Enter department name: ", str)[:_DEPARTMENT_LIMIT]
    stdout.write(f"Grocery Items in {department}:\n")
    _write_rows(
        stdout,
        [
            (item.in_stock(), item.department, item.name)
            for item in reports.items_in_department(inventory, department)
        ],
    )


def _run_option(option: int, inventory: Inventory, stdin: TextIO, stdout: TextIO) -> None:
    if option == 1:
        stdout.write(f"Total Revenue: ${reports.total_revenue(inventory):.2f}\n")
    elif option == 2:
        stdout.write(f"Total Wholesale Cost: ${reports.total_wholesale(inventory):.2f}\n")
    elif option == 3:
        stdout.write(f"Current Investment: ${reports.current_investment(inventory):.2f}\n")
    elif option == 4:
        stdout.write(f"Total Profit: ${reports.total_profit(inventory):.2f}\n")
    elif option == 5:
        stdout.write(f"Total Sales: {reports.total_sales(inventory)}\n")
    elif option == 6:
        _show_average(inventory, stdout)
    elif option == 7:
        _show_in_stock(inventory, stdout)
    elif option == 8:
        _show_out_of_stock(inventory, stdout)
    elif option == 9:
        _show_department(inventory, stdin, stdout)
    elif option == 10:
        add_new(inventory, stdin, stdout)
    elif option == 11:
        delete_item(inventory, stdin, stdout)


def run_menu(inventory: Inventory, output_path: str, stdin: TextIO, stdout: TextIO) -> bool:
    """Run the option menu until the user saves.

    Returns True once the inventory has been saved to ``output_path``,
    or False if the input ends first.
    """
    while True:
        stdout.write(_MENU)
        stdout.flush()
        try:
            choice = _read_line(stdin).strip()
        except EOFError:
            return False
        try:
            option = int(choice)
        except ValueError:
            continue
        if option == 12:
            write_inventory(output_path, inventory)
            stdout.write(f"Inventory saved to {output_path}\n")
            return True
        try:
            _run_option(option, inventory, stdin, stdout)
        except EOFError:
            return False
        except ValueError:
            stdout.write("Invalid input.\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: DATE INPUT_FILE OUTPUT_FILE."""
    args = list(sys.argv[1:] if argv is None else argv)
    stdin, stdout = sys.stdin, sys.stdout
    if len(args) != 3:
        stdout.write("correct input required try again")
        return 1
    date_text, input_path, output_path = args
    try:
        month, day, year = parse_date(date_text)
        day_of_year(month, day, year)
    except ValueError:
        stdout.write("Invalid date format. Please use MM/DD/YYYY.\n")
        return 1
    try:
        inventory, days_old = read_inventory(input_path)
    except InventoryFileError as exc:
        stdout.write(f"Error: {exc}\n")
        return 1
    stdout.write(
        f"data in file is {days_old} days old. would you like to continue? (y/n): "
    )
    stdout.flush()
    try:
        answer = _ask(stdin, stdout, "", str)
    except EOFError:
        return 0
    if answer[0] not in ("y", "Y"):
        return 0
    run_menu(inventory, output_path, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())