# grocerystock

A small console tool for keeping a grocery store's inventory. It reads a
tab-separated inventory file, tells you how old the data is, and offers a
menu of reports and edits before saving the inventory to a new file.

## Installation

```
pip install .
```

## Usage

```
grocerystock MM/DD/YYYY input.txt output.txt
```

Exactly three arguments are required; otherwise the command prints
`correct input required try again` and exits with status 1. The date must
have the form `MM/DD/YYYY` with a month from 1 to 12, or the command exits
with status 1. The date is only checked; it is not used in any calculation.

After loading `input.txt` the program prints how many days old the data is
and asks whether to continue. An answer starting with `y` or `Y` opens the
menu; anything else exits. The age is measured against a fixed reference
date, 25 February 2025 (day 56 of 2025).

The menu offers:

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

Choices outside 1–12, or input that is not a number, simply show the menu
again. A few details:

- *Items in Stock* lists quantity in stock, department and item name for
  every item with at least one unit left.
- *Items Out of Stock* lists stock number, department and name for items
  with none left.
- *Items by Department* asks for a department name (cut to 29 characters)
  and lists every item whose department contains that text.
- *Average Profit per Sale* reports `no sales recorded` when nothing has
  been sold.
- *Delete Item* asks for a stock number and reports success whether or not
  such an item existed.
- *Save and Exit* writes the inventory to `output.txt` and exits. If the
  input ends before that, the program exits without saving.

## Inventory file format

The first line holds the day of the year and the year the data was taken,
separated by whitespace. Every following non-blank line describes one item
with seven tab-separated fields:

```
item  department  stock-number  wholesale-price  retail-price  wholesale-quantity  retail-quantity
```

Items are kept in descending order of stock number. The quantity in stock
is the wholesale quantity minus the retail (sold) quantity. Saved files
always carry the reference date (`56	2025`) on their first line, and prices
are written with two decimal places.

## Using it as a library

```python
from grocerystock.storage import read_inventory, write_inventory
from grocerystock import reports

inventory, days_old = read_inventory("input.txt")
print(reports.total_revenue(inventory))
for item in reports.items_in_department(inventory, "Produce"):
    print(item.name, item.in_stock())
write_inventory("output.txt", inventory)
```

- `grocerystock.models` holds `Pricing`, `GroceryItem` (with `in_stock()`)
  and `Inventory`, which keeps items ordered by stock number and supports
  `insert`, `delete`, iteration and `len`.
- `grocerystock.reports` provides `total_revenue`, `total_wholesale`,
  `current_investment`, `total_profit`, `total_sales`,
  `average_profit_per_sale` (raises `ValueError` when nothing was sold),
  `items_in_stock`, `items_out_of_stock` and `items_in_department`.
- `grocerystock.storage` provides `read_inventory`, which returns the
  inventory and its age in days, and `write_inventory`; both raise
  `InventoryFileError` when a file cannot be opened, parsed or written.
- `grocerystock.dates` provides `leap_year`, `day_of_year` and
  `date_difference` for day-of-year arithmetic.
- `grocerystock.cli` provides `main`, `run_menu`, `add_new`, `delete_item`
  and `parse_date`; the interactive functions take the input and output
  streams as arguments.

## Running the tests

```
pip install ".[test]"
pytest
```