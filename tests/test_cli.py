import io

import pytest

from grocerystock.cli import add_new, delete_item, main, parse_date, run_menu
from grocerystock.models import GroceryItem, Inventory, Pricing
from grocerystock.storage import read_inventory, write_inventory


def _item(name, department, stock, wp, rp, wq, rq):
    return GroceryItem(name, department, stock, Pricing(wp, rp, wq, rq))


@pytest.fixture
def inventory():
    return Inventory(
        [
            _item("Milk", "Dairy", 7, 1.5, 2.25, 10, 4),
            _item("Bread", "Bakery", 12, 0.75, 1.99, 20, 20),
        ]
    )


def test_parse_date_valid():
    assert parse_date("02/25/2025") == (2, 25, 2025)


@pytest.mark.parametrize("text", ["", "2025-02-25", "02/25", "feb/25/2025"])
def test_parse_date_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_add_new_inserts_item(inventory):
    stdin = io.StringIO("Cheddar Cheese\nDairy\n9\n3.10\n4.50\n8\n2\n")
    stdout = io.StringIO()
    item = add_new(inventory, stdin, stdout)
    assert item.name == "Cheddar Cheese"
    assert item.pricing == Pricing(3.10, 4.50, 8, 2)
    assert [i.stock_number for i in inventory] == [12, 9, 7]
    assert stdout.getvalue().endswith("Item added.\n")


def test_add_new_rejects_bad_number(inventory):
    stdin = io.StringIO("Cheese\nDairy\nnine\n")
    with pytest.raises(ValueError):
        add_new(inventory, stdin, io.StringIO())
    assert len(inventory) == 2


def test_delete_item_removes(inventory):
    stdout = io.StringIO()
    removed = delete_item(inventory, io.StringIO("7\n"), stdout)
    assert removed.name == "Milk"
    assert [i.stock_number for i in inventory] == [12]
    assert "Item deleted successfully." in stdout.getvalue()


def test_run_menu_save_writes_file(tmp_path, inventory):
    path = tmp_path / "out.txt"
    stdout = io.StringIO()
    saved = run_menu(inventory, str(path), io.StringIO("12\n"), stdout)
    assert saved is True
    loaded, _ = read_inventory(path)
    assert list(loaded) == list(inventory)
    assert f"Inventory saved to {path}" in stdout.getvalue()


def test_run_menu_reports(tmp_path, inventory):
    stdout = io.StringIO()
    run_menu(inventory, str(tmp_path / "o.txt"), io.StringIO("5\n8\n12\n"), stdout)
    text = stdout.getvalue()
    assert "Total Sales: 24\n" in text
    assert "Grocery Items Out of Stock:\n12\tBakery\tBread\n" in text


def test_run_menu_department_listing(tmp_path, inventory):
    stdout = io.StringIO()
    run_menu(inventory, str(tmp_path / "o.txt"), io.StringIO("9\nDai\n12\n"), stdout)
    text = stdout.getvalue()
    assert "Grocery Items in Dai:\n6\tDairy\tMilk\n" in text
    assert "Bread" not in text.split("Grocery Items in Dai:")[1].split("Options")[0]


def test_run_menu_end_of_input_does_not_save(tmp_path, inventory):
    path = tmp_path / "out.txt"
    assert run_menu(inventory, str(path), io.StringIO("1\n"), io.StringIO()) is False
    assert not path.exists()


def test_run_menu_add_then_save(tmp_path, inventory):
    path = tmp_path / "out.txt"
    stdin = io.StringIO("10\nEggs\nDairy\n20\n1.00\n2.00\n12\n0\n12\n")
    run_menu(inventory, str(path), stdin, io.StringIO())
    loaded, _ = read_inventory(path)
    assert [i.stock_number for i in loaded] == [20, 12, 7]


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "correct input required try again" in capsys.readouterr().out


def test_main_bad_date(tmp_path, capsys):
    assert main(["yesterday", str(tmp_path / "a"), str(tmp_path / "b")]) == 1
    assert "Invalid date format. Please use MM/DD/YYYY." in capsys.readouterr().out


def test_main_declined(tmp_path, monkeypatch, inventory):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    write_inventory(source, inventory)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    assert main(["02/25/2025", str(source), str(target)]) == 0
    assert not target.exists()


def test_main_saves(tmp_path, monkeypatch, capsys, inventory):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    write_inventory(source, inventory)
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n11\n7\n12\n"))
    assert main(["02/25/2025", str(source), str(target)]) == 0
    assert "data in file is 0 days old" in capsys.readouterr().out
    loaded, _ = read_inventory(target)
    assert [i.stock_number for i in loaded] == [12]