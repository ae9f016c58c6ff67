import io
import math

import pytest

from dsakit.knapsack import (
    Item,
    Selection,
    Strategy,
    format_items,
    format_selection,
    make_items,
    pick_items,
    main,
)

PAIRS = [(60, 10), (100, 20), (120, 30)]


def test_make_items_numbers_from_one():
    items = make_items(PAIRS)
    assert [item.index for item in items] == [1, 2, 3]
    assert [(item.value, item.weight) for item in items] == PAIRS


def test_ratio():
    item = Item(1, 60, 10)
    assert item.ratio == pytest.approx(60 / 10)
    assert Item(2, 5, 0).ratio == math.inf


def test_pick_by_ratio():
    selection = pick_items(make_items(PAIRS), 50, Strategy.RATIO)
    assert [item.index for item in selection.taken] == [1, 2]


def test_pick_by_value():
    selection = pick_items(make_items(PAIRS), 50, Strategy.VALUE)
    assert [item.index for item in selection.taken] == [3, 2]
    assert selection.remaining == 0


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("capacity", [0, 5, 10, 35, 50, 1000])
def test_selection_invariants(strategy, capacity):
    items = make_items(PAIRS + [(7, 3), (40, 40)])
    selection = pick_items(items, capacity, strategy)
    assert selection.total_weight <= max(capacity, 0)
    assert selection.total_value == sum(item.value for item in selection.taken)
    assert selection.remaining == capacity - selection.total_weight
    assert len(set(selection.taken)) == len(selection.taken)


def test_weight_strategy_takes_lightest_first():
    items = make_items([(1, 9), (1, 2), (1, 5), (1, 4)])
    selection = pick_items(items, 100, Strategy.WEIGHT)
    weights = [item.weight for item in selection.taken]
    assert weights == sorted(weights)
    assert len(weights) == 4


def test_value_strategy_order_is_descending():
    items = make_items([(5, 1), (50, 1), (20, 1)])
    selection = pick_items(items, 10, Strategy.VALUE)
    values = [item.value for item in selection.taken]
    assert values == sorted(values, reverse=True)


def test_skips_items_that_do_not_fit():
    items = make_items([(100, 60), (10, 5)])
    selection = pick_items(items, 50, Strategy.VALUE)
    assert [item.index for item in selection.taken] == [2]


def test_strategy_accepts_plain_int():
    items = make_items(PAIRS)
    assert pick_items(items, 50, 3) == pick_items(items, 50, Strategy.RATIO)


def test_format_items():
    text = format_items([Item(1, 1, 3)])
    assert text.startswith("\nItems:\nItem\tValue\tWeight\tValue/Weight\n")
    assert text.endswith("1\t1\t3\t0.33\n")


def test_format_selection():
    taken = (Item(2, 100, 20),)
    text = format_selection(Selection(taken, 50), Strategy.RATIO)
    lines = text.splitlines()
    assert lines[1] == "Picking items by Value/Weight Ratio (highest first):"
    assert lines[2] == "Item\tValue\tWeight\tTaken"
    assert lines[3] == "2\t100\t20\t20"
    assert lines[4] == "Total value = 100"


def test_main_ratio(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n60 10\n100 20\n120 30\n50\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = pick_items(make_items(PAIRS), 50, Strategy.RATIO)
    assert "Enter number of items: " in out
    assert out.endswith(format_selection(expected, Strategy.RATIO))


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5 2 10 9"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Invalid choice.\n")


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 5"))
    with pytest.raises(SystemExit):
        main([])