import pytest

from sclgui.list_select import ListSelect
from sclgui.password import Key

VALUES = [("One", 1), ("Two", 2), ("Three", 3)]


def test_labels_and_variants_keep_order():
    select = ListSelect(VALUES)
    assert select.labels == [label for label, _ in VALUES]
    assert select.variants == [value for _, value in VALUES]


def test_change_index_forward_and_back():
    select = ListSelect(VALUES)
    assert select.change_index(1, True) == 2
    assert select.change_index(2, False) == 1


def test_change_index_stays_at_ends():
    select = ListSelect(VALUES)
    assert select.change_index(3, True) == 3
    assert select.change_index(1, False) == 1


def test_change_index_unknown_value_is_unchanged():
    select = ListSelect(VALUES)
    assert select.change_index(99, True) == 99


def test_arrow_keys_fire_callback():
    seen = []
    select = ListSelect(VALUES).on_select(seen.append)
    assert select.key_down(1, Key.ARROW_DOWN) == 2
    assert select.key_down(2, Key.ARROW_UP) == 1
    assert seen == [2, 1]


def test_arrow_at_end_still_fires_callback():
    seen = []
    select = ListSelect(VALUES).on_select(seen.append)
    assert select.key_down(3, Key.ARROW_DOWN) == 3
    assert seen == [3]


def test_other_keys_do_nothing():
    seen = []
    select = ListSelect(VALUES).on_select(seen.append)
    assert select.key_down(2, Key.ENTER) == 2
    assert seen == []


def test_click_selects_variant():
    seen = []
    select = ListSelect(VALUES).on_select(seen.append)
    assert select.click(1, 2) == VALUES[2][1]
    assert seen == [VALUES[2][1]]


def test_click_without_callback():
    select = ListSelect(VALUES)
    assert select.click(3, 0) == VALUES[0][1]


def test_click_out_of_range():
    with pytest.raises(IndexError):
        ListSelect(VALUES).click(1, len(VALUES))


def test_on_select_replaces_callback():
    first, second = [], []
    select = ListSelect(VALUES).on_select(first.append).on_select(second.append)
    select.click(1, 1)
    assert first == []
    assert second == [VALUES[1][1]]