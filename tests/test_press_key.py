from sclgui.password import Key
from sclgui.press_key import PressKey


def make():
    seen = []
    return PressKey(Key.ENTER, seen.append), seen


def test_press_and_release_runs_action():
    press, seen = make()
    press.key_down(Key.ENTER)
    assert press.is_key_down is True
    assert press.key_up(Key.ENTER, "data") is True
    assert seen == ["data"]
    assert press.is_key_down is False


def test_release_without_press_does_nothing():
    press, seen = make()
    assert press.key_up(Key.ENTER, "data") is False
    assert seen == []


def test_other_keys_are_ignored():
    press, seen = make()
    press.key_down(Key.TAB)
    assert press.is_key_down is False
    press.key_down(Key.ENTER)
    assert press.key_up(Key.TAB) is False
    assert press.is_key_down is True
    assert seen == []


def test_unfocused_press_clears_state():
    press, seen = make()
    press.key_down(Key.ENTER)
    press.key_down(Key.ENTER, focused=False)
    assert press.is_key_down is False
    assert press.key_up(Key.ENTER) is False
    assert seen == []


def test_disabled_release_does_not_fire():
    press, seen = make()
    press.key_down(Key.ENTER)
    assert press.key_up(Key.ENTER, "data", disabled=True) is False
    assert press.is_key_down is False
    assert seen == []


def test_reset_forgets_press():
    press, seen = make()
    press.key_down(Key.ENTER)
    press.reset()
    assert press.key_up(Key.ENTER) is False
    assert seen == []


def test_action_runs_once_per_press():
    press, seen = make()
    press.key_down(Key.ENTER)
    press.key_up(Key.ENTER, 1)
    assert press.key_up(Key.ENTER, 2) is False
    assert seen == [1]