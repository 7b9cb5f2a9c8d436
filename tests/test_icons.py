import pytest

from sclgui.icons import IconData, IconKeyPair


def test_from_path_uses_default_colours():
    assert IconData.from_value("M0 0L1 1") == IconData(0x000000FF, 0xFFFFFFFF, "M0 0L1 1")


def test_from_pair_uses_one_colour_for_both():
    data = IconData.from_value((0x0078D4FF, "M0 0"))
    assert data.light == 0x0078D4FF
    assert data.dark == 0x0078D4FF
    assert data.path == "M0 0"


@pytest.mark.parametrize("value", [42, (1, 2), ("a", "b"), (1, "a", "b"), (True, "p")])
def test_from_value_rejects_other_types(value):
    with pytest.raises(TypeError):
        IconData.from_value(value)


def test_colour_range_is_checked():
    with pytest.raises(ValueError):
        IconData(-1, 0, "p")
    with pytest.raises(ValueError):
        IconData(0, 0x1_0000_0000, "p")


def test_icon_data_equality():
    assert IconData.from_value("p") == IconData.from_value("p")
    assert IconData.from_value("p") != IconData.from_value("q")


def test_icon_key_pair_fields_and_unpacking():
    pair = IconKeyPair("icon.path", "icon.light", "icon.dark")
    path, light, dark = pair
    assert (path, light, dark) == ("icon.path", "icon.light", "icon.dark")
    assert pair.dark == "icon.dark"
    assert pair[0] == pair.path