import pytest

from atc_airspace.utils.composite_map import CompositeMap


@pytest.fixture
def approaches() -> CompositeMap:
    return CompositeMap([
        (("27L", "OCK"), "approach1"),
        (("27L", "BIG"), "approach2"),
        (("09R", "OCK"), "approach3"),
    ])


def test_lookup_by_tuple_and_list(approaches):
    assert approaches["27L", "OCK"] == "approach1"
    assert approaches[["27L", "OCK"]] == "approach1"
    assert ("27L", "BIG") in approaches
    assert ("27L", "LAM") not in approaches


def test_keys_differing_in_one_part_are_distinct(approaches):
    assert approaches["27L", "OCK"] != approaches["09R", "OCK"]
    assert len(approaches) == 3


def test_insertion_order(approaches):
    assert list(approaches) == [("27L", "OCK"), ("27L", "BIG"), ("09R", "OCK")]
    assert list(approaches.values()) == ["approach1", "approach2", "approach3"]


def test_set_and_delete(approaches):
    approaches[["27L", "OCK"]] = "approach4"
    assert approaches["27L", "OCK"] == "approach4"
    assert len(approaches) == 3
    del approaches["27L", "OCK"]
    assert ("27L", "OCK") not in approaches
    with pytest.raises(KeyError):
        approaches["27L", "OCK"]


def test_string_keys_rejected(approaches):
    with pytest.raises(TypeError):
        approaches["27L"] = "approach5"
    assert "27L" not in approaches
    assert 27 not in approaches


def test_empty_map():
    empty = CompositeMap()
    assert len(empty) == 0
    assert empty.get(("27L", "OCK")) is None
