import pytest

from indexedfile.index_area import IndexArea, IndexEntry


@pytest.fixture
def filled():
    area = IndexArea(4)
    area.update([IndexEntry(20, 4), IndexEntry(2, 0), IndexEntry(9, 8)])
    return area


def test_empty_index_looks_up_zero():
    area = IndexArea(4)
    assert len(area) == 0
    assert area.lookup(5) == 0


def test_empty_index_text():
    assert str(IndexArea(4)) == "[ Tabla de indices vacía ] "


def test_update_sets_length(filled):
    assert len(filled) == 3


@pytest.mark.parametrize(
    "key, address",
    [(1, 0), (2, 0), (8, 0), (9, 8), (10, 8), (19, 8), (20, 4), (25, 4)],
)
def test_lookup_finds_greatest_key_not_above(filled, key, address):
    assert filled.lookup(key) == address


def test_update_replaces_previous_entries(filled):
    filled.update([IndexEntry(3, 12)])
    assert len(filled) == 1
    assert filled.lookup(100) == 12


def test_update_beyond_capacity_raises():
    area = IndexArea(1)
    with pytest.raises(ValueError):
        area.update([IndexEntry(1, 0), IndexEntry(5, 4)])


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        IndexArea(-1)


def test_text_lists_entries_in_key_order(filled):
    text = str(filled)
    assert text.startswith("|----[Clave]---|---[Indice]---|")
    first = text.index(" 2 |")
    second = text.index(" 9 |")
    third = text.index(" 20 |")
    assert first < second < third


def test_text_rows_are_aligned(filled):
    rows = [line for line in str(filled).splitlines() if line.startswith("| ")]
    assert len(rows) == 3
    assert len({len(row) for row in rows}) == 1