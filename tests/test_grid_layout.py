from __future__ import annotations

import pytest

from memory_core.data_models import FlipState, Orientation
from memory_core.ui_logic.grid_layout import GridDimensions, GridLayout, generate_slots


def test_generate_creates_row_major_slots():
    slots = generate_slots(4, 4, 0.1)

    assert [slot.index for slot in slots] == list(range(16))
    assert (slots[0].row, slots[0].column) == (0, 0)
    assert (slots[3].row, slots[3].column) == (0, 3)
    assert (slots[4].row, slots[4].column) == (1, 0)
    assert (slots[15].row, slots[15].column) == (3, 3)


def test_slot_positions_lie_on_the_base_plane():
    slots = generate_slots(4, 4, 0.1)

    for slot in slots:
        x, y, z = slot.position
        assert x == pytest.approx(slot.column * 0.1)
        assert y == 0.0
        assert z == pytest.approx(slot.row * 0.1)
    assert slots[6].position == pytest.approx((0.2, 0.0, 0.1))


def test_new_slots_are_hidden_and_unbound():
    for slot in generate_slots(2, 3, 0.5):
        assert slot.flip_state is FlipState.HIDDEN
        assert slot.orientation is Orientation.FACE_DOWN
        assert slot.instance is None
        assert not slot.is_bound


def test_non_square_grid():
    slots = generate_slots(2, 5, 1.0)
    assert len(slots) == 10
    assert slots[7].position == pytest.approx((2.0, 0.0, 1.0))


def test_generate_is_pure():
    layout = GridLayout(GridDimensions())
    first, second = layout.generate(), layout.generate()
    assert [s.position for s in first] == [s.position for s in second]
    assert all(a is not b for a, b in zip(first, second))


def test_get_position():
    position = GridLayout(GridDimensions(rows=3, columns=3, spacing=2.0)).get_position(5)
    assert (position.row, position.column, position.index) == (1, 2, 5)
    assert position.point == (4.0, 0.0, 2.0)


def test_default_board_fits_the_anchor_plane():
    layout = GridLayout(GridDimensions())
    width, depth = layout.dimensions.footprint

    assert width == pytest.approx(0.34)
    assert depth == pytest.approx(0.34)
    assert layout.fits_within(0.5, 0.5)
    assert not layout.fits_within(0.3, 0.5)


@pytest.mark.parametrize("rows,columns,spacing", [(-1, 4, 0.1), (4, -2, 0.1), (4, 4, -0.1)])
def test_invalid_dimensions_are_rejected(rows, columns, spacing):
    with pytest.raises(ValueError):
        GridLayout(GridDimensions(rows=rows, columns=columns, spacing=spacing))


@pytest.mark.parametrize("rows,columns", [(0, 4), (4, 0), (0, 0)])
def test_zero_sized_grid_has_no_slots(rows, columns):
    assert generate_slots(rows, columns, 0.1) == []
    assert GridDimensions(rows=rows, columns=columns).footprint == (0.0, 0.0)
