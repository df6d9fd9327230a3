"""PuzzleState test suite: construction, lookups and move application."""

from __future__ import annotations

import pytest

from backend.engine.gamestate import TILE_COUNT, OutOfRange, PuzzleState

# -- helpers ------------------------------------------------------------------


def _blanks(state: PuzzleState) -> list[int]:
    return [t.id for t in state.tiles if t.label == ""]


def _assert_invariants(state: PuzzleState) -> None:
    assert sorted(t.id for t in state.tiles) == list(range(1, TILE_COUNT + 1))
    assert [t.position for t in state.tiles] == list(range(TILE_COUNT))
    blanks = _blanks(state)
    assert len(blanks) == 1, f"expected one blank, got {blanks}"
    assert state.tile_at(state.blank_position).label == ""


# -- initialize ---------------------------------------------------------------


@pytest.mark.parametrize("blank_id", range(1, TILE_COUNT + 1))
def test_initialize_blanks_requested_tile(blank_id: int) -> None:
    state = PuzzleState(blank_id)

    assert _blanks(state) == [blank_id]
    assert state.blank_id == blank_id
    assert state.blank_position == blank_id - 1
    _assert_invariants(state)


def test_initialize_solved_order() -> None:
    state = PuzzleState()

    assert state.labels() == [str(i) for i in range(1, 16)] + [""]
    assert state.tile_at(15).id == 16
    assert [[t.id for t in row] for row in state.rows()] == [
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 10, 11, 12],
        [13, 14, 15, 16],
    ]


def test_initialize_resets_moved_board() -> None:
    state = PuzzleState()
    state.apply_move(3)
    state.apply_move(9)

    state.initialize(16)

    assert state.labels() == PuzzleState().labels()
    assert state.blank_position == 15


@pytest.mark.parametrize("blank_id", [0, 17, -1])
def test_initialize_rejects_bad_blank(blank_id: int) -> None:
    with pytest.raises(ValueError):
        PuzzleState(blank_id)


# -- lookups ------------------------------------------------------------------


@pytest.mark.parametrize("position", [-1, 16, 100])
def test_tile_at_out_of_range(position: int) -> None:
    with pytest.raises(OutOfRange):
        PuzzleState().tile_at(position)


def test_out_of_range_is_index_error() -> None:
    with pytest.raises(IndexError):
        PuzzleState().tile_by_id(0)


def test_find_by_label() -> None:
    state = PuzzleState()
    state.apply_move(15)

    assert state.find("15").position == 15
    assert state.find("").id == 15
    assert state.find("16") is None


def test_is_adjacent() -> None:
    state = PuzzleState()  # blank at row 3, col 3

    assert state.is_adjacent(12)
    assert state.is_adjacent(15)
    assert not state.is_adjacent(11)
    assert not state.is_adjacent(1)
    assert not state.is_adjacent(16)


def test_is_adjacent_does_not_wrap_rows() -> None:
    state = PuzzleState(5)  # row 1, col 0

    assert not state.is_adjacent(4)  # row 0, col 3
    assert state.is_adjacent(1)
    assert state.is_adjacent(6)
    assert state.is_adjacent(9)


# -- moves --------------------------------------------------------------------


def test_move_into_blank_from_solved() -> None:
    state = PuzzleState(16)
    state.apply_move(15)

    assert state.tile_by_id(15).label == ""
    assert state.tile_at(15).label == "15"
    assert state.tile_at(15).id == 16
    assert state.blank_position == 14
    _assert_invariants(state)


def test_move_ignores_adjacency() -> None:
    state = PuzzleState(1)
    assert state.tile_at(0).label == ""

    state.apply_move(2)
    assert state.labels()[:2] == ["2", ""]

    state.apply_move(16)
    assert state.tile_at(1).label == "16"
    assert state.blank_position == 15
    _assert_invariants(state)


def test_move_is_undone_by_moving_previous_blank() -> None:
    state = PuzzleState()
    state.apply_move(7)
    before = state.labels()
    previous_blank = state.blank_id

    state.apply_move(2)
    state.apply_move(previous_blank)

    assert state.labels() == before
    assert state.blank_id == previous_blank


def test_move_blank_onto_itself_is_noop() -> None:
    state = PuzzleState()
    state.apply_move(16)

    assert state.labels() == PuzzleState().labels()
    assert state.blank_position == 15


def test_move_unknown_tile_leaves_state() -> None:
    state = PuzzleState()
    with pytest.raises(OutOfRange):
        state.apply_move(17)

    assert state.labels() == PuzzleState().labels()


def test_invariants_hold_over_move_sequence() -> None:
    state = PuzzleState(6)
    for target in [1, 16, 8, 8, 3, 12, 6, 14, 2, 9]:
        state.apply_move(target)
        _assert_invariants(state)

    shown = sorted(label for label in state.labels() if label)
    assert shown == sorted(str(i) for i in range(1, 17) if i != 6)
