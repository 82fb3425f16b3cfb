from __future__ import annotations

import pytest

from keypadchain.errors import MalformedCodeError, RunShapeError
from keypadchain.keypad_layout import DIRECTIONAL_KEYPAD
from keypadchain.move_table import directional_moves, numeric_moves
from keypadchain.sequence_expander import check_run, expand_sequence, split_runs


def test_expand_code_branches_on_tied_transitions() -> None:
    assert expand_sequence("029A", numeric_moves()) == {
        "<A^A^^>AvvvA",
        "<A^A>^^AvvvA",
    }


def test_expand_without_ties_yields_one_sequence() -> None:
    assert expand_sequence("0A", numeric_moves()) == {"<A>A"}


def test_expansion_count_doubles_per_two_candidate_transition() -> None:
    # A->v and ^->> offer two orders each; v->^ is a straight move.
    sequences = expand_sequence("v^>", directional_moves())
    assert len(sequences) == 4
    assert all(sequence.endswith("A") for sequence in sequences)
    assert {len(sequence) for sequence in sequences} == {8}


def test_expand_run_on_directional_keypad() -> None:
    assert expand_sequence("<A", directional_moves()) == {"v<<A>>^A"}


def test_repeated_key_is_pressed_in_place() -> None:
    assert expand_sequence("AA", directional_moves()) == {"AA"}


def test_expand_rejects_keys_missing_from_layout() -> None:
    with pytest.raises(MalformedCodeError, match="'B'"):
        expand_sequence("0B", numeric_moves())


@pytest.mark.parametrize(
    "sequence, runs",
    [
        ("", []),
        ("A", ["A"]),
        ("<A^A", ["<A", "^A"]),
        ("v<<AA>>^A", ["v<<A", "A", ">>^A"]),
    ],
)
def test_split_runs_keeps_trailing_push(sequence: str, runs: list[str]) -> None:
    assert split_runs(sequence) == runs


def test_split_runs_requires_trailing_push() -> None:
    with pytest.raises(RunShapeError):
        split_runs("<A^")


@pytest.mark.parametrize("run", ["", "<", "A<A", "AA", "<A>"])
def test_check_run_rejects_malformed_runs(run: str) -> None:
    with pytest.raises(RunShapeError):
        check_run(run)


def test_check_run_validates_keys_against_layout() -> None:
    check_run("<v>^A", DIRECTIONAL_KEYPAD)
    with pytest.raises(RunShapeError, match="directional keypad: 7"):
        check_run("7A", DIRECTIONAL_KEYPAD)
