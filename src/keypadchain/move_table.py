"""Tied-shortest pointer moves between every pair of keys on a keypad."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from .keypad_layout import (
    ACTIVATE,
    DIRECTIONAL_KEYPAD,
    DOWN,
    LEFT,
    NUMERIC_KEYPAD,
    RIGHT,
    UP,
    KeypadLayout,
)

KeyPair = Tuple[str, str]


@dataclass(frozen=True)
class MoveTable:
    """Candidate button strings, typed one keypad up, for each key transition.

    Each candidate moves the pointer from the source key to the destination
    key and ends with :data:`ACTIVATE`. Candidates for one pair are tied in
    length and form an unordered choice set of one or two entries.
    """

    layout: KeypadLayout
    moves: Mapping[KeyPair, Tuple[str, ...]]

    def candidates(self, source: str, destination: str) -> Tuple[str, ...]:
        """Return the candidate moves from ``source`` to ``destination``."""

        try:
            return self.moves[(source, destination)]
        except KeyError:
            missing = source if source not in self.layout else destination
            raise KeyError(
                f"{missing!r} is not a key on the {self.layout.name} keypad"
            ) from None

    def __iter__(self) -> Iterator[KeyPair]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)


def _pair_moves(
    source: Tuple[int, int], destination: Tuple[int, int], gap: Tuple[int, int]
) -> Tuple[str, ...]:
    row, column = source
    dy = destination[0] - row
    dx = destination[1] - column
    vertical = (DOWN if dy > 0 else UP) * abs(dy)
    horizontal = (RIGHT if dx > 0 else LEFT) * abs(dx)

    if dy == 0 or dx == 0:
        return (vertical + horizontal + ACTIVATE,)

    moves = []
    # The corner is the one cell a two-leg path visits off the straight runs.
    if (row + dy, column) != gap:
        moves.append(vertical + horizontal + ACTIVATE)
    if (row, column + dx) != gap:
        moves.append(horizontal + vertical + ACTIVATE)
    return tuple(moves)


def build_move_table(layout: KeypadLayout) -> MoveTable:
    """Precompute candidate moves for every ordered pair of functional keys."""

    gap = layout.gap
    moves: Dict[KeyPair, Tuple[str, ...]] = {}
    for source in layout.keys:
        start = layout.position(source)
        for destination in layout.keys:
            moves[(source, destination)] = _pair_moves(
                start, layout.position(destination), gap
            )
    return MoveTable(layout=layout, moves=MappingProxyType(moves))


_TABLES: Dict[KeypadLayout, MoveTable] = {}


def move_table_for(layout: KeypadLayout) -> MoveTable:
    """Return the move table for ``layout``, building it on first use."""

    table = _TABLES.get(layout)
    if table is None:
        table = build_move_table(layout)
        _TABLES[layout] = table
    return table


def numeric_moves() -> MoveTable:
    return move_table_for(NUMERIC_KEYPAD)


def directional_moves() -> MoveTable:
    return move_table_for(DIRECTIONAL_KEYPAD)


__all__ = [
    "KeyPair",
    "MoveTable",
    "build_move_table",
    "directional_moves",
    "move_table_for",
    "numeric_moves",
]
