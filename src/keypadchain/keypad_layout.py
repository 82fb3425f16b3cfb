"""Fixed keypad grids used by the robot control chain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Iterator, Sequence

from .errors import KeypadLayoutError

GAP: Final = "x"
ACTIVATE: Final = "A"

UP: Final = "^"
DOWN: Final = "v"
LEFT: Final = "<"
RIGHT: Final = ">"

Coordinate = tuple[int, int]


@dataclass(frozen=True)
class KeypadLayout:
    """Row-major grid of key symbols with exactly one non-functional cell."""

    name: str
    width: int
    height: int
    symbols: str
    _positions: dict[str, Coordinate] = field(
        init=False, repr=False, compare=False
    )
    _gap: Coordinate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise KeypadLayoutError(
                f"{self.name} keypad must have positive dimensions, "
                f"received {self.width}x{self.height}"
            )
        if self.width * self.height != len(self.symbols):
            raise KeypadLayoutError(
                f"{self.name} keypad is {self.width}x{self.height} but defines "
                f"{len(self.symbols)} symbols"
            )

        gaps = [index for index, symbol in enumerate(self.symbols) if symbol == GAP]
        if len(gaps) != 1:
            raise KeypadLayoutError(
                f"{self.name} keypad must contain exactly one gap cell, found {len(gaps)}"
            )

        positions: dict[str, Coordinate] = {}
        for index, symbol in enumerate(self.symbols):
            if symbol == GAP:
                continue
            if symbol in positions:
                raise KeypadLayoutError(
                    f"{self.name} keypad defines key {symbol!r} more than once"
                )
            positions[symbol] = divmod(index, self.width)

        object.__setattr__(self, "_positions", positions)
        object.__setattr__(self, "_gap", divmod(gaps[0], self.width))

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[str]) -> "KeypadLayout":
        """Build a layout from equally sized row strings."""

        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise KeypadLayoutError(f"{name} keypad rows must share one width")
        return cls(name=name, width=widths.pop(), height=len(rows), symbols="".join(rows))

    @property
    def gap(self) -> Coordinate:
        """``(row, column)`` of the single gap cell."""

        return self._gap

    @property
    def keys(self) -> tuple[str, ...]:
        """Functional key symbols in row-major order."""

        return tuple(self._positions)

    def cell(self, row: int, column: int) -> str:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"({row}, {column}) is outside the {self.name} keypad")
        return self.symbols[row * self.width + column]

    def symbol_at(self, index: int) -> str:
        if not 0 <= index < len(self.symbols):
            raise IndexError(f"index {index} is outside the {self.name} keypad")
        return self.symbols[index]

    def position(self, symbol: str) -> Coordinate:
        """Return ``(row, column)`` for functional key ``symbol``."""

        try:
            return self._positions[symbol]
        except KeyError:
            raise KeyError(f"{symbol!r} is not a key on the {self.name} keypad") from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)


NUMERIC_KEYPAD: Final = KeypadLayout.from_rows(
    "numeric",
    (
        "789",
        "456",
        "123",
        f"{GAP}0{ACTIVATE}",
    ),
)

DIRECTIONAL_KEYPAD: Final = KeypadLayout.from_rows(
    "directional",
    (
        f"{GAP}{UP}{ACTIVATE}",
        f"{LEFT}{DOWN}{RIGHT}",
    ),
)


__all__ = [
    "ACTIVATE",
    "Coordinate",
    "DIRECTIONAL_KEYPAD",
    "DOWN",
    "GAP",
    "KeypadLayout",
    "LEFT",
    "NUMERIC_KEYPAD",
    "RIGHT",
    "UP",
]
