"""Expand key strings into every tied-optimal button sequence one keypad up."""
from __future__ import annotations

from typing import Iterable, List, Set

from .errors import MalformedCodeError, RunShapeError
from .keypad_layout import ACTIVATE, KeypadLayout
from .move_table import MoveTable

START_KEY = ACTIVATE


def expand_sequence(keys: Iterable[str], move_table: MoveTable) -> Set[str]:
    """Return every full button sequence that types ``keys`` on the table's keypad.

    The pointer starts on the activation key. A transition with two tied
    candidates doubles the number of partial sequences; every candidate leaves
    the pointer on the pressed key, so the branches share one position.
    """

    layout = move_table.layout
    partials: List[str] = [""]
    current = START_KEY
    for key in keys:
        if key not in layout:
            raise MalformedCodeError(
                f"{key!r} is not a key on the {layout.name} keypad"
            )
        candidates = move_table.candidates(current, key)
        partials = [
            partial + candidate for partial in partials for candidate in candidates
        ]
        current = key
    return set(partials)


def split_runs(sequence: str) -> List[str]:
    """Split a push-terminated sequence into runs that each end with one push."""

    if not sequence:
        return []
    if not sequence.endswith(ACTIVATE):
        raise RunShapeError(
            f"sequence {sequence!r} must end with the activation key {ACTIVATE!r}"
        )
    return [chunk + ACTIVATE for chunk in sequence[:-1].split(ACTIVATE)]


def check_run(run: str, layout: KeypadLayout | None = None) -> None:
    """Raise :class:`RunShapeError` unless ``run`` is exactly one push.

    With ``layout`` given, every key of the run must also exist on it.
    """

    if not run.endswith(ACTIVATE) or run.count(ACTIVATE) != 1:
        raise RunShapeError(
            f"run {run!r} must contain exactly one trailing {ACTIVATE!r}"
        )
    if layout is not None:
        unknown = sorted({key for key in run if key not in layout})
        if unknown:
            raise RunShapeError(
                f"run {run!r} contains keys absent from the {layout.name} keypad: "
                f"{', '.join(unknown)}"
            )


__all__ = ["START_KEY", "check_run", "expand_sequence", "split_runs"]
