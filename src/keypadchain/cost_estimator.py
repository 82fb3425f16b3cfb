"""Memoized press counts for directional runs at a given chain depth."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .move_table import MoveTable, directional_moves
from .sequence_expander import check_run, expand_sequence, split_runs

CacheKey = Tuple[str, int]


class EstimateCache:
    """Append-only memo of ``(run, remaining depth) -> presses``.

    One cache belongs to one orchestration pass. Entries are never removed
    and a key is never rebound to a different value.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, int] = {}
        self.hits = 0
        self.misses = 0

    def get(self, run: str, depth: int) -> int | None:
        value = self._entries.get((run, depth))
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def store(self, run: str, depth: int, presses: int) -> None:
        key = (run, depth)
        existing = self._entries.get(key)
        if existing is not None and existing != presses:
            raise ValueError(
                f"cache entry {key!r} already holds {existing}, refusing {presses}"
            )
        self._entries[key] = presses

    def snapshot(self) -> Mapping[CacheKey, int]:
        """Return a read-only copy of the cached entries."""

        return MappingProxyType(dict(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._entries)}, "
            f"hits={self.hits}, misses={self.misses})"
        )


def estimate_run(
    run: str,
    depth_remaining: int,
    cache: EstimateCache,
    move_table: MoveTable | None = None,
) -> int:
    """Return the fewest top-level presses that make ``run`` happen.

    ``run`` is one push on a directional keypad with ``depth_remaining``
    directional keypads still between it and the operator. At depth zero the
    operator types the run directly.
    """

    table = move_table if move_table is not None else directional_moves()
    check_run(run, table.layout)
    if depth_remaining < 0:
        raise ValueError(f"depth must be non-negative, received {depth_remaining}")

    cached = cache.get(run, depth_remaining)
    if cached is not None:
        return cached

    if depth_remaining == 0:
        presses = len(run)
    else:
        presses = min(
            sum(
                estimate_run(sub_run, depth_remaining - 1, cache, table)
                for sub_run in split_runs(candidate)
            )
            for candidate in expand_sequence(run, table)
        )

    cache.store(run, depth_remaining, presses)
    return presses


def estimate_sequence(
    sequence: str,
    depth_remaining: int,
    cache: EstimateCache,
    move_table: MoveTable | None = None,
) -> int:
    """Sum :func:`estimate_run` over every push in ``sequence``."""

    return sum(
        estimate_run(run, depth_remaining, cache, move_table)
        for run in split_runs(sequence)
    )


__all__ = ["CacheKey", "EstimateCache", "estimate_run", "estimate_sequence"]
