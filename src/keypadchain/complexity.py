"""Per-code chain lengths and the summed complexities for two chain depths."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .codes import Code, parse_code
from .cost_estimator import EstimateCache, estimate_run
from .move_table import directional_moves, numeric_moves
from .sequence_expander import expand_sequence, split_runs

LOGGER = logging.getLogger(__name__)

SHALLOW_DEPTH = 2
DEEP_DEPTH = 25


def _as_code(code: Code | str) -> Code:
    return code if isinstance(code, Code) else parse_code(code)


def chain_length(code: Code | str, max_depth: int, cache: EstimateCache) -> int:
    """Return the fewest operator presses that enter ``code`` through ``max_depth`` proxies."""

    code = _as_code(code)
    table = directional_moves()
    return min(
        sum(estimate_run(run, max_depth, cache, table) for run in split_runs(candidate))
        for candidate in expand_sequence(code.keys, numeric_moves())
    )


def complexity(code: Code | str, max_depth: int, cache: EstimateCache) -> int:
    code = _as_code(code)
    return code.numeric_value * chain_length(code, max_depth, cache)


def total_complexity(
    codes: Iterable[Code | str],
    max_depth: int,
    cache: EstimateCache | None = None,
) -> int:
    """Sum :func:`complexity` over ``codes`` at ``max_depth``."""

    if cache is None:
        cache = EstimateCache()
    return sum(complexity(code, max_depth, cache) for code in codes)


@dataclass(frozen=True)
class CodeResult:
    """Chain lengths for one code at the shallow and deep depths."""

    code: Code
    shallow_length: int
    deep_length: int

    @property
    def numeric_value(self) -> int:
        return self.code.numeric_value

    @property
    def shallow_complexity(self) -> int:
        return self.numeric_value * self.shallow_length

    @property
    def deep_complexity(self) -> int:
        return self.numeric_value * self.deep_length


@dataclass(frozen=True)
class ComplexityReport:
    """Both totals for one batch of codes, computed over a shared cache."""

    shallow_depth: int
    deep_depth: int
    results: tuple[CodeResult, ...]
    deep_pass_cache_hits: int

    @property
    def shallow_total(self) -> int:
        return sum(result.shallow_complexity for result in self.results)

    @property
    def deep_total(self) -> int:
        return sum(result.deep_complexity for result in self.results)

    def to_payload(self) -> dict[str, object]:
        return {
            "shallow_depth": self.shallow_depth,
            "deep_depth": self.deep_depth,
            "shallow_total": self.shallow_total,
            "deep_total": self.deep_total,
            "codes": [
                {
                    "code": result.code.keys,
                    "numeric_value": result.numeric_value,
                    "shallow_length": result.shallow_length,
                    "deep_length": result.deep_length,
                }
                for result in self.results
            ],
        }


def compute_report(
    codes: Sequence[Code | str],
    *,
    shallow_depth: int = SHALLOW_DEPTH,
    deep_depth: int = DEEP_DEPTH,
    cache: EstimateCache | None = None,
) -> ComplexityReport:
    """Run the shallow pass then the deep pass over one shared cache."""

    parsed = [_as_code(code) for code in codes]
    if cache is None:
        cache = EstimateCache()

    shallow: List[int] = [chain_length(code, shallow_depth, cache) for code in parsed]
    LOGGER.debug(
        "Shallow pass at depth %d cached %d entries", shallow_depth, len(cache)
    )

    hits_before = cache.hits
    deep: List[int] = [chain_length(code, deep_depth, cache) for code in parsed]
    deep_hits = cache.hits - hits_before
    LOGGER.debug(
        "Deep pass at depth %d cached %d entries with %d hits",
        deep_depth,
        len(cache),
        deep_hits,
    )

    results = tuple(
        CodeResult(code=code, shallow_length=shallow_length, deep_length=deep_length)
        for code, shallow_length, deep_length in zip(parsed, shallow, deep)
    )
    return ComplexityReport(
        shallow_depth=shallow_depth,
        deep_depth=deep_depth,
        results=results,
        deep_pass_cache_hits=deep_hits,
    )


__all__ = [
    "CodeResult",
    "ComplexityReport",
    "DEEP_DEPTH",
    "SHALLOW_DEPTH",
    "chain_length",
    "complexity",
    "compute_report",
    "total_complexity",
]
