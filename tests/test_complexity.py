from __future__ import annotations

import pytest

from keypadchain.codes import parse_code
from keypadchain.complexity import (
    chain_length,
    complexity,
    compute_report,
    total_complexity,
)
from keypadchain.cost_estimator import EstimateCache
from keypadchain.errors import MalformedCodeError

EXAMPLE_CODES = ["029A", "980A", "179A", "456A", "379A"]


@pytest.mark.parametrize(
    "code, length",
    [
        ("029A", 68),
        ("980A", 60),
        ("179A", 68),
        ("456A", 64),
        ("379A", 64),
    ],
)
def test_shallow_chain_lengths(code: str, length: int) -> None:
    assert chain_length(code, 2, EstimateCache()) == length


def test_depth_zero_is_the_shortest_numeric_expansion() -> None:
    assert chain_length("029A", 0, EstimateCache()) == len("<A^A>^^AvvvA")


def test_complexity_multiplies_numeric_value() -> None:
    cache = EstimateCache()
    assert complexity("029A", 2, cache) == 68 * 29
    assert complexity(parse_code("980A"), 2, cache) == 58800


def test_total_complexity_for_example_batch() -> None:
    assert total_complexity(EXAMPLE_CODES, 2) == 126384


def test_total_complexity_accepts_shared_cache() -> None:
    cache = EstimateCache()
    assert total_complexity(EXAMPLE_CODES, 2, cache) == 126384
    assert len(cache) > 0
    assert total_complexity(EXAMPLE_CODES, 2, cache) == 126384


def test_malformed_code_fails_fast() -> None:
    with pytest.raises(MalformedCodeError):
        chain_length("02BA", 2, EstimateCache())


def test_report_deep_pass_lengthens_every_code_and_reuses_cache() -> None:
    cache = EstimateCache()
    report = compute_report(EXAMPLE_CODES, shallow_depth=2, deep_depth=25, cache=cache)

    assert report.shallow_total == 126384
    assert [result.shallow_length for result in report.results] == [68, 60, 68, 64, 64]
    for result in report.results:
        assert result.deep_length > result.shallow_length
    assert report.deep_total > report.shallow_total
    assert report.deep_pass_cache_hits > 0


def test_deep_pass_reuses_entries_from_shallow_pass() -> None:
    fresh = EstimateCache()
    deep_alone = total_complexity(EXAMPLE_CODES, 25, fresh)

    shared = EstimateCache()
    total_complexity(EXAMPLE_CODES, 2, shared)
    shallow_entries = dict(shared.snapshot())
    misses_before = shared.misses
    deep_shared = total_complexity(EXAMPLE_CODES, 25, shared)

    assert deep_shared == deep_alone
    assert shared.misses - misses_before < fresh.misses
    for key, value in shallow_entries.items():
        assert shared.snapshot()[key] == value


def test_report_payload_lists_codes() -> None:
    report = compute_report(["029A"], shallow_depth=1, deep_depth=2)
    payload = report.to_payload()

    assert payload["shallow_depth"] == 1
    assert payload["deep_depth"] == 2
    assert payload["deep_total"] == 1972
    assert payload["codes"] == [
        {
            "code": "029A",
            "numeric_value": 29,
            "shallow_length": 28,
            "deep_length": 68,
        }
    ]


def test_total_complexity_for_example_batch_at_deep_depth() -> None:
    assert total_complexity(EXAMPLE_CODES, 25) == 154115708116294
