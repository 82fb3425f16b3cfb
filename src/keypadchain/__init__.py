"""Minimum operator presses for door codes typed through a chain of keypad robots."""
from __future__ import annotations

from .codes import Code, load_codes, parse_code, parse_codes
from .complexity import (
    DEEP_DEPTH,
    SHALLOW_DEPTH,
    CodeResult,
    ComplexityReport,
    chain_length,
    complexity,
    compute_report,
    total_complexity,
)
from .cost_estimator import EstimateCache, estimate_run, estimate_sequence
from .errors import (
    KeypadChainError,
    KeypadLayoutError,
    MalformedCodeError,
    RunShapeError,
)
from .keypad_layout import DIRECTIONAL_KEYPAD, NUMERIC_KEYPAD, KeypadLayout
from .move_table import (
    MoveTable,
    build_move_table,
    directional_moves,
    move_table_for,
    numeric_moves,
)
from .sequence_expander import expand_sequence, split_runs

__all__ = [
    "Code",
    "CodeResult",
    "ComplexityReport",
    "DEEP_DEPTH",
    "DIRECTIONAL_KEYPAD",
    "EstimateCache",
    "KeypadChainError",
    "KeypadLayout",
    "KeypadLayoutError",
    "MalformedCodeError",
    "MoveTable",
    "NUMERIC_KEYPAD",
    "RunShapeError",
    "SHALLOW_DEPTH",
    "build_move_table",
    "chain_length",
    "complexity",
    "compute_report",
    "directional_moves",
    "estimate_run",
    "estimate_sequence",
    "expand_sequence",
    "load_codes",
    "move_table_for",
    "numeric_moves",
    "parse_code",
    "parse_codes",
    "split_runs",
    "total_complexity",
]
