"""Report keypad chain complexities for a file of door codes."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Sequence

from .chain_config import ChainConfig, load_chain_config
from .codes import load_codes
from .complexity import ComplexityReport, compute_report
from .errors import KeypadChainError

LOGGER = logging.getLogger(__name__)


def _non_negative(value: str) -> int:
    try:
        depth = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("expected an integer depth") from exc
    if depth < 0:
        raise argparse.ArgumentTypeError("depth must be non-negative")
    return depth


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed command-line arguments for the complexity report."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "codes",
        type=Path,
        nargs="?",
        default=None,
        help="Text file with one code per line (defaults to input.codes from --config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML file describing chain depths and the codes file",
    )
    parser.add_argument(
        "--shallow-depth",
        type=_non_negative,
        default=None,
        help="Directional keypads in the shallow chain",
    )
    parser.add_argument(
        "--deep-depth",
        type=_non_negative,
        default=None,
        help="Directional keypads in the deep chain",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit both totals and per-code chain lengths as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def render_report(report: ComplexityReport) -> List[str]:
    """Return the human-readable summary lines for ``report``."""

    return [
        f"Shallow chain (depth {report.shallow_depth}): {report.shallow_total}",
        f"Deep chain (depth {report.deep_depth}): {report.deep_total}",
    ]


def _resolve_config(args: argparse.Namespace) -> ChainConfig:
    config = ChainConfig()
    if args.config is not None:
        if not args.config.exists():
            raise SystemExit(f"configuration file not found: {args.config}")
        config = load_chain_config(args.config)
    return config.with_overrides(
        shallow_depth=args.shallow_depth, deep_depth=args.deep_depth
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``keypadchain`` command."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = _resolve_config(args)
        codes_path: Path | None = args.codes or config.codes_path
        if codes_path is None:
            raise SystemExit("no codes file given and none configured")
        if not codes_path.is_file():
            raise SystemExit(f"codes file not found: {codes_path}")

        codes = load_codes(codes_path)
        LOGGER.info("Evaluating %d codes from %s", len(codes), codes_path)
        report = compute_report(
            codes,
            shallow_depth=config.shallow_depth,
            deep_depth=config.deep_depth,
        )
    except KeypadChainError as exc:
        raise SystemExit(f"error: {exc}") from exc

    if args.json:
        print(json.dumps(report.to_payload()))
    else:
        print("\n".join(render_report(report)))
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())
