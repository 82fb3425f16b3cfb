"""TOML configuration for the chain depths and the default codes file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .complexity import DEEP_DEPTH, SHALLOW_DEPTH
from .errors import KeypadChainError


class ChainConfigError(KeypadChainError):
    """Raised when a chain configuration file fails validation."""


@dataclass(frozen=True)
class ChainConfig:
    """Depths for the two passes and an optional codes file."""

    shallow_depth: int = SHALLOW_DEPTH
    deep_depth: int = DEEP_DEPTH
    codes_path: Path | None = None

    def __post_init__(self) -> None:
        for label, depth in (
            ("shallow_depth", self.shallow_depth),
            ("deep_depth", self.deep_depth),
        ):
            if depth < 0:
                raise ChainConfigError(f"{label} must be non-negative, received {depth}")
        if self.shallow_depth > self.deep_depth:
            raise ChainConfigError(
                f"shallow_depth {self.shallow_depth} exceeds deep_depth {self.deep_depth}"
            )

    def with_overrides(
        self, *, shallow_depth: int | None = None, deep_depth: int | None = None
    ) -> "ChainConfig":
        """Return a copy with any supplied depths replaced."""

        return ChainConfig(
            shallow_depth=self.shallow_depth if shallow_depth is None else shallow_depth,
            deep_depth=self.deep_depth if deep_depth is None else deep_depth,
            codes_path=self.codes_path,
        )


def load_chain_config(config_path: Path) -> ChainConfig:
    """Parse and validate the chain configuration at ``config_path``."""

    try:
        with config_path.open("rb") as stream:
            raw_data = tomllib.load(stream)
    except tomllib.TOMLDecodeError as exc:
        raise ChainConfigError(f"invalid TOML in {config_path}: {exc}") from exc

    chain = _parse_table(raw_data, "chain")
    inputs = _parse_table(raw_data, "input")

    return ChainConfig(
        shallow_depth=_coerce_depth(chain.get("shallow_depth"), "shallow_depth", SHALLOW_DEPTH),
        deep_depth=_coerce_depth(chain.get("deep_depth"), "deep_depth", DEEP_DEPTH),
        codes_path=_normalise_codes_path(inputs.get("codes"), base=config_path.parent),
    )


def _parse_table(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    table = data.get(name)
    if table is None:
        return {}
    if not isinstance(table, Mapping):
        raise ChainConfigError(f"[{name}] section must be a mapping")
    return table


def _coerce_depth(raw_depth: Any, label: str, default: int) -> int:
    if raw_depth is None:
        return default
    # bool is an int subclass
    if isinstance(raw_depth, bool):
        raise ChainConfigError(f"{label} must be an integer")
    if isinstance(raw_depth, int):
        depth = raw_depth
    elif isinstance(raw_depth, str):
        try:
            depth = int(raw_depth.strip(), base=10)
        except ValueError as exc:
            raise ChainConfigError(f"invalid {label}: {raw_depth!r}") from exc
    else:
        raise ChainConfigError(f"{label} must be an integer")

    if depth < 0:
        raise ChainConfigError(f"{label} must be non-negative, received {depth}")
    return depth


def _normalise_codes_path(raw_path: Any, *, base: Path) -> Path | None:
    if raw_path is None:
        return None
    if not isinstance(raw_path, str):
        raise ChainConfigError("input.codes must be a string path")

    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base / path
    return path.resolve()


__all__ = ["ChainConfig", "ChainConfigError", "load_chain_config"]
