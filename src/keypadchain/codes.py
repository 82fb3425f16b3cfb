"""Door codes typed on the numeric keypad and the file loader that reads them."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .errors import MalformedCodeError
from .keypad_layout import ACTIVATE, NUMERIC_KEYPAD

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class Code:
    """Keys to enter on the numeric keypad, ending with the activation key."""

    keys: str

    def __post_init__(self) -> None:
        keys = self.keys
        if not keys:
            raise MalformedCodeError("codes must not be empty")

        unknown = sorted({char for char in keys if char not in NUMERIC_KEYPAD})
        if unknown:
            raise MalformedCodeError(
                f"code {keys!r} contains keys absent from the numeric keypad: "
                f"{', '.join(unknown)}"
            )
        if not keys.endswith(ACTIVATE):
            raise MalformedCodeError(f"code {keys!r} must end with {ACTIVATE!r}")
        if not any(char.isdigit() for char in keys):
            raise MalformedCodeError(f"code {keys!r} has no numeric part")

    @property
    def numeric_value(self) -> int:
        """The code's digits read as a decimal integer."""

        return int("".join(char for char in self.keys if char.isdigit()))

    def __str__(self) -> str:
        return self.keys


def parse_code(text: str) -> Code:
    """Strip surrounding whitespace from ``text`` and build a :class:`Code`."""

    return Code(keys=text.strip())


def parse_codes(lines: Iterable[str]) -> List[Code]:
    """Parse one code per line, skipping blank lines and ``#`` comments."""

    codes: List[Code] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue
        try:
            codes.append(parse_code(text))
        except MalformedCodeError as exc:
            raise MalformedCodeError(f"line {line_number}: {exc}") from exc
    return codes


def load_codes(path: Path) -> List[Code]:
    """Read codes from the UTF-8 text file at ``path``."""

    with path.open("r", encoding="utf-8") as stream:
        codes = parse_codes(stream)
    LOGGER.debug("Loaded %d codes from %s", len(codes), path)
    return codes


__all__ = ["COMMENT_PREFIX", "Code", "load_codes", "parse_code", "parse_codes"]
