"""Human readable memory sizes."""

from __future__ import annotations

import re

_BINARY_ABBREVIATIONS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

_BINARY_MULTIPLIERS = {
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
}

_SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)*) ?([kKmMgGtTpP])?[iI]?[bB]?$")


def bytes_size(size: float) -> str:
    """Format a byte count with binary units, such as ``1.5KiB``."""
    value = float(size)
    unit = 0
    last_unit = len(_BINARY_ABBREVIATIONS) - 1
    while value >= 1024.0 and unit < last_unit:
        value /= 1024.0
        unit += 1
    return f"{value:.4g}{_BINARY_ABBREVIATIONS[unit]}"


def ram_in_bytes(size: str) -> int:
    """Parse a human readable memory size (``128m``, ``2g``) into bytes."""
    match = _SIZE_PATTERN.fullmatch(size)
    if match is None:
        raise ValueError(f"invalid size: '{size}'")
    number, prefix = match.groups()
    try:
        value = float(number)
    except ValueError as exc:
        raise ValueError(f"invalid size: '{size}'") from exc
    if prefix:
        value *= _BINARY_MULTIPLIERS[prefix.lower()]
    return int(value)


class MemBytes(int):
    """An amount of memory in bytes, printed in human readable form."""

    type_name = "bytes"

    @classmethod
    def parse(cls, value: str) -> MemBytes:
        """Build a value from a string such as ``42``, ``1k`` or ``2g``."""
        return cls(ram_in_bytes(value))

    def __str__(self) -> str:
        # Zero prints as "0" so that an unset default stays quiet.
        if int(self) != 0:
            return bytes_size(int(self))
        return "0"