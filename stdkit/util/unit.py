"""
Size unit helpers for stdkit.

Converts human readable sizes such as ``'512K'`` or ``'1.5 g'`` (the
format used by memory and upload limits) to bytes and back. Units are
binary: ``1K == 1024``.
"""

import re

_SIZE_UNITS = ['B', 'K', 'M', 'G', 'T']


def size_in_bytes(size: str) -> int:
    """
    Parse a size string like '10', '512K', '2M' or '1.5 g' into bytes.

    Raises:
        ValueError: If the size cannot be parsed
    """
    if not isinstance(size, str):
        raise ValueError("Size must be a string")

    size = size.strip().upper()

    pattern = r'^(\d+(?:\.\d+)?)\s*([BKMGT])?$'
    match = re.match(pattern, size)

    if not match:
        raise ValueError(f"Invalid size format: {size}")

    value, unit = match.groups()
    return int(float(value) * 1024 ** _SIZE_UNITS.index(unit or 'B'))


def format_size(size: int, precision: int = 2) -> str:
    """
    Format a number of bytes using the largest fitting unit ('1.5K').

    Zero and negative sizes format as an empty string.
    """
    if size <= 0:
        return ''

    value = float(size)
    power = 0
    while value >= 1024 and power < len(_SIZE_UNITS) - 1:
        value /= 1024
        power += 1

    return f"{round(value, precision):g}{_SIZE_UNITS[power]}"
