"""
Path utilities for stdkit.
"""

import os
import re

from ..errors import PathError


_WINDOWS_ABSOLUTE_RE = re.compile(r'^[a-z]:[/\\].+', re.IGNORECASE)


def _split_wrapper(path: str):
    # Stream wrappers such as file:// keep their own separator
    if '://' in path:
        scheme, rest = path.split('://', 1)
        return f"{scheme}://", rest
    return '', path


def normalize_path(path: str, suffix: bool = False) -> str:
    """Convert backslashes to forward slashes, optionally appending a trailing slash."""
    prefix, rest = _split_wrapper(path)
    return prefix + rest.replace('\\', '/') + ('/' if suffix else '')


def normalize_path_ds(path: str, suffix: bool = False) -> str:
    """Convert every separator to the platform separator (os.sep)."""
    prefix, rest = _split_wrapper(path)
    rest = rest.replace('\\', os.sep).replace('/', os.sep)
    return prefix + rest + (os.sep if suffix else '')


def is_absolute_path(path: str) -> bool:
    """Check for a POSIX (``/...``) or Windows (``C:\\...``) absolute path."""
    if not path:
        return False
    return path.startswith('/') or bool(_WINDOWS_ABSOLUTE_RE.match(path))


def real_path(path: str) -> str:
    """Resolve a path to its canonical absolute form; the path must exist."""
    normalized = normalize_path_ds(path)
    if not os.path.exists(normalized):
        raise PathError(f"Path [{normalized}] does not exist", normalized)

    return normalize_path_ds(os.path.realpath(normalized))


def convert_to_absolute(path: str, filter_empty: bool = True) -> str:
    """
    Resolve ``.`` and ``..`` segments without touching the filesystem.

    With filter_empty, empty segments are dropped and a leading slash is kept.
    """
    normalized = normalize_path(path)
    if '..' not in normalized:
        return normalized

    leading = ''
    parts = normalized.split('/')
    if filter_empty:
        leading = '/' if normalized.startswith('/') else ''
        parts = [part for part in parts if part]

    absolutes = []
    for part in parts:
        if part == '.':
            continue
        if part == '..':
            if absolutes:
                absolutes.pop()
        else:
            absolutes.append(part)

    return leading + '/'.join(absolutes)
