"""
String utilities for stdkit.
Provides case conversion, slugging, padding and searching helpers.

Case conversions are memoized in process-wide caches since they are
called once per configuration key on every load.
"""

import re
import unicodedata
from typing import Iterable, List, Union

from ..common.decorators import memoize


_WHITESPACE_RE = re.compile(r'\s+')
_BEFORE_UPPER_RE = re.compile(r'(.)(?=[A-Z])')


@memoize("stdkit.strings.studly")
def studly(value: str) -> str:
    """Convert a value to StudlyCase (``foo_bar-baz`` -> ``FooBarBaz``)."""
    words = value.replace('-', ' ').replace('_', ' ').split(' ')
    return ''.join(word[:1].upper() + word[1:] for word in words)


@memoize("stdkit.strings.camel")
def camel(value: str) -> str:
    """Convert a value to camelCase (``a_int`` -> ``aInt``)."""
    result = studly(value)
    return result[:1].lower() + result[1:]


@memoize("stdkit.strings.snake")
def snake(value: str, separator: str = '_') -> str:
    """Convert a value to snake_case (``fooBar`` -> ``foo_bar``)."""
    if value.islower() and not _WHITESPACE_RE.search(value):
        return value

    value = _WHITESPACE_RE.sub('', value)
    return _BEFORE_UPPER_RE.sub(r'\1' + separator, value).lower()


def kebab(value: str) -> str:
    """Convert a value to kebab-case (``fooBar`` -> ``foo-bar``)."""
    return snake(value, '-')


def title(value: str) -> str:
    return value.title()


def to_ascii(value: str) -> str:
    """Strip accents and drop anything outside printable ASCII."""
    normalized = unicodedata.normalize('NFKD', value)
    return ''.join(char for char in normalized if 0x20 <= ord(char) <= 0x7E)


def slug(value: str, separator: str = '-') -> str:
    """
    Generate a URL friendly slug from the given value.

    Dashes and underscores are converted to the separator, everything that
    is not a letter, a digit, whitespace or the separator is removed, and
    runs of separators/whitespace are collapsed.
    """
    flip = '_' if separator == '-' else '-'
    text = to_ascii(value)
    text = re.sub('[' + re.escape(flip) + ']+', separator, text)
    text = re.sub(r'[^' + re.escape(separator) + r'\w\s]+', '', text.lower())
    text = text.replace('_', separator) if separator != '_' else text
    text = re.sub(r'[' + re.escape(separator) + r'\s]+', separator, text)

    return text.strip(separator)


def pad(value: str, length: int, pad_char: str = ' ') -> str:
    """Pad both sides of a value to the given length."""
    return value.center(length, pad_char)


def pad_left(value: str, length: int, pad_char: str = ' ') -> str:
    return value.rjust(length, pad_char)


def pad_right(value: str, length: int, pad_char: str = ' ') -> str:
    return value.ljust(length, pad_char)


def limit(value: str, length: int = 100, end: str = '...') -> str:
    """Truncate a value to the given length, appending end when cut."""
    if len(value) <= length:
        return value

    return value[:length].rstrip() + end


def to_list(value: str, delimiter: str = ',') -> List[str]:
    """Split a delimited string into a list of trimmed, non empty items."""
    return [item.strip() for item in value.split(delimiter) if item.strip()]


def _as_needles(needles: Union[str, Iterable[str]]) -> List[str]:
    return [needles] if isinstance(needles, str) else list(needles)


def contains(value: str, needles: Union[str, Iterable[str]]) -> bool:
    """Check whether the value contains any of the (non empty) needles."""
    return any(needle and needle in value for needle in _as_needles(needles))


def starts_with(value: str, needles: Union[str, Iterable[str]]) -> bool:
    return any(needle and value.startswith(needle) for needle in _as_needles(needles))


def ends_with(value: str, needles: Union[str, Iterable[str]]) -> bool:
    return any(needle and value.endswith(needle) for needle in _as_needles(needles))


def words(value: str, length: int = 100, end: str = '...') -> str:
    """Keep the first ``length`` words of a value, appending end when cut."""
    if length < 1:
        return end

    match = re.match(r'\s*(?:\S+\s*){1,%d}' % length, value)
    if match is None or len(match.group(0)) == len(value):
        return value

    return match.group(0).rstrip() + end


def replace_first(search: str, replace: str, value: str) -> str:
    """Replace the first occurrence of search in value."""
    return value.replace(search, replace, 1) if search else value


def replace_last(search: str, replace: str, value: str) -> str:
    """Replace the last occurrence of search in value."""
    position = value.rfind(search) if search else -1
    if position < 0:
        return value

    return value[:position] + replace + value[position + len(search):]


def first_line(value: str) -> str:
    """Return the first line of a value, ignoring surrounding whitespace."""
    return value.strip().split('\n', 1)[0]


def finish(value: str, cap: str) -> str:
    """Terminate a value with a single instance of cap."""
    return re.sub('(?:' + re.escape(cap) + r')+\Z', '', value) + cap


def is_(pattern: str, value: str) -> bool:
    """
    Check whether a value matches a pattern.

    ``*`` in the pattern matches any run of characters (``library/*``);
    everything else matches literally.
    """
    if pattern == value:
        return True

    regex = re.escape(pattern).replace(r'\*', '.*')
    return re.fullmatch(regex, value) is not None
