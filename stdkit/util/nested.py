"""
Nested mapping utilities for stdkit.

Read, write, test and delete values inside nested mappings using a
single ``.`` separated key::

    >>> data = {'db': {'host': 'localhost'}}
    >>> get(data, 'db.host')
    'localhost'
    >>> set(data, 'db.port', 5432)
    >>> data
    {'db': {'host': 'localhost', 'port': 5432}}

Lookups never raise on malformed input: a missing segment, or a segment
that lands on a value that cannot be indexed, resolves to the default.
``set`` and ``forget`` modify the given container in place.

A literal top-level key always wins over dot splitting, so ``{'a.b': 1}``
answers ``get(data, 'a.b') == 1``. Non string keys (list indexes, integer
dictionary keys) are never split.
"""

import builtins
import itertools
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

Key = Union[str, int]

_MISSING = object()


def is_accessible(value: Any) -> bool:
    """Check whether a value supports keyed existence checks and lookups."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if isinstance(value, (Mapping, Sequence)):
        return True
    return hasattr(value, '__contains__') and hasattr(value, '__getitem__')


def _resolve_key(container: Any, key: Any) -> Any:
    """
    Return the key under which ``key`` is stored in container, or _MISSING.

    Digit-only string segments fall back to integer keys, and address
    elements of sequences by index.
    """
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes, bytearray)):
        if isinstance(key, str) and key.isdigit():
            key = int(key)
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container):
            return key
        return _MISSING

    try:
        if key in container:
            return key
        if isinstance(key, str) and key.isdigit() and int(key) in container:
            return int(key)
    except TypeError:
        pass
    return _MISSING


def exists(container: Any, key: Key) -> bool:
    """Check whether key exists at the top level of container (no dot splitting)."""
    if not is_accessible(container):
        return False
    return _resolve_key(container, key) is not _MISSING


def _walk(container: Any, path: str) -> Any:
    node = container
    for segment in path.split('.'):
        if not is_accessible(node):
            return _MISSING
        resolved = _resolve_key(node, segment)
        if resolved is _MISSING:
            return _MISSING
        node = node[resolved]
    return node


def get(container: Any, path: Optional[Key] = None, default: Any = None) -> Any:
    """
    Get a value from a nested container using dot notation.

    Args:
        container: Mapping (or any indexable container) to read from
        path: Dot separated path; None returns the container itself
        default: Value returned when the path does not resolve

    Returns:
        The resolved value or default
    """
    if path is None:
        return container

    if is_accessible(container):
        resolved = _resolve_key(container, path)
        if resolved is not _MISSING:
            return container[resolved]

    if not isinstance(path, str):
        return default

    value = _walk(container, path)
    return default if value is _MISSING else value


def has(container: Any, path: Key) -> bool:
    """
    Check whether a dot notation path exists in a nested container.

    A None path names no key and is never present, even though ``get``
    treats it as a request for the whole container.
    """
    if path is None or not container or not is_accessible(container):
        return False

    if exists(container, path):
        return True

    if not isinstance(path, str):
        return False

    return _walk(container, path) is not _MISSING


def set(container: MutableMapping, path: Optional[str], value: Any) -> None:
    """
    Set a value in a nested mapping using dot notation.

    The container is modified in place. Missing intermediate levels, and
    intermediate levels holding something other than a mapping, are
    replaced by empty dicts. Segments are matched against existing keys
    the same way ``get`` matches them, so ``'items.0'`` writes to an
    existing ``0`` key. Non string paths are written as a single key.
    """
    if path is None:
        return

    if not isinstance(path, str):
        container[path] = value
        return

    segments = path.split('.')
    node = container
    for segment in segments[:-1]:
        resolved = _resolve_key(node, segment)
        child = node[resolved] if resolved is not _MISSING else None
        if not isinstance(child, MutableMapping):
            child = {}
            node[segment if resolved is _MISSING else resolved] = child
        node = child

    resolved = _resolve_key(node, segments[-1])
    node[segments[-1] if resolved is _MISSING else resolved] = value


def _as_key_list(keys: Union[Key, Iterable[Key]]) -> List[Key]:
    if isinstance(keys, (list, tuple, builtins.set, frozenset)):
        return list(keys)
    return [keys]


def forget(container: Any, keys: Union[Key, Iterable[Key]]) -> None:
    """
    Remove one or many keys from a nested container using dot notation.

    The container is modified in place and every key is processed against
    the container as left by the previous removals. Keys that do not
    resolve are skipped silently.
    """
    for key in _as_key_list(keys):
        resolved = _resolve_key(container, key) if is_accessible(container) else _MISSING
        if resolved is not _MISSING:
            del container[resolved]
            continue

        if not isinstance(key, str) or '.' not in key:
            continue

        segments = key.split('.')
        node = container
        for segment in segments[:-1]:
            resolved = _resolve_key(node, segment)
            child = node[resolved] if resolved is not _MISSING else _MISSING
            if not isinstance(child, MutableMapping):
                node = _MISSING
                break
            node = child

        if node is _MISSING:
            continue

        last = _resolve_key(node, segments[-1])
        if last is not _MISSING:
            del node[last]


def pull(container: Any, key: Key, default: Any = None) -> Any:
    """Get a value from the container and remove it."""
    value = get(container, key, default)
    forget(container, key)
    return value


def copy_tree(value: Any) -> Any:
    """Copy nested mappings and lists, leaving any other value shared."""
    if isinstance(value, Mapping):
        return {key: copy_tree(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_tree(item) for item in value]
    return value


def except_(container: Mapping, keys: Union[Key, Iterable[Key]]) -> Dict[Any, Any]:
    """Return a copy of the container without the given keys."""
    result = copy_tree(container)
    forget(result, keys)
    return result


def merge(*mappings: Optional[Mapping]) -> Dict[Any, Any]:
    """
    Deep merge mappings.

    Later mappings override earlier ones key by key. When both sides hold a
    mapping for the same key they are merged recursively; any other value
    (including lists) replaces the earlier one wholesale. The inputs are not
    modified.
    """
    result: Dict[Any, Any] = {}

    for mapping in mappings:
        if not isinstance(mapping, Mapping):
            continue

        for key, value in mapping.items():
            if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
                result[key] = merge(result[key], value)
            elif isinstance(value, Mapping):
                result[key] = merge(value)
            else:
                result[key] = value

    return result


def only(container: Mapping, keys: Iterable[Key]) -> Dict[Any, Any]:
    """Return the subset of the container holding the given top-level keys."""
    wanted = list(keys)
    return {key: value for key, value in container.items() if key in wanted}


def wrap(value: Any) -> List[Any]:
    """Wrap a value in a list; None becomes an empty list."""
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def flatten(items: Iterable[Any], depth: Optional[int] = None) -> List[Any]:
    """Flatten nested lists (and mapping values) into a single list."""
    result: List[Any] = []
    for item in items:
        if isinstance(item, Mapping):
            item = list(item.values())
        if not isinstance(item, (list, tuple)):
            result.append(item)
        elif depth == 1:
            result.extend(item)
        else:
            result.extend(flatten(item, None if depth is None else depth - 1))
    return result


def first(items: Iterable[Any], predicate: Optional[Callable[[Any], bool]] = None,
          default: Any = None) -> Any:
    """Return the first item passing the predicate (or the first item at all)."""
    for item in items:
        if predicate is None or predicate(item):
            return item
    return default


def last(items: Iterable[Any], predicate: Optional[Callable[[Any], bool]] = None,
         default: Any = None) -> Any:
    """Return the last item passing the predicate (or the last item at all)."""
    return first(reversed(list(items)), predicate, default)


def get_column(items: Iterable[Any], name: Key) -> List[Any]:
    """Collect the value at ``name`` from every item."""
    return [get(item, name) for item in items]


def pluck(items: Iterable[Any], value_path: Key, key_path: Optional[Key] = None) -> Union[List[Any], Dict[Any, Any]]:
    """
    Pluck values out of a list of mappings.

    With key_path the result is a dict keyed by the value found at that path.
    """
    if key_path is None:
        return [get(item, value_path) for item in items if is_accessible(item)]

    return {
        get(item, key_path): get(item, value_path)
        for item in items
        if is_accessible(item)
    }


def dot(container: Mapping, prefix: str = '') -> Dict[str, Any]:
    """Flatten a nested mapping into a single level keyed by dot paths."""
    result: Dict[str, Any] = {}
    for key, value in container.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping) and value:
            result.update(dot(value, f"{path}."))
        else:
            result[path] = value
    return result


def undot(container: Mapping) -> Dict[str, Any]:
    """Expand a mapping keyed by dot paths into a nested mapping."""
    result: Dict[str, Any] = {}
    for path, value in container.items():
        set(result, str(path), value)
    return result


def is_assoc(container: Any) -> bool:
    """Check whether a non empty mapping uses only string keys."""
    if not isinstance(container, Mapping) or not container:
        return False
    return all(isinstance(key, str) for key in container)


def is_indexed(container: Any, consecutive: bool = False) -> bool:
    """
    Check whether a container is indexed by integers.

    Lists and tuples always are. Mappings are when all keys are integers;
    with consecutive they must also run 0..n-1 in order.
    """
    if isinstance(container, (list, tuple)):
        return True
    if not isinstance(container, Mapping):
        return False
    if not container:
        return True
    if consecutive:
        return list(container.keys()) == list(range(len(container)))
    return all(isinstance(key, int) and not isinstance(key, bool) for key in container)


def _value_of(item: Any, key: Union[Key, Callable[[Any], Any]]) -> Any:
    return key(item) if callable(key) else get(item, key)


def index(
    items: Iterable[Any],
    key: Union[Key, Callable[[Any], Any], None] = None,
    groups: Union[Key, Iterable[Key], None] = None
) -> Dict[Any, Any]:
    """
    Index and/or group a list of items.

    Each group path adds one level of dicts keyed by the value found at
    that path. Below the last level items are stored under the value at
    ``key``, or appended to a list when no key is given. Items whose key
    resolves to None are dropped. Paths may also be callables taking the
    item.

        >>> rows = [{'id': 1, 'role': 'dev'}, {'id': 2, 'role': 'ops'}]
        >>> index(rows, 'id')
        {1: {'id': 1, 'role': 'dev'}, 2: {'id': 2, 'role': 'ops'}}
        >>> index(rows, groups='role')
        {'dev': [{'id': 1, 'role': 'dev'}], 'ops': [{'id': 2, 'role': 'ops'}]}
    """
    group_paths = [] if groups is None else _as_key_list(groups)
    result: Dict[Any, Any] = {}

    for item in items:
        node = result
        for depth, group_path in enumerate(group_paths):
            innermost = depth == len(group_paths) - 1
            node = node.setdefault(_value_of(item, group_path), [] if key is None and innermost else {})

        if key is None:
            if group_paths:
                node.append(item)
            continue

        value = _value_of(item, key)
        if value is not None:
            node[value] = item

    return result


def group(items: Iterable[Any], groups: Union[Key, Iterable[Key]]) -> Dict[Any, Any]:
    """Group items into lists keyed by the value found at each group path."""
    return index(items, None, groups)


def map(
    items: Iterable[Any],
    from_: Union[Key, Callable[[Any], Any]],
    to: Union[Key, Callable[[Any], Any]],
    group_by: Union[Key, Callable[[Any], Any], None] = None
) -> Dict[Any, Any]:
    """Build a ``{item[from_]: item[to]}`` dict, optionally nested under group_by."""
    result: Dict[Any, Any] = {}
    for item in items:
        target = result if group_by is None else result.setdefault(_value_of(item, group_by), {})
        target[_value_of(item, from_)] = _value_of(item, to)
    return result


def multisort(
    items: List[Any],
    keys: Union[Key, Callable[[Any], Any], Iterable[Any]],
    descending: Union[bool, Iterable[bool]] = False
) -> None:
    """
    Sort a list of items in place by one or more paths.

    ``descending`` is either a single flag for every key or one flag per
    key. Items comparing equal on every key keep their relative order.

    Raises:
        ValueError: If the number of flags differs from the number of keys
    """
    key_list = list(keys) if isinstance(keys, (list, tuple)) else [keys]
    if not key_list or not items:
        return

    if isinstance(descending, bool):
        directions = [descending] * len(key_list)
    else:
        directions = list(descending)
        if len(directions) != len(key_list):
            raise ValueError("The length of the sort direction must be the same as that of sort keys")

    for sort_key, reverse in reversed(list(zip(key_list, directions))):
        items.sort(key=lambda item: _value_of(item, sort_key), reverse=reverse)


def where(container: Any, predicate: Callable[[Any, Any], bool]) -> Any:
    """
    Keep the entries for which ``predicate(value, key)`` is true.

    Mappings keep their keys; sequences return a list of the kept values.
    """
    if isinstance(container, Mapping):
        return {key: value for key, value in container.items() if predicate(value, key)}
    return [value for position, value in enumerate(container) if predicate(value, position)]


def filter(container: Mapping, filters: Iterable[str]) -> Dict[Any, Any]:
    """
    Select parts of a two level mapping with ``key`` / ``key.sub`` filters.

    A filter prefixed with ``!`` removes that entry from the selection.
    Empty values are never selected.

        >>> filter({'A': [1, 2], 'B': {'C': 1, 'D': 2}, 'E': 1}, ['A', 'B.C'])
        {'A': [1, 2], 'B': {'C': 1}}
        >>> filter({'A': [1, 2], 'B': {'C': 1, 'D': 2}}, ['B', '!B.C'])
        {'B': {'D': 2}}
    """
    result: Dict[Any, Any] = {}
    removals = []

    for selector in filters:
        outer, _, inner = selector.partition('.')
        if outer.startswith('!'):
            removals.append((outer[1:], inner or None))
            continue

        if not container.get(outer):
            continue

        if not inner:
            result[outer] = copy_tree(container[outer])
            continue

        nested_value = container[outer]
        if not isinstance(nested_value, Mapping) or nested_value.get(inner) is None:
            continue

        if not isinstance(result.get(outer), MutableMapping):
            result[outer] = {}
        result[outer][inner] = copy_tree(nested_value[inner])

    for outer, inner in removals:
        if outer not in result:
            continue
        if inner is None:
            del result[outer]
        elif isinstance(result[outer], MutableMapping):
            result[outer].pop(inner, None)

    return result


def is_in(needle: Any, items: Iterable[Any], strict: bool = False) -> bool:
    """
    Check whether needle is one of the items.

    With strict the item must also be of the same type, so ``1`` is not
    found in ``[True, 1.0]``.
    """
    for item in items:
        if needle == item and (not strict or type(needle) is type(item)):
            return True
    return False


def is_subset(needles: Iterable[Any], items: Iterable[Any], strict: bool = False) -> bool:
    """Check whether every needle is one of the items."""
    haystack = list(items)
    return all(is_in(needle, haystack, strict) for needle in needles)


def collapse(items: Iterable[Any]) -> List[Any]:
    """Concatenate a list of lists into one list, skipping non list entries."""
    result: List[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(item)
    return result


def cross_join(*lists: Iterable[Any]) -> List[List[Any]]:
    """Return every combination picking one item from each list."""
    return [list(combination) for combination in itertools.product(*lists)]


def prepend(container: Any, value: Any, key: Optional[Key] = None) -> Any:
    """
    Return a copy of container with value added at the front.

    Mappings need a key; an existing entry under that key is replaced and
    moved to the front.
    """
    if isinstance(container, Mapping):
        if key is None:
            raise ValueError("A key is required to prepend to a mapping")
        result = {key: value}
        result.update((k, v) for k, v in container.items() if k != key)
        return result

    return [value, *container]


def insert(items: List[Any], position: int, *values: Any) -> None:
    """Insert values into a list in place, before the given position."""
    items[position:position] = values
