"""
Common decorators for stdkit.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from .cache import MemoCache, get_cache

F = TypeVar('F', bound=Callable[..., Any])


def memoize(cache_name: Optional[str] = None):
    """
    Memoization decorator backed by a process-wide MemoCache.

    Arguments must be hashable. The cache never evicts, so only decorate
    functions whose input space is small (identifiers, config keys).

    Args:
        cache_name: Name of the shared cache (default: the function's qualified name)
    """
    def decorator(func: F) -> F:
        cache: MemoCache = get_cache(cache_name or f"{func.__module__}.{func.__qualname__}")

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            key = (args, tuple(sorted(kwargs.items()))) if kwargs else args
            return cache.get_or_set(key, lambda: func(*args, **kwargs))

        # Add cache management methods
        wrapper.cache = cache
        wrapper.cache_clear = cache.clear
        wrapper.cache_info = cache.info

        return wrapper
    return decorator
