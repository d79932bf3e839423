# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Common package providing shared caches and decorators for stdkit.

This package includes:
- MemoCache, the thread-safe append-only cache behind memoized helpers
- A registry of named process-wide caches
- The memoize decorator
"""

from .cache import MemoCache, get_cache, clear_caches
from .decorators import memoize

__all__ = [
    'MemoCache', 'get_cache', 'clear_caches',
    'memoize',
]
