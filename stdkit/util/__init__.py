# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing common helper functions for stdkit.

This package includes:
- nested: dot notation access to nested mappings, deep merge, collection helpers
- strings: memoized case conversion, slugs, padding and matching
- unit: byte size parsing and formatting
- encoding: JSON and YAML encode/decode wrappers
- path: path normalization
- loader: configuration loading from files and environment variables

The nested module shadows builtin names (set, map, filter) on purpose, so import
it as a module: ``from stdkit.util import nested``.
"""

from . import nested
from .strings import (
    studly, camel, snake, kebab, title, to_ascii, slug,
    pad, pad_left, pad_right, limit, to_list, contains, starts_with,
    ends_with, words, replace_first, replace_last, first_line, finish, is_
)
from .unit import size_in_bytes, format_size
from .encoding import json_encode, json_decode, yaml_encode, yaml_decode
from .path import (
    normalize_path, normalize_path_ds, is_absolute_path, real_path,
    convert_to_absolute
)
from .loader import load_config_from_env, load_config_file, expand_config_variables

__all__ = [
    # Nested mappings
    'nested',

    # String utilities
    'studly', 'camel', 'snake', 'kebab', 'title', 'to_ascii', 'slug',
    'pad', 'pad_left', 'pad_right', 'limit', 'to_list', 'contains', 'starts_with',
    'ends_with', 'words', 'replace_first', 'replace_last', 'first_line', 'finish', 'is_',

    # Size units
    'size_in_bytes', 'format_size',

    # Encoding utilities
    'json_encode', 'json_decode', 'yaml_encode', 'yaml_decode',

    # Path utilities
    'normalize_path', 'normalize_path_ds', 'is_absolute_path', 'real_path',
    'convert_to_absolute',

    # Configuration sources
    'load_config_from_env', 'load_config_file', 'expand_config_variables',
]
