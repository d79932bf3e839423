"""
Type rules for configuration validation.

A rule is either ``Primitive(tag)``, matched against the runtime type tag
of a value, or ``InstanceOf(cls)``, matched with ``isinstance``. Rules can
be declared in any of these forms and are normalized by ``TypeRule.parse``::

    {
        'port': 'integer',                    # primitive tag
        'debug': Primitive('boolean'),
        'started_at': datetime,               # class
        'clock': 'object::datetime.datetime', # class by dotted name
    }
"""

import builtins
import importlib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

OBJECT_PREFIX = 'object::'

BOOLEAN = 'boolean'
INTEGER = 'integer'
FLOAT = 'float'
STRING = 'string'
ARRAY = 'array'
NULL = 'null'
OBJECT = 'object'

PRIMITIVE_TAGS = (BOOLEAN, INTEGER, FLOAT, STRING, ARRAY, NULL)

_TAG_ALIASES = {
    'bool': BOOLEAN,
    'int': INTEGER,
    'double': FLOAT,
    'str': STRING,
    'list': ARRAY,
    'dict': ARRAY,
    'none': NULL,
    'NULL': NULL,
}


def type_tag(value: Any) -> str:
    """Return the primitive type tag of a value (``object`` for anything else)."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if value is None:
        return NULL
    if isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray))
    ):
        return ARRAY
    return OBJECT


def describe_value(value: Any) -> str:
    """Describe a value for error messages: its class name for objects, else its tag."""
    tag = type_tag(value)
    if tag == OBJECT:
        return _class_name(type(value))
    return tag


def _class_name(cls: type) -> str:
    if cls.__module__ == 'builtins':
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _import_class(dotted_name: str) -> type:
    module_name, _, class_name = dotted_name.rpartition('.')
    try:
        target = importlib.import_module(module_name) if module_name else builtins
        cls = getattr(target, class_name)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Unknown class in type rule: {dotted_name}") from e

    if not isinstance(cls, type):
        raise ValueError(f"Type rule does not name a class: {dotted_name}")
    return cls


class TypeRule:
    """Base class for configuration type rules."""

    def matches(self, value: Any) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError

    @staticmethod
    def parse(rule: Union['TypeRule', str, type]) -> 'TypeRule':
        """Normalize a declared rule into a TypeRule."""
        if isinstance(rule, TypeRule):
            return rule
        if isinstance(rule, type):
            return InstanceOf(rule)
        if isinstance(rule, str):
            if rule.startswith(OBJECT_PREFIX):
                return InstanceOf(_import_class(rule[len(OBJECT_PREFIX):]))
            return Primitive(rule)
        raise ValueError(f"Invalid type rule: {rule!r}")


@dataclass(frozen=True)
class Primitive(TypeRule):
    """Exact match on the primitive type tag; no coercion."""
    tag: str

    def __post_init__(self):
        tag = _TAG_ALIASES.get(self.tag, self.tag)
        if tag not in PRIMITIVE_TAGS:
            raise ValueError(
                f"Unknown primitive type tag: {self.tag} (expected one of {', '.join(PRIMITIVE_TAGS)})"
            )
        object.__setattr__(self, 'tag', tag)

    def matches(self, value: Any) -> bool:
        return type_tag(value) == self.tag

    def describe(self) -> str:
        return self.tag


@dataclass(frozen=True)
class InstanceOf(TypeRule):
    """Match values that are instances of a class."""
    cls: type

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def describe(self) -> str:
        return _class_name(self.cls)
