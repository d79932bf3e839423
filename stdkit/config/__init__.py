# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Configuration package providing the declarative configuration base class.

This package includes:
- BaseConfiguration: typed fields bound from a nested mapping
- ConfigurationInterface: the contract every configuration implements
- Type rules (Primitive, InstanceOf) used to validate configuration values
"""

from .configuration import BaseConfiguration
from .interface import ConfigurationInterface
from .rules import (
    TypeRule, Primitive, InstanceOf, type_tag, describe_value,
    BOOLEAN, INTEGER, FLOAT, STRING, ARRAY, NULL, OBJECT
)

__all__ = [
    'BaseConfiguration', 'ConfigurationInterface',
    'TypeRule', 'Primitive', 'InstanceOf', 'type_tag', 'describe_value',
    'BOOLEAN', 'INTEGER', 'FLOAT', 'STRING', 'ARRAY', 'NULL', 'OBJECT',
]
