"""
Parser module for the C# to TypeScript transpiler.

This module provides the class/property descriptors and the structural parser.
"""

from .descriptors import ClassDescriptor, PropertyDescriptor
from .parser import CSharpParser, CLASS_PATTERN, PROPERTY_PATTERN

__all__ = [
    'ClassDescriptor',
    'PropertyDescriptor',
    'CSharpParser',
    'CLASS_PATTERN',
    'PROPERTY_PATTERN',
]
