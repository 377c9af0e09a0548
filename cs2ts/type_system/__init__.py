"""
Types module for the C# to TypeScript transpiler.

This module provides the primitive type table and type conversion utilities.
"""

from .mappings import (
    csharp_type_to_ts,
    split_type_arguments,
    is_known_type,
    CSHARP_TO_TS_MAP,
)

__all__ = [
    'csharp_type_to_ts',
    'split_type_arguments',
    'is_known_type',
    'CSHARP_TO_TS_MAP',
]
