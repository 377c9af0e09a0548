"""
Type conversion utilities for code generation.

This module provides the TypeConverter class that wraps the pure C# to
TypeScript type mapping with generation-time concerns: properties without a
type and reporting of custom type references.
"""

import re
from typing import List, Optional

from .base import BaseGenerator
from ..type_system import csharp_type_to_ts, is_known_type


# Emitted for a property whose type could not be recovered
UNTYPED = 'any'

CONTAINER_NAMES = frozenset({'List', 'IList', 'Dictionary', 'IDictionary'})

_IDENTIFIER = re.compile(r'\w+')


class TypeConverter(BaseGenerator):
    """
    Handles C# to TypeScript type conversions.

    This class provides context-aware type conversion that:
    - Converts C# types to TypeScript types
    - Degrades a missing type to any
    - Reports custom type names that are emitted as bare references
    """

    def csharp_type_to_ts(
        self,
        csharp_type: Optional[str],
        class_name: Optional[str] = None,
    ) -> str:
        """Convert a property's C# type to a TypeScript type.

        Args:
            csharp_type: The raw C# type, or None when it was not recovered
            class_name: Owning class, used only for diagnostics

        Returns:
            The TypeScript type string
        """
        if csharp_type is None:
            return UNTYPED

        if self._diagnostics is not None:
            for name in self.custom_type_names(csharp_type):
                self._diagnostics.info_custom_type_reference(name, class_name)

        return csharp_type_to_ts(csharp_type)

    @staticmethod
    def custom_type_names(csharp_type: str) -> List[str]:
        """Return the identifiers in a type expression that are not built in.

        'Dictionary<string, List<OrderDto>>' -> ['OrderDto']
        """
        names = []
        for name in _IDENTIFIER.findall(csharp_type):
            if name in CONTAINER_NAMES or is_known_type(name):
                continue
            if name not in names:
                names.append(name)
        return names
