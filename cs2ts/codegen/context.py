"""
Generator options for the TypeScript code generator.

This module provides the options record that controls how interfaces are
rendered (indentation, export keyword, timestamp header and property naming),
together with the mapping from the JSON configuration spelling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class NamingConvention(Enum):
    """How C# property names are rendered in TypeScript."""
    PRESERVE = 'preserve'
    CAMEL_CASE = 'camelCase'
    PASCAL_CASE = 'PascalCase'


# JSON option key -> GeneratorOptions attribute
OPTION_KEYS: Dict[str, str] = {
    'indentation': 'indentation',
    'exportInterfaces': 'export_interfaces',
    'addTimestamp': 'add_timestamp',
    'propertyNamingConvention': 'property_naming_convention',
}


@dataclass(frozen=True)
class GeneratorOptions:
    """
    Options consumed by the interface generator.

    Options are expected fully resolved; defaults match a freshly
    initialized config file.
    """

    indentation: str = '  '
    export_interfaces: bool = True
    add_timestamp: bool = True
    property_naming_convention: NamingConvention = NamingConvention.PRESERVE

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'GeneratorOptions':
        """Build options from the JSON spelling, ignoring unknown keys.

        Raises ValueError for an unrecognized naming convention.
        """
        kwargs: Dict[str, Any] = {}
        for json_key, attr in OPTION_KEYS.items():
            if json_key in raw and raw[json_key] is not None:
                kwargs[attr] = raw[json_key]
        if 'property_naming_convention' in kwargs:
            kwargs['property_naming_convention'] = NamingConvention(
                kwargs['property_naming_convention']
            )
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return the options in their JSON spelling."""
        return {
            'indentation': self.indentation,
            'addTimestamp': self.add_timestamp,
            'exportInterfaces': self.export_interfaces,
            'propertyNamingConvention': self.property_naming_convention.value,
        }
