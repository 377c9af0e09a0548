"""
Type mappings and conversion utilities for C# to TypeScript.

This module contains the primitive lookup table and the recursive function
that projects a C# type expression (as written in a property declaration)
onto its TypeScript equivalent.
"""

import re
from types import MappingProxyType
from typing import List


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Base C# to TypeScript type mapping
CSHARP_TO_TS_MAP = MappingProxyType({
    # Integer and floating point types -> number
    'int': 'number',
    'long': 'number',
    'short': 'number',
    'byte': 'number',
    'float': 'number',
    'double': 'number',
    'decimal': 'number',
    # Characters and strings
    'char': 'string',
    'string': 'string',
    # Boolean
    'bool': 'boolean',
    'boolean': 'boolean',
    # Serialized as ISO strings in JSON
    'DateTime': 'string',
    'DateTimeOffset': 'string',
    'Guid': 'string',
    # Untyped
    'dynamic': 'any',
    'object': 'any',
    'var': 'any',
    'void': 'void',
})

NULLABLE_MARKER = '?'
UNION_SEPARATOR = '|'

_LIST_PATTERN = re.compile(r'(?:I)?List<(.+)>')
_ARRAY_PATTERN = re.compile(r'(.+)\[\]')
_DICTIONARY_PATTERN = re.compile(r'(?:I)?Dictionary<(.+)>')


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def csharp_type_to_ts(csharp_type: str) -> str:
    """
    Convert a C# type expression to its TypeScript equivalent.

    Rules are tried in order and the first one that matches wins:
    nullable, List/IList, array suffix, Dictionary/IDictionary, the
    primitive table, and finally passthrough. Unknown names are returned
    unchanged since they refer to other generated interfaces.

    Args:
        csharp_type: The C# type as it appears in source (e.g. 'List<int?>')

    Returns:
        The TypeScript type string
    """
    # int? -> number | null
    if csharp_type.endswith(NULLABLE_MARKER):
        base_type = csharp_type[:-1].strip()
        return f'{csharp_type_to_ts(base_type)} | null'

    # List<string> -> string[], List<string?> -> (string | null)[]
    list_match = _LIST_PATTERN.fullmatch(csharp_type)
    if list_match:
        element_type = csharp_type_to_ts(list_match.group(1).strip())
        return _array_of(element_type)

    # string[] -> string[], int?[] -> (number | null)[]
    # Unions are parenthesized here too: 'number | null[]' would read as
    # a union with an array of null.
    array_match = _ARRAY_PATTERN.fullmatch(csharp_type)
    if array_match:
        element_type = csharp_type_to_ts(array_match.group(1).strip())
        return _array_of(element_type)

    # Dictionary<string, int> -> Record<string, number>
    dictionary_match = _DICTIONARY_PATTERN.fullmatch(csharp_type)
    if dictionary_match:
        type_args = split_type_arguments(dictionary_match.group(1))
        if len(type_args) == 2:
            key_type = csharp_type_to_ts(type_args[0])
            value_type = csharp_type_to_ts(type_args[1])
            return f'Record<{key_type}, {value_type}>'

    ts_type = CSHARP_TO_TS_MAP.get(csharp_type)
    if ts_type:
        return ts_type

    # Custom type (EntityDto, UserDto) - keep as-is
    return csharp_type


def _array_of(element_type: str) -> str:
    """Suffix an element type with [], parenthesizing unions."""
    if _has_top_level_union(element_type):
        return f'({element_type})[]'
    return f'{element_type}[]'


def _has_top_level_union(ts_type: str) -> bool:
    """Check for a | outside any brackets.

    'number | null' is a union; '(number | null)[]' and
    'Record<string, number | null>' are not.
    """
    depth = 0
    for char in ts_type:
        if char in '<[(':
            depth += 1
        elif char in '>])':
            depth -= 1
        elif char == UNION_SEPARATOR and depth == 0:
            return True
    return False


def split_type_arguments(args_str: str) -> List[str]:
    """Split comma-separated generic arguments, respecting nested brackets.

    'string, List<int>' -> ['string', 'List<int>']
    'string, Dictionary<int, bool>' -> ['string', 'Dictionary<int, bool>']
    """
    args = []
    current = []
    depth = 0

    for char in args_str:
        if char in '<[(':
            depth += 1
            current.append(char)
        elif char in '>])':
            depth -= 1
            current.append(char)
        elif char == ',' and depth == 0:
            args.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    if current:
        args.append(''.join(current).strip())

    return args


def is_known_type(csharp_type: str) -> bool:
    """Check whether a bare C# type name is in the primitive table."""
    return csharp_type in CSHARP_TO_TS_MAP
