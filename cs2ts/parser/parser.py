"""
Structural parser for C# DTO classes.

The parser does not build an AST. It recognizes the first class declaration
and every auto-property of the form

    public Type Name { get; set; }

anywhere in the text. Scanning is not brace-aware: a class body that is
never closed still yields its properties, and properties of several classes
in one file are all attributed to the first class name.
"""

import re
from typing import List, Optional

from .descriptors import ClassDescriptor, PropertyDescriptor


# class Name
CLASS_PATTERN = re.compile(r'class\s+(\w+)')

# public Type Name { get; set; }
#   Type: identifier, optional <...> generic argument list, optional ?
PROPERTY_PATTERN = re.compile(
    r'public\s+(\w+(?:<[^>]+>)?\??)\s+(\w+)\s*\{\s*get;\s*set;\s*\}'
)


class CSharpParser:
    """
    Parser for C# DTO source text.

    Extracts the class name and its auto-properties. Fields, methods and
    accessors with bodies do not match the property pattern and are skipped.
    Attribute lines like [Required] are skipped text.
    """

    def parse(self, source: str) -> Optional[ClassDescriptor]:
        """Parse source text into a ClassDescriptor.

        Returns None when no class declaration is found, regardless of
        whether any properties could be matched.
        """
        class_name = self.extract_class_name(source)
        if not class_name:
            return None
        return ClassDescriptor(
            name=class_name,
            properties=tuple(self.extract_properties(source)),
        )

    def extract_class_name(self, source: str) -> Optional[str]:
        """Return the identifier following the first 'class' keyword."""
        match = CLASS_PATTERN.search(source)
        if match:
            return match.group(1)
        return None

    def extract_properties(self, source: str) -> List[PropertyDescriptor]:
        """Return every auto-property in order of appearance."""
        return [
            PropertyDescriptor(name=match.group(2), type=match.group(1))
            for match in PROPERTY_PATTERN.finditer(source)
        ]
