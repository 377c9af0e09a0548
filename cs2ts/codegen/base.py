"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used by the generator classes in the code generation pipeline.
"""

from typing import Optional

from .context import GeneratorOptions, NamingConvention
from .diagnostics import TranspilerDiagnostics


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation
    - Property name conversion
    - Diagnostics access
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        diagnostics: Optional[TranspilerDiagnostics] = None,
    ):
        """
        Initialize the base generator.

        Args:
            options: Generator options (defaults when omitted)
            diagnostics: Optional collector for degraded conversions
        """
        self._options = options or GeneratorOptions()
        self._diagnostics = diagnostics

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self, level: int = 1) -> str:
        """Return the indentation string for the given nesting level."""
        return self._options.indentation * level

    # =========================================================================
    # NAMING
    # =========================================================================

    def convert_property_name(self, name: str) -> str:
        """Apply the configured naming convention to a property name.

        camelCase only lowercases the first letter, so names are assumed to
        already be PascalCase (FirstName -> firstName, ID -> iD).
        """
        convention = self._options.property_naming_convention
        if not name or convention == NamingConvention.PRESERVE:
            return name
        if convention == NamingConvention.CAMEL_CASE:
            return name[0].lower() + name[1:]
        return name[0].upper() + name[1:]
