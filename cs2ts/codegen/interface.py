"""
Interface generation for C# to TypeScript transpilation.

This module renders parsed C# classes as TypeScript interfaces, one
declaration per class, with an optional generated-file header.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .diagnostics import TranspilerDiagnostics

from .base import BaseGenerator
from .context import GeneratorOptions
from .type_converter import TypeConverter
from ..parser.descriptors import ClassDescriptor


GENERATOR_NAME = 'cs2ts'
EMPTY_BODY_COMMENT = '// No properties'
DECLARATION_SEPARATOR = '\n\n'


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InterfaceGenerator(BaseGenerator):
    """
    Generates TypeScript interfaces from parsed C# classes.

    This class handles:
    - The generated-file header with timestamp
    - The export keyword and interface header
    - One typed member per property, or an empty-body marker
    - Joining several interfaces in caller order
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        diagnostics: Optional['TranspilerDiagnostics'] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize the interface generator.

        Args:
            options: Generator options (defaults when omitted)
            diagnostics: Optional collector for degraded conversions
            clock: Returns the time written into the header
        """
        super().__init__(options, diagnostics)
        self._type_converter = TypeConverter(self._options, diagnostics)
        self._clock = clock

    # =========================================================================
    # HEADER
    # =========================================================================

    def generate_header(self) -> str:
        """Generate the doc comment marking the file as generated."""
        timestamp = self._clock().isoformat()
        lines = [
            '/**',
            f' * Auto-generated by {GENERATOR_NAME}',
            f' * Generated on: {timestamp}',
            ' * DO NOT EDIT MANUALLY',
            ' */',
        ]
        return '\n'.join(lines)

    # =========================================================================
    # INTERFACES
    # =========================================================================

    def generate(self, cls: ClassDescriptor) -> str:
        """Generate a TypeScript interface for one class.

        Args:
            cls: The parsed class

        Returns:
            Interface declaration text without a trailing newline
        """
        lines = []

        if self._options.add_timestamp:
            lines.append(self.generate_header())

        export = 'export ' if self._options.export_interfaces else ''
        lines.append(f'{export}interface {cls.name} {{')

        # The marker is keyed on declared properties; nameless ones are
        # still skipped by _generate_members.
        if cls.properties:
            lines.extend(self._generate_members(cls))
        else:
            lines.append(f'{self.indent()}{EMPTY_BODY_COMMENT}')

        lines.append('}')
        return '\n'.join(lines)

    def generate_multiple(self, classes: Sequence[ClassDescriptor]) -> str:
        """Generate interfaces for several classes separated by a blank line."""
        return DECLARATION_SEPARATOR.join(self.generate(cls) for cls in classes)

    def _generate_members(self, cls: ClassDescriptor) -> List[str]:
        members = []
        for prop in cls.properties:
            if not prop.name:
                if self._diagnostics is not None:
                    self._diagnostics.warn_unnamed_property(cls.name)
                continue
            if prop.type is None and self._diagnostics is not None:
                self._diagnostics.warn_untyped_property(prop.name, cls.name)
            name = self.convert_property_name(prop.name)
            ts_type = self._type_converter.csharp_type_to_ts(prop.type, cls.name)
            members.append(f'{self.indent()}{name}: {ts_type};')
        return members
