"""
Diagnostic/warning system for the transpiler.

Collects and reports warnings about C# sources and properties that were
skipped or degraded during transpilation, so a partially converted model
does not go unnoticed.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for transpiler diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    class_name: Optional[str] = None
    construct: str = ''  # e.g., 'unparsed source', 'untyped property'

    def __str__(self) -> str:
        location = self.file_path
        if self.class_name:
            location = f'{location}:{self.class_name}' if location else self.class_name
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class TranspilerDiagnostics:
    """
    Collects transpiler warnings/diagnostics during parsing and generation.

    Usage:
        diag = TranspilerDiagnostics()
        diag.warn_unparsed_source("Models/Helpers.cs")
        # ... after transpilation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def infos(self) -> List[Diagnostic]:
        """Get only info-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_unparsed_source(self, file_path: str = '') -> None:
        """Warn that a source file contained no class declaration."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message='No class declaration found; file was skipped.',
            file_path=file_path,
            construct='unparsed source',
        ))

    def warn_untyped_property(
        self,
        property_name: str,
        class_name: Optional[str] = None,
        file_path: str = '',
    ) -> None:
        """Warn that a property had no type and was emitted as any."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Property "{property_name}" has no declared type; using any.',
            file_path=file_path,
            class_name=class_name,
            construct='untyped property',
        ))

    def warn_unnamed_property(
        self,
        class_name: Optional[str] = None,
        file_path: str = '',
    ) -> None:
        """Warn that a property without a name was omitted."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message='Property without a name was omitted.',
            file_path=file_path,
            class_name=class_name,
            construct='unnamed property',
        ))

    def info_custom_type_reference(
        self,
        type_name: str,
        class_name: Optional[str] = None,
        file_path: str = '',
    ) -> None:
        """Info that a custom type was passed through as a bare reference."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Custom type "{type_name}" emitted as a bare reference.',
            file_path=file_path,
            class_name=class_name,
            construct='custom type',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = self.infos

        if warnings:
            print(f'\nTranspiler warnings ({len(warnings)}):', file=file)
            # Group by construct type
            by_construct: dict = {}
            for w in warnings:
                key = w.construct or 'other'
                if key not in by_construct:
                    by_construct[key] = []
                by_construct[key].append(w)

            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nTranspiler info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warning diagnostics."""
        warnings = self.warnings
        if not warnings:
            return 'No transpiler warnings.'

        by_construct: dict = {}
        for w in warnings:
            key = w.construct or 'other'
            if key not in by_construct:
                by_construct[key] = 0
            by_construct[key] += 1

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Transpiler warnings: {", ".join(parts)}'
