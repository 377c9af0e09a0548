#!/usr/bin/env python3
"""
C# to TypeScript Transpiler

This transpiler converts C# DTO classes to TypeScript interfaces so that a
frontend can share the backend's data model shapes.

Key features:
- Structural parsing of auto-properties (no full C# parser)
- Nullable, List/IList, array and Dictionary/IDictionary type mapping
- Custom types emitted as references to sibling interfaces
- JSON config with input globs, output file and formatting options

Usage:
    cs2ts init
    cs2ts [cs2ts.config.json] [--verbose] [--stdout]
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .codegen import InterfaceGenerator, TranspilerDiagnostics
from .config import (
    ConfigError,
    DEFAULT_CONFIG_FILE,
    TranspilerConfig,
    load_config,
    write_default_config,
)
from .parser import ClassDescriptor, CSharpParser
from .source_scanner import SourceScanner


class TranspileError(Exception):
    """Raised when a run produces nothing to write."""


class CSharpToTypeScriptTranspiler:
    """Main transpiler class that orchestrates the conversion process."""

    def __init__(
        self,
        config: TranspilerConfig,
        base_dir: Union[str, Path] = '.',
        diagnostics: Optional[TranspilerDiagnostics] = None,
        verbose: bool = False,
    ):
        self.config = config
        self.scanner = SourceScanner(base_dir)
        self.parser = CSharpParser()
        self.diagnostics = diagnostics or TranspilerDiagnostics(verbose=verbose)
        self.verbose = verbose
        self.generator = InterfaceGenerator(config.options, self.diagnostics)

    def _debug(self, message: str) -> None:
        if self.verbose:
            print(f'[debug] {message}')

    def scan(self) -> List[Path]:
        """Find all C# files matching the configured input patterns."""
        files = self.scanner.scan(self.config.input)
        for path in files:
            self._debug(f'Matched {path}')
        return files

    def parse_sources(self, sources: Iterable[Tuple[str, str]]) -> List[ClassDescriptor]:
        """Parse (identifier, text) pairs, keeping input order.

        Sources without a class declaration are skipped and reported.
        """
        classes = []
        for identifier, text in sources:
            parsed = self.parser.parse(text)
            if parsed is None:
                self.diagnostics.warn_unparsed_source(identifier)
                self._debug(f'No class found in {identifier}')
                continue
            self._debug(
                f'Parsed class structure: {parsed.name} '
                f'({len(parsed.properties)} properties) from {identifier}'
            )
            classes.append(parsed)
        return classes

    def generate(self, classes: Sequence[ClassDescriptor]) -> str:
        """Generate TypeScript interfaces for parsed classes."""
        return self.generator.generate_multiple(classes)

    def transpile_file(self, filepath: str) -> Optional[str]:
        """Transpile a single C# file. Returns None if it has no class."""
        source = self.scanner.read(filepath)
        classes = self.parse_sources([(filepath, source)])
        if not classes:
            return None
        return self.generate(classes)

    def transpile(self) -> str:
        """Scan, read, parse and generate the combined TypeScript output."""
        files = self.scan()
        if not files:
            raise TranspileError('No C# files found with specified input patterns.')
        print(f'Found {len(files)} C# files.')

        sources = [(str(f.path), f.content) for f in self.scanner.read_all(files)]
        classes = self.parse_sources(sources)
        if not classes:
            raise TranspileError('No parsable classes found in C# files.')
        print(f'Parsed {len(classes)} classes.')

        return self.generate(classes)

    def write_output(self, content: str, output: Optional[str] = None) -> Path:
        """Write transpiled TypeScript to the configured output file."""
        path = self.scanner.write(output or self.config.output, content + '\n')
        print(f'Written: {path}')
        return path


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='C# to TypeScript Transpiler')
    parser.add_argument('config', nargs='?',
                        help=f"Config file (default: {DEFAULT_CONFIG_FILE}), or 'init' to create one")
    parser.add_argument('--config', dest='config_path', metavar='PATH',
                        help='Config file path, for generation and for init')
    parser.add_argument('-o', '--output', help='Output file (overrides config)')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print debug output')

    args = parser.parse_args(argv)

    if args.config == 'init':
        try:
            path = write_default_config(args.config_path or DEFAULT_CONFIG_FILE)
        except ConfigError as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1
        print(f'Written: {path}')
        return 0

    if args.config and args.config_path:
        parser.error('config file given both positionally and with --config')
    config_path = args.config_path or args.config or DEFAULT_CONFIG_FILE

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f'Failed to load config: {e}', file=sys.stderr)
        return 1
    print(f'Loaded config: {config_path}')

    transpiler = CSharpToTypeScriptTranspiler(config, verbose=args.verbose)
    try:
        ts_code = transpiler.transpile()
    except TranspileError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.stdout:
        print(ts_code)
    else:
        transpiler.write_output(ts_code, args.output)

    transpiler.diagnostics.print_summary()
    return 0


if __name__ == '__main__':
    sys.exit(main())
