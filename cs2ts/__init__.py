"""
C# to TypeScript Transpiler

This package converts C# data-transfer-object classes to TypeScript
interfaces so a frontend's types stay in sync with the backend model.

Module Structure:
- parser/: Class/property descriptors and the structural parser (CSharpParser)
- type_system/: Primitive table and type conversion (csharp_type_to_ts)
- codegen/: Interface generation, generator options and diagnostics
- config.py: JSON config loading and validation
- source_scanner.py: Glob expansion and file I/O
- cs2ts.py: Main transpiler and command-line interface

Usage:
    from cs2ts import CSharpParser, InterfaceGenerator, GeneratorOptions

    parsed = CSharpParser().parse(source)
    ts_code = InterfaceGenerator(GeneratorOptions(add_timestamp=False)).generate(parsed)
"""

# Re-export main classes for convenience
from .cs2ts import CSharpToTypeScriptTranspiler, TranspileError, main
from .parser import CSharpParser, ClassDescriptor, PropertyDescriptor
from .type_system import csharp_type_to_ts
from .codegen import (
    InterfaceGenerator,
    GeneratorOptions,
    NamingConvention,
    TranspilerDiagnostics,
)
from .config import TranspilerConfig, ConfigError, load_config, load_config_or_default

__all__ = [
    'CSharpToTypeScriptTranspiler',
    'TranspileError',
    'main',
    'CSharpParser',
    'ClassDescriptor',
    'PropertyDescriptor',
    'csharp_type_to_ts',
    'InterfaceGenerator',
    'GeneratorOptions',
    'NamingConvention',
    'TranspilerDiagnostics',
    'TranspilerConfig',
    'ConfigError',
    'load_config',
    'load_config_or_default',
]
