"""
Code generation module for the C# to TypeScript transpiler.

This module provides TypeScript interface generation from parsed C# classes.
"""

from .context import GeneratorOptions, NamingConvention
from .base import BaseGenerator
from .type_converter import TypeConverter
from .interface import InterfaceGenerator
from .diagnostics import TranspilerDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'GeneratorOptions',
    'NamingConvention',
    'BaseGenerator',
    'TypeConverter',
    'InterfaceGenerator',
    'TranspilerDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
