"""
Descriptor definitions for parsed C# classes.

This module contains the immutable dataclasses produced by the structural
parser: one ClassDescriptor per parsed source, holding its properties in
source order.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class PropertyDescriptor:
    """Represents an auto-property (e.g., public int Id { get; set; })."""
    name: Optional[str]
    type: Optional[str]


@dataclass(frozen=True)
class ClassDescriptor:
    """Represents a parsed class: its name and auto-properties in source order."""
    name: str
    properties: Tuple[PropertyDescriptor, ...] = field(default_factory=tuple)
