"""
Builders module.

One builder per IR record kind. Only ModuleBuilder is constructed
directly; the others are returned by the add_* operations of their owner.
"""

from __future__ import annotations

from .callables import (
    CallableBuilder,
    ConstructorBuilder,
    FunctionBuilder,
    MethodBuilder,
    ParameterBuilder,
)
from .module import ModuleBuilder, VariableBuilder, create_module
from .prototypes import ClassBuilder, InterfaceBuilder, PropertyBuilder, PrototypeBuilder

__all__ = [
    "ModuleBuilder",
    "create_module",
    "ClassBuilder",
    "InterfaceBuilder",
    "PrototypeBuilder",
    "PropertyBuilder",
    "CallableBuilder",
    "FunctionBuilder",
    "MethodBuilder",
    "ConstructorBuilder",
    "ParameterBuilder",
    "VariableBuilder",
]
