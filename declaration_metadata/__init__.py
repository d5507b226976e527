"""Declaration Metadata

A Python package for building an intermediate representation of the
declarations of a program (modules, classes, interfaces, functions,
members and type references) through incremental builders, with
scope-aware resolution of type names to canonical handles.
"""

__version__ = "1.0.0"

from .ancestry import get_module, get_parent, get_parents, get_program, iter_parents, set_parent
from .builders import (
    ClassBuilder,
    ConstructorBuilder,
    FunctionBuilder,
    InterfaceBuilder,
    MethodBuilder,
    ModuleBuilder,
    ParameterBuilder,
    PropertyBuilder,
    VariableBuilder,
    create_module,
)
from .config import BuilderConfig
from .context import BuilderContext
from .errors import CyclicAncestryError, DeclarationError, MetadataError
from .ir_nodes import (
    Access,
    Class,
    Constructor,
    Function,
    Interface,
    Kind,
    Method,
    Module,
    Parameter,
    Program,
    Property,
    TypeReference,
    Variable,
    ordered_parameters,
    type_ref,
)
from .type_handles import TypeHandle, declare, mint_anonymous, mint_type, name_of, resolve

__all__ = [
    "ModuleBuilder",
    "create_module",
    "ClassBuilder",
    "InterfaceBuilder",
    "PropertyBuilder",
    "FunctionBuilder",
    "MethodBuilder",
    "ConstructorBuilder",
    "ParameterBuilder",
    "VariableBuilder",
    "BuilderConfig",
    "BuilderContext",
    "MetadataError",
    "CyclicAncestryError",
    "DeclarationError",
    "Access",
    "Kind",
    "TypeReference",
    "Program",
    "Module",
    "Class",
    "Interface",
    "Function",
    "Method",
    "Constructor",
    "Property",
    "Variable",
    "Parameter",
    "type_ref",
    "ordered_parameters",
    "TypeHandle",
    "mint_type",
    "mint_anonymous",
    "name_of",
    "declare",
    "resolve",
    "set_parent",
    "get_parent",
    "get_parents",
    "iter_parents",
    "get_module",
    "get_program",
]
