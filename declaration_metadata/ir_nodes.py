"""
IR (Intermediate Representation) node definitions.

These records describe the declarative shape of a program: modules and
the classes, interfaces, functions and variables they contain. They carry
no behaviour; builders mutate them and back ends read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .type_handles import TypeHandle


class Access(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Kind(Enum):
    """Tag carried by every IR record."""

    UNKNOWN = "unknown"
    VARIABLE = "variable"
    FUNCTION = "function"
    CLASS = "class"
    INTERFACE = "interface"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    PARAMETER = "parameter"
    MODULE = "module"
    PROGRAM = "program"
    TYPE = "type"


# A bare name, or a handle once the name has been resolved
TypeIdentifier = str | TypeHandle


@dataclass
class TypeReference:
    """A reference to a type, resolved or not."""

    identifier: TypeIdentifier = ""
    type_parameters: list[TypeReference] | None = None
    kind: Kind = field(default=Kind.TYPE, init=False)

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.identifier, TypeHandle)


@dataclass
class Entity:
    """Base class for all IR records."""

    # Owning record, maintained by the builders (see ancestry.py)
    parent: Any = field(default=None, init=False, repr=False, compare=False)


@dataclass
class Parameter(Entity):
    index: int = 0
    name: str | None = None
    type_ref: TypeReference | None = None
    is_rest: bool | None = None
    is_optional: bool | None = None
    kind: Kind = field(default=Kind.PARAMETER, init=False)


@dataclass
class Variable(Entity):
    name: str | None = None
    type_ref: TypeReference | None = None
    is_constant: bool | None = None
    kind: Kind = field(default=Kind.VARIABLE, init=False)


@dataclass
class Property(Entity):
    name: str | None = None
    type_ref: TypeReference | None = None
    access: Access | None = None
    is_static: bool | None = None
    is_optional: bool | None = None
    is_readonly: bool | None = None
    kind: Kind = field(default=Kind.PROPERTY, init=False)


@dataclass
class Function(Entity):
    name: str | None = None

    # Keyed by declared position; gaps are allowed
    parameters: dict[int, Parameter] = field(default_factory=dict)

    return_type: TypeReference | None = None
    type_parameters: list[TypeHandle] | None = None
    is_async: bool | None = None
    is_generator: bool | None = None
    kind: Kind = field(default=Kind.FUNCTION, init=False)


@dataclass
class Method(Entity):
    name: str | None = None
    parameters: dict[int, Parameter] = field(default_factory=dict)
    return_type: TypeReference | None = None
    type_parameters: list[TypeHandle] | None = None
    access: Access | None = None
    is_static: bool | None = None
    is_abstract: bool | None = None
    is_async: bool | None = None
    is_generator: bool | None = None
    kind: Kind = field(default=Kind.METHOD, init=False)


@dataclass
class Constructor(Entity):
    parameters: dict[int, Parameter] = field(default_factory=dict)
    kind: Kind = field(default=Kind.CONSTRUCTOR, init=False)


@dataclass
class Interface(Entity):
    name: str | None = None
    properties: list[Property] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    extends: list[TypeReference] | None = None
    type_parameters: list[TypeHandle] | None = None
    kind: Kind = field(default=Kind.INTERFACE, init=False)


@dataclass
class Class(Entity):
    name: str | None = None
    properties: list[Property] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    constructor: Constructor | None = None
    extends: TypeReference | None = None
    implements: list[TypeReference] | None = None
    is_abstract: bool | None = None
    type_parameters: list[TypeHandle] | None = None
    kind: Kind = field(default=Kind.CLASS, init=False)


@dataclass
class Module(Entity):
    path: str = ""

    # path -> {alias -> exported name}
    imports: dict[str, dict[str, str]] = field(default_factory=dict)

    # alias -> local name
    exports: dict[str, str] = field(default_factory=dict)

    children: list[Entry] = field(default_factory=list)
    kind: Kind = field(default=Kind.MODULE, init=False)


@dataclass
class Program(Entity):
    modules: dict[str, Module] = field(default_factory=dict)
    kind: Kind = field(default=Kind.PROGRAM, init=False)


Entry = Class | Interface | Variable | Function
Prototype = Class | Interface
Callable = Function | Method
Field = Variable | Property | Parameter
Member = Method | Property
AnyEntity = Variable | Function | Method | Property | Constructor | Parameter | Class | Interface | Module | Program


def type_ref(identifier: TypeIdentifier, *type_parameters: TypeReference | TypeIdentifier) -> TypeReference:
    """Build a TypeReference, wrapping bare type parameter identifiers."""
    params = [p if isinstance(p, TypeReference) else TypeReference(p) for p in type_parameters]
    return TypeReference(identifier, params or None)


def ordered_parameters(parameters: dict[int, Parameter]) -> list[Parameter | None]:
    """
    Lay out a sparse parameter map by position.

    Missing positions are filled with None.

    Args:
        parameters: Parameters keyed by index

    Returns:
        List of length max(index) + 1
    """
    if not parameters:
        return []
    size = max(parameters) + 1
    return [parameters.get(i) for i in range(size)]
