"""
Builders for classes, interfaces and their properties.
"""

from __future__ import annotations

from ..context import BuilderContext
from ..ir_nodes import Class, Constructor, Interface, Method, Property, TypeReference
from ..type_handles import TypeHandle
from .base import Builder, FieldMixin, MemberMixin, NamedMixin, TypeParametersMixin, as_list
from .callables import ConstructorBuilder, MethodBuilder


class PropertyBuilder(MemberMixin, FieldMixin, Builder):
    entity: Property

    def set_optional(self, flag: bool | None = None) -> PropertyBuilder:
        if flag is not None:
            self.entity.is_optional = flag
        return self

    def set_readonly(self, flag: bool | None = None) -> PropertyBuilder:
        if flag is not None:
            self.entity.is_readonly = flag
        return self


class PrototypeBuilder(TypeParametersMixin, NamedMixin, Builder):
    """Shared behaviour of class and interface builders."""

    entity: Class | Interface

    def __init__(self, proto: Class | Interface, ctx: BuilderContext, handle: TypeHandle | None = None):
        """
        Initialize the builder.

        Args:
            proto: The class or interface record
            ctx: Context of the enclosing module; the builder forks it
            handle: Nominal handle minted for the declaration, if it is named
        """
        super().__init__(proto, ctx.fork())
        self.handle = handle

    def add_method(self, name: str | None = None) -> MethodBuilder:
        method = Method(name=name)
        self.entity.methods.append(method)
        self._adopt(method)
        return MethodBuilder(method, self.ctx)

    def add_property(self, name: str | None = None) -> PropertyBuilder:
        prop = Property(name=name)
        self.entity.properties.append(prop)
        self._adopt(prop)
        return PropertyBuilder(prop, self.ctx)


class ClassBuilder(PrototypeBuilder):
    entity: Class

    def set_abstract(self, flag: bool | None = None) -> ClassBuilder:
        if flag is not None:
            self.entity.is_abstract = flag
        return self

    def add_constructor(self) -> ConstructorBuilder:
        """Get a builder for the class constructor, creating it on first use."""
        ctor = self.entity.constructor
        if ctor is None:
            ctor = Constructor()
            self.entity.constructor = ctor
            self._adopt(ctor)
        return ConstructorBuilder(self, ctor, self.ctx)

    def set_extends(self, base: TypeReference | None = None) -> ClassBuilder:
        if base is not None:
            self.entity.extends = self.ctx.resolve_one(base)
        return self

    def add_implements(self, interfaces: TypeReference | list[TypeReference] | None = None) -> ClassBuilder:
        if interfaces is None:
            return self
        if self.entity.implements is None:
            self.entity.implements = []
        self.entity.implements.extend(self.ctx.resolve_many(as_list(interfaces)))
        return self


class InterfaceBuilder(PrototypeBuilder):
    entity: Interface

    def add_extends(self, interfaces: TypeReference | list[TypeReference] | None = None) -> InterfaceBuilder:
        if interfaces is None:
            return self
        if self.entity.extends is None:
            self.entity.extends = []
        self.entity.extends.extend(self.ctx.resolve_many(as_list(interfaces)))
        return self
