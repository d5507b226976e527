"""
Builders for functions, methods, constructors and their parameters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..context import BuilderContext
from ..ir_nodes import Constructor, Function, Method, Parameter, TypeReference
from .base import Builder, FieldMixin, MemberMixin, NamedMixin, TypeParametersMixin

if TYPE_CHECKING:
    from .prototypes import ClassBuilder, PropertyBuilder


class ParameterBuilder(FieldMixin, Builder):
    entity: Parameter

    def set_rest(self, flag: bool | None = None) -> ParameterBuilder:
        if flag is not None:
            self.entity.is_rest = flag
        return self

    def set_optional(self, flag: bool | None = None) -> ParameterBuilder:
        if flag is not None:
            self.entity.is_optional = flag
        return self


class ParametersMixin:
    """Index-addressed parameters shared by callables and constructors."""

    entity: Function | Method | Constructor
    ctx: BuilderContext

    def add_parameter(self, index: int) -> ParameterBuilder:
        """
        Get a builder for the parameter at ``index``.

        The parameter is created on first use. Later calls with the same
        index return a builder over the same Parameter record.
        """
        param = self.entity.parameters.get(index)
        if param is None:
            param = Parameter(index=index)
            self.entity.parameters[index] = param
            self._adopt(param)
        return ParameterBuilder(param, self.ctx)


class CallableBuilder(ParametersMixin, TypeParametersMixin, NamedMixin, Builder):
    """Shared behaviour of function and method builders."""

    entity: Function | Method

    def __init__(self, callable_: Function | Method, ctx: BuilderContext):
        # A callable's type parameters are private to it
        super().__init__(callable_, ctx.fork())

    def set_return_type(self, type_ref: TypeReference | None = None) -> CallableBuilder:
        if type_ref is not None:
            self.entity.return_type = self.ctx.resolve_one(type_ref)
        return self

    def set_async(self, flag: bool | None = None) -> CallableBuilder:
        if flag is not None:
            self.entity.is_async = flag
        return self

    def set_generator(self, flag: bool | None = None) -> CallableBuilder:
        if flag is not None:
            self.entity.is_generator = flag
        return self


class FunctionBuilder(CallableBuilder):
    entity: Function


class MethodBuilder(MemberMixin, CallableBuilder):
    entity: Method

    def set_abstract(self, flag: bool | None = None) -> MethodBuilder:
        if flag is not None:
            self.entity.is_abstract = flag
        return self


class ConstructorBuilder(ParametersMixin, Builder):
    """
    Builder for a class constructor.

    Constructor parameters resolve in the class scope. Properties declared
    from the constructor (parameter properties) belong to the class.
    """

    entity: Constructor

    def __init__(self, class_builder: ClassBuilder, ctor: Constructor, ctx: BuilderContext):
        super().__init__(ctor, ctx)
        self.class_builder = class_builder

    def add_property(self, name: str | None = None) -> PropertyBuilder:
        return self.class_builder.add_property(name)
