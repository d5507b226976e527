"""
Shared builder behaviour.

Every builder wraps one IR record and the scope context its type
references are resolved in. The mixins below carry the capabilities
that unrelated builders have in common (a name, a resolved type, member
modifiers, type parameters) so each concrete builder lists exactly the
ones it supports.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..ancestry import set_parent
from ..context import BuilderContext
from ..ir_nodes import Access, TypeIdentifier, TypeReference

T = TypeVar("T")


def as_list(value: T | list[T]) -> list[T]:
    return value if isinstance(value, list) else [value]


class Builder:
    """Base class for all builders."""

    def __init__(self, entity: Any, ctx: BuilderContext):
        self.entity = entity
        self.ctx = ctx

    def _adopt(self, child: Any) -> None:
        """Record this builder's record as the owner of ``child``."""
        if self.ctx.config.track_parents:
            set_parent(child, self.entity)


class NamedMixin:
    """Builders whose record has a name."""

    entity: Any

    def set_name(self, name: str | None = None):
        if name is not None:
            self.entity.name = name
        return self


class FieldMixin(NamedMixin):
    """Variables, properties and parameters: a name and a type."""

    ctx: BuilderContext

    def set_type(self, type_ref: TypeReference | None = None):
        if type_ref is not None:
            self.entity.type_ref = self.ctx.resolve_one(type_ref)
        return self


class MemberMixin(NamedMixin):
    """Methods and properties: static flag and access level."""

    def set_static(self, flag: bool | None = None):
        if flag is not None:
            self.entity.is_static = flag
        return self

    def set_access(self, access: Access | str | None = None):
        if access is not None:
            self.entity.access = Access(access)
        return self


class TypeParametersMixin:
    """Classes, interfaces, functions and methods declare type parameters."""

    entity: Any
    ctx: BuilderContext

    def add_type_params(self, params: TypeIdentifier | list[TypeIdentifier] | None = None):
        """
        Declare type parameters in this builder's scope.

        Bare names are bound to fresh handles; the handles are appended to
        the record's type parameter list in declaration order.
        """
        if params is None:
            return self
        handles = self.ctx.declare_type_params(as_list(params))
        if self.entity.type_parameters is None:
            self.entity.type_parameters = []
        self.entity.type_parameters.extend(handles)
        return self
