"""
Module builder, the entry point for constructing metadata.

A front end creates one ModuleBuilder per source module and drives it
while walking the declarations; every nested builder is reached through
the builder of its owner.
"""

from __future__ import annotations

from ..ancestry import set_parent
from ..config import BuilderConfig
from ..context import BuilderContext
from ..ir_nodes import Class, Function, Interface, Module, Program, Variable
from ..type_handles import TypeHandle, declare
from .base import Builder, FieldMixin
from .callables import FunctionBuilder
from .prototypes import ClassBuilder, InterfaceBuilder


def create_module(path: str, program: Program | None = None) -> Module:
    """
    Create an empty module, optionally registered in a program.

    Args:
        path: Module path, e.g. "app/user"
        program: Program to add the module to

    Returns:
        The new Module record
    """
    module = Module(path=path)
    if program is not None:
        program.modules[path] = module
        set_parent(module, program)
    return module


class VariableBuilder(FieldMixin, Builder):
    entity: Variable

    def set_constant(self, flag: bool | None = None) -> VariableBuilder:
        if flag is not None:
            self.entity.is_constant = flag
        return self


class ModuleBuilder(Builder):
    """Creates the top-level declarations of a module."""

    entity: Module

    def __init__(self, module: Module, config: BuilderConfig | None = None):
        """
        Initialize the builder.

        Args:
            module: The module record to populate
            config: Builder configuration
        """
        super().__init__(module, BuilderContext(module.path, config=config))

    @property
    def module(self) -> Module:
        return self.entity

    @property
    def context(self) -> BuilderContext:
        return self.ctx

    def _declare(self, name: str | None, entity: Class | Interface) -> TypeHandle | None:
        if not name:
            return None
        handle = self.ctx.declare_nominal(name)
        if self.ctx.config.register_declarations:
            declare(handle, entity)
        return handle

    def _append(self, entity: Class | Interface | Variable | Function) -> None:
        self.entity.children.append(entity)
        self._adopt(entity)

    def add_class(self, name: str | None = None) -> ClassBuilder:
        cls = Class(name=name)
        # Bound before the class scope forks so the class can refer to itself
        handle = self._declare(name, cls)
        self._append(cls)
        return ClassBuilder(cls, self.ctx, handle)

    def add_interface(self, name: str | None = None) -> InterfaceBuilder:
        ifce = Interface(name=name)
        handle = self._declare(name, ifce)
        self._append(ifce)
        return InterfaceBuilder(ifce, self.ctx, handle)

    def add_variable(self, name: str | None = None) -> VariableBuilder:
        var = Variable(name=name)
        self._append(var)
        return VariableBuilder(var, self.ctx)

    def add_function(self, name: str | None = None) -> FunctionBuilder:
        fn = Function(name=name)
        self._append(fn)
        return FunctionBuilder(fn, self.ctx)

    def add_import(self, path: str, alias: str, name: str | None = None) -> ModuleBuilder:
        """Record ``name`` from module ``path`` imported as ``alias``."""
        self.entity.imports.setdefault(path, {})[alias] = name if name is not None else alias
        return self

    def add_export(self, alias: str, name: str | None = None) -> ModuleBuilder:
        """Record local ``name`` exported as ``alias``."""
        self.entity.exports[alias] = name if name is not None else alias
        return self
