"""
Scope contexts for type name resolution.

A BuilderContext maps type names to handles. Forking a context creates a
child that looks names up locally first and then asks its parent, so a
class's type parameters are visible in its methods while a method's own
type parameters stay private to that method.
"""

from __future__ import annotations

import logging

from .config import BuilderConfig
from .ir_nodes import TypeIdentifier, TypeReference
from .type_handles import TypeHandle, mint_anonymous, mint_type

logger = logging.getLogger(__name__)


class BuilderContext:
    """A name -> type handle table linked to its enclosing scope."""

    def __init__(
        self,
        module_path: str,
        parent: BuilderContext | None = None,
        config: BuilderConfig | None = None,
    ):
        """
        Initialize the context.

        Args:
            module_path: Path of the module being built, used to scope minted handles
            parent: Enclosing context consulted for names not bound here
            config: Builder configuration (inherited from the parent when omitted)
        """
        self.module_path = module_path
        self.parent = parent
        if config is None:
            config = parent.config if parent is not None else BuilderConfig()
        self.config = config
        self._types: dict[str, TypeHandle] = {}

    @property
    def depth(self) -> int:
        depth = 0
        cursor = self.parent
        while cursor is not None:
            depth += 1
            cursor = cursor.parent
        return depth

    def fork(self) -> BuilderContext:
        """
        Create a child scope.

        The child keeps a live link to this context: bindings added here
        after the fork are still visible through the child.
        """
        child = BuilderContext(self.module_path, parent=self, config=self.config)
        logger.debug("Forked scope in %s at depth %d", self.module_path, child.depth)
        return child

    def is_bound_locally(self, name: str) -> bool:
        return name in self._types

    def lookup(self, name: str) -> TypeHandle | None:
        """Find the nearest binding for ``name``, or None."""
        context: BuilderContext | None = self
        while context is not None:
            handle = context._types.get(name)
            if handle is not None:
                return handle
            context = context.parent
        return None

    def resolve_one(self, ref: TypeReference) -> TypeReference:
        """
        Resolve a type reference against this scope chain.

        Args:
            ref: Reference whose identifier may be a bare name

        Returns:
            A new reference carrying the bound handle (type parameters
            resolved the same way), or ``ref`` itself when the identifier
            is already a handle or the name is not bound.
        """
        if isinstance(ref.identifier, str):
            handle = self.lookup(ref.identifier)
            if handle is not None:
                return TypeReference(handle, self.resolve_many(ref.type_parameters))
            logger.debug("Type %r is not declared in %s", ref.identifier, self.module_path)
        return ref

    def resolve_many(self, refs: list[TypeReference] | None) -> list[TypeReference] | None:
        if refs is None:
            return None
        return [self.resolve_one(ref) for ref in refs]

    def declare_nominal(self, name: str) -> TypeHandle:
        """Mint a handle for a class or interface and bind it here."""
        handle = mint_type(self.module_path, name, self.config.scope_separator)
        self._types[name] = handle
        logger.debug("Declared %s", handle.qualified_name)
        return handle

    def declare_type_param(self, identifier: TypeIdentifier) -> TypeHandle:
        """
        Bind a type parameter in this scope.

        A bare name gets a fresh anonymous handle; an existing handle is
        bound under its display name.
        """
        if isinstance(identifier, TypeHandle):
            handle = identifier
        else:
            handle = mint_anonymous(identifier)
        self._types[handle.name] = handle
        logger.debug("Bound type parameter %s at depth %d", handle.name, self.depth)
        return handle

    def declare_type_params(self, identifiers: list[TypeIdentifier] | None) -> list[TypeHandle]:
        if not identifiers:
            return []
        return [self.declare_type_param(identifier) for identifier in identifiers]
