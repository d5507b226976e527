"""
Canonical type handles.

A handle is an opaque identity token for one declared type. Two handles
are equal only when they are the same handle; the display name is
metadata for diagnostics and never takes part in comparison.
"""

from __future__ import annotations

import itertools
from typing import Any

from .errors import DeclarationError

_handle_ids = itertools.count(1)


class TypeHandle:
    """A unique, identity-comparable token with a display name."""

    __slots__ = ("_id", "_name", "_scope", "_separator", "_declaration")

    def __init__(self, name: str, scope: str | None = None, separator: str = "::"):
        self._id = next(_handle_ids)
        self._name = name
        self._scope = scope
        self._separator = separator
        self._declaration: Any = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        """Display name, e.g. ``User`` or ``T``."""
        return self._name

    @property
    def scope(self) -> str | None:
        """Module path the handle was minted under, if any."""
        return self._scope

    @property
    def qualified_name(self) -> str:
        if self._scope is None:
            return self._name
        return f"{self._scope}{self._separator}{self._name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeHandle):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"TypeHandle({self.qualified_name!r}, id={self._id})"

    def __str__(self) -> str:
        return self.qualified_name


def mint_type(scope: str, name: str, separator: str = "::") -> TypeHandle:
    """Mint a nominal handle for ``name`` declared in module ``scope``."""
    return TypeHandle(name, scope, separator)


def mint_anonymous(name: str) -> TypeHandle:
    """Mint a handle that carries ``name`` only as display metadata."""
    return TypeHandle(name)


def name_of(handle: TypeHandle) -> str:
    return handle.name


def declare(handle: TypeHandle, entity: Any) -> None:
    """
    Attach the declaring entity to a handle.

    A handle is declared at most once. Declaring the same entity again is
    accepted; declaring a different one raises DeclarationError.

    Args:
        handle: The handle minted for the declaration
        entity: The metadata record (class, interface, ...) it denotes
    """
    if handle._declaration is not None and handle._declaration is not entity:
        raise DeclarationError(f"Type {handle.qualified_name} is already declared")
    handle._declaration = entity


def resolve(handle: TypeHandle) -> Any:
    """Return the entity declared for ``handle``, or None."""
    return handle._declaration
