"""
Parent links between IR records.

Builders record the owner of each record they create so that consumers
can walk from a method up to its class, module and program.
"""

from __future__ import annotations

from collections.abc import Iterator

from .errors import CyclicAncestryError
from .ir_nodes import Kind, Module, Program


def get_parent(entity):
    return getattr(entity, "parent", None)


def iter_parents(entity) -> Iterator:
    """Yield the ancestors of ``entity``, nearest first."""
    cursor = get_parent(entity)
    while cursor is not None:
        yield cursor
        cursor = get_parent(cursor)


def get_parents(entity) -> list:
    return list(iter_parents(entity))


def set_parent(entity, parent) -> None:
    """
    Link ``entity`` to its owner.

    Raises:
        CyclicAncestryError: if ``entity`` is ``parent`` or one of its ancestors
    """
    if entity is parent or any(ancestor is entity for ancestor in iter_parents(parent)):
        raise CyclicAncestryError(f"{entity.kind.value} cannot be an ancestor of itself")
    entity.parent = parent


def _nearest(entity, kind: Kind):
    if entity.kind is kind:
        return entity
    for ancestor in iter_parents(entity):
        if ancestor.kind is kind:
            return ancestor
    return None


def get_module(entity) -> Module | None:
    """Return the module containing ``entity`` (or ``entity`` itself)."""
    return _nearest(entity, Kind.MODULE)


def get_program(entity) -> Program | None:
    return _nearest(entity, Kind.PROGRAM)
