"""
Exceptions raised by the metadata builders.

The builders are non-validating: duplicate names, parameter gaps and
repeated extends declarations are accepted silently. Only structural
corruption of the metadata tree is reported.
"""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for all metadata errors."""

    pass


class CyclicAncestryError(MetadataError):
    """Raised when a parent link would make an entity its own ancestor."""

    pass


class DeclarationError(MetadataError):
    """Raised when a type handle is declared for two different entities."""

    pass
