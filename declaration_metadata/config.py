"""
Configuration for the metadata builders.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BuilderConfig:
    """Configuration options for metadata construction."""

    # Separator between the module path and the declared name of a nominal type
    scope_separator: str = "::"

    # Maintain parent links from every created entity to its owner
    track_parents: bool = True

    # Attach declared classes and interfaces to their minted type handles
    register_declarations: bool = True

    @staticmethod
    def from_dict(d: dict) -> BuilderConfig:
        """Create a config from a dictionary."""
        config = BuilderConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "scope_separator": self.scope_separator,
            "track_parents": self.track_parents,
            "register_declarations": self.register_declarations,
        }
