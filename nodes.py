"""
Vertex identity for the shortest-path engine.

Vertices are plain named keys; every map in the engine is keyed by the name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vertex:
    """Named vertex. Equality and hashing are by name."""

    name: str

    def __str__(self) -> str:
        return f"Vertex({self.name})"
