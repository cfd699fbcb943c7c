"""An adjacency-list graph over hashable vertices."""

from __future__ import annotations

from collections.abc import Hashable


class Graph:
    """A graph stored as a list of neighbours per vertex, in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, directed: bool) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, u: Hashable) -> list[Hashable]:
        """Return the vertices ``u`` has edges to; empty for an unknown vertex."""
        return list(self._adjacency.get(u, ()))

    def format(self) -> str:
        """Return one line per vertex: ``u -> a, b``."""
        return "\n".join(
            f"{u} -> {', '.join(str(v) for v in targets)}"
            for u, targets in self._adjacency.items()
        )

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, u: object) -> bool:
        return u in self._adjacency