"""Directed graphs kept as ordered adjacency lists, with source and drain search."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable, Mapping
from typing import Optional, Union

Adjacency = Union[Mapping[int, Iterable[int]], Iterable[Iterable[int]]]


class Graph:
    """Directed graph whose vertices are numbered integers kept in insertion order."""

    def __init__(self, adjacency: Optional[Adjacency] = None) -> None:
        if adjacency is None:
            items: Iterable[tuple[int, Iterable[int]]] = ()
        elif isinstance(adjacency, Mapping):
            items = adjacency.items()
        else:
            items = enumerate(adjacency)
        self._adjacency: dict[int, list[int]] = {
            int(vertex): [int(n) for n in neighbours] for vertex, neighbours in items
        }
        for vertex, neighbours in self._adjacency.items():
            unknown = [n for n in neighbours if n not in self._adjacency]
            if unknown:
                raise ValueError(f"vertex {vertex} points to unknown vertices {unknown}")
        self._next_id = max(self._adjacency, default=-1) + 1

    @classmethod
    def random(cls, count: int, rng: Optional[_random.Random] = None) -> Graph:
        """Build ``count`` vertices, each pointing to one or two random other vertices.

        Every vertex gets a first neighbour different from itself; a second one is
        drawn the same way and kept only when it differs from the first and is not
        vertex 0. A single vertex gets no neighbours.
        """
        rng = rng if rng is not None else _random.Random()
        adjacency: dict[int, list[int]] = {}
        for vertex in range(max(count, 0)):
            neighbours: list[int] = []
            if count > 1:
                neighbours.append(cls._draw(rng, count, vertex))
                second = cls._draw(rng, count, vertex)
                if second != 0 and second not in neighbours:
                    neighbours.append(second)
            adjacency[vertex] = neighbours
        return cls(adjacency)

    @staticmethod
    def _draw(rng: _random.Random, count: int, exclude: int) -> int:
        while True:
            choice = rng.randrange(count)
            if choice != exclude:
                return choice

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._adjacency!r})"

    def vertices(self) -> tuple[int, ...]:
        """Vertex numbers in order."""
        return tuple(self._adjacency)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Vertices that ``vertex`` points to, in list order."""
        try:
            return tuple(self._adjacency[vertex])
        except KeyError:
            raise KeyError(f"no vertex {vertex}") from None

    def add_vertex(self, neighbours: Iterable[int] = (), incoming: Iterable[int] = ()) -> int:
        """Add a vertex numbered one past the largest number ever used; returns its number.

        ``neighbours`` are the vertices it points to; at most as many as there are
        vertices are considered, and repeats or the vertex itself are skipped.
        Each vertex in ``incoming`` gets the new vertex put at the front of its
        list; unknown vertices there are ignored.
        """
        new = self._next_id
        limit = len(self._adjacency) + 1
        outgoing: list[int] = []
        for n in list(neighbours)[:limit]:
            if n == new or n in outgoing:
                continue
            if n not in self._adjacency:
                raise ValueError(f"no vertex {n}")
            outgoing.append(n)

        self._adjacency[new] = outgoing
        self._next_id += 1

        for source in incoming:
            if source == new or source not in self._adjacency:
                continue
            targets = self._adjacency[source]
            if not targets or targets[0] != new:
                targets.insert(0, new)
        return new

    def delete_vertex(self, vertex: int) -> None:
        """Remove ``vertex`` and every edge pointing to it."""
        if vertex not in self._adjacency:
            raise KeyError(f"no vertex {vertex}")
        del self._adjacency[vertex]
        for targets in self._adjacency.values():
            targets[:] = [n for n in targets if n != vertex]

    def reachable(self, vertex: int) -> tuple[int, ...]:
        """Vertices reachable from ``vertex``, itself first, in depth-first preorder."""
        if vertex not in self._adjacency:
            raise KeyError(f"no vertex {vertex}")
        seen = [vertex]
        visited = {vertex}
        stack = [iter(self._adjacency[vertex])]
        while stack:
            for n in stack[-1]:
                if n not in visited:
                    visited.add(n)
                    seen.append(n)
                    stack.append(iter(self._adjacency[n]))
                    break
            else:
                stack.pop()
        return tuple(seen)

    def sources(self) -> tuple[int, ...]:
        """Vertices with outgoing edges from which every vertex can be reached."""
        total = len(self._adjacency)
        return tuple(
            v
            for v, targets in self._adjacency.items()
            if targets and len(self.reachable(v)) == total
        )

    def drains(self) -> tuple[int, ...]:
        """Vertices reachable from every vertex."""
        if not self._adjacency:
            return ()
        common = set(self._adjacency)
        for v in self._adjacency:
            common.intersection_update(self.reachable(v))
        return tuple(v for v in self._adjacency if v in common)

    def format(self) -> str:
        """Render each vertex followed by its neighbours, one vertex per line."""
        lines = [
            f"{v:>3}{'':>3}" + "".join(f"{n:>4}" for n in targets) + "\n"
            for v, targets in self._adjacency.items()
        ]
        return "\nYour Graph:\n" + "".join(lines)