"""Undirected similarity graph keyed by document id."""

from collections import deque


class SimilarityGraph:
    """Adjacency map from document id to the ids it is linked to."""

    def __init__(self):
        self._adj: dict[str, set[str]] = {}

    def add_vertex(self, vertex: str) -> None:
        self._adj.setdefault(vertex, set())

    def add_edge(self, a: str, b: str) -> None:
        self.add_vertex(a)
        self.add_vertex(b)
        self._adj[a].add(b)
        self._adj[b].add(a)

    def neighbors(self, vertex: str) -> set[str]:
        return self._adj.get(vertex, set())

    @property
    def vertices(self) -> list[str]:
        return list(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: str) -> bool:
        return vertex in self._adj

    def connected_components(self) -> list[list[str]]:
        """Components via depth-first traversal with an explicit stack.

        Components come out in vertex insertion order of their first
        member; order inside a component is unspecified.
        """
        visited: set[str] = set()
        components = []

        for start in self._adj:
            if start in visited:
                continue
            component = []
            stack = [start]
            visited.add(start)
            while stack:
                vertex = stack.pop()
                component.append(vertex)
                for neighbor in self._adj[vertex]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)
            components.append(component)

        return components

    def connected_components_bfs(self) -> list[list[str]]:
        """Same partition as `connected_components`, via breadth-first search."""
        visited: set[str] = set()
        components = []

        for start in self._adj:
            if start in visited:
                continue
            component = []
            queue = deque([start])
            visited.add(start)
            while queue:
                vertex = queue.popleft()
                component.append(vertex)
                for neighbor in self._adj[vertex]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        queue.append(neighbor)
            components.append(component)

        return components
