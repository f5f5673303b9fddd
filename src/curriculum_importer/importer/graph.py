"""
Module: importer.graph

Purpose:
    Directed acyclic graph of mission prerequisites for one track. An edge
    ``before -> after`` means "before must be completed before after".

    Every insertion is checked against the existing edges: ``before ->
    after`` is refused when ``after`` already reaches ``before``, so the
    relation stays a strict partial order at all times.

Key Classes:
    - DependencyGraph: Nodes, edges, reachability and topological order
    - CycleError: Raised when an edge would close a cycle
    - UnknownNodeError: Raised for edges touching unknown nodes

Used By:
    - importer.missions: Requirement resolution
"""

from __future__ import annotations

import graphlib
import logging
from typing import Dict, Iterable, Iterator, List, Set, Tuple

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised when adding an edge would create a cycle."""

    def __init__(self, before: str, after: str):
        super().__init__(f"Edge {before!r} -> {after!r} would create a cycle")
        self.before = before
        self.after = after


class UnknownNodeError(KeyError):
    """Raised when an edge refers to a node not in the graph."""


class DependencyGraph:
    """
    Insertion-ordered DAG with a reachability check per edge.

    Reachability is answered by an iterative depth-first search over
    successor sets.

    Example:
        >>> g = DependencyGraph(["a", "b", "c"])
        >>> g.add_edge("a", "b")
        >>> g.add_edge("b", "c")
        >>> g.would_create_cycle("c", "a")
        True
        >>> g.topological_order()
        ['a', 'b', 'c']
    """

    def __init__(self, nodes: Iterable[str] = ()):
        # dict preserves insertion order, used to order ready batches
        self._successors: Dict[str, Set[str]] = {}
        self._predecessors: Dict[str, Set[str]] = {}
        for node in nodes:
            self.add_node(node)

    def add_node(self, node: str) -> None:
        if node not in self._successors:
            self._successors[node] = set()
            self._predecessors[node] = set()

    def __contains__(self, node: object) -> bool:
        return node in self._successors

    def __len__(self) -> int:
        return len(self._successors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._successors)

    @property
    def nodes(self) -> List[str]:
        return list(self._successors)

    @property
    def edges(self) -> List[Tuple[str, str]]:
        return [
            (before, after)
            for before in self._successors
            for after in sorted(self._successors[before])
        ]

    def successors(self, node: str) -> Set[str]:
        self._require(node)
        return set(self._successors[node])

    def predecessors(self, node: str) -> Set[str]:
        self._require(node)
        return set(self._predecessors[node])

    def has_path(self, src: str, dst: str) -> bool:
        """
        True if ``dst`` is reachable from ``src`` (reflexive).

        Raises:
            UnknownNodeError: If either node is missing.
        """
        self._require(src)
        self._require(dst)
        if src == dst:
            return True

        seen = {src}
        stack = [src]
        while stack:
            node = stack.pop()
            for nxt in self._successors[node]:
                if nxt == dst:
                    return True
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        return False

    def would_create_cycle(self, before: str, after: str) -> bool:
        """True if adding ``before -> after`` would close a cycle."""
        return self.has_path(after, before)

    def add_edge(self, before: str, after: str) -> None:
        """
        Add ``before -> after``.

        Raises:
            UnknownNodeError: If either node is missing.
            CycleError: If ``after`` already reaches ``before``; the graph
                is left unchanged.
        """
        if self.would_create_cycle(before, after):
            raise CycleError(before, after)
        self._successors[before].add(after)
        self._predecessors[after].add(before)
        logger.debug(f"Edge added: {before} -> {after}")

    def topological_order(self) -> List[str]:
        """Nodes batch by batch; each ready batch in node insertion order."""
        position = {node: i for i, node in enumerate(self._successors)}
        sorter = graphlib.TopologicalSorter(self._predecessors)
        sorter.prepare()
        order: List[str] = []
        while sorter.is_active():
            ready = sorted(sorter.get_ready(), key=position.__getitem__)
            order.extend(ready)
            sorter.done(*ready)
        return order

    def _require(self, node: str) -> None:
        if node not in self._successors:
            raise UnknownNodeError(node)
