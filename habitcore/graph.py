"""Habit dependency graph and cycle detection.

Edges point from a habit to each of its prerequisites. The graph must stay
acyclic: a proposed prerequisite edit is checked against the graph as it
would look after the edit, before anything is stored.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from habitcore.models import Habit

logger = logging.getLogger(__name__)


def _id_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(v) for v in value]
    return []


def build_dependency_graph(
    habits: Iterable[Habit] | None,
    overrides: dict[Any, Any] | None = None,
) -> dict[str, list[str]]:
    """Adjacency view: habit id -> prerequisite ids.

    *overrides* replace (or add) the edge list of the given ids without
    touching the habits themselves. Ids that name no habit are not keys;
    they behave as leaves.
    """
    graph: dict[str, list[str]] = {}
    for h in habits or []:
        graph[h.id] = list(h.prerequisites)
    for node, prereqs in (overrides or {}).items():
        graph[str(node)] = _id_list(prereqs)
    return graph


def _walk(
    graph: dict[str, list[str]],
    root: str,
    on_path: set[str],
    done: set[str],
    through: str | None,
) -> list[str] | None:
    # Iterative DFS: each frame holds a node and the rest of its edges.
    path = [root]
    on_path.add(root)
    stack = [(root, iter(graph.get(root, ())))]
    while stack:
        node, edges = stack[-1]
        descended = False
        for nxt in edges:
            if nxt in on_path:
                cycle = path[path.index(nxt):] + [nxt]
                if through is None or through in cycle:
                    return cycle
                continue
            if nxt in done:
                continue
            on_path.add(nxt)
            path.append(nxt)
            stack.append((nxt, iter(graph.get(nxt, ()))))
            descended = True
            break
        if not descended:
            stack.pop()
            path.pop()
            on_path.discard(node)
            done.add(node)
    return None


def find_cycle(graph: dict[str, list[str]], through: str | None = None) -> list[str] | None:
    """Find a cycle and return its path, first node repeated at the end.

    With *through* set, only a cycle passing through that node counts and
    the search is rooted there. Otherwise every node is a root.
    """
    on_path: set[str] = set()
    done: set[str] = set()
    roots = [through] if through is not None else list(graph)
    for root in roots:
        if root in done:
            continue
        cycle = _walk(graph, root, on_path, done, through)
        if cycle is not None:
            return cycle
    return None


def would_create_cycle(candidate_id: Any, candidate_prereqs: Any, habits: list[Habit] | None) -> bool:
    """True if giving *candidate_id* these prerequisites puts it on a cycle.

    Self-references count. Prerequisite ids that name no habit are leaves.
    Nothing is mutated; rejecting the edit is up to the caller.
    """
    node = str(candidate_id)
    graph = build_dependency_graph(habits, {node: candidate_prereqs})
    cycle = find_cycle(graph, through=node)
    if cycle is not None:
        logger.debug("Prerequisites for %s would close cycle %s", node, " -> ".join(cycle))
        return True
    return False
