"""
bpm_reducer.core.reachability

Breadth-first traversal primitives over a `GraphIndex`.

Responsibilities:
- Point-to-point reachability (`reachable`).
- Kept-node frontier used to build every reduced edge (`kept_frontier`).
"""

from __future__ import annotations

from collections import deque

from bpm_reducer.core.index import GraphIndex


class ReachabilityEngine:
    """
    Stateless over the index: every visited set and queue is local to one call, so a
    single engine can answer any number of queries, cyclic graphs included.
    """

    def __init__(self, index: GraphIndex) -> None:
        self._index = index

    def reachable(self, from_id: str, to_id: str) -> bool:
        visited: set[str] = {from_id}
        queue: deque[str] = deque([from_id])

        while queue:
            current = queue.popleft()
            if current == to_id:
                return True
            for nxt in self._index.successors(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return False

    def kept_frontier(self, from_id: str) -> tuple[str, ...]:
        """
        Kept nodes reachable from `from_id` through pass-through steps only.

        The search starts at the direct successors of `from_id`. A kept node ends its
        branch: it is recorded (first-discovery order) but not expanded. Pass-through
        nodes are expanded at most once, which bounds the walk on cycles.
        """

        index = self._index
        frontier: dict[str, None] = {}
        visited: set[str] = set()
        queue: deque[str] = deque(index.successors(from_id))

        while queue:
            current = queue.popleft()
            if index.is_kept(current):
                frontier.setdefault(current, None)
                continue
            if current in visited:
                continue
            visited.add(current)
            queue.extend(index.successors(current))

        return tuple(frontier)


# --- Module Notes -----------------------------------------------------------
# A kept node may appear in its own frontier (self-loop, or a pass-through cycle back
# to it); the reducer drops that entry when building edges.
