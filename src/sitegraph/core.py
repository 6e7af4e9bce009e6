"""
Core graph model, BFS frontier queue and traversal logic.
"""
from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Optional, TextIO

MAX_PAGES = 15
MAX_URL_LEN = 100

# Returned by PageQueue.dequeue() when nothing is left; page indices are never negative
EMPTY_QUEUE = -1


class SiteGraphError(Exception):
    """Base class for all site graph errors."""


class CapacityError(SiteGraphError, ValueError):
    """Requested page count does not fit the graph capacity."""


class InvalidIndexError(SiteGraphError, IndexError):
    """A page index outside [0, page_count)."""


class InvalidChoiceError(SiteGraphError, ValueError):
    """Traversal selector other than 1 (BFS) or 2 (DFS)."""


class GraphClosedError(SiteGraphError, RuntimeError):
    """Graph used after close()."""


class PageQueue:
    """FIFO of page indices used as the BFS frontier."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: Deque[int] = deque()

    def enqueue(self, page_index: int) -> None:
        self._items.append(page_index)

    def dequeue(self) -> int:
        """Remove and return the head index, or EMPTY_QUEUE when empty."""
        if not self._items:
            return EMPTY_QUEUE
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def close(self) -> None:
        """Drop any entries still queued."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class SiteGraph:
    """
    Bounded directed graph of pages and the links between them.

    Each page has a URL label and an adjacency list of outbound links.
    add_edge() prepends, so the most recently added link comes first and
    traversals follow that order.
    """

    def __init__(self, page_count: int, capacity: int = MAX_PAGES) -> None:
        if capacity < 0:
            raise CapacityError(f"Capacity must be non-negative, got {capacity}")
        if not 0 <= page_count <= capacity:
            raise CapacityError(
                f"Page count {page_count} outside allowed range 0..{capacity}"
            )

        self.capacity = capacity
        self.page_count = page_count
        self._urls: List[str] = [f"Page_{i}" for i in range(page_count)]
        self._adjacency: List[List[int]] = [[] for _ in range(page_count)]
        self._closed = False

    def __enter__(self) -> SiteGraph:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise GraphClosedError("Graph has been closed")

    def _check_index(self, index: int, role: str = "page") -> None:
        if not 0 <= index < self.page_count:
            raise InvalidIndexError(
                f"{role.capitalize()} index {index} out of range 0..{self.page_count - 1}"
            )

    def set_url(self, index: int, url: str) -> None:
        """Set the URL label of a page, truncated to MAX_URL_LEN - 1 characters."""
        self._check_open()
        self._check_index(index)
        self._urls[index] = url[:MAX_URL_LEN - 1]

    def url(self, index: int) -> str:
        self._check_open()
        self._check_index(index)
        return self._urls[index]

    def add_edge(self, src: int, dest: int) -> None:
        """Add a link src -> dest. Duplicates and self-loops are kept."""
        self._check_open()
        self._check_index(src, "source")
        self._check_index(dest, "destination")
        self._adjacency[src].insert(0, dest)

    def neighbors(self, index: int) -> List[int]:
        """Return a copy of the page's adjacency list in stored order."""
        self._check_open()
        self._check_index(index)
        return list(self._adjacency[index])

    def format_lines(self) -> Iterator[str]:
        """Yield one dump line per page, in index order."""
        self._check_open()
        for i in range(self.page_count):
            links = "".join(
                f" -> Page {j} ({self._urls[j]})" for j in self._adjacency[i]
            )
            yield f"Page {i} ({self._urls[i]}):{links}"

    def print_graph(self, out: Optional[TextIO] = None) -> None:
        if out is None:
            out = sys.stdout
        for line in self.format_lines():
            out.write(line + "\n")

    def close(self) -> None:
        """Release adjacency storage. Later calls are no-ops."""
        if self._closed:
            return
        for links in self._adjacency:
            links.clear()
        self._adjacency = []
        self._closed = True


@dataclass(slots=True)
class TraversalResult:
    """Pages visited by a single traversal, in visit order."""
    method: str
    start: int
    page_count: int
    order: List[int] = field(default_factory=list)
    excluded: List[int] = field(default_factory=list)

    @property
    def pages_visited(self) -> int:
        return len(self.order)

    @property
    def unreached(self) -> List[int]:
        """Pages never visited, in index order, leaving out pages in excluded."""
        seen = set(self.order)
        seen.update(self.excluded)
        return [i for i in range(self.page_count) if i not in seen]


def print_visit(graph: SiteGraph, page_index: int, out: TextIO) -> None:
    """Print single visit line."""
    out.write(f"Visited: Page {page_index} ({graph.url(page_index)})\n")


def bfs_traversal(
    graph: SiteGraph,
    start: int,
    out: Optional[TextIO] = None,
) -> TraversalResult:
    """
    Visit every page reachable from start in breadth-first order.

    Pages are marked visited when enqueued, so each one enters the frontier
    at most once. Unreachable pages are never printed.

    Args:
        graph: The graph to walk.
        start: Index of the first page.
        out: Stream the banner and visit lines are written to.

    Returns:
        TraversalResult with the visit order.
    """
    if out is None:
        out = sys.stdout
    start_url = graph.url(start)
    result = TraversalResult(method="bfs", start=start, page_count=graph.page_count)
    visited = [False] * graph.page_count
    queue = PageQueue()

    out.write(f"BFS Traversal starting from page {start} ({start_url}):\n")
    queue.enqueue(start)
    visited[start] = True

    try:
        while not queue.is_empty():
            page_index = queue.dequeue()
            print_visit(graph, page_index, out)
            result.order.append(page_index)

            for adj_index in graph.neighbors(page_index):
                if not visited[adj_index]:
                    visited[adj_index] = True
                    queue.enqueue(adj_index)
    finally:
        queue.close()

    return result


def dfs_traversal(
    graph: SiteGraph,
    start: int,
    visited: Optional[List[bool]] = None,
    out: Optional[TextIO] = None,
) -> TraversalResult:
    """
    Visit every page reachable from start depth-first, in pre-order.

    A page is printed before any of its descendants, and the subtree of one
    neighbor is exhausted before the next neighbor is tried. An explicit
    stack is used, so depth is not limited by the interpreter's recursion
    limit. The start page is always visited.

    A caller-supplied visited list is shared with the caller and updated in
    place; pages already marked in it (other than start) are recorded in
    TraversalResult.excluded and not reported as unreached. No banner is
    printed here, see traverse().
    """
    if out is None:
        out = sys.stdout
    graph.url(start)
    if visited is None:
        visited = [False] * graph.page_count

    result = TraversalResult(
        method="dfs",
        start=start,
        page_count=graph.page_count,
        excluded=[i for i, seen in enumerate(visited) if seen and i != start],
    )

    stack: List[int] = []
    page_index = start
    while True:
        visited[page_index] = True
        print_visit(graph, page_index, out)
        result.order.append(page_index)

        # Reversed so the first stored neighbor is popped first
        stack.extend(reversed(graph.neighbors(page_index)))

        while stack and visited[stack[-1]]:
            stack.pop()
        if not stack:
            break
        page_index = stack.pop()

    return result


def traverse(
    graph: SiteGraph,
    choice: int,
    start: int = 0,
    out: Optional[TextIO] = None,
) -> TraversalResult:
    """Run BFS for choice 1 or DFS for choice 2."""
    if out is None:
        out = sys.stdout
    if choice == 1:
        return bfs_traversal(graph, start, out)
    if choice == 2:
        graph.url(start)
        out.write(f"DFS Traversal starting from page {start}:\n")
        return dfs_traversal(graph, start, out=out)
    raise InvalidChoiceError(f"Unknown traversal choice: {choice}")
