"""
Bounded directed graph of a website's page links, walked with BFS or DFS.
Prints each visited page together with its URL.
"""
from sitegraph.core import (
    EMPTY_QUEUE,
    MAX_PAGES,
    MAX_URL_LEN,
    CapacityError,
    GraphClosedError,
    InvalidChoiceError,
    InvalidIndexError,
    PageQueue,
    SiteGraph,
    SiteGraphError,
    TraversalResult,
    bfs_traversal,
    dfs_traversal,
    traverse,
)

__version__ = "1.0.0"
__all__ = [
    "EMPTY_QUEUE",
    "MAX_PAGES",
    "MAX_URL_LEN",
    "CapacityError",
    "GraphClosedError",
    "InvalidChoiceError",
    "InvalidIndexError",
    "PageQueue",
    "SiteGraph",
    "SiteGraphError",
    "TraversalResult",
    "bfs_traversal",
    "dfs_traversal",
    "traverse",
]
