"""
Command-line interface for the site graph traversal demo.
"""
from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from sitegraph.core import (
    InvalidChoiceError,
    SiteGraph,
    SiteGraphError,
    TraversalResult,
    traverse,
)

SAMPLE_URLS: Tuple[str, ...] = (
    "http://example.com",
    "http://example.com/page1",
    "http://example.com/page2",
    "http://example.com/page1/subpage1",
    "http://example.com/page1/subpage2",
    "http://example.com/page2/subpage1",
    "http://example.com/page2/subpage2",
    "http://example.com/page1/subpage1/subsubpage1",
    "http://example.com/page1/subpage2/subsubpage1",
    "http://example.com/page2/subpage1/subsubpage1",
)

# Added in this order; each page's adjacency ends up newest-first
SAMPLE_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (0, 2),
    (1, 3), (1, 4),
    (2, 5), (2, 6),
    (3, 7), (4, 8),
    (5, 9),
)

PROMPT = "Choose traversal method:\n1. BFS\n2. DFS\nEnter choice: "


def build_sample_graph() -> SiteGraph:
    """Build the 10-page example.com link graph."""
    graph = SiteGraph(len(SAMPLE_URLS))
    for index, url in enumerate(SAMPLE_URLS):
        graph.set_url(index, url)
    for src, dest in SAMPLE_EDGES:
        graph.add_edge(src, dest)
    return graph


def parse_choice(raw: str) -> int:
    """Parse a traversal selector; anything but an integer is an invalid choice."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidChoiceError(f"Not a number: {raw!r}") from None


def prompt_choice(
    read: Optional[Callable[[], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Ask for a traversal method and parse the answer as an integer."""
    if out is None:
        out = sys.stdout
    out.write(PROMPT)
    out.flush()
    try:
        raw = (read or input)()
    except EOFError:
        raise InvalidChoiceError("No traversal choice given") from None

    return parse_choice(raw)


def print_summary(result: TraversalResult) -> None:
    """Print traversal summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("TRAVERSAL SUMMARY\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"Method:                 {result.method.upper()}\n")
    sys.stderr.write(f"Start page:             {result.start}\n")
    sys.stderr.write(f"Pages visited:          {result.pages_visited}\n")
    sys.stderr.write(f"Pages not reached:      {len(result.unreached)}\n")

    if result.unreached:
        sys.stderr.write("Unreached: " + ", ".join(str(i) for i in result.unreached) + "\n")

    sys.stderr.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sitegraph CLI."""
    parser = argparse.ArgumentParser(
        description="Print the sample site link graph and walk it with BFS or DFS."
    )
    parser.add_argument("--choice", help="Traversal method: 1 = BFS, 2 = DFS (default: prompt)")
    parser.add_argument("--start", type=int, default=0, help="Start page index (default: 0)")
    parser.add_argument("--verbose", action="store_true", help="Show traversal summary on stderr")
    args = parser.parse_args(argv)

    try:
        with build_sample_graph() as graph:
            graph.print_graph()
            try:
                choice = parse_choice(args.choice) if args.choice is not None else prompt_choice()
                result = traverse(graph, choice, start=args.start)
            except InvalidChoiceError:
                print("Invalid choice!")
                return 0
    except MemoryError:
        sys.stderr.write("Memory allocation failed\n")
        return 1
    except SiteGraphError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2

    if args.verbose:
        print_summary(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
