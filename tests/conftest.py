"""
Pytest configuration and shared fixtures.
"""
import io
from typing import Iterator

import pytest

from sitegraph import SiteGraph
from sitegraph.cli import build_sample_graph


@pytest.fixture
def sample_graph() -> Iterator[SiteGraph]:
    """The 10-page example.com graph used by the CLI."""
    graph = build_sample_graph()
    yield graph
    graph.close()


@pytest.fixture
def out() -> io.StringIO:
    """In-memory stream for traversal output."""
    return io.StringIO()
