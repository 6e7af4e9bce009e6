"""Tests for SiteGraph construction, edges, dump output and close()."""
import io

import pytest

from sitegraph import (
    MAX_PAGES,
    MAX_URL_LEN,
    CapacityError,
    GraphClosedError,
    InvalidIndexError,
    SiteGraph,
)


class TestCreate:

    @pytest.mark.parametrize("count", [0, 1, 10, MAX_PAGES])
    def test_default_urls(self, count):
        graph = SiteGraph(count)
        assert graph.page_count == count
        for i in range(count):
            assert graph.url(i) == f"Page_{i}"
            assert graph.neighbors(i) == []

    def test_over_capacity_fails_fast(self):
        with pytest.raises(CapacityError):
            SiteGraph(MAX_PAGES + 1)

    def test_negative_count(self):
        with pytest.raises(CapacityError):
            SiteGraph(-1)

    def test_explicit_capacity(self):
        graph = SiteGraph(40, capacity=50)
        assert graph.capacity == 50
        assert graph.url(39) == "Page_39"


class TestSetUrl:

    def test_override(self):
        graph = SiteGraph(3)
        graph.set_url(1, "http://example.com/a")
        assert graph.url(0) == "Page_0"
        assert graph.url(1) == "http://example.com/a"

    def test_long_url_truncated(self):
        graph = SiteGraph(1)
        graph.set_url(0, "x" * 150)
        assert graph.url(0) == "x" * (MAX_URL_LEN - 1)

    @pytest.mark.parametrize("index", [-1, 3, MAX_PAGES])
    def test_out_of_range(self, index):
        graph = SiteGraph(3)
        with pytest.raises(InvalidIndexError):
            graph.set_url(index, "http://example.com")


class TestAddEdge:

    def test_prepends(self):
        graph = SiteGraph(4)
        graph.add_edge(0, 1)
        assert graph.neighbors(0)[0] == 1
        graph.add_edge(0, 2)
        assert graph.neighbors(0)[0] == 2
        graph.add_edge(0, 3)
        assert graph.neighbors(0) == [3, 2, 1]

    def test_duplicates_and_self_loops_kept(self):
        graph = SiteGraph(2)
        graph.add_edge(0, 1)
        graph.add_edge(0, 1)
        graph.add_edge(1, 1)
        assert graph.neighbors(0) == [1, 1]
        assert graph.neighbors(1) == [1]

    @pytest.mark.parametrize("src,dest", [(-1, 0), (0, -1), (2, 0), (0, 2)])
    def test_out_of_range(self, src, dest):
        graph = SiteGraph(2)
        with pytest.raises(InvalidIndexError):
            graph.add_edge(src, dest)
        assert graph.neighbors(0) == []

    def test_neighbors_is_a_copy(self):
        graph = SiteGraph(2)
        graph.add_edge(0, 1)
        graph.neighbors(0).append(0)
        assert graph.neighbors(0) == [1]


class TestPrintGraph:

    def test_sample_dump(self, sample_graph):
        buf = io.StringIO()
        sample_graph.print_graph(buf)
        lines = buf.getvalue().splitlines()

        assert len(lines) == 10
        assert lines[0] == (
            "Page 0 (http://example.com):"
            " -> Page 2 (http://example.com/page2)"
            " -> Page 1 (http://example.com/page1)"
        )
        assert lines[3] == (
            "Page 3 (http://example.com/page1/subpage1):"
            " -> Page 7 (http://example.com/page1/subpage1/subsubpage1)"
        )
        assert lines[9] == "Page 9 (http://example.com/page2/subpage1/subsubpage1):"

    def test_ends_with_newline(self):
        buf = io.StringIO()
        SiteGraph(1).print_graph(buf)
        assert buf.getvalue() == "Page 0 (Page_0):\n"


class TestClose:

    def test_close_releases_and_is_idempotent(self):
        graph = SiteGraph(2)
        graph.add_edge(0, 1)
        graph.close()
        assert graph.closed
        graph.close()

    def test_use_after_close(self):
        graph = SiteGraph(2)
        graph.close()
        with pytest.raises(GraphClosedError):
            graph.add_edge(0, 1)
        with pytest.raises(GraphClosedError):
            graph.neighbors(0)

    def test_context_manager(self):
        with SiteGraph(2) as graph:
            graph.add_edge(0, 1)
        assert graph.closed
