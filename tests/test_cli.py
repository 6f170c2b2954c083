"""Tests for the dagorder command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from dagorder import DirectedGraph, NodeNotFoundError
from dagorder._cli.main import app
from dagorder._cli.pairs import PairsError, build_graph, parse_pairs

runner = CliRunner()

WIKIPEDIA_PAIRS = """
7 8
7 11
5 11
3 8
3 10
11 2
11 9
11 10
8 9
"""


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test away from this repository's pyproject.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParsePairs:
    """Tests for splitting input into pairs."""

    def test_pairs_across_lines(self) -> None:
        assert parse_pairs("a b\nb c\n") == [("a", "b"), ("b", "c")]

    def test_pairs_on_one_line(self) -> None:
        assert parse_pairs("a b b c") == [("a", "b"), ("b", "c")]

    def test_empty_input(self) -> None:
        assert parse_pairs("  \n") == []

    def test_odd_token_count(self) -> None:
        with pytest.raises(PairsError, match="odd number of tokens") as exc_info:
            parse_pairs("a b c")
        assert exc_info.value.dangling == "c"


class TestBuildGraph:
    """Tests for building a graph from pairs."""

    def test_nodes_in_first_appearance_order(self) -> None:
        graph = build_graph([("b", "c"), ("a", "b")])
        assert graph.nodes == ("b", "c", "a")
        assert graph.edges() == [("b", "c"), ("a", "b")]

    def test_identical_pair_declares_node(self) -> None:
        graph = build_graph([("a", "a"), ("b", "c")])
        assert graph.nodes == ("a", "b", "c")
        assert graph.edges() == [("b", "c")]

    def test_capacity_is_passed(self) -> None:
        assert build_graph([], capacity=16).capacity_hint == 16


class TestSortCommand:
    """Tests for `dagorder sort`."""

    def test_sort_from_stdin(self) -> None:
        result = runner.invoke(app, ["sort"], input="b c\na b\n")

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["a", "b", "c"]

    def test_sort_from_file(self, tmp_path: Path) -> None:
        pairs = tmp_path / "pairs.txt"
        pairs.write_text(WIKIPEDIA_PAIRS)

        result = runner.invoke(app, ["sort", str(pairs)])

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["7", "5", "3", "11", "8", "2", "10", "9"]

    def test_dash_reads_stdin(self) -> None:
        result = runner.invoke(app, ["sort", "-"], input="x y\n")

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["x", "y"]

    def test_sort_from_configured_input(self, tmp_path: Path) -> None:
        (tmp_path / "deps").mkdir()
        (tmp_path / "deps" / "order.txt").write_text("lib app\n")
        (tmp_path / "pyproject.toml").write_text('[tool.dagorder]\ninput = "deps/order.txt"\n')

        result = runner.invoke(app, ["sort"])

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["lib", "app"]

    def test_verbose(self) -> None:
        result = runner.invoke(app, ["--verbose", "sort"], input="a b\n")

        assert result.exit_code == 0, result.output

    def test_cycle_exits_with_one(self) -> None:
        result = runner.invoke(app, ["sort"], input="a b\nb c\nc b\n")

        assert result.exit_code == 1
        assert "Cycle detected" in result.output
        assert "b -> c -> b" in result.output

    def test_odd_tokens_exit_with_two(self) -> None:
        result = runner.invoke(app, ["sort"], input="a b c\n")

        assert result.exit_code == 2
        assert "odd number of tokens" in result.output

    def test_missing_file_exits_with_two(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["sort", str(tmp_path / "missing.txt")])

        assert result.exit_code == 2
        assert "cannot read input" in result.output

    def test_undecodable_file_exits_with_two(self, tmp_path: Path) -> None:
        pairs = tmp_path / "pairs.txt"
        pairs.write_bytes(b"a \xff\n")

        result = runner.invoke(app, ["sort", str(pairs)])

        assert result.exit_code == 2
        assert "cannot read input" in result.output

    def test_graph_error_exits_with_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def lose_element(graph: DirectedGraph) -> list:
            raise NodeNotFoundError("ghost")

        monkeypatch.setattr(DirectedGraph, "destructive_toposort", lose_element)

        result = runner.invoke(app, ["sort"], input="a b\n")

        assert result.exit_code == 2
        assert "node 'ghost' not found" in result.output

    def test_invalid_config_exits_with_two(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.dagorder]\ncapacity = -3\n")

        result = runner.invoke(app, ["sort"], input="a b\n")

        assert result.exit_code == 2
        assert "Configuration error" in result.output


class TestCheckCommand:
    """Tests for `dagorder check`."""

    def test_acyclic(self) -> None:
        result = runner.invoke(app, ["check"], input=WIKIPEDIA_PAIRS)

        assert result.exit_code == 0, result.output
        assert "No cycles" in result.output

    def test_cycle(self) -> None:
        result = runner.invoke(app, ["check"], input="1 2\n2 3\n3 1\n")

        assert result.exit_code == 1
        assert "1 -> 2 -> 3 -> 1" in result.output
