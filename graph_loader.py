"""
Load a graph instance plus its expected shortest path from disk.

Text instances look like::

    # Nodes
    1
    2
    # Edges
    1 2 7
    # ShortestPath
    1 2

YAML instances carry the same data under ``graph.nodes``, ``graph.edges`` and
``shortest_path``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set, Tuple

import yaml

from graph import Edge, Graph, Node


SECTIONS = {
    "# Nodes": "nodes",
    "# Edges": "edges",
    "# ShortestPath": "shortest_path",
}


class GraphLoadError(Exception):
    """Base class for everything that can go wrong while loading an instance."""


class GraphFileError(GraphLoadError):
    """The instance file could not be opened or read."""


class GraphFormatError(GraphLoadError, ValueError):
    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidSectionError(GraphFormatError):
    pass


class MissingSectionError(GraphFormatError):
    pass


class InvalidNodeIdError(GraphFormatError):
    pass


class InvalidEdgeError(GraphFormatError):
    pass


class InvalidWeightError(GraphFormatError):
    pass


class EmptyPathError(GraphFormatError):
    pass


def parse_unsigned(
    token: object,
    error: type[GraphFormatError],
    what: str,
    line_number: Optional[int] = None,
) -> int:
    # bool is an int subclass; YAML turns "yes"/"no" into booleans.
    if isinstance(token, bool):
        raise error(f"Invalid {what}: {token!r}", line_number)
    if isinstance(token, int):
        value = token
    elif isinstance(token, str):
        try:
            value = int(token.strip())
        except ValueError:
            raise error(f"Invalid {what}: {token!r}", line_number) from None
    else:
        raise error(f"Invalid {what}: {token!r}", line_number)

    if value < 0:
        raise error(f"Invalid {what}: {token!r} is negative", line_number)
    return value


def _check_endpoints(
    node1: int, node2: int, declared: Set[int], line_number: Optional[int]
) -> None:
    for endpoint in (node1, node2):
        if endpoint not in declared:
            raise InvalidEdgeError(
                f"Edge references undeclared node {endpoint}", line_number
            )


def _read_lines(path: Path) -> List[str]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError as exc:
        raise GraphFileError(f"Unable to read graph file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"Graph file {path} is not UTF-8 text") from exc


def load_from_file(path: Path) -> Tuple[Graph, List[int]]:
    """Read a text instance and return the graph and the expected path."""

    nodes: List[Node] = []
    edges: List[Edge] = []
    shortest_path: List[int] = []
    edge_lines: List[int] = []
    seen_sections: Set[str] = set()
    section: Optional[str] = None

    for line_number, raw_line in enumerate(_read_lines(Path(path)), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("#"):
            if line not in SECTIONS:
                raise InvalidSectionError(f"Invalid section {line!r}", line_number)
            section = SECTIONS[line]
            seen_sections.add(section)
            continue

        if section is None:
            raise MissingSectionError(
                "Data found before any section header", line_number
            )

        if section == "nodes":
            nodes.append(
                Node(parse_unsigned(line, InvalidNodeIdError, "node id", line_number))
            )
        elif section == "edges":
            parts = line.split()
            if len(parts) != 3:
                raise InvalidEdgeError(
                    f"Invalid edge data {line!r}: expected 'node1 node2 weight'",
                    line_number,
                )
            node1 = parse_unsigned(parts[0], InvalidNodeIdError, "node id", line_number)
            node2 = parse_unsigned(parts[1], InvalidNodeIdError, "node id", line_number)
            weight = parse_unsigned(parts[2], InvalidWeightError, "weight", line_number)
            edges.append(Edge(node1, node2, weight))
            edge_lines.append(line_number)
        else:
            shortest_path.extend(
                parse_unsigned(token, InvalidNodeIdError, "node id", line_number)
                for token in line.split()
            )

    _require_sections(seen_sections)

    declared = {node.id for node in nodes}
    for edge, line_number in zip(edges, edge_lines):
        _check_endpoints(edge.a, edge.b, declared, line_number)

    return Graph(nodes, edges), shortest_path


def _require_sections(seen_sections: Set[str]) -> None:
    missing = [header for header, name in SECTIONS.items() if name not in seen_sections]
    if missing:
        raise MissingSectionError(f"Missing section(s): {', '.join(missing)}")


def load_from_yaml(path: Path) -> Tuple[Graph, List[int]]:
    """Read a YAML instance with ``graph.nodes``, ``graph.edges`` and ``shortest_path``."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            config = yaml.safe_load(handle)
    except OSError as exc:
        raise GraphFileError(f"Unable to read graph file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise GraphFormatError(f"Invalid YAML in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"Graph file {path} is not UTF-8 text") from exc

    if not isinstance(config, dict) or not isinstance(config.get("graph"), dict):
        raise MissingSectionError("Missing 'graph' mapping")
    graph_config: Dict = config["graph"]
    for key in ("nodes", "edges"):
        if not isinstance(graph_config.get(key), list):
            raise MissingSectionError(f"Missing 'graph.{key}' list")
    if "shortest_path" not in config:
        raise MissingSectionError("Missing 'shortest_path' list")

    nodes = [
        Node(parse_unsigned(node, InvalidNodeIdError, "node id"))
        for node in graph_config["nodes"]
    ]
    declared = {node.id for node in nodes}

    edges: List[Edge] = []
    for entry in graph_config["edges"]:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise InvalidEdgeError(
                f"Invalid edge data {entry!r}: expected [node1, node2, weight]"
            )
        node1 = parse_unsigned(entry[0], InvalidNodeIdError, "node id")
        node2 = parse_unsigned(entry[1], InvalidNodeIdError, "node id")
        weight = parse_unsigned(entry[2], InvalidWeightError, "weight")
        _check_endpoints(node1, node2, declared, None)
        edges.append(Edge(node1, node2, weight))

    raw_path = config["shortest_path"]
    if raw_path is None:
        raw_path = []
    if not isinstance(raw_path, list):
        raise InvalidNodeIdError(f"Invalid shortest path {raw_path!r}")
    shortest_path = [
        parse_unsigned(node, InvalidNodeIdError, "node id") for node in raw_path
    ]

    return Graph(nodes, edges), shortest_path


def load_graph(path: Path) -> Tuple[Graph, List[int]]:
    path = Path(path)
    if path.suffix.lower() in {".yaml", ".yml"}:
        return load_from_yaml(path)
    return load_from_file(path)


def retrieve_start_end_nodes(expected_shortest_path: Sequence[int]) -> Tuple[int, int]:
    """Start and end node are the first and last entries of the expected path."""
    if not expected_shortest_path:
        raise EmptyPathError("No start or end node provided")
    return expected_shortest_path[0], expected_shortest_path[-1]
