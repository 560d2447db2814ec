"""Graph loaders producing ``networkx.DiGraph`` instances.

Supported inputs:
- Edge lists: one ``source target`` pair per line, ``#`` comments allowed.
- Mappings (from YAML or JSON) with ``nodes`` and ``edges`` keys and an
  optional ``extension`` section holding extension defaults.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import networkx as nx
import yaml

from dbgpath.logging import get_logger
from dbgpath.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    graph: Optional[nx.DiGraph] = None,
) -> nx.DiGraph:
    """Build a directed graph from ``source target`` lines.

    Args:
        lines: Input lines. Blank lines and lines starting with ``#`` are
            skipped; trailing ``#`` comments are stripped.
        separator: Field separator passed to ``str.split`` (default: any
            whitespace).
        graph: Existing graph to add edges to (optional).

    Returns:
        The populated DiGraph.

    Raises:
        ValueError: If a line does not contain exactly two fields.
    """
    graph = nx.DiGraph() if graph is None else graph

    for line_no, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = [tok.strip() for tok in line.split(separator)]
        if len(tokens) != 2 or not all(tokens):
            raise ValueError(
                f"Line {line_no}: expected 'source target', got {raw.rstrip()!r}"
            )
        graph.add_edge(tokens[0], tokens[1])

    return graph


def graph_from_dict(data: Mapping[str, Any]) -> nx.DiGraph:
    """Build a directed graph from a ``nodes``/``edges`` mapping.

    Edges may be given as two-item sequences ``[source, target]`` or as
    mappings with ``source`` and ``target`` keys. Nodes listed under
    ``nodes`` are added first, so isolated vertices are preserved.

    Args:
        data: Parsed document.

    Returns:
        The populated DiGraph.

    Raises:
        ValueError: If the document structure is invalid.
    """
    if not isinstance(data, Mapping):
        raise ValueError(
            f"Graph document must be a mapping, got {type(data).__name__}"
        )
    data = normalize_yaml_dict_keys(dict(data))

    graph = nx.DiGraph()
    for idx, node in enumerate(data.get("nodes") or []):
        graph.add_node(_as_vertex(node, f"Node #{idx}"))

    edges = data.get("edges")
    if edges is None:
        raise ValueError("Graph document is missing the 'edges' key")
    if not isinstance(edges, list):
        raise ValueError(f"'edges' must be a list, got {type(edges).__name__}")

    for idx, edge in enumerate(edges):
        if isinstance(edge, Mapping):
            if "source" not in edge or "target" not in edge:
                raise ValueError(
                    f"Edge #{idx} must define 'source' and 'target': {edge!r}"
                )
            source, target = edge["source"], edge["target"]
        elif isinstance(edge, (list, tuple)) and len(edge) == 2:
            source, target = edge
        else:
            raise ValueError(
                f"Edge #{idx} must be a [source, target] pair or mapping: {edge!r}"
            )
        graph.add_edge(
            _as_vertex(source, f"Edge #{idx} source"),
            _as_vertex(target, f"Edge #{idx} target"),
        )

    return graph


def _as_vertex(value: Any, where: str) -> Any:
    """Return ``value`` if it can serve as a vertex id.

    Raises:
        ValueError: If ``value`` is unhashable (e.g. a YAML list).
    """
    try:
        hash(value)
    except TypeError:
        raise ValueError(f"{where} is not a valid vertex id: {value!r}") from None
    return value


def load_graph(path: Path | str) -> Tuple[nx.DiGraph, Dict[str, Any]]:
    """Load a graph file, choosing the format from its suffix.

    ``.yaml``/``.yml`` files are parsed with PyYAML, ``.json`` files with the
    json module, and anything else is read as an edge list.

    Args:
        path: Location of the graph file.

    Returns:
        Tuple of (graph, extension_section). The extension section is the raw
        ``extension`` mapping from structured documents, or an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contents are malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Graph file not found: {path}")

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix in _YAML_SUFFIXES or suffix in _JSON_SUFFIXES:
        if suffix in _YAML_SUFFIXES:
            try:
                document = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in graph file {path}: {e}") from e
        else:
            document = json.loads(text)
        if document is None:
            raise ValueError(f"Graph file is empty: {path}")
        graph = graph_from_dict(document)
        extension = normalize_yaml_dict_keys(dict(document)).get("extension") or {}
    else:
        graph = edgelist_to_graph(text.splitlines())
        extension = {}

    logger.info(
        f"Loaded graph from {path}: {graph.number_of_nodes()} nodes, "
        f"{graph.number_of_edges()} edges"
    )
    return graph, extension
