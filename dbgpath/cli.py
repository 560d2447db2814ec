"""Command-line interface for dbgpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, Hashable, List, Optional

import networkx as nx

from dbgpath.algorithms.branches import get_predecessor, get_successor, true_branches
from dbgpath.algorithms.extend import extend_path
from dbgpath.algorithms.unitig import build_unitig
from dbgpath.config import ExtensionConfig
from dbgpath.io import load_graph
from dbgpath.logging import get_logger, set_global_log_level
from dbgpath.model.path import Path as VertexPath
from dbgpath.types.base import Direction
from dbgpath.types.dto import SingleExtension

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _resolve_vertex(graph: nx.DiGraph, token: str) -> Hashable:
    """Map a command-line vertex name onto a vertex of ``graph``.

    Structured graph files may use integer vertex ids, so a token that is not
    a vertex as-is is retried as an integer.

    Raises:
        KeyError: If no matching vertex exists.
    """
    if token in graph:
        return token
    try:
        as_int = int(token)
    except ValueError:
        as_int = None
    if as_int is not None and as_int in graph:
        return as_int
    raise KeyError(f"Vertex '{token}' not found in graph")


def _effective_config(
    section: Dict[str, Any], trim_len: Optional[int], max_len: Optional[int]
) -> ExtensionConfig:
    """Merge the file's extension section with command-line overrides."""
    config = ExtensionConfig.from_dict(section)
    overrides = config.to_dict()
    if trim_len is not None:
        overrides["trim_len"] = trim_len
    if max_len is not None:
        overrides["max_len"] = max_len
    return ExtensionConfig(**overrides)


def _single_extension_to_dict(step: SingleExtension) -> Dict[str, Any]:
    return {"result": step.result.name, "vertex": step.vertex}


def _emit(document: Dict[str, Any], output: Optional[Path]) -> None:
    json_str = json.dumps(document, indent=2, default=str)
    if output is None:
        print(json_str)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json_str + "\n", encoding="utf-8")
    logger.info(f"Results written to: {output}")


def _run_extend(
    graph_path: Path,
    seed: str,
    direction: str,
    trim_len: Optional[int],
    max_len: Optional[int],
    output: Optional[Path],
) -> None:
    """Extend a path from ``seed`` and print or save the result as JSON."""
    logger.info(f"Extending from seed {seed!r} in {graph_path}")
    _start_time = perf_counter()

    try:
        graph, section = load_graph(graph_path)
        config = _effective_config(section, trim_len, max_len)
        vertex = _resolve_vertex(graph, seed)

        document: Dict[str, Any] = {
            "seed": vertex,
            "direction": direction,
            "trim_len": config.trim_len,
            "max_len": config.max_len,
        }
        if direction == "both":
            unitig = build_unitig(
                vertex, graph, trim_len=config.trim_len, max_len=config.max_len
            )
            document["path"] = list(unitig.path)
            document["forward"] = unitig.forward.name
            document["reverse"] = unitig.reverse.name
        else:
            path = VertexPath([vertex])
            result = extend_path(
                path,
                Direction.from_string(direction),
                graph,
                trim_len=config.trim_len,
                max_len=config.max_len,
            )
            document["path"] = list(path.nodes_seq)
            document["result"] = result.name
            document["extended"] = result.extended

        _emit(document, output)
        logger.info(
            f"Extension completed in {_format_duration(perf_counter() - _start_time)}"
        )

    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"ERROR: Graph file not found: {graph_path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to extend path: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to extend path: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_inspect(
    graph_path: Path, vertex_name: str, trim_len: Optional[int]
) -> None:
    """Print branch classification around a single vertex as JSON."""
    try:
        graph, section = load_graph(graph_path)
        config = _effective_config(section, trim_len, None)
        vertex = _resolve_vertex(graph, vertex_name)

        document = {
            "vertex": vertex,
            "trim_len": config.trim_len,
            "out_degree": graph.out_degree(vertex),
            "in_degree": graph.in_degree(vertex),
            "successor": _single_extension_to_dict(
                get_successor(vertex, graph, config.trim_len)
            ),
            "predecessor": _single_extension_to_dict(
                get_predecessor(vertex, graph, config.trim_len)
            ),
            "true_branches": {
                "forward": true_branches(
                    vertex, Direction.FORWARD, graph, config.trim_len
                ),
                "reverse": true_branches(
                    vertex, Direction.REVERSE, graph, config.trim_len
                ),
            },
        }
        _emit(document, None)

    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"ERROR: Graph file not found: {graph_path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect vertex: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to inspect vertex: {type(e).__name__}: {e}")
        sys.exit(1)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dbgpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dbgpath",
        description="Extend unambiguous paths through directed graphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{extend,inspect}",
        help="Available commands",
    )

    extend_parser = subparsers.add_parser(
        "extend", help="Extend a path from a seed vertex"
    )
    extend_parser.add_argument(
        "graph", type=Path, help="Graph file (.yaml, .json, or edge list)"
    )
    extend_parser.add_argument(
        "--seed", "-s", required=True, help="Vertex to start the path from"
    )
    extend_parser.add_argument(
        "--direction",
        "-d",
        choices=("forward", "reverse", "both"),
        default="forward",
        help="Direction of extension (default: forward)",
    )
    extend_parser.add_argument(
        "--max-len",
        type=_positive_int,
        default=None,
        help="Maximum number of vertices in the path (default: unbounded)",
    )
    extend_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON result to this file instead of stdout",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show branch classification around a vertex"
    )
    inspect_parser.add_argument(
        "graph", type=Path, help="Graph file (.yaml, .json, or edge list)"
    )
    inspect_parser.add_argument(
        "--vertex", required=True, help="Vertex to inspect"
    )

    for p in (extend_parser, inspect_parser):
        p.add_argument(
            "--trim-len",
            "-t",
            type=_non_negative_int,
            default=None,
            help="Treat branches of this many steps or fewer as tips",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "extend":
        _run_extend(
            graph_path=args.graph,
            seed=args.seed,
            direction=args.direction,
            trim_len=args.trim_len,
            max_len=args.max_len,
            output=args.output,
        )
    elif args.command == "inspect":
        _run_inspect(args.graph, args.vertex, args.trim_len)


if __name__ == "__main__":
    main()
