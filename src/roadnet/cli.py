"""Command Line Interface for contraction hierarchy construction.

Loads a graph document, builds its contraction hierarchy and prints a JSON
summary of the result.

Example Usage:
    python -m roadnet contract data/seattle.json
    python -m roadnet contract --sequential --config ch.json data/seattle.json
"""

import argparse
import json
import logging
from typing import Any, Dict, List, Optional

from .config import ContractionConfig
from .core.exceptions import ConfigurationError, ValidationError
from .core.graph.contraction_hierarchies import ContractionHierarchies
from .loader import load_graph_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roadnet", description="Road network tooling")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    contract = subparsers.add_parser("contract", help="Build a contraction hierarchy")
    contract.add_argument("graph", help="Path to a JSON graph document")
    contract.add_argument("--config", help="Path to a JSON contraction config")
    contract.add_argument(
        "--sequential", action="store_true", help="Evaluate rounds on a single thread"
    )
    contract.add_argument("--workers", type=int, help="Number of worker threads")
    return parser


def load_config(args: argparse.Namespace) -> ContractionConfig:
    """Merge the optional config file with command line overrides."""
    data: Dict[str, Any] = {}
    if args.config:
        try:
            with open(args.config, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {args.config}: {e}") from e
    if args.sequential:
        data["parallel"] = False
    if args.workers is not None:
        data["max_workers"] = args.workers
    return ContractionConfig.from_dict(data)


def contract(args: argparse.Namespace) -> Dict[str, Any]:
    config = load_config(args)
    graph = load_graph_file(args.graph)
    ch = ContractionHierarchies(graph, config)
    state = ch.preprocess()
    contracted = [n for n in graph.navigable_nodes() if n.is_contracted]
    return {
        "nodes": len(graph),
        "navigable_nodes": len(contracted),
        "rounds": state.round_count,
        "shortcut_edges": len(state.shortcuts),
        "max_depth": max((n.depth for n in contracted), default=0),
        "timings": ch.get_performance_stats(),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        summary = contract(args)
    except (ConfigurationError, ValidationError, OSError) as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(summary, indent=2))
    return 0
