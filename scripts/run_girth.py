"""Report the girth of a graph described by a JSON config.

The config's ``girth`` section (or its root) holds a ``graph`` entry with
either explicit ``edges``, an ``edgelist`` file or a networkx ``generator``,
plus optional ``algo`` settings.  Command line flags override ``algo``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

import networkx as nx

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from girth import GirthConfig, GirthTimeoutError, girth
from utils.graph_utils import Graph, InvalidGraphError


GENERATORS = {
    "petersen": lambda n: nx.petersen_graph(),
    "complete": nx.complete_graph,
    "cycle": nx.cycle_graph,
    "path": nx.path_graph,
}


def load_graph(graph_cfg: Dict, base_dir: str = ".") -> Graph:
    """Build a :class:`Graph` from the ``graph`` section of a config."""

    if "edges" in graph_cfg:
        return Graph.from_edges(graph_cfg["edges"], vertices=graph_cfg.get("vertices"))
    if "edgelist" in graph_cfg:
        path = os.path.join(base_dir, graph_cfg["edgelist"])
        # lines without a weight column get the default weight
        H = nx.read_edgelist(path, create_using=nx.MultiGraph, data=[("weight", float)])
        return Graph.from_networkx(H)
    if "generator" in graph_cfg:
        name = graph_cfg["generator"]
        if name not in GENERATORS:
            raise InvalidGraphError(f"unknown generator: {name}")
        return Graph.from_networkx(GENERATORS[name](int(graph_cfg.get("n", 0))))
    raise InvalidGraphError("graph config needs 'edges', 'edgelist' or 'generator'")


def build_config(algo_cfg: Dict, args: argparse.Namespace) -> GirthConfig:
    try:
        cfg = GirthConfig(**algo_cfg)
    except TypeError as exc:
        raise ValueError(f"bad 'algo' settings: {exc}") from exc
    if args.exact:
        cfg.exact = True
    if args.timeout is not None:
        cfg.timeout_s = args.timeout
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, required=True)
    parser.add_argument("--exact", action="store_true")
    parser.add_argument("--timeout", type=float, default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.config, "r") as f:
        all_cfg = json.load(f)
    cfg_root = all_cfg.get("girth", all_cfg)

    try:
        cfg = build_config(cfg_root.get("algo", {}), args)
        if "graph" not in cfg_root:
            raise InvalidGraphError("config has no 'graph' section")
        G = load_graph(cfg_root["graph"], base_dir=os.path.dirname(os.path.abspath(args.config)))
        cycle = girth(G, cfg)
    except (ValueError, GirthTimeoutError) as exc:
        # InvalidGraphError is a ValueError
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(cycle.to_dict()))
    elif cycle.found:
        print(f"girth: {cycle.length:g}")
        print(f"cycle: {' -> '.join(str(x) for x in cycle.vertices)}")
    else:
        print("girth: inf (graph is acyclic)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
