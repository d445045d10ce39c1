"""
CLI to run graph queries described in a YAML file.

Reads a graph (edges, optional isolated vertices and coordinates) plus a list
of named queries, runs each with the requested algorithm, and prints one
result per query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import argparse
import logging
import time

from adjacency_list_graph import AdjacencyListGraph
from algorithms import PathResult, SpanningTree, SpanningTreeEngine
from astar_engine import AStarEngine
from bellman_ford_engine import BellmanFordEngine
from dijkstra_engine import SimpleDijkstraEngine, require_vertex
from graph import Graph, Vertex
from heuristics import Heuristic, by_name
from spanning_tree import BoruvkaEngine, KruskalEngine, PrimEngine

logger = logging.getLogger(__name__)

PATH_ALGORITHMS = ("dijkstra", "astar", "bellman-ford")
TREE_ALGORITHMS = ("prim", "kruskal", "boruvka")


@dataclass(frozen=True)
class QueryConfig:
    name: str
    algorithm: str
    source: Optional[Vertex] = None
    goal: Optional[Vertex] = None
    heuristic: str = "zero"


@dataclass(frozen=True)
class GraphConfig:
    edges: Sequence[Tuple[Vertex, Vertex, float]]
    vertices: Sequence[Vertex] = ()
    undirected: bool = False
    coordinates: Mapping[Vertex, Sequence[float]] = field(default_factory=dict)

    def build(self) -> AdjacencyListGraph:
        g = AdjacencyListGraph()
        for v in self.vertices:
            g.add_vertex(v)
        for src, dst, weight in self.edges:
            if self.undirected:
                g.add_undirected_edge(src, dst, weight)
            else:
                g.add_edge(src, dst, weight)
        return g


@dataclass(frozen=True)
class Config:
    graph: GraphConfig
    queries: Sequence[QueryConfig]


def _parse_query(idx: int, raw: Mapping[str, Any]) -> QueryConfig:
    algorithm = str(raw.get("algorithm", "dijkstra")).lower()
    name = str(raw.get("name", f"query-{idx}"))
    if algorithm not in PATH_ALGORITHMS + TREE_ALGORITHMS:
        raise ValueError(f"Query '{name}': unknown algorithm '{algorithm}'.")
    if algorithm in PATH_ALGORITHMS and ("source" not in raw or "goal" not in raw):
        raise ValueError(f"Query '{name}': '{algorithm}' requires 'source' and 'goal'.")
    return QueryConfig(
        name=name,
        algorithm=algorithm,
        source=raw.get("source"),
        goal=raw.get("goal"),
        heuristic=str(raw.get("heuristic", "zero")),
    )


def parse_config(data: Mapping[str, Any]) -> Config:
    edges = []
    for raw in data.get("edges") or []:
        if len(raw) != 3:
            raise ValueError(f"Edge entries must be [source, destination, weight], got {raw!r}.")
        edges.append((raw[0], raw[1], raw[2]))

    coords = {v: tuple(p) for v, p in (data.get("coordinates") or {}).items()}
    graph_cfg = GraphConfig(
        edges=edges,
        vertices=list(data.get("vertices") or []),
        undirected=bool(data.get("undirected", False)),
        coordinates=coords,
    )
    queries = [_parse_query(i, q) for i, q in enumerate(data.get("queries") or [])]
    return Config(graph=graph_cfg, queries=queries)


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level.")
    return parse_config(data)


def shortest_path(
    graph: Graph,
    source: Vertex,
    goal: Vertex,
    algorithm: str = "dijkstra",
    heuristic: Optional[Heuristic] = None,
) -> Optional[PathResult]:
    """Dispatch a point-to-point query by algorithm name."""
    if algorithm == "dijkstra":
        return SimpleDijkstraEngine().shortest_path(graph, source, goal)
    if algorithm == "astar":
        engine = AStarEngine(heuristic) if heuristic is not None else AStarEngine()
        return engine.shortest_path(graph, source, goal)
    if algorithm == "bellman-ford":
        return BellmanFordEngine().shortest_path(graph, source, goal)
    raise ValueError(f"Unknown shortest-path algorithm '{algorithm}'.")


_TREE_ENGINES: Dict[str, Callable[[], SpanningTreeEngine]] = {
    "prim": PrimEngine,
    "kruskal": KruskalEngine,
    "boruvka": BoruvkaEngine,
}


def minimum_spanning_tree(graph: Graph, algorithm: str = "kruskal") -> SpanningTree:
    """Dispatch a spanning-tree query by algorithm name."""
    try:
        factory = _TREE_ENGINES[algorithm]
    except KeyError:
        raise ValueError(f"Unknown spanning-tree algorithm '{algorithm}'.") from None
    return factory().minimum_spanning_tree(graph)


def run_query(graph: Graph, query: QueryConfig, coords: Mapping[Vertex, Sequence[float]]) -> Dict[str, object]:
    start = time.time()
    result: Dict[str, object] = {"name": query.name, "algorithm": query.algorithm}

    if query.algorithm == "bellman-ford":
        require_vertex(graph, query.goal, "goal")
        bf = BellmanFordEngine().shortest_paths(graph, query.source)
        path = bf.path_to(query.goal)
        result["negative_cycle"] = bf.negative_cycle
        result["path"] = list(path.path) if path else None
        result["cost"] = path.cost if path else None
    elif query.algorithm in PATH_ALGORITHMS:
        heuristic = by_name(query.heuristic, coords) if query.algorithm == "astar" else None
        path = shortest_path(graph, query.source, query.goal, query.algorithm, heuristic)
        result["path"] = list(path.path) if path else None
        result["cost"] = path.cost if path else None
    else:
        tree = minimum_spanning_tree(graph, query.algorithm)
        result["edges"] = sorted(
            ((e.source, e.destination, e.weight) for e in tree.edges),
            key=lambda e: (e[2], str(e[0]), str(e[1])),
        )
        result["total_weight"] = tree.total_weight
        result["spanning"] = tree.is_spanning

    result["duration_sec"] = time.time() - start
    logger.info("query %s (%s) done in %.6fs", query.name, query.algorithm, result["duration_sec"])
    return result


def run_queries(config_path: Path) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    graph = cfg.graph.build()
    logger.info(
        "loaded graph with %d vertices and %d edges from %s",
        len(graph),
        graph.edge_count(),
        config_path,
    )
    return [run_query(graph, q, cfg.graph.coordinates) for q in cfg.queries]


def format_result(res: Mapping[str, object]) -> str:
    head = f"[{res['name']}] {res['algorithm']}: "
    if res.get("negative_cycle"):
        return head + "negative cycle reachable from source"
    if "total_weight" in res:
        edges = ", ".join(f"{u}-{v}({w})" for u, v, w in res["edges"])  # type: ignore[union-attr]
        return head + f"weight {res['total_weight']} [{edges}]"
    if res.get("path") is None:
        return head + "no path"
    return head + " -> ".join(str(v) for v in res["path"]) + f" (cost {res['cost']})"  # type: ignore[union-attr]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run shortest-path and spanning-tree queries.")
    parser.add_argument("config", type=Path, help="YAML file with the graph and queries")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    for res in run_queries(args.config):
        print(format_result(res))


if __name__ == "__main__":
    main()
