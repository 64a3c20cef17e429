"""
MST benchmark driver

Builds a random connected graph from a three-line input file (vertex count,
seed, connection probability), then sorts its edges and computes its minimum
spanning tree with every combination of representation and algorithm,
printing the results and runtimes.
"""

import argparse
import json
import logging
import random
import sys
from dataclasses import asdict, dataclass

from check_mst import verify_mst
from edge_sorting import SortType, get_sorter, sort_graph_edges
from graph_model import Representation, build_graph
from mst_algorithms import kruskal_mst, prim_mst
from mst_errors import ConfigurationError, MSTError

# Graphs above this size only get totals and runtimes printed
PRINT_LIMIT = 10


@dataclass
class RunConfig:
    num_vertices: int
    seed: int
    p: float


def read_input_file(path):
    """Read and validate the vertex count, seed and probability"""
    try:
        with open(path, "r") as f:
            lines = [line.strip() for line in f.read().splitlines()]
    except FileNotFoundError:
        raise ConfigurationError("Input file not found")
    except OSError as e:
        raise ConfigurationError(f"Error: {e}")

    lines = [line for line in lines if line]
    if len(lines) < 3:
        raise ConfigurationError("Input file must contain n, seed and p on separate lines")

    try:
        num_vertices = int(lines[0])
        seed = int(lines[1])
    except ValueError:
        raise ConfigurationError("n and seed must be integers")

    try:
        p = float(lines[2])
    except ValueError:
        raise ConfigurationError("p must be a real number")

    return validate_config(RunConfig(num_vertices=num_vertices, seed=seed, p=p))


def validate_config(config):
    if config.num_vertices < 2:
        raise ConfigurationError("n must be greater than 1")
    if not 0.0 <= config.p <= 1.0:
        raise ConfigurationError("p must be between 0 and 1")
    return config


# ----------------------------
# Report formatting
# ----------------------------


def print_divider():
    print("=" * 35)


def format_adjacency_matrix(graph):
    width = len(str(graph.num_vertices)) + 2
    lines = ["The graph as an adjacency matrix:", ""]
    for row in graph.matrix:
        lines.append(" " + "".join(f"{weight:>{width}}" for weight in row))
    return "\n".join(lines)


def format_adjacency_list(graph):
    lines = ["The graph as an adjacency list:"]
    for vertex in graph.vertices:
        entries = "".join(
            f" {edge.connected_vertex(vertex).name}({edge.weight})" for edge in vertex.edges
        )
        lines.append(f"{vertex.name}->{entries}")
    return "\n".join(lines)


def format_dfs_info(graph):
    predecessors = ["-1" if pred is None else str(pred) for pred in graph.predecessors]
    return "\n".join(
        [
            "Depth-First Search:",
            "Vertices:",
            " " + " ".join(str(i) for i in range(graph.num_vertices)),
            "Predecessors:",
            " ".join(predecessors),
        ]
    )


def print_edges(edges, action, representation, sort_name, runtime_ms, show_edges):
    print(f"{action} WITH {representation.value} USING {sort_name}")

    total_weight = 0
    for edge in edges:
        total_weight += edge.weight
        if show_edges:
            print(f"{edge.left.name} {edge.right.name} weight = {edge.weight}")

    if action == "SORTED EDGES":
        print(f"\nTotal weight = {total_weight}")
    else:
        print(f"\nTotal weight of MST using {action.capitalize()}: {total_weight}")
    print(f"Runtime: {runtime_ms:.3f} milliseconds\n")


# ----------------------------
# Benchmark
# ----------------------------


def run_benchmark(graph, rng=None, verify=False):
    """Run every sort, Kruskal and Prim combination and print the results"""
    show_edges = graph.num_vertices <= PRINT_LIMIT
    results = {"sorts": [], "kruskal": [], "prim": [], "verification": []}

    for representation in Representation:
        for sort_type in SortType:
            sorter = get_sorter(sort_type, rng=rng)
            sorted_result = sort_graph_edges(sorter, graph, representation)
            print_divider()
            print_edges(
                sorted_result.edges,
                "SORTED EDGES",
                representation,
                sort_type.value,
                sorted_result.elapsed_ms,
                show_edges,
            )
            results["sorts"].append(
                {
                    "representation": representation.value,
                    "sort": sort_type.value,
                    "num_edges": len(sorted_result.edges),
                    "runtime_ms": sorted_result.elapsed_ms,
                }
            )

    mst_results = []
    for representation in Representation:
        for sort_type in SortType:
            result = kruskal_mst(graph, representation, sort_type, rng=rng)
            print_divider()
            print_edges(
                result.edges,
                result.algorithm,
                representation,
                sort_type.value,
                result.elapsed_ms,
                show_edges,
            )
            mst_results.append(result)
            results["kruskal"].append(summarize(result))

    for representation in Representation:
        result = prim_mst(graph, representation)
        print_divider()
        print_edges(
            result.edges,
            result.algorithm,
            representation,
            "INDEXED MIN PQ",
            result.elapsed_ms,
            show_edges,
        )
        mst_results.append(result)
        results["prim"].append(summarize(result))

    if verify:
        results["verification"] = print_verification(graph, mst_results)

    return results, mst_results


def summarize(result):
    return {
        "algorithm": result.algorithm,
        "representation": result.representation.value,
        "sort": result.sort_type.value if result.sort_type else None,
        "mst_weight": result.total_weight,
        "num_edges": len(result.edges),
        "runtime_ms": result.elapsed_ms,
    }


def print_verification(graph, mst_results):
    print("\n" + "=" * 70)
    print(" " * 25 + "VERIFICATION")
    print("=" * 70)
    print(f"{'Algorithm':<10} {'Graph':<8} {'Sort':<16} {'MST Wt':<8} {'NX Wt':<8} {'Status':<10}")
    print("-" * 70)

    checks = []
    for result in mst_results:
        check = verify_mst(graph, result)
        status = "✓ PASS" if check["is_correct"] else "✗ FAIL"
        print(
            f"{check['algorithm']:<10} {check['representation']:<8} "
            f"{check['sort'] or '-':<16} {check['mst_weight']:<8} "
            f"{check['networkx_weight']:<8} {status:<10}"
        )
        checks.append(check)

    return checks


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Benchmark edge sorts and Kruskal/Prim MSTs on a random connected graph"
    )
    parser.add_argument(
        "input_file", help="File with three lines: vertex count, seed, connection probability"
    )
    parser.add_argument(
        "--verify", action="store_true", help="Check every MST against NetworkX"
    )
    parser.add_argument(
        "--plot", type=str, default=None, help="Save a picture of the graph and its MST"
    )
    parser.add_argument(
        "--results-json", type=str, default=None, help="Save weights and runtimes as JSON"
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many disconnected graphs (default: retry forever)",
    )
    parser.add_argument(
        "--seed-quicksort",
        type=int,
        default=None,
        help="Seed for the quicksort shuffle (default: unseeded)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = read_input_file(args.input_file)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        graph = build_graph(
            config.num_vertices, config.seed, config.p, max_attempts=args.max_attempts
        )

        print(f"TEST: n={config.num_vertices}, seed={config.seed}, p={config.p}")
        print(f"Time to generate the graph: {graph.generation_time_ms:.3f} milliseconds")

        if graph.num_vertices <= PRINT_LIMIT:
            print("\n" + format_adjacency_matrix(graph))
            print("\n" + format_adjacency_list(graph))
            print("\n" + format_dfs_info(graph) + "\n")

        rng = random.Random(args.seed_quicksort) if args.seed_quicksort is not None else None
        results, mst_results = run_benchmark(graph, rng=rng, verify=args.verify)
    except MSTError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.plot:
        from visualize_mst import visualize

        visualize(graph, mst_results[0], args.plot)
        print(f"\nVisualization saved to {args.plot}")

    if args.results_json:
        summary = {
            "config": asdict(config),
            "num_edges": graph.edge_count,
            "generation_attempts": graph.attempts,
            "generation_time_ms": graph.generation_time_ms,
            **results,
        }
        with open(args.results_json, "w") as f:
            json.dump(summary, f, indent=2)
        print(f"Results saved to: {args.results_json}")

    if args.verify and not all(check["is_correct"] for check in results["verification"]):
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
