#!/usr/bin/env python3
"""
Graph Generation CLI

Generates a depth-layered graph with grey, green, yellow and red edges
and writes it as JSON (or GraphML).

Usage:
    # Basic generation
    python generate_graph.py --depth 4 --new-vertices 3 --output graph.json

    # Reproducible run
    python generate_graph.py -d 6 -n 2 --seed 42

    # Interactive: prompts for whatever is missing
    python generate_graph.py

    # Preview without printing the JSON document
    python generate_graph.py -d 4 -n 3 --preview --quiet
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

from depthgraph.config import Settings
from depthgraph.core import GraphExporter, generate_graph


# =============================================================================
# Terminal Colors
# =============================================================================

class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    END = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    @classmethod
    def disable(cls):
        for attr in ['HEADER', 'BLUE', 'CYAN', 'GREEN', 'RED', 'END', 'BOLD', 'DIM']:
            setattr(cls, attr, '')


def use_colors() -> bool:
    """Check if terminal supports colors"""
    return hasattr(sys.stdout, 'isatty') and sys.stdout.isatty() and not os.getenv('NO_COLOR')


# =============================================================================
# Output Helpers
# =============================================================================

def print_header(text: str) -> None:
    print(f"\n{Colors.HEADER}{Colors.BOLD}{'='*60}{Colors.END}")
    print(f"{Colors.HEADER}{Colors.BOLD}{text:^60}{Colors.END}")
    print(f"{Colors.HEADER}{Colors.BOLD}{'='*60}{Colors.END}")


def print_section(title: str) -> None:
    print(f"\n{Colors.CYAN}{Colors.BOLD}{title}{Colors.END}")
    print(f"{Colors.DIM}{'-'*40}{Colors.END}")


def print_kv(key: str, value, indent: int = 2) -> None:
    print(f"{' '*indent}{Colors.BLUE}{key}:{Colors.END} {value}")


def print_success(text: str) -> None:
    print(f"{Colors.GREEN}✓{Colors.END} {text}")


def print_error(text: str) -> None:
    print(f"{Colors.RED}✗{Colors.END} {text}", file=sys.stderr)


# =============================================================================
# Input
# =============================================================================

def parse_non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"negative value: {value}")
    return value


def non_negative_int(text: str) -> int:
    """argparse type for counts and depths"""
    try:
        return parse_non_negative_int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text!r}")


def prompt_non_negative_int(label: str, read: Optional[Callable[[str], str]] = None) -> int:
    """Ask until the answer is a non-negative integer"""
    read = read or input
    while True:
        try:
            return parse_non_negative_int(read(f"{label}: ").strip())
        except ValueError:
            print("Invalid value")


# =============================================================================
# Preview Graph
# =============================================================================

def preview_graph(stats: dict) -> None:
    """Print graph summary"""
    print_header("Graph Preview")

    print_section("Summary")
    print_kv("Depth", stats.get("depth", 0))
    print_kv("Vertices", stats.get("num_vertices", 0))
    print_kv("Edges", stats.get("num_edges", 0))

    print_section("Edges by Color")
    for color, count in stats.get("edges_by_color", {}).items():
        print_kv(color, count)

    vertices_by_depth = stats.get("vertices_by_depth", {})
    if vertices_by_depth:
        print_section("Vertices by Depth")
        for depth, count in vertices_by_depth.items():
            print_kv(f"Layer {depth}", count)

    print()


# =============================================================================
# Main
# =============================================================================

def parse_args(argv: Optional[list] = None, settings: Optional[Settings] = None):
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        description="Generate depth-layered graphs with colored edges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python generate_graph.py --depth 4 --new-vertices 3 --output graph.json
    python generate_graph.py -d 6 -n 2 --seed 42 --format graphml -o graph.graphml
    python generate_graph.py -d 4 -n 3 --preview --quiet
        """,
    )

    # Generation options
    parser.add_argument(
        "--depth", "-d",
        type=non_negative_int,
        help="Target depth (prompted for when omitted)",
    )
    parser.add_argument(
        "--new-vertices", "-n",
        type=non_negative_int,
        help="New vertices tried per vertex and layer (prompted for when omitted)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Random seed for reproducibility",
    )

    # Output options
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path(settings.output_path),
        help=f"Output file path (default: {settings.output_path})",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["json", "graphml"],
        default="json",
        help="Output file format (default: json)",
    )
    parser.add_argument(
        "--indent",
        type=non_negative_int,
        default=settings.json_indent,
        help="JSON indentation (default: compact)",
    )
    parser.add_argument(
        "--preview", "-p",
        action="store_true",
        help="Print a graph summary",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the JSON document",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print_error(str(e))
        return 1

    args = parse_args(argv, settings)

    # Handle colors
    if args.no_color or not use_colors():
        Colors.disable()

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.getLevelName(settings.log_level)
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        depth = args.depth if args.depth is not None else prompt_non_negative_int("Depth")
        new_vertices = (
            args.new_vertices if args.new_vertices is not None
            else prompt_non_negative_int("Vertices count")
        )
    except (EOFError, KeyboardInterrupt):
        print_error("Input aborted")
        return 1

    try:
        graph = generate_graph(
            target_depth=depth,
            new_vertices_per_step=new_vertices,
            seed=args.seed,
        )

        exporter = GraphExporter()
        if not args.quiet:
            print(exporter.to_json(graph, indent=args.indent))

        if args.preview:
            preview_graph(graph.get_statistics())

        if args.format == "graphml":
            exporter.export_to_graphml(graph, str(args.output))
        else:
            exporter.export_to_json(graph, str(args.output), indent=args.indent)

        if not args.quiet:
            print_success(f"Graph saved to {args.output}")

        return 0

    except Exception as e:
        print_error(f"Generation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
