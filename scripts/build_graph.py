"""CLI for laying out a document relation graph from a JSON request"""

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from docgraph.config import settings
from docgraph.domain.graph import GraphRequest
from docgraph.layout import DocumentGraphBuilder, InvalidReferenceError


def main(request_file: str | None, output_file: str | None, indent: int | None) -> int:
    raw = Path(request_file).read_text() if request_file else sys.stdin.read()

    try:
        request = GraphRequest.model_validate_json(raw)
        graph = DocumentGraphBuilder().build(request)
    except (InvalidReferenceError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = graph.model_dump_json(by_alias=True, indent=indent)
    if output_file:
        Path(output_file).write_text(output)
        logger.info(f"Wrote graph with {len(graph.nodes)} nodes to {output_file}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--request",
        type=str,
        required=False,
        help="JSON file with documents and relationships, read from stdin if omitted",
    )
    parser.add_argument(
        "--output", type=str, required=False, help="Output file, printed to stdout if omitted"
    )
    parser.add_argument("--indent", type=int, required=False, help="JSON indentation")

    args = parser.parse_args()

    sys.exit(main(request_file=args.request, output_file=args.output, indent=args.indent))
