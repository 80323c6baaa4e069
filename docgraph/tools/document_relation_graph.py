"""Tool definition exposing the graph builder to an LLM chat."""

from typing import Any

from docgraph.domain.graph import GraphRequest
from docgraph.layout.builder import DocumentGraphBuilder

TOOL_NAME = "document_relation_graph"
TOOL_DESCRIPTION = (
    "Generate a visual relationship graph between documents. Returns a graph in "
    "@xyflow/react format showing documents as nodes and relationships as edges. "
    "Use this when users ask to visualize document relationships, dependencies, or connections."
)


def get_tool_definition() -> dict[str, Any]:
    """Tool definition in the format accepted by the Anthropic messages API."""
    return {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "input_schema": GraphRequest.model_json_schema(by_alias=True),
    }


def execute_tool(
    arguments: dict[str, Any], builder: DocumentGraphBuilder | None = None
) -> dict[str, Any]:
    """Run the tool on the arguments of a tool call.

    Args:
        arguments: Tool input with `documents` and `relationships`
        builder: Builder to use, defaults to one configured from settings

    Returns:
        The graph as a JSON-compatible dict with camelCase keys

    Raises:
        pydantic.ValidationError: If the arguments do not match the input schema
        InvalidReferenceError: If a relationship names an undeclared document
    """
    request = GraphRequest.model_validate(arguments)
    graph = (builder or DocumentGraphBuilder()).build(request)
    return graph.model_dump(mode="json", by_alias=True)
