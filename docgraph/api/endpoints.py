from fastapi import APIRouter, HTTPException
from loguru import logger

from docgraph.domain.graph import GraphRequest, RelationGraph
from docgraph.layout import DocumentGraphBuilder, InvalidReferenceError
from docgraph.tools import get_tool_definition


def _create_graph_endpoint(builder: DocumentGraphBuilder):
    """Create the document relation graph endpoint handler."""

    async def build_graph(graph_request: GraphRequest) -> RelationGraph:
        """Lay out the requested documents and their relationships."""
        try:
            return builder.build(graph_request)
        except InvalidReferenceError as e:
            logger.error(f"Error building graph: {str(e)}")
            raise HTTPException(status_code=400, detail=str(e)) from e

    return build_graph


def get_endpoints_router(*, builder: DocumentGraphBuilder) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/api/tools/document-relation-graph")
    async def tool_definition():
        return get_tool_definition()

    router.post("/api/graphs/document-relations", response_model=RelationGraph)(
        _create_graph_endpoint(builder)
    )

    return router
