"""Building positioned relation graphs from document requests."""

from typing import Sequence

from loguru import logger

from docgraph.config import settings
from docgraph.domain.graph import (
    DocumentId,
    GraphRequest,
    LayoutMetadata,
    RelationGraph,
    Relationship,
)

from .base import LayoutEngine
from .edges import synthesize_edges
from .grid import GridLayout
from .hierarchical import HierarchicalLayout
from .validator import validate_references


class DocumentGraphBuilder:
    """Builds relation graphs: validates, lays out nodes and synthesizes edges."""

    def __init__(
        self,
        *,
        hierarchical: LayoutEngine | None = None,
        grid: LayoutEngine | None = None,
        animation_threshold: int | None = None,
    ):
        """Initialize the builder with its layout engines.

        Args:
            hierarchical: Engine used when the request has relationships
            grid: Engine used when the request has no relationships
            animation_threshold: Largest node count that still gets animated edges
        """
        self.hierarchical = hierarchical or HierarchicalLayout(
            layer_width=settings.layer_width, node_spacing=settings.node_spacing
        )
        self.grid = grid or GridLayout(
            spacing_x=settings.grid_spacing_x, spacing_y=settings.grid_spacing_y
        )
        self.animation_threshold = (
            settings.animation_threshold if animation_threshold is None else animation_threshold
        )

    def build(self, request: GraphRequest) -> RelationGraph:
        """Build the relation graph for a request.

        Args:
            request: Documents and the relationships between them

        Returns:
            RelationGraph with positioned nodes, edges and layout metadata

        Raises:
            InvalidReferenceError: If a relationship names an undeclared document
        """
        documents = request.documents
        relationships = request.relationships

        validate_references(documents, relationships)

        engine = self.select_engine(relationships)
        nodes = engine.layout(documents, relationships)
        edges = synthesize_edges(
            relationships, node_count=len(nodes), animation_threshold=self.animation_threshold
        )

        logger.debug(
            f"Built {engine.name} graph with {len(nodes)} nodes and {len(edges)} edges"
        )

        return RelationGraph(
            nodes=nodes,
            edges=edges,
            metadata=LayoutMetadata(
                document_count=len(documents),
                relationship_count=len(relationships),
                layout_algorithm=engine.name,
            ),
        )

    def select_engine(self, relationships: Sequence[Relationship]) -> LayoutEngine:
        return self.hierarchical if relationships else self.grid


def build_document_graph(
    documents: Sequence[DocumentId],
    relationships: Sequence[Relationship | dict] = (),
) -> RelationGraph:
    """Validate and lay out documents with the default settings.

    Relationships may be given as models or as dicts with `from`, `to` and `type` keys.
    """
    request = GraphRequest(documents=list(documents), relationships=list(relationships))
    return DocumentGraphBuilder().build(request)
