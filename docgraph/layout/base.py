from typing import Protocol, Sequence

from docgraph.domain.graph import DocumentId, GraphNode, LayoutAlgorithm, Relationship


class LayoutEngine(Protocol):
    """Protocol for engines that position document nodes."""

    name: LayoutAlgorithm

    def layout(
        self, documents: Sequence[DocumentId], relationships: Sequence[Relationship]
    ) -> list[GraphNode]:
        """Position one node per document."""
        ...
