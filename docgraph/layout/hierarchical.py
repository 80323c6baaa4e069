"""Layered left-to-right layout for documents with relationships."""

from typing import Sequence

from loguru import logger

from docgraph.domain.graph import DocumentId, GraphNode, LayoutAlgorithm, Relationship

LAYER_WIDTH = 300
NODE_SPACING = 120


class HierarchicalLayout:
    """Arranges documents in layers from left to right based on their dependencies.

    Layers are found by breadth-first topological reduction. Documents that are
    never reduced to zero incoming relationships (cycle members and anything only
    reachable through a cycle) are placed together in one final layer.
    """

    name: LayoutAlgorithm = "hierarchical"

    def __init__(self, layer_width: float = LAYER_WIDTH, node_spacing: float = NODE_SPACING):
        """Initialize the layout.

        Args:
            layer_width: Horizontal distance between consecutive layers
            node_spacing: Vertical distance between nodes in the same layer
        """
        self.layer_width = layer_width
        self.node_spacing = node_spacing

    def layout(
        self, documents: Sequence[DocumentId], relationships: Sequence[Relationship]
    ) -> list[GraphNode]:
        """Position documents layer by layer.

        Args:
            documents: Document filenames; their order breaks all ties
            relationships: Validated relationships between the documents

        Returns:
            One node per document, ordered layer by layer
        """
        nodes = []
        for layer_index, layer in enumerate(self.compute_layers(documents, relationships)):
            layer_height = (len(layer) - 1) * self.node_spacing
            start_y = -layer_height / 2

            for node_index, filename in enumerate(layer):
                nodes.append(
                    GraphNode.for_document(
                        filename,
                        x=layer_index * self.layer_width,
                        y=start_y + node_index * self.node_spacing,
                    )
                )

        return nodes

    def compute_layers(
        self, documents: Sequence[DocumentId], relationships: Sequence[Relationship]
    ) -> list[list[DocumentId]]:
        """Assign documents to layers using topological sorting.

        Args:
            documents: Document filenames in input order
            relationships: Validated relationships between the documents

        Returns:
            Ordered layers, the last one holding any documents left on cycles
        """
        incoming: dict[DocumentId, int] = {}
        outgoing: dict[DocumentId, dict[DocumentId, None]] = {}
        for doc in documents:
            incoming[doc] = 0
            outgoing[doc] = {}

        for rel in relationships:
            incoming[rel.to] = incoming.get(rel.to, 0) + 1
            # dict keys keep insertion order and drop repeated pairs
            outgoing.setdefault(rel.from_, {})[rel.to] = None

        layers: list[list[DocumentId]] = []
        assigned: set[DocumentId] = set()
        frontier = [doc for doc in documents if incoming[doc] == 0]

        while frontier:
            current_layer = frontier
            frontier = []
            layers.append(current_layer)

            for node in current_layer:
                assigned.add(node)
                for target in outgoing.get(node, {}):
                    incoming[target] -= 1
                    if incoming[target] == 0 and target not in assigned:
                        frontier.append(target)

        remaining = [doc for doc in documents if doc not in assigned]
        if remaining:
            logger.debug(f"Placing {len(remaining)} documents on cycles in a final layer")
            layers.append(remaining)

        logger.debug(f"Assigned {len(documents)} documents to {len(layers)} layers")
        return layers
