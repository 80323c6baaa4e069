"""Grid layout used when there are no relationships to follow."""

import math
from typing import Sequence

from docgraph.domain.graph import DocumentId, GraphNode, LayoutAlgorithm, Relationship

GRID_SPACING_X = 250
GRID_SPACING_Y = 150


class GridLayout:
    """Places documents row by row on a square-ish grid."""

    name: LayoutAlgorithm = "grid"

    def __init__(self, spacing_x: float = GRID_SPACING_X, spacing_y: float = GRID_SPACING_Y):
        self.spacing_x = spacing_x
        self.spacing_y = spacing_y

    def layout(
        self,
        documents: Sequence[DocumentId],
        relationships: Sequence[Relationship] = (),  # noqa: ARG002
    ) -> list[GraphNode]:
        columns = math.ceil(math.sqrt(len(documents)))

        return [
            GraphNode.for_document(
                filename,
                x=(index % columns) * self.spacing_x,
                y=(index // columns) * self.spacing_y,
            )
            for index, filename in enumerate(documents)
        ]
