from typing import Sequence

from docgraph.domain.graph import GraphEdge, Relationship

ANIMATION_THRESHOLD = 50


def synthesize_edges(
    relationships: Sequence[Relationship],
    node_count: int,
    animation_threshold: int = ANIMATION_THRESHOLD,
) -> list[GraphEdge]:
    """Build one edge per relationship, in relationship order.

    The relationship index is part of the edge id so repeated pairs stay unique.
    Animation is disabled for every edge once the graph has more than
    `animation_threshold` nodes.
    """
    should_animate = node_count <= animation_threshold

    return [
        GraphEdge(
            id=f"e-{rel.from_}-{rel.to}-{index}",
            source=rel.from_,
            target=rel.to,
            label=rel.type,
            animated=should_animate,
        )
        for index, rel in enumerate(relationships)
    ]
