"""Document relation graph domain models."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DocumentId = str
LayoutAlgorithm = Literal["hierarchical", "grid"]

_EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")


def strip_extension(filename: DocumentId) -> str:
    """Remove the trailing file extension from a filename, if it has one."""
    return _EXTENSION_PATTERN.sub("", filename)


class GraphModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Relationship(GraphModel):
    """A directed, typed relationship between two documents."""

    from_: DocumentId = Field(..., alias="from", description="Source document filename")
    to: DocumentId = Field(..., description="Target document filename")
    type: str = Field(
        ...,
        description=(
            "Relationship type (free-form label, e.g., 'mengubah', 'mencabut', 'melengkapi')"
        ),
    )


class GraphRequest(GraphModel):
    """Documents to lay out and the relationships between them."""

    documents: list[DocumentId] = Field(
        ...,
        min_length=1,
        description="Array of document filenames (e.g., ['doc-a.pdf', 'doc-b.pdf'])",
    )
    relationships: list[Relationship] = Field(
        default=[], description="Array of relationship definitions between documents"
    )


class Position(GraphModel):
    x: float
    y: float


class NodeData(GraphModel):
    label: str
    filename: DocumentId


class GraphNode(GraphModel):
    """A positioned document node."""

    id: DocumentId
    position: Position
    data: NodeData
    draggable: bool = True

    @classmethod
    def for_document(cls, filename: DocumentId, x: float, y: float) -> "GraphNode":
        return cls(
            id=filename,
            position=Position(x=x, y=y),
            data=NodeData(label=strip_extension(filename), filename=filename),
            draggable=True,
        )


class GraphEdge(GraphModel):
    """An edge drawn for a single relationship."""

    id: str
    source: DocumentId
    target: DocumentId
    label: str | None = None
    animated: bool = False


class LayoutMetadata(GraphModel):
    document_count: int
    relationship_count: int
    layout_algorithm: LayoutAlgorithm


class RelationGraph(GraphModel):
    """Represents the complete positioned graph returned for a request.

    Attributes:
        nodes: One node per requested document, in layout order
        edges: One edge per relationship, in request order
        metadata: Counts and the layout algorithm that was used
    """

    nodes: list[GraphNode]
    edges: list[GraphEdge]
    metadata: LayoutMetadata
