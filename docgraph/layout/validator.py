"""Validation of relationship endpoints against the declared documents."""

from typing import Sequence

from loguru import logger

from docgraph.domain.graph import DocumentId, Relationship


class InvalidReferenceError(ValueError):
    """Raised when a relationship refers to a document that was not declared."""

    def __init__(self, invalid_references: list[Relationship]):
        self.invalid_references = invalid_references
        pairs = ", ".join(f"{rel.from_} -> {rel.to}" for rel in invalid_references)
        super().__init__(f"Invalid document references in relationships: {pairs}")


def validate_references(
    documents: Sequence[DocumentId], relationships: Sequence[Relationship]
) -> None:
    """Check that every relationship endpoint is one of the documents.

    Args:
        documents: Declared document filenames
        relationships: Relationships to check, in request order

    Raises:
        InvalidReferenceError: If any relationship has an undeclared endpoint
    """
    document_set = set(documents)
    invalid_references = [
        rel for rel in relationships if rel.from_ not in document_set or rel.to not in document_set
    ]

    if invalid_references:
        logger.warning(f"Rejecting {len(invalid_references)} invalid relationship references")
        raise InvalidReferenceError(invalid_references)
