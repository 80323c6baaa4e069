"""Layout engines for turning documents and relationships into positioned graphs."""

from docgraph.layout.builder import DocumentGraphBuilder, build_document_graph
from docgraph.layout.edges import synthesize_edges
from docgraph.layout.grid import GridLayout
from docgraph.layout.hierarchical import HierarchicalLayout
from docgraph.layout.validator import InvalidReferenceError, validate_references

__all__ = [
    "DocumentGraphBuilder",
    "GridLayout",
    "HierarchicalLayout",
    "InvalidReferenceError",
    "build_document_graph",
    "synthesize_edges",
    "validate_references",
]
