import pytest
from fastapi.testclient import TestClient

from docgraph.api import create_app
from docgraph.domain.graph import GraphRequest
from docgraph.layout import DocumentGraphBuilder
from tests.factories import rel


@pytest.fixture
def builder() -> DocumentGraphBuilder:
    return DocumentGraphBuilder()


@pytest.fixture
def chained_request() -> GraphRequest:
    """Request with a small branching chain: a -> b, a -> c, b -> d, c -> d."""
    return GraphRequest(
        documents=["a.pdf", "b.pdf", "c.pdf", "d.pdf"],
        relationships=[
            rel("a.pdf", "b.pdf"),
            rel("a.pdf", "c.pdf"),
            rel("b.pdf", "d.pdf"),
            rel("c.pdf", "d.pdf"),
        ],
    )


@pytest.fixture
def test_client(builder: DocumentGraphBuilder) -> TestClient:
    """Create test client backed by a default builder."""
    app = create_app(builder=builder)
    return TestClient(app)
