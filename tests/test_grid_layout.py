"""Tests for the grid layout."""

from docgraph.layout import GridLayout


def positions(nodes) -> dict[str, tuple[float, float]]:
    return {node.id: (node.position.x, node.position.y) for node in nodes}


def test_three_documents_use_two_columns() -> None:
    nodes = GridLayout().layout(["a", "b", "c"])

    assert positions(nodes) == {"a": (0, 0), "b": (250, 0), "c": (0, 150)}


def test_single_document_at_origin() -> None:
    nodes = GridLayout().layout(["only.pdf"])

    assert len(nodes) == 1
    assert (nodes[0].position.x, nodes[0].position.y) == (0, 0)
    assert nodes[0].data.label == "only"
    assert nodes[0].draggable is True


def test_row_major_order_for_perfect_square() -> None:
    documents = [f"d{i}" for i in range(9)]
    nodes = GridLayout().layout(documents)

    assert [node.id for node in nodes] == documents
    assert positions(nodes)["d2"] == (500, 0)
    assert positions(nodes)["d3"] == (0, 150)
    assert positions(nodes)["d8"] == (500, 300)


def test_columns_grow_past_square() -> None:
    nodes = GridLayout().layout([f"d{i}" for i in range(10)])

    # ceil(sqrt(10)) == 4 columns
    assert positions(nodes)["d3"] == (750, 0)
    assert positions(nodes)["d4"] == (0, 150)
    assert positions(nodes)["d9"] == (250, 300)


def test_custom_spacing() -> None:
    nodes = GridLayout(spacing_x=10, spacing_y=20).layout(["a", "b", "c", "d"])

    assert positions(nodes) == {"a": (0, 0), "b": (10, 0), "c": (0, 20), "d": (10, 20)}
