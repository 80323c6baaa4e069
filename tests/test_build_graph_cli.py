"""Tests for the build_graph CLI."""

import json
from pathlib import Path

import pytest

from scripts.build_graph import main


@pytest.fixture
def request_file(tmp_path: Path) -> Path:
    path = tmp_path / "request.json"
    path.write_text(
        json.dumps(
            {
                "documents": ["a.pdf", "b.pdf"],
                "relationships": [{"from": "a.pdf", "to": "b.pdf", "type": "refers"}],
            }
        )
    )
    return path


def test_writes_graph_to_output_file(request_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "graph.json"

    assert main(request_file=str(request_file), output_file=str(output), indent=2) == 0

    graph = json.loads(output.read_text())
    assert graph["metadata"]["layoutAlgorithm"] == "hierarchical"
    assert [node["id"] for node in graph["nodes"]] == ["a.pdf", "b.pdf"]


def test_prints_graph_to_stdout(request_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(request_file=str(request_file), output_file=None, indent=None) == 0

    graph = json.loads(capsys.readouterr().out)
    assert graph["edges"][0]["id"] == "e-a.pdf-b.pdf-0"


def test_invalid_reference_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps({"documents": ["a"], "relationships": [{"from": "a", "to": "x", "type": "t"}]})
    )

    assert main(request_file=str(path), output_file=None, indent=None) == 1
    assert "a -> x" in capsys.readouterr().err
