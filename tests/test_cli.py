from __future__ import annotations

from rdflib import Graph, URIRef

from shacl_form.__main__ import _first_node_shape, _load_graph, main

from .conftest import SHAPES_TTL


def test_first_node_shape(shapes_graph):
    assert _first_node_shape(shapes_graph) == URIRef("http://example.org/PaintShape")
    assert _first_node_shape(Graph()) is None


def test_load_graph_guesses_format(tmp_path):
    path = tmp_path / "shapes.ttl"
    path.write_text(SHAPES_TTL, encoding="utf-8")
    assert len(_load_graph(str(path))) > 0


def test_main_without_node_shape_fails(tmp_path, caplog):
    path = tmp_path / "empty.ttl"
    path.write_text("@prefix ex: <http://example.org/> .\nex:a ex:b ex:c .\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "No sh:NodeShape found" in caplog.text
