from __future__ import annotations

import pytest
from pydantic import ValidationError
from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF, SH, XSD

from shacl_form.exceptions import ShapeError
from shacl_form.models import PropertySpec

EX = "http://example.org/"


def _property_node(graph: Graph, path: str) -> BNode:
    for node in graph.objects(URIRef(EX + "PaintShape"), SH.property):
        if graph.value(node, SH.path) == URIRef(path):
            return node
    raise AssertionError(f"no property shape for {path}")


def test_from_shape_reads_constraints(shapes_graph):
    spec = PropertySpec.from_shape(shapes_graph, _property_node(shapes_graph, EX + "litres"))
    assert spec.path == EX + "litres"
    assert spec.datatype == XSD.integer
    assert spec.min_inclusive == 0
    assert spec.max_exclusive == 10
    assert spec.min_exclusive is None
    assert spec.label == "Litres"
    assert spec.order == 3.0
    assert not spec.required


def test_from_shape_prefers_requested_language(shapes_graph):
    node = _property_node(shapes_graph, EX + "name")
    assert PropertySpec.from_shape(shapes_graph, node, "de").label == "Name des Produkts"
    spec = PropertySpec.from_shape(shapes_graph, node, "en-GB")
    assert spec.label == "Name"
    assert spec.required
    assert spec.max_length == 40
    assert spec.group == EX + "BasicGroup"


def test_from_shape_lists_and_flags(shapes_graph):
    notes = PropertySpec.from_shape(shapes_graph, _property_node(shapes_graph, EX + "notes"))
    assert notes.language_in == ("en", "de")
    assert notes.single_line is False
    assert notes.description == "Free text notes"
    assert notes.datatype == RDF.langString

    color = PropertySpec.from_shape(shapes_graph, _property_node(shapes_graph, EX + "color"))
    assert color.shacl_in == EX + "colorList"
    assert color.node_class == URIRef(EX + "Color")
    assert color.wants_iri


def test_from_shape_without_path_raises(shapes_graph):
    node = next(
        n for n in shapes_graph.objects(URIRef(EX + "PaintShape"), SH.property)
        if shapes_graph.value(n, SH.path) is None
    )
    with pytest.raises(ShapeError):
        PropertySpec.from_shape(shapes_graph, node)


def test_from_shape_default_value():
    graph = Graph()
    node = BNode()
    graph.add((node, SH.path, URIRef(EX + "p")))
    graph.add((node, SH.defaultValue, Literal("true", datatype=XSD.boolean)))
    graph.add((node, SH.nodeKind, SH.IRI))
    spec = PropertySpec.from_shape(graph, node)
    assert spec.default_value == Literal("true", datatype=XSD.boolean)
    assert spec.node_kind_is_iri


def test_spec_is_immutable():
    spec = PropertySpec(path=EX + "p")
    with pytest.raises(ValidationError):
        spec.path = EX + "q"


def test_display_label_uses_local_name():
    assert PropertySpec(path=EX + "vocab#title").display_label == "title"
    assert PropertySpec(path="urn:x:thing").display_label == "thing"
    assert PropertySpec(path=EX + "p", label="Pretty").display_label == "Pretty"
