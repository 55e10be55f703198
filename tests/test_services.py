from __future__ import annotations

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDFS, SKOS

from shacl_form.services import create_input_list_entries, find_label

EX = "http://example.org/"


def _graph() -> Graph:
    graph = Graph()
    graph.add((URIRef(EX + "a"), RDFS.label, Literal("Apple", lang="en")))
    graph.add((URIRef(EX + "a"), RDFS.label, Literal("Apfel", lang="de")))
    graph.add((URIRef(EX + "b"), SKOS.prefLabel, Literal("Banana")))
    graph.add((URIRef(EX + "c"), RDFS.label, Literal("Cerise", lang="fr")))
    return graph


def test_find_label_language_preference():
    graph = _graph()
    assert find_label(graph, URIRef(EX + "a"), "de") == "Apfel"
    assert find_label(graph, URIRef(EX + "a"), "en-US") == "Apple"
    assert find_label(graph, URIRef(EX + "b"), "en") == "Banana"
    assert find_label(graph, URIRef(EX + "c"), "en") is None


def test_entries_keep_list_order_and_fall_back_to_value():
    graph = _graph()
    terms = [URIRef(EX + "c"), URIRef(EX + "a"), Literal("raw"), BNode()]
    entries = create_input_list_entries(terms, graph, "en")
    assert [entry.value for entry in entries] == [URIRef(EX + "c"), URIRef(EX + "a"), Literal("raw")]
    assert [entry.label for entry in entries] == [EX + "c", "Apple", "raw"]
