from __future__ import annotations

import os

import pytest

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from rdflib import Graph  # noqa: E402

SHAPES_TTL = """
@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix dash: <http://datashapes.org/dash#> .
@prefix ex: <http://example.org/> .

ex:colorList rdf:first ex:Red ; rdf:rest ( ex:Blue ) .
ex:Red rdfs:label "Red"@en, "Rot"@de .
ex:Blue rdfs:label "Blue"@en, "Blau"@de .

ex:BasicGroup a sh:PropertyGroup ;
    rdfs:label "Basics"@en, "Grunddaten"@de ;
    sh:order 0 .

ex:PaintShape a sh:NodeShape ;
    sh:targetClass ex:Paint ;
    sh:property [
        sh:path ex:name ;
        sh:name "Name"@en, "Name des Produkts"@de ;
        sh:datatype xsd:string ;
        sh:minCount 1 ;
        sh:maxLength 40 ;
        sh:group ex:BasicGroup ;
        sh:order 1 ;
    ] , [
        sh:path ex:color ;
        sh:name "Color" ;
        sh:in ex:colorList ;
        sh:class ex:Color ;
        sh:order 2 ;
    ] , [
        sh:path ex:litres ;
        sh:name "Litres" ;
        sh:datatype xsd:integer ;
        sh:minInclusive 0 ;
        sh:maxExclusive 10 ;
        sh:order 3 ;
    ] , [
        sh:path ex:produced ;
        sh:datatype xsd:date ;
        sh:order 4 ;
    ] , [
        sh:path ex:glossy ;
        sh:datatype xsd:boolean ;
        sh:order 5 ;
    ] , [
        sh:path ex:notes ;
        sh:datatype rdf:langString ;
        sh:languageIn ( "en" "de" ) ;
        dash:singleLine false ;
        sh:description "Free text notes" ;
        sh:order 6 ;
    ] , [
        sh:name "broken, no path" ;
    ] .
"""


@pytest.fixture(scope="session")
def qt_app():
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance()
    if app is None:
        app = widgets.QApplication([])
    return app


@pytest.fixture
def shapes_graph() -> Graph:
    graph = Graph()
    graph.parse(data=SHAPES_TTL, format="turtle")
    return graph


@pytest.fixture
def config(shapes_graph):
    from shacl_form.config import Config

    cfg = Config.from_attributes({"language": "en"})
    cfg.shapes_graph = shapes_graph
    return cfg
