from __future__ import annotations

from rdflib import Graph, URIRef

from shacl_form.config import LANGUAGE_ENV, Config, extract_lists

EX = "http://example.org/"


def test_shapes_graph_assignment_extracts_lists_and_groups(config):
    assert config.lists[EX + "colorList"] == [URIRef(EX + "Red"), URIRef(EX + "Blue")]
    # the sh:languageIn list is a list too, tails are not
    assert len(config.lists) == 2
    assert config.groups == [EX + "BasicGroup"]


def test_new_shapes_graph_rebuilds_caches(config):
    assert config.list_entries(EX + "colorList")
    config.shapes_graph = Graph()
    assert config.lists == {}
    assert config.groups == []
    assert config.list_entries(EX + "colorList") == []


def test_list_entries_are_cached_per_language(config):
    first = config.list_entries(EX + "colorList")
    assert config.list_entries(EX + "colorList") is first
    assert [entry.label for entry in first] == ["Red", "Blue"]
    config.language = "de"
    assert [entry.label for entry in config.list_entries(EX + "colorList")] == ["Rot", "Blau"]


def test_from_attributes_accepts_data_and_camel_case_keys():
    config = Config.from_attributes(
        {
            "data-shape-subject": EX + "PaintShape",
            "valueSubject": EX + "paint1",
            "submit_button": "Save",
            "data-unknown": "ignored",
            "language": "de",
        }
    )
    assert config.shape_subject == EX + "PaintShape"
    assert config.value_subject == EX + "paint1"
    assert config.submit_button == "Save"
    assert config.language == "de"
    assert not hasattr(config, "unknown")


def test_language_defaults_from_environment(monkeypatch):
    monkeypatch.setenv(LANGUAGE_ENV, "fr-CA")
    assert Config.from_attributes({}).language == "fr-CA"


def test_from_ini(tmp_path):
    ini = tmp_path / "form.ini"
    ini.write_text(
        "[form]\nshape_subject = http://example.org/PaintShape\nlanguage = en\nload_owl_imports = false\n",
        encoding="utf-8",
    )
    config = Config.from_ini(ini)
    assert config.shape_subject == EX + "PaintShape"
    assert config.load_owl_imports == "false"
    assert config.language == "en"


def test_from_missing_ini_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv(LANGUAGE_ENV, "en")
    config = Config.from_ini(tmp_path / "missing.ini")
    assert config.shape_subject is None
    assert config.language == "en"


def test_equality_ignores_graphs(shapes_graph):
    a = Config(language="en")
    b = Config(language="en")
    a.shapes_graph = shapes_graph
    assert a == b
    b.language = "de"
    assert a != b


def test_keys_as_data_attributes():
    keys = Config.keys_as_data_attributes()
    assert "data-shape-subject" in keys
    assert "data-load-owl-imports" in keys
    assert all(not key.startswith("data-_") for key in keys)


def test_register_prefixes(config):
    config.register_prefixes({"ex": URIRef(EX)})
    assert config.prefixes == {"ex": EX}


def test_extract_lists_ignores_plain_graph():
    assert extract_lists(Graph()) == {}
