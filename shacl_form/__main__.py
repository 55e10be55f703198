from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rdflib import Graph
from rdflib.namespace import RDF, SH

from .config import Config

logger = logging.getLogger("shacl_form")


def _load_graph(path: str) -> Graph:
    graph = Graph()
    graph.parse(Path(path))
    return graph


def _first_node_shape(graph: Graph):
    return next(iter(sorted(graph.subjects(RDF.type, SH.NodeShape), key=str)), None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview the edit form of a SHACL node shape")
    parser.add_argument("shapes", help="Shapes graph file (any rdflib format)")
    parser.add_argument("--shape", help="Node shape IRI (default: first sh:NodeShape)")
    parser.add_argument("--data", help="Data graph file with existing values")
    parser.add_argument("--subject", help="IRI of the resource being edited")
    parser.add_argument("--language", help="Display language, e.g. en or de-CH")
    parser.add_argument("--config", help="INI file with a [form] section")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    from PySide6.QtWidgets import QApplication, QPushButton, QScrollArea, QVBoxLayout, QWidget

    from .form import PropertyForm

    config = Config.from_ini(args.config) if args.config else Config.from_attributes({})
    if args.language:
        config.language = args.language
    shapes = _load_graph(args.shapes)
    config.shapes_graph = shapes
    config.register_prefixes({prefix: str(ns) for prefix, ns in shapes.namespaces()})
    if args.data:
        config.data_graph = _load_graph(args.data)

    shape = args.shape or config.shape_subject or _first_node_shape(shapes)
    if shape is None:
        logger.error("No sh:NodeShape found in %s", args.shapes)
        return 1
    subject = args.subject or config.value_subject or "urn:shacl-form:new"

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = QWidget()
    window.setWindowTitle(f"SHACL form - {shape}")
    layout = QVBoxLayout(window)
    scroll = QScrollArea(window)
    scroll.setWidgetResizable(True)
    form = PropertyForm(config, shape=shape, subject=subject)
    scroll.setWidget(form)
    layout.addWidget(scroll)
    save = QPushButton(config.submit_button or "Save", window)
    layout.addWidget(save)

    def _save() -> None:
        if not form.has_acceptable_input():
            logger.warning("Some values do not satisfy their constraints")
        sys.stdout.write(form.to_graph().serialize(format="turtle"))
        sys.stdout.flush()

    save.clicked.connect(_save)
    form.changed.connect(lambda path: logger.debug("changed: %s", path))
    window.resize(640, 720)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
