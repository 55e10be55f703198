# shacl_form/constants.py

from rdflib import Namespace
from rdflib.namespace import RDF, RDFS, SH, SKOS, XSD

PREFIX_XSD = str(XSD)
PREFIX_RDF = str(RDF)
PREFIX_SHACL = str(SH)

DASH = Namespace("http://datashapes.org/dash#")

# Label predicates consulted for list entries, in order of preference
LABEL_PREDICATES = (RDFS.label, SKOS.prefLabel)

NUMBER_DATATYPES = {"integer", "float", "double", "decimal"}
DATE_DATATYPES = {"date", "dateTime"}

# Free-text language chooser length, e.g. "en-US"
LANGUAGE_TAG_MAX_LENGTH = 5

TEXTAREA_ROWS = 5

REQUIRED_MARKER = " *"
