"""Common namespace prefixes offered for insertion into queries."""

from dataclasses import dataclass

from rdflib import Namespace
from rdflib.namespace import DC, DCTERMS, FOAF, OWL, RDF, RDFS, SKOS, XSD


# EU Procurement Ontology, not bundled with rdflib
EPO = Namespace("http://data.europa.eu/a4g/ontology#")


@dataclass(frozen=True)
class PrefixInfo:
    """A prefix name bound to a namespace URI."""

    prefix: str
    uri: str
    description: str


COMMON_PREFIXES: tuple[PrefixInfo, ...] = (
    PrefixInfo("rdf", str(RDF), "RDF basic vocabulary"),
    PrefixInfo("rdfs", str(RDFS), "RDF Schema vocabulary"),
    PrefixInfo("owl", str(OWL), "Web Ontology Language"),
    PrefixInfo("xsd", str(XSD), "XML Schema Datatypes"),
    PrefixInfo("foaf", str(FOAF), "Friend of a Friend vocabulary"),
    PrefixInfo("dc", str(DC), "Dublin Core elements"),
    PrefixInfo("dct", str(DCTERMS), "Dublin Core terms"),
    PrefixInfo("skos", str(SKOS), "Simple Knowledge Organization System"),
    PrefixInfo("epo", str(EPO), "EU Procurement Ontology"),
)

_PREFIX_INDEX = {info.prefix: info for info in COMMON_PREFIXES}


def get_prefix(prefix: str) -> PrefixInfo:
    """
    Look up a common prefix by name.

    Raises:
        ValueError: If the prefix is not in COMMON_PREFIXES
    """
    try:
        return _PREFIX_INDEX[prefix]
    except KeyError:
        available = ", ".join(_PREFIX_INDEX)
        raise ValueError(f"Unknown prefix '{prefix}'. Available: {available}") from None
