"""Endpoint suggestions and starter queries."""

from dataclasses import dataclass

from .editing import SKELETON_QUERY


@dataclass(frozen=True)
class EndpointSuggestion:
    """A public SPARQL endpoint worth trying."""

    url: str
    description: str


ENDPOINT_SUGGESTIONS: tuple[EndpointSuggestion, ...] = (
    EndpointSuggestion(
        "https://dbpedia.org/sparql",
        "DBpedia - General knowledge from Wikipedia",
    ),
    EndpointSuggestion(
        "https://query.wikidata.org/sparql",
        "Wikidata - Structured data from Wikimedia projects",
    ),
    EndpointSuggestion(
        "https://data.europa.eu/a4g/sparql",
        "EU TED Data - Public procurement notices",
    ),
    EndpointSuggestion(
        "http://linkedgeodata.org/sparql",
        "LinkedGeoData - Spatial data from OpenStreetMap",
    ),
)


DBPEDIA_PEOPLE_QUERY = """PREFIX dbo: <http://dbpedia.org/ontology/>
PREFIX dbr: <http://dbpedia.org/resource/>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>

SELECT ?person ?name
WHERE {
  ?person dbo:birthPlace dbr:Berlin ;
          rdfs:label ?name .
  FILTER (lang(?name) = "en")
}
LIMIT 100"""

WIKIDATA_CATS_QUERY = """PREFIX wd: <http://www.wikidata.org/entity/>
PREFIX wdt: <http://www.wikidata.org/prop/direct/>
PREFIX wikibase: <http://wikiba.se/ontology#>
PREFIX bd: <http://www.bigdata.com/rdf#>

SELECT ?item ?itemLabel
WHERE {
  ?item wdt:P31 wd:Q146 .
  SERVICE wikibase:label { bd:serviceParam wikibase:language "en" . }
}
LIMIT 100"""

TED_NOTICES_QUERY = """PREFIX epo: <http://data.europa.eu/a4g/ontology#>

SELECT ?notice ?date
WHERE {
  ?notice a epo:Notice ;
          epo:hasPublicationDate ?date .
}
ORDER BY DESC(?date)
LIMIT 100"""

CLASS_COUNT_QUERY = """SELECT ?class (COUNT(?s) AS ?count)
WHERE {
  ?s a ?class .
}
GROUP BY ?class
ORDER BY DESC(?count)
LIMIT 100"""


# Name -> query text. The first entry is the empty placeholder.
QUERY_TEMPLATES: dict[str, str] = {
    "Select a template": "",
    "Basic triple pattern": SKELETON_QUERY,
    "DBpedia: people born in Berlin": DBPEDIA_PEOPLE_QUERY,
    "Wikidata: instances of house cat": WIKIDATA_CATS_QUERY,
    "EU TED: latest procurement notices": TED_NOTICES_QUERY,
    "Count instances per class": CLASS_COUNT_QUERY,
}


def get_template(name: str) -> str:
    """
    Look up a starter query by name.

    Raises:
        ValueError: If there is no template with that name
    """
    if name not in QUERY_TEMPLATES:
        available = ", ".join(QUERY_TEMPLATES)
        raise ValueError(f"Unknown template '{name}'. Available: {available}")
    return QUERY_TEMPLATES[name]
