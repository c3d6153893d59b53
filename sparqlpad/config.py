"""Configuration management for sparqlpad."""

from dataclasses import dataclass


# Default SPARQL endpoint offered to new editing sessions
DEFAULT_ENDPOINT = "https://dbpedia.org/sparql"

# LIMIT value appended by add_limit and used in the skeleton query
DEFAULT_LIMIT = 100

# Live validation only kicks in once the query is longer than this
LIVE_VALIDATION_MIN_LENGTH = 10

# One indentation level in formatted queries
INDENT = "  "


@dataclass(frozen=True)
class EditorConfig:
    """Configuration for an editing session."""

    endpoint: str = DEFAULT_ENDPOINT
    default_limit: int = DEFAULT_LIMIT
    live_validation_min_length: int = LIVE_VALIDATION_MIN_LENGTH
