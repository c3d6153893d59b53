r"""
sparqlpad: helpers for writing SPARQL queries by hand.

This package checks a query's basic structure, reformats it into an
indented layout and inserts common boilerplate (prefix declarations, a
LIMIT clause, a starter query). All of it works on plain text: queries are
neither parsed into an AST nor executed.

Basic usage:
    >>> from sparqlpad import validate_query, format_query
    >>> result = validate_query("SELECT ?s WHERE { ?s ?p ?o }")
    >>> result.valid, result.warnings
    (True, ('Query does not have a LIMIT clause, which might return large result sets',))
    >>> print(format_query("select ?s where {\n?s ?p ?o\n} limit 10"))
    SELECT ?s
    WHERE {
      ?s ?p ?o
    }
    LIMIT 10

Editing session:
    >>> from sparqlpad import create_session
    >>> session = create_session().add_skeleton().add_prefix("foaf")
    >>> session, allowed = session.request_execution()
"""

__version__ = "0.1.0"

from .config import (
    EditorConfig,
    DEFAULT_ENDPOINT,
    DEFAULT_LIMIT,
)
from .validation import (
    ValidationResult,
    validate_query,
    check_executable,
)
from .formatting import format_query, FORMAT_KEYWORDS
from .editing import (
    add_prefix,
    add_limit,
    add_skeleton,
    count_lines,
    SKELETON_QUERY,
)
from .prefixes import PrefixInfo, COMMON_PREFIXES, get_prefix
from .templates import (
    EndpointSuggestion,
    ENDPOINT_SUGGESTIONS,
    QUERY_TEMPLATES,
    get_template,
)
from .session import EditorSession, create_session


__all__ = [
    # Core
    "validate_query",
    "check_executable",
    "format_query",
    "add_prefix",
    "add_limit",
    "add_skeleton",
    "count_lines",
    # Types
    "ValidationResult",
    "PrefixInfo",
    "EndpointSuggestion",
    "EditorSession",
    "create_session",
    # Reference data
    "FORMAT_KEYWORDS",
    "SKELETON_QUERY",
    "COMMON_PREFIXES",
    "ENDPOINT_SUGGESTIONS",
    "QUERY_TEMPLATES",
    "get_prefix",
    "get_template",
    # Configuration
    "EditorConfig",
    "DEFAULT_ENDPOINT",
    "DEFAULT_LIMIT",
    # Version
    "__version__",
]
