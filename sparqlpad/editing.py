"""Editing helpers that insert boilerplate into a query.

Every helper takes the current query text and returns the new text. When
there is nothing to do the input is returned unchanged.
"""

import logging

from .config import DEFAULT_LIMIT

logger = logging.getLogger(__name__)


# Starting point for an empty editor
SKELETON_QUERY = """PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>

SELECT ?subject ?predicate ?object
WHERE {
  ?subject ?predicate ?object .

  # Add your conditions here

} LIMIT 100"""


def prefix_declaration(prefix: str, uri: str) -> str:
    """Build a ``PREFIX name: <uri>`` line."""
    return f"PREFIX {prefix}: <{uri}>"


def add_prefix(query: str, prefix: str, uri: str) -> str:
    """
    Declare a namespace prefix in a query.

    The declaration goes right after the last existing PREFIX line, or on
    the first line when the query has none.

    Args:
        query: Current query text
        prefix: Prefix name, without the colon
        uri: Namespace URI, without angle brackets

    Returns:
        The query with the declaration, or the query unchanged if
        ``PREFIX <prefix>:`` already appears in it
    """
    if f"PREFIX {prefix}:" in query:
        return query

    lines = query.split("\n")
    last_prefix_index = -1
    for i, line in enumerate(lines):
        if line.strip().upper().startswith("PREFIX"):
            last_prefix_index = i

    lines.insert(last_prefix_index + 1, prefix_declaration(prefix, uri))
    logger.debug("Declared prefix %s at line %d", prefix, last_prefix_index + 2)
    return "\n".join(lines)


def add_limit(query: str, limit: int = DEFAULT_LIMIT) -> str:
    """
    Append a LIMIT clause unless the query already mentions LIMIT.

    Args:
        query: Current query text
        limit: Row limit to append

    Returns:
        The query with ``LIMIT <limit>`` on a new last line

    Raises:
        ValueError: If limit is not positive
    """
    if limit <= 0:
        raise ValueError(f"LIMIT must be positive, got {limit}")

    if "LIMIT" in query.upper():
        return query

    return query.rstrip() + f"\nLIMIT {limit}"


def add_skeleton(query: str) -> str:
    """Return SKELETON_QUERY for an empty query, otherwise the query itself."""
    if query.strip():
        return query
    return SKELETON_QUERY


def count_lines(text: str) -> int:
    """Number of lines in text; an empty string has one line."""
    return text.count("\n") + 1
