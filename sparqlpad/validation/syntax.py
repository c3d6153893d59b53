"""Heuristic SPARQL structure checks.

These checks work on the raw text with substring searches and character
counts. They do not parse the query, so a query that passes may still be
rejected by an endpoint.
"""

import logging
from typing import Optional

from .result import ValidationResult

logger = logging.getLogger(__name__)


# Query forms, in the order they are looked for
QUERY_FORMS = ("SELECT", "CONSTRUCT", "ASK", "DESCRIBE")

# Forms that cannot do without a WHERE clause
WHERE_REQUIRED_FORMS = ("SELECT", "CONSTRUCT", "ASK")

EMPTY_QUERY_ERROR = "Query cannot be empty"
MISSING_FORM_ERROR = "Query must start with SELECT, CONSTRUCT, ASK, or DESCRIBE"
DOUBLE_QUOTE_ERROR = "Unclosed double quotes in query"
SINGLE_QUOTE_ERROR = "Unclosed single quotes in query"

DESCRIBE_WITHOUT_WHERE_WARNING = (
    "DESCRIBE query without WHERE clause might return large amounts of data"
)
MISSING_LIMIT_WARNING = (
    "Query does not have a LIMIT clause, which might return large result sets"
)


def detect_query_form(query: str) -> Optional[str]:
    """
    Detect the query form by case-insensitive substring search.

    The forms are tried in the order of QUERY_FORMS and the first one found
    anywhere in the text wins, so ``DESCRIBE ?x WHERE { ?x ?p ?selected }``
    is reported as SELECT.

    Args:
        query: The SPARQL query text

    Returns:
        One of QUERY_FORMS, or None if none of them occurs
    """
    upper_query = query.upper()
    for form in QUERY_FORMS:
        if form in upper_query:
            return form
    return None


def validate_query(query: str) -> ValidationResult:
    """
    Validate the basic structure of a SPARQL query.

    Checks run in order and stop at the first failure: emptiness, query
    form, WHERE clause, brace balance, double quotes, single quotes.
    Missing LIMIT (and a DESCRIBE without WHERE) only produce warnings.

    Args:
        query: The SPARQL query to validate

    Returns:
        ValidationResult, either valid with warnings or invalid with an error
    """
    if not query or not query.strip():
        logger.debug("Rejected empty query")
        return ValidationResult.fail(EMPTY_QUERY_ERROR)

    warnings = []
    upper_query = query.upper()
    has_where = "WHERE" in upper_query

    form = detect_query_form(query)
    if form is None:
        logger.debug("No query form found")
        return ValidationResult.fail(MISSING_FORM_ERROR)

    if not has_where:
        if form in WHERE_REQUIRED_FORMS:
            logger.debug("%s query has no WHERE clause", form)
            return ValidationResult.fail(f"{form} query must include a WHERE clause")
        warnings.append(DESCRIBE_WITHOUT_WHERE_WARNING)

    open_braces = query.count("{")
    close_braces = query.count("}")
    if open_braces != close_braces:
        logger.debug("Brace mismatch: %d open, %d close", open_braces, close_braces)
        return ValidationResult.fail(
            f"Unbalanced braces: {open_braces} opening and {close_braces} closing braces"
        )

    if query.count('"') % 2 != 0:
        return ValidationResult.fail(DOUBLE_QUOTE_ERROR)

    if query.count("'") % 2 != 0:
        return ValidationResult.fail(SINGLE_QUOTE_ERROR)

    # Performance hints
    if "LIMIT" not in upper_query:
        warnings.append(MISSING_LIMIT_WARNING)

    logger.debug("%s query passed with %d warning(s)", form, len(warnings))
    return ValidationResult.ok(warnings)
