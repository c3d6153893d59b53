"""Pre-execution checks for a query and its target endpoint."""

import logging

from .result import ValidationResult
from .syntax import validate_query

logger = logging.getLogger(__name__)


MISSING_ENDPOINT_ERROR = "Please provide a SPARQL endpoint URL"


def check_executable(sparql: str, endpoint: str) -> ValidationResult:
    """
    Decide whether a query may be sent to an endpoint.

    Both the endpoint and the query must pass: an empty endpoint fails on its
    own, before the query is looked at. The query itself is never sent
    anywhere.

    Args:
        sparql: The SPARQL query to check
        endpoint: The SPARQL endpoint URL

    Returns:
        ValidationResult; execution may proceed only if it is valid
    """
    if not endpoint or not endpoint.strip():
        logger.debug("Execution blocked: no endpoint")
        return ValidationResult.fail(MISSING_ENDPOINT_ERROR)

    result = validate_query(sparql)
    if not result.valid:
        logger.debug("Execution blocked for %s: %s", endpoint, result.error)
    return result
