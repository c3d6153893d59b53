"""Tool handler implementations for the MCP server.

Each tool function receives arguments from the MCP client and returns
a JSON-serializable result.
"""

from __future__ import annotations

from typing import Any

from ..config import DEFAULT_LIMIT
from ..editing import add_limit, add_prefix, add_skeleton, count_lines
from ..formatting import format_query
from ..prefixes import get_prefix
from ..validation import check_executable, validate_query


def _edited(original: str, sparql: str) -> dict[str, Any]:
    return {
        "sparql": sparql,
        "changed": sparql != original,
        "line_count": count_lines(sparql),
    }


def handle_validate_sparql(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle validate_sparql tool - structural checks on a query.

    Args:
        arguments: {"sparql": str}

    Returns:
        {"valid": True, "warnings": [...]} or {"valid": False, "error": str}
    """
    return validate_query(arguments["sparql"]).to_dict()


def handle_check_executable(
    arguments: dict[str, Any],
    endpoint: str,
) -> dict[str, Any]:
    """Handle check_executable tool - endpoint and query checks before running.

    Args:
        arguments: {"sparql": str, "endpoint": str (optional)}
        endpoint: Default SPARQL endpoint URL

    Returns:
        Validation result plus the endpoint that was checked.
    """
    target = arguments.get("endpoint", endpoint)
    result = check_executable(arguments["sparql"], target)
    return {**result.to_dict(), "endpoint": target}


def handle_format_sparql(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle format_sparql tool - one clause per line, brace indentation.

    Args:
        arguments: {"sparql": str}

    Returns:
        Formatted query with change flag and line count.
    """
    sparql = arguments["sparql"]
    return _edited(sparql, format_query(sparql))


def handle_add_prefix(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle add_prefix tool - declare a namespace prefix.

    Args:
        arguments: {"sparql": str, "prefix": str, "uri": str (optional)}
            The URI is looked up in the common prefix table when omitted.

    Returns:
        Updated query with change flag and line count.
    """
    sparql = arguments["sparql"]
    prefix = arguments["prefix"]
    uri = arguments.get("uri") or get_prefix(prefix).uri
    return _edited(sparql, add_prefix(sparql, prefix, uri))


def handle_add_limit(
    arguments: dict[str, Any],
    default_limit: int = DEFAULT_LIMIT,
) -> dict[str, Any]:
    """Handle add_limit tool - append LIMIT when missing.

    Args:
        arguments: {"sparql": str, "limit": int (optional)}
        default_limit: Limit used when the client gives none

    Returns:
        Updated query with change flag and line count.

    Raises:
        ValueError: If limit is not a positive integer
    """
    sparql = arguments["sparql"]
    limit = arguments.get("limit", default_limit)
    if isinstance(limit, bool):
        raise ValueError(f"LIMIT must be an integer, got {limit!r}")
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        raise ValueError(f"LIMIT must be an integer, got {limit!r}") from None
    return _edited(sparql, add_limit(sparql, limit))


def handle_add_skeleton(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle add_skeleton tool - starter query for an empty editor.

    Args:
        arguments: {"sparql": str (optional)}

    Returns:
        The skeleton if sparql was empty, else sparql unchanged.
    """
    sparql = arguments.get("sparql", "")
    return _edited(sparql, add_skeleton(sparql))
