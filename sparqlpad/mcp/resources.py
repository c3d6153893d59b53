"""Resource providers for the MCP server.

Resources are read-only data that MCP clients can access.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, TYPE_CHECKING

from ..prefixes import COMMON_PREFIXES
from ..templates import ENDPOINT_SUGGESTIONS, QUERY_TEMPLATES

if TYPE_CHECKING:
    from .server import MCPConfig


def get_prefixes() -> list[dict[str, str]]:
    """Common namespace prefixes with URI and description."""
    return [asdict(info) for info in COMMON_PREFIXES]


def get_endpoints() -> list[dict[str, str]]:
    """Suggested public SPARQL endpoints."""
    return [asdict(suggestion) for suggestion in ENDPOINT_SUGGESTIONS]


def get_templates() -> dict[str, str]:
    """Starter queries by name, without the empty placeholder."""
    return {name: sparql for name, sparql in QUERY_TEMPLATES.items() if sparql}


def get_server_config(config: "MCPConfig") -> dict[str, Any]:
    """Get the current server configuration.

    Args:
        config: MCPConfig instance

    Returns:
        Configuration as dictionary.
    """
    from .. import __version__

    return {
        "version": __version__,
        "endpoint": config.endpoint,
        "default_limit": config.default_limit,
    }
