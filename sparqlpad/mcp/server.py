"""MCP Server implementation for sparqlpad.

This module provides the main MCP server class that registers the query
checking and editing tools and the reference data resources.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent, Resource

from ..config import DEFAULT_ENDPOINT, DEFAULT_LIMIT
from .tools import (
    handle_validate_sparql,
    handle_check_executable,
    handle_format_sparql,
    handle_add_prefix,
    handle_add_limit,
    handle_add_skeleton,
)
from .resources import (
    get_prefixes,
    get_endpoints,
    get_templates,
    get_server_config,
)

logger = logging.getLogger(__name__)


@dataclass
class MCPConfig:
    """Configuration for the MCP server."""

    endpoint: str = DEFAULT_ENDPOINT
    default_limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls) -> "MCPConfig":
        """Create config from environment variables."""
        return cls(
            endpoint=os.environ.get("SPARQLPAD_ENDPOINT", DEFAULT_ENDPOINT),
            default_limit=int(os.environ.get("SPARQLPAD_DEFAULT_LIMIT", str(DEFAULT_LIMIT))),
        )


_SPARQL_PROPERTY = {
    "type": "string",
    "description": "SPARQL query text",
}


class SparqlPadMCPServer:
    """MCP Server exposing sparqlpad operations as tools.

    The server provides tools for:
    - Structural validation and pre-execution checks
    - Query formatting
    - Inserting PREFIX declarations, a LIMIT clause or a starter query

    Example:
        >>> server = SparqlPadMCPServer(MCPConfig(endpoint="https://query.wikidata.org/sparql"))
        >>> asyncio.run(server.run())
    """

    def __init__(self, config: MCPConfig | None = None):
        """Initialize the MCP server.

        Args:
            config: Server configuration. If None, uses defaults from environment.
        """
        self.config = config or MCPConfig.from_env()
        self.server = Server("sparqlpad")
        self._setup_handlers()

    def _setup_handlers(self):
        """Register tool and resource handlers with the MCP server."""

        # ========== TOOL LISTING ==========

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self.list_tools()

        # ========== TOOL CALLING ==========

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict) -> list[TextContent]:
            try:
                result = await self._handle_tool(name, arguments)
                return [TextContent(type="text", text=json.dumps(result, indent=2))]
            except Exception as e:
                logger.warning("Tool %s failed: %s", name, e)
                error_result = {"error": str(e), "tool": name}
                return [TextContent(type="text", text=json.dumps(error_result, indent=2))]

        # ========== RESOURCE LISTING ==========

        @self.server.list_resources()
        async def list_resources() -> list[Resource]:
            return [
                Resource(
                    uri="sparqlpad://prefixes",
                    name="Common Prefixes",
                    description="Namespace prefixes with URIs and descriptions",
                    mimeType="application/json",
                ),
                Resource(
                    uri="sparqlpad://endpoints",
                    name="Endpoint Suggestions",
                    description="Public SPARQL endpoints",
                    mimeType="application/json",
                ),
                Resource(
                    uri="sparqlpad://templates",
                    name="Query Templates",
                    description="Starter queries by name",
                    mimeType="application/json",
                ),
                Resource(
                    uri="sparqlpad://config",
                    name="Server Configuration",
                    description="Current server configuration",
                    mimeType="application/json",
                ),
            ]

        # ========== RESOURCE READING ==========

        @self.server.read_resource()
        async def read_resource(uri) -> str:
            return self.read_resource(str(uri).rstrip("/"))

    def list_tools(self) -> list[Tool]:
        """Tool definitions advertised to clients."""
        return [
            Tool(
                name="validate_sparql",
                description=(
                    "Check the basic structure of a SPARQL query: query form, WHERE clause, "
                    "balanced braces and quotes. Returns either an error or a list of "
                    "warnings (for example a missing LIMIT). Does not parse or run the query."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {"sparql": _SPARQL_PROPERTY},
                    "required": ["sparql"],
                },
            ),
            Tool(
                name="check_executable",
                description=(
                    "Check whether a query may be sent to a SPARQL endpoint. Fails when the "
                    "endpoint is empty or the query does not pass validate_sparql."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "sparql": _SPARQL_PROPERTY,
                        "endpoint": {
                            "type": "string",
                            "description": f"Endpoint URL (default: {self.config.endpoint})",
                        },
                    },
                    "required": ["sparql"],
                },
            ),
            Tool(
                name="format_sparql",
                description=(
                    "Reformat a SPARQL query: each clause keyword (SELECT, WHERE, FILTER, "
                    "ORDER BY, LIMIT, ...) starts a new line and lines are indented by "
                    "brace depth."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {"sparql": _SPARQL_PROPERTY},
                    "required": ["sparql"],
                },
            ),
            Tool(
                name="add_prefix",
                description=(
                    "Add a PREFIX declaration after the existing ones. Common prefixes "
                    "(rdf, rdfs, owl, xsd, foaf, dc, dct, skos, epo) need no URI."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "sparql": _SPARQL_PROPERTY,
                        "prefix": {
                            "type": "string",
                            "description": "Prefix name without the colon",
                        },
                        "uri": {
                            "type": "string",
                            "description": "Namespace URI without angle brackets",
                        },
                    },
                    "required": ["sparql", "prefix"],
                },
            ),
            Tool(
                name="add_limit",
                description="Append a LIMIT clause if the query has none.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "sparql": _SPARQL_PROPERTY,
                        "limit": {
                            "type": "integer",
                            "minimum": 1,
                            "default": self.config.default_limit,
                            "description": "Row limit",
                        },
                    },
                    "required": ["sparql"],
                },
            ),
            Tool(
                name="add_skeleton",
                description=(
                    "Return a basic SELECT query to start from. Only applies when the "
                    "given query is empty."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {"sparql": _SPARQL_PROPERTY},
                },
            ),
        ]

    def read_resource(self, uri: str) -> str:
        """Return the JSON text of a resource."""
        if uri == "sparqlpad://prefixes":
            return json.dumps(get_prefixes(), indent=2)
        elif uri == "sparqlpad://endpoints":
            return json.dumps(get_endpoints(), indent=2)
        elif uri == "sparqlpad://templates":
            return json.dumps(get_templates(), indent=2)
        elif uri == "sparqlpad://config":
            return json.dumps(get_server_config(self.config), indent=2)
        else:
            raise ValueError(f"Unknown resource: {uri}")

    async def _handle_tool(self, name: str, arguments: dict) -> dict[str, Any]:
        """Route tool calls to appropriate handlers.

        All handlers are pure text operations and run inline.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result as dictionary
        """
        logger.debug("Tool call: %s", name)

        if name == "validate_sparql":
            return handle_validate_sparql(arguments)

        elif name == "check_executable":
            return handle_check_executable(arguments, endpoint=self.config.endpoint)

        elif name == "format_sparql":
            return handle_format_sparql(arguments)

        elif name == "add_prefix":
            return handle_add_prefix(arguments)

        elif name == "add_limit":
            return handle_add_limit(arguments, default_limit=self.config.default_limit)

        elif name == "add_skeleton":
            return handle_add_skeleton(arguments)

        else:
            raise ValueError(f"Unknown tool: {name}")

    async def run(self):
        """Run the MCP server with stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(config: MCPConfig | None = None):
    """Entry point for running the MCP server.

    Args:
        config: Server configuration. If None, uses defaults from environment.

    Example:
        >>> import asyncio
        >>> from sparqlpad.mcp import run_server, MCPConfig
        >>> asyncio.run(run_server(MCPConfig()))
    """
    server = SparqlPadMCPServer(config)
    await server.run()
