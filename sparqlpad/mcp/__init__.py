"""MCP (Model Context Protocol) server for sparqlpad.

This module provides an MCP server that exposes sparqlpad's query checking
and editing operations as tools that can be called by MCP-compatible LLM
clients.

Example client configuration:

    {
        "mcpServers": {
            "sparqlpad": {
                "command": "python",
                "args": ["-m", "sparqlpad.mcp", "serve"]
            }
        }
    }

The server exposes tools for:
- SPARQL structure validation and pre-execution checks
- Query formatting
- PREFIX, LIMIT and starter-query insertion
"""

from .server import SparqlPadMCPServer, MCPConfig, run_server

__all__ = [
    "SparqlPadMCPServer",
    "MCPConfig",
    "run_server",
]
