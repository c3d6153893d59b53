"""Entry point for running the MCP server as a module.

Usage:
    python -m sparqlpad.mcp serve --endpoint https://query.wikidata.org/sparql
    python -m sparqlpad.mcp config
"""

import argparse
import asyncio
import json
import logging
import sys

from ..config import DEFAULT_LIMIT
from .server import SparqlPadMCPServer, MCPConfig


def main():
    """Main entry point for the MCP server CLI."""
    defaults = MCPConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="python -m sparqlpad.mcp",
        description="sparqlpad MCP Server"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the MCP server with stdio transport"
    )
    serve_parser.add_argument(
        "--endpoint", "-e",
        default=defaults.endpoint,
        help="Default SPARQL endpoint URL for check_executable"
    )
    serve_parser.add_argument(
        "--limit", "-l",
        type=int,
        default=defaults.default_limit,
        help=f"Default LIMIT for add_limit (default: {DEFAULT_LIMIT})"
    )
    serve_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: WARNING)"
    )

    # config command
    subparsers.add_parser(
        "config",
        help="Show server configuration"
    )

    args = parser.parse_args()

    if args.command == "serve":
        # stdout carries the protocol, so logs go to stderr
        logging.basicConfig(level=args.log_level, stream=sys.stderr)
        config = MCPConfig(endpoint=args.endpoint, default_limit=args.limit)
        server = SparqlPadMCPServer(config)
        asyncio.run(server.run())

    elif args.command == "config":
        from .resources import get_server_config

        print(json.dumps(get_server_config(defaults), indent=2))

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
