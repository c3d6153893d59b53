"""Tests for the MCP tool handlers and server routing."""

import asyncio
import json

import pytest

pytest.importorskip("mcp")

from sparqlpad.editing import SKELETON_QUERY
from sparqlpad.mcp import MCPConfig, SparqlPadMCPServer
from sparqlpad.mcp.tools import (
    handle_add_limit,
    handle_add_prefix,
    handle_add_skeleton,
    handle_check_executable,
    handle_format_sparql,
    handle_validate_sparql,
)

VALID = "SELECT ?s WHERE { ?s ?p ?o } LIMIT 10"


class TestHandlers:

    def test_validate(self):
        assert handle_validate_sparql({"sparql": VALID}) == {"valid": True, "warnings": []}

    def test_validate_error(self):
        assert handle_validate_sparql({"sparql": ""}) == {
            "valid": False,
            "error": "Query cannot be empty",
        }

    def test_check_executable_default_endpoint(self):
        result = handle_check_executable({"sparql": VALID}, endpoint="https://dbpedia.org/sparql")
        assert result["valid"]
        assert result["endpoint"] == "https://dbpedia.org/sparql"

    def test_check_executable_override(self):
        result = handle_check_executable(
            {"sparql": VALID, "endpoint": ""},
            endpoint="https://dbpedia.org/sparql",
        )
        assert result == {
            "valid": False,
            "error": "Please provide a SPARQL endpoint URL",
            "endpoint": "",
        }

    def test_format(self):
        result = handle_format_sparql({"sparql": "select ?s where { ?s ?p ?o }"})
        assert result == {
            "sparql": "SELECT ?s\nWHERE { ?s ?p ?o }",
            "changed": True,
            "line_count": 2,
        }

    def test_add_prefix_lookup(self):
        result = handle_add_prefix({"sparql": VALID, "prefix": "skos"})
        assert result["sparql"].startswith("PREFIX skos: <http://www.w3.org/2004/02/skos/core#>\n")
        assert result["changed"]

    def test_add_prefix_unknown(self):
        with pytest.raises(ValueError):
            handle_add_prefix({"sparql": VALID, "prefix": "ex"})

    def test_add_limit_unchanged(self):
        result = handle_add_limit({"sparql": VALID})
        assert result == {"sparql": VALID, "changed": False, "line_count": 1}

    def test_add_limit_default(self):
        result = handle_add_limit({"sparql": "ASK { }"}, default_limit=7)
        assert result["sparql"] == "ASK { }\nLIMIT 7"

    def test_add_limit_string_number(self):
        result = handle_add_limit({"sparql": "ASK { }", "limit": "5"})
        assert result["sparql"] == "ASK { }\nLIMIT 5"

    @pytest.mark.parametrize("limit", [True, False, "ten", None, [5]])
    def test_add_limit_rejects_non_integer(self, limit):
        with pytest.raises(ValueError, match="LIMIT must be an integer"):
            handle_add_limit({"sparql": "ASK { }", "limit": limit})

    def test_add_limit_rejects_zero(self):
        with pytest.raises(ValueError, match="LIMIT must be positive"):
            handle_add_limit({"sparql": "ASK { }", "limit": 0})

    def test_add_skeleton(self):
        assert handle_add_skeleton({})["sparql"] == SKELETON_QUERY


class TestServer:

    @pytest.fixture
    def server(self):
        return SparqlPadMCPServer(MCPConfig(endpoint="https://query.wikidata.org/sparql", default_limit=50))

    def test_tool_names(self, server):
        assert [tool.name for tool in server.list_tools()] == [
            "validate_sparql",
            "check_executable",
            "format_sparql",
            "add_prefix",
            "add_limit",
            "add_skeleton",
        ]

    def test_routing_uses_config(self, server):
        result = asyncio.run(server._handle_tool("add_limit", {"sparql": "ASK { }"}))
        assert result["sparql"] == "ASK { }\nLIMIT 50"

        result = asyncio.run(server._handle_tool("check_executable", {"sparql": VALID}))
        assert result["endpoint"] == "https://query.wikidata.org/sparql"

    def test_unknown_tool(self, server):
        with pytest.raises(ValueError, match="Unknown tool"):
            asyncio.run(server._handle_tool("run_query", {}))

    def test_resources(self, server):
        prefixes = json.loads(server.read_resource("sparqlpad://prefixes"))
        assert prefixes[0] == {
            "prefix": "rdf",
            "uri": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
            "description": "RDF basic vocabulary",
        }
        templates = json.loads(server.read_resource("sparqlpad://templates"))
        assert "Select a template" not in templates
        config = json.loads(server.read_resource("sparqlpad://config"))
        assert config["default_limit"] == 50
        assert len(json.loads(server.read_resource("sparqlpad://endpoints"))) == 4

    def test_unknown_resource(self, server):
        with pytest.raises(ValueError):
            server.read_resource("sparqlpad://nope")


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SPARQLPAD_ENDPOINT", "http://localhost:3030/ds/sparql")
    monkeypatch.setenv("SPARQLPAD_DEFAULT_LIMIT", "20")
    config = MCPConfig.from_env()
    assert config.endpoint == "http://localhost:3030/ds/sparql"
    assert config.default_limit == 20
