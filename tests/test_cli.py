"""Tests for the sparqlpad command line."""

import pytest
from click.testing import CliRunner

from sparqlpad import __version__
from sparqlpad.cli import main
from sparqlpad.editing import SKELETON_QUERY

VALID = "SELECT ?s WHERE { ?s ?p ?o } LIMIT 10"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def query_file(tmp_path):
    path = tmp_path / "query.rq"
    path.write_text("select ?s where { ?s ?p ?o }", encoding="utf-8")
    return path


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_without_command(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    assert "validate" in result.output


class TestValidate:

    def test_valid_string(self, runner):
        result = runner.invoke(main, ["validate", VALID])
        assert result.exit_code == 0
        assert "Query is VALID" in result.output
        assert "Warnings" not in result.output

    def test_warnings(self, runner, query_file):
        result = runner.invoke(main, ["validate", str(query_file)])
        assert result.exit_code == 0
        assert "does not have a LIMIT clause" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(main, ["validate", "SELECT ?s WHERE { ?s ?p ?o"])
        assert result.exit_code == 1
        assert "Unbalanced braces: 1 opening and 0 closing braces" in result.output

    def test_empty_endpoint(self, runner):
        result = runner.invoke(main, ["validate", VALID, "--endpoint", ""])
        assert result.exit_code == 1
        assert "Please provide a SPARQL endpoint URL" in result.output

    def test_with_endpoint(self, runner):
        result = runner.invoke(main, ["validate", VALID, "-e", "https://dbpedia.org/sparql"])
        assert result.exit_code == 0

    def test_stdin(self, runner):
        result = runner.invoke(main, ["validate", "-"], input="ASK WHERE { ?s ?p ?o }")
        assert result.exit_code == 0

    def test_long_query_string(self, runner):
        sparql = "SELECT ?s WHERE { ?s ?p " + "x" * 400 + " } LIMIT 1"
        result = runner.invoke(main, ["validate", sparql])
        assert result.exit_code == 0


class TestFormat:

    def test_string(self, runner):
        result = runner.invoke(main, ["format", "select ?s where { ?s ?p ?o }"])
        assert result.exit_code == 0
        assert result.output == "SELECT ?s\nWHERE { ?s ?p ?o }\n"

    def test_in_place(self, runner, query_file):
        result = runner.invoke(main, ["format", str(query_file), "--in-place"])
        assert result.exit_code == 0
        assert query_file.read_text(encoding="utf-8") == "SELECT ?s\nWHERE { ?s ?p ?o }"

    def test_in_place_needs_file(self, runner):
        result = runner.invoke(main, ["format", VALID, "--in-place"])
        assert result.exit_code == 2

    def test_output_file(self, runner, tmp_path):
        out = tmp_path / "out.rq"
        result = runner.invoke(main, ["format", VALID, "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith("SELECT ?s\nWHERE")


class TestEditCommands:

    def test_add_prefix_from_table(self, runner):
        result = runner.invoke(main, ["add-prefix", VALID, "foaf"])
        assert result.exit_code == 0
        assert result.output.startswith("PREFIX foaf: <http://xmlns.com/foaf/0.1/>\nSELECT")

    def test_add_prefix_with_uri(self, runner):
        result = runner.invoke(main, ["add-prefix", VALID, "ex", "--uri", "http://example.org/"])
        assert result.exit_code == 0
        assert result.output.startswith("PREFIX ex: <http://example.org/>\n")

    def test_add_prefix_unknown(self, runner):
        result = runner.invoke(main, ["add-prefix", VALID, "ex"])
        assert result.exit_code == 2

    def test_add_limit(self, runner, query_file):
        result = runner.invoke(main, ["add-limit", str(query_file), "--limit", "5"])
        assert result.exit_code == 0
        assert result.output == "select ?s where { ?s ?p ?o }\nLIMIT 5\n"

    def test_add_limit_rejects_zero(self, runner):
        result = runner.invoke(main, ["add-limit", VALID, "--limit", "0"])
        assert result.exit_code == 2

    def test_skeleton(self, runner):
        result = runner.invoke(main, ["skeleton"])
        assert result.exit_code == 0
        assert result.output == SKELETON_QUERY + "\n"


class TestListings:

    def test_list_prefixes(self, runner):
        result = runner.invoke(main, ["list-prefixes"])
        assert result.exit_code == 0
        assert "rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>" in result.output

    def test_list_endpoints(self, runner):
        result = runner.invoke(main, ["list-endpoints"])
        assert "https://query.wikidata.org/sparql" in result.output

    def test_list_templates_skips_placeholder(self, runner):
        result = runner.invoke(main, ["list-templates"])
        assert "Basic triple pattern" in result.output
        assert "Select a template" not in result.output

    def test_template(self, runner):
        result = runner.invoke(main, ["template", "Basic triple pattern"])
        assert result.exit_code == 0
        assert result.output == SKELETON_QUERY + "\n"

    def test_unknown_template(self, runner):
        result = runner.invoke(main, ["template", "nope"])
        assert result.exit_code == 2
