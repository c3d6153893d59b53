"""Command-line interface for sparqlpad."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__, DEFAULT_LIMIT
from .editing import add_limit, add_prefix, add_skeleton
from .formatting import format_query
from .prefixes import COMMON_PREFIXES, get_prefix
from .templates import ENDPOINT_SUGGESTIONS, QUERY_TEMPLATES, get_template
from .validation import ValidationResult, check_executable, validate_query


def _read_query(file_or_query: str) -> tuple[str, Optional[Path]]:
    """Resolve FILE_OR_QUERY to the query text and, for files, the path."""
    if file_or_query == "-":
        return click.get_text_stream("stdin").read(), None

    path = Path(file_or_query)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Query text too long or odd to be a path
        is_file = False

    if is_file:
        return path.read_text(encoding="utf-8"), path
    return file_or_query, None


def _write_query(
    sparql: str,
    source: Optional[Path],
    output: Optional[str],
    in_place: bool,
) -> None:
    """Print the query, or save it to --output / back to the source file."""
    if in_place:
        if source is None:
            raise click.UsageError("--in-place needs FILE_OR_QUERY to be a file.")
        source.write_text(sparql, encoding="utf-8")
        click.echo(f"Query saved to: {source}")
    elif output:
        Path(output).write_text(sparql, encoding="utf-8")
        click.echo(f"Query saved to: {output}")
    else:
        click.echo(sparql)


def _echo_result(result: ValidationResult) -> None:
    if result.valid:
        click.secho("Query is VALID", fg="green", bold=True)
        if result.warnings:
            click.secho("Warnings:", fg="yellow")
            for warning in result.warnings:
                click.echo(f"  - {warning}")
    else:
        click.secho(f"Query is INVALID - {result.error}", fg="red", bold=True)


output_option = click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file for the resulting query.",
)

in_place_option = click.option(
    "--in-place", "-i",
    is_flag=True,
    help="Overwrite the input file.",
)


@click.group(invoke_without_command=True)
@click.option(
    "--version", "-v",
    is_flag=True,
    help="Show version and exit.",
)
@click.option(
    "--verbose", "-V",
    is_flag=True,
    help="Log debug output to stderr.",
)
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool):
    """
    sparqlpad: check, format and complete SPARQL queries.

    FILE_OR_QUERY arguments take a file path, a query string, or - for stdin.

    \b
    Examples:
        sparqlpad validate query.rq
        sparqlpad format "select * where { ?s ?p ?o } limit 10"
        sparqlpad add-prefix query.rq foaf --in-place
        sparqlpad skeleton -o new.rq
    """
    if version:
        click.echo(f"sparqlpad version {__version__}")
        ctx.exit()

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("validate")
@click.argument("file_or_query")
@click.option(
    "--endpoint", "-e",
    type=str,
    default=None,
    help="Also require an endpoint, as before running the query.",
)
def validate_command(file_or_query: str, endpoint: Optional[str]):
    """
    Validate the structure of a SPARQL query.

    Exits with status 1 when the query is invalid. Warnings do not change
    the exit status.

    \b
    Examples:
        sparqlpad validate query.rq
        sparqlpad validate "SELECT * WHERE { ?s ?p ?o } LIMIT 10"
        sparqlpad validate query.rq --endpoint https://dbpedia.org/sparql
    """
    sparql, _ = _read_query(file_or_query)

    if endpoint is None:
        result = validate_query(sparql)
    else:
        result = check_executable(sparql, endpoint)

    _echo_result(result)
    if not result.valid:
        sys.exit(1)


@main.command("format")
@click.argument("file_or_query")
@output_option
@in_place_option
def format_command(file_or_query: str, output: Optional[str], in_place: bool):
    """Reformat a query with one clause per line and brace indentation."""
    sparql, source = _read_query(file_or_query)
    _write_query(format_query(sparql), source, output, in_place)


@main.command("add-prefix")
@click.argument("file_or_query")
@click.argument("prefix")
@click.option(
    "--uri", "-u",
    type=str,
    default=None,
    help="Namespace URI (defaults to the common prefix table).",
)
@output_option
@in_place_option
def add_prefix_command(
    file_or_query: str,
    prefix: str,
    uri: Optional[str],
    output: Optional[str],
    in_place: bool,
):
    """
    Declare PREFIX in a query, after any existing declarations.

    \b
    Examples:
        sparqlpad add-prefix query.rq foaf
        sparqlpad add-prefix query.rq ex --uri http://example.org/
    """
    if uri is None:
        try:
            uri = get_prefix(prefix).uri
        except ValueError as e:
            raise click.BadParameter(f"{e}. Pass --uri for other prefixes.", param_hint="PREFIX")

    sparql, source = _read_query(file_or_query)
    _write_query(add_prefix(sparql, prefix, uri), source, output, in_place)


@main.command("add-limit")
@click.argument("file_or_query")
@click.option(
    "--limit", "-l",
    type=click.IntRange(min=1),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Row limit to append.",
)
@output_option
@in_place_option
def add_limit_command(
    file_or_query: str,
    limit: int,
    output: Optional[str],
    in_place: bool,
):
    """Append a LIMIT clause unless the query already has one."""
    sparql, source = _read_query(file_or_query)
    _write_query(add_limit(sparql, limit), source, output, in_place)


@main.command("skeleton")
@output_option
def skeleton_command(output: Optional[str]):
    """Print a basic SELECT query to start from."""
    _write_query(add_skeleton(""), None, output, False)


@main.command("list-prefixes")
def list_prefixes():
    """List the common namespace prefixes."""
    for info in COMMON_PREFIXES:
        click.secho(f"{info.prefix}:", fg="cyan", bold=True, nl=False)
        click.echo(f" <{info.uri}>")
        click.echo(f"  {info.description}")


@main.command("list-endpoints")
def list_endpoints():
    """List suggested public SPARQL endpoints."""
    for suggestion in ENDPOINT_SUGGESTIONS:
        click.secho(suggestion.url, fg="cyan", bold=True)
        click.echo(f"  {suggestion.description}")


@main.command("list-templates")
def list_templates():
    """List the names of the starter query templates."""
    for name, sparql in QUERY_TEMPLATES.items():
        if sparql:
            click.echo(f"  - {name}")


@main.command("template")
@click.argument("name")
@output_option
def template_command(name: str, output: Optional[str]):
    """Print the starter query called NAME."""
    try:
        sparql = get_template(name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="NAME")
    _write_query(sparql, None, output, False)


if __name__ == "__main__":
    main()
