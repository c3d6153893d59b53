"""Line-oriented SPARQL pretty-printing."""

import logging
import re

from .config import INDENT

logger = logging.getLogger(__name__)


# Clause keywords that start a new line. Phrases are matched with their
# single internal space.
FORMAT_KEYWORDS = (
    "PREFIX", "SELECT", "DISTINCT", "CONSTRUCT", "ASK", "DESCRIBE",
    "FROM", "WHERE", "FILTER", "OPTIONAL", "UNION", "MINUS", "GRAPH",
    "SERVICE", "GROUP BY", "HAVING", "ORDER BY", "LIMIT", "OFFSET",
)


def _keyword_pattern(keyword: str) -> re.Pattern:
    # Not right after PREFIX or a word character, so identifiers such as
    # ?myWhere or ex:hasFilter are left alone.
    return re.compile(
        r"(?<!PREFIX)(?<![a-z0-9_])" + re.escape(keyword) + r"\b",
        re.IGNORECASE | re.ASCII,
    )


_KEYWORD_PATTERNS = [(kw, _keyword_pattern(kw)) for kw in FORMAT_KEYWORDS]


def _starts_line(text: str, pos: int) -> bool:
    """True if only whitespace separates pos from the start of its line."""
    line_start = text.rfind("\n", 0, pos) + 1
    return not text[line_start:pos].strip()


def break_before_keywords(query: str) -> str:
    """
    Put every clause keyword on a new line, upper-cased.

    Each keyword is a global pass over the text produced by the previous
    one, so a line holding several keywords is split at all of them. A
    keyword that already begins its line is upper-cased but not broken
    again.

    Args:
        query: SPARQL query text

    Returns:
        The text with line breaks inserted
    """
    text = query
    for keyword, pattern in _KEYWORD_PATTERNS:
        def _replace(match: re.Match, keyword: str = keyword) -> str:
            if _starts_line(match.string, match.start()):
                return keyword
            return "\n" + keyword

        text = pattern.sub(_replace, text)
    return text


def reindent(text: str) -> str:
    """
    Re-indent lines by brace depth.

    A line containing ``}`` is dedented before it is emitted and a line
    containing ``{`` indents the lines after it. Blank lines stay blank and
    leave the depth alone.
    """
    level = 0
    lines = []

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            lines.append("")
            continue

        if "}" in stripped:
            level = max(0, level - 1)

        lines.append(INDENT * level + stripped)

        if "{" in stripped:
            level += 1

    return "\n".join(lines)


def format_query(query: str) -> str:
    """
    Format a SPARQL query into an indented multi-line layout.

    Formatting is idempotent: formatting the output again returns it
    unchanged.

    Args:
        query: SPARQL query text

    Returns:
        The formatted query, or "" for empty input
    """
    if not query:
        return ""

    formatted = reindent(break_before_keywords(query))
    logger.debug(
        "Formatted query: %d -> %d lines",
        query.count("\n") + 1,
        formatted.count("\n") + 1,
    )
    return formatted
