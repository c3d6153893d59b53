"""Editing session state.

An EditorSession is a frozen value. Every operation returns a new session
built from the previous one, so callers replace their reference wholesale:

    >>> session = create_session()
    >>> session = session.add_skeleton()
    >>> session = session.format()
    >>> session, allowed = session.request_execution()
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from .config import EditorConfig
from .editing import add_limit, add_prefix, add_skeleton, count_lines
from .formatting import format_query
from .prefixes import get_prefix
from .templates import get_template
from .validation import ValidationResult, check_executable, validate_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorSession:
    """Current query, target endpoint and the state derived from them."""

    # Input
    query: str = ""
    endpoint: str = ""

    # Derived
    line_count: int = 1
    validation: ValidationResult = field(default_factory=ValidationResult.ok)

    config: EditorConfig = field(default_factory=EditorConfig)

    def _with_query(self, query: str) -> "EditorSession":
        return replace(self, query=query, line_count=count_lines(query))

    def edit(self, query: str) -> "EditorSession":
        """Replace the query as typed; validate once it is long enough."""
        session = self._with_query(query)
        if len(query) > self.config.live_validation_min_length:
            session = replace(session, validation=validate_query(query))
        return session

    def set_endpoint(self, endpoint: str) -> "EditorSession":
        return replace(self, endpoint=endpoint)

    def load_template(self, name: str) -> "EditorSession":
        """Replace the query with a named template.

        Raises:
            ValueError: If there is no template with that name
        """
        query = get_template(name)
        session = self._with_query(query)
        if query:
            session = replace(session, validation=validate_query(query))
        return session

    def format(self) -> "EditorSession":
        return self._with_query(format_query(self.query))

    def add_prefix(self, prefix: str, uri: Optional[str] = None) -> "EditorSession":
        """Declare a prefix; the URI defaults to the common prefix table.

        Raises:
            ValueError: If uri is omitted and the prefix is not a common one
        """
        if uri is None:
            uri = get_prefix(prefix).uri
        return self._with_query(add_prefix(self.query, prefix, uri))

    def add_limit(self) -> "EditorSession":
        return self._with_query(add_limit(self.query, self.config.default_limit))

    def add_skeleton(self) -> "EditorSession":
        return self._with_query(add_skeleton(self.query))

    def request_execution(self) -> tuple["EditorSession", bool]:
        """Check the query and endpoint before running the query.

        Returns:
            Tuple of (updated session, whether execution may proceed)
        """
        result = check_executable(self.query, self.endpoint)
        if result.valid:
            logger.info("Query cleared for execution against %s", self.endpoint)
        return replace(self, validation=result), result.valid


def create_session(
    query: str = "",
    endpoint: Optional[str] = None,
    config: Optional[EditorConfig] = None,
) -> EditorSession:
    """Create a session, taking the endpoint from config when not given.

    A non-empty initial query is validated straight away.
    """
    config = config or EditorConfig()
    if endpoint is None:
        endpoint = config.endpoint
    validation = validate_query(query) if query else ValidationResult.ok()
    return EditorSession(
        query=query,
        endpoint=endpoint,
        line_count=count_lines(query),
        validation=validation,
        config=config,
    )
