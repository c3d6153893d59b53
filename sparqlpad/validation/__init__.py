"""SPARQL query validation components."""

from .result import ValidationResult
from .syntax import detect_query_form, validate_query
from .endpoint import check_executable

__all__ = [
    "ValidationResult",
    "detect_query_form",
    "validate_query",
    "check_executable",
]
