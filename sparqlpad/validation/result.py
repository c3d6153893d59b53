"""Validation verdict shared by the validator and its callers."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Result of SPARQL validation.

    A result is either valid, carrying zero or more advisory warnings, or
    invalid, carrying exactly one error message. Use :meth:`ok` and
    :meth:`fail` rather than the constructor.
    """

    valid: bool
    error: Optional[str] = None
    warnings: tuple[str, ...] = ()

    @classmethod
    def ok(cls, warnings: tuple[str, ...] | list[str] = ()) -> "ValidationResult":
        """Build a passing result."""
        return cls(valid=True, warnings=tuple(warnings))

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        """Build a failing result."""
        return cls(valid=False, error=error)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape used by the CLI and the MCP tools."""
        if self.valid:
            return {"valid": True, "warnings": list(self.warnings)}
        return {"valid": False, "error": self.error}
