"""Pydantic models for validation results handed to callers."""

from __future__ import annotations

from typing import Any, Sequence, Union

from pydantic import BaseModel, ConfigDict

PathSegment = Union[str, int]
Path = tuple[PathSegment, ...]


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def json_pointer(path: Sequence[PathSegment]) -> str:
    """RFC 6901 pointer for a path ('' for the root)."""
    return "".join(f"/{_escape(str(segment))}" for segment in path)


# ---------------------------------------------------------------------------
# Single violation
# ---------------------------------------------------------------------------

class ValidationError(BaseModel):
    """One failed keyword check at one location of the instance."""

    model_config = ConfigDict(frozen=True)

    path: tuple[PathSegment, ...] = ()
    keyword: str
    message: str

    @property
    def pointer(self) -> str:
        """JSON pointer to the offending value ('' for the root)."""
        return json_pointer(self.path)

    def __str__(self) -> str:
        return f"{self.pointer or '/'}: [{self.keyword}] {self.message}"


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

class ValidationReport(BaseModel):
    valid: bool
    errors: list[ValidationError] = []

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationReport:
        return cls(valid=not errors, errors=errors)


class InvalidRecord(BaseModel):
    """A record from a batch that failed validation, with its position."""
    index: int
    record: Any
    errors: list[ValidationError]


class BatchReport(BaseModel):
    valid_records: list[Any] = []
    invalid_records: list[InvalidRecord] = []

    @property
    def valid_count(self) -> int:
        return len(self.valid_records)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_records)
