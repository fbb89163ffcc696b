"""Exceptions raised when a schema itself cannot be evaluated."""

from __future__ import annotations

from typing import Sequence

from schemaguard.schemas.report import json_pointer


class SchemaGuardError(Exception):
    """Base exception for schemaguard errors."""


class ConfigurationError(SchemaGuardError, ValueError):
    """
    A malformed schema: unknown type or format name, invalid regular
    expression, a keyword value of the wrong shape.

    Raised immediately and never folded into the list of validation errors.
    """

    def __init__(
        self,
        message: str,
        *,
        keyword: str | None = None,
        path: Sequence[str | int] = (),
    ):
        self.message = message
        self.keyword = keyword
        self.path = tuple(path)
        super().__init__(self._render())

    def _render(self) -> str:
        location = json_pointer(self.path) or "/"
        if self.keyword:
            return f"{self.message} (keyword '{self.keyword}' at {location})"
        return f"{self.message} (at {location})"
