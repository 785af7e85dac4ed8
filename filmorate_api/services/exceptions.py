"""Error kinds raised by the catalog core.

Each error is raised where it is detected and propagates unchanged; mapping
to transport statuses happens in ``filmorate_api.api.http_utils``.
"""

from __future__ import annotations

from typing import Iterable


class CatalogError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Input violates static field constraints."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__('; '.join(self.errors))


class ConditionsNotMet(CatalogError):
    """A structural precondition is violated."""


class NotFound(CatalogError):
    """Referenced entity does not exist."""
