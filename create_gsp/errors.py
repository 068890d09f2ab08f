"""Exception hierarchy for create-gsp.

Every fatal condition raised by the scaffolding engine derives from
``ScaffoldError`` so the CLI driver can report it and map it to a non-zero
exit status in one place.  ``Cancelled`` is deliberately *not* a
``ScaffoldError``: declining a confirmation ends the run cleanly.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every fatal scaffolding failure."""

    exit_code: int = 1


class InvalidInput(ScaffoldError):
    """Raised for a malformed project name or an unrecognised choice."""


class UnknownTemplate(InvalidInput):
    """Raised when a template identifier is not in the registry."""

    def __init__(self, identifier: str, available: Iterable[str]) -> None:
        self.identifier = identifier
        self.available = list(available)
        super().__init__(f"Invalid template: {identifier}")


class MaterializationFailed(ScaffoldError):
    """Raised when the template tree could not be copied into place.

    Files already written are left on disk; there is no rollback.
    """

    def __init__(self, destination: Path, message: str) -> None:
        self.destination = destination
        super().__init__(f"Failed to copy template into {destination}: {message}")


class ManifestCorrupt(ScaffoldError):
    """Raised when the copied ``package.json`` is missing or unparseable."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.reason = message
        super().__init__(f"Manifest {path} is corrupt: {message}")


class Cancelled(Exception):
    """The user declined a destructive or intrusive confirmation."""

    exit_code: int = 0

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)
