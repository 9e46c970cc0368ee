"""Error taxonomy for env file loading.

How/Why:
- Per-line problems are classified with `RejectionKind` and never raised while scanning.
- Only an unreadable source is fatal for a load, surfaced as `SourceUnavailableError`.
- `InvalidEntryError` guards entry construction and strict loads.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from pathlib import Path


class RejectionKind(str, enum.Enum):
  """Reasons a single line is skipped."""

  NO_SEPARATOR = "no_separator"
  INVALID_CHARACTERS = "invalid_characters"
  NAME_TOO_LONG = "name_too_long"

  def describe(self) -> str:
    """Return a short human readable diagnostic."""
    return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
  RejectionKind.NO_SEPARATOR: "expected NAME=VALUE",
  RejectionKind.INVALID_CHARACTERS: "name must match [A-Za-z_][A-Za-z0-9_]*",
  RejectionKind.NAME_TOO_LONG: "name exceeds maximum length",
}


class EnvLoadError(RuntimeError):
  """Base class for env file loading failures."""


class SourceUnavailableError(EnvLoadError):
  """Raised when the env file cannot be opened or decoded."""

  def __init__(self, path: Path | str, reason: str) -> None:
    self.path = Path(path)
    self.reason = reason
    super().__init__(f"{self.path}: {reason}")


class InvalidEntryError(EnvLoadError, ValueError):
  """Raised when an entry is built from an invalid name or a strict load meets rejected lines."""

  def __init__(self, message: str, *, violations: Sequence[str] = ()) -> None:
    self.violations = tuple(violations)
    if self.violations:
      message = "{message}:\n- {violations}".format(message=message, violations="\n- ".join(self.violations))
    super().__init__(message)
