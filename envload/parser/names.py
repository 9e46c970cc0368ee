"""Variable name validation."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class NameFailure(str, enum.Enum):
  INVALID_CHARACTERS = "invalid_characters"
  TOO_LONG = "too_long"


@dataclass(frozen=True)
class NameCheck:
  """Outcome of validating a variable name."""

  ok: bool
  failure: NameFailure | None = None

  def __bool__(self) -> bool:
    return self.ok


_VALID = NameCheck(ok=True)


def validate_name(name: str, *, max_length: int) -> NameCheck:
  """Check identifier grammar first, then the length bound."""
  # fullmatch also rejects the empty string.
  if not NAME_PATTERN.fullmatch(name):
    return NameCheck(ok=False, failure=NameFailure.INVALID_CHARACTERS)

  if len(name) > max_length:
    return NameCheck(ok=False, failure=NameFailure.TOO_LONG)

  return _VALID
