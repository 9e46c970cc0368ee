"""Parse outcomes handed from the parser to the loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from envload.config import DEFAULT_MAX_NAME_LENGTH
from envload.core.exceptions import InvalidEntryError, RejectionKind
from envload.parser.names import NameFailure, validate_name


@dataclass(frozen=True)
class Entry:
  """A validated NAME=VALUE pair with a fully decoded value.

  Only `name` and `value` take part in equality.
  """

  name: str
  value: str
  line_number: int = field(default=0, compare=False)
  max_name_length: int = field(default=DEFAULT_MAX_NAME_LENGTH, compare=False, repr=False)

  def __post_init__(self) -> None:
    check = validate_name(self.name, max_length=self.max_name_length)
    if check.failure is NameFailure.TOO_LONG:
      raise InvalidEntryError(f"Variable name exceeds maximum length of {self.max_name_length}: {self.name[:32]!r}...")
    if not check.ok:
      raise InvalidEntryError(f"Invalid variable name {self.name!r}")


@dataclass(frozen=True)
class Rejection:
  """A line that could not be turned into an Entry."""

  raw_line: str
  kind: RejectionKind
  line_number: int = 0

  def describe(self) -> str:
    return f"line {self.line_number} ({self.kind.describe()}): {self.raw_line}"


ParseOutcome = Union[Entry, Rejection]
