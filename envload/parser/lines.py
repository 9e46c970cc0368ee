"""Split one NAME=VALUE line and turn it into an Entry or a Rejection."""

from __future__ import annotations

from envload.config import DEFAULT_MAX_NAME_LENGTH, DEFAULT_MAX_VALUE_LENGTH
from envload.core.exceptions import RejectionKind
from envload.parser.names import NameFailure, validate_name
from envload.parser.text import trim_whitespace
from envload.parser.values import decode_value
from envload.schema.entries import Entry, ParseOutcome, Rejection

_NAME_REJECTIONS = {
  NameFailure.INVALID_CHARACTERS: RejectionKind.INVALID_CHARACTERS,
  NameFailure.TOO_LONG: RejectionKind.NAME_TOO_LONG,
}


def split_line(line: str) -> tuple[str, str] | None:
  """Split on the first `=` only; later `=` characters belong to the value."""
  name, sep, value = line.partition("=")
  if not sep:
    return None
  return name, value


def parse_line(
  line: str,
  line_number: int = 0,
  *,
  max_name_length: int = DEFAULT_MAX_NAME_LENGTH,
  max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> ParseOutcome:
  """Parse a non-blank, non-comment line."""
  parts = split_line(line)
  if parts is None:
    return Rejection(raw_line=line, kind=RejectionKind.NO_SEPARATOR, line_number=line_number)

  raw_name, raw_value = parts
  name = trim_whitespace(raw_name)
  check = validate_name(name, max_length=max_name_length)
  if not check.ok:
    return Rejection(raw_line=line, kind=_NAME_REJECTIONS[check.failure], line_number=line_number)

  return Entry(name=name, value=decode_value(raw_value, max_length=max_value_length), line_number=line_number, max_name_length=max_name_length)
