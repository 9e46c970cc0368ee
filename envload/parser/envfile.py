"""Line-oriented env file parser."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from envload.config import DEFAULT_MAX_NAME_LENGTH, DEFAULT_MAX_VALUE_LENGTH, Settings
from envload.parser.lines import parse_line
from envload.parser.text import trim_whitespace
from envload.schema.entries import ParseOutcome, Rejection


class EnvFileParser:
  """Turn raw lines into Entries and Rejections.

  The parser keeps no state between lines, so a single instance can be shared
  freely. Blank lines and `#` comment lines produce nothing; a bad line yields a
  Rejection and scanning continues.
  """

  def __init__(self, *, max_name_length: int = DEFAULT_MAX_NAME_LENGTH, max_value_length: int = DEFAULT_MAX_VALUE_LENGTH) -> None:
    if max_name_length <= 0:
      raise ValueError("max_name_length must be a positive integer.")
    if max_value_length <= 0:
      raise ValueError("max_value_length must be a positive integer.")
    self.max_name_length = max_name_length
    self.max_value_length = max_value_length

  @classmethod
  def from_settings(cls, settings: Settings) -> EnvFileParser:
    return cls(max_name_length=settings.max_name_length, max_value_length=settings.max_value_length)

  def parse_line(self, raw: str, line_number: int = 0) -> ParseOutcome | None:
    """Parse one raw line; None means the line is blank or a comment."""
    line = trim_whitespace(raw)
    if not line or line.startswith("#"):
      return None
    outcome = parse_line(line, line_number, max_name_length=self.max_name_length, max_value_length=self.max_value_length)
    if isinstance(outcome, Rejection):
      # Report the line as written, minus its terminator.
      return replace(outcome, raw_line=raw.rstrip("\r\n"))
    return outcome

  def parse(self, lines: Iterable[str]) -> Iterator[ParseOutcome]:
    """Yield an outcome for every meaningful line, numbering lines from 1."""
    for line_number, raw in enumerate(lines, start=1):
      outcome = self.parse_line(raw, line_number)
      if outcome is not None:
        yield outcome

  def parse_text(self, text: str) -> Iterator[ParseOutcome]:
    # Only \n and \r\n terminate lines; a lone \r stays inside the line.
    return self.parse(text.split("\n"))
