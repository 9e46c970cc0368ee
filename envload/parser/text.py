"""Whitespace handling shared by the line parser."""

from __future__ import annotations

# ASCII space class only; unicode whitespace is kept as content.
ASCII_WHITESPACE = " \t\n\r\f\v"


def trim_whitespace(text: str) -> str:
  """Strip leading and trailing ASCII whitespace, then one leftover carriage return."""
  trimmed = text.strip(ASCII_WHITESPACE)
  if trimmed.endswith("\r"):
    trimmed = trimmed[:-1]
  return trimmed
