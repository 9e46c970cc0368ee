"""Value decoding for the right-hand side of NAME=VALUE lines.

Double-quoted values are decoded with a three-state scanner:

  UNQUOTED -> QUOTED           on a leading `"`
  QUOTED -> QUOTED_ESCAPED     on `\\`
  QUOTED_ESCAPED -> QUOTED     after consuming one character
  QUOTED -> done               on an unescaped `"` or end of input

Anything else is an unquoted value: the text before the first unescaped `#`,
trimmed, taken verbatim.
"""

from __future__ import annotations

import enum

from envload.config import DEFAULT_MAX_VALUE_LENGTH
from envload.parser.text import trim_whitespace

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}
_ENCODE = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


class DecodeState(enum.Enum):
  UNQUOTED = "unquoted"
  QUOTED = "quoted"
  QUOTED_ESCAPED = "quoted_escaped"


def _decode_quoted(body: str) -> str:
  """Decode the text following an opening quote.

  A missing closing quote ends the value at end of input rather than failing.
  """
  out: list[str] = []
  state = DecodeState.QUOTED
  for char in body:
    if state is DecodeState.QUOTED_ESCAPED:
      out.append(_ESCAPES.get(char, char))
      state = DecodeState.QUOTED
    elif char == "\\":
      state = DecodeState.QUOTED_ESCAPED
    elif char == '"':
      break
    else:
      out.append(char)
  return "".join(out)


def strip_inline_comment(value: str) -> str:
  """Cut an unquoted value at the first `#` not preceded by a backslash."""
  start = 0
  while True:
    pos = value.find("#", start)
    if pos == -1:
      return value
    if pos == 0 or value[pos - 1] != "\\":
      return value[:pos]
    start = pos + 1


def decode_value(raw: str, *, max_length: int = DEFAULT_MAX_VALUE_LENGTH) -> str:
  """Return the decoded value, truncated to `max_length` characters."""
  value = trim_whitespace(raw)
  if value.startswith('"'):
    decoded = _decode_quoted(value[1:])
  else:
    decoded = trim_whitespace(strip_inline_comment(value))
  return decoded[:max_length]


def encode_value(value: str) -> str:
  """Render a value as a double-quoted literal that decode_value reads back unchanged."""
  return '"' + "".join(_ENCODE.get(char, char) for char in value) + '"'
