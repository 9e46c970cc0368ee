"""Machine readable check reports for the command line."""

from __future__ import annotations

import msgspec

from envload.core.exceptions import RejectionKind


class RejectedLine(msgspec.Struct, frozen=True):
  line: int
  kind: RejectionKind
  reason: str
  raw: str


class CheckReport(msgspec.Struct, frozen=True):
  path: str
  names: list[str]
  rejected: list[RejectedLine]
  ok: bool


def encode_report(report: CheckReport) -> str:
  return msgspec.json.encode(report).decode("utf-8")
