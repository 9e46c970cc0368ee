"""Apply env file entries to the process environment.

How/Why:
- Parse the whole file before touching the environment so a strict load can fail without side effects.
- Skip rejected lines with a warning; only an unreadable file aborts the load.
- Respect existing variables unless the caller asks to override them.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from envload.config import get_settings
from envload.core.exceptions import InvalidEntryError
from envload.parser.envfile import EnvFileParser
from envload.schema.entries import Entry, Rejection
from envload.utils.env import default_env_path, read_env_lines

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
  """What a single load did to the environment."""

  path: Path
  applied: list[str] = field(default_factory=list)
  skipped_existing: list[str] = field(default_factory=list)
  rejections: list[Rejection] = field(default_factory=list)

  @property
  def ok(self) -> bool:
    return not self.rejections


def parse_env_file(path: Path | str, *, parser: EnvFileParser | None = None) -> tuple[list[Entry], list[Rejection]]:
  """Read and parse a file, separating accepted entries from rejected lines."""
  active_parser = parser or EnvFileParser.from_settings(get_settings())
  entries: list[Entry] = []
  rejections: list[Rejection] = []
  for outcome in active_parser.parse(read_env_lines(path)):
    if isinstance(outcome, Rejection):
      rejections.append(outcome)
    else:
      entries.append(outcome)
  return entries, rejections


def load_env_file(
  path: Path | str,
  *,
  override: bool = False,
  strict: bool = False,
  environ: MutableMapping[str, str] | None = None,
  parser: EnvFileParser | None = None,
) -> LoadReport:
  """Load NAME=VALUE lines from `path` into `environ` (os.environ by default).

  Raises SourceUnavailableError when the file cannot be read, and
  InvalidEntryError when `strict` is set and any line was rejected.
  """
  env_path = Path(path)
  target = os.environ if environ is None else environ
  entries, rejections = parse_env_file(env_path, parser=parser)
  report = LoadReport(path=env_path, rejections=rejections)

  for rejection in rejections:
    logger.warning("Skipping invalid line %d (%s): %s", rejection.line_number, rejection.kind.describe(), rejection.raw_line)

  if strict and rejections:
    raise InvalidEntryError(f"{env_path}: {len(rejections)} invalid line(s)", violations=[rejection.describe() for rejection in rejections])

  for entry in entries:
    if not override and entry.name in target:
      report.skipped_existing.append(entry.name)
      continue
    target[entry.name] = entry.value
    report.applied.append(entry.name)
    logger.debug("Set %s from line %d", entry.name, entry.line_number)

  logger.info("Loaded %s applied=%d skipped_existing=%d rejected=%d", env_path, len(report.applied), len(report.skipped_existing), len(report.rejections))
  return report


def dotenv_values(path: Path | str, *, parser: EnvFileParser | None = None) -> dict[str, str]:
  """Parse an env file into a dict without touching the environment; later lines win."""
  entries, rejections = parse_env_file(path, parser=parser)
  for rejection in rejections:
    logger.warning("Skipping invalid line %d (%s): %s", rejection.line_number, rejection.kind.describe(), rejection.raw_line)
  return {entry.name: entry.value for entry in entries}


def load_dotenv(path: Path | str | None = None, *, override: bool | None = None, strict: bool = False) -> LoadReport:
  """Load the configured env file using ENVLOAD_* defaults for anything not given."""
  settings = get_settings()
  env_path = Path(path) if path is not None else default_env_path(settings.env_file)
  effective_override = settings.override if override is None else override
  return load_env_file(env_path, override=effective_override, strict=strict)
