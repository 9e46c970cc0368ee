"""Locate and read env files."""

from __future__ import annotations

from pathlib import Path

from envload.core.exceptions import SourceUnavailableError


def default_env_path(filename: str = ".env") -> Path:
  """Return the env file path in the current working directory."""

  return Path.cwd() / filename


def find_env_file(filename: str = ".env", *, start: Path | None = None) -> Path | None:
  """Walk from `start` up to the filesystem root and return the first matching file."""

  directory = (start or Path.cwd()).resolve()
  if directory.is_file():
    directory = directory.parent
  for candidate_dir in (directory, *directory.parents):
    candidate = candidate_dir / filename
    if candidate.is_file():
      return candidate
  return None


def read_env_lines(path: Path | str) -> list[str]:
  """Read an env file as UTF-8 and split it on `\\n` only.

  Any failure to open or decode the file is reported as SourceUnavailableError.
  """

  env_path = Path(path)
  if not env_path.is_file():
    reason = "is a directory" if env_path.is_dir() else "file not found"
    raise SourceUnavailableError(env_path, reason)

  try:
    # newline="" keeps \r\n intact so trimming, not the reader, removes the \r.
    with env_path.open(encoding="utf-8-sig", newline="") as handle:
      text = handle.read()
  except OSError as exc:
    raise SourceUnavailableError(env_path, exc.strerror or str(exc)) from exc
  except UnicodeDecodeError as exc:
    raise SourceUnavailableError(env_path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc

  return text.split("\n")
