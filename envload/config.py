"""Loader configuration read from ENVLOAD_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_ENV_FILE = ".env"
# Conventional NAME_MAX style bound for variable names.
DEFAULT_MAX_NAME_LENGTH = 256
# One line buffer minus its terminator.
DEFAULT_MAX_VALUE_LENGTH = 1023


@dataclass(frozen=True)
class Settings:
  """Typed settings for the env file loader."""

  env_file: str
  override: bool
  max_name_length: int
  max_value_length: int
  log_level: str
  log_file: str | None
  log_max_bytes: int
  log_backup_count: int


def _parse_bool(raw: str | None) -> bool:
  """Parse a boolean-ish string from environment variables."""

  if raw is None:
    return False

  normalized = raw.strip().lower()
  return normalized in {"1", "true", "yes", "on"}


def _parse_int(name: str, default: int, *, minimum: int) -> int:
  raw = os.getenv(name)
  if raw is None or raw.strip() == "":
    return default

  try:
    value = int(raw)
  except ValueError as exc:
    raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc

  if value < minimum:
    if minimum == 1:
      raise ValueError(f"{name} must be a positive integer.")
    raise ValueError(f"{name} must be zero or a positive integer.")

  return value


def _optional_str(raw: str | None) -> str | None:
  if raw is None:
    return None

  stripped = raw.strip()
  return stripped or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings once per process."""

  env_file = os.getenv("ENVLOAD_ENV_FILE", DEFAULT_ENV_FILE).strip() or DEFAULT_ENV_FILE
  override = _parse_bool(os.getenv("ENVLOAD_OVERRIDE"))

  max_name_length = _parse_int("ENVLOAD_MAX_NAME_LENGTH", DEFAULT_MAX_NAME_LENGTH, minimum=1)
  max_value_length = _parse_int("ENVLOAD_MAX_VALUE_LENGTH", DEFAULT_MAX_VALUE_LENGTH, minimum=1)

  log_level = os.getenv("ENVLOAD_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
  log_file = _optional_str(os.getenv("ENVLOAD_LOG_FILE"))
  log_max_bytes = _parse_int("ENVLOAD_LOG_MAX_BYTES", 1048576, minimum=1)  # 1MB default
  log_backup_count = _parse_int("ENVLOAD_LOG_BACKUP_COUNT", 3, minimum=0)

  return Settings(
    env_file=env_file,
    override=override,
    max_name_length=max_name_length,
    max_value_length=max_value_length,
    log_level=log_level,
    log_file=log_file,
    log_max_bytes=log_max_bytes,
    log_backup_count=log_backup_count,
  )
