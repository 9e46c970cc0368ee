import logging
import logging.handlers
import sys
from pathlib import Path
from types import TracebackType

from envload.config import Settings

LOG_LINE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
LOG_FORMATTER = logging.Formatter(LOG_LINE_FORMAT, datefmt=LOG_DATE_FORMAT)

_PACKAGE_LOGGER = "envload"
# Track logging state
_LOGGING_INITIALIZED = False


class TruncatedFormatter(logging.Formatter):
  """Formatter that truncates the stack trace to the last few lines."""

  # ruff: noqa: N802
  def formatException(self, ei: tuple[type[BaseException] | None, BaseException | None, TracebackType | None]) -> str:
    import traceback

    lines = traceback.format_exception(*ei)
    # Keep header + last 5 lines of traceback
    if len(lines) > 6:
      return "".join(lines[:1] + ["    ...\n"] + lines[-5:])
    return "".join(lines)


def _backup_namer(default_name: str) -> str:
  """Name rotated files `loader.log-1` instead of `loader.log.1`."""
  parts = default_name.rsplit(".", 1)
  if len(parts) == 2 and parts[1].isdigit():
    return f"{parts[0]}-{parts[1]}"
  return default_name


def _build_handlers(settings: Settings) -> list[logging.Handler]:
  """Create the stderr handler and, when configured, a rotating file handler."""
  stream = logging.StreamHandler(sys.stderr)
  stream.setFormatter(TruncatedFormatter(LOG_LINE_FORMAT, datefmt=LOG_DATE_FORMAT))
  handlers: list[logging.Handler] = [stream]

  if settings.log_file:
    log_path = Path(settings.log_file)
    try:
      log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
      raise RuntimeError(f"Failed to create log directory at {log_path.parent}: {exc}") from exc

    file_handler = logging.handlers.RotatingFileHandler(log_path, encoding="utf-8", maxBytes=settings.log_max_bytes, backupCount=settings.log_backup_count)
    file_handler.namer = _backup_namer
    file_handler.setFormatter(LOG_FORMATTER)
    handlers.append(file_handler)

  return handlers


def _resolve_level(name: str) -> int:
  level = logging.getLevelName(name.upper())
  if not isinstance(level, int):
    raise ValueError(f"Unknown log level {name!r}.")
  return level


def setup_logging(settings: Settings, *, level: str | None = None) -> logging.Logger:
  """Attach handlers to the package logger once and return it."""
  global _LOGGING_INITIALIZED
  logger = logging.getLogger(_PACKAGE_LOGGER)
  logger.setLevel(_resolve_level(level or settings.log_level))
  if _LOGGING_INITIALIZED:
    return logger

  logger.handlers = _build_handlers(settings)
  logger.propagate = False
  _LOGGING_INITIALIZED = True
  logger.debug("Logging initialized at level %s", logging.getLevelName(logger.level))
  return logger


def reset_logging() -> None:
  """Detach handlers so the next setup_logging call rebuilds them."""
  global _LOGGING_INITIALIZED
  logger = logging.getLogger(_PACKAGE_LOGGER)
  for handler in list(logger.handlers):
    logger.removeHandler(handler)
    handler.close()
  logger.setLevel(logging.NOTSET)
  logger.propagate = True
  _LOGGING_INITIALIZED = False
