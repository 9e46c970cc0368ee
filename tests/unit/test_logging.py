"""Unit tests for package logging setup."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from envload.config import get_settings
from envload.core.logging import TruncatedFormatter, _backup_namer, setup_logging


def test_setup_logging_installs_stream_handler_once() -> None:
  logger = setup_logging(get_settings())
  assert logger.name == "envload"
  assert logger.level == logging.WARNING
  assert logger.propagate is False
  assert len(logger.handlers) == 1
  assert isinstance(logger.handlers[0].formatter, TruncatedFormatter)

  again = setup_logging(get_settings(), level="debug")
  assert again is logger
  assert len(again.handlers) == 1
  assert again.level == logging.DEBUG


def test_setup_logging_adds_rotating_file(tmp_path: Path) -> None:
  log_path = tmp_path / "logs" / "envload.log"
  settings = replace(get_settings(), log_file=str(log_path), log_level="INFO")
  logger = setup_logging(settings)
  file_handlers = [handler for handler in logger.handlers if isinstance(handler, logging.handlers.RotatingFileHandler)]
  assert len(file_handlers) == 1
  assert log_path.parent.is_dir()

  logging.getLogger("envload.services.loader").info("hello from the loader")
  file_handlers[0].flush()
  assert "hello from the loader" in log_path.read_text(encoding="utf-8")


def test_unknown_level_is_rejected() -> None:
  with pytest.raises(ValueError, match="Unknown log level"):
    setup_logging(get_settings(), level="LOUD")


def test_backup_namer() -> None:
  assert _backup_namer("/var/log/envload.log.1") == "/var/log/envload.log-1"
  assert _backup_namer("/var/log/envload.log") == "/var/log/envload.log"


def test_truncated_formatter_shortens_tracebacks() -> None:
  def _deep(depth: int) -> None:
    if depth == 0:
      raise RuntimeError("boom")
    _deep(depth - 1)

  try:
    _deep(10)
  except RuntimeError:
    record = logging.LogRecord("envload", logging.ERROR, __file__, 1, "failed", None, exc_info=sys.exc_info())

  text = TruncatedFormatter().formatException(record.exc_info)
  assert text.startswith("Traceback")
  assert "    ...\n" in text
  assert text.rstrip().endswith("RuntimeError: boom")
