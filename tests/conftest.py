"""Test configuration for importing the envload package."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
  sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from envload.config import get_settings  # noqa: E402
from envload.core.logging import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
  """Drop ENVLOAD_* overrides and cached settings around every test."""
  for key in [key for key in os.environ if key.startswith("ENVLOAD_")]:
    monkeypatch.delenv(key)
  get_settings.cache_clear()
  reset_logging()
  yield
  get_settings.cache_clear()
  reset_logging()


@pytest.fixture
def env_file(tmp_path: Path) -> Callable[..., Path]:
  """Write env file content to a temporary path and return it."""

  def _write(content: str, name: str = "test.env") -> Path:
    path = tmp_path / name
    # Write bytes so \r\n endings survive untouched.
    path.write_bytes(content.encode("utf-8"))
    return path

  return _write


@pytest.fixture
def fake_environ() -> dict[str, str]:
  return {}
