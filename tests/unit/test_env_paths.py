"""Unit tests for env file discovery and reading."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from envload.core.exceptions import SourceUnavailableError
from envload.utils.env import default_env_path, find_env_file, read_env_lines


def test_default_env_path_is_in_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.chdir(tmp_path)
  assert default_env_path().resolve() == (tmp_path / ".env").resolve()
  assert default_env_path("local.env").name == "local.env"


def test_find_env_file_walks_up(tmp_path: Path) -> None:
  (tmp_path / ".env").write_text("A=1\n", encoding="utf-8")
  nested = tmp_path / "a" / "b" / "c"
  nested.mkdir(parents=True)
  assert find_env_file(start=nested) == (tmp_path / ".env").resolve()


def test_find_env_file_prefers_nearest(tmp_path: Path) -> None:
  (tmp_path / ".env").write_text("A=1\n", encoding="utf-8")
  inner = tmp_path / "inner"
  inner.mkdir()
  (inner / ".env").write_text("A=2\n", encoding="utf-8")
  assert find_env_file(start=inner) == (inner / ".env").resolve()


def test_find_env_file_from_a_file_path(tmp_path: Path) -> None:
  (tmp_path / "app.env").write_text("A=1\n", encoding="utf-8")
  script = tmp_path / "main.py"
  script.write_text("", encoding="utf-8")
  assert find_env_file("app.env", start=script) == (tmp_path / "app.env").resolve()


def test_find_env_file_returns_none(tmp_path: Path) -> None:
  assert find_env_file("envload-test-does-not-exist.env", start=tmp_path) is None


def test_read_env_lines_keeps_carriage_returns(tmp_path: Path) -> None:
  path = tmp_path / ".env"
  path.write_bytes(b"A=1\r\nB=2\rC=3\n")
  assert read_env_lines(path) == ["A=1\r", "B=2\rC=3", ""]


def test_read_env_lines_missing(tmp_path: Path) -> None:
  with pytest.raises(SourceUnavailableError, match="file not found"):
    read_env_lines(tmp_path / "nope.env")


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="permission bits are not enforced for root")
def test_read_env_lines_permission_denied(tmp_path: Path) -> None:
  path = tmp_path / "locked.env"
  path.write_text("A=1\n", encoding="utf-8")
  path.chmod(0)
  try:
    with pytest.raises(SourceUnavailableError, match="Permission denied") as excinfo:
      read_env_lines(path)
    assert isinstance(excinfo.value.__cause__, PermissionError)
  finally:
    path.chmod(0o600)


def test_read_env_lines_open_failure_is_unavailable(tmp_path: Path) -> None:
  path = tmp_path / ".env"
  path.write_text("A=1\n", encoding="utf-8")
  error = PermissionError(13, "Permission denied")
  with patch.object(Path, "open", side_effect=error):
    with pytest.raises(SourceUnavailableError) as excinfo:
      read_env_lines(path)
  assert excinfo.value.path == path
  assert excinfo.value.reason == "Permission denied"
  assert excinfo.value.__cause__ is error
