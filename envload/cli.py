"""Command line entry point: check, dump, read or run with an env file."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

from envload.config import get_settings
from envload.core.exceptions import EnvLoadError, SourceUnavailableError
from envload.core.logging import setup_logging
from envload.parser.values import encode_value
from envload.schema.report import CheckReport, RejectedLine, encode_report
from envload.services.loader import load_env_file, parse_env_file

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNAVAILABLE = 2
EXIT_NOT_EXECUTABLE = 126
EXIT_COMMAND_NOT_FOUND = 127


def _build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="envload", description="Load NAME=VALUE env files into the process environment.")
  parser.add_argument("--log-level", default=None, help="Python logging level (default: ENVLOAD_LOG_LEVEL or WARNING).")
  subparsers = parser.add_subparsers(dest="command", required=True)

  check = subparsers.add_parser("check", help="Parse a file and report invalid lines.")
  check.add_argument("file", nargs="?", default=None, help="Env file path (default: ENVLOAD_ENV_FILE or .env).")
  check.add_argument("--json", action="store_true", help="Print the report as JSON.")

  dump = subparsers.add_parser("dump", help="Print the parsed entries as normalized NAME=\"VALUE\" lines.")
  dump.add_argument("file", nargs="?", default=None, help="Env file path.")

  get = subparsers.add_parser("get", help="Load a file (overriding) and print one variable.")
  get.add_argument("name", help="Variable name to print.")
  get.add_argument("file", nargs="?", default=None, help="Env file path.")

  run = subparsers.add_parser("run", help="Run a command with env vars loaded from a file.")
  run.add_argument("--file", default=None, help="Env file path.")
  run.add_argument("--override", action="store_true", help="Override existing env vars with values from the file (default: ENVLOAD_OVERRIDE).")
  run.add_argument("--strict", action="store_true", help="Refuse to run when the file has invalid lines.")
  run.add_argument("cmd", nargs=argparse.REMAINDER, help="Command to run (prefix with --).")
  return parser


def _resolve_path(raw: str | None) -> Path:
  return Path(raw) if raw else Path(get_settings().env_file)


def _cmd_check(args: argparse.Namespace) -> int:
  path = _resolve_path(args.file)
  entries, rejections = parse_env_file(path)
  if args.json:
    report = CheckReport(
      path=str(path),
      names=[entry.name for entry in entries],
      rejected=[RejectedLine(line=item.line_number, kind=item.kind, reason=item.kind.describe(), raw=item.raw_line) for item in rejections],
      ok=not rejections,
    )
    print(encode_report(report))
  else:
    for rejection in rejections:
      print(f"{path}:{rejection.line_number}: {rejection.kind.describe()}: {rejection.raw_line}")
    print(f"{path}: {len(entries)} entries, {len(rejections)} invalid line(s)")
  return EXIT_INVALID if rejections else EXIT_OK


def _cmd_dump(args: argparse.Namespace) -> int:
  entries, _ = parse_env_file(_resolve_path(args.file))
  latest: dict[str, str] = {}
  for entry in entries:
    latest[entry.name] = entry.value
  for name, value in latest.items():
    print(f"{name}={encode_value(value)}")
  return EXIT_OK


def _cmd_get(args: argparse.Namespace) -> int:
  load_env_file(_resolve_path(args.file), override=True)
  value = os.environ.get(args.name)
  if value is None:
    print(f"{args.name} is not set", file=sys.stderr)
    return EXIT_INVALID
  print(f"{args.name}={value}")
  return EXIT_OK


def _cmd_run(args: argparse.Namespace) -> int:
  command = list(args.cmd)
  if command and command[0] == "--":
    command = command[1:]

  if not command:
    print("No command provided. Usage: envload run [--file .env] -- <command> [args...]", file=sys.stderr)
    return EXIT_INVALID

  # Ensure python invocations run under the same interpreter as the loader.
  if command[0] in {"python", "python3"}:
    command[0] = sys.executable

  override = bool(args.override) or get_settings().override
  env = dict(os.environ)
  load_env_file(_resolve_path(args.file), override=override, strict=bool(args.strict), environ=env)
  try:
    completed = subprocess.run(command, env=env, check=False)
  except FileNotFoundError:
    print(f"Command not found: {command[0]}", file=sys.stderr)
    return EXIT_COMMAND_NOT_FOUND
  except PermissionError as exc:
    print(f"Command not executable: {command[0]}: {exc.strerror}", file=sys.stderr)
    return EXIT_NOT_EXECUTABLE
  return completed.returncode


_COMMANDS = {"check": _cmd_check, "dump": _cmd_dump, "get": _cmd_get, "run": _cmd_run}


def main(argv: list[str] | None = None) -> int:
  args = _build_parser().parse_args(argv)
  try:
    setup_logging(get_settings(), level=args.log_level)
  except ValueError as exc:
    print(f"Invalid configuration: {exc}", file=sys.stderr)
    return EXIT_INVALID

  try:
    return _COMMANDS[args.command](args)
  except SourceUnavailableError as exc:
    print(f"Failed to open env file: {exc}", file=sys.stderr)
    return EXIT_UNAVAILABLE
  except EnvLoadError as exc:
    print(str(exc), file=sys.stderr)
    return EXIT_INVALID


if __name__ == "__main__":
  sys.exit(main())
