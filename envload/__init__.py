"""Load NAME=VALUE env files into the process environment."""

from .core.exceptions import EnvLoadError, InvalidEntryError, RejectionKind, SourceUnavailableError
from .parser.envfile import EnvFileParser
from .parser.values import decode_value, encode_value
from .schema.entries import Entry, Rejection
from .services.loader import LoadReport, dotenv_values, load_dotenv, load_env_file, parse_env_file
from .utils.env import default_env_path, find_env_file

__all__ = [
  "EnvLoadError",
  "InvalidEntryError",
  "RejectionKind",
  "SourceUnavailableError",
  "EnvFileParser",
  "decode_value",
  "encode_value",
  "Entry",
  "Rejection",
  "LoadReport",
  "dotenv_values",
  "load_dotenv",
  "load_env_file",
  "parse_env_file",
  "default_env_path",
  "find_env_file",
]
