from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apklinker.arguments.source import (
    DEFAULT_MAX_ARGUMENT_FILE_DEPTH,
    is_line_delimited_encoding,
)
from apklinker.exceptions import ApkLinkerError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Command line belongs to compiler, so wrapper is configured via environment
ENV_RECURSIVE_ARGUMENT_FILES = "APKLINKER_RECURSIVE_ARGUMENT_FILES"
ENV_MAX_ARGUMENT_FILE_DEPTH = "APKLINKER_MAX_ARGUMENT_FILE_DEPTH"
ENV_ARGUMENT_FILE_ENCODING = "APKLINKER_ARGUMENT_FILE_ENCODING"
ENV_VERBOSE = "APKLINKER_VERBOSE"
ENV_SHOW_COMMANDS = "APKLINKER_SHOW_COMMANDS"
ENV_RAW_ERRORS = "APKLINKER_RAW_ERRORS"

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"", "0", "false", "no", "off"}


class InvalidConfigurationError(ApkLinkerError):
    def __init__(self, *args: object, variable: str, value: str, expected: str) -> None:
        super().__init__(*args)
        self.variable = variable
        self.value = value
        self.expected = expected

    def __repr__(self) -> str:
        return f"""Invalid value '{self.value}' of environment variable {self.variable}!

Expected {self.expected}.

{self.generic_error_name}"""


@dataclass(frozen=True)
class LinkerWrapperConfig:
    """Settings of the wrapper itself, not related to linker arguments."""

    # Expand `@file` references found inside argument files
    recursive_argument_files: bool = False
    max_argument_file_depth: int = DEFAULT_MAX_ARGUMENT_FILE_DEPTH
    argument_file_encoding: str = "utf-8"

    verbose: bool = False
    show_commands: bool = False

    # If false, internal errors are re-raised with traceback
    debug_user_friendly_errors: bool = True


def load_config_from_environment(environ: Mapping[str, str]) -> LinkerWrapperConfig:
    """Parse wrapper settings from environment variables into custom DTO."""
    return LinkerWrapperConfig(
        recursive_argument_files=_parse_flag(environ, ENV_RECURSIVE_ARGUMENT_FILES),
        max_argument_file_depth=_parse_positive_integer(
            environ,
            ENV_MAX_ARGUMENT_FILE_DEPTH,
            default=DEFAULT_MAX_ARGUMENT_FILE_DEPTH,
        ),
        argument_file_encoding=_parse_encoding(
            environ,
            ENV_ARGUMENT_FILE_ENCODING,
            default="utf-8",
        ),
        verbose=_parse_flag(environ, ENV_VERBOSE),
        show_commands=_parse_flag(environ, ENV_SHOW_COMMANDS),
        debug_user_friendly_errors=not _parse_flag(environ, ENV_RAW_ERRORS),
    )


def _parse_flag(environ: Mapping[str, str], variable: str) -> bool:
    value = environ.get(variable, "")
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise InvalidConfigurationError(
        variable=variable,
        value=value,
        expected=f"one of {', '.join(sorted(TRUTHY_VALUES | FALSY_VALUES - {''}))}",
    )


def _parse_positive_integer(
    environ: Mapping[str, str],
    variable: str,
    *,
    default: int,
) -> int:
    value = environ.get(variable)
    if value is None or not value.strip():
        return default

    try:
        number = int(value)
    except ValueError:
        number = 0

    if number <= 0:
        raise InvalidConfigurationError(
            variable=variable,
            value=value,
            expected="positive integer",
        )
    return number


def _parse_encoding(environ: Mapping[str, str], variable: str, *, default: str) -> str:
    value = environ.get(variable)
    if value is None or not value.strip():
        return default

    if not is_line_delimited_encoding(value):
        raise InvalidConfigurationError(
            variable=variable,
            value=value,
            expected="text encoding compatible with ASCII line terminators (e.g utf-8, latin-1)",
        )
    return value
