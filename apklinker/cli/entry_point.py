from __future__ import annotations

import os
import shlex
import sys
from typing import TYPE_CHECKING, NoReturn

from apklinker.arguments.source import ArgumentSource
from apklinker.classifier.classifier import classify_arguments
from apklinker.cli.config import (
    InvalidConfigurationError,
    LinkerWrapperConfig,
    load_config_from_environment,
)
from apklinker.cli.errors.error_handler import cli_apklinker_error_handler
from apklinker.cli.output import cli_fatal_abort, cli_message
from apklinker.linker.command_composer import compose_real_linker_command
from apklinker.linker.linker import run_real_linker
from apklinker.linker.side_files import write_side_files

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def cli_entry_point(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> NoReturn:
    """CLI main entry.

    Called by compiler in place of real linker, never returns.
    """
    argv = sys.argv if argv is None else argv
    environ = os.environ if environ is None else environ

    try:
        config = load_config_from_environment(environ)
    except InvalidConfigurationError as e:
        cli_fatal_abort(repr(e))

    with cli_apklinker_error_handler(
        debug_user_friendly_errors=config.debug_user_friendly_errors,
    ):
        cli_process_linker_arguments(argv, config)
        return sys.exit(0)


def cli_process_linker_arguments(
    argv: Sequence[str],
    config: LinkerWrapperConfig,
) -> None:
    """Classify arguments, write side files and call real linker with adjusted arguments."""
    source = ArgumentSource(
        argv,
        recursive_argument_files=config.recursive_argument_files,
        max_argument_file_depth=config.max_argument_file_depth,
        encoding=config.argument_file_encoding,
        on_warning=lambda message: cli_message(level="WARNING", text=message),
    )
    with source:
        result = classify_arguments(source)

    cli_message(
        level="INFO",
        text=f"Recorded {len(result.library_path)} library search path(s) and {len(result.shared_libraries)} library(ies).",
        verbose=config.verbose,
    )
    write_side_files(result)

    command = compose_real_linker_command(result.passthrough, result.control_values)
    run_real_linker(
        command,
        on_shell_call=lambda shell_command: cli_message(
            level="INFO",
            text=f"Running real linker: {shlex.join(shell_command)}",
            verbose=config.show_commands,
        ),
    )
