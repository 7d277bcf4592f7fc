import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from apklinker.cli.output import cli_fatal_abort, cli_message
from apklinker.exceptions import ApkLinkerError

# Conventional exit code for process terminated by SIGINT
INTERRUPTED_EXIT_CODE = 130


@contextmanager
def cli_apklinker_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap linkage so wrapper errors terminate process with their exit code.

    This is the only place where the wrapper process is terminated because of an error.
    """
    try:
        yield
    except ApkLinkerError as ae:
        if not debug_user_friendly_errors:
            raise  # re-throw exception due to unfriendly flag set for debugging
        cli_message("ERROR", repr(ae))
        return sys.exit(ae.exit_code)
    except KeyboardInterrupt:
        # Interrupted linkage must not look like a successful one for the build tool
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(INTERRUPTED_EXIT_CODE)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
