from __future__ import annotations

from subprocess import CompletedProcess, run
from typing import TYPE_CHECKING

from .exceptions import RealLinkerFailedError, RealLinkerNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def run_real_linker(
    command: Sequence[str],
    *,
    on_shell_call: Callable[[Sequence[str]], None] | None = None,
) -> CompletedProcess[bytes]:
    """Run real linker as an process, its output goes directly into ours.

    Its diagnostics are not interpreted in any way.

    :param command: Composed command, first is an linker executable (as passed, not resolved)
    :param on_shell_call: Receives command before execution e.g for logging
    :raises RealLinkerFailedError: Real linker exited with non-zero exit code
    :raises RealLinkerNotFoundError: Real linker cannot be executed at all
    """
    if on_shell_call:
        on_shell_call(command)

    try:
        process = run(
            command,
            check=False,
            shell=False,
            capture_output=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise RealLinkerNotFoundError(
            linker=command[0],
            reason=e.strerror or str(e),
        ) from e

    if process.returncode != 0:
        raise RealLinkerFailedError(returncode=process.returncode)
    return process
