from __future__ import annotations

from typing import TYPE_CHECKING

from apklinker.exceptions import ApkLinkerError

if TYPE_CHECKING:
    from pathlib import Path


class RealLinkerNotFoundError(ApkLinkerError):
    # Same as shell reports for a command that cannot be found / executed
    exit_code = 127

    def __init__(self, *args: object, linker: str, reason: str) -> None:
        super().__init__(*args)
        self.linker = linker
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to execute real linker '{self.linker}': {self.reason}

Is toolchain (NDK) installed and path to linker passed properly?

{self.generic_error_name}"""


class SideFileWriteError(ApkLinkerError):
    def __init__(self, *args: object, path: Path, reason: str) -> None:
        super().__init__(*args)
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to write linker side file '{self.path}': {self.reason}

Side files are required by the build tool to pick up libraries.

{self.generic_error_name}"""


class RealLinkerFailedError(ApkLinkerError):
    def __init__(self, *args: object, returncode: int) -> None:
        super().__init__(*args)
        self.returncode = returncode
        # Propagate exit code of real linker, killed by signal (negative) is just a failure
        self.exit_code = returncode if returncode > 0 else 1

    def __repr__(self) -> str:
        return f"""Error while executing linker (exit code {self.returncode})!

See real linker output above.

{self.generic_error_name}"""
