from __future__ import annotations

from typing import TYPE_CHECKING

from apklinker.exceptions import ApkLinkerError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .options import ControlOption


class MissingFlagValueError(ApkLinkerError):
    def __init__(self, *args: object, flag: str, expected: str) -> None:
        super().__init__(*args)
        self.flag = flag
        self.expected = expected

    def __repr__(self) -> str:
        return f"""Flag '{self.flag}' must be followed by {self.expected}, but arguments ended!

Linker arguments are probably truncated (check argument files if any).

{self.generic_error_name}"""


class MissingControlOptionsError(ApkLinkerError):
    def __init__(self, *args: object, missing: Iterable[ControlOption]) -> None:
        super().__init__(*args)
        self.missing = tuple(missing)

    def __repr__(self) -> str:
        return f"""Missing required option(s) in linker arguments: {", ".join(o.value for o in self.missing)}

These options must be passed by the build tool that set this wrapper as an linker.
Did you call the wrapper directly instead of the build tool?

{self.generic_error_name}"""
