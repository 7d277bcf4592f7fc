from __future__ import annotations

from typing import TYPE_CHECKING

from apklinker.exceptions import ApkLinkerError

if TYPE_CHECKING:
    from pathlib import Path


class ArgumentFileNestingTooDeepError(ApkLinkerError):
    def __init__(self, *args: object, path: Path, max_depth: int) -> None:
        super().__init__(*args)
        self.path = path
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"""Argument file '{self.path}' exceeds nesting limit of {self.max_depth} argument files!

Argument files referencing each other (or itself) cannot be expanded.
Did you create an argument file that references itself?

{self.generic_error_name}"""
