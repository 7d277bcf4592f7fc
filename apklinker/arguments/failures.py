from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ArgumentFileFailure:
    """Recoverable failure while expanding an argument file.

    Source that failed contributes nothing further, outer arguments are still consumed.
    """

    path: Path
    stage: Literal["open", "read"]
    reason: str

    def __str__(self) -> str:
        return f"Unable to {self.stage} argument file '{self.path}': {self.reason}"
