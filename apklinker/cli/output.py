from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

# Prefix of every message so it can be distinguished from real linker output
MESSAGE_PREFIX = "apk-linker"


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message for user.

    Everything goes into stderr, as stdout belongs to real linker.
    INFO messages are only shown when verbose.
    """
    if level == "INFO" and not verbose:
        return
    print(f"[{MESSAGE_PREFIX}] [{level}] {text}", file=sys.stderr, flush=True)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and terminate whole process."""
    cli_message("ERROR", text)
    sys.exit(1)
