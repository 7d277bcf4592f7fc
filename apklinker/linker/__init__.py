"""Interaction with real linker and the build tool (side files)."""

from .command_composer import compose_real_linker_command
from .linker import run_real_linker
from .side_files import write_side_files

__all__ = [
    "compose_real_linker_command",
    "run_real_linker",
    "write_side_files",
]
