"""Acquisition of linker arguments with argument files (`@file`) expansion."""

from .failures import ArgumentFileFailure
from .source import ARGUMENT_FILE_MARKER, ArgumentSource

__all__ = [
    "ARGUMENT_FILE_MARKER",
    "ArgumentFileFailure",
    "ArgumentSource",
]
