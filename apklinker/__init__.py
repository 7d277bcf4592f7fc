"""Linker wrapper for Android native activity builds.

Stands in for the real linker: classifies incoming linker arguments,
records library search paths / libraries for the build tool and calls real linker.
"""

from .arguments.source import ArgumentSource
from .classifier.classifier import classify_arguments

__all__ = [
    "ArgumentSource",
    "classify_arguments",
]
