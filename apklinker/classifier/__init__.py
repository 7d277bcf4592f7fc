"""Single pass classification of linker arguments."""

from .classifier import canonical_shared_library_name, classify_arguments
from .options import ControlOption, LinkerFlag
from .result import ClassificationResult, ControlValues

__all__ = [
    "ClassificationResult",
    "ControlOption",
    "ControlValues",
    "LinkerFlag",
    "canonical_shared_library_name",
    "classify_arguments",
]
