from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ControlValues:
    """Values of all required control options, see `ControlOption`.

    Kept exactly as passed (e.g `./gcc` must not be resolved via PATH as `gcc`).
    """

    linker: str
    sysroot: str
    native_app_glue: str
    linker_output: str

    libraries_search_paths_output: str
    libraries_output: str


@dataclass
class ClassificationResult:
    """Linker arguments partitioned by classifier."""

    control_values: ControlValues

    # As passed, order (and duplicates) matters as linker searches in that order
    library_path: list[str] = field(default_factory=list)

    # Canonical names (`libfoo.so`), only existence matters
    shared_libraries: set[str] = field(default_factory=set)

    # Propagated into real linker as-is, in that order
    passthrough: list[str] = field(default_factory=list)
