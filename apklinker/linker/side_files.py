from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import SideFileWriteError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from apklinker.classifier.result import ClassificationResult


def write_side_files(result: ClassificationResult) -> None:
    """Write recorded libraries search paths and libraries for the build tool.

    Both files are overwritten, one entry per line.
    Search paths are written exactly as passed, libraries are written sorted as their order is irrelevant.
    """
    values = result.control_values
    _write_lines(Path(values.libraries_search_paths_output), result.library_path)
    _write_lines(Path(values.libraries_output), sorted(result.shared_libraries))


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="\n") as file:
            file.writelines(f"{line}\n" for line in lines)
    except OSError as e:
        raise SideFileWriteError(path=path, reason=e.strerror or str(e)) from e
