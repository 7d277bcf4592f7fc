from __future__ import annotations

from enum import Enum


class ControlOption(Enum):
    """Options consumed by the wrapper itself, each is followed by an value and required.

    These are never propagated into real linker.
    """

    # Path to real linker (e.g NDK gcc / clang)
    LINKER = "--cargo-apk-gcc"

    # Sysroot passed to real linker
    SYSROOT = "--cargo-apk-gcc-sysroot"

    # Object file injected into linkage (native app glue)
    NATIVE_APP_GLUE = "--cargo-apk-native-app-glue"

    # Final output of real linker
    LINKER_OUTPUT = "--cargo-apk-linker-output"

    # Side files for the build tool
    LIBRARIES_SEARCH_PATHS_OUTPUT = "--cargo-apk-libs-path-output"
    LIBRARIES_OUTPUT = "--cargo-apk-libs-output"

    @classmethod
    def from_token(cls, token: str) -> ControlOption | None:
        return _CONTROL_OPTION_BY_NAME.get(token)


class LinkerFlag(Enum):
    """Linker flags that wrapper must recognize (in their separate-value form)."""

    # Output is dropped, as real output is specified by control option
    OUTPUT = "-o"

    # Libraries search path, recorded and propagated
    LIBRARY_SEARCH_PATH = "-L"

    # Library to link with, recorded and propagated
    LIBRARY = "-l"

    @classmethod
    def from_token(cls, token: str) -> LinkerFlag | None:
        return _LINKER_FLAG_BY_NAME.get(token)


# Short form of library flag (e.g `-lfoo`)
LIBRARY_FLAG_PREFIX = LinkerFlag.LIBRARY.value

_CONTROL_OPTION_BY_NAME = {option.value: option for option in ControlOption}
_LINKER_FLAG_BY_NAME = {flag.value: flag for flag in LinkerFlag}
