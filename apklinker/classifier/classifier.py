from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, assert_never

from .exceptions import MissingControlOptionsError, MissingFlagValueError
from .options import LIBRARY_FLAG_PREFIX, ControlOption, LinkerFlag
from .result import ClassificationResult, ControlValues

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

SHARED_LIBRARY_PREFIX = "lib"
SHARED_LIBRARY_SUFFIX = ".so"


@dataclass
class ClassifierState:
    """State of an classifier pass, only required for internal usages."""

    tokens: Iterator[str]

    control_values: dict[ControlOption, str] = field(default_factory=dict)
    library_path: list[str] = field(default_factory=list)
    shared_libraries: set[str] = field(default_factory=set)
    passthrough: list[str] = field(default_factory=list)

    def expect_value(self, flag: str, expected: str) -> str:
        """Pull value that must follow given flag."""
        value = next(self.tokens, None)
        if value is None:
            raise MissingFlagValueError(flag=flag, expected=expected)
        return value


def classify_arguments(tokens: Iterable[str]) -> ClassificationResult:
    """Partition linker arguments in single pass.

    Control options are captured (with their values), `-o` with its value is dropped,
    `-L` / `-l` are recorded and also propagated, everything else is propagated as-is.

    :param tokens: Linker arguments, usually an `ArgumentSource`
    :raises MissingFlagValueError: Flag that requires value is last argument
    :raises MissingControlOptionsError: Any of control options is not passed at all
    """
    state = ClassifierState(tokens=iter(tokens))

    while (token := next(state.tokens, None)) is not None:
        _classify_token(state, token)

    return ClassificationResult(
        control_values=_collect_control_values(state.control_values),
        library_path=state.library_path,
        shared_libraries=state.shared_libraries,
        passthrough=state.passthrough,
    )


def canonical_shared_library_name(name: str) -> str:
    """Get shared object filename for library short name (e.g `foo` -> `libfoo.so`)."""
    return f"{SHARED_LIBRARY_PREFIX}{name}{SHARED_LIBRARY_SUFFIX}"


def _classify_token(state: ClassifierState, token: str) -> None:
    if (option := ControlOption.from_token(token)) is not None:
        # Latest one wins if passed several times
        state.control_values[option] = state.expect_value(token, expected="an value")
        return

    flag = LinkerFlag.from_token(token)
    match flag:
        case LinkerFlag.OUTPUT:
            next(state.tokens, None)
        case LinkerFlag.LIBRARY_SEARCH_PATH:
            path = state.expect_value(token, expected="a path")
            state.library_path.append(path)
            state.passthrough.extend((token, path))
        case LinkerFlag.LIBRARY:
            name = state.expect_value(token, expected="a library name")
            state.shared_libraries.add(canonical_shared_library_name(name))
            state.passthrough.extend((token, name))
        case None:
            if token.startswith(LIBRARY_FLAG_PREFIX):
                name = token.removeprefix(LIBRARY_FLAG_PREFIX)
                state.shared_libraries.add(canonical_shared_library_name(name))
            state.passthrough.append(token)
        case _:
            assert_never(flag)


def _collect_control_values(values: dict[ControlOption, str]) -> ControlValues:
    missing = [option for option in ControlOption if option not in values]
    if missing:
        raise MissingControlOptionsError(missing=missing)

    # Values are kept as passed, not normalized as paths
    return ControlValues(
        linker=values[ControlOption.LINKER],
        sysroot=values[ControlOption.SYSROOT],
        native_app_glue=values[ControlOption.NATIVE_APP_GLUE],
        linker_output=values[ControlOption.LINKER_OUTPUT],
        libraries_search_paths_output=values[ControlOption.LIBRARIES_SEARCH_PATHS_OUTPUT],
        libraries_output=values[ControlOption.LIBRARIES_OUTPUT],
    )
