from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from apklinker.classifier.result import ControlValues

# Used by injected native app glue object
INJECTED_LIBRARIES = ("log", "android")


def compose_real_linker_command(
    passthrough: Iterable[str],
    control_values: ControlValues,
) -> list[str]:
    """Compose command to real linker from propagated arguments and control values.

    DOES NOT validate anything - as it is work of real linker itself and its command result
    """
    command: list[str] = [control_values.linker]

    # Arguments from compiler, as-is
    command.extend(passthrough)

    # Glue object and its dependencies
    command.append(control_values.native_app_glue)
    command.extend(f"-l{library}" for library in INJECTED_LIBRARIES)

    command.extend(("--sysroot", control_values.sysroot))

    # Actual output path, not one that compiler passed
    command.extend(("-o", control_values.linker_output))

    # Emit shared library with all symbols exported (for native activity to be found)
    command.extend(("-shared", "-Wl,-E"))

    return command
