
from apklinker.classifier.result import ControlValues
from apklinker.linker.command_composer import compose_real_linker_command

CONTROL_VALUES = ControlValues(
    linker="/ndk/bin/clang",
    sysroot="/ndk/sysroot",
    native_app_glue="/build/glue.o",
    linker_output="/build/libmain.so",
    libraries_search_paths_output="/build/lib_paths",
    libraries_output="/build/libs",
)


def test_compose_real_linker_command() -> None:
    command = compose_real_linker_command(
        ["main.o", "-L", "/a", "-lfoo"],
        CONTROL_VALUES,
    )

    assert command == [
        "/ndk/bin/clang",
        "main.o",
        "-L",
        "/a",
        "-lfoo",
        "/build/glue.o",
        "-llog",
        "-landroid",
        "--sysroot",
        "/ndk/sysroot",
        "-o",
        "/build/libmain.so",
        "-shared",
        "-Wl,-E",
    ]


def test_compose_real_linker_command_empty_passthrough() -> None:
    command = compose_real_linker_command([], CONTROL_VALUES)
    assert command[:2] == ["/ndk/bin/clang", "/build/glue.o"]


def test_compose_real_linker_command_keeps_relative_linker() -> None:
    control_values = ControlValues(
        linker="./gcc",
        sysroot="",
        native_app_glue="./glue.o",
        linker_output="./out/libmain.so",
        libraries_search_paths_output="lib_paths",
        libraries_output="libs",
    )
    command = compose_real_linker_command([], control_values)

    # `./gcc` must not become `gcc`, which would be searched in PATH
    assert command[0] == "./gcc"
    assert command[1] == "./glue.o"
    assert command[command.index("--sysroot") + 1] == ""
    assert command[command.index("-o") + 1] == "./out/libmain.so"
