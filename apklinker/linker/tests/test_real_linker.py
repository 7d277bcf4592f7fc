import sys
from pathlib import Path

import pytest

from apklinker.linker.exceptions import RealLinkerFailedError, RealLinkerNotFoundError
from apklinker.linker.linker import run_real_linker


def test_run_real_linker_success() -> None:
    calls: list[list[str]] = []
    process = run_real_linker(
        [sys.executable, "-c", "pass"],
        on_shell_call=lambda command: calls.append(list(command)),
    )

    assert process.returncode == 0
    assert calls == [[sys.executable, "-c", "pass"]]


def test_run_real_linker_failure() -> None:
    with pytest.raises(RealLinkerFailedError) as exc_info:
        run_real_linker([sys.executable, "-c", "raise SystemExit(3)"])
    assert exc_info.value.returncode == 3
    assert exc_info.value.exit_code == 3


def test_run_real_linker_killed_by_signal() -> None:
    kill_itself = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    with pytest.raises(RealLinkerFailedError) as exc_info:
        run_real_linker([sys.executable, "-c", kill_itself])
    assert exc_info.value.returncode < 0
    assert exc_info.value.exit_code == 1


def test_run_real_linker_not_found(tmp_path: Path) -> None:
    with pytest.raises(RealLinkerNotFoundError) as exc_info:
        run_real_linker([str(tmp_path / "no-such-linker")])
    assert exc_info.value.exit_code == 127
