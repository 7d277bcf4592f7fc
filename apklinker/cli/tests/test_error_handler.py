import pytest

from apklinker.cli.errors.error_handler import cli_apklinker_error_handler
from apklinker.exceptions import ApkLinkerError


class LinkageTimeoutError(ApkLinkerError):
    exit_code = 42

    def __repr__(self) -> str:
        return f"Linkage timed out\n\n{self.generic_error_name}"


def test_error_handler_uses_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info, cli_apklinker_error_handler():
        raise LinkageTimeoutError

    assert exc_info.value.code == 42
    assert "[linkage-timeout-error]" in capsys.readouterr().err


def test_error_handler_raw_errors() -> None:
    with pytest.raises(LinkageTimeoutError), cli_apklinker_error_handler(
        debug_user_friendly_errors=False,
    ):
        raise LinkageTimeoutError


def test_error_handler_interrupted() -> None:
    with pytest.raises(SystemExit) as exc_info, cli_apklinker_error_handler():
        raise KeyboardInterrupt

    assert exc_info.value.code == 130


def test_error_handler_requires_no_return() -> None:
    with pytest.raises(SystemExit) as exc_info, cli_apklinker_error_handler():
        pass

    assert exc_info.value.code == 1
