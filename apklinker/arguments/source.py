from __future__ import annotations

import codecs
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import ArgumentFileNestingTooDeepError
from .failures import ArgumentFileFailure

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Sequence

# Token `@path` is an reference to an argument file
ARGUMENT_FILE_MARKER = "@"

DEFAULT_MAX_ARGUMENT_FILE_DEPTH = 16


class ArgumentSource:
    """Flat stream of linker arguments (tokens) with argument files expanded in place.

    Arguments are taken from given argv, first one is an invocation name and is skipped.
    Token `@path` is replaced with lines of file at `path`, one token per line
    (no quoting or word splitting), exactly as if these lines were written in place of that token.

    Origins (argv itself and opened argument files) are kept as a stack, only the topmost one is read.
    Unless `recursive_argument_files` is set, lines of an argument file are returned as-is,
    even if they look like an argument file reference.
    """

    def __init__(
        self,
        argv: Sequence[str],
        *,
        recursive_argument_files: bool = False,
        max_argument_file_depth: int = DEFAULT_MAX_ARGUMENT_FILE_DEPTH,
        encoding: str = "utf-8",
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        """Create source from process arguments.

        :param argv: Arguments as in `sys.argv` (with invocation name)
        :param recursive_argument_files: Expand argument file references found inside argument files
        :param max_argument_file_depth: How much argument files may be opened at once (only reachable with recursion)
        :param encoding: Encoding of argument files
        :param on_warning: Receives message about any argument file that failed to open / read
        :raises ValueError: Encoding is not suitable for argument files, see `is_line_delimited_encoding`
        """
        self.recursive_argument_files = recursive_argument_files
        self.max_argument_file_depth = max_argument_file_depth
        if not is_line_delimited_encoding(encoding):
            msg = f"Argument files cannot be read in {encoding!r} encoding, it must be text encoding compatible with ASCII line terminators"
            raise ValueError(msg)
        self.encoding = encoding

        self.failures: list[ArgumentFileFailure] = []

        self._on_warning = on_warning
        self._origins: list[Generator[str]] = [_iterate_process_arguments(argv)]

    def __iter__(self) -> ArgumentSource:
        return self

    def __next__(self) -> str:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def __enter__(self) -> ArgumentSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def depth(self) -> int:
        """Amount of argument files that are currently being read."""
        return max(len(self._origins) - 1, 0)

    def next(self) -> str | None:
        """Get next token, or None when there is no more tokens.

        Once None is returned, stream is finished and will never resume.
        """
        while self._origins:
            token = next(self._origins[-1], None)
            if token is None:
                # Origin is exhausted, continue with outer one from where it left off
                self._origins.pop()
                continue

            if not self._is_expandable_reference(token):
                return token

            path = Path(token.removeprefix(ARGUMENT_FILE_MARKER))
            self._push_argument_file(path)

        return None

    def close(self) -> None:
        """Release all argument files that are still opened (e.g consumer stopped early)."""
        while self._origins:
            self._origins.pop().close()

    def _is_expandable_reference(self, token: str) -> bool:
        if not token.startswith(ARGUMENT_FILE_MARKER):
            return False
        return self.depth == 0 or self.recursive_argument_files

    def _push_argument_file(self, path: Path) -> None:
        if self.depth >= self.max_argument_file_depth:
            # Fatal, so outer argument files are released right away
            self.close()
            raise ArgumentFileNestingTooDeepError(
                path=path,
                max_depth=self.max_argument_file_depth,
            )
        self._origins.append(self._read_argument_file(path))

    def _read_argument_file(self, path: Path) -> Generator[str]:
        """Yield lines of an argument file, file is only opened while being read.

        Failure to open or read is reported and treated as exhaustion of that file.
        """
        try:
            handle = path.open("rb")
        except OSError as e:
            # Reference token itself is dropped, so file contributes nothing
            self._report_failure(
                ArgumentFileFailure(path=path, stage="open", reason=e.strerror or str(e)),
            )
            return

        with handle:
            try:
                for line in handle:
                    yield _strip_line_terminator(line.decode(self.encoding))
            except (OSError, UnicodeDecodeError) as e:
                self._report_failure(
                    ArgumentFileFailure(path=path, stage="read", reason=str(e)),
                )

    def _report_failure(self, failure: ArgumentFileFailure) -> None:
        self.failures.append(failure)
        if self._on_warning:
            self._on_warning(str(failure))


def _iterate_process_arguments(argv: Sequence[str]) -> Generator[str]:
    # First one is an invocation name (e.g path to that wrapper)
    yield from argv[1:]


def _strip_line_terminator(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def is_line_delimited_encoding(encoding: str) -> bool:
    """Is argument file in that encoding can be split into lines by terminator bytes before decoding.

    Rejects unknown and non-text codecs (e.g `hex`) and encodings where terminators are not single ASCII bytes (e.g `utf-16`).
    """
    try:
        codec = codecs.lookup(encoding)
    except LookupError:
        return False

    if not getattr(codec, "_is_text_encoding", True):
        return False
    try:
        return "\r\n".encode(codec.name) == b"\r\n"
    except UnicodeError:
        return False
