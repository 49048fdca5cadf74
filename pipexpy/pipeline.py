"""Running `< infile cmd1 | cmd2 > outfile` with two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence, Tuple

from .pathfind import EmptyCommandError, PipexError, resolve_command

ARG_ERROR = "execute as './pipex <infile> <cmd1> <cmd2> <outfile>'"
_FAILURE = 1


def _report(exc: BaseException) -> None:
    if isinstance(exc, EmptyCommandError):
        message = str(exc)
    elif isinstance(exc, OSError) and exc.strerror:
        message = f"pipex error: {exc.strerror}"
    else:
        message = f"pipex error: {exc}"
    print(message, file=sys.stderr)


def _launch(
    command: str, env: Mapping[str, str], stdin: int, stdout: int
) -> Optional[subprocess.Popen]:
    try:
        path, args = resolve_command(command, env)
        return subprocess.Popen(args, executable=path, stdin=stdin, stdout=stdout, env=dict(env))
    except (PipexError, OSError) as exc:
        _report(exc)
        return None


def _start_with_file(
    filename: str, flags: int, command: str, env: Mapping[str, str], pipe_end: int, reads: bool
) -> Optional[subprocess.Popen]:
    try:
        file_fd = os.open(filename, flags, 0o777)
    except OSError as exc:
        _report(exc)
        return None
    try:
        if reads:
            return _launch(command, env, stdin=file_fd, stdout=pipe_end)
        return _launch(command, env, stdin=pipe_end, stdout=file_fd)
    finally:
        os.close(file_fd)


def run_pipeline(
    infile: str, first: str, second: str, outfile: str, env: Optional[Mapping[str, str]]
) -> Tuple[int, int]:
    """Feed infile to first, pipe its output to second and write that to outfile.

    Both commands run at the same time. A side that cannot start reports the
    reason on standard error and counts as exit status 1; the other side still
    runs. env None means the current environment. Returns both exit statuses.
    """
    environment = dict(os.environ if env is None else env)
    read_end, write_end = os.pipe()
    try:
        writer = _start_with_file(infile, os.O_RDONLY, first, environment, write_end, reads=True)
    finally:
        os.close(write_end)
    try:
        reader = _start_with_file(
            outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, second, environment, read_end, reads=False
        )
    finally:
        os.close(read_end)
    statuses: List[int] = [
        _FAILURE if process is None else process.wait() for process in (writer, reader)
    ]
    return statuses[0], statuses[1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: pipex <infile> <cmd1> <cmd2> <outfile>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(ARG_ERROR, file=sys.stderr)
        return _FAILURE
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile, os.environ)
    except OSError as exc:
        _report(exc)
        return _FAILURE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())