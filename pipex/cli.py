"""Run two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from typing import IO, BinaryIO

from pipex.commands import open_file, resolve_command, split_command


class PipelineError(Exception):
    """Raised when a command of the pipeline cannot be started."""


def run_command(
    command_line: str,
    env: Mapping[str, str],
    stdin: IO[bytes] | None,
    stdout: IO[bytes] | None,
) -> int:
    """Run one command with the given standard streams and return its status.

    A negative status means the command was ended by a signal. Raises
    PipelineError when the command cannot be found or started.
    """
    args = split_command(command_line)
    if not args:
        raise PipelineError("Command not found")
    path = resolve_command(args[0], env)
    # The resolved path is executed directly, never searched for again.
    executable = path if "/" in path else os.path.join(os.curdir, path)
    try:
        completed = subprocess.run(
            args,
            executable=executable,
            env=dict(env),
            stdin=stdin,
            stdout=stdout,
            check=False,
        )
    except OSError as exc:
        raise PipelineError("Command not found") from exc
    return completed.returncode


def _open_or_report(path: str, for_writing: bool) -> BinaryIO | None:
    try:
        return open_file(path, for_writing)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return None


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str],
) -> int:
    """Run `first < infile | second > outfile` and return the last status.

    The first command is skipped when infile cannot be opened, and a first
    command that cannot be started is reported and treated as successful.
    When the first command exits with a non-zero status, "0" is written to
    outfile and the second command is not run. Raises PipelineError when
    the second command cannot be started.
    """
    source = _open_or_report(infile, False)
    sink = _open_or_report(outfile, True)
    with contextlib.ExitStack() as stack:
        for stream in (source, sink):
            if stream is not None:
                stack.enter_context(stream)
        buffer = stack.enter_context(tempfile.TemporaryFile())
        status = 0
        if source is not None:
            try:
                status = run_command(first, env, source, buffer)
            except PipelineError as exc:
                print(exc, file=sys.stderr)
        if status > 0:
            if sink is not None:
                sink.write(b"0\n")
            return status
        buffer.seek(0)
        return run_command(second, env, buffer, sink)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Error: Bad arguments\n")
        return 0
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile, os.environ)
    except PipelineError as exc:
        print(exc, file=sys.stderr)
    return 0