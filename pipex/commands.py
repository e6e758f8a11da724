"""Command lookup, environment access and file opening for the pipeline."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import BinaryIO

from pipex.textutils import compare_prefix, split_words


def get_env(name: str, env: Mapping[str, str]) -> str | None:
    """Return the value of the first variable whose name starts with name.

    Variables are examined in the mapping's order; None means no match.
    """
    for key, value in env.items():
        if compare_prefix(key, name, len(name)) == 0:
            return value
    return None


def split_command(command_line: str) -> list[str]:
    """Split a command line into words on single spaces."""
    return split_words(command_line, " ")


def resolve_command(command: str, env: Mapping[str, str]) -> str:
    """Find the executable for a command in the directories listed in PATH.

    The first word of command is looked up in each PATH directory in turn;
    the first candidate that exists and is executable is returned. When
    none is found, the bare command name is returned unchanged.
    """
    words = split_command(command)
    if not words:
        raise ValueError("empty command")
    name = words[0]
    search_path = get_env("PATH", env)
    directories = split_words(search_path, ":") if search_path is not None else []
    for directory in directories:
        candidate = directory + "/" + name
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return name


def open_file(path: str | os.PathLike[str], for_writing: bool) -> BinaryIO:
    """Open a file for binary reading, or create/truncate it for writing.

    Files created for writing get permission bits 0777, less the umask.
    Raises OSError when the file cannot be opened.
    """
    if for_writing:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        return os.fdopen(fd, "wb")
    return open(path, "rb")