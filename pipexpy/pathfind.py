"""Locating the executable for a command through the PATH variable."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional, Tuple

from .textops import split, strtrim

EMPTY_COMMAND = "pipex error: Empty command"


class PipexError(Exception):
    """Base error for pipeline setup failures."""


class EmptyCommandError(PipexError):
    """The command string is empty."""

    def __init__(self) -> None:
        super().__init__(EMPTY_COMMAND)


class CommandNotFoundError(PipexError):
    """No executable was found for the command."""


def find_env_path(env: Mapping[str, str]) -> str:
    """Return the PATH value of env with the characters of "PATH=" trimmed from its ends.

    Raises PipexError when env holds no PATH.
    """
    if "PATH" not in env:
        raise PipexError("PATH is not set in the environment")
    return strtrim(f"PATH={env['PATH']}", "PATH=")


def search_dirs(env: Mapping[str, str]) -> List[str]:
    """Return the non-empty PATH directories of env, each ending with '/'."""
    return [directory + "/" for directory in split(find_env_path(env), ":")]


def resolve_command(command: str, env: Optional[Mapping[str, str]]) -> Tuple[str, List[str]]:
    """Return the executable path and argument vector for a command string.

    A command string that is itself executable is used as the path. Otherwise
    its first word is looked up in each PATH directory in order. With env None
    no search takes place.
    """
    if not command:
        raise EmptyCommandError()
    words = split(command, " ")
    if os.access(command, os.X_OK):
        return command, words
    if env is not None and words:
        for directory in search_dirs(env):
            route = directory + words[0]
            if os.access(route, os.X_OK):
                return route, words
    name = words[0] if words else command
    raise CommandNotFoundError(f"command not found: {name}")