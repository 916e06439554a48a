"""
Input / output targets.

A command-line path argument is either ``-`` (a standard stream) or a
filesystem path. It is parsed once at startup into a ``Target`` and every
later step works with that value instead of re-checking the raw string.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

STREAM_SENTINEL = "-"


@dataclass(frozen=True)
class StandardStream:
    """stdin when used as input, stdout when used as output."""


@dataclass(frozen=True)
class FilePath:
    path: Path


Target = Union[StandardStream, FilePath]


def parse_target(text: str) -> Target:
    if text == STREAM_SENTINEL:
        return StandardStream()
    return FilePath(Path(text))


def resolve_output(
    output: Optional[str],
    input_target: Target,
    extension: str = ".csv",
) -> Target:
    """
    Decide where the CSV goes.

    An explicit ``output`` wins and is used verbatim (``-`` meaning stdout).
    Otherwise a file input yields ``<input stem><extension>`` in the current
    directory, and stdin input yields stdout.
    """
    if output:
        return parse_target(output)
    if isinstance(input_target, FilePath):
        return FilePath(Path(input_target.path.stem + extension))
    return StandardStream()


def describe(target: Target, is_input: bool) -> str:
    """Human-readable name for status messages."""
    if isinstance(target, StandardStream):
        return "stdin" if is_input else "stdout"
    return f"file '{target.path}'"
