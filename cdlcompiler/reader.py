"""Reading source files from disk."""

from __future__ import annotations

import os


class SourceReadError(Exception):
    """Raised when a source file cannot be opened or read."""


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the file's lines, each terminated by a single newline.

    A carriage return before a line break is dropped, and a final line
    without a line break gets one.
    """
    try:
        with open(path, "rb") as handle:
            try:
                data = handle.read()
            except OSError as exc:
                raise SourceReadError(f"error while reading the file: {exc}") from exc
    except SourceReadError:
        raise
    except OSError as exc:
        raise SourceReadError(f"error opening the file: {exc}") from exc

    text = data.decode("utf-8", errors="replace")
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(line.removesuffix("\r") + "\n" for line in lines)