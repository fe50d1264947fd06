"""Small helpers for listing, reading and writing files."""

from __future__ import annotations

import os


def list_files(directory: str, recursive: bool = False) -> list[str]:
    """Paths of regular files in a directory, optionally descending into subdirectories.

    A directory that cannot be opened yields an empty list.
    """
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []
    files: list[str] = []
    for entry in entries:
        path = f"{directory}/{entry.name}"
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
        except OSError:
            continue
        if is_dir and recursive:
            files.extend(list_files(path, True))
        elif is_file:
            files.append(path)
    return files


def read_file(path: str) -> str:
    """Whole content of a text file; an unreadable file gives an empty string."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def write_file(path: str, data: str) -> None:
    """Replace the content of a file with ``data``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(data)


def exists(path: str) -> bool:
    """True if something exists at the path."""
    return os.path.exists(path)