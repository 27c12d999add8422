"""Path joining, small filesystem helpers and recursive file listing."""

from __future__ import annotations

import os
import shutil
from typing import NamedTuple


class FileEntry(NamedTuple):
    """A file found under a root: its path relative to the root and its full path."""

    relative: str
    path: str


def _ends_with_slash(path: str) -> bool:
    return path.endswith(("/", "\\"))


def _join(base_path: str, name: str) -> str:
    if _ends_with_slash(base_path):
        return base_path + name
    return f"{base_path}/{name}"


def concat_path(base_path: str, *args: str) -> str:
    """Join path parts with ``/``, not doubling a trailing separator."""
    result = base_path
    for name in args:
        result = _join(result, name)
    return result


def write_file(base_path: str, name: str, content: str) -> None:
    """Write ``content`` to ``base_path/name``, replacing any existing file."""
    with open(concat_path(base_path, name), "w") as handle:
        handle.write(content)


def create_folder(base_path: str, name: str) -> None:
    """Create the directory ``base_path/name`` if it does not exist."""
    os.makedirs(concat_path(base_path, name), exist_ok=True)


def clear_folder(base_path: str, name: str) -> None:
    """Remove ``base_path/name`` and everything below it, if present."""
    target = concat_path(base_path, name)
    if os.path.isdir(target) and not os.path.islink(target):
        shutil.rmtree(target)
    elif os.path.lexists(target):
        os.remove(target)


def exists(base_path: str, name: str) -> bool:
    """Whether ``base_path/name`` exists."""
    return os.path.exists(concat_path(base_path, name))


def _slashes(path: str) -> str:
    return path.replace("\\", "/")


def _walk(root: str, directory: str):
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_file():
            full = _slashes(entry.path)
            yield FileEntry(_slashes(os.path.relpath(full, root)), full)
        elif entry.is_dir():
            yield from _walk(root, entry.path)


def list_files(path: str) -> list[FileEntry]:
    """Every regular file below ``path``, recursively, with slash-separated paths."""
    return list(_walk(path, path))