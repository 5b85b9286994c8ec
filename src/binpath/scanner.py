"""Directory scan: find bin/ directories holding a package's executables."""

from __future__ import annotations

import os
import shutil
from pathlib import PurePath
from typing import Callable, Iterable, Iterator

DEFAULT_ROOTS = ("/usr", "/opt")
SKIP_DIRS = frozenset({"dev", "proc", "sys"})
BIN_DIR_NAME = "bin"
DEFAULT_MAX_DEPTH = 40


def locate_executable(name: str) -> str | None:
    """Return the full path of `name` if it already resolves on PATH."""
    return shutil.which(name)


def is_pruned(path: str) -> bool:
    """True if any component of path is a virtual/device filesystem dir."""
    return any(part in SKIP_DIRS for part in PurePath(path).parts)


def bin_has_match(bin_dir: str, package: str) -> bool:
    """True if any entry directly inside bin_dir has `package` in its name."""
    try:
        with os.scandir(bin_dir) as it:
            return any(package in entry.name for entry in it)
    except OSError:
        return False


def _dir_key(path: str, follow_symlinks: bool) -> tuple[int, int] | None:
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)


def scan_root(
    root: str,
    package: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    follow_symlinks: bool = False,
) -> Iterator[str]:
    """Yield bin/ directories under root whose entries match `package`.

    Walks depth-first in name order using an explicit stack. Subtrees with a
    dev/proc/sys component are never entered, and directories that can't be
    read are skipped. Each directory (by device and inode) is visited once,
    and nothing deeper than max_depth below root is examined.
    """
    root = os.path.abspath(root)
    if is_pruned(root) or not os.path.isdir(root):
        return

    visited: set[tuple[int, int]] = set()
    stack: list[tuple[str, int]] = [(root, 0)]

    while stack:
        path, depth = stack.pop()

        key = _dir_key(path, follow_symlinks)
        if key is None or key in visited:
            continue
        visited.add(key)

        if os.path.basename(path) == BIN_DIR_NAME and bin_has_match(path, package):
            yield path

        if depth >= max_depth:
            continue

        try:
            with os.scandir(path) as it:
                children = sorted(
                    entry.path
                    for entry in it
                    if entry.name not in SKIP_DIRS
                    and entry.is_dir(follow_symlinks=follow_symlinks)
                )
        except OSError:
            continue

        # Reversed so the smallest name is popped first
        for child in reversed(children):
            stack.append((child, depth + 1))


def dedupe(paths: Iterable[str]) -> list[str]:
    """Drop repeated paths, keeping the first occurrence of each."""
    seen: set[str] = set()
    result = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            result.append(path)
    return result


def find_candidates(
    package: str,
    roots: Iterable[str],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    follow_symlinks: bool = False,
    on_root: Callable[[str], None] | None = None,
) -> list[str]:
    """Scan every root in order and return the unique candidate bin dirs."""
    found: list[str] = []
    for root in roots:
        if on_root is not None:
            on_root(root)
        found.extend(
            scan_root(
                root,
                package,
                max_depth=max_depth,
                follow_symlinks=follow_symlinks,
            )
        )
    return dedupe(found)
