"""Shell startup file management: detect, read, and append PATH exports."""

from __future__ import annotations

import os
from pathlib import Path

SHELL_CONFIGS = {
    "bash": ".bashrc",
    "zsh": ".zshrc",
}

# Shell files are bytes; surrogateescape round-trips anything not UTF-8
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class ShellConfigError(Exception):
    """Base class for failures that stop before the startup file is touched."""


class UnresolvedHomeError(ShellConfigError):
    pass


class UnsupportedShellError(ShellConfigError):
    pass


class FileAccessError(ShellConfigError):
    pass


def resolve_shell_config(shell_path: str | None, home: Path | None = None) -> Path:
    """Map the $SHELL executable path to the user's startup file.

    Only bash and zsh are recognized; anything else, including an unset
    value, raises UnsupportedShellError.
    """
    shell_name = os.path.basename(shell_path or "")
    config_name = SHELL_CONFIGS.get(shell_name)
    if config_name is None:
        raise UnsupportedShellError(
            f"Unsupported shell: {shell_path or '(SHELL not set)'}"
        )

    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise UnresolvedHomeError(f"Could not determine home directory: {e}") from e

    return home / config_name


def read_shell_config(config_path: Path) -> str:
    """Read the startup file; undecodable bytes survive as surrogates."""
    if not config_path.exists():
        return ""
    try:
        return config_path.read_text(encoding=ENCODING, errors=ERRORS)
    except OSError as e:
        raise FileAccessError(f"Could not read {config_path}: {e}") from e


def is_referenced(candidate: str, content: str) -> bool:
    """True if the path appears anywhere in the startup file, in any form."""
    return candidate in content


def build_export_line(candidate: str) -> str:
    return f'\nexport PATH="$PATH:{candidate}"'


def append_export(candidate: str, config_path: Path, content: str) -> bool:
    """Append the PATH export for candidate. Returns True if the file was written.

    content is the startup file as read before the prompt; if it already
    holds the exact export line nothing is written.
    """
    line = build_export_line(candidate)
    if line in content:
        return False

    try:
        with open(config_path, "a", encoding=ENCODING, errors=ERRORS) as f:
            f.write(f"{line}\n")
    except OSError as e:
        raise FileAccessError(f"Could not write to {config_path}: {e}") from e
    return True


def source_command(config_path: Path) -> str:
    return f"source {config_path}"
