"""CLI entry point: argparse setup and the scan-then-configure flow."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from rich.markup import escape

from binpath import __version__
from binpath.scanner import DEFAULT_MAX_DEPTH, DEFAULT_ROOTS, find_candidates, locate_executable
from binpath.shell import (
    ShellConfigError,
    append_export,
    build_export_line,
    is_referenced,
    read_shell_config,
    resolve_shell_config,
    source_command,
)
from binpath.utils import error, info, prompt_index, warn


def search_roots(args: argparse.Namespace) -> list[str]:
    """Default roots (unless disabled) followed by any --adddir values."""
    roots = [] if args.no_default_dirs else list(DEFAULT_ROOTS)
    roots.extend(args.adddir or [])
    return roots


def print_candidates(candidates: list[str], content: str) -> None:
    for index, path in enumerate(candidates):
        if is_referenced(path, content):
            info(f"{index}: [bright_black]{escape(path)}[/bright_black] [red](already exists)[/red]")
        else:
            info(f"{index}: [bright_yellow]{escape(path)}[/bright_yellow]")


def cmd_find(args: argparse.Namespace) -> int:
    """Find bin directories for a package and offer to add one to PATH."""
    package = args.package

    existing = locate_executable(package)
    if existing:
        info(f"{escape(package)} is already on your PATH ({escape(existing)}).")
        return 0

    # Resolve the startup file up front so a bad setup fails before the scan
    try:
        if args.shell_config:
            config_path = Path(args.shell_config).expanduser()
        else:
            config_path = resolve_shell_config(os.environ.get("SHELL"))
        content = read_shell_config(config_path)
    except ShellConfigError as e:
        error(str(e))
        return 1

    roots = search_roots(args)
    for root in args.adddir or []:
        if not os.path.isdir(root):
            warn(f"Directory not found: {root}")
    info(f"Searching in directories: {escape(', '.join(roots)) if roots else '(none)'}")

    candidates = find_candidates(
        package,
        roots,
        max_depth=args.max_depth,
        follow_symlinks=args.follow_symlinks,
        on_root=lambda root: info(f"[green]Checking directory: {escape(root)}[/green]"),
    )

    if not candidates:
        info("No paths found. Consider broadening your search.")
        return 0

    print_candidates(candidates, content)

    index = prompt_index("Select the path to add by number: ")
    if index is None:
        info("Cancelled.")
        return 0
    if index >= len(candidates):
        info(f"No path at index {index}; {escape(config_path.name)} was not changed.")
        return 0

    selected = candidates[index]
    try:
        added = append_export(selected, config_path, content)
    except ShellConfigError as e:
        error(str(e))
        return 1

    if not added:
        info(f"Path already exists in the {escape(config_path.name)} file.")
        return 0

    info("")
    info(f"Added the following line to your {escape(config_path.name)} file:")
    info(f"[bright_yellow]{escape(build_export_line(selected).strip())}[/bright_yellow]")
    info("")
    info("[bold bright_blue]Finished setting the path![/bold bright_blue]")
    info("[bold bright_blue]Please run the following command to update your shell environment:[/bold bright_blue]")
    info(f"[bold yellow]{escape(source_command(config_path))}[/bold yellow]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binpath",
        description="Find a package's bin directory and add it to your shell PATH",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("package", help="Package name (substring of an executable name)")
    parser.add_argument(
        "-a",
        "--adddir",
        action="append",
        metavar="DIR",
        help="Additional directory to search (repeatable)",
    )
    parser.add_argument(
        "--no-default-dirs",
        action="store_true",
        help=f"Do not search the default directories ({', '.join(DEFAULT_ROOTS)})",
    )
    parser.add_argument(
        "--shell-config",
        help="Path to shell config file (default: detected from $SHELL)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum directory depth below each root (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return cmd_find(args)
