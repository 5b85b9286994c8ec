"""Pytest configuration and fixtures for binpath tests."""

from pathlib import Path

import pytest


def make_executable(path: Path) -> Path:
    """Create an empty executable file, making parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    path.chmod(0o755)
    return path


@pytest.fixture
def make_bin():
    """Return a helper that creates <base>/bin/<names...>."""

    def _make_bin(base: Path, *names: str) -> Path:
        bin_dir = base / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            make_executable(bin_dir / name)
        return bin_dir

    return _make_bin


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at an empty temporary directory and select bash."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("SHELL", "/bin/bash")
    monkeypatch.delenv("NO_COLOR", raising=False)
    return home_dir


@pytest.fixture
def answers(monkeypatch):
    """Feed a sequence of lines to input(); EOF once exhausted."""

    def _answers(*lines: str) -> None:
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _answers
