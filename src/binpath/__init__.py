"""binpath: find a package's bin directory and add it to your shell PATH."""

__version__ = "0.1.0"
