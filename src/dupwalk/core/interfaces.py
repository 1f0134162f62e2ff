"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Structural interfaces (Protocols) shared by the walker, the result view and the CLI.

Key Components:
---------------
- Fingerprinter: path -> fingerprint string. Any plain function with that shape qualifies.
- PathFilter: File -> bool predicate used by WalkResults.filter().
- TreeWalker: concurrent walk of a directory tree into grouped results.
"""

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from dupwalk.core.models import File
    from dupwalk.core.results import WalkResults


@runtime_checkable
class Fingerprinter(Protocol):
    """
    Deterministic, read-only identity function for a file.
    Must raise on I/O errors rather than return a placeholder key.
    """
    def __call__(self, path: str) -> str: ...


class PathFilter(Protocol):
    """Returns True if the file should be kept."""
    def __call__(self, file: "File") -> bool: ...


class TreeWalker(Protocol):
    """
    Interface for concurrent directory traversal.

    Methods:
        walk: Visits every directory under root and groups files by fingerprint.
    """
    def walk(self, root_path: str) -> "WalkResults":
        """
        Walk the tree rooted at root_path.

        Args:
            root_path: Directory to traverse (made absolute).

        Returns:
            WalkResults mapping fingerprint -> files.

        Raises:
            ConfigError: root is missing, not a directory or unreadable.
            WalkError: first fatal filesystem error in any task.
        """
        ...
