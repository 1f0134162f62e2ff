"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for traversal, aggregation and configuration.
"""

import os
import stat
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Tuple

from dupwalk.core.exceptions import ConfigError
from dupwalk.core.fingerprint import name_size_fingerprint, FINGERPRINTS, DEFAULT_FINGERPRINT
from dupwalk.core.interfaces import Fingerprinter
from dupwalk.utils.convert_utils import ConvertUtils


# =============================
# Defaults
# =============================

# Very big directories you usually don't control (handy when walking $HOME).
# Hidden directories are always skipped on top of these.
DEFAULT_SKIP_DIRS: FrozenSet[str] = frozenset({
    "AndroidStudioProjects",
    "Android",
    "NetBeansProjects",
    "node_modules",
    "Qt",
    "VirtualBoxVMs",
    "vmime",
    "venv",
    "env",
    "RUST",
    "nltk_data",
    "qt5",
    "qt6",
    "wasm32-unknown-unknown",
})


def default_workers() -> int:
    return 2 * (os.cpu_count() or 1)


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class File:
    """
    A regular file found during the walk.
    `stats` is the snapshot taken when the aggregator consumed the file and may be stale.
    """
    path: str
    stats: os.stat_result = field(compare=False)

    @property
    def size(self) -> int:
        return self.stats.st_size

    @property
    def mode(self) -> int:
        return self.stats.st_mode

    @property
    def mtime(self) -> float:
        return self.stats.st_mtime

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.stats.st_mode)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.stats.st_mode)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def extension(self) -> str:
        """Lower-cased suffix including the dot (".JPG" -> ".jpg"), or ""."""
        return os.path.splitext(self.name)[1].lower()

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


class Pair(NamedTuple):
    """Message sent from a fingerprint task to the aggregator."""
    fingerprint: str
    path: str


@dataclass(frozen=True)
class DuplicateGroup:
    """Files sharing one fingerprint."""
    fingerprint: str
    files: Tuple[File, ...]

    @property
    def size(self) -> int:
        return self.files[0].size if self.files else 0

    @property
    def duplicate_count(self) -> int:
        return len(self.files)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    @property
    def wasted_bytes(self) -> int:
        """Bytes that could be freed by keeping a single copy."""
        if not self.files:
            return 0
        return sum(f.size for f in self.files) - self.files[0].size

    def __repr__(self):
        return f"<DuplicateGroup fingerprint={self.fingerprint}, count={len(self.files)}>"


@dataclass
class WalkStats:
    """Numbers collected during the last walk."""
    total_time: float = 0.0
    tasks: int = 0
    files: int = 0
    dropped: int = 0
    groups: int = 0
    duplicate_groups: int = 0
    peak_in_flight: int = 0

    def summary(self) -> str:
        lines = [
            "📊 Walk Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Tasks run: {self.tasks} (peak in flight: {self.peak_in_flight})",
            f"Files fingerprinted: {self.files}",
            f"Groups: {self.groups} ({self.duplicate_groups} with duplicates)",
        ]
        if self.dropped:
            lines.append(f"Files vanished during walk: {self.dropped}")
        return "\n".join(lines)


# =============================
# Configuration
# =============================

@dataclass(frozen=True)
class WalkConfig:
    """
    Immutable walker configuration.

    Attributes:
        workers: Gate size and thread pool size (> 0)
        verbose: Log skip/visit notices at INFO instead of DEBUG
        skip_dirs: Directory names pruned in addition to hidden ones
        no_default_skip: Do not add DEFAULT_SKIP_DIRS to skip_dirs
        fingerprint: path -> fingerprint function
    """
    workers: int = field(default_factory=default_workers)
    verbose: bool = False
    skip_dirs: FrozenSet[str] = frozenset()
    no_default_skip: bool = False
    fingerprint: Fingerprinter = name_size_fingerprint

    def __post_init__(self):
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"workers must be a positive integer, got {self.workers!r}")
        if not callable(self.fingerprint):
            raise ConfigError("fingerprint must be callable: path -> str")
        if isinstance(self.skip_dirs, str):
            raise ConfigError("skip_dirs must be a collection of names, not a string")
        object.__setattr__(self, "skip_dirs", frozenset(self.skip_dirs))

    @property
    def effective_skip_dirs(self) -> FrozenSet[str]:
        if self.no_default_skip:
            return self.skip_dirs
        return DEFAULT_SKIP_DIRS | self.skip_dirs

    def should_skip(self, name: str) -> bool:
        """Hidden directories and configured names are pruned."""
        return name.startswith(".") or name in self.effective_skip_dirs


@dataclass
class ScanParams:
    """Parameters for a scan command, validated on creation. Used by the CLI."""
    root_dir: str
    workers: int = field(default_factory=default_workers)
    fingerprint: str = DEFAULT_FINGERPRINT
    skip_dirs: List[str] = field(default_factory=list)
    no_default_skip: bool = False
    min_size_bytes: Optional[int] = None
    max_size_bytes: Optional[int] = None
    extensions: List[str] = field(default_factory=list)
    verbose: bool = False

    def __post_init__(self):
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.workers < 1:
            raise ValueError("Workers must be at least 1")

        if self.fingerprint not in FINGERPRINTS:
            raise ValueError(f"Unknown fingerprint: {self.fingerprint}")

        if self.min_size_bytes is not None and self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if (self.min_size_bytes is not None and self.max_size_bytes is not None
                and self.max_size_bytes < self.min_size_bytes):
            raise ValueError("Maximum size cannot be less than minimum size")

        normalized = []
        for ext in self.extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext:
                normalized.append(ext)
        self.extensions = normalized

        self.skip_dirs = [d.strip() for d in self.skip_dirs if d.strip()]

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = "",
            max_size_str: str = "",
            extensions_str: str = "",
            skip_dirs: Optional[Iterable[str]] = None,
            **kwargs
    ) -> 'ScanParams':
        """Build params from strings such as "500KB" and "jpg,png"."""
        min_size = ConvertUtils.human_to_bytes(min_size_str) if min_size_str else None
        max_size = ConvertUtils.human_to_bytes(max_size_str) if max_size_str else None
        ext_list = [e for e in extensions_str.split(",") if e.strip()] if extensions_str else []

        return ScanParams(
            root_dir=root_dir,
            min_size_bytes=min_size,
            max_size_bytes=max_size,
            extensions=ext_list,
            skip_dirs=list(skip_dirs or []),
            **kwargs
        )
