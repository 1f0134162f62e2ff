"""
Core traversal engine — gate, coordinator, walker, aggregator and result view.

- ConcurrencyGate: bounded counting semaphore shared by all tasks
- TaskCoordinator: wait-group for a task graph that grows while running
- TreeWalkerImpl: concurrent directory walk, one task per directory / file
- Aggregator: single-consumer thread building the fingerprint map
- WalkResults: immutable result map with flatten() / filter()
- Fingerprint strategies: name+size, sha256, md5, xxhash

Pure Python plus xxhash; no GUI or CLI dependencies.
"""

from .exceptions import ConfigError, WalkError
from .fingerprint import (
    FINGERPRINTS, content_fingerprint, get_fingerprint, md5_fingerprint,
    name_size_fingerprint, sha256_fingerprint, xxhash_fingerprint)
from .models import DEFAULT_SKIP_DIRS, DuplicateGroup, File, Pair, ScanParams, WalkConfig, WalkStats
from .gate import ConcurrencyGate
from .coordinator import TaskCoordinator
from .results import WalkResults, filter_results, flatten
from .aggregator import Aggregator
from .walker import TreeWalkerImpl
from . import filters

__all__ = [
    "ConfigError",
    "WalkError",
    "FINGERPRINTS",
    "content_fingerprint",
    "get_fingerprint",
    "md5_fingerprint",
    "name_size_fingerprint",
    "sha256_fingerprint",
    "xxhash_fingerprint",
    "DEFAULT_SKIP_DIRS",
    "DuplicateGroup",
    "File",
    "Pair",
    "ScanParams",
    "WalkConfig",
    "WalkStats",
    "ConcurrencyGate",
    "TaskCoordinator",
    "WalkResults",
    "filter_results",
    "flatten",
    "Aggregator",
    "TreeWalkerImpl",
    "filters",
]
