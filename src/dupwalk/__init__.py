"""
dupwalk — concurrent directory walker and duplicate file finder.

Core features:
- Parallel traversal: every subdirectory and file is its own task, bounded by a worker count
- Pluggable fingerprints: name+size (fast), sha256 / md5 / xxhash (content)
- Immutable results with flatten() and predicate filtering
- CLI interface for headless/server usage
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("dupwalk")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dupwalk.commands import ScanCommand
from dupwalk.core import (
    ConfigError, WalkError, File, DuplicateGroup, WalkConfig, WalkResults, WalkStats, ScanParams,
    TreeWalkerImpl, FINGERPRINTS, name_size_fingerprint, sha256_fingerprint, filters)
from dupwalk.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "ConfigError",
    "WalkError",
    "File",
    "DuplicateGroup",
    "WalkConfig",
    "WalkResults",
    "WalkStats",
    "ScanParams",
    "TreeWalkerImpl",
    "FINGERPRINTS",
    "name_size_fingerprint",
    "sha256_fingerprint",
    "filters",
    "ConvertUtils",
    "__version__",
]
