"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/fingerprint.py
Fingerprint strategies used to decide which files are duplicates.

A fingerprint function takes a path and returns a string key. Two files with
the same key land in the same group. Strategies must be deterministic and must
never modify the filesystem.

- name_size_fingerprint: basename + size, metadata only (default)
- content_fingerprint: streams the whole file through a hashlib-style factory
- sha256 / md5 / xxhash: ready-made content strategies

Errors are NOT swallowed here: a file that cannot be opened or read aborts the walk.
"""
import os
import hashlib
from functools import partial
from typing import Callable, Dict

import xxhash

from dupwalk.core.exceptions import ConfigError
from dupwalk.core.interfaces import Fingerprinter

CHUNK_SIZE = 1024 * 1024  # 1MB


def name_size_fingerprint(path: str) -> str:
    """
    Cheap strategy: "<basename>-<size>".
    Files with different names never match, even with identical content.
    """
    size = os.stat(path).st_size
    return f"{os.path.basename(path)}-{size}"


def content_fingerprint(path: str, algorithm: Callable = hashlib.sha256, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Strong strategy: hex digest of the full file content.

    Args:
        path: File to read
        algorithm: Factory returning an object with update()/hexdigest()
                   (hashlib.sha256, hashlib.md5, xxhash.xxh64, ...)
        chunk_size: Read size in bytes
    """
    digest = algorithm()
    with open(path, 'rb') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            digest.update(chunk)
    return digest.hexdigest()


sha256_fingerprint = partial(content_fingerprint, algorithm=hashlib.sha256)
md5_fingerprint = partial(content_fingerprint, algorithm=hashlib.md5)
# Fast, not cryptographic
xxhash_fingerprint = partial(content_fingerprint, algorithm=xxhash.xxh64)

FINGERPRINTS: Dict[str, Fingerprinter] = {
    "name": name_size_fingerprint,
    "sha256": sha256_fingerprint,
    "md5": md5_fingerprint,
    "xxhash": xxhash_fingerprint,
}

DEFAULT_FINGERPRINT = "name"


def get_fingerprint(name: str) -> Fingerprinter:
    """Look up a registered strategy by name."""
    try:
        return FINGERPRINTS[name.strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown fingerprint '{name}'. Valid options: {', '.join(FINGERPRINTS)}"
        ) from None
