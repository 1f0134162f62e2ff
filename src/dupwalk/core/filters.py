"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
Ready-made predicates for WalkResults.filter().

Example:
    big_pdfs = results.filter(has_extension(".pdf"), size_greater_than(20 * 1000 * 1000))
"""
from typing import Callable

from dupwalk.core.models import File

Predicate = Callable[[File], bool]


def min_size(size: int) -> Predicate:
    """Keep files of at least `size` bytes (inclusive)."""
    def _passes(file: File) -> bool:
        return file.size >= size
    return _passes


def max_size(size: int) -> Predicate:
    """Keep files of at most `size` bytes (inclusive)."""
    def _passes(file: File) -> bool:
        return file.size <= size
    return _passes


def size_greater_than(size: int) -> Predicate:
    def _passes(file: File) -> bool:
        return file.size > size
    return _passes


def has_extension(*extensions: str) -> Predicate:
    """
    Keep files whose name ends with one of the extensions.
    Case-insensitive; the leading dot is optional ("jpg" == ".JPG").
    Compound suffixes such as ".tar.gz" are matched against the full name.
    """
    normalized = tuple(
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in (e.strip() for e in extensions) if ext
    )

    def _passes(file: File) -> bool:
        if not normalized:
            return True
        name = file.name.lower()
        # ".bashrc" has no extension, ".eslintrc.json" has ".json"
        return any(name.endswith(ext) and len(name) > len(ext) for ext in normalized)
    return _passes
