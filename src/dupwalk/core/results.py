"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/results.py
Read-only view over the finished fingerprint -> files mapping.
"""
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from dupwalk.core.interfaces import PathFilter
from dupwalk.core.models import DuplicateGroup, File


class WalkResults(Mapping):
    """
    Immutable mapping fingerprint -> tuple of File.

    File order inside a group is the order the aggregator received them in,
    which depends on thread scheduling and changes between runs.
    """

    def __init__(self, groups: Optional[Mapping[str, Iterable[File]]] = None):
        frozen: Dict[str, Tuple[File, ...]] = {}
        for fingerprint, files in (groups or {}).items():
            files = tuple(files)
            if files:
                frozen[fingerprint] = files
        self._groups = MappingProxyType(frozen)

    def __getitem__(self, fingerprint: str) -> Tuple[File, ...]:
        return self._groups[fingerprint]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def file_count(self) -> int:
        return sum(len(files) for files in self._groups.values())

    def flatten(self) -> List[File]:
        """All files, group after group. Not globally sorted."""
        return [f for files in self._groups.values() for f in files]

    def filter(self, *predicates: PathFilter) -> "WalkResults":
        """
        Return a copy keeping only files that pass every predicate.
        Groups left empty are dropped; this instance is not modified.

        Warning: predicates run once per file on every call and may do I/O.
        """
        filtered: Dict[str, List[File]] = {}
        for fingerprint, files in self._groups.items():
            for file in files:
                if all(predicate(file) for predicate in predicates):
                    filtered.setdefault(fingerprint, []).append(file)
        return WalkResults(filtered)

    def duplicates(self) -> "WalkResults":
        """Only groups with two or more files."""
        return WalkResults({k: v for k, v in self._groups.items() if len(v) >= 2})

    def duplicate_groups(self) -> List[DuplicateGroup]:
        """Groups with 2+ files, biggest files first."""
        groups = [DuplicateGroup(fingerprint=k, files=v) for k, v in self._groups.items() if len(v) >= 2]
        groups.sort(key=lambda g: -g.size)
        return groups

    def __eq__(self, other):
        if isinstance(other, WalkResults):
            return dict(self._groups) == dict(other._groups)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"<WalkResults({len(self)} groups, {self.file_count} files)>"


def flatten(results: WalkResults) -> List[File]:
    return results.flatten()


def filter_results(results: WalkResults, *predicates: PathFilter) -> WalkResults:
    return results.filter(*predicates)
