"""
Scan command orchestrator.
Turns validated ScanParams into a walker run plus optional metadata filtering.
Used by the CLI; no printing here.
"""
from typing import List, Optional, Tuple

from dupwalk.core import filters
from dupwalk.core.fingerprint import get_fingerprint
from dupwalk.core.models import ScanParams, WalkConfig, WalkStats
from dupwalk.core.results import WalkResults
from dupwalk.core.walker import TreeWalkerImpl


class ScanCommand:
    """
    Orchestrates the scan workflow:
    1. Build an immutable WalkConfig from params
    2. Walk the root directory
    3. Apply size / extension predicates, if any

    Usage:
        params = ScanParams.from_human_readable("/data", min_size_str="1MB", fingerprint="sha256")
        results, stats = ScanCommand().execute(params)
        for group in results.duplicate_groups():
            ...
    """

    def __init__(self):
        self.walker: Optional[TreeWalkerImpl] = None
        self.results: Optional[WalkResults] = None

    @staticmethod
    def build_config(params: ScanParams) -> WalkConfig:
        return WalkConfig(
            workers=params.workers,
            verbose=params.verbose,
            skip_dirs=frozenset(params.skip_dirs),
            no_default_skip=params.no_default_skip,
            fingerprint=get_fingerprint(params.fingerprint),
        )

    @staticmethod
    def build_predicates(params: ScanParams) -> List[filters.Predicate]:
        predicates = []
        if params.min_size_bytes is not None:
            predicates.append(filters.min_size(params.min_size_bytes))
        if params.max_size_bytes is not None:
            predicates.append(filters.max_size(params.max_size_bytes))
        if params.extensions:
            predicates.append(filters.has_extension(*params.extensions))
        return predicates

    def execute(self, params: ScanParams) -> Tuple[WalkResults, WalkStats]:
        """
        Walk params.root_dir and return (results, stats).

        Raises:
            ConfigError: invalid configuration or root directory
            WalkError: fatal filesystem error during the walk
        """
        self.walker = TreeWalkerImpl(self.build_config(params))
        results = self.walker.walk(params.root_dir)

        predicates = self.build_predicates(params)
        if predicates:
            results = results.filter(*predicates)

        self.results = results
        return results, self.walker.last_stats

    def get_results(self) -> WalkResults:
        if self.results is None:
            raise RuntimeError("Execute command first before accessing results")
        return self.results

    def get_walker(self) -> TreeWalkerImpl:
        if self.walker is None:
            raise RuntimeError("Command not executed yet")
        return self.walker
