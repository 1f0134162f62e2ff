"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Concurrent directory traversal with fingerprint-based grouping.
Features:
- One task per directory and one per regular, non-empty file, run on a thread pool
- A shared counting semaphore bounds directory reads and open files to `workers`
- A wait-group detects when the (growing) task graph is finished
- A single aggregator thread builds the result map from a queue, lock-free
- Hidden directories and configured names are pruned; symlinks are never followed
- The first fatal error aborts the whole walk
"""

import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from dupwalk.core.aggregator import Aggregator
from dupwalk.core.coordinator import TaskCoordinator
from dupwalk.core.exceptions import ConfigError, WalkError
from dupwalk.core.gate import ConcurrencyGate
from dupwalk.core.interfaces import TreeWalker
from dupwalk.core.models import Pair, WalkConfig, WalkStats
from dupwalk.core.results import WalkResults

logger = logging.getLogger(__name__)


class TreeWalkerImpl(TreeWalker):
    """
    Walks a directory tree concurrently and groups files by fingerprint.

    Attributes:
        config: Immutable WalkConfig (workers, verbose, skip_dirs, no_default_skip, fingerprint)
        last_stats: WalkStats of the last successful walk, or None

    Usage:
        walker = TreeWalkerImpl(workers=8, fingerprint=sha256_fingerprint)
        results = walker.walk("/home/user/Downloads")
        for fingerprint, files in results.duplicates().items():
            ...
    """

    def __init__(self, config: Optional[WalkConfig] = None, **options):
        if config is not None and options:
            raise ConfigError("Pass either a WalkConfig or keyword options, not both")
        self.config = config if config is not None else WalkConfig(**options)
        self.last_stats: Optional[WalkStats] = None

    def walk(self, root_path: str) -> WalkResults:
        """
        Blocking walk of root_path. Internally concurrent.
        Returns the complete result map or raises on the first fatal error.
        """
        root = os.path.abspath(root_path)
        if not os.path.exists(root):
            error_msg = f"Directory does not exist: {root}"
            logger.error(error_msg)
            raise ConfigError(error_msg)
        if not os.path.isdir(root):
            error_msg = f"Not a directory: {root}"
            logger.error(error_msg)
            raise ConfigError(error_msg)
        try:
            with os.scandir(root):
                pass
        except OSError as e:
            error_msg = f"Directory is not readable: {root} ({e})"
            logger.error(error_msg)
            raise ConfigError(error_msg) from e

        logger.debug(f"Walking {root} with {self.config.workers} workers")
        start_time = time.time()

        run = _WalkRun(self.config, root)
        results = run.execute()

        self.last_stats = WalkStats(
            total_time=time.time() - start_time,
            tasks=run.coordinator.total,
            files=run.aggregator.files,
            dropped=run.aggregator.dropped,
            groups=len(results),
            duplicate_groups=len(results.duplicates()),
            peak_in_flight=run.gate.peak,
        )
        logger.debug(f"Walk completed in {self.last_stats.total_time:.2f}s: {results!r}")
        return results


class _WalkRun:
    """State of a single walk() call. Never reused."""

    def __init__(self, config: WalkConfig, root: str):
        self.config = config
        self.root = root
        self.gate = ConcurrencyGate(config.workers)
        self.coordinator = TaskCoordinator()
        self.aggregator = Aggregator(maxsize=4 * config.workers)
        self._pool: Optional[ThreadPoolExecutor] = None

    def execute(self) -> WalkResults:
        # Consumer must be running before the first producer
        self.aggregator.start()

        with ThreadPoolExecutor(max_workers=self.config.workers, thread_name_prefix="dupwalk") as pool:
            self._pool = pool
            self._spawn(self._search_tree, self.root)
            self.coordinator.join()

        # Every task is done, nothing can send anymore
        self.aggregator.close()

        error = self.coordinator.error
        if error is not None:
            raise error from error.cause
        return self.aggregator.result()

    def _spawn(self, task: Callable[[str], None], path: str) -> None:
        self.coordinator.register()
        try:
            self._pool.submit(self._run_task, task, path)
        except Exception as e:
            self.coordinator.fail(WalkError(path, e))
            self.coordinator.done()

    def _run_task(self, task: Callable[[str], None], path: str) -> None:
        try:
            if self.coordinator.failed:
                return
            with self.gate:
                task(path)
        except Exception as e:
            logger.error(f"Aborting walk, error at {path}: {e}")
            self.coordinator.fail(WalkError(path, e))
        finally:
            self.coordinator.done()

    def _notice(self, message: str) -> None:
        if self.config.verbose:
            logger.info(message)
        else:
            logger.debug(message)

    def _search_tree(self, dirname: str) -> None:
        """
        List one directory. Subdirectories and files become new tasks;
        this task never descends itself.
        """
        try:
            with os.scandir(dirname) as entries:
                for entry in entries:
                    self._visit(entry)
        except FileNotFoundError:
            logger.debug(f"Directory disappeared during walk: {dirname}")

    def _visit(self, entry: os.DirEntry) -> None:
        if entry.is_dir(follow_symlinks=False):
            if self.config.should_skip(entry.name):
                self._notice(f"Skipping directory {entry.name!r}")
                return
            # never re-enter the root
            if entry.path == self.root:
                return
            self._spawn(self._search_tree, entry.path)
            self._notice(f"Processing subdirectory: {entry.name!r}")
            return

        if not entry.is_file(follow_symlinks=False):
            return

        try:
            size = entry.stat(follow_symlinks=False).st_size
        except FileNotFoundError:
            return

        # Empty files carry nothing to compare
        if size > 0:
            self._spawn(self._process_file, entry.path)
            self._notice(f"Processing file: {entry.path!r}")

    def _process_file(self, path: str) -> None:
        fingerprint = self.config.fingerprint(path)
        self.aggregator.send(Pair(fingerprint=fingerprint, path=path))
