"""Parallel directory search."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from tqdm import tqdm

from .config import SearchConfig
from .matchers import create_matcher
from .results import Match, PerformanceStats, SearchReport, SearchResult


def _walk(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as entries:
        children = sorted(Path(entry.path) for entry in entries)
    for child in children:
        if child.is_dir():
            yield from _walk(child)
        else:
            yield child


def collect_files(root: str | os.PathLike[str]) -> list[Path]:
    """Return every non-directory path below ``root``; empty if it is not a directory."""
    root = Path(root)
    return list(_walk(root)) if root.is_dir() else []


class SearchEngine:
    """Searches a directory tree with the matcher the configuration calls for."""

    def __init__(self, config: SearchConfig) -> None:
        self.config = config
        self.matcher = create_matcher(config.pattern, config.use_regex)

    def search(self) -> SearchReport:
        """Scan every file under the configured path and return a report."""
        start = time.perf_counter()
        files = collect_files(self.config.path)
        print(f"Recherche dans {len(files)} fichiers...")

        chunk_size = max(len(files) // self.config.max_threads, 1)
        chunks = [files[i : i + chunk_size] for i in range(0, len(files), chunk_size)]
        lock = threading.Lock()

        with tqdm(total=len(files), unit="file") as progress:

            def scan(chunk: list[Path]) -> list[SearchResult]:
                found = []
                for path in chunk:
                    result = self.search_file(path)
                    if result.matches:
                        found.append(result)
                    with lock:
                        progress.update(1)
                return found

            with ThreadPoolExecutor(max_workers=self.config.max_threads) as pool:
                results = [r for batch in pool.map(scan, chunks) for r in batch]

        return self._report(results, len(files), time.perf_counter() - start)

    def search_file(self, file_path: str | os.PathLike[str]) -> SearchResult:
        """Match one file, by content or by name as configured."""
        start = time.perf_counter()
        path = Path(file_path)
        if self.config.search_content:
            try:
                content = path.read_bytes().decode("utf-8")
            except (OSError, UnicodeDecodeError):
                content = ""
            hits = self.matcher.find_matches(content)
        else:
            name = path.name
            hits = [(0, name, (0, len(name)))] if self.matcher.matches(name) else []
        return SearchResult(
            file_path=path,
            matches=[Match(number, line, span) for number, line, span in hits],
            scan_duration=time.perf_counter() - start,
        )

    def _report(self, results: list[SearchResult], total_files: int, duration: float) -> SearchReport:
        threads = self.config.max_threads
        if duration > 0:
            files_per_second = total_files / duration
        else:
            files_per_second = float("inf") if total_files else float("nan")
        return SearchReport(
            total_files_scanned=total_files,
            total_matches=sum(len(r.matches) for r in results),
            total_duration=duration,
            results=results,
            performance=PerformanceStats(
                files_per_second=files_per_second,
                average_scan_time=duration / total_files if total_files else 0.0,
                thread_utilization=min(threads, total_files) / threads,
            ),
        )