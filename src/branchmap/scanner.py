"""Directory scan orchestration: walk, analyse, tag, aggregate."""

import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

from .analysis.content import ContentAnalyzer
from .analysis.summary import summarize_scores
from .cache import AnalysisCache, compute_config_hash
from .config import DEFAULT_CONFIG, ScanConfig
from .exceptions import FileAccessError, InvalidPathError
from .logging_config import get_logger
from .models import FileAnalysis, FileEntry, FileReport, ScanResult, ScanStats
from .scanning.languages import detect_language
from .tagging import enhanced_tags, generic_tags
from .walker import FileWalker

logger = get_logger(__name__)

# CPU count capped at 8; analysis is mostly file I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files a pool costs more than it saves
_PARALLEL_THRESHOLD = 10


class DirectoryScanner:
    """Scans a directory tree into a ScanResult.

    With ``enhanced_analysis`` off, files are only walked, detected and
    tagged. With it on, each file is read and analysed independently; a
    file that cannot be read keeps its walk metadata, gets no analysis and
    adds a note to ``ScanResult.errors``.
    """

    def __init__(self, config: ScanConfig = DEFAULT_CONFIG, cache: Optional[AnalysisCache] = None):
        self.config = config
        self.analyzer = ContentAnalyzer(config)
        self._max_workers = config.workers or _DEFAULT_WORKERS
        if cache is None and config.enhanced_analysis and config.cache_enabled:
            cache = AnalysisCache(
                cache_dir=config.cache_dir,
                ttl_hours=config.cache_ttl_hours,
                enabled=True,
            )
        self.cache = cache
        self._config_hash = compute_config_hash(config.analysis_fingerprint())

    def scan(self, root: Union[str, Path]) -> ScanResult:
        """
        Walk and analyse everything under ``root``.

        Raises:
            InvalidPathError: If root does not exist or is not a directory
        """
        root = Path(root)
        if not root.exists():
            raise InvalidPathError(root, "Path does not exist")
        if not root.is_dir():
            raise InvalidPathError(root, "Not a directory")

        logger.debug(f"Scanning {root} (enhanced={self.config.enhanced_analysis})")
        start = time.perf_counter()

        walker = FileWalker(self.config)
        entries = list(walker.walk(root))
        errors = list(walker.errors)

        reports, analysis_errors = self._build_reports(entries)
        errors.extend(analysis_errors)

        duration_ms = (time.perf_counter() - start) * 1000.0
        stats = self._stats(entries, duration_ms)

        logger.info(
            f"Scanned {stats.total_files} files and {stats.total_dirs} directories "
            f"in {duration_ms:.1f}ms"
        )

        return ScanResult(
            root_path=str(root),
            files=reports,
            stats=stats,
            errors=errors,
            score_summary=summarize_scores(reports) if self.config.enhanced_analysis else None,
        )

    def _build_reports(self, entries: list[FileEntry]) -> tuple[list[FileReport], list[str]]:
        results: list[Optional[tuple[FileReport, Optional[str]]]] = [None] * len(entries)
        file_count = sum(1 for e in entries if not e.is_dir)

        if not self.config.enhanced_analysis or file_count < _PARALLEL_THRESHOLD or self._max_workers == 1:
            for i, entry in enumerate(entries):
                results[i] = self._report(entry)
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {executor.submit(self._report, entry): i for i, entry in enumerate(entries)}
                for future in as_completed(futures):
                    results[futures[future]] = future.result()

        reports: list[FileReport] = []
        errors: list[str] = []
        for result in results:
            assert result is not None
            report, error = result
            reports.append(report)
            if error:
                errors.append(error)
        return reports, errors

    def _report(self, entry: FileEntry) -> tuple[FileReport, Optional[str]]:
        """Build one entry's report. Never raises for unreadable files."""
        report = FileReport(
            path=entry.rel_path,
            name=entry.name,
            size=entry.size,
            modified=entry.modified,
            is_dir=entry.is_dir,
            tags=generic_tags(entry),
        )
        if entry.is_dir:
            return report, None

        report.language = detect_language(entry.path)
        if not self.config.enhanced_analysis:
            return report, None

        error = None
        try:
            report.analysis = self._analyze(entry)
        except FileAccessError as e:
            logger.warning(f"Skipping analysis of {entry.rel_path}: {e.reason}")
            error = f"Enhanced analysis failed for {entry.rel_path}: {e.reason}"

        report.tags = enhanced_tags(report.tags, report.language, report.analysis)
        return report, error

    def _analyze(self, entry: FileEntry) -> FileAnalysis:
        if self.cache is not None:
            cached = self.cache.get_analysis(entry, self._config_hash)
            if cached is not None:
                return cached

        analysis = self.analyzer.analyze_file(entry.path, entry.rel_path)

        if self.cache is not None:
            self.cache.set_analysis(entry, self._config_hash, analysis)
        return analysis

    @staticmethod
    def _stats(entries: list[FileEntry], duration_ms: float) -> ScanStats:
        files = [e for e in entries if not e.is_dir]
        seconds = duration_ms / 1000.0
        return ScanStats(
            total_files=len(files),
            total_dirs=len(entries) - len(files),
            total_size=sum(e.size for e in files),
            scan_duration_ms=duration_ms,
            files_per_second=len(files) / seconds if seconds > 0 else 0.0,
        )

    def close(self) -> None:
        if self.cache is not None:
            self.cache.close()


def scan_directory(root: Union[str, Path], config: Optional[ScanConfig] = None) -> ScanResult:
    """Convenience wrapper: scan ``root`` with ``config`` and release the cache."""
    scanner = DirectoryScanner(config or DEFAULT_CONFIG)
    try:
        return scanner.scan(root)
    finally:
        scanner.close()
