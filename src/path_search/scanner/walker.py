"""Directory walker that scores files and streams sorted result snapshots.

The walk is a single sequential pass. Results are buffered into chunks; each
full chunk is merged into the cumulative list, the whole list is re-sorted and
a partial snapshot is yielded. The final snapshot is always yielded exactly
once, after the walk ends or stops early.
"""

import os
import stat
import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from path_search.logging import get_logger
from path_search.scanner.matcher import calculate_score
from path_search.schemas.request import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_RESULTS,
    DEFAULT_MAX_TIME,
    SearchRequest,
)
from path_search.schemas.responses import FileResult, SearchResponse

logger = get_logger(__name__)

# Pruned by basename wherever they appear in the tree
DEFAULT_SKIP_DIRS: frozenset[str] = frozenset(
    {
        # Version control
        ".git",
        ".svn",
        ".hg",
        # Dependencies
        "node_modules",
        "vendor",
        # Build output
        "target",
        "build",
        "dist",
        ".next",
        ".nuxt",
        # Coverage and caches
        "coverage",
        ".nyc_output",
        "__pycache__",
        ".pytest_cache",
        # Editors
        ".vscode",
        ".idea",
    }
)

# Binary, media and archive files are never candidates
SKIP_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".mp4",
        ".avi",
        ".mov",
        ".mp3",
        ".obj",
        ".bin",
        ".out",
        ".a",
    }
)

TIMEOUT_ERROR = "search timeout exceeded"
MAX_RESULTS_ERROR = "max results reached"


def build_skip_set(extra: Iterable[str] = ()) -> frozenset[str]:
    """Union of the default skip directories and caller-supplied names."""
    return DEFAULT_SKIP_DIRS | frozenset(extra)


def is_skipped_file(name: str) -> bool:
    """Hidden files and files with a skipped extension are not scored."""
    if name.startswith("."):
        return True
    return os.path.splitext(name)[1].lower() in SKIP_EXTENSIONS


def _sort_by_score(files: list[FileResult]) -> None:
    # list.sort is stable, so equal scores keep discovery order
    files.sort(key=lambda f: f.score, reverse=True)


def _is_directory(path: Path) -> bool:
    """Stat without following links, so a symlink is never a directory."""
    return stat.S_ISDIR(path.lstat().st_mode)


def scan_directory(
    project_path: str,
    query: str = "",
    skip_dirs: Iterable[str] = (),
    max_time: int = 0,
    max_results: int = 0,
    chunk_size: int = 0,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> Iterator[SearchResponse]:
    """
    Walk `project_path` and yield result snapshots.

    Every yielded response holds all results accepted so far, sorted by
    score descending. Zero or more partial responses are followed by exactly
    one complete response, which carries an error message when the time or
    result budget stopped the walk early.

    Args:
        project_path: Root directory to scan
        query: Search string, empty matches every file
        skip_dirs: Directory names to prune in addition to DEFAULT_SKIP_DIRS
        max_time: Time budget in seconds (0 = default)
        max_results: Maximum accepted results (0 = default)
        chunk_size: Accepted results between partial responses (0 = default)
        clock: Monotonic clock in seconds

    Yields:
        SearchResponse snapshots, the last one with complete=True
    """
    max_time = max_time or DEFAULT_MAX_TIME
    max_results = max_results or DEFAULT_MAX_RESULTS
    chunk_size = chunk_size or DEFAULT_CHUNK_SIZE

    skip_set = build_skip_set(skip_dirs)
    root = Path(project_path).absolute() if project_path else None
    log_extra = {"project_path": str(root or ""), "query": query}

    all_files: list[FileResult] = []
    chunk: list[FileResult] = []
    total = 0
    error: str | None = None
    start = clock()

    logger.debug(
        "Scanning %s (max_time=%ss, max_results=%s, chunk_size=%s)",
        root,
        max_time,
        max_results,
        chunk_size,
        extra=log_extra,
    )

    # Pre-order depth-first walk, children in name order
    stack: list[Path] = [root] if root is not None else []

    while stack:
        path = stack.pop()

        try:
            is_dir = _is_directory(path)
        except OSError:
            continue

        if clock() - start > max_time:
            error = TIMEOUT_ERROR
            break
        if total >= max_results:
            error = MAX_RESULTS_ERROR
            break

        if is_dir:
            if path.name in skip_set:
                continue
            try:
                children = sorted(path.iterdir(), key=lambda p: p.name)
            except OSError:
                continue
            stack.extend(reversed(children))
            continue

        name = path.name
        if is_skipped_file(name):
            continue

        relative_path = str(path.relative_to(root))

        score = calculate_score(name, relative_path, query)
        if query and score == 0:
            continue

        chunk.append(
            FileResult(path=str(path), relative_path=relative_path, name=name, score=score)
        )
        total += 1

        if len(chunk) >= chunk_size:
            all_files.extend(chunk)
            _sort_by_score(all_files)
            chunk.clear()
            logger.debug("Partial results: %d files", len(all_files), extra=log_extra)
            yield SearchResponse.snapshot(all_files, complete=False)

    all_files.extend(chunk)
    _sort_by_score(all_files)

    if error:
        logger.info("Scan stopped early: %s", error, extra=log_extra)
    logger.debug(
        "Scan finished: %d files in %.3fs",
        len(all_files),
        clock() - start,
        extra=log_extra,
    )

    yield SearchResponse.snapshot(all_files, complete=True, error=error)


def scan_request(
    request: SearchRequest,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> Iterator[SearchResponse]:
    """Run `scan_directory` with the parameters of a decoded request."""
    return scan_directory(
        request.project_path,
        query=request.query,
        skip_dirs=request.skip_dirs,
        max_time=request.effective_max_time,
        max_results=request.effective_max_results,
        chunk_size=request.effective_chunk_size,
        clock=clock,
    )
