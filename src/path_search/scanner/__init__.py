"""Scanning engine: matcher, walker and response emitter."""

from path_search.scanner.emitter import ResponseEmitter
from path_search.scanner.matcher import calculate_score, fuzzy_score
from path_search.scanner.walker import (
    DEFAULT_SKIP_DIRS,
    MAX_RESULTS_ERROR,
    SKIP_EXTENSIONS,
    TIMEOUT_ERROR,
    build_skip_set,
    scan_directory,
    scan_request,
)

__all__ = [
    "calculate_score",
    "fuzzy_score",
    "scan_directory",
    "scan_request",
    "build_skip_set",
    "DEFAULT_SKIP_DIRS",
    "SKIP_EXTENSIONS",
    "TIMEOUT_ERROR",
    "MAX_RESULTS_ERROR",
    "ResponseEmitter",
]
