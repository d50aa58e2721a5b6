"""Pydantic schemas for path-search."""

from path_search.schemas.request import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_RESULTS,
    DEFAULT_MAX_TIME,
    SearchRequest,
)
from path_search.schemas.responses import FileResult, SearchResponse

__all__ = [
    # Request
    "SearchRequest",
    "DEFAULT_MAX_TIME",
    "DEFAULT_MAX_RESULTS",
    "DEFAULT_CHUNK_SIZE",
    # Responses
    "FileResult",
    "SearchResponse",
]
