"""Search request schema decoded from the JSON input."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_TIME = 10  # seconds
DEFAULT_MAX_RESULTS = 1000
DEFAULT_CHUNK_SIZE = 200


class SearchRequest(BaseModel):
    """A single search request.

    Zero limits mean "use the default". Other values, including negative
    ones, are passed through untouched.
    """

    action: str = Field("", description="Requested action, only 'scan' is handled")
    project_path: str = Field("", description="Root directory to scan")
    query: str = Field("", description="Search string, empty matches every file")
    skip_dirs: list[str] = Field(
        default_factory=list, description="Extra directory names to prune"
    )
    max_time: int = Field(0, description="Time budget in seconds (0 = default)")
    max_results: int = Field(0, description="Result budget (0 = default)")
    chunk_size: int = Field(0, description="Results per partial response (0 = default)")

    @field_validator("action", "project_path", "query", mode="before")
    @classmethod
    def null_to_empty_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("skip_dirs", mode="before")
    @classmethod
    def null_to_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("max_time", "max_results", "chunk_size", mode="before")
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @property
    def effective_max_time(self) -> int:
        return self.max_time or DEFAULT_MAX_TIME

    @property
    def effective_max_results(self) -> int:
        return self.max_results or DEFAULT_MAX_RESULTS

    @property
    def effective_chunk_size(self) -> int:
        return self.chunk_size or DEFAULT_CHUNK_SIZE
