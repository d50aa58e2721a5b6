"""Search response schemas written to the output stream."""

import os
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def display_name(value: str) -> str:
    """Text form of a file name, with undecodable bytes shown as U+FFFD."""
    return os.fsencode(value).decode("utf-8", "replace")


class FileResult(BaseModel):
    """A single matched file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute file path")
    relative_path: str = Field(..., description="Path relative to the project root")
    name: str = Field(..., description="File base name")
    score: float = Field(..., description="Relevance score, higher is better")

    @field_serializer("path", "relative_path", "name")
    def serialize_file_name(self, value: str) -> str:
        return display_name(value)


class SearchResponse(BaseModel):
    """Snapshot of every result accepted so far, sorted by score."""

    files: list[FileResult] = Field(..., description="Results, best first")
    count: int = Field(..., description="Number of results in files")
    partial: bool = Field(False, description="More responses will follow")
    complete: bool = Field(False, description="Last response of the scan")
    error: str | None = Field(None, description="Reason the scan stopped early")

    @classmethod
    def snapshot(
        cls,
        files: Iterable[FileResult],
        complete: bool,
        error: str | None = None,
    ) -> "SearchResponse":
        """Build a response from a copy of the accumulated results."""
        files = list(files)
        return cls(
            files=files,
            count=len(files),
            partial=not complete,
            complete=complete,
            error=error or None,
        )

    def to_json(self) -> str:
        """Serialize as indented JSON, omitting an empty error."""
        return self.model_dump_json(indent=2, exclude_none=True)
