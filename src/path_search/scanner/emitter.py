"""Writes search responses to an output stream as JSON documents."""

from collections.abc import Iterable
from typing import TextIO

from path_search.logging import get_logger
from path_search.schemas.responses import SearchResponse

logger = get_logger(__name__)


class ResponseEmitter:
    """Writes each response as one indented JSON document, in order.

    Responses are already self-contained sorted snapshots; the emitter only
    serializes them. Each write is flushed before control returns to the
    walker.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.emitted = 0
        self.completed = False

    def emit(self, response: SearchResponse) -> None:
        """Write a single response and flush."""
        self.stream.write(response.to_json())
        self.stream.write("\n")
        self.stream.flush()

        self.emitted += 1
        if response.complete:
            self.completed = True

    def emit_all(self, responses: Iterable[SearchResponse]) -> SearchResponse | None:
        """
        Write every response of an iterable in order.

        Args:
            responses: Responses to write, typically a running scan

        Returns:
            The last response written, or None if there was none
        """
        last = None
        for response in responses:
            self.emit(response)
            last = response

        logger.debug("Emitted %d responses", self.emitted)
        return last
