"""Request decoding and action dispatch."""

from typing import TextIO

from pydantic import ValidationError

from path_search.logging import get_logger
from path_search.scanner.emitter import ResponseEmitter
from path_search.scanner.walker import scan_request
from path_search.schemas.request import SearchRequest
from path_search.schemas.responses import SearchResponse

logger = get_logger(__name__)

SCAN_ACTION = "scan"


class RequestError(Exception):
    """The request could not be read, decoded or dispatched.

    No response is written when this is raised.
    """


def decode_request(raw: str | bytes) -> SearchRequest:
    """
    Decode a JSON request.

    Args:
        raw: JSON document

    Returns:
        Decoded request

    Raises:
        RequestError: If the document is not valid JSON or has wrong types
    """
    try:
        return SearchRequest.model_validate_json(raw)
    except ValidationError as e:
        raise RequestError(f"Error parsing JSON: {e}") from e


def read_request(stream: TextIO) -> SearchRequest:
    """Read and decode the whole input stream."""
    try:
        raw = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RequestError(f"Error reading input: {e}") from e
    return decode_request(raw)


def handle_request(request: SearchRequest, emitter: ResponseEmitter) -> None:
    """Dispatch a request on its action."""
    if request.action == SCAN_ACTION:
        handle_scan(request, emitter)
        return
    raise RequestError(f"Unknown action: {request.action}")


def handle_scan(request: SearchRequest, emitter: ResponseEmitter) -> None:
    """
    Run a scan and emit its responses.

    Scan-level failures never escape: if the walk breaks before its complete
    response went out, a complete response carrying the error is emitted
    instead.
    """
    try:
        emitter.emit_all(scan_request(request))
    except Exception as e:
        if emitter.completed:
            raise
        logger.exception(
            "Scan failed",
            extra={"project_path": request.project_path, "query": request.query},
        )
        emitter.emit(SearchResponse.snapshot([], complete=True, error=str(e)))
