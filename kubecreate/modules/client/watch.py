"""
Watch stream handle.

Wraps one long-lived streaming response. Each line of the stream is a JSON
frame {"type": ..., "object": {...}}; iterating the watcher blocks until the
next frame arrives or the stream ends.
"""

import json
import logging
import socket
from typing import Any, Callable, Dict, Iterator

import httpx
from pydantic import ValidationError as PydanticValidationError

from ...errors import EncodingError, TransportError
from ..api.models import EventType, Status, WatchEvent

logger = logging.getLogger("kubecreate.client.watch")


class StreamWatcher:
    """
    Live sequence of (event type, object) pairs.

    stop() (or leaving the context manager) closes the underlying connection;
    iteration then ends without an error.
    """

    def __init__(self, response: httpx.Response, decode: Callable[[Dict[str, Any]], Any]):
        self._response = response
        self._decode = decode
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Close the stream and release its connection. Safe to call twice."""
        if self._stopped:
            return
        self._stopped = True
        self._shutdown_socket()
        self._response.close()
        logger.debug(f"Watch on {self._response.request.url.path} stopped")

    def _shutdown_socket(self) -> None:
        """Unblock a read pending in another thread; close() alone does not."""
        if self._response.is_closed:
            return
        stream = self._response.extensions.get("network_stream")
        if stream is None:
            return
        sock = stream.get_extra_info("socket")
        if sock is None:
            return
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError as e:
            logger.debug(f"Socket shutdown on stop failed: {e}")

    def __enter__(self) -> "StreamWatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def __iter__(self) -> Iterator[WatchEvent]:
        if self._stopped:
            return
        try:
            for line in self._response.iter_lines():
                if self._stopped:
                    break
                if not line.strip():
                    continue
                yield self.decode_frame(line)
        except (httpx.StreamError, httpx.TransportError) as e:
            if self._stopped:
                return
            raise TransportError(f"watch stream failed: {e}") from e
        finally:
            self.stop()

    def decode_frame(self, line: str) -> WatchEvent:
        """
        Decode one stream frame.

        Raises:
            EncodingError: If the frame is not a well-formed watch event
        """
        try:
            frame = json.loads(line)
            event_type = EventType(frame["type"])
            raw_object = frame["object"]
        except (ValueError, KeyError, TypeError) as e:
            raise EncodingError(f"malformed watch event {line!r}: {e}") from e

        try:
            if event_type == EventType.ERROR:
                return WatchEvent(event_type, Status.from_wire(raw_object))
            return WatchEvent(event_type, self._decode(raw_object))
        except PydanticValidationError as e:
            raise EncodingError(f"could not decode {event_type.value} watch object: {e}") from e
