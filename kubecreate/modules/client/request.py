"""
Request builder for a single REST call.

A Request carries the transient state of one call (verb, path segments,
body, query parameters). It is created per call and never shared.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ...errors import EncodingError, NotFoundError, TransportError
from ..api.models import ListOptions, Status, WireModel
from .codec import QueryParams
from .watch import StreamWatcher

if TYPE_CHECKING:
    from .rest import RESTClient

logger = logging.getLogger("kubecreate.client")


class Request:
    """Fluent builder mirroring the REST path shape of the API server."""

    def __init__(self, client: "RESTClient", verb: str):
        self._client = client
        self.verb = verb
        self._prefix: List[str] = []
        self._namespace: Optional[str] = None
        self._resource: str = ""
        self._name: Optional[str] = None
        self._body: Optional[Dict[str, Any]] = None
        self._params: QueryParams = []

    def prefix(self, *segments: str) -> "Request":
        self._prefix.extend(segments)
        return self

    def namespace(self, namespace: Optional[str]) -> "Request":
        """Scope the request to a namespace; None or "" means cluster scope."""
        self._namespace = namespace or None
        return self

    def resource(self, resource: str) -> "Request":
        self._resource = resource
        return self

    def name(self, name: str) -> "Request":
        if not name:
            raise ValueError("resource name may not be empty")
        self._name = name
        return self

    def body(self, obj: Optional[WireModel]) -> "Request":
        if obj is not None:
            self._body = obj.to_wire()
        return self

    def versioned_params(self, opts: Optional[ListOptions]) -> "Request":
        """Encode options through the client's codec for its group version."""
        if opts is not None:
            self._params.extend(self._client.codec.encode(opts, self._client.version))
        return self

    def path(self) -> str:
        segments = [self._client.api_path.strip("/"), self._client.version, *self._prefix]
        if self._namespace:
            segments.extend(["namespaces", self._namespace])
        if self._resource:
            segments.append(self._resource)
        if self._name:
            segments.append(self._name)
        return "/" + "/".join(s for s in segments if s)

    def _build(self, timeout=httpx.USE_CLIENT_DEFAULT) -> httpx.Request:
        return self._client.http.build_request(
            self.verb,
            self.path(),
            params=self._params or None,
            json=self._body,
            timeout=timeout,
        )

    def _send(self, stream: bool = False) -> httpx.Response:
        timeout = httpx.USE_CLIENT_DEFAULT
        if stream:
            # Watches idle between events; only the server's timeoutSeconds bounds them
            client_timeout = self._client.http.timeout
            timeout = httpx.Timeout(
                client_timeout.connect,
                read=None,
                write=client_timeout.write,
                pool=client_timeout.pool,
            )
        request = self._build(timeout)
        logger.debug(f"{self.verb} {request.url}")
        try:
            return self._client.http.send(request, stream=stream)
        except httpx.TransportError as e:
            logger.debug(f"{self.verb} {request.url} failed: {e}")
            raise TransportError(f"{self.verb} {request.url.path} failed: {e}") from e

    def do(self) -> Dict[str, Any]:
        """
        Execute the request and return the decoded JSON body.

        Returns:
            Decoded body, or an empty dict if the server sent none

        Raises:
            NotFoundError: Server answered 404
            TransportError: Network failure or any other non-success status
            EncodingError: Success response was not valid JSON
        """
        response = self._send()
        check_response(response)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise EncodingError(f"invalid JSON in response to {self.verb} {self.path()}: {e}") from e

    def watch(self, decode: Callable[[Dict[str, Any]], Any]) -> StreamWatcher:
        """
        Open a streaming request and wrap it in a StreamWatcher.

        The caller owns the returned watcher and must stop() it.
        """
        response = self._send(stream=True)
        if not response.is_success:
            try:
                response.read()
                check_response(response)
            finally:
                response.close()
        return StreamWatcher(response, decode)


def check_response(response: httpx.Response) -> None:
    """
    Raise the matching error for a non-success response.

    Only distinguishes success from failure; status codes are not otherwise
    interpreted.
    """
    if response.is_success:
        return

    status = decode_status(response)
    message = (status.message if status and status.message else None) or (
        f"the server responded with status {response.status_code} for "
        f"{response.request.method} {response.request.url.path}"
    )
    if response.status_code == httpx.codes.NOT_FOUND:
        raise NotFoundError(message, status=status)
    raise TransportError(message, status_code=response.status_code, status=status)


def decode_status(response: httpx.Response) -> Optional[Status]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict) or payload.get("kind") != "Status":
        return None
    try:
        return Status.from_wire(payload)
    except PydanticValidationError:
        return None
