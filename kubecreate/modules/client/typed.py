"""
Typed resource client.

One ResourceClient is bound to a resource kind and, for namespaced kinds,
a namespace. Cluster-scoped kinds use the same class with namespace=None.
"""

import logging
from typing import TYPE_CHECKING, Generic, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ...errors import EncodingError
from ..api.models import APIObject, DeleteOptions, ListOptions, ObjectList
from .request import Request
from .watch import StreamWatcher

if TYPE_CHECKING:
    from .rest import RESTClient

logger = logging.getLogger("kubecreate.client")

T = TypeVar("T", bound=APIObject)
L = TypeVar("L", bound=ObjectList)


class ResourceClient(Generic[T, L]):
    """CRUD, list and watch operations for one resource collection."""

    def __init__(
        self,
        rest: "RESTClient",
        resource: str,
        model: Type[T],
        list_model: Type[L],
        namespace: Optional[str] = None,
    ):
        """
        Initialize resource client.

        Args:
            rest: Shared REST client (connection and codec)
            resource: Plural resource name used in paths, e.g. "secrets"
            model: Model decoded from single-object responses
            list_model: Model decoded from list responses
            namespace: Namespace to scope to; None for cluster-scoped kinds
        """
        self.rest = rest
        self.resource = resource
        self.model = model
        self.list_model = list_model
        self.namespace = namespace or None

    def _request(self, verb: str) -> Request:
        return self.rest.verb(verb).namespace(self.namespace).resource(self.resource)

    def _into(self, model, payload):
        try:
            return model.from_wire(payload)
        except PydanticValidationError as e:
            raise EncodingError(f"could not decode {model.__name__} from server response: {e}") from e

    def create(self, obj: T) -> T:
        """Create obj; returns the server's representation."""
        payload = self._request("POST").body(obj).do()
        return self._into(self.model, payload)

    def update(self, obj: T) -> T:
        """Replace obj, addressed by its own metadata.name."""
        payload = self._request("PUT").name(obj.metadata.name).body(obj).do()
        return self._into(self.model, payload)

    def delete(self, name: str, options: Optional[DeleteOptions] = None) -> None:
        self._request("DELETE").name(name).body(options).do()

    def delete_collection(
        self,
        options: Optional[DeleteOptions] = None,
        list_options: Optional[ListOptions] = None,
    ) -> None:
        """Delete every object matching list_options' selectors."""
        (
            self._request("DELETE")
            .versioned_params(list_options or ListOptions())
            .body(options)
            .do()
        )

    def get(self, name: str) -> T:
        """
        Fetch a single object.

        Raises:
            NotFoundError: If the object does not exist
        """
        payload = self._request("GET").name(name).do()
        return self._into(self.model, payload)

    def list(self, opts: Optional[ListOptions] = None) -> L:
        payload = self._request("GET").versioned_params(opts or ListOptions()).do()
        return self._into(self.list_model, payload)

    def watch(self, opts: Optional[ListOptions] = None) -> StreamWatcher:
        """
        Watch the collection for changes.

        Returns:
            StreamWatcher yielding (EventType, object) pairs; stop() it to
            release the connection
        """
        return (
            self.rest.verb("GET")
            .prefix("watch")
            .namespace(self.namespace)
            .resource(self.resource)
            .versioned_params(opts or ListOptions())
            .watch(self.model.from_wire)
        )
