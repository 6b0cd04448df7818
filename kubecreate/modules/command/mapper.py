"""
REST mapping: which collection an object of a given kind lives in.

The mapping decides the plural resource name, whether the kind is
namespaced, and which models decode responses.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Type

from ...errors import NotFoundError
from ..api.models import (
    APIObject,
    Namespace,
    NamespaceList,
    ObjectList,
    ResourceQuota,
    ResourceQuotaList,
    Secret,
    SecretList,
)
from ..client.rest import RESTClient
from ..client.typed import ResourceClient


@dataclass(frozen=True)
class ResourceMapping:
    """REST identity of one kind in one group version."""

    kind: str
    version: str
    resource: str
    namespaced: bool
    model: Type[APIObject]
    list_model: Type[ObjectList]

    def client_for(self, rest: RESTClient, namespace: Optional[str] = None) -> ResourceClient:
        """Typed client for this kind; namespace is ignored for cluster-scoped kinds."""
        return ResourceClient(
            rest,
            self.resource,
            self.model,
            self.list_model,
            namespace if self.namespaced else None,
        )


class RESTMapper:
    """Lookup of ResourceMapping by (kind, version)."""

    def __init__(self, mappings: Iterable[ResourceMapping] = ()):
        self._mappings: Dict[Tuple[str, str], ResourceMapping] = {}
        for mapping in mappings:
            self.add(mapping)

    def add(self, mapping: ResourceMapping) -> "RESTMapper":
        self._mappings[(mapping.kind, mapping.version)] = mapping
        return self

    def rest_mapping(self, kind: str, version: str) -> ResourceMapping:
        """
        Raises:
            NotFoundError: If the kind is unknown in that version
        """
        mapping = self._mappings.get((kind, version))
        if mapping is None:
            raise NotFoundError(f"no REST mapping for kind {kind!r} in version {version!r}")
        return mapping

    def mapping_for(self, obj: APIObject) -> ResourceMapping:
        return self.rest_mapping(obj.kind, obj.api_version)


def default_mapper() -> RESTMapper:
    """Mapper covering the built-in core/v1 kinds."""
    return RESTMapper(
        [
            ResourceMapping("Namespace", "v1", "namespaces", False, Namespace, NamespaceList),
            ResourceMapping("Secret", "v1", "secrets", True, Secret, SecretList),
            ResourceMapping("ResourceQuota", "v1", "resourcequotas", True, ResourceQuota, ResourceQuotaList),
        ]
    )
