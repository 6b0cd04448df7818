"""
kubecreate API object models.

These models define the in-memory shape of every object passed between
generators, the typed resource client and the printer. The wire form is
camelCase JSON, produced with to_wire() and parsed with from_wire().
"""

import base64
import binascii
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# Constants

DOCKER_CONFIG_KEY = ".dockercfg"
LAST_APPLIED_CONFIG_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"

# Enums


class SecretType(str, Enum):
    """Declared types of secrets."""

    OPAQUE = "Opaque"
    DOCKERCFG = "kubernetes.io/dockercfg"
    DOCKER_CONFIG_JSON = "kubernetes.io/dockerconfigjson"
    SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"


class EventType(str, Enum):
    """Types of watch events."""

    ADDED = "ADDED"
    MODIFIED = "MODIFIED"
    DELETED = "DELETED"
    ERROR = "ERROR"


# Base Models


class WireModel(BaseModel):
    """Base for models exchanged with the API server."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON-compatible wire form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        """Parse a decoded JSON payload received from the server."""
        return cls.model_validate(data)


class ObjectMeta(WireModel):
    """Metadata every persisted object carries."""

    name: Optional[str] = None
    namespace: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    resource_version: Optional[str] = None
    uid: Optional[str] = None
    creation_timestamp: Optional[str] = None


class ListMeta(WireModel):
    """Metadata of a collection response."""

    resource_version: Optional[str] = None
    continue_: Optional[str] = Field(None, alias="continue")


class APIObject(WireModel):
    """A typed, persisted API object."""

    api_version: str = "v1"
    kind: str
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def name(self) -> Optional[str]:
        return self.metadata.name


# Namespace


class NamespaceSpec(WireModel):
    finalizers: Optional[List[str]] = None


class NamespaceStatus(WireModel):
    phase: Optional[str] = None


class Namespace(APIObject):
    """Cluster-scoped grouping of namespaced resources."""

    kind: str = "Namespace"
    spec: Optional[NamespaceSpec] = None
    status: Optional[NamespaceStatus] = None


# Secret


class Secret(APIObject):
    """
    Secret holding sensitive data.

    `data` holds raw bytes in memory; on the wire each value is base64.
    """

    kind: str = "Secret"
    type: str = SecretType.OPAQUE.value
    data: Dict[str, bytes] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def decode_data(cls, v):
        """Accept base64 strings from the wire, raw bytes from callers."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        decoded = {}
        for key, value in v.items():
            if isinstance(value, str):
                try:
                    value = base64.b64decode(value, validate=True)
                except binascii.Error as e:
                    raise ValueError(f"data[{key!r}] is not valid base64: {e}") from e
            decoded[key] = value
        return decoded

    @field_serializer("data", when_used="json")
    def encode_data(self, data: Dict[str, bytes]) -> Dict[str, str]:
        return {key: base64.b64encode(value).decode("ascii") for key, value in data.items()}


# ResourceQuota


class ResourceQuotaSpec(WireModel):
    hard: Optional[Dict[str, str]] = None
    scopes: Optional[List[str]] = None


class ResourceQuotaStatus(WireModel):
    hard: Optional[Dict[str, str]] = None
    used: Optional[Dict[str, str]] = None


class ResourceQuota(APIObject):
    """Aggregate resource consumption limits for a namespace."""

    kind: str = "ResourceQuota"
    spec: Optional[ResourceQuotaSpec] = None
    status: Optional[ResourceQuotaStatus] = None


# Collections


class ObjectList(WireModel):
    """Collection wrapper returned by list calls."""

    api_version: str = "v1"
    kind: str
    metadata: ListMeta = Field(default_factory=ListMeta)


class NamespaceList(ObjectList):
    kind: str = "NamespaceList"
    items: List[Namespace] = Field(default_factory=list)


class SecretList(ObjectList):
    kind: str = "SecretList"
    items: List[Secret] = Field(default_factory=list)


class ResourceQuotaList(ObjectList):
    kind: str = "ResourceQuotaList"
    items: List[ResourceQuota] = Field(default_factory=list)


# Options


class ListOptions(BaseModel):
    """
    Version-neutral selector and watch options.

    Never placed on the wire directly; the client runs it through a
    ParameterCodec keyed by the target group version first.
    """

    label_selector: Optional[str] = None
    field_selector: Optional[str] = None
    resource_version: Optional[str] = None
    timeout_seconds: Optional[int] = Field(None, ge=0)
    watch: bool = False


class DeleteOptions(WireModel):
    """Body of delete and delete-collection calls."""

    api_version: str = "v1"
    kind: str = "DeleteOptions"
    grace_period_seconds: Optional[int] = Field(None, ge=0)
    propagation_policy: Optional[str] = None


# Responses


class Status(WireModel):
    """Failure payload returned by the server."""

    api_version: Optional[str] = None
    kind: str = "Status"
    status: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    code: Optional[int] = None


class WatchEvent(NamedTuple):
    """A single change observed on a watched collection."""

    type: EventType
    object: Any


__all__ = [
    # Constants
    "DOCKER_CONFIG_KEY",
    "LAST_APPLIED_CONFIG_ANNOTATION",
    # Enums
    "SecretType",
    "EventType",
    # Base models
    "WireModel",
    "ObjectMeta",
    "ListMeta",
    "APIObject",
    # Objects
    "Namespace",
    "NamespaceSpec",
    "NamespaceStatus",
    "Secret",
    "ResourceQuota",
    "ResourceQuotaSpec",
    "ResourceQuotaStatus",
    # Collections
    "ObjectList",
    "NamespaceList",
    "SecretList",
    "ResourceQuotaList",
    # Options
    "ListOptions",
    "DeleteOptions",
    # Responses
    "Status",
    "WatchEvent",
]
