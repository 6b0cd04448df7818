"""
API Module - Black Box Interface

Purpose: Typed API objects exchanged with the API server
Interface: Namespace, Secret, ResourceQuota, their lists, options and Status
Hidden: camelCase aliasing, base64 handling of secret data

Other modules only ever see these models, never raw wire dictionaries.
"""

from .models import (
    DOCKER_CONFIG_KEY,
    LAST_APPLIED_CONFIG_ANNOTATION,
    APIObject,
    DeleteOptions,
    EventType,
    ListMeta,
    ListOptions,
    Namespace,
    NamespaceList,
    ObjectList,
    ObjectMeta,
    ResourceQuota,
    ResourceQuotaList,
    ResourceQuotaSpec,
    Secret,
    SecretList,
    SecretType,
    Status,
    WatchEvent,
)

__all__ = [
    "DOCKER_CONFIG_KEY",
    "LAST_APPLIED_CONFIG_ANNOTATION",
    "APIObject",
    "DeleteOptions",
    "EventType",
    "ListMeta",
    "ListOptions",
    "Namespace",
    "NamespaceList",
    "ObjectList",
    "ObjectMeta",
    "ResourceQuota",
    "ResourceQuotaList",
    "ResourceQuotaSpec",
    "Secret",
    "SecretList",
    "SecretType",
    "Status",
    "WatchEvent",
]
