"""REST client and the core/v1 typed client set."""

import logging
from typing import Optional

import httpx

from ..api.models import (
    Namespace,
    NamespaceList,
    ResourceQuota,
    ResourceQuotaList,
    Secret,
    SecretList,
)
from .codec import ParameterCodec, default_codec
from .request import Request
from .typed import ResourceClient

logger = logging.getLogger("kubecreate.client")


class RESTClient:
    """
    Entry point for building requests against one API group version.

    Holds only the shared httpx.Client and immutable settings, so one
    instance can serve independent callers concurrently.
    """

    def __init__(
        self,
        http: httpx.Client,
        api_path: str = "/api",
        version: str = "v1",
        codec: Optional[ParameterCodec] = None,
    ):
        self.http = http
        self.api_path = api_path
        self.version = version
        self.codec = codec or default_codec()

    def verb(self, verb: str) -> Request:
        return Request(self, verb)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "RESTClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class CoreV1Client:
    """Typed clients for the core/v1 kinds kubecreate works with."""

    def __init__(self, rest: RESTClient):
        self.rest = rest

    def namespaces(self) -> ResourceClient[Namespace, NamespaceList]:
        return ResourceClient(self.rest, "namespaces", Namespace, NamespaceList)

    def secrets(self, namespace: str) -> ResourceClient[Secret, SecretList]:
        return ResourceClient(self.rest, "secrets", Secret, SecretList, namespace)

    def resource_quotas(self, namespace: str) -> ResourceClient[ResourceQuota, ResourceQuotaList]:
        return ResourceClient(self.rest, "resourcequotas", ResourceQuota, ResourceQuotaList, namespace)
