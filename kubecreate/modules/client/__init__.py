"""
Client Module - Black Box Interface

Purpose: Typed CRUD + watch access to a namespaced REST resource store
Interface: ClientFactory.build(), RESTClient, CoreV1Client, ResourceClient,
           StreamWatcher, ParameterCodec
Hidden: Path construction, query parameter encoding, status handling

One request per call; no caching, retry or batching.
"""

from .codec import ParameterCodec, default_codec, encode_list_options_v1
from .factory import ClientFactory
from .request import Request
from .rest import CoreV1Client, RESTClient
from .typed import ResourceClient
from .watch import StreamWatcher

__all__ = [
    "ClientFactory",
    "CoreV1Client",
    "ParameterCodec",
    "RESTClient",
    "Request",
    "ResourceClient",
    "StreamWatcher",
    "default_codec",
    "encode_list_options_v1",
]
