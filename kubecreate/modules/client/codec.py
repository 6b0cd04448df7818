"""
Version-aware query parameter encoding.

Options are built in a version-neutral shape (ListOptions) and only turned
into query parameters by an encoder registered for the target group
version, so wire field names can change between versions without touching
the client.
"""

from typing import Callable, Dict, List, Tuple

from ...errors import EncodingError
from ..api.models import ListOptions

QueryParams = List[Tuple[str, str]]
ParamEncoder = Callable[[ListOptions], QueryParams]


def encode_list_options_v1(opts: ListOptions) -> QueryParams:
    """Encode ListOptions for the v1 wire schema; unset fields are dropped."""
    params: QueryParams = []
    if opts.label_selector:
        params.append(("labelSelector", opts.label_selector))
    if opts.field_selector:
        params.append(("fieldSelector", opts.field_selector))
    if opts.resource_version:
        params.append(("resourceVersion", opts.resource_version))
    if opts.timeout_seconds is not None:
        params.append(("timeoutSeconds", str(opts.timeout_seconds)))
    if opts.watch:
        params.append(("watch", "true"))
    return params


class ParameterCodec:
    """Encoders keyed by group version."""

    def __init__(self):
        self._encoders: Dict[str, ParamEncoder] = {}

    def register(self, version: str, encoder: ParamEncoder) -> "ParameterCodec":
        self._encoders[version] = encoder
        return self

    def encode(self, opts: ListOptions, version: str) -> QueryParams:
        """
        Encode options against a specific wire schema version.

        Raises:
            EncodingError: If no encoder is registered for the version
        """
        encoder = self._encoders.get(version)
        if encoder is None:
            raise EncodingError(f"no query parameter encoder registered for version {version!r}")
        return encoder(opts)

    def versions(self) -> List[str]:
        return sorted(self._encoders)


def default_codec() -> ParameterCodec:
    return ParameterCodec().register("v1", encode_list_options_v1)
