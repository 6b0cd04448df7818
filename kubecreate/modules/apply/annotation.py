"""
Last-applied-configuration annotation.

Before an object is submitted its own configuration is serialized into the
kubectl.kubernetes.io/last-applied-configuration annotation, so a later
apply can compute a three-way diff against it.
"""

import json
import logging
from typing import Optional, TypeVar

from pydantic_core import PydanticSerializationError

from ...errors import EncodingError
from ..api.models import LAST_APPLIED_CONFIG_ANNOTATION, APIObject

logger = logging.getLogger("kubecreate.apply")

T = TypeVar("T", bound=APIObject)


def get_modified_configuration(obj: APIObject) -> bytes:
    """
    Serialize obj as compact JSON, excluding the annotation itself.

    Raises:
        EncodingError: If obj cannot be serialized
    """
    try:
        wire = obj.to_wire()
        annotations = wire.get("metadata", {}).get("annotations")
        if annotations is not None:
            annotations.pop(LAST_APPLIED_CONFIG_ANNOTATION, None)
            if not annotations:
                del wire["metadata"]["annotations"]
        return json.dumps(wire, separators=(",", ":"), sort_keys=True).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"failed to serialize {obj.kind} {obj.name!r} for annotation: {e}") from e


def update_apply_annotation(obj: T) -> T:
    """
    Return a copy of obj carrying its last-applied-configuration annotation.

    The input object is left untouched.

    Raises:
        EncodingError: If serialization fails; nothing must be submitted then
    """
    modified = get_modified_configuration(obj)
    annotations = dict(obj.metadata.annotations or {})
    annotations[LAST_APPLIED_CONFIG_ANNOTATION] = modified.decode("utf-8")
    metadata = obj.metadata.model_copy(update={"annotations": annotations})
    logger.debug(f"Set {LAST_APPLIED_CONFIG_ANNOTATION} on {obj.kind} {obj.name}")
    return obj.model_copy(update={"metadata": metadata})


def get_original_configuration(obj: APIObject) -> Optional[bytes]:
    """Stored last-applied configuration, or None if obj has none."""
    annotations = obj.metadata.annotations or {}
    original = annotations.get(LAST_APPLIED_CONFIG_ANNOTATION)
    if original is None:
        return None
    return original.encode("utf-8")
