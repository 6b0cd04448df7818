"""
Apply Module - Black Box Interface

Purpose: Record an object's configuration as metadata before submission
Interface: update_apply_annotation(), get_original_configuration()
Hidden: Serialization format of the annotation
"""

from .annotation import get_modified_configuration, get_original_configuration, update_apply_annotation

__all__ = ["get_modified_configuration", "get_original_configuration", "update_apply_annotation"]
