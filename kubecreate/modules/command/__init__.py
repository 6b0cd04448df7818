"""
Command Module - Black Box Interface

Purpose: Orchestrate generate-and-submit for create commands
Interface: CreateCommand.run(), create_namespace(), create_secret_docker_registry(),
           RESTMapper, string_slice_visitor()
Hidden: Parameter assembly order, dry-run gating, annotation step

The command module only orchestrates - generation, submission and
printing are delegated to their modules.
"""

from .create import (
    CreateCommand,
    CreateOptions,
    CreateResult,
    ParamVisitor,
    Printer,
    create_namespace,
    create_secret_docker_registry,
    string_slice_visitor,
)
from .mapper import RESTMapper, ResourceMapping, default_mapper

__all__ = [
    "CreateCommand",
    "CreateOptions",
    "CreateResult",
    "ParamVisitor",
    "Printer",
    "RESTMapper",
    "ResourceMapping",
    "create_namespace",
    "create_secret_docker_registry",
    "default_mapper",
    "string_slice_visitor",
]
