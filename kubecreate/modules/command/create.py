"""
Create command orchestration.

One invocation runs strictly in order:
resolve generator -> assemble params -> validate -> generate -> map ->
(dry-run gate) -> annotate -> submit -> report.
A failure at any step stops the invocation and surfaces the original error.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Protocol, Sequence

from ...errors import KubeCreateError, UsageError
from ..api.models import APIObject
from ..apply.annotation import update_apply_annotation
from ..client.rest import RESTClient
from ..generator.generators import Generator
from ..generator.params import ParameterMap, make_params, validate_params
from ..generator.registry import (
    NAMESPACE_V1_GENERATOR_NAME,
    SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME,
    GeneratorRegistry,
)
from .mapper import ResourceMapping, RESTMapper

logger = logging.getLogger("kubecreate.command")

ParamVisitor = Callable[[Mapping[str, Any], ParameterMap], ParameterMap]
Annotator = Callable[[APIObject], APIObject]


class Printer(Protocol):
    """Reports the outcome of a command to the user."""

    def print_object(self, obj: APIObject, mapping: ResourceMapping, output_format: str) -> None:
        ...

    def print_success(
        self,
        mapping: ResourceMapping,
        dry_run: bool,
        resource: str,
        name: str,
        verb: str,
    ) -> None:
        ...


def string_slice_visitor(names: Sequence[str]) -> ParamVisitor:
    """
    Build a visitor turning the named flags into lists of strings.

    Used for parameters that may be given more than once. A plain string
    flag is split on commas.
    """

    def visit(flags: Mapping[str, Any], params: ParameterMap) -> ParameterMap:
        updated = dict(params)
        for name in names:
            value = flags.get(name)
            if value is None:
                updated[name] = []
            elif isinstance(value, str):
                updated[name] = [item for item in value.split(",") if item]
            else:
                updated[name] = [str(item) for item in value]
        return updated

    return visit


@dataclass
class CreateOptions:
    """Inputs of one create invocation."""

    args: Sequence[str]
    flags: Mapping[str, Any] = field(default_factory=dict)
    default_generator: str = ""
    generator: str = ""
    dry_run: bool = False
    namespace: str = "default"
    output: str = ""
    visitors: Sequence[ParamVisitor] = ()


@dataclass
class CreateResult:
    object: APIObject
    mapping: ResourceMapping
    dry_run: bool


class CreateCommand:
    """
    Generates an object from command input and submits it.

    Holds only its collaborators; every run() works on its own parameter
    map and object.
    """

    def __init__(
        self,
        registry: GeneratorRegistry,
        mapper: RESTMapper,
        rest: RESTClient,
        printer: Printer,
        annotator: Annotator = update_apply_annotation,
    ):
        self.registry = registry
        self.mapper = mapper
        self.rest = rest
        self.printer = printer
        self.annotator = annotator

    def run(self, options: CreateOptions) -> CreateResult:
        """
        Run one create invocation.

        Raises:
            UsageError: No NAME argument
            NotFoundError: Unknown generator or kind
            ValidationError, ParameterTypeError: Bad parameters
            EncodingError: Object or annotation serialization failed
            TransportError: The create request failed
        """
        try:
            return self._run(options)
        except KubeCreateError as e:
            logger.debug(f"create failed: {type(e).__name__}: {e}")
            raise

    def _run(self, options: CreateOptions) -> CreateResult:
        if not options.args:
            raise UsageError("NAME is required")

        generator_name = options.generator or options.default_generator
        generator = self.registry.get(generator_name)

        params = self.assemble_params(generator, options)
        validate_params(generator.param_names(), params)

        obj = generator.generate(params)
        mapping = self.mapper.mapping_for(obj)

        if options.dry_run:
            logger.info(f"Dry run: not submitting {mapping.resource}/{obj.name}")
        else:
            obj = self.annotator(obj)
            client = mapping.client_for(self.rest, options.namespace)
            obj = client.create(obj)
            logger.info(f"Created {mapping.resource}/{obj.name}")

        if options.output:
            self.printer.print_object(obj, mapping, options.output)
        else:
            self.printer.print_success(mapping, options.dry_run, mapping.kind.lower(), options.args[0], "created")

        return CreateResult(object=obj, mapping=mapping, dry_run=options.dry_run)

    def assemble_params(self, generator: Generator, options: CreateOptions) -> ParameterMap:
        """Build the parameter map from flags, positional args and visitors."""
        params = make_params(options.flags, generator.param_names())
        params["name"] = options.args[0]
        if len(options.args) > 1:
            params["args"] = list(options.args[1:])
        for visitor in options.visitors:
            params = visitor(options.flags, params)
        return params


def create_namespace(command: CreateCommand, options: CreateOptions) -> CreateResult:
    """Create a namespace with the specified name."""
    return command.run(replace(options, default_generator=NAMESPACE_V1_GENERATOR_NAME))


def create_secret_docker_registry(command: CreateCommand, options: CreateOptions) -> CreateResult:
    """Create a dockercfg secret for use with a Docker registry."""
    return command.run(replace(options, default_generator=SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME))


__all__ = [
    "CreateCommand",
    "CreateOptions",
    "CreateResult",
    "ParamVisitor",
    "Printer",
    "create_namespace",
    "create_secret_docker_registry",
    "string_slice_visitor",
]
