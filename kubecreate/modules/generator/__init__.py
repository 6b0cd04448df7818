"""
Generator Module - Black Box Interface

Purpose: Turn untyped command-line parameters into typed API objects
Interface: GeneratorRegistry.get(), Generator.param_names(), Generator.generate(),
           validate_params(), make_params()
Hidden: Per-generator typed configs, docker config encoding

New resource kinds are added by registering another Generator.
"""

from .generators import (
    DockerConfigEntry,
    DockerRegistrySecretConfig,
    Generator,
    NamespaceConfig,
    NamespaceGeneratorV1,
    SecretForDockerRegistryGeneratorV1,
    encode_dockercfg,
    parse_dockercfg,
)
from .params import GeneratorParam, ParameterMap, make_params, validate_params
from .registry import (
    NAMESPACE_V1_GENERATOR_NAME,
    SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME,
    GeneratorRegistry,
    default_registry,
)

__all__ = [
    "DockerConfigEntry",
    "DockerRegistrySecretConfig",
    "Generator",
    "GeneratorParam",
    "GeneratorRegistry",
    "NAMESPACE_V1_GENERATOR_NAME",
    "NamespaceConfig",
    "NamespaceGeneratorV1",
    "ParameterMap",
    "SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME",
    "SecretForDockerRegistryGeneratorV1",
    "default_registry",
    "encode_dockercfg",
    "make_params",
    "parse_dockercfg",
    "validate_params",
]
