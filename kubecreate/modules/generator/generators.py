"""
Object generators.

A generator declares its parameter schema and turns a validated parameter
map into exactly one typed API object. Generators are pure: no I/O, no
randomness, identical input yields structurally identical output.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping

from ...errors import EncodingError, ParameterTypeError
from ..api.models import DOCKER_CONFIG_KEY, APIObject, Namespace, ObjectMeta, Secret, SecretType
from .params import GeneratorParam, validate_params

logger = logging.getLogger("kubecreate.generator")


class Generator(ABC):
    """Converts a named, schema-declared parameter set into one API object."""

    @abstractmethod
    def param_names(self) -> List[GeneratorParam]:
        """Declared input schema."""

    @abstractmethod
    def generate(self, params: Mapping[str, Any]) -> APIObject:
        """
        Generate an object from a parameter map.

        Raises:
            ValidationError: A required parameter is missing
            ParameterTypeError: A declared parameter is not a string
            EncodingError: Object payload could not be serialized
        """

    def string_params(self, params: Mapping[str, Any]) -> Dict[str, str]:
        """
        Validate params and narrow every declared one to a string.

        Undeclared keys (such as positional "args") are ignored rather than
        type-checked.
        """
        specs = self.param_names()
        validate_params(specs, params)

        result: Dict[str, str] = {}
        for spec in specs:
            if spec.name not in params:
                continue
            value = params[spec.name]
            if not isinstance(value, str):
                raise ParameterTypeError(spec.name, value)
            result[spec.name] = value
        return result


# Namespace


@dataclass(frozen=True)
class NamespaceConfig:
    name: str


class NamespaceGeneratorV1(Generator):
    """Generates a Namespace from a single required name."""

    def param_names(self) -> List[GeneratorParam]:
        return [GeneratorParam("name", True)]

    def generate(self, params: Mapping[str, Any]) -> Namespace:
        values = self.string_params(params)
        return self.build(NamespaceConfig(name=values["name"]))

    def build(self, config: NamespaceConfig) -> Namespace:
        return Namespace(metadata=ObjectMeta(name=config.name))


# Docker registry secret


@dataclass(frozen=True)
class DockerConfigEntry:
    """Credentials for one registry; field order is the wire order."""

    username: str
    password: str
    email: str


@dataclass(frozen=True)
class DockerRegistrySecretConfig:
    name: str
    username: str
    password: str
    email: str
    server: str


# Escaped in string values to match the API server's JSON encoder
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def encode_dockercfg(server: str, entry: DockerConfigEntry) -> bytes:
    """
    Encode a single-registry docker config as compact UTF-8 JSON.

    <, >, & and U+2028/U+2029 are written as \\u escapes.

    Raises:
        EncodingError: If the entry cannot be serialized
    """
    try:
        payload = json.dumps({server: asdict(entry)}, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"failed to encode docker config for {server!r}: {e}") from e
    for char, escaped in _HTML_ESCAPES.items():
        payload = payload.replace(char, escaped)
    return payload.encode("utf-8")


def parse_dockercfg(content: bytes) -> Dict[str, DockerConfigEntry]:
    """
    Decode a docker config payload back into per-registry entries.

    Raises:
        EncodingError: If the payload is not a JSON object of entries
    """
    try:
        raw = json.loads(content.decode("utf-8"))
        return {
            server: DockerConfigEntry(
                username=entry.get("username", ""),
                password=entry.get("password", ""),
                email=entry.get("email", ""),
            )
            for server, entry in raw.items()
        }
    except (UnicodeDecodeError, ValueError, AttributeError) as e:
        raise EncodingError(f"invalid docker config payload: {e}") from e


class SecretForDockerRegistryGeneratorV1(Generator):
    """Generates a dockercfg Secret for a single registry."""

    def param_names(self) -> List[GeneratorParam]:
        return [
            GeneratorParam("name", True),
            GeneratorParam("docker-username", True),
            GeneratorParam("docker-email", True),
            GeneratorParam("docker-password", True),
            GeneratorParam("docker-server", True),
        ]

    def generate(self, params: Mapping[str, Any]) -> Secret:
        values = self.string_params(params)
        config = DockerRegistrySecretConfig(
            name=values["name"],
            username=values["docker-username"],
            password=values["docker-password"],
            email=values["docker-email"],
            server=values["docker-server"],
        )
        return self.build(config)

    def build(self, config: DockerRegistrySecretConfig) -> Secret:
        entry = DockerConfigEntry(
            username=config.username,
            password=config.password,
            email=config.email,
        )
        content = encode_dockercfg(config.server, entry)
        logger.debug(f"Generated dockercfg secret {config.name} for server {config.server}")
        return Secret(
            metadata=ObjectMeta(name=config.name),
            type=SecretType.DOCKERCFG.value,
            data={DOCKER_CONFIG_KEY: content},
        )
