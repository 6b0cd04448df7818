"""Name -> generator lookup table."""

import logging
from typing import Dict, List, Optional, Tuple

from ...errors import NotFoundError
from .generators import Generator, NamespaceGeneratorV1, SecretForDockerRegistryGeneratorV1

logger = logging.getLogger("kubecreate.generator")

NAMESPACE_V1_GENERATOR_NAME = "namespace/v1"
SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME = "secret-for-docker-registry/v1"


class GeneratorRegistry:
    """
    Explicit table of generators keyed by name.

    Built once at startup; new resource kinds are added with register()
    without touching the orchestrator.
    """

    def __init__(self, generators: Optional[Dict[str, Generator]] = None):
        self._generators: Dict[str, Generator] = dict(generators or {})

    def register(self, name: str, generator: Generator) -> "GeneratorRegistry":
        """
        Register a generator under a name.

        Returns:
            self for chaining
        """
        if not name:
            raise ValueError("generator name must not be empty")
        if name in self._generators:
            logger.warning(f"Replacing generator registered as {name}")
        self._generators[name] = generator
        return self

    def resolve(self, name: str) -> Tuple[Optional[Generator], bool]:
        """Look up a generator; returns (generator, found)."""
        generator = self._generators.get(name)
        return generator, generator is not None

    def get(self, name: str) -> Generator:
        """
        Look up a generator by name.

        Raises:
            NotFoundError: If no generator has that name
        """
        generator, found = self.resolve(name)
        if not found:
            raise NotFoundError(f"Generator: {name} not found.")
        return generator

    def names(self) -> List[str]:
        return sorted(self._generators)

    def __contains__(self, name: str) -> bool:
        return name in self._generators


def default_registry() -> GeneratorRegistry:
    """Registry holding every built-in generator."""
    return GeneratorRegistry(
        {
            NAMESPACE_V1_GENERATOR_NAME: NamespaceGeneratorV1(),
            SECRET_FOR_DOCKER_REGISTRY_V1_GENERATOR_NAME: SecretForDockerRegistryGeneratorV1(),
        }
    )
